"""Entry point for Battle Jump61 AI matches. Load config, wire players, start Jump61game."""

import yaml
from pathlib import Path

try:
    from Jump61game import Jump61game
    from utils.cli import parse_args
    from utils.logger import configure_logging, log_event
    from AIPlayer import AIPlayer
    from Board import RED, BLUE, side_name
    from Player import HumanPlayer
except ImportError:
    from Battle_Jump61_AI.Jump61game import Jump61game
    from Battle_Jump61_AI.utils.cli import parse_args
    from Battle_Jump61_AI.utils.logger import configure_logging, log_event
    from Battle_Jump61_AI.AIPlayer import AIPlayer
    from Battle_Jump61_AI.Board import RED, BLUE, side_name
    from Battle_Jump61_AI.Player import HumanPlayer


PROJECT_DIR = Path(__file__).resolve().parent
MIN_BOARD_SIZE = 2
MAX_BOARD_SIZE = 10


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `Battle_Jump61_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}


def build_players(mode, depth):
    """Return (red_player, blue_player) for a play mode such as 'human-vs-ai'."""
    factories = {
        "ai": lambda side: AIPlayer(side, depth=depth),
        "human": HumanPlayer,
    }
    try:
        red_kind, blue_kind = mode.split("-vs-")
        return factories[red_kind](RED), factories[blue_kind](BLUE)
    except (ValueError, KeyError) as exc:
        raise ValueError(f"Unsupported mode: {mode}") from exc


def _pick(flag, setting):
    """A command-line flag wins over the settings file, even when it is 0."""
    return setting if flag is None else flag


def render(board):
    print(board.to_display_string())


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.verbose)
    settings = load_settings(args.settings)

    board_size = _pick(args.board_size, settings.get("board_size", 6))
    move_timeout = _pick(args.timeout, settings.get("move_timeout_seconds"))
    depth = _pick(args.depth, settings.get("search_depth", 2))
    mode = _pick(args.mode, settings.get("mode", "human-vs-ai"))

    if not MIN_BOARD_SIZE <= board_size <= MAX_BOARD_SIZE:
        print(f"Board size must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}")
        return None

    red, blue = build_players(mode, depth)
    game = Jump61game(
        board_size=board_size,
        move_timeout=move_timeout,
        red_player=red,
        blue_player=blue,
        logger=log_event,
        renderer=render,
    )
    result = game.play()
    print(f"{side_name(result)} wins.")
    return result


if __name__ == "__main__":
    main()
