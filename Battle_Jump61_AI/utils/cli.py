"""CLI options for selecting players, board size, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Battle Jump61 AI")
    parser.add_argument("--board-size", type=int, help="Board size (2-10)")
    parser.add_argument("--timeout", type=float, help="Seconds per move (default from settings)")
    parser.add_argument("--depth", type=int, help="Search depth for AI")
    parser.add_argument(
        "--mode",
        choices=["ai-vs-ai", "human-vs-ai", "ai-vs-human", "human-vs-human"],
        default=None,
        help="Play mode (who plays red/blue); red moves first",
    )
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--verbose", action="store_true", help="Log search diagnostics")
    return parser.parse_args(argv)
