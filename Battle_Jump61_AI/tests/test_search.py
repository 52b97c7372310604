"""Search-level tests: alpha-beta agrees with plain minimax, stats, and logging."""

import logging
import random

import pytest

from Battle_Jump61_AI.Board import RED, Board
from Battle_Jump61_AI.ai import heuristic, search_minimax


def plain_minimax(board, depth):
    """Exhaustive minimax without pruning."""
    if depth == 0 or board.get_winner() is not None:
        return heuristic.static_eval(board)
    side = board.whose_move()
    values = []
    for n in range(board.size * board.size):
        if board.is_legal(side, n):
            board.place(side, n)
            values.append(plain_minimax(board, depth - 1))
            board.undo()
    return max(values) if side == RED else min(values)


def positions(size, seed, limit=12):
    rng = random.Random(seed)
    b = Board(size=size)
    while b.get_winner() is None and limit > 0:
        yield b.clone()
        side = b.whose_move()
        b.place(side, rng.choice([n for n in range(size * size) if b.is_legal(side, n)]))
        limit -= 1


@pytest.mark.parametrize("depth", [1, 2, 3])
@pytest.mark.parametrize("seed", [0, 1])
def test_alpha_beta_matches_plain_minimax(depth, seed):
    for b in positions(3, seed):
        side = b.whose_move()
        searcher = search_minimax.MinimaxSearcher(side, depth=depth)
        mv = searcher.choose_move(b)

        assert b.is_legal(side, mv)
        assert searcher.root_value == plain_minimax(b, depth)
        b.place(side, mv)
        assert plain_minimax(b, depth - 1) == searcher.root_value


def test_search_leaves_board_and_history_untouched():
    b = Board(size=4)
    b.place(RED, 5)
    before = b.clone()
    search_minimax.choose_move(b, b.whose_move(), depth=2)
    assert b == before
    b.undo()
    assert b == Board(size=4)


def test_stats_recorded_per_search():
    stats = []
    b = Board(size=3)
    search_minimax.choose_move(b, RED, depth=2, stats=stats)
    assert len(stats) == 1
    entry = stats[0]
    assert entry["side"] == RED
    assert entry["depth"] == 2
    assert entry["nodes"] > 0
    assert entry["time"] > 0


def test_search_logs_chosen_move(caplog):
    b = Board(size=2)
    with caplog.at_level(logging.DEBUG, logger=search_minimax.LOGGER.name):
        mv = search_minimax.choose_move(b, RED, depth=1)
    assert b.move_string(mv) in caplog.text
