"""Undo history: exact restoration, no-op on empty history, truncation after undo."""

import random

from Battle_Jump61_AI.Board import BLUE, RED, Board


def test_undo_restores_position_before_cascade():
    b = Board(size=3)
    b.place(RED, 0)
    b.place(BLUE, 8)
    before = b.clone()
    b.place(RED, 0)
    assert b != before
    b.undo()
    assert b == before
    assert b.whose_move() == RED


def test_undo_without_history_is_noop():
    b = Board(size=3)
    b.undo()
    assert b == Board(size=3)


def test_undo_walks_back_to_start():
    b = Board(size=3)
    for side, n in ((RED, 4), (BLUE, 0), (RED, 4), (BLUE, 0)):
        b.place(side, n)
    for _ in range(4):
        b.undo()
    assert b == Board(size=3)
    b.undo()
    assert b == Board(size=3)


def test_place_after_undo_discards_undone_moves():
    b = Board(size=3)
    b.place(RED, 4)
    after_first = b.clone()
    b.place(BLUE, 0)
    b.undo()
    assert b == after_first

    b.place(BLUE, 8)
    b.undo()
    assert b == after_first
    b.undo()
    assert b == Board(size=3)
    b.undo()
    assert b == Board(size=3)


def test_place_undo_round_trip_during_random_games():
    rng = random.Random(7)
    b = Board(size=4)
    while b.get_winner() is None:
        side = b.whose_move()
        legal = [n for n in range(16) if b.is_legal(side, n)]
        for n in legal:
            before = b.clone()
            b.place(side, n)
            b.undo()
            assert b == before
        b.place(side, rng.choice(legal))
