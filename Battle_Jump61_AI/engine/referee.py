"""Move validation and time control."""

try:
    from Board import IllegalMoveError, OutOfRangeError, side_name
    from utils import timer
except ImportError:
    from Battle_Jump61_AI.Board import IllegalMoveError, OutOfRangeError, side_name
    from Battle_Jump61_AI.utils import timer


def check_move(move, board, side, deadline=None):
    """
    Validate a (row, col) move against time, bounds, and legality.
    Raises TimeoutError, OutOfRangeError (an IndexError) or IllegalMoveError
    (a ValueError) on invalid moves.
    """
    if timer.expired(deadline):
        raise TimeoutError("Move exceeded allotted time")

    r, c = move
    if not board.exists(r, c):
        raise OutOfRangeError(f"Move {r} {c} out of bounds")
    if board.get_winner() is not None:
        raise IllegalMoveError("Game is already over")
    if side != board.whose_move():
        raise IllegalMoveError(f"Not {side_name(side)}'s turn")
    if not board.is_legal_at(side, r, c):
        raise IllegalMoveError(f"Square {r} {c} belongs to the opponent")

    return True
