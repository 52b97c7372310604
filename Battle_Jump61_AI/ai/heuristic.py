"""Static evaluation of jump61 positions (material difference, win dominates)."""

try:
    from Board import RED, BLUE
except ImportError:
    from Battle_Jump61_AI.Board import RED, BLUE

# Larger than any material difference on a 10x10 board.
WINNING_VALUE = 10000


def static_eval(board, winning_value=WINNING_VALUE):
    """
    Heuristic value of a position. Positive favors Red, negative favors Blue.
    A won position scores +/- winning_value; otherwise squares owned by Red
    minus squares owned by Blue.
    """
    winner = board.get_winner()
    if winner == RED:
        return winning_value
    if winner == BLUE:
        return -winning_value
    return board.num_of_side(RED) - board.num_of_side(BLUE)
