"""Depth-limited minimax with alpha-beta pruning over a private working board."""

import logging
import time

from . import heuristic

try:
    from Board import RED, BLUE, side_name
except ImportError:
    from Battle_Jump61_AI.Board import RED, BLUE, side_name


LOGGER = logging.getLogger(__name__)

INF = 10 ** 9
DEFAULT_DEPTH = 2


class MinimaxSearcher:
    """Encapsulates the state and logic for a minimax search."""

    def __init__(self, side, depth=DEFAULT_DEPTH, winning_value=heuristic.WINNING_VALUE, stats=None):
        if side not in (RED, BLUE):
            raise ValueError(f"side must be RED ({RED}) or BLUE ({BLUE})")
        if depth < 1:
            raise ValueError("search depth must be at least 1")
        self.side = side
        self.depth = depth
        self.winning_value = winning_value
        self.stats_list = stats

        # Internal state
        self.node_counter = 0
        self.start_time = None
        self.root_value = None
        self._found_move = -1

    def choose_move(self, board):
        """
        Return the square number of the best move for self.side on BOARD.
        BOARD itself is never modified; the search mutates a clone in place
        (place, recurse, undo). Assumes the game is not over.
        """
        if board.get_winner() is not None:
            raise ValueError("Game is already over")

        work = board.clone()
        self.node_counter = 0
        self.start_time = time.time()
        self._found_move = -1
        # RED maximizes (sense +1), BLUE minimizes (sense -1).
        sense = 1 if self.side == RED else -1
        self.root_value = self._minimax(work, self.depth, True, sense, -INF, INF)

        if self._found_move < 0:
            raise ValueError(f"No legal moves available for {side_name(self.side)}")

        if self.stats_list is not None:
            self._record_stats()
        LOGGER.debug(
            "%s search depth=%d nodes=%d value=%d move=%s",
            side_name(self.side), self.depth, self.node_counter, self.root_value,
            board.move_string(self._found_move),
        )
        return self._found_move

    def _minimax(self, board, depth, save_move, sense, alpha, beta):
        """
        Return the value of BOARD searched DEPTH plies deep. The move found
        is recorded in _found_move only when SAVE_MOVE (the root call).
        """
        self.node_counter += 1
        if depth == 0 or board.get_winner() is not None:
            return heuristic.static_eval(board, self.winning_value)

        best_move = -1
        if sense == 1:
            best_so_far = -INF
            for n in range(board.size * board.size):
                if not board.is_legal(RED, n):
                    continue
                board.place(RED, n)
                try:
                    value = self._minimax(board, depth - 1, False, -1, alpha, beta)
                finally:
                    board.undo()
                # Ties go to the later square.
                if value >= best_so_far:
                    best_move = n
                    best_so_far = value
                alpha = max(alpha, best_so_far)
                if beta < alpha:
                    break
        else:
            best_so_far = INF
            for n in range(board.size * board.size):
                if not board.is_legal(BLUE, n):
                    continue
                board.place(BLUE, n)
                try:
                    value = self._minimax(board, depth - 1, False, 1, alpha, beta)
                finally:
                    board.undo()
                if value <= best_so_far:
                    best_move = n
                    best_so_far = value
                beta = min(beta, best_so_far)
                if beta < alpha:
                    break

        if save_move:
            self._found_move = best_move
        return best_so_far

    def _record_stats(self):
        total_time = max(time.time() - self.start_time, 1e-9)
        self.stats_list.append({
            "side": self.side,
            "depth": self.depth,
            "nodes": self.node_counter,
            "time": total_time,
            "nps": self.node_counter / total_time,
        })


def choose_move(board, side, depth=DEFAULT_DEPTH, stats=None):
    """
    Public function to start a search. Instantiates and uses MinimaxSearcher.
    """
    searcher = MinimaxSearcher(side=side, depth=depth, stats=stats)
    return searcher.choose_move(board)
