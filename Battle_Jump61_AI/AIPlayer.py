"""Computer player backed by the minimax search."""

try:
    from Player import Player
    from ai import search_minimax
except ImportError:
    from Battle_Jump61_AI.Player import Player
    from Battle_Jump61_AI.ai import search_minimax


class AIPlayer(Player):
    def __init__(self, side, depth=search_minimax.DEFAULT_DEPTH):
        super().__init__(side)
        self.depth = depth
        self.stats = []

    def next_move(self, board, deadline=None):
        # The search always completes at this depth, so the deadline is left
        # to the referee.
        n = search_minimax.choose_move(board, self.side, depth=self.depth, stats=self.stats)
        return board.row(n), board.col(n)
