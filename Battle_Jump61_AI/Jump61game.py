"""Game loop and turn management for jump61."""

try:
    from Board import Board, NEUTRAL, RED, BLUE, opposite, side_name
    from engine import referee
    from utils import timer
except ImportError:
    from Battle_Jump61_AI.Board import Board, NEUTRAL, RED, BLUE, opposite, side_name
    from Battle_Jump61_AI.engine import referee
    from Battle_Jump61_AI.utils import timer


class Jump61game:
    def __init__(self, board_size, move_timeout, red_player, blue_player, logger=print, renderer=None, max_moves=None):
        self.board = Board(size=board_size)
        self.move_timeout = move_timeout
        self.players = {RED: red_player, BLUE: blue_player}
        self.logger = logger
        self.move_index = 0
        self.max_moves = max_moves
        if renderer is not None:
            self.board.set_notifier(renderer)

    def play(self):
        """Run a single game. Returns RED or BLUE for the winner, NEUTRAL if cut off."""
        winner = self.board.get_winner()
        while winner is None:
            if self.max_moves is not None and self.move_index >= self.max_moves:
                self.logger(f"Result: stopped after {self.move_index} moves")
                return NEUTRAL

            side = self.board.whose_move()
            player = self.players[side]
            deadline = timer.deadline_after(self.move_timeout)

            try:
                # Players only ever see a snapshot of the position.
                move = player.next_move(self.board.readonly_board(), deadline=deadline)
                referee.check_move(move, self.board, side, deadline)
                self.board.place_at(side, *move)
            except (TimeoutError, ValueError, IndexError) as exc:
                self.logger(f"Disqualification: {side_name(side)} - {exc}")
                winner = opposite(side)
                break

            self.logger(f"Move {self.move_index + 1}: {side_name(side)} {move[0]} {move[1]}")
            self.move_index += 1
            winner = self.board.get_winner()

        self.logger(f"Winner: {side_name(winner)}")
        return winner
