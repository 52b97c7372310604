"""Board state, cascade (jump) resolution, win detection, and undo history."""

from collections import deque
from dataclasses import dataclass

# Sides: Red moves first. Neutral squares belong to nobody.
RED = 1
BLUE = -1
NEUTRAL = 0

_SIDE_NAMES = {RED: "Red", BLUE: "Blue", NEUTRAL: "Neutral"}
_SIDE_LETTERS = {RED: "r", BLUE: "b", NEUTRAL: "-"}


def opposite(side):
    """Return the other player; NEUTRAL stays NEUTRAL."""
    return -side


def side_name(side):
    return _SIDE_NAMES[side]


class GameError(Exception):
    """Base class for errors reported by the board."""


class OutOfRangeError(GameError, IndexError):
    """A row, column, or square number outside the board."""


class IllegalMoveError(GameError, ValueError):
    """A move that is not legal in the current position."""


@dataclass(frozen=True)
class Cell:
    owner: int
    count: int


Cell.INITIAL = Cell(NEUTRAL, 1)


def _nop(board):
    pass


class Board:
    """An N x N board. Squares are addressed by (row, col), both 1-indexed,
    or by square number in row-major order starting at 0.

    The side to move is derived from the total number of units on the
    board, so undo can never desynchronize turn and position.
    """

    def __init__(self, size=6):
        self.size = size
        self._cells = [Cell.INITIAL] * (size * size)
        self._history = []
        self._current = 0
        self._notifier = _nop

    def clone(self):
        """Copy of the contents with a clear history and a no-op notifier."""
        new_board = Board(self.size)
        new_board._cells = self._cells[:]
        return new_board

    def readonly_board(self):
        return ConstantBoard(self)

    # --- Reset -----------------------------------------------------------

    def clear(self, size):
        """Reinitialize to a fresh SIZE x SIZE board and drop the undo history."""
        self.size = size
        self._cells = [Cell.INITIAL] * (size * size)
        self._history = []
        self._current = 0
        self._announce()

    def copy_from(self, board):
        """Take the size and contents of BOARD and drop the undo history."""
        self.size = board.size
        self._cells = [board.cell(n) for n in range(board.size * board.size)]
        self._history = []
        self._current = 0
        self._announce()

    # --- Addressing ------------------------------------------------------

    def exists(self, r, c):
        return 1 <= r <= self.size and 1 <= c <= self.size

    def exists_index(self, n):
        return 0 <= n < self.size * self.size

    def row(self, n):
        return n // self.size + 1

    def col(self, n):
        return n % self.size + 1

    def sq_num(self, r, c):
        return (c - 1) + (r - 1) * self.size

    def move_string(self, n):
        """Return move N in the "<row> <col>" form used by controllers."""
        return f"{self.row(n)} {self.col(n)}"

    def _check_index(self, n):
        if not self.exists_index(n):
            raise OutOfRangeError(f"square {n} is off the board")

    def _check_coords(self, r, c):
        if not self.exists(r, c):
            raise OutOfRangeError(f"square ({r}, {c}) is off the board")

    # --- Queries ---------------------------------------------------------

    def cell(self, n):
        self._check_index(n)
        return self._cells[n]

    def cell_at(self, r, c):
        self._check_coords(r, c)
        return self._cells[self.sq_num(r, c)]

    def num_pieces(self):
        """Total number of units on the board."""
        return sum(cell.count for cell in self._cells)

    def num_of_side(self, side):
        """Number of squares owned by SIDE."""
        return sum(1 for cell in self._cells if cell.owner == side)

    def whose_move(self):
        """Side to move. If the game is won this is the loser."""
        return RED if (self.num_pieces() + self.size) % 2 == 0 else BLUE

    def get_winner(self):
        """Return the side owning every square, or None."""
        owner = self._cells[0].owner
        if owner != NEUTRAL and all(cell.owner == owner for cell in self._cells):
            return owner
        return None

    def can_move(self, side):
        return self.get_winner() is None and side == self.whose_move()

    def is_legal(self, side, n):
        """True iff SIDE may add a unit to square N right now."""
        cell = self.cell(n)
        return self.can_move(side) and cell.owner != opposite(side)

    def is_legal_at(self, side, r, c):
        self._check_coords(r, c)
        return self.is_legal(side, self.sq_num(r, c))

    def degree_at(self, r, c):
        """Number of neighbors of the square at (r, c): 2, 3 or 4."""
        n = 0
        if r > 1:
            n += 1
        if c > 1:
            n += 1
        if r < self.size:
            n += 1
        if c < self.size:
            n += 1
        return n

    def degree(self, n):
        return self.degree_at(self.row(n), self.col(n))

    def neighbor_list(self, n):
        """Neighbors of square N in the order up, down, left, right."""
        r, c = self.row(n), self.col(n)
        neighbors = []
        if r != 1:
            neighbors.append(n - self.size)
        if r != self.size:
            neighbors.append(n + self.size)
        if c != 1:
            neighbors.append(n - 1)
        if c != self.size:
            neighbors.append(n + 1)
        return neighbors

    # --- Mutation --------------------------------------------------------

    def place(self, side, n):
        """Add a unit of SIDE to square N and resolve any cascade."""
        if not self.is_legal(side, n):
            raise IllegalMoveError(f"{side_name(side)} may not play {self.move_string(n)}")
        self._mark_undo()
        cell = self._cells[n]
        self._cells[n] = Cell(side, cell.count + 1)
        if self._cells[n].count > self.degree(n):
            self._jump(n)
        self._announce()

    def place_at(self, side, r, c):
        self._check_coords(r, c)
        self.place(side, self.sq_num(r, c))

    def set(self, n, num, side):
        """Set square N to NUM units of SIDE (neutral when NUM is 0)."""
        self._check_index(n)
        if num < 0:
            raise ValueError("unit count must be non-negative")
        self._cells[n] = Cell(side if num > 0 else NEUTRAL, num)
        self._announce()

    def set_at(self, r, c, num, side):
        self._check_coords(r, c)
        self.set(self.sq_num(r, c), num, side)

    def undo(self):
        """Restore the contents from before the last place; no-op if none."""
        if self._current > 0:
            self._current -= 1
            self._cells = list(self._history[self._current])
            self._announce()

    def _mark_undo(self):
        # Snapshots past the cursor were undone; a new move discards them.
        del self._history[self._current:]
        self._history.append(tuple(self._cells))
        self._current += 1

    def _jump(self, start):
        """Resolve the cascade seeded at the overfull square START."""
        work_queue = deque()
        self._explode(start, work_queue)
        while work_queue and self.get_winner() is None:
            n = work_queue.popleft()
            if self._cells[n].count > self.degree(n):
                self._explode(n, work_queue)

    def _explode(self, n, work_queue):
        """Move one unit from square N to each neighbor, capturing it.

        N keeps whatever it held beyond its degree (1 unit unless it was fed
        again while queued), so the unit total never changes.
        """
        cell = self._cells[n]
        neighbors = self.neighbor_list(n)
        self._cells[n] = Cell(cell.owner, cell.count - len(neighbors))
        for neighbor in neighbors:
            self._cells[neighbor] = Cell(cell.owner, self._cells[neighbor].count + 1)
            work_queue.append(neighbor)
        if self._cells[n].count > len(neighbors):
            work_queue.append(n)

    # --- Notification ----------------------------------------------------

    def set_notifier(self, notify):
        """Call NOTIFY(board) now and after every change to this board."""
        self._notifier = notify
        self._announce()

    def _announce(self):
        self._notifier(self)

    # --- Rendering -------------------------------------------------------

    def __str__(self):
        lines = ["==="]
        for r in range(1, self.size + 1):
            tokens = []
            for c in range(1, self.size + 1):
                cell = self.cell_at(r, c)
                tokens.append(f"{cell.count}{_SIDE_LETTERS[cell.owner]} ")
            lines.append("    " + "".join(tokens))
        lines.append("===")
        winner = self.get_winner()
        if winner is not None:
            lines.append(f"{side_name(winner)} wins.")
        return "\n".join(lines)

    def to_display_string(self):
        """Rows and columns numbered, without the dump delimiters."""
        out = []
        for r in range(1, self.size + 1):
            row = " ".join(
                f"{cell.count}{_SIDE_LETTERS[cell.owner]}"
                for cell in (self.cell_at(r, c) for c in range(1, self.size + 1))
            )
            out.append(f"{r:2d} {row}")
        out.append("  " + "".join(f"{c:3d}" for c in range(1, self.size + 1)))
        return "\n".join(out)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self._cells == other._cells

    def __hash__(self):
        return self.num_pieces()


class ConstantBoard(Board):
    """Read-only snapshot of a board. Queries work; mutators raise GameError."""

    def __init__(self, board):
        super().__init__(board.size)
        self._cells = [board.cell(n) for n in range(board.size * board.size)]

    def _read_only(self, *args, **kwargs):
        raise GameError("board is read-only")

    place = place_at = set = set_at = clear = copy_from = set_notifier = _read_only
