"""
Board implementation for Othello.
"""
import numpy as np

from .errors import IllegalMoveError, InvalidMarkError, OutOfBoundsError
from .mark import Mark


# (row step, col step): orthogonal first, then diagonal
DIRECTIONS = (
    (-1, 0),   # Up
    (1, 0),    # Down
    (0, -1),   # Left
    (0, 1),    # Right
    (-1, -1),  # Up-left
    (-1, 1),   # Up-right
    (1, -1),   # Down-left
    (1, 1),    # Down-right
)


def _require_player_mark(mark):
    """
    Coerce a mark argument to a player Mark.

    Plain integers 1 and -1 are accepted as BLACK and WHITE.

    Raises:
        InvalidMarkError: If mark is EMPTY or not a mark value at all
    """
    if isinstance(mark, bool) or not isinstance(mark, (int, np.integer)):
        raise InvalidMarkError(mark)
    try:
        mark = Mark(int(mark))
    except ValueError:
        raise InvalidMarkError(mark) from None
    if not mark.is_player:
        raise InvalidMarkError(mark)
    return mark


class Board:
    """
    Represents an 8x8 Othello board.

    Board state representation (see Mark):
    - 0: empty cell
    - 1: black piece
    - -1: white piece

    The grid is owned by the board and only changed through place_mark.
    Callers wanting to inspect it get a copy from snapshot().
    """

    SIZE = 8
    START_POSITION = (
        (3, 3, Mark.WHITE),
        (3, 4, Mark.BLACK),
        (4, 3, Mark.BLACK),
        (4, 4, Mark.WHITE),
    )

    def __init__(self):
        """Initialize a board in the standard starting position."""
        self._state = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)
        self.reset()

    def reset(self):
        """Clear the board and put back the four centre pieces."""
        self._state.fill(Mark.EMPTY)
        for row, col, mark in self.START_POSITION:
            self._state[row, col] = mark

    @staticmethod
    def in_bounds(row, col):
        """
        Check whether a coordinate lies on the board.

        Args:
            row (int): Row position
            col (int): Column position

        Returns:
            bool: True if 0 <= row < 8 and 0 <= col < 8
        """
        return 0 <= row < Board.SIZE and 0 <= col < Board.SIZE

    def _check_bounds(self, row, col):
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col)

    def get_mark_at(self, row, col):
        """
        Get the mark at a position.

        Args:
            row (int): Row position (0-7)
            col (int): Column position (0-7)

        Returns:
            Mark: Content of the cell

        Raises:
            OutOfBoundsError: If the position is off the board
        """
        self._check_bounds(row, col)
        return Mark(int(self._state[row, col]))

    def _scan_direction(self, row, col, mark, dr, dc):
        """
        Collect the opposing pieces captured along one ray.

        Walks outward from (row, col) one step at a time. The run of opposing
        pieces only counts if it is closed by one of the player's own pieces;
        hitting an empty cell or the edge of the board discards it.

        Args:
            row (int): Row of the placed piece
            col (int): Column of the placed piece
            mark (Mark): Player placing the piece
            dr (int): Row direction (-1, 0, 1)
            dc (int): Column direction (-1, 0, 1)

        Returns:
            list: (row, col) tuples captured in this direction, possibly empty
        """
        run = []
        r, c = row + dr, col + dc
        while self.in_bounds(r, c):
            cell = self._state[r, c]
            if cell == Mark.EMPTY:
                return []
            if cell == mark:
                return run
            run.append((r, c))
            r, c = r + dr, c + dc

        # Ran off the edge without closing the run
        return []

    def _captures(self, row, col, mark):
        captured = []
        for dr, dc in DIRECTIONS:
            captured.extend(self._scan_direction(row, col, mark, dr, dc))
        return captured

    def get_captured_positions(self, row, col, mark):
        """
        Get the pieces a placement would flip, without placing it.

        Args:
            row (int): Row position (0-7)
            col (int): Column position (0-7)
            mark (Mark): Player to place

        Returns:
            list: (row, col) tuples that would be flipped. Empty if the cell
                is occupied or the move captures nothing.

        Raises:
            OutOfBoundsError: If the position is off the board
            InvalidMarkError: If mark is not BLACK or WHITE
        """
        self._check_bounds(row, col)
        mark = _require_player_mark(mark)
        if self._state[row, col] != Mark.EMPTY:
            return []
        return self._captures(row, col, mark)

    def place_mark(self, row, col, mark):
        """
        Place a piece and flip everything it captures.

        Nothing is written unless every check passes, so a failed call
        leaves the board exactly as it was.

        Args:
            row (int): Row position (0-7)
            col (int): Column position (0-7)
            mark (Mark): Player placing the piece (BLACK or WHITE)

        Returns:
            list: (row, col) tuples of the flipped pieces

        Raises:
            OutOfBoundsError: If the position is off the board
            InvalidMarkError: If mark is not BLACK or WHITE
            IllegalMoveError: If the cell is occupied or nothing is captured
        """
        self._check_bounds(row, col)
        mark = _require_player_mark(mark)

        occupant = Mark(int(self._state[row, col]))
        if occupant is not Mark.EMPTY:
            raise IllegalMoveError(row, col, occupant)

        captured = self._captures(row, col, mark)
        if not captured:
            raise IllegalMoveError(row, col)

        self._state[row, col] = mark
        for r, c in captured:
            self._state[r, c] = -self._state[r, c]
        return captured

    def get_legal_moves(self, mark):
        """
        Get all legal move positions for a player.

        Args:
            mark (Mark): Player to move (BLACK or WHITE)

        Returns:
            list: (row, col) tuples in row-major order

        Raises:
            InvalidMarkError: If mark is not BLACK or WHITE
        """
        mark = _require_player_mark(mark)
        legal_moves = []
        for row in range(self.SIZE):
            for col in range(self.SIZE):
                if self._state[row, col] != Mark.EMPTY:
                    continue
                if self._captures(row, col, mark):
                    legal_moves.append((row, col))
        return legal_moves

    def snapshot(self):
        """
        Get a copy of the grid.

        Returns:
            np.ndarray: Shape (8, 8), dtype int8, independent of the board
        """
        return self._state.copy()

    def render_text(self):
        """
        Render the board as text, one line per row.

        Returns:
            str: 8 lines of "[B] ", "[W] " or "[ ] " cells
        """
        lines = []
        for row in range(self.SIZE):
            cells = (f"[{Mark(int(v)).symbol}] " for v in self._state[row])
            lines.append("".join(cells) + "\n")
        return "".join(lines)

    def __str__(self):
        return self.render_text()
