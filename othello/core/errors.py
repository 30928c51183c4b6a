"""
Exceptions raised by the Othello board.
"""


class BoardError(Exception):
    """Base class for every error raised by the board."""


class OutOfBoundsError(BoardError, IndexError):
    """Raised when a coordinate lies outside the 8x8 grid."""

    def __init__(self, row, col):
        self.row = row
        self.col = col
        super().__init__(f"Position out of bounds ({row}, {col})")


class InvalidMarkError(BoardError, ValueError):
    """Raised when a player mark is required but something else was given."""

    def __init__(self, mark):
        self.mark = mark
        super().__init__(f"Invalid mark: {mark!s}. Must be either Black or White.")


class IllegalMoveError(BoardError):
    """
    Raised when a placement breaks the rules of Othello.

    Attributes:
        row (int): Row of the rejected placement
        col (int): Column of the rejected placement
        occupant (Mark or None): Mark already in the cell, or None when the
            cell was empty but the move captured nothing
    """

    def __init__(self, row, col, occupant=None):
        self.row = row
        self.col = col
        self.occupant = occupant
        if occupant is not None:
            message = (f"Cannot place mark at ({row}, {col}) - "
                       f"cell is already occupied ({occupant!s}).")
        else:
            message = f"Invalid move at ({row}, {col}) - does not capture any marks."
        super().__init__(message)
