"""
Cell marks for the Othello board.
"""
from enum import IntEnum


class Mark(IntEnum):
    """
    Content of a single board cell.

    Values match the integer encoding stored in the board grid:
    - 0: empty cell
    - 1: black piece
    - -1: white piece
    """

    EMPTY = 0
    BLACK = 1
    WHITE = -1

    @property
    def opposite(self):
        """
        The other player's mark. EMPTY maps to EMPTY.

        Returns:
            Mark: WHITE for BLACK, BLACK for WHITE, EMPTY otherwise
        """
        return Mark(-self.value)

    @property
    def is_player(self):
        """True for BLACK and WHITE."""
        return self is not Mark.EMPTY

    @property
    def symbol(self):
        """Single-character glyph used when rendering the board."""
        return _SYMBOLS[self]

    def __str__(self):
        return self.name.capitalize()


_SYMBOLS = {
    Mark.EMPTY: ' ',
    Mark.BLACK: 'B',
    Mark.WHITE: 'W',
}
