"""
Piece values that a board cell can hold.
"""

from enum import Enum


class Piece(Enum):
    """Contents of a cell. Queens carry no identity beyond their color."""
    EMPTY = 0
    WHITE = 1
    BLACK = 2
    SPEAR = 3

    def opponent(self) -> "Piece":
        """The other side for WHITE/BLACK; EMPTY and SPEAR map to themselves."""
        if self is Piece.WHITE:
            return Piece.BLACK
        if self is Piece.BLACK:
            return Piece.WHITE
        return self

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]

    def __str__(self) -> str:
        return self.glyph


_GLYPHS = {
    Piece.EMPTY: "-",
    Piece.WHITE: "W",
    Piece.BLACK: "B",
    Piece.SPEAR: "S",
}
