"""
Square coordinates for the 10x10 Amazons board.

There is exactly one Square object per cell. Squares are numbered from 0
(a1, lower-left) to 99 (j10, upper-right) with index = row * 10 + col, so
identity comparison (``is``) is valid and cheap. Clients look squares up
with sq(), sq_at() or parse_square(); they never construct them.
"""

import re
from typing import Optional, Tuple

SIZE = 10
NUM_SQUARES = SIZE * SIZE

# Subpattern for one square designation, meant to be embedded in move patterns.
SQ = r"([a-j](?:10|[1-9]))"
SQUARE_PATTERN = re.compile(SQ)

# (dcol, drow) for directions N, NE, E, SE, S, SW, W, NW
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, 1), (1, 1), (1, 0), (1, -1),
    (0, -1), (-1, -1), (-1, 0), (-1, 1),
)
NUM_DIRECTIONS = len(DIRECTIONS)


class NotationError(ValueError):
    """Raised when square or move text does not match the notation grammar."""


def exists(col: int, row: int) -> bool:
    """Check if (col, row) lies on the board."""
    return 0 <= col < SIZE and 0 <= row < SIZE


class Square:
    """An immutable board cell."""

    __slots__ = ("index", "col", "row", "_name", "_rays")

    def __init__(self, index: int):
        if not 0 <= index < NUM_SQUARES:
            raise ValueError(f"Square index out of range: {index}")
        self.index = index
        self.row = index // SIZE
        self.col = index % SIZE
        self._name = f"{chr(ord('a') + self.col)}{self.row + 1}"
        self._rays: Tuple[Tuple["Square", ...], ...] = ()

    def is_queen_move(self, to: "Square") -> bool:
        """True iff self-to lies on one row, column or diagonal and to != self."""
        if to is None or to is self:
            return False
        dc = to.col - self.col
        dr = to.row - self.row
        return dc == 0 or dr == 0 or abs(dc) == abs(dr)

    def direction(self, to: "Square") -> int:
        """
        Return the direction (0..7, N clockwise to NW) of the queen move self-to.

        Raises:
            ValueError: if self-to is not a queen move
        """
        if not self.is_queen_move(to):
            raise ValueError(f"{self}-{to} is not a queen move")
        dc = (to.col > self.col) - (to.col < self.col)
        dr = (to.row > self.row) - (to.row < self.row)
        return DIRECTIONS.index((dc, dr))

    def ray(self, direction: int) -> Tuple["Square", ...]:
        """Squares along direction, nearest first, up to the board edge."""
        return self._rays[direction]

    def step(self, direction: int, steps: int) -> Optional["Square"]:
        """
        Return the square STEPS cells away along DIRECTION.

        Returns self for steps == 0 and None when the square falls off the board.
        """
        if not 0 <= direction < NUM_DIRECTIONS:
            raise ValueError(f"Invalid direction: {direction}")
        if steps < 0:
            raise ValueError(f"Steps must be non-negative, got {steps}")
        if steps == 0:
            return self
        ray = self._rays[direction]
        if steps > len(ray):
            return None
        return ray[steps - 1]

    def __reduce__(self):
        # copy/deepcopy/pickle must hand back the interned instance
        return (sq_at, (self.index,))

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Square({self._name})"


_SQUARES: Tuple[Square, ...] = tuple(Square(i) for i in range(NUM_SQUARES))


def _build_rays() -> None:
    for square in _SQUARES:
        rays = []
        for dc, dr in DIRECTIONS:
            ray = []
            col, row = square.col + dc, square.row + dr
            while exists(col, row):
                ray.append(_SQUARES[row * SIZE + col])
                col += dc
                row += dr
            rays.append(tuple(ray))
        square._rays = tuple(rays)


_build_rays()


def sq(col: int, row: int) -> Optional[Square]:
    """Return the unique square at (col, row), or None if it is off the board."""
    if not exists(col, row):
        return None
    return _SQUARES[row * SIZE + col]


def sq_at(index: int) -> Square:
    """Return the unique square with the given index."""
    if not 0 <= index < NUM_SQUARES:
        raise ValueError(f"Square index out of range: {index}")
    return _SQUARES[index]


def parse_square(text: str) -> Square:
    """
    Parse standard square notation such as 'a4' or 'j10'.

    Raises:
        NotationError: if text is not a square designation
    """
    if not isinstance(text, str):
        raise NotationError(f"Square designation must be a string, got {type(text).__name__}")
    match = SQUARE_PATTERN.fullmatch(text)
    if match is None:
        raise NotationError(f"Invalid square designation: {text!r}")
    col = ord(text[0]) - ord("a")
    row = int(text[1:]) - 1
    return _SQUARES[row * SIZE + col]


def all_squares() -> Tuple[Square, ...]:
    """All squares in increasing index order."""
    return _SQUARES
