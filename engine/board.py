"""
Amazons Board implementation with 10x10 grid and game state management.
"""

from contextlib import contextmanager
from enum import Enum
from typing import Iterator, List, Optional

import numpy as np

from .move_generator import Move, has_mobility, iter_legal_moves, iter_reachable
from .pieces import Piece
from .squares import SIZE, Square, all_squares, parse_square, sq

_EMPTY = Piece.EMPTY.value

# Sentinel for a winner cache that must be recomputed from the board.
_UNKNOWN = object()

INITIAL_WHITE = ("a4", "d1", "g1", "j4")
INITIAL_BLACK = ("a7", "d10", "g10", "j7")


class GameState(Enum):
    """Whether the game on a board has been decided."""
    IN_PROGRESS = "in_progress"
    DECIDED = "decided"


class Board:
    """
    Amazons game board.

    The grid is a 10x10 numpy array indexed [row, col] holding Piece values.
    cells is a flat view of the same memory indexed by Square.index.

    The board is shared with the search, which explores by make_move/undo
    rather than copying, so undo must be the exact inverse of make_move.
    """

    SIZE = SIZE

    def __init__(self):
        self.init()

    def init(self) -> None:
        """Clear the board to the initial position."""
        self.grid = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)
        self.cells = self.grid.reshape(-1)
        for name in INITIAL_WHITE:
            self.cells[parse_square(name).index] = Piece.WHITE.value
        for name in INITIAL_BLACK:
            self.cells[parse_square(name).index] = Piece.BLACK.value
        self._turn = Piece.WHITE
        self._winner = None
        self.move_history: List[Move] = []

    @property
    def turn(self) -> Piece:
        """The side to move (WHITE or BLACK)."""
        return self._turn

    @property
    def num_moves(self) -> int:
        """Number of moves applied and not undone."""
        return len(self.move_history)

    @property
    def winner(self) -> Optional[Piece]:
        """The winner in the current position, or None if the game is not finished."""
        if self._winner is _UNKNOWN:
            self._winner = self._turn.opponent() if self.no_moves(self._turn) else None
        return self._winner

    @property
    def state(self) -> GameState:
        return GameState.IN_PROGRESS if self.winner is None else GameState.DECIDED

    def get(self, square: Square) -> Piece:
        """Get the piece on a square."""
        return Piece(int(self.cells[square.index]))

    def get_at(self, col: int, row: int) -> Piece:
        """Get the piece at (col, row), where 0 <= col, row < 10."""
        return Piece(int(self.grid[row, col]))

    def put(self, piece: Piece, square: Square) -> None:
        """Set a square directly, bypassing move bookkeeping."""
        self.cells[square.index] = piece.value
        self._winner = _UNKNOWN

    def put_at(self, piece: Piece, col: int, row: int) -> None:
        """Set (col, row) directly, bypassing move bookkeeping."""
        square = sq(col, row)
        if square is None:
            raise ValueError(f"No square at col={col}, row={row}")
        self.put(piece, square)

    def is_unblocked_move(self, from_sq: Square, to_sq: Square, as_empty: Optional[Square] = None) -> bool:
        """
        Return True iff from_sq-to_sq is an unblocked queen move.

        to_sq and every square strictly between must be empty, except
        as_empty, which is treated as empty wherever it appears. The piece
        on from_sq is ignored.
        """
        if not from_sq.is_queen_move(to_sq):
            return False
        cells = self.cells
        for square in from_sq.ray(from_sq.direction(to_sq)):
            if square is not as_empty and cells[square.index] != _EMPTY:
                return False
            if square is to_sq:
                return True
        return False

    def is_legal(self, from_sq: Square, to_sq: Optional[Square] = None, spear: Optional[Square] = None) -> bool:
        """
        Check legality of a starting square, a queen leg, or a full move.

        is_legal(from): the side to move has a queen on from.
        is_legal(from, to): ... and from-to is unblocked.
        is_legal(from, to, spear): ... and to-spear is unblocked with from vacated.
        """
        if from_sq is None or self.cells[from_sq.index] != self._turn.value:
            return False
        if to_sq is None:
            return spear is None
        if not self.is_unblocked_move(from_sq, to_sq):
            return False
        if spear is None:
            return True
        return self.is_unblocked_move(to_sq, spear, from_sq)

    def is_legal_move(self, move: Move) -> bool:
        """Return True iff move is legal in the current position."""
        return self.is_legal(move.from_sq, move.to_sq, move.spear)

    def make_move(self, move: Move) -> bool:
        """
        Apply a move if it is legal.

        Illegal moves leave the board unchanged. After the move the winner is
        the side that just moved iff the new side to move has no legal move.

        Returns True if the move was applied, False otherwise.
        """
        if not self.is_legal_move(move):
            return False
        cells = self.cells
        cells[move.to_sq.index] = cells[move.from_sq.index]
        cells[move.from_sq.index] = _EMPTY
        cells[move.spear.index] = Piece.SPEAR.value
        self.move_history.append(move)
        mover = self._turn
        self._turn = mover.opponent()
        self._winner = mover if self.no_moves(self._turn) else None
        return True

    def undo(self) -> None:
        """Undo the last move. Has no effect on a board with no history."""
        if not self.move_history:
            return
        move = self.move_history.pop()
        cells = self.cells
        cells[move.spear.index] = _EMPTY
        cells[move.from_sq.index] = cells[move.to_sq.index]
        cells[move.to_sq.index] = _EMPTY
        self._turn = self._turn.opponent()
        self._winner = _UNKNOWN

    @contextmanager
    def explore(self, move: Move) -> Iterator[bool]:
        """
        Apply move for the duration of a with-block and undo it on exit.

        Yields whether the move was applied; an illegal move is not applied
        and nothing is undone.
        """
        applied = self.make_move(move)
        try:
            yield applied
        finally:
            if applied:
                self.undo()

    def queens(self, side: Piece) -> List[Square]:
        """Squares holding side's pieces, by increasing index."""
        value = side.value
        cells = self.cells
        return [square for square in all_squares() if cells[square.index] == value]

    def no_moves(self, side: Piece) -> bool:
        """Return True iff no queen of side can move."""
        for square in self.queens(side):
            if has_mobility(self, square):
                return False
        return True

    def reachable_from(self, from_sq: Square, as_empty: Optional[Square] = None) -> Iterator[Square]:
        """Lazily yield squares reachable from from_sq by an unblocked queen move."""
        return iter_reachable(self, from_sq, as_empty)

    def legal_moves(self, side: Optional[Piece] = None) -> Iterator[Move]:
        """Lazily yield all legal moves for side (default: the side to move)."""
        return iter_legal_moves(self, self._turn if side is None else side)

    def copy(self) -> "Board":
        """Create an independent snapshot of the board."""
        new_board = Board.__new__(Board)
        new_board.grid = self.grid.copy()
        new_board.cells = new_board.grid.reshape(-1)
        new_board._turn = self._turn
        new_board._winner = self._winner
        new_board.move_history = list(self.move_history)
        return new_board

    def __str__(self) -> str:
        """Ten rows, rank 10 first, one glyph per cell."""
        lines = []
        for row in range(self.SIZE - 1, -1, -1):
            cells = "".join(" " + str(Piece(int(value))) for value in self.grid[row])
            lines.append("  " + cells + "\n")
        return "".join(lines)
