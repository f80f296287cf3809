"""
Moves and lazy legal move generation for Amazons.
"""

import logging
import os
import re
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, List, Optional

from .pieces import Piece
from .squares import NUM_DIRECTIONS, SQ, NotationError, Square, all_squares, parse_square

if TYPE_CHECKING:
    from .board import Board

logger = logging.getLogger(__name__)

# Debug flag for move generation timing (controlled via environment variable)
MOVEGEN_DEBUG = bool(os.getenv("AMAZONS_MOVEGEN_DEBUG", ""))

# d1-d8(i8), or the space separated command form d1 d8 i8
MOVE_PATTERN = re.compile(r"^\s*" + SQ + r"\s*-\s*" + SQ + r"\s*\(\s*" + SQ + r"\s*\)\s*$")
COMMAND_PATTERN = re.compile(r"^\s*" + SQ + r"\s+" + SQ + r"\s+" + SQ + r"\s*$")

_EMPTY = Piece.EMPTY.value


@dataclass(frozen=True)
class Move:
    """One ply: move the queen on from_sq to to_sq, then throw a spear to spear."""
    from_sq: Square
    to_sq: Square
    spear: Square

    @classmethod
    def parse(cls, text: str) -> "Move":
        """
        Parse 'd1-d8(i8)' or 'd1 d8 i8'.

        Raises:
            NotationError: if text matches neither form
        """
        if not isinstance(text, str):
            raise NotationError(f"Move designation must be a string, got {type(text).__name__}")
        match = MOVE_PATTERN.match(text) or COMMAND_PATTERN.match(text)
        if match is None:
            raise NotationError(f"Invalid move designation: {text!r}")
        return cls(*(parse_square(group) for group in match.groups()))

    def __str__(self) -> str:
        return f"{self.from_sq}-{self.to_sq}({self.spear})"


def iter_reachable(board: "Board", from_sq: Square, as_empty: Optional[Square] = None) -> Iterator[Square]:
    """
    Yield squares reachable from from_sq by an unblocked queen move.

    Directions are scanned N clockwise to NW, each outward until the first
    occupied square or the board edge. as_empty is treated as empty and is
    itself yielded when reached. The piece on from_sq is ignored.
    """
    cells = board.cells
    for direction in range(NUM_DIRECTIONS):
        for square in from_sq.ray(direction):
            if square is not as_empty and cells[square.index] != _EMPTY:
                break
            yield square


def iter_legal_moves(board: "Board", side: Piece) -> Iterator[Move]:
    """
    Yield every legal move for side, regardless of whose turn it is.

    Order: queens by increasing square index, then destinations in
    iter_reachable order, then spears from the destination with the queen's
    origin treated as empty.
    """
    cells = board.cells
    value = side.value
    for start in all_squares():
        if cells[start.index] != value:
            continue
        for destination in iter_reachable(board, start):
            for spear in iter_reachable(board, destination, start):
                yield Move(start, destination, spear)


def has_mobility(board: "Board", square: Square) -> bool:
    """True iff the queen on square has at least one reachable square."""
    for _ in iter_reachable(board, square):
        return True
    return False


class LegalMoveGenerator:
    """Materialized move lists on top of the lazy generators."""

    def get_legal_moves(self, board: "Board", player: Piece) -> List[Move]:
        """
        Get all legal moves for player on the current board.

        Args:
            board: Current board state
            player: Side to generate moves for

        Returns:
            List of legal moves in generation order
        """
        start = time.perf_counter()
        legal_moves = list(iter_legal_moves(board, player))
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        if MOVEGEN_DEBUG:
            logger.info(f"MoveGen: player={player.name}, legal_moves={len(legal_moves)}, elapsed_ms={elapsed_ms:.2f}")
        logger.debug(f"Legal move generation: {len(legal_moves)} moves in {elapsed_ms:.2f}ms for player={player.name}")
        return legal_moves

    def has_legal_moves(self, board: "Board", player: Piece) -> bool:
        """Check whether any queen of player can move."""
        return not board.no_moves(player)

    def is_move_legal(self, board: "Board", player: Piece, move: Move) -> bool:
        """Check a move for player, who must also be the side to move."""
        return board.turn is player and board.is_legal_move(move)
