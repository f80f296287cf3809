"""
Mobility metrics: how many squares each queen can reach.

Mobility of a queen is the number of squares yielded by
Board.reachable_from(queen). Side mobility sums over the side's queens;
the static evaluation used by the search is white mobility minus black
mobility.
"""

from dataclasses import dataclass
from typing import Dict

from .board import Board
from .move_generator import iter_reachable
from .pieces import Piece
from .squares import Square


@dataclass
class SideMobilityMetrics:
    total: int
    per_queen: Dict[str, int]
    immobile_queens: int


def queen_mobility(board: Board, square: Square) -> int:
    """Count squares reachable from square by an unblocked queen move."""
    count = 0
    for _ in iter_reachable(board, square):
        count += 1
    return count


def side_mobility(board: Board, side: Piece) -> int:
    """Total mobility of side's queens."""
    return sum(queen_mobility(board, square) for square in board.queens(side))


def mobility_difference(board: Board) -> int:
    """White mobility minus black mobility."""
    return side_mobility(board, Piece.WHITE) - side_mobility(board, Piece.BLACK)


def compute_side_mobility_metrics(board: Board, side: Piece) -> SideMobilityMetrics:
    """
    Per-queen breakdown of side's mobility.

    Returns:
        SideMobilityMetrics keyed by square notation
    """
    per_queen = {str(square): queen_mobility(board, square) for square in board.queens(side)}
    return SideMobilityMetrics(
        total=sum(per_queen.values()),
        per_queen=per_queen,
        immobile_queens=sum(1 for count in per_queen.values() if count == 0),
    )
