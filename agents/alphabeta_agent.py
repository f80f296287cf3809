"""
Alpha-beta search agent for Amazons.

Depth-limited minimax with alpha-beta pruning and a mobility evaluation.
The search walks the caller's board in place: every move it tries is applied
and undone inside Board.explore, so the board is left exactly as it was
found. The agent is not reentrant; searching one board from several threads
needs one Board.copy() per thread.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

from agents.search_config import SearchConfig
from engine.board import Board
from engine.mobility_metrics import mobility_difference
from engine.move_generator import Move
from engine.pieces import Piece

logger = logging.getLogger(__name__)

# A magnitude greater than any position value.
INFTY = 2 ** 31 - 1
# A position value indicating a win (for white if positive, black if negative).
WINNING_VALUE = INFTY - 1


@dataclass
class SearchStats:
    """Statistics of the most recent search."""
    depth: int = 0
    nodes: int = 0
    value: int = 0
    elapsed_ms: float = 0.0
    best_move: Optional[Move] = None


def static_score(board: Board) -> int:
    """Heuristic value of board: a winning value if decided, else mobility difference."""
    winner = board.winner
    if winner is Piece.WHITE:
        return WINNING_VALUE
    if winner is Piece.BLACK:
        return -WINNING_VALUE
    return mobility_difference(board)


class AlphaBetaAgent:
    """
    Minimax agent with alpha-beta pruning.

    WHITE maximizes and BLACK minimizes the position value. Among moves of
    equal value the later one in generation order is kept.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        self.config = config or SearchConfig()
        self.last_search = SearchStats()
        self._last_found_move: Optional[Move] = None
        self._nodes = 0

    def select_action(self, board: Board, player: Piece) -> Optional[Move]:
        """
        Select a move for player, who must be the side to move.

        Returns:
            The chosen move, or None if player has no legal move
        """
        if board.turn is not player or board.winner is not None or board.no_moves(player):
            return None
        depth = self.max_depth(board)
        sense = 1 if player is Piece.WHITE else -1
        return self.find_move(board, depth, sense)

    def find_move(self, board: Board, depth: int, sense: int) -> Optional[Move]:
        """Search depth plies from board and return the best move for sense."""
        start = time.perf_counter()
        self._nodes = 0
        self._last_found_move = None
        value = self._find_move(board, depth, True, sense, -INFTY, INFTY)
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        self.last_search = SearchStats(
            depth=depth,
            nodes=self._nodes,
            value=value,
            elapsed_ms=elapsed_ms,
            best_move=self._last_found_move,
        )
        message = (
            f"AlphaBeta: depth={depth}, nodes={self._nodes}, value={value}, "
            f"move={self._last_found_move}, elapsed_ms={elapsed_ms:.2f}"
        )
        if self.config.log_search_stats:
            logger.info(message)
        else:
            logger.debug(message)
        return self._last_found_move

    def search_value(self, board: Board, depth: int, sense: int) -> int:
        """Value of board searched to depth with a full window, without recording a move."""
        return self._find_move(board, depth, False, sense, -INFTY, INFTY)

    def _find_move(self, board: Board, depth: int, save_move: bool, sense: int, alpha: int, beta: int) -> int:
        """
        Find a move from board and return its value.

        The move should have maximal value or value >= beta if sense == 1,
        and minimal value or value <= alpha if sense == -1. Records the move
        in _last_found_move iff save_move. At depth 0 or on a decided board
        this is the static score.
        """
        self._nodes += 1
        if depth == 0 or board.winner is not None:
            return static_score(board)

        best_move = None
        if sense == 1:
            best_value = -INFTY
            for move in board.legal_moves():
                with board.explore(move):
                    value = self._find_move(board, depth - 1, False, -1, alpha, beta)
                if value >= best_value:
                    best_move = move
                    best_value = value
                    alpha = max(alpha, value)
                    if beta <= alpha:
                        break
        else:
            best_value = INFTY
            for move in board.legal_moves():
                with board.explore(move):
                    value = self._find_move(board, depth - 1, False, 1, alpha, beta)
                if value <= best_value:
                    best_move = move
                    best_value = value
                    beta = min(beta, value)
                    if beta <= alpha:
                        break

        if save_move:
            self._last_found_move = best_move
        return best_value

    def max_depth(self, board: Board) -> int:
        """Search depth for board: deeper as the game progresses."""
        depth = board.num_moves // self.config.depth_divisor + self.config.depth_increment
        if self.config.max_depth_cap is not None:
            depth = min(depth, self.config.max_depth_cap)
        return depth

    def get_action_info(self) -> Dict[str, Any]:
        """Get information about the agent."""
        return {
            "name": "AlphaBetaAgent",
            "type": "alphabeta",
            "description": "Minimax with alpha-beta pruning over queen mobility",
            "config": self.config.to_dict(),
        }

    def reset(self):
        """Reset per-game state."""
        self.last_search = SearchStats()
        self._last_found_move = None
