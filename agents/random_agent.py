"""
Random agent for Amazons that picks uniformly from legal moves.
"""

from typing import Any, Dict, Optional

import numpy as np

from engine.board import Board
from engine.move_generator import LegalMoveGenerator, Move
from engine.pieces import Piece


class RandomAgent:
    """
    Random agent that selects moves uniformly from legal moves.

    This agent serves as a baseline for comparison with the search agent.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize random agent.

        Args:
            seed: Random seed for reproducible behavior
        """
        self.rng = np.random.RandomState(seed)
        self.move_generator = LegalMoveGenerator()

    def select_action(self, board: Board, player: Piece) -> Optional[Move]:
        """
        Select a random legal move.

        Args:
            board: Current board state
            player: Side making the move

        Returns:
            Selected move, or None if no legal moves available
        """
        legal_moves = self.move_generator.get_legal_moves(board, player)
        if not legal_moves:
            return None

        move_idx = self.rng.randint(0, len(legal_moves))
        return legal_moves[move_idx]

    def get_action_info(self) -> Dict[str, Any]:
        """Get information about the agent."""
        return {
            "name": "RandomAgent",
            "type": "random",
            "description": "Selects moves uniformly from legal moves"
        }

    def reset(self):
        """Reset agent state (no-op for random agent)."""
        pass

    def set_seed(self, seed: int):
        """Set random seed for reproducible behavior."""
        self.rng = np.random.RandomState(seed)
