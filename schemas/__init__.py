"""
Pydantic schemas for reporting Amazons games to observers.
"""

from .game_state import GameStateSnapshot, GameStatus
from .move import MoveRecord, Side

__all__ = [
    "GameStateSnapshot",
    "GameStatus",
    "MoveRecord",
    "Side",
]
