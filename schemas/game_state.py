"""
Pydantic schemas for game snapshots.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from .move import MoveRecord, Side


class GameStatus(str, Enum):
    """Game status enumeration."""
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class GameStateSnapshot(BaseModel):
    """Current state of the game."""
    board: List[str] = Field(min_length=10, max_length=10, description="Rows from rank 10 down to rank 1, one glyph per cell")
    turn: Side
    winner: Optional[Side] = None
    move_count: int = Field(ge=0)
    status: GameStatus
    history: List[MoveRecord] = Field(default_factory=list)
