"""
Pydantic schemas for reported moves.
"""

from enum import Enum

from pydantic import BaseModel, Field

MOVE_NOTATION = r"^[a-j](10|[1-9])-[a-j](10|[1-9])\([a-j](10|[1-9])\)$"


class Side(str, Enum):
    """Side enumeration."""
    WHITE = "WHITE"
    BLACK = "BLACK"


class MoveRecord(BaseModel):
    """A move that was committed to the game."""
    player: Side
    move: str = Field(..., pattern=MOVE_NOTATION, description="Move in d1-d8(i8) notation")
    move_number: int = Field(..., ge=1, description="Move number in the game")

    class Config:
        json_schema_extra = {
            "example": {
                "player": "WHITE",
                "move": "d1-d8(i8)",
                "move_number": 1
            }
        }
