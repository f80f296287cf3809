"""
Amazons game engine package.

This package contains the core game logic for Amazons, including:
- Interned board squares and queen-move geometry
- Board state, legality checks and make/undo
- Lazy legal move generation
- Mobility metrics used for evaluation
- Game controller
"""

from .board import Board, GameState
from .game import AmazonsGame, IllegalMoveError
from .move_generator import LegalMoveGenerator, Move
from .pieces import Piece
from .squares import NotationError, Square, parse_square, sq, sq_at

__all__ = [
    'Board', 'GameState',
    'Piece',
    'Square', 'NotationError', 'parse_square', 'sq', 'sq_at',
    'Move', 'LegalMoveGenerator',
    'AmazonsGame', 'IllegalMoveError'
]
