"""
Contracts between agents and the game controller.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from engine.board import Board
from engine.move_generator import Move
from engine.pieces import Piece


@runtime_checkable
class AgentProtocol(Protocol):
    """
    An automated player.

    select_action reads the controller's board and returns a move for player,
    or None if it has none. It must leave the board as it found it; the
    controller commits the returned move itself.
    """

    def select_action(self, board: Board, player: Piece) -> Optional[Move]:
        ...


@runtime_checkable
class GameController(Protocol):
    """
    Owner of the authoritative board.

    Agents read the board through it; finalized moves come back through
    report_move, which applies them and notifies observers.
    """

    @property
    def board(self) -> Board:
        ...

    def report_move(self, move: Move) -> None:
        ...
