"""
Amazons game controller: owns the authoritative board, asks agents for
moves, commits them and reports them to observers.
"""

import logging
import time
from typing import Callable, Dict, List, Optional

from schemas.game_state import GameStateSnapshot, GameStatus
from schemas.move import MoveRecord, Side

from .board import Board
from .move_generator import Move
from .pieces import Piece

logger = logging.getLogger(__name__)

MoveObserver = Callable[[MoveRecord, Board], None]


class IllegalMoveError(ValueError):
    """Raised when a move reported to the controller is not legal."""


class AmazonsGame:
    """
    Main Amazons game controller.

    Agents are any objects with select_action(board, player); a side with no
    agent must be driven by report_move (e.g. a human front end).
    """

    def __init__(self, white_agent=None, black_agent=None):
        self._board = Board()
        self.agents = {Piece.WHITE: white_agent, Piece.BLACK: black_agent}
        self.observers: List[MoveObserver] = []
        self.game_history: List[MoveRecord] = []

    @property
    def board(self) -> Board:
        return self._board

    @property
    def winner(self) -> Optional[Piece]:
        return self._board.winner

    def is_game_over(self) -> bool:
        return self._board.winner is not None

    def get_current_player(self) -> Piece:
        return self._board.turn

    def add_observer(self, observer: MoveObserver) -> None:
        self.observers.append(observer)

    def report_move(self, move: Move) -> None:
        """
        Commit move to the game and notify observers.

        Raises:
            IllegalMoveError: if move is not legal in the current position
        """
        player = self._board.turn
        if not self._board.make_move(move):
            raise IllegalMoveError(f"Illegal move for {player.name}: {move}")

        record = MoveRecord(
            player=Side(player.name),
            move=str(move),
            move_number=self._board.num_moves,
        )
        self.game_history.append(record)
        logger.debug(f"Move {record.move_number}: {player.name} played {move}")
        if self._board.winner is not None:
            logger.info(f"Game over after {self._board.num_moves} moves: {self._board.winner.name} wins")

        for observer in self.observers:
            observer(record, self._board)

    def play_turn(self) -> Optional[Move]:
        """
        Let the side to move's agent choose a move and commit it.

        Returns:
            The committed move, or None if the game is over or the agent has no move
        """
        if self.is_game_over():
            return None
        player = self._board.turn
        agent = self.agents[player]
        if agent is None:
            raise RuntimeError(f"No agent configured for {player.name}")

        start = time.perf_counter()
        move = agent.select_action(self._board, player)
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        logger.debug(f"{player.name} agent chose {move} in {elapsed_ms:.2f}ms")
        if move is None:
            return None
        self.report_move(move)
        return move

    def play(self, max_moves: Optional[int] = None) -> Optional[Piece]:
        """
        Play agent moves until the game is decided or max_moves moves were made.

        Returns:
            The winner, or None if the game stopped undecided
        """
        moves_made = 0
        while not self.is_game_over():
            if max_moves is not None and moves_made >= max_moves:
                break
            if self.play_turn() is None:
                break
            moves_made += 1
        return self.winner

    def undo(self) -> None:
        """Take back the last committed move."""
        if self._board.num_moves == 0:
            return
        self._board.undo()
        self.game_history.pop()

    def snapshot(self) -> GameStateSnapshot:
        """Serializable view of the current game."""
        rows = [line.strip() for line in str(self._board).splitlines()]
        winner = self._board.winner
        return GameStateSnapshot(
            board=rows,
            turn=Side(self._board.turn.name),
            winner=Side(winner.name) if winner is not None else None,
            move_count=self._board.num_moves,
            status=GameStatus.FINISHED if winner is not None else GameStatus.IN_PROGRESS,
            history=list(self.game_history),
        )

    def get_agent_info(self) -> Dict[str, Optional[dict]]:
        info = {}
        for side, agent in self.agents.items():
            info[side.name] = agent.get_action_info() if hasattr(agent, "get_action_info") else None
        return info
