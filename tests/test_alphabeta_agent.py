"""
Tests for the alpha-beta search agent.
"""

import unittest
from types import SimpleNamespace

import numpy as np

from agents.alphabeta_agent import INFTY, WINNING_VALUE, AlphaBetaAgent, static_score
from agents.search_config import SearchConfig
from engine.board import Board
from engine.pieces import Piece
from tests.utils_game_states import cornered_board, play_random_moves, region_board, small_region_board


def minimax(board, depth):
    """Plain minimax over the same evaluation, no pruning."""
    if depth == 0 or board.winner is not None:
        return static_score(board)
    values = []
    for move in list(board.legal_moves()):
        board.make_move(move)
        values.append(minimax(board, depth - 1))
        board.undo()
    return max(values) if board.turn is Piece.WHITE else min(values)


class TestStaticScore(unittest.TestCase):
    """Test the leaf evaluation."""

    def test_opening_is_even(self):
        self.assertEqual(static_score(Board()), 0)

    def test_decided_positions(self):
        self.assertEqual(static_score(cornered_board()), -WINNING_VALUE)
        board = region_board(empty=["a2", "a3"], white=["a4"], black=["a1"])
        board.make_move(next(iter(board.legal_moves())))
        self.assertIsNone(board.winner)
        self.assertEqual(static_score(board), 0)

    def test_bounds(self):
        self.assertLess(WINNING_VALUE, INFTY)
        self.assertEqual(INFTY, 2 ** 31 - 1)


class TestAlphaBetaSearch(unittest.TestCase):
    """Test search results and board preservation."""

    def setUp(self):
        self.agent = AlphaBetaAgent()

    def test_finds_winning_move(self):
        board = region_board(empty=["a2", "a3"], white=["a4"], black=["a1"])
        move = self.agent.find_move(board, 1, 1)
        # three of the four moves win; the last one generated is kept
        self.assertEqual(str(move), "a4-a2(a4)")
        self.assertEqual(self.agent.last_search.value, WINNING_VALUE)
        self.assertIs(self.agent.last_search.best_move, move)

    def test_select_action_plays_win(self):
        board = region_board(empty=["a2", "a3"], white=["a4"], black=["a1"])
        move = self.agent.select_action(board, Piece.WHITE)
        self.assertTrue(board.make_move(move))
        self.assertEqual(board.winner, Piece.WHITE)

    def test_values_match_minimax(self):
        for depth in (1, 2, 3):
            board = small_region_board()
            expected = minimax(board, depth)
            self.assertEqual(self.agent.search_value(board, depth, 1), expected, msg=f"depth={depth}")

    def test_values_match_minimax_for_black(self):
        board = small_region_board()
        board.make_move(next(iter(board.legal_moves())))
        for depth in (1, 2):
            expected = minimax(board, depth)
            self.assertEqual(self.agent.search_value(board, depth, -1), expected, msg=f"depth={depth}")

    def test_depth_one_matches_minimax_choice(self):
        board = small_region_board()
        best_value, best_move = -INFTY, None
        for move in list(board.legal_moves()):
            with board.explore(move):
                value = static_score(board)
            if value >= best_value:
                best_value, best_move = value, move
        self.assertEqual(self.agent.find_move(board, 1, 1), best_move)
        self.assertEqual(self.agent.last_search.value, best_value)

    def test_search_leaves_board_unchanged(self):
        board = Board()
        play_random_moves(board, 4, seed=5)
        grid = board.grid.copy()
        turn, num_moves = board.turn, board.num_moves
        history = list(board.move_history)

        move = self.agent.find_move(board, 1, 1)

        self.assertTrue(np.array_equal(board.grid, grid))
        self.assertEqual(board.turn, turn)
        self.assertEqual(board.num_moves, num_moves)
        self.assertEqual(board.move_history, history)
        self.assertTrue(board.is_legal_move(move))

    def test_search_stats_recorded(self):
        board = small_region_board()
        self.agent.find_move(board, 2, 1)
        stats = self.agent.last_search
        self.assertEqual(stats.depth, 2)
        self.assertGreater(stats.nodes, 1)
        self.assertGreaterEqual(stats.elapsed_ms, 0.0)
        self.agent.reset()
        self.assertIsNone(self.agent.last_search.best_move)


class TestAlphaBetaAgent(unittest.TestCase):
    """Test the agent-level contract."""

    def test_max_depth_schedule(self):
        agent = AlphaBetaAgent()
        for num_moves, depth in ((0, 1), (18, 1), (19, 2), (37, 2), (38, 3), (60, 4)):
            self.assertEqual(agent.max_depth(SimpleNamespace(num_moves=num_moves)), depth, msg=num_moves)

    def test_max_depth_cap(self):
        agent = AlphaBetaAgent(SearchConfig(max_depth_cap=2))
        self.assertEqual(agent.max_depth(SimpleNamespace(num_moves=80)), 2)
        self.assertEqual(agent.max_depth(SimpleNamespace(num_moves=0)), 1)

    def test_returns_none_when_decided(self):
        agent = AlphaBetaAgent()
        board = cornered_board()
        self.assertIsNone(agent.select_action(board, Piece.WHITE))

    def test_returns_none_when_not_players_turn(self):
        agent = AlphaBetaAgent()
        self.assertIsNone(agent.select_action(Board(), Piece.BLACK))

    def test_select_action_from_opening(self):
        agent = AlphaBetaAgent()
        board = Board()
        move = agent.select_action(board, Piece.WHITE)
        self.assertIsNotNone(move)
        self.assertTrue(board.is_legal_move(move))
        self.assertEqual(agent.last_search.depth, 1)

    def test_get_action_info(self):
        info = AlphaBetaAgent(SearchConfig(depth_divisor=10)).get_action_info()
        self.assertEqual(info["type"], "alphabeta")
        self.assertEqual(info["config"]["depth_divisor"], 10)


if __name__ == '__main__':
    unittest.main()
