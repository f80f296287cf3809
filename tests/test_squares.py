"""
Tests for interned squares and queen-move geometry.
"""

import copy
import pickle
import unittest

from engine.squares import (
    NotationError,
    Square,
    all_squares,
    exists,
    parse_square,
    sq,
    sq_at,
)


class TestSquareLookup(unittest.TestCase):
    """Test square lookup and interning."""

    def test_exists(self):
        self.assertTrue(exists(0, 0))
        self.assertTrue(exists(9, 9))
        self.assertFalse(exists(-1, 0))
        self.assertFalse(exists(0, 10))
        self.assertFalse(exists(10, 3))

    def test_index_and_coordinates(self):
        square = sq(3, 5)
        self.assertEqual(square.col, 3)
        self.assertEqual(square.row, 5)
        self.assertEqual(square.index, 53)
        self.assertEqual(str(square), "d6")

    def test_lookup_is_interned(self):
        self.assertIs(sq(4, 7), sq(4, 7))
        self.assertIs(sq(4, 7), sq_at(74))
        self.assertIs(sq(4, 7), parse_square("e8"))

    def test_off_board_lookup_returns_none(self):
        self.assertIsNone(sq(10, 0))
        self.assertIsNone(sq(0, -1))

    def test_out_of_range_index_raises(self):
        with self.assertRaises(ValueError):
            sq_at(100)
        with self.assertRaises(ValueError):
            Square(-1)

    def test_all_squares_in_index_order(self):
        squares = all_squares()
        self.assertEqual(len(squares), 100)
        self.assertEqual([s.index for s in squares], list(range(100)))
        self.assertEqual(str(squares[0]), "a1")
        self.assertEqual(str(squares[99]), "j10")

    def test_copy_and_pickle_keep_identity(self):
        square = parse_square("c7")
        self.assertIs(copy.copy(square), square)
        self.assertIs(copy.deepcopy(square), square)
        self.assertIs(pickle.loads(pickle.dumps(square)), square)


class TestNotation(unittest.TestCase):
    """Test square notation parsing."""

    def test_parse_corners(self):
        self.assertEqual(parse_square("a1").index, 0)
        self.assertEqual(parse_square("j1").index, 9)
        self.assertEqual(parse_square("a10").index, 90)
        self.assertEqual(parse_square("j10").index, 99)

    def test_round_trip(self):
        for square in all_squares():
            self.assertIs(parse_square(str(square)), square)

    def test_rejects_malformed(self):
        for text in ["", "k1", "a0", "a11", "A1", "a01", "1a", "a1 ", "d", "aa1"]:
            with self.assertRaises(NotationError, msg=text):
                parse_square(text)

    def test_rejects_non_string(self):
        with self.assertRaises(NotationError):
            parse_square(11)

    def test_notation_error_is_value_error(self):
        with self.assertRaises(ValueError):
            parse_square("z9")


class TestQueenGeometry(unittest.TestCase):
    """Test queen-move validity, direction and stepping."""

    def test_is_queen_move(self):
        self.assertFalse(sq(1, 5).is_queen_move(sq(1, 5)))
        self.assertFalse(sq(1, 5).is_queen_move(sq(2, 7)))
        self.assertFalse(sq(0, 0).is_queen_move(sq(5, 1)))
        self.assertTrue(sq(1, 1).is_queen_move(sq(9, 9)))
        self.assertTrue(sq(2, 7).is_queen_move(sq(8, 7)))
        self.assertTrue(sq(3, 0).is_queen_move(sq(3, 4)))
        self.assertTrue(sq(7, 9).is_queen_move(sq(0, 2)))

    def test_full_board_diagonal(self):
        self.assertTrue(parse_square("a1").is_queen_move(parse_square("j10")))
        self.assertTrue(parse_square("j1").is_queen_move(parse_square("a10")))

    def test_directions(self):
        center = parse_square("e5")
        expected = {
            "e9": 0, "h8": 1, "j5": 2, "g3": 3,
            "e1": 4, "a1": 5, "b5": 6, "c7": 7,
        }
        for name, direction in expected.items():
            self.assertEqual(center.direction(parse_square(name)), direction, msg=name)

    def test_direction_requires_queen_move(self):
        with self.assertRaises(ValueError):
            parse_square("a1").direction(parse_square("b3"))
        with self.assertRaises(ValueError):
            parse_square("a1").direction(parse_square("a1"))

    def test_step(self):
        d1 = parse_square("d1")
        self.assertIs(d1.step(0, 0), d1)
        self.assertIs(d1.step(0, 7), parse_square("d8"))
        self.assertIs(d1.step(1, 6), parse_square("j7"))
        self.assertIsNone(d1.step(1, 7))
        self.assertIsNone(d1.step(4, 1))
        self.assertIs(d1.step(6, 3), parse_square("a1"))

    def test_step_rejects_bad_arguments(self):
        d1 = parse_square("d1")
        with self.assertRaises(ValueError):
            d1.step(8, 1)
        with self.assertRaises(ValueError):
            d1.step(0, -1)

    def test_step_agrees_with_direction(self):
        origin = parse_square("f4")
        for direction in range(8):
            steps = 1
            target = origin.step(direction, steps)
            while target is not None:
                self.assertTrue(origin.is_queen_move(target))
                self.assertEqual(origin.direction(target), direction)
                steps += 1
                target = origin.step(direction, steps)


if __name__ == '__main__':
    unittest.main()
