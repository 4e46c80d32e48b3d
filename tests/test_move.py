"""
Tests for the rules of the game: lane merging, move detection and game end conditions.
"""

from unittest import TestCase, main

import numpy as np

from game2048.core import (
    Board,
    Side,
    Tile,
    at_least_one_move_exists,
    empty_space_exists,
    legal_sides,
    max_tile_exists,
    merge_lane,
)

generator = np.random.default_rng(42)


def generate_random_board(size: int = 4) -> np.ndarray:
    """Generate random raw values, dense enough to produce full boards."""
    board = np.zeros((size, size), dtype=np.int64)
    num_tiles = generator.integers(size * size - 2, size * size + 1)
    tile_values = generator.choice([2, 4, 8, 16], size=num_tiles)
    indices = generator.choice(size * size, size=num_tiles, replace=False)
    board.flat[indices] = tile_values
    return board


def lane(*values: int) -> list[Tile]:
    """Build a lane of tiles, leading edge first."""
    return [Tile.create(value, 0, 3 - i) for i, value in enumerate(values)]


class TestMergeLane(TestCase):
    """Test tile merging and scoring within a lane."""

    def test_merge_empty_lane(self):
        """Empty lane merges to empty with zero score."""
        self.assertEqual(merge_lane([]), (0, []))

    def test_merge_single_tile(self):
        """Single tile lane is returned untouched."""
        tiles = lane(4)
        score, result = merge_lane(tiles)

        self.assertEqual(score, 0)
        self.assertIs(result[0], tiles[0])

    def test_merge_three_equal(self):
        """Of three equal tiles, the two leading ones merge."""
        tiles = lane(2, 2, 2)
        score, result = merge_lane(tiles)

        self.assertEqual(score, 4)
        self.assertEqual([t.value for t in result], [4, 2])

        # ##>: The merged tile sits where the leading tile was; the trailing tile is kept as is.
        self.assertEqual((result[0].col, result[0].row), (0, 3))
        self.assertIs(result[1], tiles[2])

    def test_merge_all_same(self):
        """All same values merge in pairs, no tile merges twice."""
        score, result = merge_lane(lane(2, 2, 2, 2))

        self.assertEqual(score, 8)
        self.assertEqual([t.value for t in result], [4, 4])

    def test_merge_mixed(self):
        """Only equal neighbours merge."""
        score, result = merge_lane(lane(4, 4, 2, 2))
        self.assertEqual(score, 12)
        self.assertEqual([t.value for t in result], [8, 4])

        score, result = merge_lane(lane(2, 4, 2))
        self.assertEqual(score, 0)
        self.assertEqual([t.value for t in result], [2, 4, 2])


class TestBoardChecks(TestCase):
    """Test the predicates on a board."""

    def test_empty_space_exists(self):
        """Empty space is detected."""
        self.assertTrue(empty_space_exists(Board(4)))
        self.assertTrue(empty_space_exists(Board.from_values([[2, 4], [4, 0]])))
        self.assertFalse(empty_space_exists(Board.from_values([[2, 4], [4, 2]])))

    def test_max_tile_exists(self):
        """Winning tile is detected."""
        board = Board.from_values([[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 2048, 0], [0, 0, 0, 0]])
        self.assertTrue(max_tile_exists(board))
        self.assertFalse(max_tile_exists(board, max_piece=4096))
        self.assertFalse(max_tile_exists(Board.from_values([[1024, 1024], [0, 0]])))

    def test_no_move_on_full_board(self):
        """No move exists when the board is full without equal neighbours."""
        board = Board.from_values([[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8, 16, 32, 64]])
        self.assertFalse(at_least_one_move_exists(board))
        self.assertEqual(legal_sides(board), [])

    def test_move_with_vertical_merge(self):
        """A move exists when two vertically adjacent tiles are equal."""
        board = Board.from_values([[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8, 16, 32, 4096]])
        self.assertTrue(at_least_one_move_exists(board))
        self.assertEqual(legal_sides(board), [Side.UP, Side.DOWN])

    def test_move_with_horizontal_merge(self):
        """A move exists when two horizontally adjacent tiles are equal."""
        board = Board.from_values([[2, 2, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8, 16, 32, 64]])
        self.assertTrue(at_least_one_move_exists(board))
        self.assertEqual(legal_sides(board), [Side.LEFT, Side.RIGHT])

    def test_legal_sides(self):
        """Legal sides are those that slide or merge a tile."""
        board = Board.from_values([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(legal_sides(board), [Side.LEFT, Side.UP, Side.RIGHT])

        board = Board.from_values([[0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 2]])
        self.assertEqual(legal_sides(board), [Side.LEFT, Side.DOWN])

    def test_random_boards(self):
        """Predicates agree with a cell by cell scan on random boards."""
        for _ in range(200):
            values = generate_random_board(size=4)
            board = Board.from_values(values)

            cells = {(c, r): board.tile(c, r) for c in range(4) for r in range(4)}
            empty = any(tile is None for tile in cells.values())
            pair = any(
                tile is not None and neighbour is not None and tile.value == neighbour.value
                for (c, r), tile in cells.items()
                for neighbour in (cells.get((c + 1, r)), cells.get((c, r + 1)))
            )

            self.assertEqual(empty_space_exists(board), empty)
            self.assertEqual(at_least_one_move_exists(board), empty or pair)


if __name__ == '__main__':
    main()
