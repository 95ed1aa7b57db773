import numpy as np
import pytest

from src.game.board import (DEFAULT_SCAN_ORDER, EMPTY, OBSTACLE, START, Board,
                            Direction)


class TestBoard:
    def test_board_creation(self):
        board = Board(5, 3)
        assert board.width == 5
        assert board.height == 3
        assert board.grid.shape == (3, 5)
        assert np.all(board.grid == EMPTY)

    def test_non_positive_dimensions_rejected(self):
        with pytest.raises(ValueError):
            Board(0, 3)
        with pytest.raises(ValueError):
            Board(3, -1)

    def test_valid_position(self):
        board = Board(5, 3)
        assert board.is_valid_position(0, 0)
        assert board.is_valid_position(4, 2)
        assert not board.is_valid_position(-1, 0)
        assert not board.is_valid_position(5, 0)
        assert not board.is_valid_position(0, 3)

    def test_get_and_set_are_x_y_ordered(self):
        board = Board(4, 2)
        board.set((3, 1), 7)
        assert board.get((3, 1)) == 7
        assert board.grid[1, 3] == 7
        assert isinstance(board.get((3, 1)), int)

    def test_reset_clears_labels_and_obstacles(self):
        board = Board(3, 3)
        board.set((0, 0), START)
        board.mark_obstacles([(1, 1), (2, 2)])
        board.reset()
        assert np.all(board.grid == EMPTY)

    def test_mark_obstacles_tolerates_duplicates(self):
        board = Board(3, 3)
        board.mark_obstacles([(1, 1), (1, 1)])
        assert board.is_obstacle((1, 1))
        assert not board.is_unvisited((1, 1))
        assert int(np.count_nonzero(board.grid == OBSTACLE)) == 1

    def test_neighbors_follow_scan_order(self):
        board = Board(3, 3)
        assert board.neighbors((1, 1)) == [(1, 0), (0, 1), (1, 2), (2, 1)]

        reversed_order = tuple(reversed(DEFAULT_SCAN_ORDER))
        assert board.neighbors((1, 1), reversed_order) == [
            (2, 1),
            (1, 2),
            (0, 1),
            (1, 0),
        ]

    def test_corner_neighbors(self):
        board = Board(3, 3)
        assert board.neighbors((0, 0)) == [(0, 1), (1, 0)]
        assert board.neighbors((2, 2)) == [(2, 1), (1, 2)]

    def test_unvisited_neighbors_skip_labels_and_obstacles(self):
        board = Board(3, 3)
        board.set((1, 0), 2)
        board.mark_obstacles([(0, 1)])
        assert board.unvisited_neighbors((1, 1)) == [(1, 2), (2, 1)]

    def test_neighbors_with_label(self):
        board = Board(3, 3)
        board.set((1, 0), 4)
        board.set((2, 1), 4)
        assert board.neighbors_with_label((1, 1), 4) == [(1, 0), (2, 1)]
        assert board.neighbors_with_label((1, 1), 5) == []

    def test_labeled_cells_ignores_obstacles(self):
        board = Board(3, 3)
        board.set((0, 0), START)
        board.set((1, 0), 2)
        board.mark_obstacles([(2, 2)])
        assert board.labeled_cells() == 2

    def test_copy_is_independent(self):
        board = Board(3, 3)
        board.set((1, 1), 3)
        copy = board.copy()
        copy.set((1, 1), 9)
        assert board.get((1, 1)) == 3
        assert copy.get((1, 1)) == 9

    def test_dict_round_trip(self):
        board = Board(3, 2)
        board.set((0, 0), START)
        board.mark_obstacles([(2, 1)])
        restored = Board.from_dict(board.to_dict())
        assert restored.width == 3
        assert restored.height == 2
        assert np.array_equal(restored.grid, board.grid)

    def test_str_formats_labels_and_obstacles(self):
        board = Board(3, 2)
        board.set((0, 0), START)
        board.set((1, 0), 2)
        board.mark_obstacles([(2, 1)])
        assert str(board) == "  1  2  0\n  0  0 XX"


class TestDirection:
    def test_offsets(self):
        assert (Direction.UP.dx, Direction.UP.dy) == (0, -1)
        assert (Direction.DOWN.dx, Direction.DOWN.dy) == (0, 1)
        assert (Direction.LEFT.dx, Direction.LEFT.dy) == (-1, 0)
        assert (Direction.RIGHT.dx, Direction.RIGHT.dy) == (1, 0)

    def test_opposite(self):
        for direction in Direction:
            assert direction.opposite().opposite() == direction
            assert direction.opposite() != direction

    def test_step(self):
        assert Direction.RIGHT.step((2, 3)) == (3, 3)
        assert Direction.UP.step((2, 3)) == (2, 2)

    def test_between(self):
        assert Direction.between((1, 1), (1, 0)) == Direction.UP
        assert Direction.between((1, 1), (2, 1)) == Direction.RIGHT

    def test_between_rejects_non_adjacent(self):
        with pytest.raises(ValueError):
            Direction.between((0, 0), (1, 1))
        with pytest.raises(ValueError):
            Direction.between((0, 0), (0, 0))

    def test_default_scan_order(self):
        assert DEFAULT_SCAN_ORDER == (
            Direction.UP,
            Direction.LEFT,
            Direction.DOWN,
            Direction.RIGHT,
        )
