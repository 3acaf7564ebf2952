"""Tests for the Grid module."""

import numpy as np
import pytest

from duel_snake.grid import Grid, GridFullError, contains


class TestContains:
    def test_found(self):
        assert contains((1, 2), [(0, 0), (1, 2)])

    def test_missing(self):
        assert not contains((2, 1), [(0, 0), (1, 2)])

    def test_empty_sequence(self):
        assert not contains((0, 0), [])


class TestGridInit:
    def test_default_dimensions(self):
        grid = Grid()
        assert grid.cell_count == 25

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 4"):
            Grid(cell_count=3)


class TestGridOperations:
    def test_in_bounds(self):
        grid = Grid(cell_count=5)
        assert grid.in_bounds((0, 0))
        assert grid.in_bounds((4, 4))
        assert not grid.in_bounds((-1, 0))
        assert not grid.in_bounds((0, 5))
        assert not grid.in_bounds((5, 0))

    def test_occupancy_is_row_major(self):
        grid = Grid(cell_count=5)
        mask = grid.occupancy([(3, 1)], [(0, 4)])
        assert mask[1, 3]
        assert mask[4, 0]
        assert mask.sum() == 2

    def test_occupancy_ignores_out_of_bounds(self):
        grid = Grid(cell_count=5)
        mask = grid.occupancy([(-1, 0), (5, 5), (2, 2)])
        assert mask.sum() == 1

    def test_free_cells(self):
        grid = Grid(cell_count=4)
        assert len(grid.free_cells()) == 16
        free = grid.free_cells([(0, 0), (1, 0)], [(3, 3)])
        assert len(free) == 13
        assert (0, 0) not in free
        assert (3, 3) not in free


class TestRandomFreeCell:
    def test_avoids_bodies(self):
        grid = Grid(cell_count=4)
        rng = np.random.default_rng(0)
        body1 = [(x, 0) for x in range(4)] + [(x, 1) for x in range(4)]
        body2 = [(x, 2) for x in range(4)]
        for _ in range(200):
            x, y = grid.random_free_cell(rng, body1, body2)
            assert y == 3

    def test_deterministic_with_seed(self):
        grid = Grid()
        a = grid.random_free_cell(np.random.default_rng(7), [(1, 1)])
        b = grid.random_free_cell(np.random.default_rng(7), [(1, 1)])
        assert a == b

    def test_fallback_finds_last_free_cell(self):
        grid = Grid(cell_count=4)
        rng = np.random.default_rng(3)
        body = [(x, y) for x in range(4) for y in range(4) if (x, y) != (2, 1)]
        assert grid.random_free_cell(rng, body, [], max_attempts=1) == (2, 1)

    def test_full_grid_raises(self):
        grid = Grid(cell_count=4)
        rng = np.random.default_rng(0)
        body1 = [(x, y) for x in range(4) for y in range(2)]
        body2 = [(x, y) for x in range(4) for y in range(2, 4)]
        with pytest.raises(GridFullError):
            grid.random_free_cell(rng, body1, body2, max_attempts=10)


class TestGridSerialization:
    def test_to_dict(self):
        assert Grid(cell_count=6).to_dict() == {"cell_count": 6}
