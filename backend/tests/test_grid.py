"""
Tests for domain/grid.py - playable rectangle and wrap-around.
"""

import os
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import UP, DOWN, LEFT, RIGHT
from domain.grid import Grid, GridCell


class TestGridCell:
    """Tests for the GridCell value type."""

    def test_equality_and_hash_by_value(self):
        assert GridCell(3, 4) == GridCell(3, 4)
        assert len({GridCell(3, 4), GridCell(3, 4), GridCell(4, 3)}) == 2

    def test_compares_equal_to_plain_tuple(self):
        assert GridCell(3, 4) == (3, 4)

    def test_is_immutable(self):
        cell = GridCell(1, 2)
        with pytest.raises(AttributeError):
            cell.x = 5


class TestGridFromTerminal:
    """Tests for computing bounds from the terminal size."""

    def test_full_fraction_80x24(self):
        grid = Grid.from_terminal(80, 24, 1.0)
        assert grid.corners == (2, 2, 79, 23)

    def test_small_fraction_80x24(self):
        """floor(2 + 79*0.3) = 25, floor(79*0.7) = 55; floor(2 + 23*0.3) = 8, floor(23*0.7) = 16."""
        grid = Grid.from_terminal(80, 24, 0.7)
        assert grid.corners == (25, 8, 55, 16)

    def test_medium_fraction_100x40(self):
        grid = Grid.from_terminal(100, 40, 0.85)
        assert grid.x_min == 16
        assert grid.x_max == 84
        assert grid.y_min == 7
        assert grid.y_max == 33

    def test_bounds_leave_room_for_border(self):
        grid = Grid.from_terminal(30, 20, 1.0)
        assert grid.x_min >= 2 and grid.y_min >= 2
        assert grid.x_max <= 29 and grid.y_max <= 19

    @pytest.mark.parametrize("width,height", [(9, 24), (80, 9), (5, 5)])
    def test_terminal_below_minimum_rejected(self, width, height):
        with pytest.raises(ValueError, match="Terminal too small"):
            Grid.from_terminal(width, height, 1.0)

    @pytest.mark.parametrize("fraction", [0, -0.5, 1.5])
    def test_fraction_out_of_range_rejected(self, fraction):
        with pytest.raises(ValueError):
            Grid.from_terminal(80, 24, fraction)

    def test_fraction_producing_inverted_rectangle_rejected(self):
        """10 columns at 0.7: x_min = 4, x_max = 6, far too narrow for the snake."""
        with pytest.raises(ValueError):
            Grid.from_terminal(10, 10, 0.7)


class TestGridConstructor:
    """Tests for explicit bounds."""

    def test_inverted_bounds_rejected(self):
        with pytest.raises(ValueError):
            Grid(10, 2, 2, 10)

    def test_too_narrow_for_initial_snake_rejected(self):
        with pytest.raises(ValueError):
            Grid(2, 2, 6, 10)

    def test_size(self):
        grid = Grid(2, 2, 10, 10)
        assert grid.width == 9
        assert grid.height == 9
        assert len(grid) == 81


class TestGridCells:
    """Tests for cell enumeration."""

    def test_enumerates_every_cell_once(self):
        grid = Grid(2, 3, 8, 5)
        cells = list(grid.cells())
        assert len(cells) == len(grid) == 21
        assert len(set(cells)) == 21
        assert all(cell in grid for cell in cells)

    def test_enumeration_is_restartable(self):
        grid = Grid(2, 2, 10, 10)
        assert list(grid.cells()) == list(grid.cells())

    def test_contains(self):
        grid = Grid(2, 2, 10, 10)
        assert GridCell(2, 2) in grid
        assert GridCell(10, 10) in grid
        assert GridCell(1, 5) not in grid
        assert GridCell(5, 11) not in grid


class TestNextCell:
    """Tests for single steps and wrap-around."""

    @pytest.fixture
    def grid(self):
        return Grid(2, 2, 10, 10)

    @pytest.mark.parametrize("direction,expected", [
        (UP, (5, 4)),
        (DOWN, (5, 6)),
        (LEFT, (4, 5)),
        (RIGHT, (6, 5)),
    ])
    def test_interior_step_moves_one_unit(self, grid, direction, expected):
        assert grid.next_cell(GridCell(5, 5), direction) == expected

    def test_right_edge_wraps_to_left(self, grid):
        assert grid.next_cell(GridCell(10, 6), RIGHT) == GridCell(2, 6)

    def test_left_edge_wraps_to_right(self, grid):
        assert grid.next_cell(GridCell(2, 6), LEFT) == GridCell(10, 6)

    def test_top_edge_wraps_to_bottom(self, grid):
        assert grid.next_cell(GridCell(4, 2), UP) == GridCell(4, 10)

    def test_bottom_edge_wraps_to_top(self, grid):
        assert grid.next_cell(GridCell(4, 10), DOWN) == GridCell(4, 2)

    def test_edge_only_wraps_in_direction_of_travel(self, grid):
        """A head on the right edge moving up does not wrap horizontally."""
        assert grid.next_cell(GridCell(10, 6), UP) == GridCell(10, 5)

    def test_unknown_direction_raises(self, grid):
        with pytest.raises(ValueError):
            grid.next_cell(GridCell(5, 5), "SIDEWAYS")
