"""
Tests for services/terminal_output.py - drawing with 1-based coordinates.
"""

import curses
import os
import sys
from unittest.mock import MagicMock, patch

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.grid import Grid, GridCell
from services.terminal_output import TerminalOutput, segment_char, FOOD_CHAR


@pytest.fixture
def window():
    window = MagicMock()
    window.getmaxyx.return_value = (24, 80)
    return window


@pytest.fixture
def output(window):
    return TerminalOutput(window, use_color=False)


def written(window):
    """Map (x, y) 1-based -> text for every addstr call."""
    return {
        (call.args[1] + 1, call.args[0] + 1): call.args[2]
        for call in window.addstr.call_args_list
    }


class TestSegmentChar:
    """The snake spells its own name."""

    def test_five_segments_spell_snake(self):
        assert "".join(segment_char(i, 5) for i in range(5)) == "Snake"

    def test_long_snake_pads_with_a(self):
        assert "".join(segment_char(i, 8) for i in range(8)) == "Snaaaake"

    def test_single_segment(self):
        assert segment_char(0, 1) == "S"


class TestTerminalOutput:
    """Tests for TerminalOutput."""

    def test_size_is_width_height(self, output):
        assert output.size() == (80, 24)

    def test_coordinates_are_one_based(self, output, window):
        output.draw_message("hi", (1, 1))
        window.addstr.assert_called_once_with(0, 0, "hi", curses.A_NORMAL)

    def test_draw_food(self, output, window):
        output.draw_food(GridCell(5, 7))
        assert written(window) == {(5, 7): FOOD_CHAR}

    def test_draw_food_none_is_noop(self, output, window):
        output.draw_food(None)
        window.addstr.assert_not_called()

    def test_draw_snake_and_erase_vacated_tail(self, output, window):
        body = [GridCell(5, 6), GridCell(6, 6), GridCell(7, 6), GridCell(8, 6), GridCell(9, 6)]
        output.draw_snake(body, vacated_tail=GridCell(10, 6))

        cells = written(window)
        assert cells[(10, 6)] == " "
        assert "".join(cells[(x, 6)] for x in range(5, 10)) == "Snake"

    def test_draw_border_surrounds_grid(self, output, window):
        grid = Grid(3, 3, 10, 8)
        output.draw_border(grid)

        cells = set(written(window))
        expected = set()
        for x in range(2, 12):
            expected.add((x, 2))
            expected.add((x, 9))
        for y in range(2, 10):
            expected.add((2, y))
            expected.add((11, y))
        assert cells == expected
        assert not any(cell in grid for cell in cells)

    def test_curses_error_is_ignored(self, output, window):
        window.addstr.side_effect = curses.error
        output.draw_message("x", (80, 24))

    def test_draw_banner_centres_lines(self, output, window):
        output.draw_banner(["ab", "abcd"])
        cells = written(window)
        assert cells == {(40, 12): "ab", (39, 13): "abcd"}

    def test_clear_and_flush(self, output, window):
        output.clear()
        output.flush()
        window.erase.assert_called_once()
        window.refresh.assert_called_once()

    @patch("services.terminal_output.curses.curs_set")
    def test_reset_shows_cursor(self, mock_curs_set, output, window):
        output.reset()
        window.erase.assert_called_once()
        window.refresh.assert_called_once()
        mock_curs_set.assert_called_once_with(1)
