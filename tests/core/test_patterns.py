"""Tests for the Pattern and PatternLibrary classes."""

import pytest

from lifeterm.core.patterns import Pattern, PatternLibrary
from lifeterm.core.universe import Cell, Universe


class TestPattern:
    """Test cases for the Pattern class."""

    def test_initialization(self):
        """Test pattern initialization."""
        cells = [(0, 0), (0, 1), (0, 2)]
        pattern = Pattern("Blinker", cells, "Period-2 oscillator")

        assert pattern.name == "Blinker"
        assert pattern.cells == cells
        assert pattern.description == "Period-2 oscillator"

    def test_apply_to_universe(self):
        """Test applying a pattern with offsets."""
        universe = Universe.new_empty(10, 10)
        pattern = Pattern("Blinker", [(0, 0), (0, 1), (0, 2)])

        pattern.apply_to_universe(universe, row_offset=2, col_offset=1)

        assert universe.alive_cells() == [(2, 1), (2, 2), (2, 3)]

    def test_apply_keeps_existing_cells(self):
        """Test applying a pattern does not clear other live cells."""
        universe = Universe.new_empty(10, 10)
        universe.set_cell(9, 9, Cell.ALIVE)

        Pattern("Dot", [(0, 0)]).apply_to_universe(universe)

        assert universe.alive_cells() == [(0, 0), (9, 9)]

    def test_apply_out_of_bounds_raises(self):
        """Test a pattern that does not fit fails instead of clipping."""
        universe = Universe.new_empty(5, 5)
        pattern = Pattern("Blinker", [(0, 0), (0, 1), (0, 2)])

        with pytest.raises(IndexError):
            pattern.apply_to_universe(universe, row_offset=0, col_offset=3)

    def test_bounding_box_and_size(self):
        """Test bounding box and size calculations."""
        pattern = Pattern("Test", [(1, 2), (3, 5), (2, 4)])

        assert pattern.get_bounding_box() == (1, 2, 3, 5)
        assert pattern.get_size() == (3, 4)

    def test_empty_pattern(self):
        """Test an empty pattern has a degenerate bounding box."""
        pattern = Pattern("Empty", [])
        assert pattern.get_bounding_box() == (0, 0, 0, 0)
        assert pattern.get_size() == (1, 1)


class TestPatternLibrary:
    """Test cases for the PatternLibrary class."""

    def test_builtin_patterns(self):
        """Test the built-in patterns are available."""
        library = PatternLibrary()
        names = library.list_patterns()

        for name in ["Beacon", "Beehive", "Blinker", "Block", "Glider", "Toad"]:
            assert name in names
        assert names == sorted(names)

    def test_get_unknown_pattern(self):
        """Test unknown names return None."""
        assert PatternLibrary().get_pattern("NonExistentPattern") is None

    def test_add_pattern(self):
        """Test registering a custom pattern."""
        library = PatternLibrary()
        custom = Pattern("Dot", [(0, 0)])

        library.add_pattern(custom)

        assert library.get_pattern("Dot") is custom

    @pytest.mark.parametrize("name", ["Block", "Beehive"])
    def test_still_lifes_are_stable(self, name):
        """Test still life patterns survive a tick unchanged."""
        universe = Universe.new_empty(10, 10)
        PatternLibrary().get_pattern(name).apply_to_universe(universe, 3, 3)

        assert universe.tick() == universe

    @pytest.mark.parametrize("name", ["Blinker", "Toad", "Beacon"])
    def test_oscillators_have_period_two(self, name):
        """Test period-2 oscillators change once and return after two ticks."""
        universe = Universe.new_empty(10, 10)
        PatternLibrary().get_pattern(name).apply_to_universe(universe, 3, 3)

        first = universe.tick()
        assert first != universe
        assert first.tick() == universe

    def test_glider_moves(self):
        """Test the glider reappears one cell down and right after four ticks."""
        library = PatternLibrary()
        glider = library.get_pattern("Glider")
        universe = Universe.new_empty(12, 12)
        glider.apply_to_universe(universe, 1, 1)

        for _ in range(4):
            universe = universe.tick()

        expected = Universe.new_empty(12, 12)
        glider.apply_to_universe(expected, 2, 2)
        assert universe == expected
