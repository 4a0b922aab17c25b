"""Tests for Pattern and PatternLibrary."""

import pytest
from sparselife.core.cell import Cell
from sparselife.core.engine import advance, step
from sparselife.core.field import Field
from sparselife.core.patterns import Pattern, PatternLibrary


class TestPattern:
    """Test cases for the Pattern class."""

    def test_initialization(self):
        """Test pattern initialization."""
        cells = [(0, 0), (1, 0), (0, 1)]
        pattern = Pattern("Test", cells, "A test pattern", {"author": "test"})

        assert pattern.name == "Test"
        assert pattern.cells == cells
        assert pattern.description == "A test pattern"
        assert pattern.metadata == {"author": "test"}
        assert pattern.population == 3

    def test_initialization_defaults(self):
        """Test pattern initialization with default values."""
        pattern = Pattern("Simple", [(0, 0)])
        assert pattern.description == ""
        assert pattern.metadata == {}

    def test_to_field(self):
        """Test placing a pattern with an offset."""
        pattern = Pattern("L", [(0, 0), (1, 0), (1, 1)])

        assert pattern.to_field() == Field([(0, 0), (1, 0), (1, 1)])
        assert pattern.to_field(-2, 5) == Field([(-2, 5), (-1, 5), (-1, 6)])

    def test_bounding_box_and_size(self):
        """Test bounding box and size calculation."""
        pattern = Pattern("Test", [(1, 2), (3, 4), (2, 1)])
        assert pattern.get_bounding_box() == (1, 1, 3, 4)
        assert pattern.get_size() == (3, 4)

    def test_empty_pattern(self):
        """Test empty pattern helpers."""
        pattern = Pattern("Empty", [])
        assert pattern.get_bounding_box() is None
        assert pattern.get_size() == (0, 0)
        assert pattern.normalize().cells == []
        assert pattern.to_field().is_empty()

    def test_duplicate_cells_collapse(self):
        """Test repeated coordinates count once, as in a field."""
        pattern = Pattern("Twice", [(0, 0), (0, 0), (2, -1)])
        assert pattern.population == 2
        assert pattern.get_bounding_box() == (0, -1, 2, 0)
        assert pattern.normalize().cells == [(0, 1), (2, 0)]

    def test_normalize(self):
        """Test pattern normalization."""
        pattern = Pattern("Offset", [(5, 7), (6, 8)], metadata={"k": 1})
        normalized = pattern.normalize()

        assert normalized.cells == [(0, 0), (1, 1)]
        assert normalized.metadata == {"k": 1}
        assert normalized.metadata is not pattern.metadata

    def test_from_text(self):
        """Test building a pattern from a text board."""
        pattern = Pattern.from_text("Diag", "X.\n.X", "Two cells")

        assert pattern.cells == [(0, 0), (1, 1)]
        assert pattern.description == "Two cells"
        assert pattern.metadata["population"] == 2

    def test_from_field(self):
        """Test building a pattern from a field."""
        field = Field([Cell(2, 1), Cell(0, 3)])
        pattern = Pattern.from_field(field, "FromField")

        assert pattern.cells == [(0, 3), (2, 1)]
        assert pattern.to_field() == field


class TestPatternLibrary:
    """Test cases for the PatternLibrary class."""

    def test_builtin_patterns(self):
        """Test that built-in patterns are loaded."""
        library = PatternLibrary()
        names = library.list_patterns()

        for expected in ["Block", "Blinker", "Glider", "Pulsar", "Lightweight Spaceship", "Acorn"]:
            assert expected in names
        assert len(names) == 12

    @pytest.mark.parametrize(
        "name,population",
        [
            ("Block", 4),
            ("Beehive", 6),
            ("Loaf", 7),
            ("Blinker", 3),
            ("Toad", 6),
            ("Beacon", 8),
            ("Pulsar", 48),
            ("Glider", 5),
            ("Lightweight Spaceship", 9),
            ("R-pentomino", 5),
            ("Diehard", 7),
            ("Acorn", 7),
        ],
    )
    def test_builtin_populations(self, name, population):
        """Test built-in pattern cell counts."""
        assert PatternLibrary().get_pattern(name).population == population

    @pytest.mark.parametrize("name", ["Block", "Beehive", "Loaf"])
    def test_still_lifes(self, name):
        """Test still lifes do not change."""
        field = PatternLibrary().get_pattern(name).to_field()
        assert step(field) == field

    @pytest.mark.parametrize("name,period", [("Blinker", 2), ("Toad", 2), ("Beacon", 2), ("Pulsar", 3)])
    def test_oscillators(self, name, period):
        """Test oscillators return after their period and not before."""
        field = PatternLibrary().get_pattern(name).to_field()
        assert advance(field, period) == field
        assert step(field) != field

    def test_lightweight_spaceship(self):
        """Test the LWSS moves two cells every four generations."""
        field = PatternLibrary().get_pattern("Lightweight Spaceship").to_field()
        moved = advance(field, 4)

        assert moved.size() == 9
        assert moved.normalize() == field.normalize()
        assert moved != field

    def test_get_missing_pattern(self):
        """Test unknown names return None."""
        assert PatternLibrary().get_pattern("Nope") is None

    def test_add_pattern(self):
        """Test adding custom patterns."""
        library = PatternLibrary()
        library.add_pattern(Pattern("Custom", [(0, 0)]))

        assert library.get_pattern("Custom") is not None
        assert library.get_patterns_by_category()["Custom"] == ["Custom"]

    def test_categories(self):
        """Test category grouping drops empty categories."""
        categories = PatternLibrary().get_patterns_by_category()

        assert categories["Still Life"] == ["Block", "Beehive", "Loaf"]
        assert "Glider" in categories["Spaceships"]
        assert "Custom" not in categories
        assert list(categories) == ["Still Life", "Oscillators", "Spaceships", "Methuselahs"]

    def test_category_metadata(self):
        """Test built-ins carry their category and custom patterns default to Custom."""
        library = PatternLibrary()
        assert library.get_pattern("Pulsar").category == "Oscillators"
        assert Pattern("Loose", [(0, 0)]).category == "Custom"

        library.add_pattern(Pattern("Tagged", [(0, 0)], metadata={"category": "Spaceships"}))
        assert library.get_patterns_by_category()["Spaceships"][-1] == "Tagged"

    def test_libraries_are_independent(self):
        """Test libraries do not share state."""
        first = PatternLibrary()
        first.add_pattern(Pattern("Only Here", [(0, 0)]))
        assert PatternLibrary().get_pattern("Only Here") is None
