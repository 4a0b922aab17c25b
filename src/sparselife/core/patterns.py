"""Named Life patterns that can be placed on a field."""

from typing import Any, Dict, List, Optional, Tuple

from .codec import parse
from .field import Field

CUSTOM_CATEGORY = "Custom"


class Pattern:
    """A named arrangement of live cells.

    Cells are stored as (x, y) pairs in the board text convention: x is the
    row, y is the column.
    """

    def __init__(
        self,
        name: str,
        cells: List[Tuple[int, int]],
        description: str = "",
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.name = name
        self.cells = cells
        self.description = description
        self.metadata = metadata or {}

    @property
    def population(self) -> int:
        """Number of distinct live cells."""
        return self.to_field().size()

    @property
    def category(self) -> str:
        return self.metadata.get("category", CUSTOM_CATEGORY)

    def to_field(self, offset_x: int = 0, offset_y: int = 0) -> Field:
        """Place the pattern on a new field, shifted by (offset_x, offset_y)."""
        return Field((x + offset_x, y + offset_y) for x, y in self.cells)

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """(min_x, min_y, max_x, max_y) of the live cells, None when empty."""
        return self.to_field().bounding_box()

    def get_size(self) -> Tuple[int, int]:
        """Rows and columns spanned by the pattern, (0, 0) when empty."""
        bbox = self.get_bounding_box()
        if bbox is None:
            return (0, 0)

        min_x, min_y, max_x, max_y = bbox
        return (max_x - min_x + 1, max_y - min_y + 1)

    def normalize(self) -> "Pattern":
        """Return a copy of this pattern shifted so its top-left cell is (0, 0)."""
        cells = sorted((cell.x, cell.y) for cell in self.to_field().normalize())
        return Pattern(self.name, cells, self.description, self.metadata.copy())

    @classmethod
    def from_text(cls, name: str, text: str, description: str = "") -> "Pattern":
        """Build a pattern from a text board (see codec.parse)."""
        return cls.from_field(parse(text), name, description)

    @classmethod
    def from_field(cls, field: Field, name: str, description: str = "") -> "Pattern":
        """Build a pattern from the live cells of a field.

        Args:
            field: Source field
            name: Pattern name
            description: Optional description

        Returns:
            New Pattern with sorted cells and its population in metadata
        """
        cells = sorted((cell.x, cell.y) for cell in field.iterate())
        return cls(name, cells, description, {"population": len(cells)})


_PULSAR = "\n".join(
    [
        "..XXX...XXX..",
        ".............",
        "X....X.X....X",
        "X....X.X....X",
        "X....X.X....X",
        "..XXX...XXX..",
        ".............",
        "..XXX...XXX..",
        "X....X.X....X",
        "X....X.X....X",
        "X....X.X....X",
        ".............",
        "..XXX...XXX..",
    ]
)

# category -> (name, board, description)
_BUILTIN_PATTERNS = {
    "Still Life": [
        ("Block", "XX\nXX", "2x2 still life block"),
        ("Beehive", ".XX.\nX..X\n.XX.", "Beehive still life"),
        ("Loaf", ".XX.\nX..X\n.X.X\n..X.", "Loaf still life"),
    ],
    "Oscillators": [
        ("Blinker", "XXX", "Period-2 oscillator"),
        ("Toad", ".XXX\nXXX.", "Period-2 oscillator"),
        ("Beacon", "XX..\nXX..\n..XX\n..XX", "Period-2 oscillator"),
        ("Pulsar", _PULSAR, "Period-3 oscillator"),
    ],
    "Spaceships": [
        ("Glider", ".X.\n..X\nXXX", "Smallest spaceship, period-4"),
        ("Lightweight Spaceship", "X..X.\n....X\nX...X\n.XXXX", "LWSS - Period-4 spaceship"),
    ],
    "Methuselahs": [
        ("R-pentomino", ".XX\nXX.\n.X.", "Famous methuselah that stabilizes after 1103 generations"),
        ("Diehard", "......X.\nXX......\n.X...XXX", "Dies after exactly 130 generations"),
        ("Acorn", ".X.....\n...X...\nXX..XXX", "Takes 5206 generations to stabilize"),
    ],
}


class PatternLibrary:
    """In-memory collection of patterns, seeded with well-known ones."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        for category, entries in _BUILTIN_PATTERNS.items():
            for name, text, description in entries:
                pattern = Pattern.from_text(name, text, description)
                pattern.metadata["category"] = category
                self.add_pattern(pattern)

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern, replacing any pattern with the same name."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Look up a pattern by name, None if unknown."""
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        return list(self._patterns)

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Group pattern names by category.

        Built-in categories come first in their fixed order, then Custom.
        Categories without patterns are left out.
        """
        order = list(_BUILTIN_PATTERNS) + [CUSTOM_CATEGORY]
        categories: Dict[str, List[str]] = {category: [] for category in order}

        for name, pattern in self._patterns.items():
            categories.setdefault(pattern.category, []).append(name)

        return {category: names for category, names in categories.items() if names}
