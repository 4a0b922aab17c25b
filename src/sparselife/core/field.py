"""Sparse set of live cells for the unbounded Game of Life board."""

from collections.abc import Set as AbstractSet
from typing import FrozenSet, Iterable, Iterator, Optional, Set, Tuple, Union

from .cell import Cell

CellLike = Union[Cell, Tuple[int, int]]


def as_cell(value: CellLike) -> Cell:
    """Coerce a Cell or an (x, y) pair into a Cell.

    Raises:
        TypeError: If the value is neither a Cell nor a pair of ints
    """
    if isinstance(value, Cell):
        return value
    if isinstance(value, tuple) and len(value) == 2 and all(isinstance(v, int) for v in value):
        return Cell(value[0], value[1])
    raise TypeError(f"Expected a Cell or an (x, y) pair of ints, got {value!r}")


class Field:
    """The set of currently living cells.

    Any integer coordinate is valid and cells outside the set are dead.
    The board has no size, so memory is proportional to the population
    rather than to any grid area.
    """

    def __init__(self, cells: Optional[Iterable[CellLike]] = None) -> None:
        """Initialize a field.

        Args:
            cells: Optional initial live cells (Cells or (x, y) pairs)
        """
        self._cells: Set[Cell] = set()
        if cells is not None:
            for cell in cells:
                self.insert(cell)

    @classmethod
    def from_cells(cls, cells: Iterable[CellLike]) -> "Field":
        """Create a field from an iterable of cells or (x, y) pairs."""
        return cls(cells)

    @property
    def cells(self) -> FrozenSet[Cell]:
        """Immutable snapshot of the live cells."""
        return frozenset(self._cells)

    def insert(self, cell: CellLike) -> None:
        """Mark a cell as alive. Inserting a live cell again is a no-op."""
        self._cells.add(as_cell(cell))

    def contains(self, cell: CellLike) -> bool:
        """Check whether a cell is alive."""
        return as_cell(cell) in self._cells

    def is_empty(self) -> bool:
        """Check whether no cell is alive."""
        return not self._cells

    def size(self) -> int:
        """Number of living cells."""
        return len(self._cells)

    def iterate(self) -> Iterator[Cell]:
        """Iterate over the living cells in no particular order."""
        return iter(self._cells)

    def copy(self) -> "Field":
        """Return an independent copy of this field."""
        return Field(self._cells)

    def bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y) or None if the field is empty
        """
        if not self._cells:
            return None

        xs = [cell.x for cell in self._cells]
        ys = [cell.y for cell in self._cells]
        return (min(xs), min(ys), max(xs), max(ys))

    def translate(self, dx: int, dy: int) -> "Field":
        """Return a new field with every cell shifted by (dx, dy)."""
        return Field(cell.translate(dx, dy) for cell in self._cells)

    def normalize(self) -> "Field":
        """Return a new field shifted so its bounding box starts at (0, 0)."""
        bbox = self.bounding_box()
        if bbox is None:
            return Field()

        min_x, min_y, _, _ = bbox
        return self.translate(-min_x, -min_y)

    def __contains__(self, cell: object) -> bool:
        try:
            return self.contains(cell)  # type: ignore[arg-type]
        except TypeError:
            return False

    def __iter__(self) -> Iterator[Cell]:
        return self.iterate()

    def __len__(self) -> int:
        return self.size()

    def __eq__(self, other: object) -> bool:
        """Fields are equal when they hold the same live cells."""
        if isinstance(other, Field):
            return self._cells == other._cells
        if isinstance(other, AbstractSet):
            return self._cells == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        cells = ", ".join(f"({c.x}, {c.y})" for c in sorted(self._cells))
        return f"Field({{{cells}}})"
