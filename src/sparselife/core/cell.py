"""Cell coordinates and the Moore neighborhood."""

from dataclasses import dataclass
from typing import Tuple

# Row-major: x offset outer, y offset inner, self excluded
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


@dataclass(frozen=True, order=True)
class Cell:
    """A single grid position on the unbounded board.

    Cells are compared and hashed by value, so two cells with the same
    coordinates are interchangeable.
    """

    x: int
    y: int

    def translate(self, dx: int, dy: int) -> "Cell":
        """Return a new cell shifted by (dx, dy)."""
        return Cell(self.x + dx, self.y + dy)

    def neighbors(self) -> Tuple["Cell", ...]:
        """Return the 8 cells surrounding this one."""
        return neighbors(self)


def neighbors(cell: Cell) -> Tuple[Cell, ...]:
    """Enumerate the Moore neighborhood of a cell.

    The order is deterministic: ``x-1..x+1`` in the outer loop and
    ``y-1..y+1`` in the inner loop, skipping the cell itself.

    Args:
        cell: Center cell

    Returns:
        Tuple of the 8 neighboring cells
    """
    return tuple(Cell(cell.x + dx, cell.y + dy) for dx, dy in NEIGHBOR_OFFSETS)
