"""Text format for boards.

A board is a block of lines. The line index is the cell's x coordinate and
the character index within the line is its y coordinate, so ``"X.\\n.X"``
holds the cells (0, 0) and (1, 1). Only the live marker means anything;
every other character is a dead cell.
"""

import numpy as np

from .cell import Cell
from .field import Field

LIVE_MARKER = "X"
DEAD_MARKER = "."
PADDING = 2
EMPTY_BOARD = "empty"


def _check_markers(live: str, dead: str) -> None:
    if len(live) != 1 or len(dead) != 1:
        raise ValueError(f"Markers must be single characters, got {live!r} and {dead!r}")
    if live == dead:
        raise ValueError(f"Live and dead markers must differ, both are {live!r}")


def parse(text: str, live: str = LIVE_MARKER) -> Field:
    """Parse a text board into a field.

    Unrecognized characters are treated as dead cells, so any text parses.

    Args:
        text: Board description
        live: Character marking a live cell

    Returns:
        Field with a cell for every live marker

    Raises:
        ValueError: If the live marker is not a single character
    """
    if len(live) != 1:
        raise ValueError(f"Live marker must be a single character, got {live!r}")

    field = Field()
    for x, line in enumerate(text.split("\n")):
        for y, char in enumerate(line):
            if char == live:
                field.insert(Cell(x, y))
    return field


def render(field: Field, padding: int = PADDING, live: str = LIVE_MARKER, dead: str = DEAD_MARKER) -> str:
    """Render a field as a text board.

    The board covers the bounding box of the live cells plus ``padding``
    dead cells on every side. An empty field renders as EMPTY_BOARD.

    Args:
        field: Field to render
        padding: Dead border width around the live cells
        live: Character for live cells
        dead: Character for dead cells

    Returns:
        Board text with rows joined by newlines

    Raises:
        ValueError: If the markers or padding are invalid
    """
    _check_markers(live, dead)
    if padding < 0:
        raise ValueError(f"Padding must be non-negative, got {padding}")

    bbox = field.bounding_box()
    if bbox is None:
        return EMPTY_BOARD

    min_x, min_y, max_x, max_y = bbox
    top, left = min_x - padding, min_y - padding
    rows = max_x - min_x + 1 + 2 * padding
    cols = max_y - min_y + 1 + 2 * padding

    board = np.full((rows, cols), dead, dtype="<U1")
    for cell in field.iterate():
        board[cell.x - top, cell.y - left] = live

    return "\n".join("".join(row) for row in board)
