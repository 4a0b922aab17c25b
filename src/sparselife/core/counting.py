"""Neighbor counting strategies for sparse fields.

Every strategy returns the same sparse map: each cell adjacent to at least
one live cell, mapped to its number of live neighbors. Cells with zero live
neighbors never appear.
"""

import logging
from collections import defaultdict
from typing import Callable, DefaultDict, Dict, Iterable, List

import numpy as np
import torch
import torch.nn.functional as F

from .cell import Cell, neighbors
from .field import Field

logger = logging.getLogger(__name__)

NeighborCounts = Dict[Cell, int]
Counter = Callable[[Field], NeighborCounts]

# Padded window limit for count_neighbors_dense, 64 MB of float32
MAX_DENSE_AREA = 16_000_000

_MOORE_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)


def count_neighbors(field: Field) -> NeighborCounts:
    """Count live neighbors for every cell next to a live cell.

    Each live cell adds one to the count of each of its 8 neighbors, so the
    work is proportional to the population.

    Args:
        field: Current live cells

    Returns:
        Mapping from cell to live neighbor count (never 0)
    """
    counts: DefaultDict[Cell, int] = defaultdict(int)
    for cell in field.iterate():
        for neighbor in neighbors(cell):
            counts[neighbor] += 1
    return dict(counts)


def merge_counts(partials: Iterable[NeighborCounts]) -> NeighborCounts:
    """Sum partial neighbor counts computed over disjoint sets of live cells.

    Args:
        partials: Neighbor count maps to combine

    Returns:
        Combined neighbor count map
    """
    merged: DefaultDict[Cell, int] = defaultdict(int)
    for partial in partials:
        for cell, count in partial.items():
            merged[cell] += count
    return dict(merged)


def count_neighbors_partitioned(field: Field, partitions: int = 4) -> NeighborCounts:
    """Count neighbors over disjoint partitions of the field, then merge.

    Args:
        field: Current live cells
        partitions: Number of partitions to split the live cells into

    Returns:
        Neighbor count map identical to count_neighbors(field)

    Raises:
        ValueError: If partitions is less than 1
    """
    if partitions < 1:
        raise ValueError(f"partitions must be at least 1, got {partitions}")

    live: List[Cell] = list(field.iterate())
    chunks = [Field(live[i::partitions]) for i in range(partitions)]
    return merge_counts(count_neighbors(chunk) for chunk in chunks if not chunk.is_empty())


def count_neighbors_dense(field: Field, max_area: int = MAX_DENSE_AREA) -> NeighborCounts:
    """Count neighbors with a convolution over the live bounding box.

    The bounding box is padded by one cell on each side so every neighbor of
    a live cell falls inside the dense window. Memory grows with the area of
    the bounding box, not with the population.

    Args:
        field: Current live cells
        max_area: Largest padded window, in cells, that may be allocated

    Returns:
        Neighbor count map identical to count_neighbors(field)

    Raises:
        ValueError: If the padded bounding box is larger than max_area
    """
    bbox = field.bounding_box()
    if bbox is None:
        return {}

    min_x, min_y, max_x, max_y = bbox
    origin_x, origin_y = min_x - 1, min_y - 1
    rows, cols = max_x - min_x + 3, max_y - min_y + 3
    if rows * cols > max_area:
        raise ValueError(
            f"Bounding box {rows}x{cols} is too large for the dense counter (max {max_area} cells); "
            "use the sparse counter"
        )

    board = np.zeros((rows, cols), dtype=np.float32)
    for cell in field.iterate():
        board[cell.x - origin_x, cell.y - origin_y] = 1.0

    torch.set_num_threads(1)
    board_tensor = torch.from_numpy(board).unsqueeze(0).unsqueeze(0)
    convolved = F.conv2d(board_tensor, _MOORE_KERNEL, padding=1)
    counts = np.rint(convolved[0, 0].numpy()).astype(np.int64)

    xs, ys = np.nonzero(counts)
    return {
        Cell(int(x) + origin_x, int(y) + origin_y): int(counts[x, y])
        for x, y in zip(xs, ys)
    }


COUNTERS: Dict[str, Counter] = {
    "sparse": count_neighbors,
    "partitioned": count_neighbors_partitioned,
    "dense": count_neighbors_dense,
}


def get_counter(name: str) -> Counter:
    """Look up a counting strategy by name.

    Raises:
        ValueError: If no strategy has that name
    """
    try:
        counter = COUNTERS[name]
    except KeyError:
        raise ValueError(f"Unknown counter '{name}'. Available: {', '.join(COUNTERS)}") from None

    logger.debug("Using %s neighbor counter", name)
    return counter
