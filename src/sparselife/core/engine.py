"""Generation transition for Conway's Game of Life."""

import logging

from .counting import Counter, count_neighbors
from .field import Field

logger = logging.getLogger(__name__)

BIRTH_COUNT = 3
SURVIVAL_COUNT = 2


def step(field: Field, counter: Counter = count_neighbors) -> Field:
    """Compute the next generation.

    Rules, evaluated only over cells that have at least one live neighbor:
    - Any cell with exactly 3 live neighbors is alive next generation
    - A live cell with exactly 2 live neighbors survives
    - All other cells die or stay dead

    The input field is left untouched.

    Args:
        field: Current generation
        counter: Neighbor counting strategy

    Returns:
        New field holding the next generation
    """
    counts = counter(field)
    next_field = Field()

    for cell, count in counts.items():
        if count == BIRTH_COUNT or (count == SURVIVAL_COUNT and field.contains(cell)):
            next_field.insert(cell)

    logger.debug("Stepped %d live cells (%d candidates) to %d", field.size(), len(counts), next_field.size())
    return next_field


def advance(field: Field, generations: int, counter: Counter = count_neighbors) -> Field:
    """Apply step() a number of times.

    Args:
        field: Starting generation
        generations: Number of generations to advance
        counter: Neighbor counting strategy

    Returns:
        New field after the given number of generations

    Raises:
        ValueError: If generations is negative
    """
    if generations < 0:
        raise ValueError(f"generations must be non-negative, got {generations}")

    current = field.copy()
    for _ in range(generations):
        current = step(current, counter)
    return current
