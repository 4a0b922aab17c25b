"""Core Game of Life logic."""

from .cell import Cell, neighbors
from .field import Field
from .counting import count_neighbors, count_neighbors_dense, count_neighbors_partitioned, merge_counts
from .engine import step, advance
from .codec import parse, render
from .patterns import Pattern, PatternLibrary
from .simulation import Simulation, SimulationConfig

__all__ = [
    "Cell",
    "neighbors",
    "Field",
    "count_neighbors",
    "count_neighbors_dense",
    "count_neighbors_partitioned",
    "merge_counts",
    "step",
    "advance",
    "parse",
    "render",
    "Pattern",
    "PatternLibrary",
    "Simulation",
    "SimulationConfig",
]
