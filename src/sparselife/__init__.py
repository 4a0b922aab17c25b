"""Conway's Game of Life on an unbounded, sparse grid."""

__version__ = "0.1.0"

from .core.cell import Cell, neighbors
from .core.field import Field
from .core.counting import count_neighbors
from .core.engine import step, advance
from .core.codec import parse, render
from .core.patterns import Pattern, PatternLibrary
from .core.simulation import Simulation, SimulationConfig

__all__ = [
    "Cell",
    "neighbors",
    "Field",
    "count_neighbors",
    "step",
    "advance",
    "parse",
    "render",
    "Pattern",
    "PatternLibrary",
    "Simulation",
    "SimulationConfig",
]
