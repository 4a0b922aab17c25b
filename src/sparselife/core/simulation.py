"""Generation-by-generation driver around the pure step engine."""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, Dict, FrozenSet, List, Optional, Tuple

import numpy as np

from .cell import Cell
from .counting import get_counter
from .engine import step
from .field import Field

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""

    max_generations: int = 10000
    counter: str = "sparse"
    history_size: int = 100
    state_history_size: int = 1000


class Simulation:
    """Holds the current field and tracks its evolution.

    Each step replaces the current field with a freshly computed one; fields
    are never modified in place. Cycle detection compares exact sets of live
    cells, so translated repeats (spaceships) are not cycles.
    """

    def __init__(self, field: Field, config: Optional[SimulationConfig] = None) -> None:
        """Initialize the simulation.

        Args:
            field: Starting generation (copied)
            config: Optional configuration, defaults to SimulationConfig()

        Raises:
            ValueError: If config names an unknown counter
        """
        self.config = config or SimulationConfig()
        self._counter = get_counter(self.config.counter)
        self._field = field.copy()
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=self.config.history_size)
        self._state_history: Deque[FrozenSet[Cell]] = deque(maxlen=self.config.state_history_size)
        self._seen_states: Dict[FrozenSet[Cell], int] = {}
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

        self._update_population_history()

    @property
    def field(self) -> Field:
        """Copy of the current generation; changing it does not affect the simulation."""
        return self._field.copy()

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._field.size()

    @property
    def population_history(self) -> List[int]:
        """History of population counts."""
        return list(self._population_history)

    @property
    def cycle_detected(self) -> bool:
        """Whether a cycle has been detected."""
        return self._cycle_detected

    @property
    def cycle_length(self) -> int:
        """Length of detected cycle (0 if no cycle)."""
        return self._cycle_length

    @property
    def cycle_start_generation(self) -> int:
        """Generation where cycle started (0 if no cycle)."""
        return self._cycle_start_generation

    def step(self) -> Field:
        """Advance the simulation by one generation.

        Returns:
            Copy of the new current field
        """
        self._check_for_cycles()

        self._field = step(self._field, self._counter)

        self._generation += 1
        self._update_population_history()
        return self._field.copy()

    def _update_population_history(self) -> None:
        self._population_history.append(self.population)

    def _check_for_cycles(self) -> None:
        """Check if the current state has been seen before."""
        if self._cycle_detected:
            return

        current_state = self._field.cells

        if current_state in self._seen_states:
            first_occurrence = self._seen_states[current_state]
            self._cycle_detected = True
            self._cycle_length = self._generation - first_occurrence
            self._cycle_start_generation = first_occurrence
            logger.debug(
                "Cycle of length %d detected at generation %d", self._cycle_length, self._generation
            )
            return

        # Forget the oldest state once the history window is full
        if self._state_history and len(self._state_history) == self._state_history.maxlen:
            oldest = self._state_history[0]
            if self._seen_states.get(oldest) == self._generation - len(self._state_history):
                del self._seen_states[oldest]

        self._seen_states[current_state] = self._generation
        self._state_history.append(current_state)

    def reset(self, field: Optional[Field] = None) -> None:
        """Reset the simulation.

        Args:
            field: New starting generation; keeps the current field when omitted
        """
        if field is not None:
            self._field = field.copy()

        self._generation = 0
        self._population_history.clear()
        self._state_history.clear()
        self._seen_states.clear()
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

        self._update_population_history()

    def run_until_stable(self, max_generations: Optional[int] = None) -> Tuple[int, str]:
        """Run simulation until it becomes stable or cycles.

        Args:
            max_generations: Maximum generations to run, defaults to the config value

        Returns:
            Tuple of (final_generation, reason) where reason is one of:
            'cycle', 'extinction', 'max_generations'
        """
        if max_generations is None:
            max_generations = self.config.max_generations

        if self.population == 0:
            return self._generation, "extinction"

        for _ in range(max_generations):
            self.step()

            if self._cycle_detected:
                return self._generation, "cycle"

            if self.population == 0:
                return self._generation, "extinction"

        return self._generation, "max_generations"

    def get_population_change_rate(self, window_size: int = 10) -> float:
        """Calculate recent population change rate.

        Args:
            window_size: Number of recent generations to consider

        Returns:
            Average population change per generation
        """
        recent_history = list(self._population_history)[-window_size:]
        if len(recent_history) < 2:
            return 0.0

        changes = np.diff(recent_history)
        return float(np.mean(changes))

    def get_statistics(self) -> Dict[str, Any]:
        """Get comprehensive simulation statistics."""
        bbox = self._field.bounding_box()

        stats: Dict[str, Any] = {
            "generation": self._generation,
            "population": self.population,
            "population_change_rate": self.get_population_change_rate(),
            "population_history": list(self._population_history),
            "cycle_detected": self._cycle_detected,
            "cycle_length": self._cycle_length,
            "cycle_start_generation": self._cycle_start_generation,
            "counter": self.config.counter,
        }

        if bbox:
            stats["bounding_box"] = bbox
            box_rows = bbox[2] - bbox[0] + 1
            box_cols = bbox[3] - bbox[1] + 1
            stats["bounding_box_size"] = (box_rows, box_cols)
            stats["bounding_box_area"] = box_rows * box_cols
        else:
            stats["bounding_box"] = None
            stats["bounding_box_size"] = (0, 0)
            stats["bounding_box_area"] = 0

        return stats
