"""Tests for the Simulation driver."""

import pytest
from sparselife.core.codec import parse
from sparselife.core.field import Field
from sparselife.core.patterns import PatternLibrary
from sparselife.core.simulation import Simulation, SimulationConfig


class TestSimulation:
    """Test cases for the Simulation class."""

    def test_initialization(self):
        """Test simulation initialization."""
        simulation = Simulation(Field())

        assert simulation.generation == 0
        assert simulation.population == 0
        assert simulation.population_history == [0]
        assert not simulation.cycle_detected
        assert simulation.cycle_length == 0
        assert simulation.cycle_start_generation == 0
        assert simulation.config == SimulationConfig()

    def test_field_is_copied(self):
        """Test the caller's field is never modified."""
        field = parse("XXX")
        simulation = Simulation(field)
        simulation.step()

        assert field == parse("XXX")
        assert simulation.field != field

    def test_unknown_counter(self):
        """Test configs naming unknown counters are rejected."""
        with pytest.raises(ValueError):
            Simulation(Field(), SimulationConfig(counter="nope"))

    def test_still_life_block(self):
        """Test that a block pattern is detected as a period-1 cycle."""
        simulation = Simulation(parse("XX\nXX"))

        generation, reason = simulation.run_until_stable(100)

        assert reason == "cycle"
        assert simulation.cycle_length == 1
        assert simulation.cycle_start_generation == 0
        assert generation == 2
        assert simulation.population == 4

    def test_oscillator_blinker(self):
        """Test blinker is detected as a period-2 cycle."""
        simulation = Simulation(parse("XXX"))

        generation, reason = simulation.run_until_stable(100)

        assert reason == "cycle"
        assert simulation.cycle_length == 2
        assert simulation.population_history == [3] * (generation + 1)

    def test_extinction(self):
        """Test extinction is reported."""
        simulation = Simulation(Field([(0, 0), (0, 1)]))

        generation, reason = simulation.run_until_stable(100)

        assert reason == "extinction"
        assert generation == 1
        assert simulation.population == 0

    def test_already_extinct(self):
        """Test an empty field finishes immediately."""
        generation, reason = Simulation(Field()).run_until_stable()
        assert (generation, reason) == (0, "extinction")

    def test_glider_never_cycles(self):
        """Test a translating spaceship runs to the generation limit."""
        glider = PatternLibrary().get_pattern("Glider").to_field()
        simulation = Simulation(glider, SimulationConfig(max_generations=40))

        generation, reason = simulation.run_until_stable()

        assert reason == "max_generations"
        assert generation == 40
        assert simulation.field == glider.translate(10, 10)

    def test_step_returns_current_field(self):
        """Test step hands back the new current generation."""
        simulation = Simulation(parse("XXX"))
        result = simulation.step()

        assert result == simulation.field
        assert simulation.generation == 1

    def test_returned_fields_are_copies(self):
        """Test editing a returned field cannot corrupt state or cycle history."""
        simulation = Simulation(parse("XX\nXX"))

        simulation.field.insert((10, 10))
        stepped = simulation.step()
        stepped.insert((20, 20))

        assert simulation.population == 4
        assert simulation.field == parse("XX\nXX")

        _, reason = simulation.run_until_stable(10)
        assert reason == "cycle"
        assert simulation.cycle_length == 1

    def test_dense_counter(self):
        """Test the simulation with the convolution counter."""
        field = PatternLibrary().get_pattern("R-pentomino").to_field()
        sparse = Simulation(field)
        dense = Simulation(field, SimulationConfig(counter="dense"))

        for _ in range(20):
            sparse.step()
            dense.step()

        assert dense.field == sparse.field

    def test_reset(self):
        """Test reset clears progress and can swap the field."""
        simulation = Simulation(parse("XXX"))
        simulation.run_until_stable(10)

        simulation.reset()
        assert simulation.generation == 0
        assert not simulation.cycle_detected
        assert simulation.population_history == [3]

        simulation.reset(parse("XX\nXX"))
        assert simulation.population == 4

    def test_history_size(self):
        """Test population history is bounded."""
        glider = PatternLibrary().get_pattern("Glider").to_field()
        simulation = Simulation(glider, SimulationConfig(history_size=5))

        for _ in range(20):
            simulation.step()

        assert simulation.population_history == [5] * 5

    def test_small_state_history(self):
        """Test cycles longer than the state window are not detected."""
        pulsar = PatternLibrary().get_pattern("Pulsar").to_field()
        simulation = Simulation(pulsar, SimulationConfig(state_history_size=2))

        _, reason = simulation.run_until_stable(30)

        assert reason == "max_generations"

    def test_population_change_rate(self):
        """Test population change rate."""
        simulation = Simulation(Field([(0, 0), (0, 1), (5, 5)]))
        assert simulation.get_population_change_rate() == 0.0

        simulation.step()
        assert simulation.get_population_change_rate() == -3.0

    def test_statistics(self):
        """Test statistics dictionary."""
        simulation = Simulation(Field([(1, 2), (3, 5)]))
        stats = simulation.get_statistics()

        assert stats["generation"] == 0
        assert stats["population"] == 2
        assert stats["bounding_box"] == (1, 2, 3, 5)
        assert stats["bounding_box_size"] == (3, 4)
        assert stats["bounding_box_area"] == 12
        assert stats["counter"] == "sparse"

        simulation.step()
        stats = simulation.get_statistics()
        assert stats["bounding_box"] is None
        assert stats["bounding_box_area"] == 0
