#!/usr/bin/env python3
"""
Example usage of the sparselife package.
"""

from sparselife import PatternLibrary, Simulation, render


def main():
    """Demonstrate programmatic usage of the sparselife package."""
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    if glider:
        simulation = Simulation(glider.to_field())

        print("Initial state:")
        print(render(simulation.field))
        print(f"Population: {simulation.population}")
        print()

        # Run simulation for 8 generations
        for _ in range(8):
            simulation.step()
            print(f"Generation {simulation.generation}:")
            print(render(simulation.field))
            print(f"Population: {simulation.population}")

            if simulation.cycle_detected:
                print(f"Cycle detected! Length: {simulation.cycle_length}")
                break

            print()

        # Show statistics
        stats = simulation.get_statistics()
        print("Final statistics:")
        for key, value in stats.items():
            print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
