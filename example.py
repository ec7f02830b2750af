#!/usr/bin/env python3
"""
Example usage of the lifeterm package.
"""

from lifeterm import Cell, Simulation, Universe


def main():
    """Evolve a small hand-seeded universe and print each generation."""
    universe = Universe.new_empty(8, 8)

    # Glider in the top-left corner
    for row, col in [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)]:
        universe.set_cell(row, col, Cell.ALIVE)

    simulation = Simulation(universe)

    print("Initial state:")
    print(simulation.universe)

    for _ in range(12):
        simulation.step()
        print(f"Generation {simulation.generation} (population {simulation.population}):")
        print(simulation.universe)

        if simulation.cycle_detected:
            print(f"Cycle detected! Length: {simulation.cycle_length}")
            break


if __name__ == "__main__":
    main()
