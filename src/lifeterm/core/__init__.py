"""Core cellular automaton logic."""

from .universe import Cell, Universe, neighbor_range, next_state
from .patterns import Pattern, PatternLibrary
from .simulation import Simulation, SimulationConfig

__all__ = [
    "Cell",
    "Universe",
    "neighbor_range",
    "next_state",
    "Pattern",
    "PatternLibrary",
    "Simulation",
    "SimulationConfig",
]
