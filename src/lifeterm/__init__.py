"""Conway's Game of Life on a fixed-size universe, drawn in the terminal."""

__version__ = "0.1.0"

from .core.universe import Cell, Universe
from .core.patterns import Pattern, PatternLibrary
from .core.simulation import Simulation, SimulationConfig

__all__ = ["Cell", "Universe", "Pattern", "PatternLibrary", "Simulation", "SimulationConfig"]
