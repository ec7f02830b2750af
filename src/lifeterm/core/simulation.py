"""Generation-by-generation driver for a universe."""

from typing import Deque, Dict, Optional
from collections import deque
from dataclasses import dataclass
import logging

from .universe import Universe, DEFAULT_ROWS, DEFAULT_COLS
from .patterns import PatternLibrary

LOG = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Configuration for a simulation run.

    The defaults seed a horizontal blinker at (2, 1), (2, 2), (2, 3) on an
    18x18 universe and advance one generation every half second.
    """
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    interval: float = 0.5
    pattern: str = "Blinker"
    row_offset: int = 2
    col_offset: int = 1
    max_generations: Optional[int] = None


class Simulation:
    """Holds the current generation and replaces it on every step.

    Each step swaps in the universe returned by ``Universe.tick``; earlier
    generations are never modified.
    """

    HISTORY_SIZE = 1000

    def __init__(self, universe: Universe) -> None:
        """Initialize the simulation.

        Args:
            universe: Generation zero
        """
        self.universe = universe
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)
        self._state_history: Deque[bytes] = deque()
        self._seen_states: Dict[bytes, int] = {}
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

        self._record()

    @classmethod
    def from_config(cls, config: SimulationConfig, library: Optional[PatternLibrary] = None) -> "Simulation":
        """Build a seeded simulation.

        Args:
            config: Universe size and seed pattern placement
            library: Pattern source (defaults to the built-in library)

        Raises:
            ValueError: If the pattern name is unknown
            IndexError: If the pattern does not fit in the universe
        """
        library = library or PatternLibrary()
        pattern = library.get_pattern(config.pattern)
        if pattern is None:
            raise ValueError(f"Unknown pattern '{config.pattern}'")

        universe = Universe.new_empty(config.rows, config.cols)
        pattern.apply_to_universe(universe, config.row_offset, config.col_offset)
        LOG.debug(
            "Seeded %s at (%d, %d) on %dx%d universe",
            pattern.name, config.row_offset, config.col_offset, config.rows, config.cols,
        )
        return cls(universe)

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.universe.population

    @property
    def population_history(self) -> list:
        """Population of the most recent generations."""
        return list(self._population_history)

    @property
    def cycle_detected(self) -> bool:
        """Whether a generation has repeated an earlier one."""
        return self._cycle_detected

    @property
    def cycle_length(self) -> int:
        """Period of the detected cycle (0 if none)."""
        return self._cycle_length

    @property
    def cycle_start_generation(self) -> int:
        """First generation of the detected cycle (0 if none)."""
        return self._cycle_start_generation

    def step(self) -> Universe:
        """Advance by one generation.

        Returns:
            The new current universe
        """
        self.universe = self.universe.tick()
        self._generation += 1
        self._record()
        return self.universe

    def run(self, generations: int) -> Universe:
        """Advance a fixed number of generations."""
        for _ in range(generations):
            self.step()
        return self.universe

    def _record(self) -> None:
        """Track population and look for a repeated state."""
        self._population_history.append(self.population)

        if self._cycle_detected:
            return

        state = self.universe.cells.tobytes()
        if state in self._seen_states:
            first_occurrence = self._seen_states[state]
            self._cycle_detected = True
            self._cycle_length = self._generation - first_occurrence
            self._cycle_start_generation = first_occurrence
            LOG.debug(
                "Cycle of length %d detected at generation %d", self._cycle_length, self._generation
            )
            return

        self._seen_states[state] = self._generation
        self._state_history.append(state)

        if len(self._state_history) > self.HISTORY_SIZE:
            del self._seen_states[self._state_history.popleft()]
