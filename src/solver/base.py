"""
Base Strategy Module - Abstract base class for search strategies.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Iterator, List, Tuple

from .board import PuzzleState
from .context import SolutionContext
from .move import Move, successors
from .solution import Solution, SolutionMetrics

logger = logging.getLogger(__name__)

# Moves recorded along a search path
Path = Tuple[Move, ...]


class SolverStrategy(ABC):
    """
    Abstract base class for all search strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes. Each solve owns its own
    visited registry and worklists; strategies keep no state between
    solves.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for the CLI
    """
    name: str = "base"
    description: str = "Base strategy"

    @abstractmethod
    def solve(self, context: SolutionContext) -> Solution:
        """
        Search from context.state for a goal configuration.

        Must stop once context.budget_exhausted() is true and return a
        not-found solution.

        Args:
            context: Solution context with initial state and budgets

        Returns:
            Solution with moves and metrics
        """
        pass

    def expand(self, state: PuzzleState) -> Iterator[Tuple[Move, PuzzleState]]:
        """
        Generate successors in fixed order: piece index, then up/down/left/right.

        No-op moves are included; the visited registry discards them.
        """
        return successors(state)

    def _checkpoint(self, context: SolutionContext, states_explored: int) -> None:
        context.checkpoint(states_explored)
        if context.progress_interval > 0 and states_explored % context.progress_interval == 0:
            logger.debug(
                f"[{self.name}] Level {context.state.level_id}: "
                f"{states_explored} states explored"
            )

    def _build_solution(
        self,
        path: Path,
        found: bool,
        states_explored: int,
        possible_positions: int,
        start_time: float,
        context: SolutionContext
    ) -> Solution:
        """Build Solution object from search results."""
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        moves: List[Move] = list(path) if found else []

        if found:
            logger.info(
                f"[{self.name}] Level {context.state.level_id}: solution with "
                f"{len(moves)} moves, {states_explored} states explored"
            )
        else:
            logger.info(
                f"[{self.name}] Level {context.state.level_id}: no solution, "
                f"{states_explored} states explored"
            )

        return Solution(
            moves=moves,
            found=found,
            metrics=SolutionMetrics(
                computation_time_ms=elapsed_ms,
                states_explored=states_explored,
                possible_positions=possible_positions,
                strategy_name=self.name
            )
        )
