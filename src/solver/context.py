"""
Solution Context Module - Shared context for strategy execution.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .board import PuzzleState

# Level runner budgets
DEFAULT_MAX_STATES = 10_000_000
DEFAULT_MAX_DEPTH = 59
DEFAULT_PROGRESS_INTERVAL = 100_000


@dataclass
class SolutionContext:
    """
    Shared context passed to strategies containing the puzzle state,
    search budgets and progress reporting.

    Exhausting a budget ends the search with a "not found" solution.
    Wall clock is only observed for throughput reporting.

    Attributes:
        state: Initial puzzle state to solve
        max_states: Ceiling on explored (dequeued) states
        max_depth: Paths longer than this are abandoned
        progress_interval: Report progress every this many explored states
        start_time: When computation started
        progress_callback: Optional callback(states_explored, states_per_sec)
    """
    state: PuzzleState
    max_states: int = DEFAULT_MAX_STATES
    max_depth: int = DEFAULT_MAX_DEPTH
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL
    start_time: float = field(default_factory=time.perf_counter)
    progress_callback: Optional[Callable[[int, float], None]] = None
    _last_checkpoint: float = field(default=0.0, init=False, repr=False)

    def __post_init__(self):
        self._last_checkpoint = self.start_time

    def budget_exhausted(self, states_explored: int) -> bool:
        """True once the explored-state ceiling is reached."""
        return states_explored >= self.max_states

    def too_deep(self, path_length: int) -> bool:
        return path_length > self.max_depth

    def checkpoint(self, states_explored: int) -> None:
        """
        Report progress if a checkpoint boundary was reached.

        Args:
            states_explored: States explored so far
        """
        if self.progress_interval <= 0 or states_explored % self.progress_interval:
            return
        now = time.perf_counter()
        elapsed = now - self._last_checkpoint
        speed = self.progress_interval / elapsed if elapsed > 0 else float("inf")
        self._last_checkpoint = now
        self.report_progress(states_explored, speed)

    def report_progress(self, states_explored: int, states_per_sec: float) -> None:
        if self.progress_callback:
            self.progress_callback(states_explored, states_per_sec)

    def elapsed_time(self) -> float:
        """
        Get seconds elapsed since computation started.

        Returns:
            Elapsed time in seconds
        """
        return time.perf_counter() - self.start_time
