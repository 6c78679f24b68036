"""
Solver Worker Module for Word Slide Solver

Runs level solves on a thread pool. Workers share nothing but a lock that
serializes console output, so results from concurrent levels never
interleave.
"""

import logging
import threading
import concurrent.futures
from typing import Callable, List, Optional, Sequence

from src.levels import PuzzleDefinition
from src.solver import SolveReport, build_report, solve_puzzle


# Configure module logger
logger = logging.getLogger(__name__)

ReportPrinter = Callable[[SolveReport], None]


class SolverWorker:
    """
    Unit of work for a single level.

    Solves its level with the configured strategy and budgets, stores
    the resulting SolveReport and hands it to the printer while holding
    the shared output lock. A solve that raises still produces a report,
    with found=False and the error message set.

    Example:
        lock = threading.Lock()
        worker = SolverWorker(definition, "bfs", output_lock=lock)
        report = worker.run()
        print(report.found)
    """

    def __init__(
        self,
        definition: PuzzleDefinition,
        strategy_name: str,
        output_lock: threading.Lock,
        printer: Optional[ReportPrinter] = None,
        max_states: Optional[int] = None,
        max_depth: Optional[int] = None,
        progress_interval: Optional[int] = None,
    ):
        """
        Initialize the solver worker.

        Args:
            definition: Level to solve
            strategy_name: Registered strategy name
            output_lock: Lock shared by all workers for reporting
            printer: Called with the report under the lock (optional)
            max_states: Explored-state ceiling (context default if None)
            max_depth: Path length ceiling (context default if None)
            progress_interval: Progress checkpoint spacing (context default if None)
        """
        self.definition = definition
        self.strategy_name = strategy_name
        self.output_lock = output_lock
        self.printer = printer
        self.report: Optional[SolveReport] = None

        self._context_options = {
            key: value for key, value in (
                ("max_states", max_states),
                ("max_depth", max_depth),
                ("progress_interval", progress_interval),
            ) if value is not None
        }

    def run(self) -> SolveReport:
        """Solve the level, publish the report and return it."""
        level_id = self.definition.level_id

        try:
            solution = solve_puzzle(
                self.definition.to_state(),
                self.strategy_name,
                progress_callback=self._on_progress,
                **self._context_options,
            )
            self.report = build_report(level_id, solution)
        except Exception as e:
            logger.exception(f"Level {level_id}: solve failed")
            self.report = SolveReport(
                level_id=level_id,
                strategy_used=self.strategy_name,
                found=False,
                error=str(e),
            )

        with self.output_lock:
            if self.printer:
                self.printer(self.report)

        return self.report

    def _on_progress(self, states_explored: int, states_per_sec: float) -> None:
        with self.output_lock:
            logger.info(
                f"Level {self.definition.level_id}: Paths traversed: {states_explored}, "
                f"Speed: {states_per_sec:.2f} paths/sec"
            )


def run_levels(
    definitions: Sequence[PuzzleDefinition],
    strategy_name: str,
    printer: Optional[ReportPrinter] = None,
    max_workers: int = 0,
    **options,
) -> List[SolveReport]:
    """
    Solve every level concurrently and wait for all of them.

    Args:
        definitions: Levels to solve
        strategy_name: Registered strategy name
        printer: Called once per finished level, serialized by a shared lock
        max_workers: Maximum concurrent workers (0 = one per level)
        **options: max_states / max_depth / progress_interval

    Returns:
        Reports in the same order as definitions
    """
    output_lock = threading.Lock()
    workers = [
        SolverWorker(d, strategy_name, output_lock, printer=printer, **options)
        for d in definitions
    ]
    pool_size = max_workers if max_workers > 0 else max(len(workers), 1)

    logger.info(f"Solving {len(workers)} levels with '{strategy_name}', {pool_size} at a time")

    with concurrent.futures.ThreadPoolExecutor(
        max_workers=pool_size, thread_name_prefix="level"
    ) as executor:
        return list(executor.map(SolverWorker.run, workers))
