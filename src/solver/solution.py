"""
Solution Module - Result of strategy computation and the per-level report.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from .board import PuzzleState
from .move import Move, replay


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of states dequeued from the worklist
        possible_positions: Number of goal placements for the level
        strategy_name: Name of strategy that computed this solution
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    possible_positions: int = 0
    strategy_name: str = ""


@dataclass
class Solution:
    """
    Result of a strategy computation.

    Attributes:
        moves: Ordered sequence of moves from the initial state
        found: True if the moves reach a goal
        metrics: Performance statistics
    """
    moves: List[Move] = field(default_factory=list)
    found: bool = False
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def move_count(self) -> int:
        """Number of moves in solution."""
        return len(self.moves)

    def final_state(self, initial: PuzzleState) -> PuzzleState:
        """State reached by replaying the moves from initial."""
        return replay(initial, self.moves)


class SolveReport(BaseModel):
    """Externally visible outcome of one level solve."""
    level_id: int
    strategy_used: str
    found: bool
    moves: List[Tuple[int, str]] = Field(default_factory=list)
    path_length: int = Field(0, ge=0)
    states_explored: int = Field(0, ge=0)
    possible_positions: int = Field(0, ge=0)
    time_taken_sec: float = 0.0
    error: Optional[str] = None

    def format_moves(self) -> str:
        return " ".join(f"({piece}, {direction})" for piece, direction in self.moves)

    def summary_lines(self) -> List[str]:
        """Console lines describing this result."""
        lines = [f"Solving Level {self.level_id}"]
        if self.error:
            lines.append(f"Error solving Level {self.level_id}: {self.error}")
            return lines
        lines.append(f"Possible positions for sentence: {self.possible_positions}")
        if self.found:
            lines += [
                f"Solution for Level {self.level_id}: {self.format_moves()}",
                f"Minimum moves for Level {self.level_id}: {self.path_length}",
                f"Time taken for Level {self.level_id}: {self.time_taken_sec:.3f} seconds",
            ]
        else:
            lines.append(f"No solution found for Level {self.level_id}")
        lines.append(f"Paths traversed for Level {self.level_id}: {self.states_explored}")
        return lines


def build_report(level_id: int, solution: Solution) -> SolveReport:
    """
    Convert a solution into the report handed to the output layer.

    Moves are empty when nothing was found.
    """
    moves = [m.as_tuple() for m in solution.moves] if solution.found else []
    return SolveReport(
        level_id=level_id,
        strategy_used=solution.metrics.strategy_name,
        found=solution.found,
        moves=moves,
        path_length=len(moves),
        states_explored=solution.metrics.states_explored,
        possible_positions=solution.metrics.possible_positions,
        time_taken_sec=solution.metrics.computation_time_ms / 1000,
    )
