"""
Solver Package - State-space search for the word slide puzzle.

Pieces carrying one word each slide on a walled grid until blocked. The
solver finds a move sequence that lines the pieces up, in one row or
column, so they spell the target sentence forwards or backwards.

Public API:
    - PuzzleState: Immutable puzzle representation
    - Move: Slide move (piece index, direction)
    - slide(): Move generator
    - enumerate_goal_placements(): Goal enumerator
    - Solution / SolutionMetrics: Result of a strategy run
    - SolveReport / build_report(): Externally visible per-level result
    - SolutionContext: Budgets and progress reporting
    - SolverStrategy: Abstract base for strategies
    - create_strategy(): Factory function
    - get_strategy_names(): List available strategies

Usage:
    from src.solver import PuzzleState, SolutionContext, create_strategy

    state = PuzzleState.create(4, 4, ["ab", "cd"], [(0, 0), (3, 3)])
    strategy = create_strategy("bfs")
    solution = strategy.solve(SolutionContext(state=state))

    for move in solution.moves:
        print(f"Slide piece {move.piece} {move.direction}")
"""

# Core data structures
from .board import Position, PuzzleState, reverse_sentence
from .move import DIRECTIONS, Move, apply_move, replay, slide, successors
from .goals import (
    build_goal_states,
    count_possible_positions,
    enumerate_goal_placements,
    goal_keys,
)
from .solution import Solution, SolutionMetrics, SolveReport, build_report
from .context import SolutionContext

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
    solve_puzzle,
)

# Import strategies to register them
from . import strategies

__all__ = [
    # Data structures
    "Position",
    "PuzzleState",
    "reverse_sentence",
    "DIRECTIONS",
    "Move",
    "apply_move",
    "replay",
    "slide",
    "successors",
    "build_goal_states",
    "count_possible_positions",
    "enumerate_goal_placements",
    "goal_keys",
    "Solution",
    "SolutionMetrics",
    "SolveReport",
    "build_report",
    "SolutionContext",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
    "solve_puzzle",
]
