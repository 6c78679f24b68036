"""
Heuristic Library - Cost-to-go estimates for the A* strategy.

Every heuristic takes the current state, a fixed reference goal state and
the full list of goal placements, and returns a non-negative integer.
Pieces are compared index by index.

Only the distance-based estimates are admissible on their own. The line
conflict and interaction counts are not distances, so the combined
maximum can overestimate.
"""

from typing import Callable, List, Sequence, Tuple

from .board import Position, PuzzleState
from .goals import Placement

Heuristic = Callable[[PuzzleState, PuzzleState, Sequence[Placement]], int]

LINE_CONFLICT_COST = 2


def manhattan(a: Position, b: Position) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def chebyshev(a: Position, b: Position) -> int:
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def nearest_goal_distance(state: PuzzleState, reference: PuzzleState,
                          placements: Sequence[Placement]) -> int:
    """Sum over pieces of the Manhattan distance to the closest goal cell for that index."""
    if not placements:
        return 0
    return sum(
        min(manhattan(pos, placement[i]) for placement in placements)
        for i, pos in enumerate(state.positions)
    )


def goal_count_deficit(state: PuzzleState, reference: PuzzleState,
                       placements: Sequence[Placement]) -> int:
    """Pieces not yet on their reference goal cell."""
    in_place = sum(
        1 for pos, goal in zip(state.positions, reference.positions) if pos == goal
    )
    return state.piece_count - in_place


def _line_cells(start: Position, end: Position) -> List[Position]:
    """Cells after start on the interpolated line to end, end included."""
    dr = end[0] - start[0]
    dc = end[1] - start[1]
    steps = max(abs(dr), abs(dc))
    return [
        (start[0] + round(dr * t / steps), start[1] + round(dc * t / steps))
        for t in range(1, steps + 1)
    ]


def _has_clear_line(state: PuzzleState, piece: int, target: Position) -> bool:
    start = state.positions[piece]
    if start == target:
        return True
    for cell in _line_cells(start, target):
        if cell in state.walls:
            return False
        other = state.piece_at(cell)
        if other is not None and other != piece:
            return False
    return True


def reachable_goal_deficit(state: PuzzleState, reference: PuzzleState,
                           placements: Sequence[Placement]) -> int:
    """Pieces with no unobstructed line to any goal cell for their index."""
    reachable = 0
    for i in range(state.piece_count):
        targets = {placement[i] for placement in placements}
        if any(_has_clear_line(state, i, target) for target in targets):
            reachable += 1
    return state.piece_count - reachable


def line_conflicts(state: PuzzleState, reference: PuzzleState,
                   placements: Sequence[Placement]) -> int:
    """
    Penalty for pairs that share a line with their goals but sit in the wrong order.

    Each inverted pair costs LINE_CONFLICT_COST, checked once for rows and
    once for columns.
    """
    penalty = 0
    positions = state.positions
    goals = reference.positions
    n = state.piece_count
    for i in range(n):
        for j in range(i + 1, n):
            (ri, ci), (rj, cj) = positions[i], positions[j]
            (gri, gci), (grj, gcj) = goals[i], goals[j]
            if ri == rj == gri == grj and (ci - cj) * (gci - gcj) < 0:
                penalty += LINE_CONFLICT_COST
            if ci == cj == gci == gcj and (ri - rj) * (gri - grj) < 0:
                penalty += LINE_CONFLICT_COST
    return penalty


def chebyshev_distance(state: PuzzleState, reference: PuzzleState,
                       placements: Sequence[Placement]) -> int:
    return sum(chebyshev(pos, goal) for pos, goal in zip(state.positions, reference.positions))


def interaction_count(state: PuzzleState, reference: PuzzleState,
                      placements: Sequence[Placement]) -> int:
    """Unordered piece pairs currently sharing a row or a column."""
    positions = state.positions
    count = 0
    for i in range(len(positions)):
        for j in range(i + 1, len(positions)):
            if positions[i][0] == positions[j][0] or positions[i][1] == positions[j][1]:
                count += 1
    return count


HEURISTICS: Tuple[Heuristic, ...] = (
    nearest_goal_distance,
    goal_count_deficit,
    reachable_goal_deficit,
    line_conflicts,
    chebyshev_distance,
    interaction_count,
)


def combined_heuristic(state: PuzzleState, reference: PuzzleState,
                       placements: Sequence[Placement]) -> int:
    """Maximum of all heuristics."""
    return max(h(state, reference, placements) for h in HEURISTICS)


def reference_distance(state: PuzzleState, reference: PuzzleState) -> int:
    """Manhattan distance sum to the reference goal, used to break f-cost ties."""
    return sum(manhattan(pos, goal) for pos, goal in zip(state.positions, reference.positions))
