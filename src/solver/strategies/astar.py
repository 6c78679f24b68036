"""
A* Strategy - Best-first search guided by the combined heuristic.

Nodes are ordered by f = g + h, where h is the combined heuristic measured
against the first goal placement. Equal f values fall back to a scaled
Manhattan distance to that same goal, then to insertion order.

Closed states are never reopened, even when a cheaper path turns up later.
The combined heuristic is not guaranteed consistent, so returned paths
are not guaranteed shortest.
"""

import heapq
import itertools
import logging
import time
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from ..base import Path, SolverStrategy
from ..board import Position, PuzzleState
from ..context import SolutionContext
from ..goals import enumerate_goal_placements
from ..heuristics import combined_heuristic, reference_distance
from ..solution import Solution
from ..factory import register_strategy

logger = logging.getLogger(__name__)


@dataclass(order=True)
class AStarNode:
    """
    Node in the A* open list.

    Ordered by (f_cost, tiebreak, sequence); state and path do not take
    part in comparisons.

    Attributes:
        f_cost: Path length plus heuristic estimate
        tiebreak: Scaled distance to the reference goal (smaller first)
        sequence: Insertion counter for deterministic ordering
        state: Puzzle state
        path: Moves taken to reach this state
    """
    f_cost: int
    tiebreak: float
    sequence: int
    state: PuzzleState = field(compare=False)
    path: Path = field(compare=False)

    @property
    def g_cost(self) -> int:
        return len(self.path)


@register_strategy
class AStarStrategy(SolverStrategy):
    """
    Heuristic best-first search.

    Parameters:
        tiebreak_scale: Multiplier applied to the reference distance
            used to order nodes with equal f (default 0.001)
    """
    name = "astar"
    description = "A* search (informed) - Max of six heuristics, fast but not always shortest"

    def __init__(self, tiebreak_scale: float = 0.001):
        self.tiebreak_scale = tiebreak_scale

    def solve(self, context: SolutionContext) -> Solution:
        start_time = time.perf_counter()
        initial = context.state

        placements = enumerate_goal_placements(initial)
        possible_positions = len(placements)
        if not placements:
            logger.info(f"[{self.name}] Level {initial.level_id}: no goal placements")
            return self._build_solution((), False, 0, 0, start_time, context)

        goal_states = {initial.with_positions(p) for p in placements}
        reference = initial.with_positions(placements[0])
        counter = itertools.count()

        open_list: List[AStarNode] = []
        heapq.heappush(open_list, self._make_node(initial, (), reference, placements, counter))
        closed: Dict[Tuple[Position, ...], int] = {}
        states_explored = 0

        while open_list and not context.budget_exhausted(states_explored):
            node = heapq.heappop(open_list)
            state = node.state
            if state.key in closed:
                continue

            states_explored += 1
            self._checkpoint(context, states_explored)

            if context.too_deep(node.g_cost):
                continue

            if state in goal_states:
                return self._build_solution(
                    node.path, True, states_explored, possible_positions, start_time, context
                )

            closed[state.key] = node.g_cost

            for move, successor in self.expand(state):
                if successor.key in closed:
                    continue
                heapq.heappush(
                    open_list,
                    self._make_node(successor, node.path + (move,), reference, placements, counter)
                )

        return self._build_solution(
            (), False, states_explored, possible_positions, start_time, context
        )

    def _make_node(self, state: PuzzleState, path: Path, reference: PuzzleState,
                   placements, counter) -> AStarNode:
        h = combined_heuristic(state, reference, placements)
        return AStarNode(
            f_cost=len(path) + h,
            tiebreak=reference_distance(state, reference) * self.tiebreak_scale,
            sequence=next(counter),
            state=state,
            path=path,
        )
