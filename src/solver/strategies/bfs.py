"""
Breadth-First Search Strategy - Shortest move sequence by plain BFS.

States are marked visited when generated, so each state is queued at
most once and FIFO order dequeues them by non-decreasing path length.
The first goal dequeued therefore has a shortest path.

A level with no goal placements cannot be solved and returns at once
with nothing explored, like the other engines.
"""

import logging
import time
from collections import deque
from typing import Deque, Set, Tuple

from ..base import Path, SolverStrategy
from ..board import Position, PuzzleState
from ..context import SolutionContext
from ..goals import enumerate_goal_placements, goal_keys
from ..solution import Solution
from ..factory import register_strategy

logger = logging.getLogger(__name__)


@register_strategy
class BFSStrategy(SolverStrategy):
    """
    Single-source breadth-first search.

    Algorithm:
        1. Seed a FIFO worklist with the initial state and an empty path
        2. Dequeue; abandon paths over the depth ceiling
        3. Return the path if the state's key is a goal key
        4. Queue every unseen successor, marking it visited immediately
    """
    name = "bfs"
    description = "Breadth-first search (optimal) - Shortest path guaranteed"

    def solve(self, context: SolutionContext) -> Solution:
        start_time = time.perf_counter()
        initial = context.state

        placements = enumerate_goal_placements(initial)
        goals = goal_keys(placements)
        if not goals:
            logger.info(f"[{self.name}] Level {initial.level_id}: no goal placements")
            return self._build_solution((), False, 0, 0, start_time, context)

        queue: Deque[Tuple[PuzzleState, Path]] = deque([(initial, ())])
        visited: Set[Tuple[Position, ...]] = {initial.key}
        states_explored = 0

        while queue and not context.budget_exhausted(states_explored):
            states_explored += 1
            self._checkpoint(context, states_explored)

            state, path = queue.popleft()
            if context.too_deep(len(path)):
                continue

            if state.key in goals:
                return self._build_solution(
                    path, True, states_explored, len(placements), start_time, context
                )

            for move, successor in self.expand(state):
                if successor.key not in visited:
                    visited.add(successor.key)
                    queue.append((successor, path + (move,)))

        return self._build_solution(
            (), False, states_explored, len(placements), start_time, context
        )
