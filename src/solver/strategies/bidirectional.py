"""
Bidirectional Search Strategy - Forward BFS meeting a multi-source goal frontier.

The forward frontier starts at the initial state. The backward frontier is
seeded with every goal placement at once. The search runs while both
frontiers are non-empty and always dequeues the forward side, so the
backward frontier is never expanded: it only holds the goal keys the
forward side has to meet, and an empty one (no goal placements) ends the
search before anything is explored.

On meeting, the forward path is returned as is. It always starts at the
initial state, so no splicing is needed.
"""

import logging
import time
from collections import deque
from typing import Deque, Set, Tuple

from ..base import Path, SolverStrategy
from ..board import Position, PuzzleState
from ..context import SolutionContext
from ..goals import build_goal_states
from ..solution import Solution
from ..factory import register_strategy

logger = logging.getLogger(__name__)

Frontier = Deque[Tuple[PuzzleState, Path]]
Visited = Set[Tuple[Position, ...]]


@register_strategy
class BidirectionalStrategy(SolverStrategy):
    """
    Bidirectional breadth-first search.

    The forward side keeps a FIFO frontier and visited set. A dequeued
    forward state whose key is among the backward seeds ends the search.
    """
    name = "bidirectional"
    description = "Bidirectional BFS - Forward search against all goal placements"

    def solve(self, context: SolutionContext) -> Solution:
        start_time = time.perf_counter()
        initial = context.state

        goal_states = build_goal_states(initial)
        possible_positions = len(goal_states)

        forward: Frontier = deque([(initial, ())])
        forward_visited: Visited = {initial.key}

        backward: Frontier = deque((goal, ()) for goal in goal_states)
        backward_visited: Visited = {goal.key for goal in goal_states}

        states_explored = 0

        while forward and backward and not context.budget_exhausted(states_explored):
            states_explored += 1
            self._checkpoint(context, states_explored)

            state, path = forward.popleft()

            if context.too_deep(len(path)):
                continue

            if state.key in backward_visited:
                logger.debug(
                    f"[{self.name}] Level {initial.level_id}: frontiers met "
                    f"at depth {len(path)}"
                )
                return self._build_solution(
                    path, True, states_explored, possible_positions, start_time, context
                )

            for move, successor in self.expand(state):
                if successor.key not in forward_visited:
                    forward_visited.add(successor.key)
                    forward.append((successor, path + (move,)))

        return self._build_solution(
            (), False, states_explored, possible_positions, start_time, context
        )
