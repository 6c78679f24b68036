"""
Goal Enumerator Module - Every line of cells that can hold the sentence.

A placement is a tuple of N positions, index-aligned with the pieces. For
each wall-free run of N contiguous cells both the scan order and the
reversed order are produced, so the sentence may read either way.
"""

import logging
from typing import FrozenSet, List, Tuple

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from .board import Position, PuzzleState

logger = logging.getLogger(__name__)

Placement = Tuple[Position, ...]


def wall_mask(state: PuzzleState) -> np.ndarray:
    """Boolean (rows, cols) array, True where a wall stands."""
    mask = np.zeros((state.rows, state.cols), dtype=bool)
    for row, col in state.walls:
        mask[row, col] = True
    return mask


def _open_starts(mask: np.ndarray, length: int, axis: int) -> np.ndarray:
    """
    Start cells of wall-free runs along one axis.

    Returns an (k, 2) array of (row, col) starts, ordered row by row for
    horizontal runs and column by column for vertical runs.
    """
    if length <= 0 or mask.shape[axis] < length:
        return np.empty((0, 2), dtype=int)

    blocked = sliding_window_view(mask, length, axis=axis).any(axis=-1)
    if axis == 1:
        return np.argwhere(~blocked)
    # argwhere on the transpose scans column-major: (col, row) pairs
    return np.argwhere(~blocked.T)[:, ::-1]


def enumerate_goal_placements(state: PuzzleState) -> List[Placement]:
    """
    Enumerate every goal placement for the state's piece count.

    Horizontal runs come first (each row, each valid start column), then
    vertical runs (each column, each valid start row). Each run yields
    the forward placement followed by the reversed one.

    Args:
        state: Any state of the puzzle instance

    Returns:
        List of placements, length 2 x number of wall-free lines
    """
    n = state.piece_count
    mask = wall_mask(state)
    placements: List[Placement] = []

    for row, col in _open_starts(mask, n, axis=1):
        run = tuple((int(row), int(col) + i) for i in range(n))
        placements.append(run)
        placements.append(run[::-1])

    for row, col in _open_starts(mask, n, axis=0):
        run = tuple((int(row) + i, int(col)) for i in range(n))
        placements.append(run)
        placements.append(run[::-1])

    logger.debug(f"Level {state.level_id}: {len(placements)} goal placements for {n} pieces")
    return placements


def count_possible_positions(state: PuzzleState) -> int:
    """Number of goal placements (2 per wall-free line)."""
    n = state.piece_count
    mask = wall_mask(state)
    lines = len(_open_starts(mask, n, axis=1)) + len(_open_starts(mask, n, axis=0))
    return 2 * lines


def build_goal_states(state: PuzzleState) -> List[PuzzleState]:
    """Turn every goal placement into a full goal PuzzleState."""
    return [state.with_positions(p) for p in enumerate_goal_placements(state)]


def goal_keys(placements: List[Placement]) -> FrozenSet[Placement]:
    """Set of canonical keys for goal membership tests."""
    return frozenset(placements)
