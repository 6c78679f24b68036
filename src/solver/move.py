"""
Move Module - Slide moves and the move generator.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Tuple

from .board import Position, PuzzleState

# Fixed expansion order: up, down, left, right
DIRECTIONS: Tuple[Tuple[str, Position], ...] = (
    ("up", (-1, 0)),
    ("down", (1, 0)),
    ("left", (0, -1)),
    ("right", (0, 1)),
)

DIRECTION_DELTAS: Dict[str, Position] = dict(DIRECTIONS)


@dataclass(frozen=True)
class Move:
    """
    Slide one piece in one direction until it is blocked.

    Attributes:
        piece: Piece index
        direction: Direction name ("up", "down", "left", "right")
    """
    piece: int
    direction: str

    @property
    def delta(self) -> Position:
        return DIRECTION_DELTAS[self.direction]

    def as_tuple(self) -> Tuple[int, str]:
        """(piece index, direction name) as exposed to reporters."""
        return (self.piece, self.direction)

    def __str__(self) -> str:
        return f"({self.piece}, {self.direction})"


def slide(state: PuzzleState, piece: int, direction: str) -> PuzzleState:
    """
    Slide a piece until the next cell is out of bounds, a wall or another piece.

    A piece that cannot move returns an equal state.

    Args:
        state: Current state
        piece: Piece index
        direction: Direction name

    Returns:
        New PuzzleState
    """
    dr, dc = DIRECTION_DELTAS[direction]
    row, col = state.positions[piece]
    nxt = (row + dr, col + dc)
    while not state.is_out_of_bounds(nxt) and not state.is_occupied(nxt):
        row, col = nxt
        nxt = (row + dr, col + dc)

    if (row, col) == state.positions[piece]:
        return state

    positions = list(state.positions)
    positions[piece] = (row, col)
    return state.with_positions(tuple(positions))


def apply_move(state: PuzzleState, move: Move) -> PuzzleState:
    return slide(state, move.piece, move.direction)


def successors(state: PuzzleState) -> Iterator[Tuple[Move, PuzzleState]]:
    """
    Generate every (move, resulting state) pair in expansion order.

    Includes no-op moves, whose resulting state equals the input.
    """
    for piece in range(state.piece_count):
        for name, _ in DIRECTIONS:
            yield Move(piece, name), slide(state, piece, name)


def replay(state: PuzzleState, moves) -> PuzzleState:
    """Apply a sequence of moves in order and return the final state."""
    for move in moves:
        state = apply_move(state, move)
    return state
