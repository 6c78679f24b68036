"""
Puzzle State Module - Immutable snapshot of a word slide puzzle.
"""

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple

# (row, col), 0-indexed
Position = Tuple[int, int]


def reverse_sentence(sentence: str) -> str:
    """Reverse the word order of a sentence ("a b c" -> "c b a")."""
    return " ".join(reversed(sentence.split()))


@dataclass(frozen=True)
class PuzzleState:
    """
    Immutable puzzle state representation.

    Only ``positions`` changes while searching; every other field is fixed
    for the lifetime of a puzzle instance. Two states with the same
    positions are the same search node.

    Attributes:
        rows: Number of grid rows
        cols: Number of grid columns
        walls: Wall cells (never occupied by a piece)
        positions: Piece positions, index-aligned with words
        words: One word per piece
        target_sentence: Sentence the pieces must spell
        reversed_sentence: Target sentence with word order reversed
        level_id: Level identifier, carried for reporting only
    """
    rows: int
    cols: int
    walls: FrozenSet[Position]
    positions: Tuple[Position, ...]
    words: Tuple[str, ...]
    target_sentence: str
    reversed_sentence: str = ""
    level_id: int = field(default=0, compare=False)

    @classmethod
    def create(cls, rows: int, cols: int, words: Sequence[str],
               positions: Iterable[Position],
               walls: Iterable[Position] = (),
               target_sentence: Optional[str] = None,
               level_id: int = 0) -> 'PuzzleState':
        """
        Build a state from plain sequences.

        Args:
            rows: Grid rows
            cols: Grid columns
            words: Piece words in index order
            positions: Piece start positions, index-aligned with words
            walls: Wall cells
            target_sentence: Sentence to spell (defaults to words joined by spaces)
            level_id: Level identifier for reporting

        Returns:
            PuzzleState instance
        """
        sentence = target_sentence if target_sentence is not None else " ".join(words)
        return cls(
            rows=rows,
            cols=cols,
            walls=frozenset(tuple(w) for w in walls),
            positions=tuple(tuple(p) for p in positions),
            words=tuple(words),
            target_sentence=sentence,
            reversed_sentence=reverse_sentence(sentence),
            level_id=level_id,
        )

    @property
    def key(self) -> Tuple[Position, ...]:
        """Canonical key used for deduplication and goal membership."""
        return self.positions

    @property
    def piece_count(self) -> int:
        return len(self.positions)

    def with_positions(self, positions: Tuple[Position, ...]) -> 'PuzzleState':
        """Return a copy of this state with different piece positions."""
        return replace(self, positions=positions)

    def is_wall(self, pos: Position) -> bool:
        return pos in self.walls

    def is_out_of_bounds(self, pos: Position) -> bool:
        row, col = pos
        return row < 0 or row >= self.rows or col < 0 or col >= self.cols

    def is_occupied(self, pos: Position) -> bool:
        """Check if a cell holds a wall or any piece."""
        return pos in self.walls or pos in self.positions

    def piece_at(self, pos: Position) -> Optional[int]:
        """Index of the piece at pos, or None."""
        try:
            return self.positions.index(pos)
        except ValueError:
            return None

    def is_solved(self) -> bool:
        """
        Check whether the pieces spell the target sentence along a line.

        Each row (left to right) and each column (top to bottom) is read
        until the first gap after a run of pieces starts. Only that first
        run is compared, against both the sentence and its reverse.
        """
        for row in range(self.rows):
            if self._matches(self._first_run((row, col) for col in range(self.cols))):
                return True
        for col in range(self.cols):
            if self._matches(self._first_run((row, col) for row in range(self.rows))):
                return True
        return False

    def _first_run(self, cells: Iterable[Position]) -> List[str]:
        run: List[str] = []
        for pos in cells:
            index = self.piece_at(pos)
            if index is not None:
                run.append(self.words[index])
            elif run:
                break
        return run

    def _matches(self, run: List[str]) -> bool:
        joined = " ".join(run)
        return joined == self.target_sentence or joined == self.reversed_sentence

    def render(self) -> str:
        """
        Render the grid as text, one line per row.

        Pieces show their index, walls '#', empty cells '.'.
        """
        lines = []
        for row in range(self.rows):
            cells = []
            for col in range(self.cols):
                index = self.piece_at((row, col))
                if index is not None:
                    cells.append(str(index))
                elif (row, col) in self.walls:
                    cells.append("#")
                else:
                    cells.append(".")
            lines.append(" ".join(cells))
        return "\n".join(lines)
