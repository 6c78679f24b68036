"""
Level Loader Module

Reads level definitions from the CSV layout used by the level editor:

    level,sentence,type,row,col
    1,hello world,Word,0,0
    1,hello world,Word,3,5
    1,hello world,Wall,2,2

Word rows give piece start positions in sentence order; Wall rows give
wall cells. Every definition is validated before it reaches the solver.
"""

import csv
import logging
from pathlib import Path
from typing import Dict, List, Tuple, Union

from pydantic import BaseModel, Field, ValidationError, model_validator

from src.solver import PuzzleState

logger = logging.getLogger(__name__)

DEFAULT_GRID_ROWS = 8
DEFAULT_GRID_COLS = 8

CSV_FIELDS = ("level", "sentence", "type", "row", "col")


class LevelFormatError(ValueError):
    """Raised when a level file or level definition is malformed."""


class PuzzleDefinition(BaseModel):
    """One level as handed to the solver."""
    level_id: int = Field(..., ge=0)
    target_sentence: str = Field(..., min_length=1)
    piece_positions: List[Tuple[int, int]]
    wall_positions: List[Tuple[int, int]] = Field(default_factory=list)
    grid_rows: int = Field(DEFAULT_GRID_ROWS, ge=1)
    grid_cols: int = Field(DEFAULT_GRID_COLS, ge=1)

    @property
    def words(self) -> List[str]:
        return self.target_sentence.split()

    @model_validator(mode="after")
    def check_layout(self) -> "PuzzleDefinition":
        words = self.words
        if len(words) != len(self.piece_positions):
            raise ValueError(
                f"level {self.level_id}: {len(words)} words but "
                f"{len(self.piece_positions)} piece positions"
            )
        if len(set(self.piece_positions)) != len(self.piece_positions):
            raise ValueError(f"level {self.level_id}: duplicate piece positions")

        walls = set(self.wall_positions)
        for row, col in list(self.piece_positions) + list(walls):
            if not (0 <= row < self.grid_rows and 0 <= col < self.grid_cols):
                raise ValueError(f"level {self.level_id}: ({row}, {col}) is out of bounds")
        on_wall = walls.intersection(self.piece_positions)
        if on_wall:
            raise ValueError(f"level {self.level_id}: pieces on walls at {sorted(on_wall)}")
        return self

    def to_state(self) -> PuzzleState:
        """Build the initial PuzzleState for this level."""
        return PuzzleState.create(
            rows=self.grid_rows,
            cols=self.grid_cols,
            words=self.words,
            positions=self.piece_positions,
            walls=self.wall_positions,
            target_sentence=self.target_sentence,
            level_id=self.level_id,
        )


def parse_levels(lines, grid_rows: int = DEFAULT_GRID_ROWS,
                 grid_cols: int = DEFAULT_GRID_COLS) -> List[PuzzleDefinition]:
    """
    Parse CSV lines (header first) into validated definitions.

    Args:
        lines: Iterable of CSV text lines
        grid_rows: Grid rows for every level
        grid_cols: Grid columns for every level

    Returns:
        Definitions sorted by level id

    Raises:
        LevelFormatError: On malformed rows or invalid levels
    """
    reader = csv.reader(lines)
    header = next(reader, None)
    if header is None:
        raise LevelFormatError("level file is empty")

    raw: Dict[int, dict] = {}
    for line_no, row in enumerate(reader, start=2):
        if not row or not any(cell.strip() for cell in row):
            continue
        if len(row) < len(CSV_FIELDS):
            raise LevelFormatError(f"line {line_no}: expected {len(CSV_FIELDS)} fields, got {len(row)}")

        level_str, sentence, kind, row_str, col_str = (cell.strip() for cell in row[:5])
        try:
            level_id = int(level_str)
            pos = (int(row_str), int(col_str))
        except ValueError as e:
            raise LevelFormatError(f"line {line_no}: {e}") from e

        level = raw.setdefault(level_id, {
            "level_id": level_id,
            "target_sentence": sentence,
            "piece_positions": [],
            "wall_positions": [],
            "grid_rows": grid_rows,
            "grid_cols": grid_cols,
        })
        if "Word" in kind:
            level["piece_positions"].append(pos)
        elif "Wall" in kind:
            level["wall_positions"].append(pos)
        else:
            logger.warning(f"Line {line_no}: unknown entry type '{kind}', skipped")

    definitions = []
    for level_id in sorted(raw):
        try:
            definitions.append(PuzzleDefinition(**raw[level_id]))
        except ValidationError as e:
            raise LevelFormatError(f"level {level_id} is invalid: {e}") from e

    logger.info(f"Loaded {len(definitions)} levels")
    return definitions


def load_levels(path: Union[str, Path], grid_rows: int = DEFAULT_GRID_ROWS,
                grid_cols: int = DEFAULT_GRID_COLS) -> List[PuzzleDefinition]:
    """
    Load level definitions from a CSV file.

    Args:
        path: CSV file path
        grid_rows: Grid rows for every level
        grid_cols: Grid columns for every level

    Returns:
        Definitions sorted by level id
    """
    path = Path(path)
    with open(path, 'r', encoding='utf-8', newline='') as f:
        return parse_levels(f, grid_rows=grid_rows, grid_cols=grid_cols)
