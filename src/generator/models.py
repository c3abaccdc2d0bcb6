"""Data models for puzzle generation."""

from typing import Dict, List, Literal, NamedTuple, Optional, Tuple
from pydantic import BaseModel, Field, model_validator


# Type aliases
Direction = Literal["horizontal", "vertical", "diagonal", "diagonalReverse"]
FillStrategyName = Literal["random", "thematic"]

ALL_DIRECTIONS: List[Direction] = ["horizontal", "vertical", "diagonal", "diagonalReverse"]


class Position(NamedTuple):
    """A cell coordinate on the grid."""
    row: int
    col: int


class PlacedWord(BaseModel):
    """A word hidden in the grid, with its true geometry."""
    id: str
    text: str = Field(..., min_length=1)
    found: bool = False
    start_pos: Position
    end_pos: Position
    direction: Direction
    color: str
    is_bonus: bool = False

    def cells(self) -> List[Position]:
        """Positions covered by the word, from start to end."""
        from .directions import walk
        return walk(self.start_pos, self.direction, len(self.text))


class Cell(BaseModel):
    """A single letter cell of the grid."""
    letter: str = Field(..., min_length=1, max_length=1)
    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)
    is_selected: bool = False
    is_found: bool = False

    @property
    def position(self) -> Position:
        return Position(self.row, self.col)


class Grid(BaseModel):
    """The finished puzzle: a square matrix of cells plus the placed words."""
    cells: List[List[Cell]]
    size: int
    words: List[PlacedWord] = Field(default_factory=list)

    def cell_at(self, row: int, col: int) -> Optional[Cell]:
        """Return the cell at (row, col), or None when out of bounds."""
        if row < 0 or row >= len(self.cells) or col < 0 or col >= len(self.cells[row]):
            return None
        return self.cells[row][col]

    @property
    def visible_words(self) -> List[PlacedWord]:
        """Words shown to the player."""
        return [w for w in self.words if not w.is_bonus]

    @property
    def bonus_words(self) -> List[PlacedWord]:
        """Words placed in the grid but left off the player's list."""
        return [w for w in self.words if w.is_bonus]


class DifficultyConfig(BaseModel):
    """Generation parameters for one difficulty tier."""
    grid_size: int
    word_count: int = Field(..., ge=0)
    word_length_range: Tuple[int, int]
    allowed_directions: List[Direction] = Field(default_factory=lambda: list(ALL_DIRECTIONS), min_length=1)
    fill_strategy: FillStrategyName = "random"

    @model_validator(mode="after")
    def _check_length_range(self) -> "DifficultyConfig":
        min_len, max_len = self.word_length_range
        if min_len < 1 or min_len > max_len:
            raise ValueError(
                f"word_length_range must satisfy 1 <= min <= max, got {list(self.word_length_range)}"
            )
        return self


class GeneratorConfig(BaseModel):
    """Configuration file contents: tiers, theme word lists and bonus words."""
    difficulties: Dict[str, DifficultyConfig]
    themes: Dict[str, List[str]] = Field(default_factory=dict)
    bonus_words: List[str] = Field(default_factory=list)
    seed: Optional[int] = None
