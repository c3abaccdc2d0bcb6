"""Word-search puzzle generation."""

from .models import (
    ALL_DIRECTIONS,
    Direction,
    Position,
    PlacedWord,
    Cell,
    Grid,
    DifficultyConfig,
    GeneratorConfig,
)
from .directions import DIRECTION_VECTORS, step, walk, end_position, start_range
from .rng import RandomSource, make_rng
from .selector import normalize_word, filter_candidates, select_words
from .board import GridBuilder
from .planner import PlacementPlanner, MAX_ATTEMPTS, OVERLAP_RATIO, WORD_COLORS, BONUS_COLOR
from .fill import FILLER_LETTERS, FILLER_WEIGHTS, random_filler_letter, fill_empty_cells
from .assembler import assemble_grid
from .generator import WordSearchGenerator, generate_grid

__all__ = [
    # Models
    "ALL_DIRECTIONS",
    "Direction",
    "Position",
    "PlacedWord",
    "Cell",
    "Grid",
    "DifficultyConfig",
    "GeneratorConfig",
    # Geometry
    "DIRECTION_VECTORS",
    "step",
    "walk",
    "end_position",
    "start_range",
    # Randomness
    "RandomSource",
    "make_rng",
    # Word selection
    "normalize_word",
    "filter_candidates",
    "select_words",
    # Placement
    "GridBuilder",
    "PlacementPlanner",
    "MAX_ATTEMPTS",
    "OVERLAP_RATIO",
    "WORD_COLORS",
    "BONUS_COLOR",
    # Filling
    "FILLER_LETTERS",
    "FILLER_WEIGHTS",
    "random_filler_letter",
    "fill_empty_cells",
    # Assembly
    "assemble_grid",
    "WordSearchGenerator",
    "generate_grid",
]
