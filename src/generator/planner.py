"""
Word placement search.

Each word is placed in two phases under a fixed attempt budget:

1. Overlap seeking (skipped until a first word is on the grid): an exhaustive
   row-major scan of filled cells looks for a start position that makes one
   of the word's letters land on an identical existing letter. The first
   valid hit wins, so for a given grid state the result is deterministic and
   overlaps cluster around the densest regions.
2. Random placement: a uniformly random allowed direction and start cell
   inside the legal start range, retried until the budget runs out.

A word that exhausts the budget is omitted. Callers must accept that fewer
words than requested may end up in the grid.
"""

from typing import List, Optional, Sequence, Tuple

from .board import GridBuilder
from .directions import DIRECTION_VECTORS, end_position, start_range
from .models import ALL_DIRECTIONS, Direction, PlacedWord, Position
from .rng import RandomSource, choice, randbelow
from .selector import normalize_word


MAX_ATTEMPTS = 100
OVERLAP_RATIO = 0.7

WORD_COLORS: List[str] = [
    "#FF6B9D",  # Pink
    "#4DD0E1",  # Teal
    "#FFD54F",  # Yellow
    "#9C27B0",  # Purple
    "#FF9800",  # Orange
    "#4CAF50",  # Green
    "#2196F3",  # Blue
    "#E91E63",  # Deep pink
]
BONUS_COLOR = "#FFD700"


def word_color(index: int) -> str:
    """Palette colour for the word at placement index `index`."""
    return WORD_COLORS[index % len(WORD_COLORS)]


class PlacementPlanner:
    """
    Places words one at a time into a GridBuilder.

    Attributes:
        builder: The working matrix, mutated on every successful placement
        rng: Injected random source used by the random phase
        directions: Allowed placement directions, in scan order
        max_attempts: Attempt budget per word
        overlap_ratio: Share of the budget reserved for overlap seeking
        placed_count: Number of words placed so far
    """

    def __init__(
        self,
        builder: GridBuilder,
        rng: RandomSource,
        directions: Optional[Sequence[Direction]] = None,
        max_attempts: int = MAX_ATTEMPTS,
        overlap_ratio: float = OVERLAP_RATIO,
    ):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        if not 0.0 <= overlap_ratio <= 1.0:
            raise ValueError(f"overlap_ratio must be within [0, 1], got {overlap_ratio}")

        self.builder = builder
        self.rng = rng
        self.directions: List[Direction] = list(directions) if directions else list(ALL_DIRECTIONS)
        for direction in self.directions:
            if direction not in DIRECTION_VECTORS:
                raise ValueError(f"Unknown direction '{direction}'")
        self.max_attempts = max_attempts
        self.overlap_ratio = overlap_ratio
        self.placed_count = 0

    @property
    def overlap_attempts(self) -> int:
        """Attempts charged to the overlap phase."""
        return int(self.max_attempts * self.overlap_ratio)

    def find_overlap_position(self, word: str) -> Optional[Tuple[Position, Direction]]:
        """
        Scan for the first placement sharing at least one existing letter.

        Filled cells are visited in row-major order; for each letter of the
        word matching the cell, each allowed direction is tried with the start
        shifted back so that letter lands on the cell.
        """
        for cell in self.builder.filled_positions():
            existing = self.builder.get(cell)
            for match_index, letter in enumerate(word):
                if letter != existing:
                    continue
                for direction in self.directions:
                    d_row, d_col = DIRECTION_VECTORS[direction]
                    start = Position(cell.row - d_row * match_index, cell.col - d_col * match_index)
                    if not self.builder.can_place(word, start, direction):
                        continue
                    if self.builder.overlap_count(word, start, direction) > 0:
                        return start, direction
        return None

    def random_position(self, length: int, direction: Direction) -> Optional[Position]:
        """Uniform random start that keeps a word of `length` inside the grid."""
        rows, cols = start_range(self.builder.size, length, direction)
        if not rows or not cols:
            return None
        return Position(rows[randbelow(self.rng, len(rows))], cols[randbelow(self.rng, len(cols))])

    def place_word(self, word: str, index: int, is_bonus: bool = False) -> Optional[PlacedWord]:
        """
        Try to place `word`; return the PlacedWord, or None if it was omitted.

        `index` is the placement-order index. It keeps counting across main
        and bonus words (omitted ones included) and drives the word id and
        colour.
        """
        text = normalize_word(word)
        if not text or len(text) > self.builder.size:
            return None

        attempts_left = self.max_attempts
        position: Optional[Tuple[Position, Direction]] = None

        if self.placed_count > 0:
            position = self.find_overlap_position(text)
            if position is None:
                # Rescanning an unchanged grid gives the same answer
                attempts_left -= self.overlap_attempts

        while position is None and attempts_left > 0:
            attempts_left -= 1
            direction = choice(self.rng, self.directions)
            start = self.random_position(len(text), direction)
            if start is not None and self.builder.can_place(text, start, direction):
                position = (start, direction)

        if position is None:
            return None

        start, direction = position
        self.builder.place(text, start, direction)
        self.placed_count += 1

        return PlacedWord(
            id=f"bonus-{index}" if is_bonus else f"word-{index}",
            text=text,
            start_pos=start,
            end_pos=end_position(start, direction, len(text)),
            direction=direction,
            color=BONUS_COLOR if is_bonus else word_color(index),
            is_bonus=is_bonus,
        )
