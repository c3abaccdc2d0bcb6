from typing import Any, List, Optional, Sequence
from pydantic import BaseModel, ConfigDict, Field

from .assembler import assemble_grid
from .board import GridBuilder
from .fill import fill_empty_cells
from .models import DifficultyConfig, Grid, PlacedWord
from .planner import MAX_ATTEMPTS, OVERLAP_RATIO, PlacementPlanner
from .rng import make_rng
from .selector import normalize_word, select_words


class WordSearchGenerator(BaseModel):
    """
    Builds word-search grids.

    Every call to `generate_grid` works on its own private matrix, so one
    generator can serve several puzzles and generators share no state.

    Attributes:
        seed: Optional random seed for reproducibility
        rng: Optional injected random source; overrides `seed` when given
        max_attempts: Placement attempt budget per word
        overlap_ratio: Share of the budget spent seeking overlaps
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    seed: Optional[int] = None
    rng: Optional[Any] = Field(default=None, exclude=True)
    max_attempts: int = Field(default=MAX_ATTEMPTS, ge=1)
    overlap_ratio: float = Field(default=OVERLAP_RATIO, ge=0.0, le=1.0)
    _rng: Any = None

    def model_post_init(self, __context) -> None:
        """Initialize the random source after model creation."""
        self._rng = self.rng if self.rng is not None else make_rng(self.seed)

    def generate_grid(
        self,
        words: Sequence[str],
        config: DifficultyConfig,
        bonus_words: Sequence[str] = (),
    ) -> Grid:
        """
        Generate a complete, fully filled grid.

        Main words are sampled from `words` per `config` and placed first;
        bonus words are then placed without length filtering, continuing the
        same placement-order index. A bonus word whose text is already in the
        grid is skipped. Words that cannot be placed are left out.

        Args:
            words: Candidate theme words
            config: Difficulty tier to honour
            bonus_words: Extra words hidden in the grid but not listed to the player

        Returns:
            The generated Grid

        Raises:
            ValueError: If grid_size is not positive, or if `words` is empty
                while word_count asks for words
        """
        if config.grid_size <= 0:
            raise ValueError(f"grid_size must be positive, got {config.grid_size}")
        if not words and config.word_count > 0:
            raise ValueError(
                f"Cannot select {config.word_count} words from an empty word list"
            )

        builder = GridBuilder(config.grid_size)
        planner = PlacementPlanner(
            builder,
            self._rng,
            directions=config.allowed_directions,
            max_attempts=self.max_attempts,
            overlap_ratio=self.overlap_ratio,
        )

        selected = select_words(words, config, self._rng)
        placed: List[PlacedWord] = []

        for index, word in enumerate(selected):
            placed_word = planner.place_word(word, index)
            if placed_word is not None:
                placed.append(placed_word)

        for offset, word in enumerate(bonus_words):
            if normalize_word(word) in {w.text for w in placed}:
                continue
            placed_word = planner.place_word(word, len(selected) + offset, is_bonus=True)
            if placed_word is not None:
                placed.append(placed_word)

        fill_empty_cells(builder, self._rng, config.fill_strategy)
        return assemble_grid(builder, placed)


def generate_grid(
    words: Sequence[str],
    config: DifficultyConfig,
    bonus_words: Sequence[str] = (),
    seed: Optional[int] = None,
    rng: Optional[Any] = None,
) -> Grid:
    """Generate one grid with a throwaway generator."""
    generator = WordSearchGenerator(seed=seed, rng=rng)
    return generator.generate_grid(words, config, bonus_words)
