"""Test word filtering, sampling and the injected random helpers."""

import random

import pytest

from src.generator import DifficultyConfig, filter_candidates, normalize_word, select_words
from src.generator.rng import choice, make_rng, randbelow, shuffled


class ScriptedRandom:
    """Random source replaying a fixed list of values."""

    def __init__(self, values):
        self.values = list(values)

    def random(self) -> float:
        return self.values.pop(0)


def config(**overrides) -> DifficultyConfig:
    values = dict(grid_size=8, word_count=3, word_length_range=(4, 6))
    values.update(overrides)
    return DifficultyConfig(**values)


class TestFilterCandidates:
    """Length and grid-size filtering."""

    def test_length_range_inclusive(self):
        """Both ends of the range are kept."""
        words = ["CAT", "BEAR", "HORSE", "RABBIT", "GIRAFFE"]
        assert filter_candidates(words, config()) == ["BEAR", "HORSE", "RABBIT"]

    def test_longer_than_grid_excluded(self):
        """A word longer than the grid is dropped even inside the range."""
        words = ["BEAR", "ELEPHANT"]
        assert filter_candidates(words, config(grid_size=6, word_length_range=(3, 10))) == ["BEAR"]

    def test_canonicalised_and_deduplicated(self):
        """Whitespace and case are normalised; first occurrence wins."""
        words = [" bear ", "BEAR", "Lion", "", "   ", "lion"]
        assert filter_candidates(words, config()) == ["BEAR", "LION"]

    @pytest.mark.parametrize("raw, expected", [
        ("  tiger\n", "TIGER"),
        ("ice cream", "ICECREAM"),
        ("t-rex", "TREX"),
        ("r2d2", "RD"),
        ("révolution", "REVOLUTION"),
        ("Conquête", "CONQUETE"),
        ("!?", ""),
    ])
    def test_normalize_word(self, raw, expected):
        """Canonical form keeps only A-Z letters, accents folded."""
        assert normalize_word(raw) == expected

    def test_length_checked_on_canonical_form(self):
        """Spaces and punctuation do not count toward the length."""
        words = ["ice cream", "a-b-c", "t rex"]
        assert filter_candidates(words, config(word_length_range=(4, 8))) == ["ICECREAM", "TREX"]

    def test_variants_collapse_to_one_word(self):
        """Spellings that canonicalise alike are duplicates."""
        words = ["Été", "ETE", "e-t-e"]
        assert filter_candidates(words, config(word_length_range=(3, 5))) == ["ETE"]


class TestSelectWords:
    """Sampling contract."""

    WORDS = ["BEAR", "LION", "WOLF", "TIGER", "ZEBRA", "HORSE", "SNAKE", "EAGLE", "RABBIT"]

    @pytest.mark.parametrize("seed", range(10))
    def test_subset_without_duplicates(self, seed):
        """Output is at most word_count distinct filtered candidates."""
        selected = select_words(self.WORDS, config(word_count=4), random.Random(seed))

        assert len(selected) == 4
        assert len(set(selected)) == 4
        assert set(selected) <= set(self.WORDS)

    def test_fewer_candidates_than_requested(self):
        """All valid candidates come back when there are not enough."""
        selected = select_words(["BEAR", "LION", "CAT"], config(word_count=10), random.Random(1))
        assert sorted(selected) == ["BEAR", "LION"]

    def test_zero_requested(self):
        """word_count of zero selects nothing."""
        assert select_words(self.WORDS, config(word_count=0), random.Random(1)) == []

    def test_seeded_selection_is_reproducible(self):
        """The same seed gives the same sample in the same order."""
        first = select_words(self.WORDS, config(word_count=5), random.Random(99))
        second = select_words(self.WORDS, config(word_count=5), random.Random(99))
        assert first == second

    def test_selection_varies_with_seed(self):
        """Different seeds explore different samples."""
        samples = {
            tuple(select_words(self.WORDS, config(word_count=3), random.Random(seed)))
            for seed in range(20)
        }
        assert len(samples) > 1


class TestRandomHelpers:
    """Helpers built on random() alone."""

    def test_randbelow_bounds(self):
        """Values stay within [0, n) even at the top of the unit interval."""
        assert randbelow(ScriptedRandom([0.0]), 5) == 0
        assert randbelow(ScriptedRandom([0.999999]), 5) == 4
        assert randbelow(ScriptedRandom([0.5]), 4) == 2

    def test_randbelow_rejects_empty_range(self):
        """A non-positive bound is an error."""
        with pytest.raises(ValueError):
            randbelow(ScriptedRandom([0.5]), 0)

    def test_choice(self):
        """choice maps the draw onto the sequence."""
        assert choice(ScriptedRandom([0.7]), ["A", "B", "C", "D"]) == "C"

    def test_shuffled_is_permutation(self):
        """Shuffling keeps every element and leaves the input alone."""
        items = list(range(20))
        result = shuffled(make_rng(5), items)

        assert sorted(result) == items
        assert items == list(range(20))

    def test_shuffled_with_scripted_source(self):
        """Fisher-Yates from the back, one draw per swap."""
        # i=2 draws 0.0 -> j=0; i=1 draws 0.0 -> j=0
        assert shuffled(ScriptedRandom([0.0, 0.0]), ["A", "B", "C"]) == ["B", "C", "A"]
