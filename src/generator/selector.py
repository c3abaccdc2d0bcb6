"""Candidate word filtering and sampling."""

import re
import unicodedata
from typing import Iterable, List

from .models import DifficultyConfig
from .rng import RandomSource, shuffled


_NON_LETTER_RE = re.compile(r"[^A-Z]+")


def normalize_word(word: str) -> str:
    """
    Canonical form used in the grid.

    Accents are folded away and everything that is not an A-Z letter
    (spaces, hyphens, digits, punctuation) is removed, so "Ice cream" becomes
    "ICECREAM" and "révolution" becomes "REVOLUTION".
    """
    if not word:
        return ""
    decomposed = unicodedata.normalize("NFD", word)
    folded = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _NON_LETTER_RE.sub("", folded.upper())


def filter_candidates(words: Iterable[str], config: DifficultyConfig) -> List[str]:
    """
    Keep the words that can be hidden under `config`.

    Words are canonicalised and de-duplicated (first occurrence wins). The
    canonical form must lie within the configured length range and must not
    be longer than the grid, since it could never fit on a single line.
    """
    min_len, max_len = config.word_length_range
    seen = set()
    valid: List[str] = []

    for raw in words:
        word = normalize_word(raw)
        if not word or word in seen:
            continue
        seen.add(word)
        if min_len <= len(word) <= max_len and len(word) <= config.grid_size:
            valid.append(word)

    return valid


def select_words(words: Iterable[str], config: DifficultyConfig, rng: RandomSource) -> List[str]:
    """
    Pick up to `config.word_count` words for a puzzle.

    Returns all valid candidates, in shuffled order, when there are fewer
    than requested.
    """
    candidates = filter_candidates(words, config)
    return shuffled(rng, candidates)[:config.word_count]
