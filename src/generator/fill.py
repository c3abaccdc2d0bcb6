"""Filler letters for cells not covered by a placed word."""

from typing import Dict, List

from .board import GridBuilder
from .models import FillStrategyName
from .rng import RandomSource, choice


# Letter tiers approximating English frequency
FILLER_LETTERS: Dict[str, List[str]] = {
    "common": ["E", "A", "R", "I", "O", "T", "N", "S", "L", "C"],
    "medium": ["U", "D", "P", "M", "H", "G", "B", "F", "Y", "W"],
    "rare": ["K", "V", "X", "Z", "J", "Q"],
}

FILLER_WEIGHTS: Dict[str, float] = {
    "common": 0.70,
    "medium": 0.25,
    "rare": 0.05,
}


def random_filler_letter(rng: RandomSource) -> str:
    """Pick a tier by weight, then a letter uniformly within it."""
    roll = rng.random()
    if roll < FILLER_WEIGHTS["common"]:
        tier = "common"
    elif roll < FILLER_WEIGHTS["common"] + FILLER_WEIGHTS["medium"]:
        tier = "medium"
    else:
        tier = "rare"
    return choice(rng, FILLER_LETTERS[tier])


def fill_empty_cells(
    builder: GridBuilder,
    rng: RandomSource,
    strategy: FillStrategyName = "random",
) -> int:
    """
    Fill every empty cell, in row-major order, and return how many were filled.

    Both strategies draw from the weighted alphabet; "thematic" is accepted
    for configuration compatibility.
    """
    if strategy not in ("random", "thematic"):
        raise ValueError(f"Unknown fill strategy '{strategy}'")

    filled = 0
    for pos in list(builder.empty_positions()):
        builder.fill(pos, random_filler_letter(rng))
        filled += 1
    return filled
