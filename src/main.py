"""
Main entry point for generating word-search puzzles.

Usage:
    python -m src.main configs/default.yaml
    python -m src.main configs/default.yaml --difficulty hard --theme animals --seed 42
    python -m src.main configs/default.yaml --output puzzles/grid.json --verbose
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .generator import GeneratorConfig, WordSearchGenerator, normalize_word
from .verifiers import render_grid, verify_grid


def load_config(config_path: str) -> GeneratorConfig:
    """Load generator configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return GeneratorConfig(**(data or {}))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate a word-search puzzle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  seed: 42
  difficulties:
    easy:
      grid_size: 8
      word_count: 5
      word_length_range: [4, 6]
  themes:
    animals: [TIGER, ZEBRA, HORSE, SNAKE]
  bonus_words: [CAT, DOG]
        """
    )
    parser.add_argument(
        "config",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--difficulty", "-d",
        default="easy",
        help="Difficulty tier to use (default: easy)"
    )
    parser.add_argument(
        "--theme", "-t",
        help="Theme word list to use (default: first theme in the config)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed (overrides the config seed)"
    )
    parser.add_argument(
        "--no-bonus",
        action="store_true",
        help="Do not hide bonus words in the grid"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the grid as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress to stdout"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.difficulty not in config.difficulties:
        print(
            f"Error: unknown difficulty '{args.difficulty}' "
            f"(available: {', '.join(config.difficulties)})",
            file=sys.stderr
        )
        return 1
    difficulty = config.difficulties[args.difficulty]

    if not config.themes:
        print("Error: config defines no themes", file=sys.stderr)
        return 1
    theme = args.theme or next(iter(config.themes))
    if theme not in config.themes:
        print(
            f"Error: unknown theme '{theme}' (available: {', '.join(config.themes)})",
            file=sys.stderr
        )
        return 1

    words = config.themes[theme]
    bonus_words = [] if args.no_bonus else config.bonus_words
    seed = args.seed if args.seed is not None else config.seed

    if args.verbose:
        print(f"Config: {args.config}")
        print(f"Difficulty: {args.difficulty} ({difficulty.grid_size}x{difficulty.grid_size}, "
              f"{difficulty.word_count} words, length {list(difficulty.word_length_range)})")
        print(f"Theme: {theme} ({len(words)} candidate words)")
        print(f"Seed: {seed}")
        print()

    try:
        generator = WordSearchGenerator(seed=seed)
        grid = generator.generate_grid(words, difficulty, bonus_words)
    except ValueError as e:
        print(f"Error generating grid: {e}", file=sys.stderr)
        return 1

    verification = verify_grid(grid)

    if args.verbose:
        placed_main = len(grid.visible_words)
        print(f"Placed {placed_main}/{difficulty.word_count} words, "
              f"{len(grid.bonus_words)}/{len(bonus_words)} bonus words")
        placed_texts = {w.text for w in grid.words}
        omitted = [w for w in bonus_words if normalize_word(w) not in placed_texts]
        if omitted:
            print(f"Omitted bonus words: {', '.join(omitted)}")
        print(f"Verification: {'passed' if verification.valid else 'FAILED'}")
        print()

    print(render_grid(grid))
    print()
    print("=== Words ===")
    for word in grid.visible_words:
        print(f"{word.text:<15} {tuple(word.start_pos)} -> {tuple(word.end_pos)} {word.direction}")

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            json.dump(grid.model_dump(mode="json"), f, indent=2)
        if args.verbose:
            print()
            print(f"Grid saved to: {output_path}")

    if not verification.valid:
        for error in verification.errors:
            print(f"{error.code}: {error.message}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
