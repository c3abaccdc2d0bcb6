"""Working letter matrix used while a puzzle is being built."""

from typing import Iterator, List

from .directions import walk
from .models import Direction, Position


EMPTY = ""


class GridBuilder:
    """
    Mutable square letter matrix stored as a flat arena.

    Cells are addressed as `row * size + col`; an empty cell holds "".
    Placement is all-or-nothing: a conflicting word is rejected, never
    partially written.
    """

    def __init__(self, size: int):
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self.letters: List[str] = [EMPTY] * (size * size)

    def _index(self, pos: Position) -> int:
        return pos.row * self.size + pos.col

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.row < self.size and 0 <= pos.col < self.size

    def get(self, pos: Position) -> str:
        if not self.in_bounds(pos):
            raise IndexError(f"Position {tuple(pos)} outside {self.size}x{self.size} grid")
        return self.letters[self._index(pos)]

    def is_empty(self, pos: Position) -> bool:
        return self.get(pos) == EMPTY

    def fill(self, pos: Position, letter: str) -> None:
        """Write a single letter into an empty cell."""
        if not self.is_empty(pos):
            raise ValueError(f"Cell {tuple(pos)} already holds '{self.get(pos)}'")
        self.letters[self._index(pos)] = letter

    def filled_positions(self) -> Iterator[Position]:
        """Yield every filled position in row-major order."""
        for index, letter in enumerate(self.letters):
            if letter != EMPTY:
                yield Position(*divmod(index, self.size))

    def empty_positions(self) -> Iterator[Position]:
        """Yield every empty position in row-major order."""
        for index, letter in enumerate(self.letters):
            if letter == EMPTY:
                yield Position(*divmod(index, self.size))

    def can_place(self, word: str, start: Position, direction: Direction) -> bool:
        """True if every covered cell is in bounds and empty or already holds the same letter."""
        for letter, pos in zip(word, walk(start, direction, len(word))):
            if not self.in_bounds(pos):
                return False
            existing = self.letters[self._index(pos)]
            if existing != EMPTY and existing != letter:
                return False
        return True

    def overlap_count(self, word: str, start: Position, direction: Direction) -> int:
        """Count covered cells that already hold the word's letter."""
        count = 0
        for letter, pos in zip(word, walk(start, direction, len(word))):
            if self.in_bounds(pos) and self.letters[self._index(pos)] == letter:
                count += 1
        return count

    def place(self, word: str, start: Position, direction: Direction) -> Position:
        """
        Write `word` into the matrix and return its end position.

        Raises:
            ValueError: If the word leaves the grid or conflicts with a letter
        """
        if not word:
            raise ValueError("Cannot place an empty word")
        if not self.can_place(word, start, direction):
            raise ValueError(
                f"Cannot place '{word}' at {tuple(start)} going {direction}: "
                f"out of bounds or conflicting letters"
            )
        path = walk(start, direction, len(word))
        for letter, pos in zip(word, path):
            self.letters[self._index(pos)] = letter
        return path[-1]

    def rows(self) -> List[List[str]]:
        """Copy the arena out as nested rows."""
        return [self.letters[r * self.size:(r + 1) * self.size] for r in range(self.size)]
