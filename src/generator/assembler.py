"""Conversion of the working matrix into the exported Grid."""

from typing import List

from .board import EMPTY, GridBuilder
from .models import Cell, Grid, PlacedWord


def assemble_grid(builder: GridBuilder, placed_words: List[PlacedWord]) -> Grid:
    """
    Build the immutable-by-convention Grid value from a fully filled builder.

    Raises:
        ValueError: If any cell is still empty
    """
    cells: List[List[Cell]] = []

    for row, letters in enumerate(builder.rows()):
        row_cells: List[Cell] = []
        for col, letter in enumerate(letters):
            if letter == EMPTY:
                raise ValueError(f"Cell ({row}, {col}) is empty; fill the grid before assembling it")
            row_cells.append(Cell(letter=letter, row=row, col=col))
        cells.append(row_cells)

    return Grid(cells=cells, size=builder.size, words=list(placed_words))
