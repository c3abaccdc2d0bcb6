"""
Selection validation for a player's cell path.

These are pure functions over their arguments: nothing here marks words as
found or touches cell flags. That is the caller's job.
"""

from typing import List, Optional, Sequence

from ..generator.models import Cell, Direction, Grid, PlacedWord, Position


def _at(cell: Cell, pos: Position) -> bool:
    return cell.row == pos.row and cell.col == pos.col


def validate_selection(cells: Sequence[Cell], words: Sequence[PlacedWord]) -> Optional[PlacedWord]:
    """
    Match a selected cell path against the unfound words.

    The path is read forward and backward. Text equality alone is not
    enough once words overlap, so the path must also line up with the
    word's recorded geometry:
    - forward match: first cell at start_pos, or last cell at end_pos
    - backward match: first cell at end_pos, or last cell at start_pos

    Adjacency and straightness of the path are not checked here.

    Returns:
        The first unfound word passing both checks, or None
    """
    if len(cells) < 2:
        return None

    forward = "".join(cell.letter for cell in cells)
    backward = forward[::-1]
    first, last = cells[0], cells[-1]

    for word in words:
        if word.found:
            continue

        if word.text == forward and (_at(first, word.start_pos) or _at(last, word.end_pos)):
            return word

        if word.text == backward and (_at(first, word.end_pos) or _at(last, word.start_pos)):
            return word

    return None


def are_adjacent(a: Cell, b: Cell) -> bool:
    """True if the cells touch horizontally, vertically or diagonally."""
    row_diff = abs(a.row - b.row)
    col_diff = abs(a.col - b.col)
    return row_diff <= 1 and col_diff <= 1 and (row_diff + col_diff) > 0


def get_direction(start: Cell, end: Cell) -> Optional[Direction]:
    """
    Infer the placement direction from `start` to `end`.

    Only the four placement directions are recognised; a delta pointing
    left, up or up-left returns None.
    """
    row_diff = end.row - start.row
    col_diff = end.col - start.col

    if row_diff == 0 and col_diff > 0:
        return "horizontal"
    if row_diff > 0 and col_diff == 0:
        return "vertical"
    if row_diff > 0 and col_diff > 0:
        return "diagonal"
    if row_diff > 0 and col_diff < 0:
        return "diagonalReverse"
    return None


def cell_at(grid: Grid, row: int, col: int) -> Optional[Cell]:
    """Return the cell at (row, col), or None when out of bounds."""
    return grid.cell_at(row, col)


def cells_between(grid: Grid, start: Position, end: Position) -> List[Cell]:
    """
    Collect the cells on the straight line from `start` to `end`, inclusive.

    Returns an empty list when the two positions are not on a common row,
    column or 45-degree diagonal.
    """
    row_diff = end.row - start.row
    col_diff = end.col - start.col
    steps = max(abs(row_diff), abs(col_diff))

    if steps == 0:
        cell = grid.cell_at(start.row, start.col)
        return [cell] if cell is not None else []

    if row_diff != 0 and col_diff != 0 and abs(row_diff) != abs(col_diff):
        return []

    row_step = row_diff // steps
    col_step = col_diff // steps

    result: List[Cell] = []
    for i in range(steps + 1):
        cell = grid.cell_at(start.row + row_step * i, start.col + col_step * i)
        if cell is not None:
            result.append(cell)
    return result
