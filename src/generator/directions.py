"""Direction vectors and grid geometry helpers."""

from typing import Dict, List, Tuple

from .models import Direction, Position


# (row delta, col delta). Reversed reading is handled at selection time,
# so only these four are ever used for placement.
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    "horizontal": (0, 1),
    "vertical": (1, 0),
    "diagonal": (1, 1),
    "diagonalReverse": (1, -1),
}


def step(position: Position, direction: Direction, distance: int = 1) -> Position:
    """Move `distance` cells from `position` along `direction`."""
    d_row, d_col = DIRECTION_VECTORS[direction]
    return Position(position.row + d_row * distance, position.col + d_col * distance)


def walk(start: Position, direction: Direction, length: int) -> List[Position]:
    """List the `length` positions starting at `start` along `direction`."""
    return [step(start, direction, i) for i in range(length)]


def end_position(start: Position, direction: Direction, length: int) -> Position:
    """Position of the last letter of a word of `length` letters."""
    return step(start, direction, length - 1)


def _axis_range(size: int, length: int, delta: int) -> range:
    if delta > 0:
        return range(0, size - length + 1)
    if delta < 0:
        return range(length - 1, size)
    return range(0, size)


def start_range(size: int, length: int, direction: Direction) -> Tuple[range, range]:
    """
    Compute the legal start rows and columns for a word.

    A positive vector component shrinks the maximum end of the axis, a
    negative one shrinks the minimum end, so the whole word stays in bounds.
    Either range is empty when the word cannot fit.
    """
    d_row, d_col = DIRECTION_VECTORS[direction]
    return _axis_range(size, length, d_row), _axis_range(size, length, d_col)
