"""Post-generation checks: selection validation and grid verification."""

from .selection import validate_selection, are_adjacent, get_direction, cell_at, cells_between
from .models import ValidationError, ValidationResult
from .grid import check_cells, check_words, verify_grid, render_grid

__all__ = [
    # Selection
    "validate_selection",
    "are_adjacent",
    "get_direction",
    "cell_at",
    "cells_between",
    # Models
    "ValidationError",
    "ValidationResult",
    # Grid verification
    "check_cells",
    "check_words",
    "verify_grid",
    "render_grid",
]
