"""Grid invariant checks and text rendering."""

import re
from typing import Dict, List, Tuple

from ..generator.models import Grid, PlacedWord, Position
from .models import ValidationError, ValidationResult


_LETTER_RE = re.compile(r"^[A-Z]$")


def check_cells(grid: Grid) -> List[ValidationError]:
    """Check matrix dimensions, cell coordinates and letters."""
    errors: List[ValidationError] = []

    if len(grid.cells) != grid.size or any(len(row) != grid.size for row in grid.cells):
        errors.append(ValidationError(
            code="SIZE_MISMATCH",
            message=f"Cell matrix is not {grid.size}x{grid.size}"
        ))
        return errors

    for r, row in enumerate(grid.cells):
        for c, cell in enumerate(row):
            if (cell.row, cell.col) != (r, c):
                errors.append(ValidationError(
                    code="CELL_POSITION",
                    message=f"Cell stored at ({r}, {c}) claims position ({cell.row}, {cell.col})"
                ))
            if not _LETTER_RE.match(cell.letter):
                errors.append(ValidationError(
                    code="INVALID_LETTER",
                    message=f"Cell ({r}, {c}) holds '{cell.letter}', expected one uppercase letter"
                ))

    return errors


def check_words(grid: Grid) -> List[ValidationError]:
    """Check that every placed word lies in bounds, on its recorded geometry and letters."""
    errors: List[ValidationError] = []
    owners: Dict[Position, Tuple[str, PlacedWord]] = {}

    for word in grid.words:
        path = word.cells()

        if path[-1] != tuple(word.end_pos):
            errors.append(ValidationError(
                code="END_MISMATCH",
                message=(
                    f"'{word.text}' going {word.direction} from {tuple(word.start_pos)} "
                    f"ends at {tuple(path[-1])}, not {tuple(word.end_pos)}"
                ),
                word=word.text
            ))

        for letter, pos in zip(word.text, path):
            cell = grid.cell_at(pos.row, pos.col)
            if cell is None:
                errors.append(ValidationError(
                    code="OUT_OF_BOUNDS",
                    message=f"'{word.text}' leaves the grid at {tuple(pos)}",
                    word=word.text
                ))
                break

            if cell.letter != letter:
                errors.append(ValidationError(
                    code="LETTER_MISMATCH",
                    message=f"Cell {tuple(pos)} holds '{cell.letter}' but '{word.text}' needs '{letter}'",
                    word=word.text
                ))

            if pos in owners and owners[pos][0] != letter:
                other_letter, other = owners[pos]
                errors.append(ValidationError(
                    code="GRID_CONFLICT",
                    message=(
                        f"Cell conflict at {tuple(pos)}: '{other.text}' needs '{other_letter}' "
                        f"vs '{letter}' from '{word.text}'"
                    ),
                    word=word.text
                ))
            owners.setdefault(pos, (letter, word))

    return errors


def verify_grid(grid: Grid) -> ValidationResult:
    """
    Verify every structural invariant of a generated grid.

    Returns a ValidationResult with:
    - valid: True if the grid passes all checks
    - errors: List of broken invariants
    - words: Texts of the placed words, in placement order
    """
    errors = check_cells(grid)
    if not any(e.code == "SIZE_MISMATCH" for e in errors):
        errors.extend(check_words(grid))

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        words=[w.text for w in grid.words],
    )


def render_grid(grid: Grid, highlight_found: bool = False) -> str:
    """
    Render the grid as space-separated rows.

    With `highlight_found`, cells flagged as found are shown in lowercase.
    """
    lines = [
        ' '.join(
            cell.letter.lower() if highlight_found and cell.is_found else cell.letter
            for cell in row
        )
        for row in grid.cells
    ]
    return '\n'.join(lines)
