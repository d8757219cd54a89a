"""Deterministic rule validation for generated grids."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from ..core.exceptions import ValidationError
from ..core.models import ClueStartCell, LetterCell, PlacedWord
from ..utils.logger import get_logger
from .grid import CrosswordGrid


LOGGER = get_logger(__name__)

ALPHABET = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Re-checks the structural invariants of a grid against its placements."""

    def validate(self, grid: CrosswordGrid, placed: Sequence[PlacedWord]) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_clue_cells(grid, placed)
            self._check_runs(grid, placed)
            self._check_crossings(placed)
            self._check_terminators(grid, placed)
            self._check_letters_valid(grid)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_clue_cells(self, grid: CrosswordGrid, placed: Sequence[PlacedWord]) -> None:
        for word in placed:
            if not grid.in_bounds(word.row, word.col):
                raise ValidationError(f"Clue of '{word.keyword}' outside grid")
            cell = grid.cell(word.row, word.col)
            expected = ClueStartCell(word.length, word.direction, word.clue)
            if cell != expected:
                raise ValidationError(
                    f"Clue cell at {(word.row, word.col)} does not describe '{word.keyword}'"
                )

    def _check_runs(self, grid: CrosswordGrid, placed: Sequence[PlacedWord]) -> None:
        for word in placed:
            for char, (row, col) in zip(word.keyword, word.cells):
                if not grid.in_bounds(row, col):
                    raise ValidationError(f"Word '{word.keyword}' extends outside grid")
                cell = grid.cell(row, col)
                if not isinstance(cell, LetterCell) or cell.char != char:
                    raise ValidationError(
                        f"Cell {(row, col)} does not hold '{char}' of '{word.keyword}'"
                    )

    def _check_crossings(self, placed: Sequence[PlacedWord]) -> None:
        owners: Dict[Tuple[int, int], List[PlacedWord]] = defaultdict(list)
        for word in placed:
            for position in word.cells:
                owners[position].append(word)
        for position, words in owners.items():
            if len(words) == 1:
                continue
            if len(words) > 2 or words[0].axis == words[1].axis:
                names = ", ".join(word.keyword for word in words)
                raise ValidationError(f"Illegal overlap of {names} at {position}")

    def _check_terminators(self, grid: CrosswordGrid, placed: Sequence[PlacedWord]) -> None:
        for word in placed:
            row, col = word.terminator
            if grid.in_bounds(row, col) and isinstance(grid.cell(row, col), LetterCell):
                raise ValidationError(f"Word '{word.keyword}' runs into a letter at {(row, col)}")

    def _check_letters_valid(self, grid: CrosswordGrid) -> None:
        for row, col, cell in grid.iter_cells():
            if isinstance(cell, LetterCell) and cell.char not in ALPHABET:
                raise ValidationError(f"Invalid letter '{cell.char}' at ({row},{col})")
