"""Fit validators, crossing counters and the placement executor.

All six directions share one implementation driven by
:data:`~arrowword.core.constants.DIRECTION_SPECS`. A candidate is described
by its keyword and the coordinates of its prospective clue-start cell.
"""

from __future__ import annotations

from typing import Callable, Dict

from ..core.constants import DIRECTION_SPECS, Direction
from ..core.models import BLOCKED, ClueStartCell, EmptyCell, LetterCell, PlacedWord
from ..utils.logger import get_logger
from .grid import CrosswordGrid
from .session import PuzzleSession


LOGGER = get_logger(__name__)


def fits(grid: CrosswordGrid, direction: Direction, keyword: str, row: int, col: int) -> bool:
    """Return whether ``keyword`` may be placed with its clue at ``(row, col)``.

    Never mutates the grid and never reads outside it.
    """

    geometry = DIRECTION_SPECS[direction]
    length = len(keyword)
    if length == 0:
        return False
    if not grid.in_bounds(row, col):
        return False
    if row < geometry.min_origin[0] or col < geometry.min_origin[1]:
        return False

    start = geometry.run_start(row, col)
    if not grid.in_bounds(*start) or not grid.in_bounds(*geometry.run_cell(row, col, length - 1)):
        return False
    if grid.is_occupied(row, col):
        return False
    # Side-stepping runs may not begin on a crossing.
    if geometry.side_step and grid.is_occupied(*start):
        return False

    # The terminator must land on an empty cell or off the grid.
    terminator = geometry.run_cell(row, col, length)
    if grid.in_bounds(*terminator) and not isinstance(grid.cell(*terminator), EmptyCell):
        return False

    for index, char in enumerate(keyword):
        cell = grid.cell(*geometry.run_cell(row, col, index))
        if isinstance(cell, EmptyCell):
            continue
        if isinstance(cell, LetterCell) and cell.char == char and cell.axis is geometry.run_axis:
            continue
        return False
    return True


def count_crossings(
    grid: CrosswordGrid, direction: Direction, keyword: str, row: int, col: int
) -> int:
    """Number of run cells that already hold a letter.

    Only meaningful for candidates that passed :func:`fits`.
    """

    geometry = DIRECTION_SPECS[direction]
    return sum(
        1
        for index in range(len(keyword))
        if isinstance(grid.cell(*geometry.run_cell(row, col, index)), LetterCell)
    )


def place(
    session: PuzzleSession, direction: Direction, keyword: str, row: int, col: int
) -> PlacedWord:
    """Commit a validated placement and retire the keyword.

    Unconditional: callers must have checked :func:`fits` first.
    """

    grid = session.grid
    geometry = DIRECTION_SPECS[direction]
    crossing_axis = geometry.run_axis.orthogonal

    for index, char in enumerate(keyword):
        r, c = geometry.run_cell(row, col, index)
        if not isinstance(grid.cell(r, c), LetterCell):
            grid.set_cell(r, c, LetterCell(char, crossing_axis))

    term_row, term_col = geometry.run_cell(row, col, len(keyword))
    if grid.in_bounds(term_row, term_col) and not grid.is_occupied(term_row, term_col):
        grid.set_cell(term_row, term_col, BLOCKED)

    clue = session.dictionary[keyword]
    grid.set_cell(row, col, ClueStartCell(length=len(keyword), direction=direction, clue=clue))
    session.discard(keyword)

    placed = PlacedWord(keyword=keyword, clue=clue, direction=direction, row=row, col=col)
    session.placed.append(placed)
    LOGGER.debug("Placed %s %s at (%s,%s)", keyword, direction.value, row, col)
    return placed


FitValidator = Callable[[CrosswordGrid, str, int, int], bool]
CrossingCounter = Callable[[CrosswordGrid, str, int, int], int]


def _bind(func: Callable, direction: Direction) -> Callable:
    def bound(grid: CrosswordGrid, keyword: str, row: int, col: int):
        return func(grid, direction, keyword, row, col)

    bound.__name__ = f"{func.__name__}_{direction.name.lower()}"
    return bound


FIT_VALIDATORS: Dict[Direction, FitValidator] = {
    direction: _bind(fits, direction) for direction in Direction
}
CROSSING_COUNTERS: Dict[Direction, CrossingCounter] = {
    direction: _bind(count_crossings, direction) for direction in Direction
}
