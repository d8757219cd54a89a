"""Pretty-print helpers for arrow-word grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Dict, List, Tuple

from ..core.models import BlockedCell, Cell, ClueStartCell, EmptyCell, LetterCell

if TYPE_CHECKING:
    from ..engine.generator import CrosswordResult
    from ..engine.grid import CrosswordGrid


SYMBOLS = {
    BlockedCell: "#",
    EmptyCell: ".",
}


def clue_numbers(grid: CrosswordGrid) -> Dict[Tuple[int, int], int]:
    """Number clue cells in reading order, starting at 1."""

    numbers: Dict[Tuple[int, int], int] = {}
    for row, col, cell in grid.iter_cells():
        if isinstance(cell, ClueStartCell):
            numbers[(row, col)] = len(numbers) + 1
    return numbers


def cell_symbol(cell: Cell, number: int = 0) -> str:
    if isinstance(cell, LetterCell):
        return cell.char
    if isinstance(cell, ClueStartCell):
        return str(number)
    return SYMBOLS.get(type(cell), "?")


def format_grid(grid: CrosswordGrid) -> str:
    numbers = clue_numbers(grid)
    width = grid.width
    separator = "+" + "---+" * width
    lines = [separator]
    for r in range(grid.height):
        row_cells = [
            f"{cell_symbol(grid.cell(r, c), numbers.get((r, c), 0)):>2}" for c in range(width)
        ]
        lines.append("|" + "|".join(f"{symbol} " for symbol in row_cells) + "|")
        lines.append(separator)
    return "\n".join(lines)


def format_clues(grid: CrosswordGrid) -> str:
    lines: List[str] = []
    for (row, col), number in clue_numbers(grid).items():
        cell = grid.cell(row, col)
        lines.append(f"{number:>3}: {cell.length} {cell.direction.value}: {cell.clue}")
    return "\n".join(lines)


def pretty_print_grid(grid: CrosswordGrid, *, label: str | None = None, stream=None) -> None:
    """Print the grid followed by its numbered clue list."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid), file=stream)
    print(file=stream)
    print("Clues:", file=stream)
    print(format_clues(grid), file=stream)


def print_crossword_stats(result: CrosswordResult, *, stream=None) -> None:
    """Print grid + stats for a completed run."""

    stream = stream or sys.stdout
    pretty_print_grid(result.grid, stream=stream)

    grid = result.grid
    total_cells = grid.height * grid.width
    letter_cells = grid.count(LetterCell)
    empty_cells = grid.count(EmptyCell)

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {grid.width} x {grid.height} ({total_cells} cells)", file=stream)
    print(f"  Letters:       {letter_cells} ({letter_cells / total_cells * 100:.0f}%)", file=stream)
    print(f"  Clue cells:    {grid.count(ClueStartCell)}", file=stream)
    print(f"  Blocked:       {grid.count(BlockedCell)}", file=stream)
    if empty_cells:
        print(f"  Empty:         {empty_cells}", file=stream)

    lengths = [word.length for word in result.placed]
    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Placed:        {len(result.placed)}", file=stream)
    print(f"  Not placed:    {len(result.remaining)}", file=stream)
    if lengths:
        print(f"  Length range:  {min(lengths)}-{max(lengths)} (avg {sum(lengths) / len(lengths):.1f})", file=stream)
        dist_parts = [f"{l}:{c}" for l, c in sorted(Counter(lengths).items())]
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)

    if result.validation_messages:
        print(file=stream)
        print("--- Validation ---", file=stream)
        for msg in result.validation_messages:
            print(f"  {msg}", file=stream)

    if result.seed is not None:
        print(file=stream)
        print(f"Seed: {result.seed}", file=stream)
