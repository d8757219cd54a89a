"""Grid representation and helper utilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple, Type

from ..core.constants import Bounds
from ..core.exceptions import GridSizeError
from ..core.models import EMPTY, Cell, decode_cell, encode_cell, is_occupied_cell
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class GridConfig:
    """Dimensions of a freshly allocated grid."""

    height: int
    width: int

    def bounds(self) -> Bounds:
        return Bounds(rows=self.height, cols=self.width)


class CrosswordGrid:
    """Row-major matrix of cells; the grid only ever grows."""

    def __init__(self, config: GridConfig) -> None:
        if config.height <= 0 or config.width <= 0:
            raise GridSizeError(
                f"Grid dimensions must be positive, got {config.width}x{config.height}"
            )
        self.config = config
        self.bounds = config.bounds()
        self.cells: List[List[Cell]] = [
            [EMPTY for _ in range(self.bounds.cols)] for _ in range(self.bounds.rows)
        ]

    @property
    def height(self) -> int:
        return self.bounds.rows

    @property
    def width(self) -> int:
        return self.bounds.cols

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def cell(self, row: int, col: int) -> Cell:
        if not self.bounds.contains(row, col):
            raise IndexError(f"Cell {(row, col)} outside {self.height}x{self.width} grid")
        return self.cells[row][col]

    def set_cell(self, row: int, col: int, cell: Cell) -> None:
        if not self.bounds.contains(row, col):
            raise IndexError(f"Cell {(row, col)} outside {self.height}x{self.width} grid")
        self.cells[row][col] = cell

    def in_bounds(self, row: int, col: int) -> bool:
        return self.bounds.contains(row, col)

    def is_occupied(self, row: int, col: int) -> bool:
        """True for letter and clue-start cells; callers check bounds first."""

        return is_occupied_cell(self.cell(row, col))

    def iter_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        for r, row in enumerate(self.cells):
            for c, cell in enumerate(row):
                yield r, c, cell

    def count(self, cell_type: Type) -> int:
        return sum(1 for _, _, cell in self.iter_cells() if isinstance(cell, cell_type))

    # ------------------------------------------------------------------
    # Growth
    # ------------------------------------------------------------------
    def resize(self, add_width: int, add_height: int) -> None:
        """Grow the grid, keeping every cell at its coordinates."""

        if add_width < 0 or add_height < 0:
            raise GridSizeError("Grid can only grow")
        new_config = GridConfig(
            height=self.bounds.rows + add_height, width=self.bounds.cols + add_width
        )
        new_cells: List[List[Cell]] = [
            [EMPTY for _ in range(new_config.width)] for _ in range(new_config.height)
        ]
        for r, row in enumerate(self.cells):
            new_cells[r][: len(row)] = row
        LOGGER.debug(
            "Resized grid %sx%s -> %sx%s",
            self.width,
            self.height,
            new_config.width,
            new_config.height,
        )
        self.config = new_config
        self.bounds = new_config.bounds()
        self.cells = new_cells

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_encoded(self) -> List[List[str]]:
        return [[encode_cell(cell) for cell in row] for row in self.cells]

    @classmethod
    def from_encoded(cls, rows: Sequence[Sequence[str]]) -> "CrosswordGrid":
        if not rows or not rows[0]:
            raise GridSizeError("Encoded grid is empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise GridSizeError("Encoded grid rows differ in width")
        grid = cls(GridConfig(height=len(rows), width=width))
        for r, row in enumerate(rows):
            for c, text in enumerate(row):
                grid.cells[r][c] = decode_cell(text)
        return grid
