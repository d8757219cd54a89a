"""Shared constants and enumerations for the arrow-word generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


MIN_GRID_SIZE = 8
MAX_GRID_SIZE = 30
GROWTH_STEP = 3
SWEEP_STEPS = 3

BLOCKED_MARKER = "0"


class Axis(str, Enum):
    """Axis a run of letters extends along."""

    HORIZONTAL = "h"
    VERTICAL = "v"

    @property
    def orthogonal(self) -> "Axis":
        return Axis.VERTICAL if self is Axis.HORIZONTAL else Axis.HORIZONTAL


class Direction(str, Enum):
    """Placement geometries relative to a clue-start cell."""

    HORIZONTAL_RIGHT = "horizontal-right"
    VERTICAL_DOWN = "vertical-down"
    LEFT_DOWN = "left-down"
    RIGHT_DOWN = "right-down"
    TOP_RIGHT = "top-right"
    BOTTOM_RIGHT = "bottom-right"


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols


@dataclass(frozen=True)
class DirectionSpec:
    """Run geometry of one direction.

    ``run_offset`` is the first letter cell relative to the clue-start cell,
    ``step`` the move from one letter to the next. ``min_origin`` holds the
    smallest row and column a clue-start cell may use. Side-stepping
    directions start their run beside the clue instead of straight ahead.
    """

    direction: Direction
    run_offset: Tuple[int, int]
    step: Tuple[int, int]
    run_axis: Axis
    min_origin: Tuple[int, int] = (0, 0)
    side_step: bool = False

    def run_start(self, row: int, col: int) -> Tuple[int, int]:
        return row + self.run_offset[0], col + self.run_offset[1]

    def run_cell(self, row: int, col: int, index: int) -> Tuple[int, int]:
        start_row, start_col = self.run_start(row, col)
        return start_row + self.step[0] * index, start_col + self.step[1] * index


DIRECTION_SPECS: Dict[Direction, DirectionSpec] = {
    Direction.HORIZONTAL_RIGHT: DirectionSpec(
        Direction.HORIZONTAL_RIGHT, (0, 1), (0, 1), Axis.HORIZONTAL, min_origin=(1, 0)
    ),
    Direction.VERTICAL_DOWN: DirectionSpec(
        Direction.VERTICAL_DOWN, (1, 0), (1, 0), Axis.VERTICAL, min_origin=(0, 1)
    ),
    Direction.LEFT_DOWN: DirectionSpec(
        Direction.LEFT_DOWN, (0, -1), (1, 0), Axis.VERTICAL, side_step=True
    ),
    Direction.RIGHT_DOWN: DirectionSpec(
        Direction.RIGHT_DOWN, (0, 1), (1, 0), Axis.VERTICAL, side_step=True
    ),
    Direction.TOP_RIGHT: DirectionSpec(
        Direction.TOP_RIGHT, (-1, 0), (0, 1), Axis.HORIZONTAL, side_step=True
    ),
    Direction.BOTTOM_RIGHT: DirectionSpec(
        Direction.BOTTOM_RIGHT, (1, 0), (0, 1), Axis.HORIZONTAL, side_step=True
    ),
}

# Evaluation order of the diagonal best-fit search; earlier entries win ties.
BEST_FIT_ORDER: Tuple[Direction, ...] = (
    Direction.VERTICAL_DOWN,
    Direction.HORIZONTAL_RIGHT,
    Direction.RIGHT_DOWN,
    Direction.LEFT_DOWN,
    Direction.TOP_RIGHT,
    Direction.BOTTOM_RIGHT,
)
