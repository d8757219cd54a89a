"""Data models supporting the arrow-word generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple, Union

from .constants import BLOCKED_MARKER, DIRECTION_SPECS, Axis, Direction
from .exceptions import CellDecodeError


@dataclass(frozen=True)
class EmptyCell:
    """An unclaimed cell."""


@dataclass(frozen=True)
class BlockedCell:
    """Terminator written one step past the end of a word."""


@dataclass(frozen=True)
class LetterCell:
    """A single letter of a placed word.

    ``axis`` is the axis a crossing word has to run along, which is the
    axis orthogonal to the word that wrote the letter.
    """

    char: str
    axis: Axis


@dataclass(frozen=True)
class ClueStartCell:
    """Origin cell of a placed word, hosting its clue."""

    length: int
    direction: Direction
    clue: str


Cell = Union[EmptyCell, BlockedCell, LetterCell, ClueStartCell]

EMPTY = EmptyCell()
BLOCKED = BlockedCell()


def is_occupied_cell(cell: Cell) -> bool:
    return isinstance(cell, (LetterCell, ClueStartCell))


def encode_cell(cell: Cell) -> str:
    """Return the string form consumed by renderers and the store."""

    if isinstance(cell, LetterCell):
        return f"{cell.char}{cell.axis.value}"
    if isinstance(cell, ClueStartCell):
        return f"{cell.length} {cell.direction.value}: {cell.clue}"
    if isinstance(cell, BlockedCell):
        return BLOCKED_MARKER
    return ""


def decode_cell(text: str) -> Cell:
    """Parse a string produced by :func:`encode_cell`."""

    if text == "":
        return EMPTY
    if text == BLOCKED_MARKER:
        return BLOCKED
    if len(text) == 2 and text[0].isalpha() and text[1] in {axis.value for axis in Axis}:
        return LetterCell(text[0], Axis(text[1]))

    length_text, _, rest = text.partition(" ")
    direction_text, separator, clue = rest.partition(": ")
    if not length_text.isdigit() or not separator:
        raise CellDecodeError(f"Unrecognized cell encoding: {text!r}")
    try:
        direction = Direction(direction_text)
    except ValueError as exc:
        raise CellDecodeError(f"Unknown direction in cell {text!r}") from exc
    return ClueStartCell(length=int(length_text), direction=direction, clue=clue)


@dataclass
class PlacedWord:
    """A keyword committed to the grid."""

    keyword: str
    clue: str
    direction: Direction
    row: int
    col: int

    @property
    def length(self) -> int:
        return len(self.keyword)

    @property
    def axis(self) -> Axis:
        return DIRECTION_SPECS[self.direction].run_axis

    @property
    def cells(self) -> List[Tuple[int, int]]:
        geometry = DIRECTION_SPECS[self.direction]
        return [geometry.run_cell(self.row, self.col, i) for i in range(self.length)]

    @property
    def terminator(self) -> Tuple[int, int]:
        return DIRECTION_SPECS[self.direction].run_cell(self.row, self.col, self.length)

    def to_jsonable(self) -> dict:
        return {
            "keyword": self.keyword,
            "clue": self.clue,
            "direction": self.direction.value,
            "start": [self.row, self.col],
            "length": self.length,
        }

    @classmethod
    def from_jsonable(cls, payload: dict) -> "PlacedWord":
        row, col = payload["start"]
        return cls(
            keyword=payload["keyword"],
            clue=payload.get("clue", ""),
            direction=Direction(payload["direction"]),
            row=int(row),
            col=int(col),
        )
