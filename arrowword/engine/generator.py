"""Main arrow-word generator orchestration.

Generation is a fixed sequence of greedy passes over one accumulating grid:

  1. Seed pass: up to five anchor words at structural positions, each
     followed by an attempt to cross it.
  2. Frequency sweep: every 4th row and column gets the first word (in
     letter-frequency order) that fits.
  3. Directional sweeps: every 3rd column / row gets the best-fit word.
  4. Diagonal sweep: every free cell gets the best word over all six
     directions.

Passes only add placements; the fit validators make sure nothing placed
earlier is overwritten.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..core.constants import (
    BEST_FIT_ORDER,
    GROWTH_STEP,
    MAX_GRID_SIZE,
    SWEEP_STEPS,
    Direction,
)
from ..core.exceptions import CrosswordError
from ..core.models import BLOCKED, EmptyCell, PlacedWord
from ..data.frequency import letter_table
from ..utils.logger import get_logger
from .grid import CrosswordGrid, GridConfig
from .placement import count_crossings, fits, place
from .session import PuzzleSession
from .sizing import estimate_size, next_growth
from .validator import GridValidator


LOGGER = get_logger(__name__)

# (row, col, minimum length, direction) of one first-fit attempt.
Attempt = Tuple[int, int, int, Direction]


@dataclass
class GeneratorConfig:
    seed: Optional[int] = None
    language: str = "german"
    max_size: int = MAX_GRID_SIZE
    growth_step: int = GROWTH_STEP
    sweep_steps: int = SWEEP_STEPS


@dataclass
class CrosswordResult:
    grid: CrosswordGrid
    placed: List[PlacedWord]
    remaining: Dict[str, str]
    validation_messages: List[str] = field(default_factory=list)
    seed: Optional[int] = None

    @property
    def complete(self) -> bool:
        return not self.remaining


class CrosswordGenerator:
    """Greedy multi-pass placement of a keyword/clue dictionary."""

    def __init__(
        self,
        dictionary: Mapping[str, str],
        config: Optional[GeneratorConfig] = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        letter_table(self.config.language)
        self.source_dictionary: Dict[str, str] = dict(dictionary)
        self.rng = random.Random(self.config.seed)
        self.validator = GridValidator()
        self.session: Optional[PuzzleSession] = None

    @property
    def grid(self) -> Optional[CrosswordGrid]:
        return self.session.grid if self.session else None

    @property
    def dictionary(self) -> Dict[str, str]:
        """Keywords of the current run that are still unplaced."""

        return self.session.dictionary if self.session else dict(self.source_dictionary)

    # ------------------------------------------------------------------
    # Public entrypoints
    # ------------------------------------------------------------------
    def generate_random(self, width: int, height: int) -> CrosswordResult:
        """Fill a grid of the given size from the dictionary."""

        LOGGER.info(
            "Generating %sx%s crossword from %s keywords",
            width,
            height,
            len(self.source_dictionary),
        )
        session = self._new_session(width, height)
        self._run_fixed_pipeline(session)
        return self._finish(session)

    def generate_from_dictionary(self) -> CrosswordResult:
        """Size the grid from the dictionary and grow it until every word is placed
        or the size cap is reached."""

        max_size = self.config.max_size
        width, height = estimate_size(self.source_dictionary, max_size=max_size)
        LOGGER.info(
            "Generating crossword for %s keywords, initial size %sx%s",
            len(self.source_dictionary),
            width,
            height,
        )
        session = self._new_session(width, height)
        self._run_fixed_pipeline(session)

        grid = session.grid
        while session.dictionary and grid.width < max_size and grid.height < max_size:
            add_width, add_height = next_growth(
                grid.width, grid.height, step=self.config.growth_step, max_size=max_size
            )
            grid.resize(add_width, add_height)
            self._seal_terminators(session)
            LOGGER.info(
                "Grew grid to %sx%s, %s keywords left",
                grid.width,
                grid.height,
                len(session.dictionary),
            )
            self._run_sweeps(session)

        return self._finish(session)

    def fill_up(
        self,
        dictionary: Mapping[str, str],
        number_of_words: int,
        grid: Optional[CrosswordGrid] = None,
        placed: Sequence[PlacedWord] = (),
    ) -> CrosswordResult:
        """Add words from ``dictionary`` to an existing grid without resetting it.

        Uses the grid of the previous run unless ``grid`` is given. At most
        ``number_of_words`` keywords, sampled at random, are offered.
        """

        if number_of_words < 0:
            raise ValueError("number_of_words must not be negative")
        if grid is not None:
            self.session = PuzzleSession.create(grid, {}, self.rng, self.config.language)
            self.session.placed.extend(placed)
        session = self.session
        if session is None:
            raise CrosswordError("fill_up needs a generated or supplied grid")

        already_placed = {word.keyword for word in session.placed}
        candidates = {k: v for k, v in dictionary.items() if k not in already_placed}
        if len(candidates) > number_of_words:
            chosen = session.rng.sample(list(candidates), number_of_words)
            working = {keyword: candidates[keyword] for keyword in chosen}
        else:
            working = candidates
        session.replace_dictionary(working)
        LOGGER.info(
            "Filling up %sx%s grid with %s keywords",
            session.grid.width,
            session.grid.height,
            len(working),
        )

        self._run_sweeps(session)
        return self._finish(session)

    # ------------------------------------------------------------------
    # Pipelines
    # ------------------------------------------------------------------
    def _new_session(self, width: int, height: int) -> PuzzleSession:
        grid = CrosswordGrid(GridConfig(height=height, width=width))
        self.session = PuzzleSession.create(
            grid, self.source_dictionary, self.rng, self.config.language
        )
        return self.session

    def _run_fixed_pipeline(self, session: PuzzleSession) -> None:
        self.fill_random(session)
        self.fill_with_good_frequency(session)
        self._run_sweeps(session)

    def _run_sweeps(self, session: PuzzleSession) -> None:
        self.fill_vertical(session, self.config.sweep_steps)
        self.fill_horizontal(session, self.config.sweep_steps)
        self.fill_diagonal(session)

    def _seal_terminators(self, session: PuzzleSession) -> None:
        """Block cells that growth exposed right behind an existing word."""

        grid = session.grid
        for word in session.placed:
            row, col = word.terminator
            if grid.in_bounds(row, col) and isinstance(grid.cell(row, col), EmptyCell):
                grid.set_cell(row, col, BLOCKED)

    def _finish(self, session: PuzzleSession) -> CrosswordResult:
        validation = self.validator.validate(session.grid, session.placed)
        if session.dictionary:
            LOGGER.info(
                "Placed %s words, %s keywords did not fit",
                len(session.placed),
                len(session.dictionary),
            )
        else:
            LOGGER.info("Placed all %s words", len(session.placed))
        return CrosswordResult(
            grid=session.grid,
            placed=list(session.placed),
            remaining=dict(session.dictionary),
            validation_messages=validation.messages,
            seed=self.config.seed,
        )

    # ------------------------------------------------------------------
    # Seed pass
    # ------------------------------------------------------------------
    def fill_random(self, session: PuzzleSession) -> None:
        """Place up to five shuffled anchor words and try to cross each one."""

        grid = session.grid
        height, width = grid.height, grid.width
        keywords = list(session.dictionary)
        session.rng.shuffle(keywords)
        before = len(session.placed)
        cursor = 0

        def anchor(direction: Direction, row_for, col: int) -> int:
            # The same keyword is offered to the next anchor until one is placed.
            nonlocal cursor
            if cursor >= len(keywords):
                return 0
            keyword = keywords[cursor]
            row = row_for(keyword)
            if not fits(grid, direction, keyword, row, col):
                return 0
            place(session, direction, keyword, row, col)
            cursor += 1
            return len(keyword)

        first = anchor(Direction.HORIZONTAL_RIGHT, lambda _: 2, 0)
        second = anchor(Direction.HORIZONTAL_RIGHT, lambda _: height - 1, 0)
        third = anchor(Direction.VERTICAL_DOWN, lambda _: max(height // 2 - 3, 0), width // 2)
        fourth = anchor(Direction.VERTICAL_DOWN, lambda _: 0, width - 1)
        fifth = anchor(Direction.VERTICAL_DOWN, lambda k: height - len(k) - 1, width - 1)

        if first:
            self._cross_anchor(
                session, ((0, j, 3, Direction.RIGHT_DOWN) for j in range(first))
            )
        if second:
            self._cross_anchor(
                session,
                (
                    (height - i, j, i, Direction.RIGHT_DOWN)
                    for i in range(3, 6)
                    for j in range(second)
                ),
            )
        if third:
            top, left = height // 2 - 2, width // 2 - 1
            self._cross_anchor(
                session,
                (
                    (top + i, left - j, 3, Direction.HORIZONTAL_RIGHT)
                    for i in range(third + 1)
                    for j in range(3)
                ),
            )
        if fourth:
            # A word of length j from column W-j would run off the grid, so j-1 is the minimum.
            self._cross_anchor(
                session,
                (
                    (i, width - j, j - 1, Direction.HORIZONTAL_RIGHT)
                    for i in range(1, fourth)
                    for j in range(3, 6)
                ),
            )
        if fifth:
            # At most one crossing per column offset and two in total.
            crossings = 0
            for j in range(3, 6):
                crossings += self._cross_anchor(
                    session,
                    (
                        (height - i, width - j, 3, Direction.BOTTOM_RIGHT)
                        for i in range(1, fifth)
                    ),
                )
                if crossings >= 2:
                    break

        LOGGER.info("Seed pass placed %s words", len(session.placed) - before)

    def _cross_anchor(
        self, session: PuzzleSession, attempts: Iterable[Attempt], limit: int = 1
    ) -> int:
        successes = 0
        for row, col, min_length, direction in attempts:
            if self.place_first_by_frequency(session, row, col, min_length, direction):
                successes += 1
                if successes >= limit:
                    break
        return successes

    # ------------------------------------------------------------------
    # Sweeps
    # ------------------------------------------------------------------
    def fill_with_good_frequency(self, session: PuzzleSession) -> None:
        """Put words made of frequent letters on every 4th row, then every 4th column."""

        grid = session.grid
        before = len(session.placed)
        for row in range(1, grid.height - 1, 4):
            for col in range(grid.width - 1):
                self.place_first_by_frequency(session, row, col, 4, Direction.HORIZONTAL_RIGHT)

        for col in range(1, grid.width - 1, 4):
            for row in range(grid.height - 1):
                self.place_first_by_frequency(session, row, col, 3, Direction.VERTICAL_DOWN)
        LOGGER.info("Frequency sweep placed %s words", len(session.placed) - before)

    def fill_vertical(self, session: PuzzleSession, steps: int) -> None:
        grid = session.grid
        before = len(session.placed)
        for col in range(2, grid.width - 1, steps):
            for row in range(grid.height - 1):
                self.place_best_fit_in_direction(session, row, col, Direction.VERTICAL_DOWN)
        LOGGER.info("Vertical sweep placed %s words", len(session.placed) - before)

    def fill_horizontal(self, session: PuzzleSession, steps: int) -> None:
        grid = session.grid
        before = len(session.placed)
        for row in range(2, grid.height - 1, steps):
            for col in range(grid.width - 1):
                self.place_best_fit_in_direction(session, row, col, Direction.HORIZONTAL_RIGHT)
        LOGGER.info("Horizontal sweep placed %s words", len(session.placed) - before)

    def fill_diagonal(self, session: PuzzleSession) -> None:
        """Visit every cell along the anti-diagonals and place the best word there."""

        grid = session.grid
        before = len(session.placed)
        for diagonal in range(grid.width + grid.height - 1):
            row_stop = max(0, diagonal - grid.width + 1)
            row_start = min(diagonal, grid.height - 1)
            for row in range(row_start, row_stop - 1, -1):
                col = diagonal - row
                if not grid.is_occupied(row, col):
                    self.place_best_fit(session, row, col)
        LOGGER.info("Diagonal sweep placed %s words", len(session.placed) - before)

    # ------------------------------------------------------------------
    # Selection rules
    # ------------------------------------------------------------------
    def place_first_by_frequency(
        self,
        session: PuzzleSession,
        row: int,
        col: int,
        min_length: int,
        direction: Direction,
    ) -> bool:
        """Place the highest-ranked keyword of at least ``min_length`` that fits."""

        grid = session.grid
        if not grid.in_bounds(row, col) or grid.is_occupied(row, col):
            return False
        for keyword in session.ranking:
            if len(keyword) >= min_length and fits(grid, direction, keyword, row, col):
                place(session, direction, keyword, row, col)
                return True
        return False

    def place_best_fit(self, session: PuzzleSession, row: int, col: int) -> Optional[PlacedWord]:
        return self._place_best(session, row, col, BEST_FIT_ORDER)

    def place_best_fit_in_direction(
        self, session: PuzzleSession, row: int, col: int, direction: Direction
    ) -> Optional[PlacedWord]:
        return self._place_best(session, row, col, (direction,))

    def _place_best(
        self,
        session: PuzzleSession,
        row: int,
        col: int,
        directions: Sequence[Direction],
    ) -> Optional[PlacedWord]:
        grid = session.grid
        if not grid.in_bounds(row, col) or grid.is_occupied(row, col):
            return None

        best: Optional[Tuple[str, Direction]] = None
        best_crossings = 0
        best_length = 0
        for keyword in session.dictionary:
            for direction in directions:
                if not fits(grid, direction, keyword, row, col):
                    continue
                crossings = count_crossings(grid, direction, keyword, row, col)
                if crossings > best_crossings or (
                    crossings == best_crossings and len(keyword) > best_length
                ):
                    best = (keyword, direction)
                    best_crossings = crossings
                    best_length = len(keyword)

        if best is None:
            return None
        keyword, direction = best
        return place(session, direction, keyword, row, col)
