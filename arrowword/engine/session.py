"""Mutable state owned by a single generation run."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict, List, Mapping

from ..data.frequency import FrequencyIndex
from ..core.models import PlacedWord
from .grid import CrosswordGrid


@dataclass
class PuzzleSession:
    """Grid, working dictionary, frequency ranking and random source.

    The dictionary is a private copy; placements shrink it and the ranking
    in lock-step. Sessions are not shared between runs.
    """

    grid: CrosswordGrid
    dictionary: Dict[str, str]
    ranking: FrequencyIndex
    rng: random.Random
    language: str = "german"
    placed: List[PlacedWord] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        grid: CrosswordGrid,
        dictionary: Mapping[str, str],
        rng: random.Random,
        language: str = "german",
    ) -> "PuzzleSession":
        working = dict(dictionary)
        return cls(
            grid=grid,
            dictionary=working,
            ranking=FrequencyIndex.for_language(working, language),
            rng=rng,
            language=language,
        )

    def replace_dictionary(self, dictionary: Mapping[str, str]) -> None:
        """Swap in a new working set and rebuild the ranking from it."""

        self.dictionary = dict(dictionary)
        self.ranking = FrequencyIndex.for_language(self.dictionary, self.language)

    def discard(self, keyword: str) -> None:
        del self.dictionary[keyword]
        self.ranking.remove(keyword)
