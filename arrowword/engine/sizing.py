"""Initial grid dimensions and the growth rule of the auto-sized pipeline."""

from __future__ import annotations

import heapq
import math
from typing import Iterable, Tuple

from ..core.constants import GROWTH_STEP, MAX_GRID_SIZE, MIN_GRID_SIZE


def two_longest_lengths(keywords: Iterable[str]) -> Tuple[int, int]:
    longest = heapq.nlargest(2, (len(keyword) for keyword in keywords))
    longest += [0] * (2 - len(longest))
    return longest[0], longest[1]


def estimate_size(
    keywords: Iterable[str],
    min_size: int = MIN_GRID_SIZE,
    max_size: int = MAX_GRID_SIZE,
) -> Tuple[int, int]:
    """Return ``(width, height)`` for a dictionary.

    The longest word must fit across, the second longest down, and a square
    grid holds roughly twice its side length in words.
    """

    keywords = list(keywords)
    width = height = min_size

    first, second = two_longest_lengths(keywords)
    width = max(width, first + 2)
    height = max(height, second + 2)

    side = math.ceil(len(keywords) / 2)
    width = max(width, side)
    height = max(height, side)
    return min(width, max_size), min(height, max_size)


def next_growth(
    width: int,
    height: int,
    step: int = GROWTH_STEP,
    max_size: int = MAX_GRID_SIZE,
) -> Tuple[int, int]:
    """Return ``(add_width, add_height)`` growing the smaller side, width on ties."""

    if width <= height:
        return max(0, min(step, max_size - width)), 0
    return 0, max(0, min(step, max_size - height))
