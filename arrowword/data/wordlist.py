"""Plain-text word lists: loading, saving and clue selection.

A line holds a keyword and its clue separated by whitespace::

    # comment
    Katze Haustier mit Schnurrhaaren
    KATZE Maeusefaenger

A keyword may appear on several lines; each line adds a clue.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from ..core.exceptions import DictionaryLoadError
from ..utils.logger import get_logger
from .normalization import is_valid_keyword, normalize_keyword


LOGGER = get_logger(__name__)

FILE_HEADER = (
    "# ------------------ Word list ------------------\n"
    "# One keyword and one clue per line, separated by\n"
    "# a blank. Lines starting with # are ignored.\n"
    "# -----------------------------------------------\n\n"
)


def parse_line(line: str) -> Optional[Tuple[str, str]]:
    """Return ``(keyword, clue)`` for a usable line, otherwise ``None``."""

    line = line.strip()
    if not line or line.startswith("#"):
        return None
    parts = line.split(None, 1)
    if len(parts) != 2:
        return None
    keyword, clue = parts[0], parts[1].strip()
    if not is_valid_keyword(keyword):
        return None
    keyword = normalize_keyword(keyword)
    if not keyword:
        return None
    return keyword, clue


class WordList:
    """Keywords with one or more clues each, kept in keyword order."""

    def __init__(self, entries: Iterable[Tuple[str, str]] = ()) -> None:
        self._clues: Dict[str, List[str]] = {}
        for keyword, clue in entries:
            self.add(keyword, clue)

    @classmethod
    def load(cls, path: Path | str) -> "WordList":
        source = Path(path)
        if not source.exists():
            raise DictionaryLoadError(f"Missing word list: {source}")
        try:
            text = source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DictionaryLoadError(f"Cannot read word list {source}: {exc}") from exc

        word_list = cls()
        skipped = 0
        for line in text.splitlines():
            parsed = parse_line(line)
            if parsed is None:
                if line.strip() and not line.strip().startswith("#"):
                    skipped += 1
                continue
            word_list.add(*parsed)
        LOGGER.info(
            "Loaded %s keywords from %s (%s lines skipped)", len(word_list), source, skipped
        )
        return word_list

    def save(self, path: Path | str) -> None:
        lines = [FILE_HEADER]
        for keyword, clues in self.items():
            lines.extend(f"{keyword} {clue}\n" for clue in clues)
        Path(path).write_text("".join(lines), encoding="utf-8")

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------
    def add(self, keyword: str, clue: str) -> None:
        clues = self._clues.setdefault(keyword, [])
        if clue not in clues:
            clues.append(clue)

    def remove(self, keyword: str) -> None:
        self._clues.pop(keyword, None)

    def clues(self, keyword: str) -> List[str]:
        return list(self._clues.get(keyword, []))

    def items(self) -> Iterator[Tuple[str, List[str]]]:
        for keyword in sorted(self._clues):
            yield keyword, list(self._clues[keyword])

    def to_dictionary(self, rng: Optional[random.Random] = None) -> Dict[str, str]:
        """Reduce to one clue per keyword, chosen at random where there are several."""

        rng = rng or random.Random()
        dictionary: Dict[str, str] = {}
        for keyword, clues in self.items():
            dictionary[keyword] = clues[0] if len(clues) == 1 else rng.choice(clues)
        return dictionary

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._clues

    def __len__(self) -> int:
        return len(self._clues)
