"""Letter-frequency tables and the keyword ranking derived from them.

Words built from frequent letters (E, N, I, ...) cross more easily, so the
seed pass and the frequency sweep try them first.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Mapping

# Relative letter frequencies in percent.
GERMAN_LETTER_FREQUENCIES: Dict[str, float] = {
    "E": 17.40, "N": 9.78, "I": 7.55, "S": 7.27, "R": 7.00, "A": 6.51,
    "T": 6.15, "D": 5.08, "H": 4.76, "U": 4.35, "L": 3.44, "C": 3.06,
    "G": 3.01, "M": 2.53, "O": 2.51, "B": 1.89, "W": 1.89, "F": 1.66,
    "K": 1.21, "Z": 1.13, "P": 0.79, "V": 0.67, "J": 0.27, "Y": 0.04,
    "X": 0.03, "Q": 0.02,
}

ENGLISH_LETTER_FREQUENCIES: Dict[str, float] = {
    "E": 12.70, "T": 9.06, "A": 8.17, "O": 7.51, "I": 6.97, "N": 6.75,
    "S": 6.33, "H": 6.09, "R": 5.99, "D": 4.25, "L": 4.03, "C": 2.78,
    "U": 2.76, "M": 2.41, "W": 2.36, "F": 2.23, "G": 2.02, "Y": 1.97,
    "P": 1.93, "B": 1.29, "V": 0.98, "K": 0.77, "J": 0.15, "X": 0.15,
    "Q": 0.10, "Z": 0.07,
}

LANGUAGE_TABLES: Dict[str, Dict[str, float]] = {
    "german": GERMAN_LETTER_FREQUENCIES,
    "english": ENGLISH_LETTER_FREQUENCIES,
}


def letter_table(language: str) -> Dict[str, float]:
    try:
        return LANGUAGE_TABLES[language.lower()]
    except KeyError:
        known = ", ".join(sorted(LANGUAGE_TABLES))
        raise ValueError(f"No letter frequencies for {language!r} (known: {known})") from None


def average_letter_frequency(word: str, table: Mapping[str, float]) -> float:
    if not word:
        return 0.0
    return sum(table.get(char, 0.0) for char in word) / len(word)


class FrequencyIndex:
    """Keywords ordered by average letter frequency, best first.

    Equal scores keep the order in which the keywords were supplied.
    """

    def __init__(self, keywords: Iterable[str], table: Mapping[str, float]) -> None:
        self._table = table
        self._scores: Dict[str, float] = {
            keyword: average_letter_frequency(keyword, table) for keyword in keywords
        }
        self._ranking: List[str] = sorted(
            self._scores, key=lambda keyword: self._scores[keyword], reverse=True
        )

    @classmethod
    def for_language(cls, keywords: Iterable[str], language: str) -> "FrequencyIndex":
        return cls(keywords, letter_table(language))

    def score(self, keyword: str) -> float:
        if keyword in self._scores:
            return self._scores[keyword]
        return average_letter_frequency(keyword, self._table)

    def remove(self, keyword: str) -> None:
        if self._scores.pop(keyword, None) is not None:
            self._ranking.remove(keyword)

    def ranking(self) -> List[str]:
        return list(self._ranking)

    def __iter__(self) -> Iterator[str]:
        # Iterate a snapshot so callers may place (and remove) while scanning.
        return iter(list(self._ranking))

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._scores

    def __len__(self) -> int:
        return len(self._ranking)
