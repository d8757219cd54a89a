"""Arrow-word (Swedish-style) crossword generator.

This package exposes the public API surface via:

- ``arrowword.engine.generator.CrosswordGenerator``: greedy multi-pass grid generation.
- ``arrowword.engine.grid.CrosswordGrid``: the cell-state grid it fills.
- ``arrowword.data.wordlist.WordList``: loads keyword/clue text files.
- ``arrowword.engine.crossword_store.CrosswordStore``: JSON persistence of results.
"""

from .engine.crossword_store import CrosswordStore
from .engine.generator import CrosswordGenerator, CrosswordResult, GeneratorConfig
from .engine.grid import CrosswordGrid, GridConfig
from .data.wordlist import WordList

__all__ = [
    "CrosswordGenerator",
    "CrosswordResult",
    "CrosswordGrid",
    "CrosswordStore",
    "GeneratorConfig",
    "GridConfig",
    "WordList",
]

__version__ = "0.1.0"
