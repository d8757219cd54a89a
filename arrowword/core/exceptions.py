"""Custom exception hierarchy for arrow-word generation."""


class CrosswordError(Exception):
    """Base exception for generator failures."""


class GridSizeError(CrosswordError):
    """Raised when a grid is created or resized with invalid dimensions."""


class CellDecodeError(CrosswordError):
    """Raised when an encoded cell string cannot be parsed."""


class DictionaryLoadError(CrosswordError):
    """Raised when a word list file cannot be read."""


class StoreError(CrosswordError):
    """Raised when a stored crossword document is missing or malformed."""


class ValidationError(CrosswordError):
    """Raised when the crossword integrity checks fail."""
