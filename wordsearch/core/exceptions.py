"""Custom exception hierarchy for word-search generation."""


class WordSearchError(Exception):
    """Base exception for generator failures."""


class InvalidDimensionError(WordSearchError):
    """Raised when a grid is requested with non-positive rows or columns."""


class OutOfBoundsError(WordSearchError):
    """Raised when a cell outside the grid is read or written."""


class VocabularyError(WordSearchError):
    """Raised when the vocabulary contains an unusable entry."""


class UnsatisfiableError(WordSearchError):
    """Raised when no arrangement of the vocabulary fits the grid."""


class SearchBudgetExceededError(UnsatisfiableError):
    """Raised when the placement search runs past its configured step budget."""


class ValidationError(WordSearchError):
    """Raised when the puzzle integrity checks fail."""


class PackageExistsError(WordSearchError):
    """Raised when a puzzle package directory already exists."""
