"""Custom exception hierarchy for crossword generation."""


class CrosswordError(Exception):
    """Base exception for generator failures."""


class SlotPlacementError(CrosswordError):
    """Raised when a word cannot be written into the working grid."""


class EmptyGridError(CrosswordError):
    """Raised when trimming a working grid that holds no letters."""


class ValidationError(CrosswordError):
    """Raised when the crossword integrity checks fail."""


class WordSourceError(CrosswordError):
    """Raised when a word supplier cannot produce a usable word list."""


class EditionStoreError(CrosswordError):
    """Raised when a persisted edition payload cannot be decoded."""
