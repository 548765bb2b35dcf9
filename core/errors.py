"""Exceptions raised while reading word-list sources."""


class WordListError(Exception):
    """Base exception for word list errors."""

    pass


class SourceMissingError(WordListError):
    """Raised by the line loader when a source path does not exist.

    Never escapes the public operations: a missing source is skipped.
    """

    def __init__(self, path: str):
        super().__init__(f"Word list not found: {path}")
        self.path = path


class SourceUnreadableError(WordListError):
    """Raised when a source exists but cannot be opened or read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot read word list {path}: {reason}")
        self.path = path
        self.reason = reason
