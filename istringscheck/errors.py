"""Error taxonomy for istringscheck."""

from pathlib import Path
from typing import Optional


class StringsCheckError(Exception):
    """Base class for every fatal istringscheck error."""


class ArgumentError(StringsCheckError):
    """Raised when the command line arguments are unusable."""


class RecodeError(StringsCheckError):
    """Raised when a file cannot be recoded to UTF-8."""

    def __init__(self, message: str, encoding: str, path: Optional[Path] = None):
        self.encoding = encoding
        self.path = path
        super().__init__(message)

    def __str__(self):
        message = super().__str__()
        if self.path is not None:
            return f"{self.path}: {message}"
        return message


class MissingKeyError(StringsCheckError):
    """
    Raised when a translation lacks a key that the source file defines.

    The comparison stops at the first missing key, so ``finding`` always
    refers to exactly one key.
    """

    def __init__(self, finding, path: Optional[Path] = None):
        self.finding = finding
        self.path = path
        super().__init__(finding.key)

    @property
    def key(self) -> str:
        return self.finding.key

    def __str__(self):
        message = f"Language file is missing strings for key {self.key}"
        if self.path is not None:
            return f"{message} ({self.path})"
        return message
