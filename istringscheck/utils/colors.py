"""ANSI color codes for terminal output."""

import re


class Colors:
    """ANSI color codes for terminal output."""

    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'

    enabled = True

    _ANSI_PATTERN = re.compile(r'\033\[[0-9;]*m')

    @classmethod
    def _wrap(cls, code: str, text: str) -> str:
        if not cls.enabled:
            return text
        return f"{code}{text}{cls.ENDC}"

    @classmethod
    def success(cls, text: str) -> str:
        """Return text in green color."""
        return cls._wrap(cls.OKGREEN, text)

    @classmethod
    def error(cls, text: str) -> str:
        """Return text in red color."""
        return cls._wrap(cls.FAIL, text)

    @classmethod
    def strip(cls, text: str) -> str:
        """Remove ANSI escape sequences from text."""
        return cls._ANSI_PATTERN.sub('', text)
