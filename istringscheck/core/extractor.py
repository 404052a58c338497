"""Placeholder extraction from Apple .strings files."""

import re
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, List, Optional

from ..errors import RecodeError
from ..utils.logging import get_logger
from ..utils.recoder import IconvRecoder, Recoder

# "key" = "value";  (whole line, no surrounding whitespace)
ENTRY_PATTERN = re.compile(r'"(.*)" = "(.*)";')
PLACEHOLDER_CHAR = '%'


class LocalizationTable(Mapping):
    """Read-only mapping of key -> placeholder count for one file."""

    def __init__(self, counts: Dict[str, int], path: Optional[Path] = None):
        self._counts = MappingProxyType(dict(counts))
        self.path = path

    def __getitem__(self, key: str) -> int:
        return self._counts[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self):
        return f"LocalizationTable({dict(self._counts)!r}, path={self.path!r})"


def split_lines(text: str) -> List[str]:
    """Split on ``\\n`` and drop one trailing ``\\r`` per line."""
    lines = text.split('\n')
    if lines and lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def count_placeholders(value: str) -> int:
    """Count literal ``%`` characters; ``%%`` counts twice."""
    return value.count(PLACEHOLDER_CHAR)


def parse_strings(text: str) -> Dict[str, int]:
    """
    Parse decoded .strings text into key -> placeholder count.

    Lines that are not exactly ``"key" = "value";`` are skipped. Later
    duplicates overwrite earlier ones.
    """
    counts: Dict[str, int] = {}

    for line in split_lines(text):
        match = ENTRY_PATTERN.fullmatch(line)
        if not match:
            continue

        key, value = match.groups()
        counts[key] = count_placeholders(value)

    return counts


class StringsExtractor:
    """
    Builds LocalizationTables from files on disk.

    The raw bytes of each file go through the recoder first, even when the
    declared encoding is already UTF-8.
    """

    def __init__(self, recoder: Optional[Recoder] = None):
        """
        Args:
            recoder: Callable (bytes, encoding) -> UTF-8 bytes.
                Defaults to IconvRecoder().
        """
        self.recoder = recoder if recoder is not None else IconvRecoder()

    def extract(self, path: Path, declared_encoding: str) -> LocalizationTable:
        """
        Extract the placeholder table of one file.

        Args:
            path: .strings file
            declared_encoding: Encoding of the file on disk

        Returns:
            LocalizationTable (empty when no line matches)

        Raises:
            OSError: The file cannot be read
            RecodeError: Recoding failed or produced invalid UTF-8
        """
        path = Path(path)
        raw = path.read_bytes()

        try:
            recoded = self.recoder(raw, declared_encoding)
        except RecodeError as e:
            if e.path is None:
                e.path = path
            raise

        try:
            text = recoded.decode('utf-8')
        except UnicodeDecodeError as e:
            raise RecodeError(f"recoded output is not valid UTF-8: {e}", declared_encoding, path) from e

        counts = parse_strings(text)
        get_logger().debug(f"Parsed {len(counts)} entries from {path}")

        return LocalizationTable(counts, path=path)


def extract(
    path: Path,
    declared_encoding: str = 'utf-8',
    recoder: Optional[Recoder] = None
) -> LocalizationTable:
    """Shortcut for ``StringsExtractor(recoder).extract(path, declared_encoding)``."""
    return StringsExtractor(recoder).extract(path, declared_encoding)
