"""Placeholder count comparison between two localization tables."""

from dataclasses import dataclass
from typing import List, Mapping, Union

from ..errors import MissingKeyError


@dataclass(frozen=True)
class MismatchedCount:
    """A key whose ``%`` count differs between source and translation."""
    key: str
    source_count: int
    translated_count: int

    def describe(self) -> str:
        return (
            f"This attributed string: {self.key} doesn't have the correct amount "
            f"of occurences of the format argument "
            f"(expected {self.source_count}, got {self.translated_count})"
        )


@dataclass(frozen=True)
class MissingKey:
    """A source key absent from the translation."""
    key: str

    def describe(self) -> str:
        return f"Language file is missing strings for key {self.key}"


Finding = Union[MismatchedCount, MissingKey]


def compare(
    source: Mapping[str, int],
    translated: Mapping[str, int],
    strict: bool = True
) -> List[Finding]:
    """
    Compare placeholder counts of ``translated`` against ``source``.

    Keys that only exist in ``translated`` are ignored.

    Args:
        source: Source table (key -> placeholder count)
        translated: Translated table
        strict: Raise on the first missing key instead of collecting it

    Returns:
        Findings in source iteration order

    Raises:
        MissingKeyError: ``strict`` is set and a source key is missing
    """
    findings: List[Finding] = []

    for key, source_count in source.items():
        if key not in translated:
            missing = MissingKey(key)
            if strict:
                raise MissingKeyError(missing)
            findings.append(missing)
            continue

        translated_count = translated[key]
        if translated_count != source_count:
            findings.append(MismatchedCount(key, source_count, translated_count))

    return findings
