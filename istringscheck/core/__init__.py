"""Core modules: discovery, extraction and comparison."""

from .locator import discover
from .extractor import LocalizationTable, StringsExtractor, extract, parse_strings
from .comparator import Finding, MismatchedCount, MissingKey, compare

__all__ = [
    'discover',
    'LocalizationTable',
    'StringsExtractor',
    'extract',
    'parse_strings',
    'Finding',
    'MismatchedCount',
    'MissingKey',
    'compare',
]
