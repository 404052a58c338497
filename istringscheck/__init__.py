"""
istringscheck
=============

Checks that translated Apple ``.strings`` files keep the same number of
``%`` format placeholders as the source localization file.

Usage:
    from istringscheck import StringsChecker

    report = StringsChecker().run('en.lproj/Localizable.strings', 'Resources')
    print(f"{report.mismatch_count} mismatches in {report.files_checked} files")

CLI:
    istringscheck en.lproj/Localizable.strings Resources/
"""

from .__version__ import __version__, __author__, __description__

from .checker import StringsChecker, CheckReport, FileReport
from .core.locator import discover
from .core.extractor import LocalizationTable, StringsExtractor, extract
from .core.comparator import MismatchedCount, MissingKey, compare
from .errors import StringsCheckError, ArgumentError, RecodeError, MissingKeyError
from .utils.recoder import IconvRecoder

__all__ = [
    '__version__',
    '__author__',
    '__description__',
    'StringsChecker',
    'CheckReport',
    'FileReport',
    'discover',
    'LocalizationTable',
    'StringsExtractor',
    'extract',
    'MismatchedCount',
    'MissingKey',
    'compare',
    'StringsCheckError',
    'ArgumentError',
    'RecodeError',
    'MissingKeyError',
    'IconvRecoder',
]
