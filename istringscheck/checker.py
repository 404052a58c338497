"""Source-versus-translations placeholder check."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .core.comparator import Finding, MismatchedCount, MissingKey, compare
from .core.extractor import StringsExtractor
from .core.locator import discover
from .errors import MissingKeyError
from .utils.config import Config
from .utils.logging import get_logger
from .utils.recoder import IconvRecoder, Recoder


@dataclass
class FileReport:
    """Findings for one translation file."""
    path: Path
    findings: List[Finding] = field(default_factory=list)

    @property
    def mismatches(self) -> List[MismatchedCount]:
        return [f for f in self.findings if isinstance(f, MismatchedCount)]

    @property
    def missing_keys(self) -> List[MissingKey]:
        return [f for f in self.findings if isinstance(f, MissingKey)]


@dataclass
class CheckReport:
    """Result of one run."""
    source_path: Path
    source_key_count: int = 0
    files: List[FileReport] = field(default_factory=list)

    @property
    def files_checked(self) -> int:
        return len(self.files)

    @property
    def mismatch_count(self) -> int:
        return sum(len(report.mismatches) for report in self.files)

    @property
    def missing_count(self) -> int:
        return sum(len(report.missing_keys) for report in self.files)

    @property
    def has_mismatches(self) -> bool:
        return self.mismatch_count > 0


def _same_file(a: Path, b: Path) -> bool:
    return Path(a).resolve() == Path(b).resolve()


class StringsChecker:
    """
    Runs the whole pipeline.

    The source file is extracted once; every .strings file found under the
    translations directory (except the source itself) is extracted and
    compared against it, sequentially and in discovery order.
    """

    def __init__(self, config: Optional[Config] = None, recoder: Optional[Recoder] = None):
        """
        Args:
            config: Loaded configuration (defaults when None)
            recoder: Injected recoder; an IconvRecoder built from the
                config is used when None
        """
        self.config = config or Config()
        if recoder is None:
            recoder = IconvRecoder(self.config.encoding.recoder)
        self.extractor = StringsExtractor(recoder)
        self.logger = get_logger()

    def find_translations(self, source_path: Path, translations_dir: Path) -> List[Path]:
        """Discover translation files, without the source file."""
        files = discover(translations_dir, self.config.files.extension)
        return [path for path in files if not _same_file(path, source_path)]

    def check_file(self, source_table, path: Path) -> FileReport:
        """
        Extract and compare one translation file.

        Raises:
            MissingKeyError: strict mode and a source key is missing
        """
        self.logger.info(f"Parsing language file {path}")

        translated = self.extractor.extract(path, self.config.encoding.translations)

        try:
            findings = compare(
                source_table,
                translated,
                strict=self.config.check.strict_missing_keys
            )
        except MissingKeyError as e:
            e.path = path
            raise

        for finding in findings:
            self.logger.warning(finding.describe())

        return FileReport(path=path, findings=findings)

    def run(self, source_path: Path, translations_dir: Path) -> CheckReport:
        """
        Check every translation under ``translations_dir`` against ``source_path``.

        Returns:
            CheckReport

        Raises:
            OSError: A file or directory could not be read
            RecodeError: A file could not be recoded
            MissingKeyError: strict mode and a translation lacks a source key
        """
        source_path = Path(source_path)
        translations_dir = Path(translations_dir)

        source_table = self.extractor.extract(source_path, self.config.encoding.source)
        self.logger.debug(f"Source {source_path}: {len(source_table)} keys")

        report = CheckReport(source_path=source_path, source_key_count=len(source_table))

        for path in self.find_translations(source_path, translations_dir):
            report.files.append(self.check_file(source_table, path))

        self._log_summary(report)
        return report

    def _log_summary(self, report: CheckReport) -> None:
        self.logger.debug(
            f"Checked {report.files_checked} files, "
            f"{report.mismatch_count} mismatches, {report.missing_count} missing keys"
        )
        if report.files_checked and not (report.mismatch_count or report.missing_count):
            self.logger.success(f"All {report.files_checked} translations match {report.source_path.name}")
