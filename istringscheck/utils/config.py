"""Configuration management for istringscheck."""

import shutil
import yaml
from pathlib import Path
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field

CONFIG_FILE_NAME = '.istringscheck.yml'


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__(f"Configuration validation failed: {'; '.join(errors)}")


class ConfigValidationWarning:
    """Represents a configuration warning (non-fatal)."""

    def __init__(self, message: str):
        self.message = message

    def __str__(self):
        return self.message


@dataclass
class FilesConfig:
    """Which files count as localization files."""
    extension: str = "strings"


@dataclass
class EncodingConfig:
    """Declared encodings and the recoding command."""
    source: str = "utf-8"
    translations: str = "utf-8"
    recoder: str = "iconv"


@dataclass
class CheckConfig:
    """Comparison policy."""
    # Abort on the first key missing from a translation
    strict_missing_keys: bool = True
    # Exit with status 1 when any placeholder count differs
    fail_on_mismatch: bool = False


@dataclass
class Config:
    """Main configuration class."""
    files: FilesConfig = field(default_factory=FilesConfig)
    encoding: EncodingConfig = field(default_factory=EncodingConfig)
    check: CheckConfig = field(default_factory=CheckConfig)

    @classmethod
    def from_file(cls, config_path: Optional[Path] = None) -> 'Config':
        """
        Load configuration from a YAML file.

        Without an explicit path, ``.istringscheck.yml`` in the current
        directory is used when present; otherwise defaults are returned.
        """
        if config_path is None:
            config_path = Path.cwd() / CONFIG_FILE_NAME

            if not config_path.exists():
                return cls()

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise ConfigValidationError([f"{config_path}: {e}"]) from e

        if not isinstance(data, dict):
            raise ConfigValidationError([f"{config_path}: top level must be a mapping"])

        try:
            return cls(
                files=FilesConfig(**(data.get('files') or {})),
                encoding=EncodingConfig(**(data.get('encoding') or {})),
                check=CheckConfig(**(data.get('check') or {})),
            )
        except TypeError as e:
            raise ConfigValidationError([f"{config_path}: {e}"]) from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            'files': {
                'extension': self.files.extension,
            },
            'encoding': {
                'source': self.encoding.source,
                'translations': self.encoding.translations,
                'recoder': self.encoding.recoder,
            },
            'check': {
                'strict_missing_keys': self.check.strict_missing_keys,
                'fail_on_mismatch': self.check.fail_on_mismatch,
            },
        }

    def save(self, config_path: Optional[Path] = None):
        """Save configuration to YAML file."""
        if config_path is None:
            config_path = Path.cwd() / CONFIG_FILE_NAME

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def validate(self, raise_on_error: bool = False) -> tuple[List[str], List[ConfigValidationWarning]]:
        """
        Validate configuration and return errors and warnings.

        Args:
            raise_on_error: If True, raise ConfigValidationError on validation errors

        Returns:
            Tuple of (errors, warnings) lists
        """
        errors = []
        warnings = []

        extension = self.files.extension
        if not extension or not isinstance(extension, str):
            errors.append("files.extension cannot be empty")
        elif extension.startswith('.') or '/' in extension:
            errors.append(
                f"Invalid files.extension '{extension}'. "
                f"Use the bare suffix without a dot (e.g. 'strings')"
            )

        for name in ('source', 'translations', 'recoder'):
            value = getattr(self.encoding, name)
            if not isinstance(value, str):
                errors.append(f"encoding.{name} must be a string, got {value!r}")
            elif not value:
                errors.append(f"encoding.{name} cannot be empty")

        recoder = self.encoding.recoder
        if isinstance(recoder, str) and recoder and shutil.which(recoder) is None:
            warnings.append(ConfigValidationWarning(
                f"Recoder command not found on PATH: {recoder}"
            ))

        for name in ('strict_missing_keys', 'fail_on_mismatch'):
            value = getattr(self.check, name)
            if not isinstance(value, bool):
                errors.append(f"check.{name} must be true or false, got {value!r}")

        if raise_on_error and errors:
            raise ConfigValidationError(errors)

        return errors, warnings
