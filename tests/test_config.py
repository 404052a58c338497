"""Tests for configuration loading and validation."""

import pytest
from pathlib import Path
from unittest.mock import patch
import tempfile
import yaml

from istringscheck.utils.config import (
    Config,
    ConfigValidationError,
    ConfigValidationWarning,
    FilesConfig,
    EncodingConfig,
    CheckConfig,
)


class TestConfigValidation:
    """Test cases for Config.validate() method."""

    @patch('istringscheck.utils.config.shutil.which', return_value='/usr/bin/iconv')
    def test_valid_default_config(self, mock_which):
        """Default config should pass validation."""
        errors, warnings = Config().validate()
        assert errors == []
        assert warnings == []

    def test_empty_extension(self):
        """Empty extension should cause error."""
        config = Config()
        config.files.extension = ''
        errors, _ = config.validate()
        assert "files.extension cannot be empty" in errors

    def test_dotted_extension(self):
        """Extension with a leading dot should cause error."""
        config = Config()
        config.files.extension = '.strings'
        errors, _ = config.validate()
        assert len(errors) == 1
        assert "Invalid files.extension" in errors[0]

    def test_empty_encodings(self):
        """Both encodings must be set."""
        config = Config()
        config.encoding.source = ''
        config.encoding.translations = ''
        errors, _ = config.validate()
        assert "encoding.source cannot be empty" in errors
        assert "encoding.translations cannot be empty" in errors

    def test_empty_recoder(self):
        """Recoder command must be set."""
        config = Config()
        config.encoding.recoder = ''
        errors, _ = config.validate()
        assert "encoding.recoder cannot be empty" in errors

    @patch('istringscheck.utils.config.shutil.which', return_value=None)
    def test_recoder_not_on_path_is_warning(self, mock_which):
        """A missing recoder binary is only a warning."""
        errors, warnings = Config().validate()
        assert errors == []
        assert len(warnings) == 1
        assert isinstance(warnings[0], ConfigValidationWarning)
        assert "not found on PATH" in str(warnings[0])

    def test_non_string_encoding(self):
        """Non-string encodings should cause errors."""
        config = Config()
        config.encoding.source = 5
        config.encoding.recoder = 5
        errors, _ = config.validate()
        assert "encoding.source must be a string, got 5" in errors
        assert "encoding.recoder must be a string, got 5" in errors

    def test_non_bool_check_options(self):
        """check options must be real booleans."""
        config = Config()
        config.check.strict_missing_keys = "no"
        config.check.fail_on_mismatch = 1
        errors, _ = config.validate()
        assert len(errors) == 2
        assert "check.strict_missing_keys must be true or false" in errors[0]
        assert "check.fail_on_mismatch must be true or false" in errors[1]

    def test_raise_on_error(self):
        """raise_on_error=True should raise ConfigValidationError."""
        config = Config()
        config.files.extension = ''
        with pytest.raises(ConfigValidationError) as exc_info:
            config.validate(raise_on_error=True)
        assert "files.extension" in str(exc_info.value)
        assert exc_info.value.errors


class TestConfigFile:
    """Test cases for loading and saving YAML config."""

    def test_missing_default_file_returns_defaults(self):
        """No .istringscheck.yml means default config."""
        with tempfile.TemporaryDirectory() as tmpdir:
            with patch('istringscheck.utils.config.Path.cwd', return_value=Path(tmpdir)):
                config = Config.from_file()

        assert config == Config()

    def test_load_from_cwd(self):
        """.istringscheck.yml in the working directory is picked up."""
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / '.istringscheck.yml').write_text(yaml.dump({
                'encoding': {'translations': 'utf-16'},
                'check': {'fail_on_mismatch': True},
            }))
            with patch('istringscheck.utils.config.Path.cwd', return_value=Path(tmpdir)):
                config = Config.from_file()

        assert config.encoding.translations == 'utf-16'
        assert config.encoding.source == 'utf-8'
        assert config.check.fail_on_mismatch is True
        assert config.check.strict_missing_keys is True

    def test_empty_file(self):
        """An empty YAML file gives defaults."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'empty.yml'
            path.write_text('')
            assert Config.from_file(path) == Config()

    def test_unknown_option(self):
        """Unknown keys are reported as config errors."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'bad.yml'
            path.write_text(yaml.dump({'files': {'pattern': '*.strings'}}))

            with pytest.raises(ConfigValidationError):
                Config.from_file(path)

    def test_malformed_yaml(self):
        """Unparseable YAML is a config error, not a parser traceback."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'broken.yml'
            path.write_text('files: [unclosed\n')

            with pytest.raises(ConfigValidationError) as exc_info:
                Config.from_file(path)

            assert str(path) in exc_info.value.errors[0]

    def test_non_utf8_file(self):
        """A config file that is not UTF-8 is a config error."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'latin1.yml'
            path.write_bytes(b'encoding:\n  source: \xe9\xff\n')

            with pytest.raises(ConfigValidationError):
                Config.from_file(path)

    def test_non_mapping_file(self):
        """A YAML list at top level is rejected."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'list.yml'
            path.write_text('- strings\n')

            with pytest.raises(ConfigValidationError):
                Config.from_file(path)

    def test_save_and_reload(self):
        """Saved config loads back unchanged."""
        config = Config(
            files=FilesConfig(extension='strings'),
            encoding=EncodingConfig(source='utf-16', translations='utf-16', recoder='/usr/local/bin/iconv'),
            check=CheckConfig(strict_missing_keys=False, fail_on_mismatch=True),
        )
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / '.istringscheck.yml'
            config.save(path)

            assert Config.from_file(path) == config

    def test_to_dict_sections(self):
        """to_dict has one entry per section."""
        data = Config().to_dict()
        assert list(data) == ['files', 'encoding', 'check']
        assert data['encoding']['recoder'] == 'iconv'
