"""Version information for istringscheck."""

__version__ = "0.4.0"
__author__ = "istringscheck contributors"
__description__ = "Checks that translated .strings files keep the source format placeholders"

# Changelog:
# 0.4.0 - Configuration and logging
#       - .istringscheck.yml configuration (extension, encodings, recoder, strictness)
#       - Config validation with ConfigValidationError and warnings
#       - Structured logging (istringscheck.utils.logging) with colored console output
#       - --verbose / --quiet / --log-file / --no-color flags
#       - --no-strict collects missing keys as findings instead of aborting
#       - --fail-on-mismatch for CI pipelines
#
# 0.3.0 - Injectable recoder
#       - iconv invocation moved behind IconvRecoder
#       - Any callable (bytes, encoding) -> bytes can be passed to the extractor
#       - RecodeError raised for spawn failures, non-zero exit and invalid UTF-8 output
#
# 0.2.0 - Structured findings
#       - MismatchedCount and MissingKey findings
#       - CheckReport / FileReport returned from StringsChecker.run()
#       - Source file is skipped when it lives under the translations directory
#
# 0.1.0 - Initial release
#       - istringscheck <source> <translations>
#       - Recursive .strings discovery
#       - "%" occurrence count comparison per key
