"""Utility modules."""

from .colors import Colors
from .config import Config, ConfigValidationError, ConfigValidationWarning
from .logging import get_logger, configure_logging, reset_logger
from .recoder import IconvRecoder, Recoder

__all__ = [
    'Colors',
    'Config',
    'ConfigValidationError',
    'ConfigValidationWarning',
    'get_logger',
    'configure_logging',
    'reset_logger',
    'IconvRecoder',
    'Recoder',
]
