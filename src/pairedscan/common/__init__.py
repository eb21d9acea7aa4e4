"""Common utilities for pairedscan."""

from .config import ConfigLoader
from .logging import setup_logging, get_logger, LogContext
from .errors import ConfigurationError, PairedScanError
from .path_utils import is_hidden, has_suffix

__all__ = [
    'ConfigLoader',
    'setup_logging',
    'get_logger',
    'LogContext',
    'PairedScanError',
    'ConfigurationError',
    'is_hidden',
    'has_suffix',
]
