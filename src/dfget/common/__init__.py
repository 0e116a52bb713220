"""Common utilities for dfget packages."""

from .config import ConfigLoader
from .config_utils import expand_path_variables
from .logging import setup_logging, get_logger, LogContext
from .logging_config import LoggingConfig
from .errors import DfgetError
from .path_utils import StrPath, parent_dir
from .checksums import compute_md5

__all__ = [
    'ConfigLoader',
    'LoggingConfig',
    'expand_path_variables',
    'setup_logging',
    'get_logger',
    'LogContext',
    'DfgetError',
    'StrPath',
    'parent_dir',
    'compute_md5',
]
