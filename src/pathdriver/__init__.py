"""Path string manipulation for POSIX and Windows syntaxes behind one API."""

from .errors import PathDriverError, InvalidArgumentError, ConfigurationError
from .path_info import PathInfo
from .drivers import (
    DRIVERS, PathDriver, PosixDriver, WindowsDriver,
    create_driver, normalize_array, trim_array
)
from .facade import Path
from .logging import setup_logging, setup_logging_from_config, get_logger
from .logging_config import LoggingConfig
from .config import ConfigLoader, DriverConfig, PathDriverConfig, configure

__version__ = "0.1.0"

__all__ = [
    'PathDriverError',
    'InvalidArgumentError',
    'ConfigurationError',
    'PathInfo',
    'DRIVERS',
    'PathDriver',
    'PosixDriver',
    'WindowsDriver',
    'create_driver',
    'normalize_array',
    'trim_array',
    'Path',
    'setup_logging',
    'setup_logging_from_config',
    'get_logger',
    'LoggingConfig',
    'ConfigLoader',
    'DriverConfig',
    'PathDriverConfig',
    'configure',
]
