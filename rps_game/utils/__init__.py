"""
工具类模块
Utility Classes
"""
from .logger import setup_logger, get_log_level, set_global_level, close_file_handlers
from .config_loader import ConfigLoader, DEFAULT_CONFIG, DEFAULT_MAX_ROUNDS
from .error_handler import ErrorHandler, global_error_handler
from .exceptions import (
    GameException,
    InvalidInput,
    InvalidState,
    ConfigurationException
)

__all__ = [
    'setup_logger',
    'get_log_level',
    'set_global_level',
    'close_file_handlers',
    'ConfigLoader',
    'DEFAULT_CONFIG',
    'DEFAULT_MAX_ROUNDS',
    'ErrorHandler',
    'global_error_handler',
    'GameException',
    'InvalidInput',
    'InvalidState',
    'ConfigurationException'
]
