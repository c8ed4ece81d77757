"""
Configuration module for Multi-Format Export.
"""
from .constants import *
from .logging_config import setup_logger, get_logger, set_log_level, logger

__all__ = [
    # Logging
    'setup_logger',
    'get_logger',
    'set_log_level',
    'logger',
    # Constants (all exported via *)
]
