"""
SVG Builder - Utilities Package
===============================
This package contains logging and file utilities for the SVG builder.
"""

from svg_builder.utils.logger import (
    JsonFormatter, setup_logger, get_logger, LogCapture, log_exception
)
from svg_builder.utils.io import load_config, save_config

__all__ = [
    'JsonFormatter', 'setup_logger', 'get_logger', 'LogCapture',
    'log_exception', 'load_config', 'save_config'
]
