"""
Utility modules for classifierTournament.

This module contains logging and configuration utilities.
"""

from .logger import get_logger, setup_logging
from .config import Config, ConfigManager

__all__ = [
    "get_logger",
    "setup_logging",
    "Config",
    "ConfigManager",
]
