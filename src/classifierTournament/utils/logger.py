"""
Logging utilities for classifierTournament.

Every component logs through a child of the "classifierTournament" logger.
"""

import logging
import sys
from typing import Optional, Union
from pathlib import Path

LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s:%(lineno)d | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Return the child logger "classifierTournament.<name>" with a stdout handler.
    
    Args:
        name: Component name, usually the class name
        level: Initial level of the logger and its handler
    """
    logger = logging.getLogger(f"classifierTournament.{name}")
    
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        
        logger.addHandler(console_handler)
        logger.setLevel(level)
        # Records still reach the root logger so setup_logging() can tee them to a file
        logger.propagate = True
    
    return logger


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    log_format: Optional[str] = None
) -> None:
    """
    Set the level of every package logger and optionally tee records to a file.
    
    Args:
        level: Logging level (number or name such as "INFO")
        log_file: Optional log file path
        log_format: Optional custom log format
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {level}")
    if log_format is None:
        log_format = LOG_FORMAT
    
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    
    package_logger = logging.getLogger("classifierTournament")
    package_logger.setLevel(level)
    for child in list(logging.Logger.manager.loggerDict.values()):
        if isinstance(child, logging.Logger) and child.name.startswith("classifierTournament."):
            child.setLevel(level)
            for handler in child.handlers:
                handler.setLevel(level)
    
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(log_format, datefmt=DATE_FORMAT))
        root_logger.addHandler(file_handler)
