"""
================================================================================
SauceDemo Tools Common Utilities
================================================================================

Centralized Loguru logging configuration shared by the UI suite, the unit
tests and the command-line runner.

Exports:
    - init_logger: Configure console + rotating file sinks once per process
    - reset_logger: Drop configured sinks (used by tests)

Usage:
    from saucedemo_tools.common import init_logger

    init_logger(level="DEBUG", log_file="logs/test-execution.log")

================================================================================
"""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger


CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[test]}</cyan> | {message}"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS Z} | {level} | {extra[test]} | {message}"

_logger_initialized: bool = False
_sink_ids: list = []


def init_logger(
    level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    rotation: str = "1 day",
    retention: str = "7 days",
    force: bool = False,
) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path; parent directory is created
        rotation: Loguru rotation policy for the file sink
        retention: Loguru retention policy for the file sink
        force: Reconfigure even if already initialized
    """
    global _logger_initialized

    if _logger_initialized and not force:
        return

    logger.remove()
    _sink_ids.clear()
    logger.configure(extra={"test": "suite"})

    _sink_ids.append(
        logger.add(
            sys.stderr,
            level=level.upper(),
            format=CONSOLE_FORMAT,
            colorize=True,
            backtrace=True,
            diagnose=False,
        )
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _sink_ids.append(
            logger.add(
                str(log_path),
                level=level.upper(),
                format=FILE_FORMAT,
                rotation=rotation,
                retention=retention,
                enqueue=True,
                encoding="utf-8",
            )
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {level}")


def reset_logger() -> None:
    """Remove sinks added by init_logger and allow re-initialization."""
    global _logger_initialized

    for sink_id in _sink_ids:
        try:
            logger.remove(sink_id)
        except ValueError:
            pass
    _sink_ids.clear()
    _logger_initialized = False


def is_logger_initialized() -> bool:
    return _logger_initialized


__all__ = [
    "init_logger",
    "is_logger_initialized",
    "reset_logger",
]
