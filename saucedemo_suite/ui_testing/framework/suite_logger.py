"""
================================================================================
Test Logger
================================================================================

Thin wrapper around a bound Loguru logger. One instance is created per test
and handed to the browser session and every page object, so log lines carry
the test name without any global accessor.

================================================================================
"""

from __future__ import annotations

from typing import Any

from loguru import logger as _root_logger


class TestLogger:
    """Loguru logger bound to a test name, with step/assertion helpers."""

    __test__ = False

    def __init__(self, name: str = "suite"):
        self.name = name
        self._logger = _root_logger.bind(test=name)

    def child(self, name: str) -> "TestLogger":
        """Logger for a specific test, sharing the same sinks."""
        return TestLogger(name)

    def debug(self, message: str) -> None:
        self._logger.opt(depth=1).debug(message)

    def info(self, message: str) -> None:
        self._logger.opt(depth=1).info(message)

    def warning(self, message: str) -> None:
        self._logger.opt(depth=1).warning(message)

    def error(self, message: str) -> None:
        self._logger.opt(depth=1).error(message)

    def step(self, step: str) -> None:
        self._logger.opt(depth=1).info(f"STEP: {step}")

    def assertion(self, description: str, expected: Any, actual: Any, passed: bool) -> None:
        status = "PASSED" if passed else "FAILED"
        level = "INFO" if passed else "WARNING"
        self._logger.opt(depth=1).log(
            level,
            f"ASSERTION {status}: {description} | Expected: {expected} | Actual: {actual}",
        )


__all__ = [
    "TestLogger",
]
