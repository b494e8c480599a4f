"""
================================================================================
Test Report Generator
================================================================================

Collects one TestResult per executed test and writes two flat reports when
the suite finishes:

- a human-readable text report (summary, table, details, failures)
- a CSV report (Excel compatible)

Results are appended under a lock so tests running on several threads
cannot lose entries. Under pytest-xdist every worker owns its own generator
and writes worker-suffixed files.

================================================================================
"""

from __future__ import annotations

import csv
import io
import os
import threading
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List, Optional

from loguru import logger


FRAMEWORK_NAME = "SauceDemoTestFramework"
FRAMEWORK_VERSION = "1.0.0"
PROJECT_MARKER = "pyproject.toml"
REPORT_DIR_NAME = "TestResults"

LINE_WIDTH = 80
NAME_WIDTH = 40
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

CSV_HEADER = [
    "Test Number",
    "Test Name",
    "Category",
    "Status",
    "Browser",
    "Start Time",
    "End Time",
    "Duration (seconds)",
    "Error Message",
    "Screenshot Path",
]


class TestStatus(str, Enum):
    """Final outcome of a test."""
    __test__ = False

    PASSED = "PASSED"
    FAILED = "FAILED"
    SKIPPED = "SKIPPED"
    INCONCLUSIVE = "INCONCLUSIVE"


@dataclass(frozen=True)
class TestResult:
    """Outcome record for a single test. Never mutated after creation."""
    __test__ = False

    test_name: str
    category: str
    status: TestStatus
    browser: str
    start_time: datetime
    end_time: datetime
    error_message: str = ""
    screenshot_path: str = ""

    @property
    def duration_seconds(self) -> float:
        return max((self.end_time - self.start_time).total_seconds(), 0.0)


@dataclass
class ResultSummary:
    """Aggregated counts over the collected results."""
    total: int = 0
    passed: int = 0
    failed: int = 0
    skipped: int = 0
    inconclusive: int = 0
    generated_at: datetime = field(default_factory=datetime.now)

    @property
    def success_rate(self) -> float:
        """Pass rate percentage (0.0 for an empty run)."""
        if self.total == 0:
            return 0.0
        return (self.passed / self.total) * 100


def find_project_root(start: Optional[Path] = None, marker: str = PROJECT_MARKER) -> Path:
    """
    Walk upward from `start` until a directory containing `marker` is found.

    Falls back to `start` itself when no marker exists on the way up.
    """
    start = Path(start or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        if (directory / marker).exists():
            return directory
    return start


def truncate(text: str, max_length: int) -> str:
    if not text or len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


class ReportGenerator:
    """
    Append-only result collector with text and CSV writers.

    Usage:
        >>> reports = ReportGenerator()
        >>> reports.add_test_result(result)
        >>> reports.generate_all_reports()
        [PosixPath('.../TestResults/SauceDemoTestFramework_20250101_120000.txt'), ...]
    """

    def __init__(
        self,
        report_dir: Optional[Path] = None,
        session_id: Optional[str] = None,
    ):
        """
        Initialize generator.

        Args:
            report_dir: Output directory (defaults to <project root>/TestResults)
            session_id: Identifier embedded in file names (defaults to a timestamp)
        """
        self.report_dir = Path(report_dir or find_project_root() / REPORT_DIR_NAME)
        self.session_id = session_id or datetime.now().strftime("%Y%m%d_%H%M%S")
        self._results: List[TestResult] = []
        self._lock = threading.Lock()

    @property
    def results(self) -> List[TestResult]:
        with self._lock:
            return list(self._results)

    def add_test_result(self, result: TestResult) -> None:
        with self._lock:
            self._results.append(result)
        logger.info(f"Added test result: {result.test_name} - {result.status.value}")

    def clear_results(self) -> None:
        with self._lock:
            self._results.clear()
        logger.info("Test results cleared from memory")

    def summary(self) -> ResultSummary:
        results = self.results
        return ResultSummary(
            total=len(results),
            passed=sum(r.status is TestStatus.PASSED for r in results),
            failed=sum(r.status is TestStatus.FAILED for r in results),
            skipped=sum(r.status is TestStatus.SKIPPED for r in results),
            inconclusive=sum(r.status is TestStatus.INCONCLUSIVE for r in results),
        )

    def _default_file_name(self, extension: str) -> str:
        worker = os.environ.get("PYTEST_XDIST_WORKER")
        suffix = f"_{worker}" if worker else ""
        return f"{FRAMEWORK_NAME}_{self.session_id}{suffix}.{extension}"

    def _write(self, file_name: str, content: str) -> Path:
        self.report_dir.mkdir(parents=True, exist_ok=True)
        path = self.report_dir / file_name
        # written verbatim; quoted CSV fields may hold embedded newlines
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        return path

    # =========================================================================
    # Text Report
    # =========================================================================

    def render_text_report(self) -> str:
        results = self.results
        summary = self.summary()
        heavy = "=" * LINE_WIDTH
        light = "-" * LINE_WIDTH
        lines: List[str] = [
            heavy,
            "SAUCEDEMO TEST EXECUTION REPORT".center(LINE_WIDTH).rstrip(),
            heavy,
            f"Generated on: {summary.generated_at.strftime(TIME_FORMAT)}",
            f"Total Tests: {summary.total}",
            f"Passed: {summary.passed}",
            f"Failed: {summary.failed}",
            f"Skipped: {summary.skipped}",
            f"Inconclusive: {summary.inconclusive}",
            f"Success Rate: {summary.success_rate:.1f}%",
            heavy,
            "",
            "TEST EXECUTION SUMMARY",
            light,
            f"{'#':<4} {'Test Name':<{NAME_WIDTH}} {'Status':<12} {'Duration':<10} {'Browser':<10}",
            light,
        ]

        for number, result in enumerate(results, start=1):
            lines.append(
                f"{number:<4} {truncate(result.test_name, NAME_WIDTH):<{NAME_WIDTH}} "
                f"{result.status.value:<12} {result.duration_seconds:.2f}s".ljust(70)
                + f"{result.browser:<10}"
            )
        lines.extend([light, "", "DETAILED TEST RESULTS", heavy])

        for number, result in enumerate(results, start=1):
            lines.extend([
                f"Test #{number}: {result.test_name}",
                f"  Status: {result.status.value}",
                f"  Category: {result.category}",
                f"  Browser: {result.browser}",
                f"  Start Time: {result.start_time.strftime(TIME_FORMAT)}",
                f"  End Time: {result.end_time.strftime(TIME_FORMAT)}",
                f"  Duration: {result.duration_seconds:.2f} seconds",
            ])
            if result.error_message:
                lines.append(f"  Error: {result.error_message}")
            if result.screenshot_path:
                lines.append(f"  Screenshot: {result.screenshot_path}")
            lines.append("")

        failed = [r for r in results if r.status is TestStatus.FAILED]
        if failed:
            lines.extend(["FAILED TESTS SUMMARY", heavy])
            for result in failed:
                lines.extend([
                    f"* {result.test_name}",
                    f"  Error: {result.error_message}",
                    "",
                ])

        lines.extend([
            heavy,
            f"Report generated by {FRAMEWORK_NAME}",
            f"Framework Version: {FRAMEWORK_VERSION}",
            heavy,
        ])
        return "\n".join(lines) + "\n"

    def generate_text_report(self, file_name: Optional[str] = None) -> Path:
        path = self._write(file_name or self._default_file_name("txt"), self.render_text_report())
        logger.info(f"TXT report generated: {path}")
        return path

    # =========================================================================
    # CSV Report
    # =========================================================================

    def render_csv_report(self) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for number, result in enumerate(self.results, start=1):
            writer.writerow([
                number,
                result.test_name,
                result.category,
                result.status.value,
                result.browser,
                result.start_time.strftime(TIME_FORMAT),
                result.end_time.strftime(TIME_FORMAT),
                f"{result.duration_seconds:.2f}",
                result.error_message or "",
                result.screenshot_path or "",
            ])
        return buffer.getvalue()

    def generate_csv_report(self, file_name: Optional[str] = None) -> Path:
        path = self._write(file_name or self._default_file_name("csv"), self.render_csv_report())
        logger.info(f"CSV report generated: {path}")
        return path

    def generate_all_reports(self) -> List[Path]:
        """Write both reports; a failure in one does not prevent the other."""
        paths: List[Path] = []
        for generate in (self.generate_text_report, self.generate_csv_report):
            try:
                paths.append(generate())
            except OSError as e:
                logger.error(f"Error generating report with {generate.__name__}: {e}")
        return paths


__all__ = [
    "ReportGenerator",
    "ResultSummary",
    "TestResult",
    "TestStatus",
    "find_project_root",
    "truncate",
]
