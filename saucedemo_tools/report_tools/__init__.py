"""
Report tools: Allure attachment helpers and the flat text/CSV run reports.
"""

from .allure_utils import attach_file, attach_json, attach_text
from .report_generator import ReportGenerator, ResultSummary, TestResult, TestStatus

__all__ = [
    "ReportGenerator",
    "ResultSummary",
    "TestResult",
    "TestStatus",
    "attach_file",
    "attach_json",
    "attach_text",
]
