"""
================================================================================
SauceDemo Tools
================================================================================

Supporting utilities for the SauceDemo test suites.

Modules:
    - common: Shared logging configuration
    - report_tools: Allure attachments and text/CSV run reports

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
