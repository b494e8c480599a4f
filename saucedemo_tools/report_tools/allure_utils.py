"""
================================================================================
Allure Report Utilities
================================================================================

Attachment helpers used by page objects and the test lifecycle to enrich
Allure results with screenshots, traces and run summaries.

Attachment failures are logged and never propagated: a missing attachment
must not change a test's outcome.

================================================================================
"""

import json
from pathlib import Path
from typing import Any, Union

import allure
from loguru import logger


_ATTACHMENT_TYPES = {
    ".png": allure.attachment_type.PNG,
    ".txt": allure.attachment_type.TEXT,
    ".csv": allure.attachment_type.CSV,
    ".json": allure.attachment_type.JSON,
    ".webm": allure.attachment_type.WEBM,
}


def attach_file(path: Union[str, Path], name: str = None) -> None:
    """
    Attach a file from disk to the current Allure test.

    Args:
        path: File to attach; type is inferred from the extension
        name: Attachment name (defaults to the file name)
    """
    path = Path(path)
    try:
        allure.attach.file(
            str(path),
            name=name or path.name,
            attachment_type=_ATTACHMENT_TYPES.get(path.suffix.lower()),
            extension=path.suffix.lstrip(".") or None,
        )
    except Exception as e:
        logger.warning(f"Failed to attach {path} to Allure: {e}")


def attach_text(text: str, name: str = "Text") -> None:
    """Attach text content to Allure report."""
    try:
        allure.attach(text, name=name, attachment_type=allure.attachment_type.TEXT)
    except Exception as e:
        logger.warning(f"Failed to attach text '{name}' to Allure: {e}")


def attach_json(data: Any, name: str = "Data") -> None:
    """Attach JSON data to Allure report."""
    try:
        allure.attach(
            json.dumps(data, indent=2, default=str),
            name=name,
            attachment_type=allure.attachment_type.JSON,
        )
    except Exception as e:
        logger.warning(f"Failed to attach JSON '{name}' to Allure: {e}")


__all__ = [
    "attach_file",
    "attach_json",
    "attach_text",
]
