"""Load the test-run summary from a Mochawesome JSON report."""

import asyncio
import logging
from pathlib import Path

from pydantic import ValidationError

from report_notifier.models.report import MochawesomeReport, TestRunSummary

log = logging.getLogger(__name__)


class ReportNotFoundError(FileNotFoundError):
    """Raised when the report artifact does not exist."""


class ReportFormatError(ValueError):
    """Raised when the report artifact is not a valid Mochawesome summary."""


async def load_summary(path: Path) -> TestRunSummary:
    """Read the report at ``path`` and return its ``stats`` summary.

    Args:
        path: Location of the Mochawesome JSON report

    Returns:
        The parsed run summary

    Raises:
        ReportNotFoundError: If no file exists at ``path``
        ReportFormatError: If the file cannot be read, is not JSON, or lacks a
            valid ``stats``

    """
    if not path.is_file():
        raise ReportNotFoundError(f"Mochawesome report not found at: {path}")

    log.info("Reading report: %s", path)
    try:
        content = await asyncio.to_thread(path.read_bytes)
    except FileNotFoundError as e:
        raise ReportNotFoundError(f"Mochawesome report not found at: {path}") from e
    except OSError as e:
        raise ReportFormatError(
            f"Cannot read Mochawesome report at {path}: {e}"
        ) from e

    try:
        report = MochawesomeReport.model_validate_json(content)
    except (ValidationError, UnicodeDecodeError) as e:
        raise ReportFormatError(f"Invalid Mochawesome report at {path}: {e}") from e

    return report.stats
