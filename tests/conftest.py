"""Shared fixtures."""

import json
from collections.abc import Generator
from pathlib import Path
from typing import Protocol

import pytest
from aioresponses import aioresponses as aioresponses_cls

from report_notifier.testing.payloads import mochawesome_report


class WriteReportFn(Protocol):
    """Protocol for report writing function."""

    def __call__(self, **stats: int | float) -> Path:
        """Write a report with the given stats and return its path."""


@pytest.fixture
def aioresponses() -> Generator[aioresponses_cls, None, None]:
    """Intercept aiohttp requests."""
    with aioresponses_cls() as mock:
        yield mock


@pytest.fixture
def write_report(tmp_path: Path) -> WriteReportFn:
    """Return a function writing a Mochawesome report into tmp_path."""

    def _write(**stats: int | float) -> Path:
        path = tmp_path / "reports" / "index.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(mochawesome_report(**stats)), encoding="utf-8")
        return path

    return _write
