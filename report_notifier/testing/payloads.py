"""Mochawesome report payload builders for tests."""

from typing import Any


def report_stats(
    *,
    tests: int = 10,
    passes: int = 10,
    failures: int = 0,
    pending: int = 0,
    pass_percent: float = 100,
    duration: int = 60000,
) -> dict[str, Any]:
    """Build a ``stats`` object as written by cypress-mochawesome-reporter."""
    return {
        "suites": 2,
        "tests": tests,
        "passes": passes,
        "pending": pending,
        "failures": failures,
        "start": "2099-01-01T12:00:00.000Z",
        "end": "2099-01-01T12:01:00.000Z",
        "testsRegistered": tests,
        "passPercent": pass_percent,
        "pendingPercent": 0,
        "other": 0,
        "hasOther": False,
        "skipped": 0,
        "hasSkipped": False,
        "duration": duration,
    }


def mochawesome_report(**stats: Any) -> dict[str, Any]:
    """Build a full report document around :func:`report_stats`."""
    return {
        "stats": report_stats(**stats),
        "results": [],
        "meta": {
            "mocha": {"version": "10.2.0"},
            "mochawesome": {"options": {"quiet": False}, "version": "7.1.3"},
            "marge": {"options": {"saveJson": True}, "version": "6.2.0"},
        },
    }
