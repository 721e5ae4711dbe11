"""Models for the Mochawesome JSON summary written after a test run."""

from pydantic import Field

from report_notifier.models.base import Model


class TestRunSummary(Model):
    """Counters from the ``stats`` object of a Mochawesome report.

    The counters are reported independently by the reporter; no relation
    between ``total_tests`` and the other counters is assumed.
    """

    __test__ = False

    total_tests: int = Field(..., alias="tests", ge=0, description="Tests run")
    passed: int = Field(..., alias="passes", ge=0, description="Passing tests")
    failed: int = Field(..., alias="failures", ge=0, description="Failing tests")
    pending: int = Field(..., alias="pending", ge=0, description="Skipped tests")
    pass_percent: float = Field(
        ..., alias="passPercent", ge=0, le=100, description="Pass rate in percent"
    )
    duration_ms: int = Field(
        ..., alias="duration", ge=0, description="Run duration in milliseconds"
    )


class MochawesomeReport(Model):
    """Top-level envelope of the report artifact; only ``stats`` is consumed."""

    stats: TestRunSummary
