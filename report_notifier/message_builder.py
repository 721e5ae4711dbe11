"""Build the chat message summarising a test run."""

import math

from report_notifier.config import NotifierConfig
from report_notifier.models.message import NotificationMessage
from report_notifier.models.report import TestRunSummary

PASSED_EMOJI = ":white_check_mark:"
FAILED_EMOJI = ":warning:"


def status_label(summary: TestRunSummary) -> str:
    """Return ``FAILED`` when any test failed, ``PASSED`` otherwise."""
    return "FAILED" if summary.failed > 0 else "PASSED"


def status_emoji(summary: TestRunSummary) -> str:
    return FAILED_EMOJI if summary.failed > 0 else PASSED_EMOJI


def format_pass_percent(pass_percent: float) -> str:
    """Floor the pass rate for display, e.g. 99.6 -> ``99%``."""
    return f"{math.floor(pass_percent)}%"


def format_duration(duration_ms: int) -> str:
    """Render milliseconds as minutes with two decimals, e.g. ``2.08 min``."""
    return f"{duration_ms / 60000:.2f} min"


def build_message(
    summary: TestRunSummary, config: NotifierConfig
) -> NotificationMessage:
    """Build the notification for a run summary.

    The result depends only on the arguments; neither is modified.
    """
    text = (
        f"*{config.title} {status_emoji(summary)}*\n"
        f"*Status:* {status_label(summary)} | "
        f"*Total:* {summary.total_tests} | "
        f"*Passed:* {summary.passed} | "
        f"*Failed:* {summary.failed} | "
        f"*Skipped:* {summary.pending} | "
        f"*Pass %:* {format_pass_percent(summary.pass_percent)} | "
        f"*Duration:* {format_duration(summary.duration_ms)}\n"
        f"*Browser:* {config.browser} | "
        f"*Viewport:* {config.viewport} | "
        f"*Run By:* {config.run_by}"
    )

    return NotificationMessage(
        text=text,
        channel=config.channel,
        username=config.username,
        icon_emoji=config.icon_emoji,
    )
