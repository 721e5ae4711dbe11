"""CLI entry point for the test report notifier."""

import argparse
import asyncio
import logging
import os
import sys
from collections.abc import Callable, Mapping
from contextlib import AbstractAsyncContextManager
from pathlib import Path
from typing import TypeAlias

from dotenv import dotenv_values
from pydantic import SecretStr

from report_notifier.config import NotifierConfig
from report_notifier.message_builder import build_message
from report_notifier.models.report import TestRunSummary
from report_notifier.models.result import RunOutcome
from report_notifier.notifiers.base import Notifier
from report_notifier.notifiers.slack import SlackWebhookNotifier
from report_notifier.report_loader import (
    ReportFormatError,
    ReportNotFoundError,
    load_summary,
)

NotifierFactory: TypeAlias = Callable[[SecretStr], AbstractAsyncContextManager[Notifier]]

STATUS_SYMBOLS = {
    "delivered": "✅",
    "skipped": "⚠️ ",
    "fatal": "❌",
}

EXIT_CODES = {
    "delivered": 0,
    "skipped": 0,
    "fatal": 1,
}


def exit_code_for(outcome: RunOutcome) -> int:
    """Map a run outcome to the process exit code."""
    return EXIT_CODES[outcome.status]


def resolve_target_endpoint(config: NotifierConfig) -> SecretStr | None:
    """Return the webhook URL, or None when notification should be skipped."""
    if config.webhook_url is None:
        return None
    if not config.webhook_url.get_secret_value().strip():
        return None
    return config.webhook_url


def log_run_summary(log: logging.Logger, summary: TestRunSummary) -> None:
    """Log the counters of a test run."""
    log.info(
        "Test run: total=%d passed=%d failed=%d skipped=%d",
        summary.total_tests,
        summary.passed,
        summary.failed,
        summary.pending,
    )
    if summary.failed > 0:
        log.warning("❌ %d test(s) failed", summary.failed)
    else:
        log.info("✅ All %d tests passed!", summary.passed)


async def notify(
    config: NotifierConfig,
    notifier_factory: NotifierFactory = SlackWebhookNotifier.from_webhook_url,
) -> RunOutcome:
    """Load the report, build the message, and deliver it.

    Returns the terminal outcome of the run; failures are logged here and
    never raised.
    """
    log = logging.getLogger("report_notifier")

    try:
        summary = await load_summary(config.report_path)
    except (ReportNotFoundError, ReportFormatError) as e:
        log.error("%s %s", STATUS_SYMBOLS["fatal"], e)
        return RunOutcome(status="fatal", reason=str(e))

    log_run_summary(log, summary)

    webhook_url = resolve_target_endpoint(config)
    if webhook_url is None:
        log.warning(
            "%s SLACK_WEBHOOK_URL not found. Skipping Slack notification.",
            STATUS_SYMBOLS["skipped"],
        )
        return RunOutcome(status="skipped", reason="no webhook URL configured")

    message = build_message(summary, config)

    async with notifier_factory(webhook_url) as notifier:
        result = await notifier.deliver(message)

    if not result.ok:
        log.error(
            "%s Error sending message to Slack: %s",
            STATUS_SYMBOLS["fatal"],
            result.message,
        )
        return RunOutcome(status="fatal", reason=result.message)

    log.info("%s Message sent to Slack successfully.", STATUS_SYMBOLS["delivered"])
    return RunOutcome(status="delivered")


async def run(
    config: NotifierConfig,
    notifier_factory: NotifierFactory = SlackWebhookNotifier.from_webhook_url,
) -> int:
    """Run the notifier and return exit code."""
    outcome = await notify(config, notifier_factory)
    return exit_code_for(outcome)


def build_environment(env_file: Path | None) -> Mapping[str, str]:
    """Merge an optional dotenv file under the process environment."""
    environ: dict[str, str] = {}
    if env_file is not None:
        environ.update(
            {key: value for key, value in dotenv_values(env_file).items() if value}
        )
    environ.update(os.environ)
    return environ


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Post a Mochawesome test report summary to Slack"
    )
    parser.add_argument(
        "--report-path",
        type=Path,
        default=None,
        help="Path to the Mochawesome JSON report (overrides "
        "MOCHAWESOME_REPORT_PATH)",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Optional .env file; process environment variables take precedence",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    config = NotifierConfig.from_env(build_environment(args.env_file))
    if args.report_path is not None:
        config = config.model_copy(update={"report_path": args.report_path})

    exit_code = asyncio.run(run(config))
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
