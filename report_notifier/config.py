"""Configuration for the report notifier."""

from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, SecretStr

DEFAULT_REPORT_PATH = Path("cypress/reports/html/index.json")


class NotifierConfig(BaseModel):
    """Configuration for a notifier run.

    Built once at start-up and passed explicitly to every component, so tests
    can inject values instead of patching the process environment.
    """

    model_config = ConfigDict(frozen=True)

    report_path: Path = DEFAULT_REPORT_PATH
    webhook_url: SecretStr | None = None
    run_by: str = "Unknown"
    browser: str = "chrome"
    viewport: str = "1280x720"
    channel: str = "#engineering-tests-results"
    username: str = "SauceDemo Test Bot"
    icon_emoji: str = ":robot_face:"
    title: str = "SauceDemo Cypress Test Results"

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> "NotifierConfig":
        """Build configuration from environment-style key/value pairs.

        Unset or empty variables fall back to the field defaults.
        """
        values: dict[str, object] = {}

        if report_path := environ.get("MOCHAWESOME_REPORT_PATH"):
            values["report_path"] = Path(report_path)
        if webhook_url := environ.get("SLACK_WEBHOOK_URL", "").strip():
            values["webhook_url"] = SecretStr(webhook_url)
        if run_by := environ.get("GITHUB_ACTOR") or environ.get("USER"):
            values["run_by"] = run_by

        for field_name, variable in (
            ("browser", "BROWSER"),
            ("viewport", "VIEWPORT"),
            ("channel", "SLACK_CHANNEL"),
            ("username", "SLACK_USERNAME"),
            ("icon_emoji", "SLACK_ICON_EMOJI"),
            ("title", "REPORT_TITLE"),
        ):
            if value := environ.get(variable):
                values[field_name] = value

        return cls.model_validate(values)
