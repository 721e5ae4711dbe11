"""Slack notifier module."""

from report_notifier.notifiers.slack.notifier import SlackWebhookNotifier

__all__ = ["SlackWebhookNotifier"]
