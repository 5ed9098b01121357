"""Slack integration."""

from kioku.infrastructure.slack.client import SlackAppRunner, create_slack_app
from kioku.infrastructure.slack.event_adapter import SlackEventAdapter
from kioku.infrastructure.slack.messaging import SlackMessagingService

__all__ = [
    "SlackAppRunner",
    "SlackEventAdapter",
    "SlackMessagingService",
    "create_slack_app",
]
