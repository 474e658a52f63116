"""Slack integration."""

from slackleave.infrastructure.slack.channels import SlackChannelService
from slackleave.infrastructure.slack.client import create_web_client

__all__ = [
    "SlackChannelService",
    "create_web_client",
]
