"""Slack Web API client."""

from slack_sdk import WebClient

from slackleave.config import SlackConfig


def create_web_client(config: SlackConfig) -> WebClient:
    """Create a Slack Web API client.

    Args:
        config: Slack connection settings.

    Returns:
        WebClient authenticated with the configured token.
    """
    return WebClient(token=config.app_token)
