"""Slack channel service."""

import logging

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError

from slackleave.domain.entities import Channel, LeaveOutcome, PostedMessage, User

logger = logging.getLogger(__name__)

_CHANNEL_TYPES = "public_channel,private_channel"
_PAGE_LIMIT = 200


def _error_code(error: SlackApiError) -> str:
    """Extract the Slack error code from an API error."""
    if error.response is None:
        return ""
    return error.response.get("error", "") or ""


def _next_cursor(response) -> str:
    metadata = response.get("response_metadata") or {}
    return metadata.get("next_cursor") or ""


class SlackChannelService:
    """Slack implementation of ChannelService.

    Every call blocks until Slack answers. API errors are raised as
    SlackApiError, except for the "not_in_channel" answer of
    conversations.leave which is reported as LeaveOutcome.ALREADY_ABSENT.
    """

    def __init__(self, client: WebClient) -> None:
        """Initialize the service.

        Args:
            client: Slack WebClient instance.
        """
        self._client = client

    def list_channels(self) -> list[Channel]:
        """Fetch all non-archived public and private channels.

        Follows cursor pagination until Slack reports no further page.

        Returns:
            Channels in the order returned by Slack, without members.
        """
        channels: list[Channel] = []
        cursor = ""
        while True:
            response = self._client.conversations_list(
                types=_CHANNEL_TYPES,
                exclude_archived=True,
                limit=_PAGE_LIMIT,
                cursor=cursor or None,
            )
            for channel_data in response.get("channels", []):
                channels.append(
                    Channel(id=channel_data["id"], name=channel_data["name"])
                )
            cursor = _next_cursor(response)
            if not cursor:
                break
        return channels

    def get_members(self, channel_id: str) -> list[str]:
        """Fetch every member ID of a channel, following pagination."""
        members: list[str] = []
        cursor = ""
        while True:
            response = self._client.conversations_members(
                channel=channel_id,
                limit=_PAGE_LIMIT,
                cursor=cursor or None,
            )
            members.extend(response.get("members", []))
            cursor = _next_cursor(response)
            if not cursor:
                break
        return members

    def get_channel(self, channel_id: str) -> Channel:
        """Fetch channel information."""
        response = self._client.conversations_info(channel=channel_id)
        channel_data = response["channel"]
        return Channel(id=channel_data["id"], name=channel_data.get("name", ""))

    def get_user(self, user_id: str) -> User:
        """Fetch user information."""
        response = self._client.users_info(user=user_id)
        user_data = response["user"]
        return User(id=user_data["id"], name=user_data["name"])

    def send_message_as_user(self, channel_id: str, text: str) -> PostedMessage:
        """Post a message on behalf of the token's user.

        Args:
            channel_id: Target channel ID.
            text: Message content.

        Returns:
            The message as acknowledged by Slack.
        """
        response = self._client.chat_postMessage(
            channel=channel_id,
            text=text,
            as_user=True,
        )
        message = response.get("message") or {}
        return PostedMessage(
            channel_id=response.get("channel", channel_id),
            ts=response.get("ts", ""),
            text=message.get("text", text),
        )

    def leave_channel(self, channel_id: str) -> LeaveOutcome:
        """Leave a channel.

        Raises:
            SlackApiError: Slack rejected the request for any reason other
                than the user not being in the channel.
        """
        try:
            response = self._client.conversations_leave(channel=channel_id)
        except SlackApiError as e:
            if _error_code(e) == "not_in_channel":
                return LeaveOutcome.ALREADY_ABSENT
            raise
        if response.get("not_in_channel", False):
            return LeaveOutcome.ALREADY_ABSENT
        return LeaveOutcome.LEFT
