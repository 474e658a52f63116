"""Service protocols."""

from typing import Protocol

from slackleave.domain.entities import Channel, LeaveOutcome, PostedMessage, User


class ChannelService(Protocol):
    """Remote operations needed to resolve and leave channels.

    Implementations raise their platform's API error on failure; callers
    decide which failures are fatal.
    """

    def list_channels(self) -> list[Channel]:
        """Return every non-archived channel visible to the token.

        Members are not populated; use get_members for that.
        """
        ...

    def get_members(self, channel_id: str) -> list[str]:
        """Return the member user IDs of a channel."""
        ...

    def get_channel(self, channel_id: str) -> Channel:
        """Return channel information."""
        ...

    def get_user(self, user_id: str) -> User:
        """Return user information."""
        ...

    def send_message_as_user(self, channel_id: str, text: str) -> PostedMessage:
        """Post a message as the token's user, not as a bot."""
        ...

    def leave_channel(self, channel_id: str) -> LeaveOutcome:
        """Leave a channel.

        Returns:
            LeaveOutcome.ALREADY_ABSENT when the user was not a member,
            LeaveOutcome.LEFT otherwise.
        """
        ...
