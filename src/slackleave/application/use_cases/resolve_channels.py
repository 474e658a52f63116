"""Resolve which target channels the operator actually belongs to."""

import logging

from slackleave.application.use_cases.target_list import read_target_list
from slackleave.config import LeaveConfig
from slackleave.domain.entities import Channel, User
from slackleave.domain.exceptions import ChannelLookupError
from slackleave.domain.services import ChannelService

logger = logging.getLogger(__name__)


class ChannelResolver:
    """Build the list of channels to leave.

    A channel is kept when its name is in the target file and one of its
    members resolves to a user whose handle equals the configured identity.
    User lookups are cached for the lifetime of the resolver.
    """

    def __init__(self, channel_service: ChannelService, config: LeaveConfig) -> None:
        """Initialize the resolver.

        Args:
            channel_service: Service for remote channel and user lookups.
            config: Auto-leave settings.
        """
        self._channel_service = channel_service
        self._config = config
        self._users: dict[str, User] = {}

    def resolve(self) -> list[Channel]:
        """Return the channels to leave, in the order Slack lists them.

        Raises:
            TargetListError: The target file cannot be read.
            ChannelLookupError: The channel list or a member list cannot be fetched.
        """
        targets = set(read_target_list(self._config.channels_file))

        try:
            channels = self._channel_service.list_channels()
        except Exception as e:
            raise ChannelLookupError(f"Failed to list channels: {e}") from e
        logger.info("%d channels found.", len(channels))

        to_leave: list[Channel] = []
        for channel in channels:
            if channel.name not in targets:
                continue
            channel = self._with_members(channel)
            if self.is_member(channel):
                to_leave.append(channel)
            else:
                logger.info("Not in channel %s", channel.name)
        return to_leave

    def is_member(self, channel: Channel) -> bool:
        """Check whether the configured identity is among the channel members.

        Stops at the first matching member. A failed user lookup stops the
        check and counts as "not a member", so the channel is skipped.
        """
        logger.info("Checking channel %s for leaving...", channel.name)
        for member_id in channel.members:
            try:
                user = self._get_user(member_id)
            except Exception as e:
                logger.warning("Failed to retrieve user info for %s: %s", member_id, e)
                return False
            if user.name == self._config.myself:
                return True
        return False

    def _with_members(self, channel: Channel) -> Channel:
        if channel.members:
            return channel
        try:
            members = self._channel_service.get_members(channel.id)
        except Exception as e:
            raise ChannelLookupError(
                f"Failed to fetch members of {channel.name}: {e}"
            ) from e
        return channel.with_members(members)

    def _get_user(self, user_id: str) -> User:
        user = self._users.get(user_id)
        if user is None:
            user = self._channel_service.get_user(user_id)
            self._users[user_id] = user
        return user
