"""Leave the resolved channels."""

import logging

from slackleave.config import LeaveConfig
from slackleave.domain.entities import Channel, LeaveOutcome, LeaveResult
from slackleave.domain.exceptions import LeaveChannelError
from slackleave.domain.services import ChannelService

logger = logging.getLogger(__name__)


class LeaveExecutor:
    """Leave channels one after the other.

    Each channel goes pending -> (optionally messaged) -> left or
    already absent. The first leave failure aborts the run; channels after
    it are left untouched.
    """

    def __init__(self, channel_service: ChannelService, config: LeaveConfig) -> None:
        """Initialize the executor.

        Args:
            channel_service: Service for remote channel operations.
            config: Auto-leave settings.
        """
        self._channel_service = channel_service
        self._config = config

    def run(self, channels: list[Channel]) -> list[LeaveResult]:
        """Leave every channel in order.

        Args:
            channels: Channels to leave.

        Returns:
            One result per channel.

        Raises:
            LeaveChannelError: A leave request failed. Later channels are
                not processed.
        """
        results: list[LeaveResult] = []
        for channel in channels:
            results.append(self.leave(channel))
        return results

    def leave(self, channel: Channel) -> LeaveResult:
        """Post the farewell message if configured, then leave the channel."""
        logger.info("%s ready to leave", channel.name)

        messaged = False
        if self._config.message:
            messaged = self._say_goodbye(channel, self._config.message)

        try:
            outcome = self._channel_service.leave_channel(channel.id)
        except Exception as e:
            raise LeaveChannelError(
                channel.id, f"Failed to leave channel {channel.name}: {e}"
            ) from e

        if outcome is LeaveOutcome.ALREADY_ABSENT:
            logger.info("Was not in channel %s, nothing to do.", channel.name)
        else:
            logger.info("Left channel %s.", channel.name)
        return LeaveResult(channel=channel, outcome=outcome, messaged=messaged)

    def _say_goodbye(self, channel: Channel, text: str) -> bool:
        """Send the farewell message. Failures are logged, never raised.

        Returns:
            True if Slack accepted the message.
        """
        try:
            posted = self._channel_service.send_message_as_user(channel.id, text)
        except Exception as e:
            logger.warning("Failed to send message to channel %s: %s", channel.name, e)
            return False

        try:
            info = self._channel_service.get_channel(posted.channel_id)
        except Exception as e:
            logger.warning("Failed to fetch info for channel %s: %s", channel.name, e)
            return True

        logger.info(
            "Message '%s' sent to %s at %s.", posted.text, info.name, posted.sent_at
        )
        return True
