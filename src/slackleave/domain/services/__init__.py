"""Domain services."""

from slackleave.domain.services.protocols import ChannelService

__all__ = ["ChannelService"]
