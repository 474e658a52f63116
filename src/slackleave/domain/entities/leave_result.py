"""Leave result entity."""

from dataclasses import dataclass
from enum import Enum

from slackleave.domain.entities.channel import Channel


class LeaveOutcome(Enum):
    """Final state of a channel after the leave request."""

    LEFT = "left"
    ALREADY_ABSENT = "already_absent"


@dataclass(frozen=True)
class LeaveResult:
    """Result of processing one channel.

    Attributes:
        channel: The processed channel.
        outcome: What the leave request reported.
        messaged: Whether the farewell message was delivered.
    """

    channel: Channel
    outcome: LeaveOutcome
    messaged: bool = False
