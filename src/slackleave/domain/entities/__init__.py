"""Domain entities."""

from slackleave.domain.entities.channel import Channel
from slackleave.domain.entities.leave_result import LeaveOutcome, LeaveResult
from slackleave.domain.entities.posted_message import PostedMessage
from slackleave.domain.entities.user import User

__all__ = ["Channel", "LeaveOutcome", "LeaveResult", "PostedMessage", "User"]
