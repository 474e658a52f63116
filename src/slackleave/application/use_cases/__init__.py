"""Use cases."""

from slackleave.application.use_cases.leave_channels import LeaveExecutor
from slackleave.application.use_cases.resolve_channels import ChannelResolver
from slackleave.application.use_cases.target_list import read_target_list

__all__ = [
    "ChannelResolver",
    "LeaveExecutor",
    "read_target_list",
]
