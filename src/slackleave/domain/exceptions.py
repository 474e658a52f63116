"""Domain exceptions."""


class AutoLeaveError(Exception):
    """Base class for errors that abort an auto-leave run."""


class TargetListError(AutoLeaveError):
    """The target channel file cannot be read."""

    def __init__(self, path: str, message: str = "") -> None:
        self.path = path
        super().__init__(message or f"Cannot read target channel file {path}")


class ChannelLookupError(AutoLeaveError):
    """The channel list or a channel's members could not be fetched."""


class LeaveChannelError(AutoLeaveError):
    """Leaving a channel failed.

    Raised for any leave failure other than the user already being absent.
    """

    def __init__(self, channel_id: str, message: str = "") -> None:
        """Initialize.

        Args:
            channel_id: Channel that could not be left.
            message: Error message (optional).
        """
        self.channel_id = channel_id
        super().__init__(message or f"Failed to leave channel {channel_id}")
