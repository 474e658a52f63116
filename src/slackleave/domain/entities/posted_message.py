"""Posted message entity."""

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class PostedMessage:
    """A message accepted by Slack.

    Attributes:
        channel_id: Channel the message was posted to.
        ts: Slack message timestamp ("1234567890.123456").
        text: Text as echoed back by Slack.
    """

    channel_id: str
    ts: str
    text: str

    @property
    def sent_at(self) -> datetime | None:
        """Send time derived from ``ts``, truncated to the second."""
        try:
            seconds = int(float(self.ts))
        except ValueError:
            return None
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
