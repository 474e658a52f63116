"""Channel entity."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Channel:
    """Channel entity.

    Attributes:
        id: Slack channel ID.
        name: Channel name without the leading '#'.
        members: Member user IDs, in the order returned by Slack.
    """

    id: str
    name: str
    members: tuple[str, ...] = ()

    def with_members(self, members: list[str] | tuple[str, ...]) -> "Channel":
        """Return a copy of this channel with the given members."""
        return replace(self, members=tuple(members))
