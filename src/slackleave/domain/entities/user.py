"""User entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """User entity.

    Attributes:
        id: Slack user ID.
        name: Slack handle. This is what the configured identity is matched against.
    """

    id: str
    name: str
