"""Configuration dataclasses."""

from dataclasses import dataclass

DEFAULT_CHANNELS_FILE = ".leave"


@dataclass
class SlackConfig:
    """Slack connection settings."""

    app_token: str


@dataclass
class LeaveConfig:
    """Auto-leave settings.

    Attributes:
        myself: Slack handle of the operator (not the user ID).
        channels_file: Path to the file listing channels to leave.
        message: Farewell message posted before leaving. None disables it.
    """

    myself: str
    channels_file: str = DEFAULT_CHANNELS_FILE
    message: str | None = None


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    loggers: dict[str, str] | None = None


@dataclass
class Config:
    """Application settings."""

    slack: SlackConfig
    leave: LeaveConfig
    logging: LoggingConfig | None = None
