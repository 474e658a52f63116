"""Configuration management."""

from slackleave.config.loader import (
    DEFAULT_ENV_FILE,
    ConfigError,
    ConfigValidationError,
    EnvironmentVariableError,
    load_config,
    load_logging_config,
)
from slackleave.config.models import (
    DEFAULT_CHANNELS_FILE,
    Config,
    LeaveConfig,
    LoggingConfig,
    SlackConfig,
)

__all__ = [
    "DEFAULT_CHANNELS_FILE",
    "DEFAULT_ENV_FILE",
    "Config",
    "ConfigError",
    "ConfigValidationError",
    "EnvironmentVariableError",
    "LeaveConfig",
    "LoggingConfig",
    "SlackConfig",
    "load_config",
    "load_logging_config",
]
