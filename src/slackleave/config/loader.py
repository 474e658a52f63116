"""Environment file loading and configuration parsing."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from slackleave.config.models import (
    DEFAULT_CHANNELS_FILE,
    Config,
    LeaveConfig,
    LoggingConfig,
    SlackConfig,
)

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = ".env"


class ConfigError(Exception):
    """Base class for configuration errors."""


class ConfigValidationError(ConfigError):
    """A configuration value is invalid."""


class EnvironmentVariableError(ConfigError):
    """A required environment variable is not set."""


def _require_env(name: str) -> str:
    """Return a required environment variable.

    Raises:
        EnvironmentVariableError: The variable is unset or empty.
    """
    value = os.environ.get(name)
    if not value:
        raise EnvironmentVariableError(f"Environment variable '{name}' is not set")
    return value


def load_config(
    env_file: str | Path = DEFAULT_ENV_FILE,
    logging_config_path: str | Path | None = None,
) -> Config:
    """Load the environment file and build the configuration.

    Variables already present in the process environment take precedence
    over the ones defined in the file.

    Args:
        env_file: Path of the environment file to load.
        logging_config_path: Optional YAML file holding a ``logging`` section.

    Returns:
        Config object.

    Raises:
        ConfigError: The environment file does not exist.
        EnvironmentVariableError: SLACK_APP_TOKEN or SLACK_MYSELF is not set.
        ConfigValidationError: The logging file is invalid.
    """
    env_path = Path(env_file)
    logger.info("Loading env vars from %s", env_path)
    if not env_path.is_file():
        raise ConfigError(f"Environment file not found: {env_path}")
    load_dotenv(env_path, override=False)

    slack = SlackConfig(app_token=_require_env("SLACK_APP_TOKEN"))

    leave = LeaveConfig(
        myself=_require_env("SLACK_MYSELF"),
        channels_file=os.environ.get("SLACK_LEAVE_CHANNELS", DEFAULT_CHANNELS_FILE),
        message=os.environ.get("SLACK_LEAVE_MESSAGE") or None,
    )

    logging_config = None
    if logging_config_path is not None:
        logging_config = load_logging_config(logging_config_path)

    return Config(slack=slack, leave=leave, logging=logging_config)


def load_logging_config(path: str | Path) -> LoggingConfig | None:
    """Read the ``logging`` section of a YAML file.

    Args:
        path: YAML file path.

    Returns:
        LoggingConfig, or None when the file has no ``logging`` section.

    Raises:
        ConfigError: The file does not exist.
        ConfigValidationError: The YAML is malformed or the section is not a mapping.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        try:
            raw_data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML in {path}: {e}") from e

    if raw_data is None:
        return None
    if not isinstance(raw_data, dict):
        raise ConfigValidationError(f"Top level of {path} must be a mapping")

    logging_data = raw_data.get("logging")
    if not logging_data:
        return None
    if not isinstance(logging_data, dict):
        raise ConfigValidationError("'logging' must be a mapping")

    loggers = logging_data.get("loggers")
    if loggers is not None and not isinstance(loggers, dict):
        raise ConfigValidationError("'logging.loggers' must be a mapping")

    return LoggingConfig(
        level=logging_data.get("level", "INFO"),
        format=logging_data.get(
            "format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ),
        loggers=loggers,
    )
