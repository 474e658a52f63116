"""Application entry point."""

import argparse
import logging
import sys

from slackleave.application.use_cases import ChannelResolver, LeaveExecutor
from slackleave.config import (
    DEFAULT_ENV_FILE,
    ConfigError,
    LoggingConfig,
    load_config,
)
from slackleave.domain.entities import LeaveOutcome
from slackleave.domain.exceptions import AutoLeaveError
from slackleave.infrastructure.slack import SlackChannelService, create_web_client

# Default logging for early startup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def configure_logging(config: LoggingConfig | None) -> None:
    """Configure logging based on config.

    Args:
        config: Logging configuration. If None, uses defaults.
    """
    if config is None:
        return

    root_logger = logging.getLogger()

    level = getattr(logging, config.level.upper(), logging.INFO)
    root_logger.setLevel(level)

    if root_logger.handlers:
        formatter = logging.Formatter(config.format)
        for handler in root_logger.handlers:
            handler.setFormatter(formatter)

    if config.loggers:
        for logger_name, logger_level in config.loggers.items():
            individual_logger = logging.getLogger(logger_name)
            individual_level = getattr(logging, logger_level.upper(), logging.INFO)
            individual_logger.setLevel(individual_level)
            logger.debug(
                "Set logger '%s' to level %s", logger_name, logger_level.upper()
            )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="slack-autoleave",
        description="Gently leave the Slack channels listed in a file.",
    )
    parser.add_argument(
        "--envfile",
        default=DEFAULT_ENV_FILE,
        help="Environment variable file to load (default: %(default)s).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Optional YAML file with a 'logging' section.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run one auto-leave pass.

    Returns:
        Process exit status.
    """
    args = parse_args(argv)

    try:
        config = load_config(args.envfile, args.config)
    except ConfigError as e:
        logger.error("Failed to load config: %s", e)
        return 1

    configure_logging(config.logging)

    channel_service = SlackChannelService(create_web_client(config.slack))
    resolver = ChannelResolver(channel_service, config.leave)
    executor = LeaveExecutor(channel_service, config.leave)

    try:
        channels = resolver.resolve()
        results = executor.run(channels)
    except AutoLeaveError as e:
        logger.error("Auto-leave aborted: %s", e)
        return 1

    left = sum(1 for r in results if r.outcome is LeaveOutcome.LEFT)
    logger.info(
        "Left %d channel(s), %d already absent, %d farewell message(s) sent.",
        left,
        len(results) - left,
        sum(1 for r in results if r.messaged),
    )
    logger.info("Auto-leave process completed.")
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
