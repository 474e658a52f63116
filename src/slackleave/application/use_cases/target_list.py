"""Target channel list reader."""

import logging
from pathlib import Path

from slackleave.domain.exceptions import TargetListError

logger = logging.getLogger(__name__)


def read_target_list(path: str | Path) -> list[str]:
    """Read the names of the channels to leave.

    The file holds one channel name per line, without the leading '#'.
    Blank lines and repeated names are dropped; order is preserved.

    Args:
        path: Path of the target channel file.

    Returns:
        Unique channel names in file order.

    Raises:
        TargetListError: The file cannot be opened or read.
    """
    logger.info("Using leave channels file '%s'", path)
    try:
        with open(path, encoding="utf-8") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise TargetListError(str(path), f"Cannot read {path}: {e}") from e

    names: list[str] = []
    for line in lines:
        name = line.strip()
        if not name or name in names:
            continue
        names.append(name)
        logger.info("Channel %s flagged to leave.", name)
    return names
