"""Package logger.

Parser and state messages go to stdout prefixed with ``runviz:``. Debug
messages (such as each skipped row) are shown only in development mode.
"""

import logging
import sys

from runviz.config import is_dev_mode

logger = logging.getLogger("runviz")

LOG_FORMAT = "runviz: %(message)s"


def default_level() -> int:
    """DEBUG when RUNVIZ_DEV_MODE is set, INFO otherwise."""
    return logging.DEBUG if is_dev_mode() else logging.INFO


def setup_logger(level: int | None = None) -> None:
    """Attach the stdout handler and set the level.

    Calling again only updates the level, so the handler is never duplicated.

    Args:
        level: Logging level. Defaults to default_level().
    """
    if level is None:
        level = default_level()

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


setup_logger()
