"""Root logging setup driven by CAO_LOG_LEVEL / CAO_DEBUG_MODE."""

import logging
import os

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def is_debug_mode() -> bool:
    return (
        os.environ.get("CAO_DEBUG_MODE") == "1"
        or os.environ.get("CAO_LOG_LEVEL", "").upper() == "DEBUG"
    )


def setup_logging(debug: bool = False) -> int:
    """Configure the root logger. Returns the effective level."""
    if debug:
        os.environ["CAO_DEBUG_MODE"] = "1"
        os.environ["CAO_LOG_LEVEL"] = "DEBUG"
    name = os.environ.get("CAO_LOG_LEVEL", "WARNING").upper()
    level = logging.DEBUG if is_debug_mode() else logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(level=level, format=_FORMAT, datefmt=_DATEFMT, force=True)
    # Silence noisy loggers
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
    return level
