"""Application defaults."""

import logging
import os
from dataclasses import dataclass

from pixpool.logging_config import get_logger

logger = get_logger("config")


@dataclass
class AppConfig:
    default_workers: int
    demo_width: int
    demo_height: int
    log_level: int


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return max(1, int(value))
    except ValueError:
        logger.warning(f"Ignoring {name}={value!r}: not an integer, using {default}")
        return default


def _env_level(name: str, default: int) -> int:
    level = logging.getLevelName(os.getenv(name, "").upper())
    return level if isinstance(level, int) else default


APP_CONFIG = AppConfig(
    default_workers=_env_int("PIXPOOL_WORKERS", 4),
    demo_width=256,
    demo_height=256,
    log_level=_env_level("PIXPOOL_LOG_LEVEL", logging.INFO),
)

# Side of the square box kernel used by the blur presets
BOX_BLUR_SIZE = 3

# Number of box-blur passes per strength
BLUR_PRESETS = {
    "light": 1,
    "medium": 3,
    "heavy": 10,
}
