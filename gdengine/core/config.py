# gdengine/core/config.py
"""
Library-wide settings and logging setup.

Settings are read once at import from the environment:
- GDENGINE_DISPLAY_PRECISION: decimals used by str() of vectors/colors
- GDENGINE_LOG_LEVEL: level passed to setup_default_logging()
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union
import logging
import os

logger = logging.getLogger(__name__)


def env_int(name: str, default: Optional[int] = None, *,
            min_value: Optional[int] = None) -> Optional[int]:
    """Read an integer environment variable, falling back to default when unset or invalid."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={raw!r}")
        return default
    if min_value is not None and val < min_value:
        val = min_value
    return val


@dataclass
class MathConfig:
    display_precision: int = 2
    log_level: str = "WARNING"

    @staticmethod
    def from_env() -> MathConfig:
        defaults = MathConfig()
        return MathConfig(
            display_precision=env_int(
                "GDENGINE_DISPLAY_PRECISION", defaults.display_precision, min_value=0
            ),
            log_level=os.getenv("GDENGINE_LOG_LEVEL", defaults.log_level).upper(),
        )


settings = MathConfig.from_env()


def setup_default_logging(level: Union[int, str, None] = None) -> None:
    """Apply a minimal logging config once.

    No-op when the root logger already has handlers (the application owns logging).
    """
    if level is None:
        level = settings.log_level
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
