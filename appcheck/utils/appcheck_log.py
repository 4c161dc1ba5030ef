import logging
import sys
from typing import TextIO

from appcheck.config import get_default_config
from appcheck.utils.os import get_env


def resolve_log_level(value: str | None) -> int:
    default = get_default_config().default_log_level

    if not value:
        value = default

    level = logging.getLevelName(value.strip().upper())
    if isinstance(level, int):
        return level

    return logging.getLevelName(default)


def configure_logging(stream: TextIO | None = None) -> int:
    level = resolve_log_level(get_env(get_default_config().log_level_env_var))

    logging.basicConfig(
        level=level,
        stream=stream or sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return level
