from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class AppCheckConfig:
    home_env_var: str = "HOME"
    fallback_home: Path = field(default_factory=lambda: Path("/"))

    # Report column widths
    name_width: int = 24
    path_width: int = 16

    log_level_env_var: str = "APPCHECK_LOG_LEVEL"
    default_log_level: str = "WARNING"


def get_default_config() -> AppCheckConfig:
    return AppCheckConfig()
