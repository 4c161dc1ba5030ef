from .enums import HostPlatform
from .os import (
    detect_operating_system,
    get_env,
    home_dir,
    home_app_path,
)
from .appcheck_log import configure_logging, resolve_log_level
