import os
import platform
from pathlib import Path

from appcheck.config import get_default_config
from appcheck.utils.enums import HostPlatform

# Host identifiers as reported by the interpreter, lowercased
_PLATFORM_IDS = {
    "macos": HostPlatform.MAC,
    "darwin": HostPlatform.MAC,
    "windows": HostPlatform.WINDOWS,
    "linux": HostPlatform.LINUX,
}


def detect_operating_system(system: str | None = None) -> HostPlatform:
    """
    Classify the host OS. Unknown identifiers map to HostPlatform.OTHER.
    """
    if system is None:
        system = platform.system()

    return _PLATFORM_IDS.get(system.strip().lower(), HostPlatform.OTHER)


def get_env(env: str) -> str | None:
    return os.environ.get(env)


def home_dir() -> Path:
    """
    The current user's home directory, or the filesystem root when the
    home variable is unset.
    """
    config = get_default_config()
    home = get_env(config.home_env_var)

    if home is None:
        return config.fallback_home

    return Path(home)


def home_app_path(app_name: str) -> Path:
    return home_dir() / "Applications" / app_name
