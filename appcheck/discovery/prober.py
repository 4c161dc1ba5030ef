import logging
from pathlib import Path

from appcheck.types import ApplicationRecord

logger = logging.getLogger(__name__)


def path_exists(path: Path) -> bool:
    """
    True if anything (file, directory, bundle) exists at path.
    Errors during the check count as "does not exist".
    """
    try:
        return path.exists()
    except (OSError, ValueError) as e:
        logger.debug("[Prober] cannot stat %s: %s", path, e)
        return False


def first_existing(candidates: list[Path]) -> Path | None:
    for candidate in candidates:
        if path_exists(candidate):
            return candidate
    return None


def detect_installed_apps(apps: list[ApplicationRecord]) -> None:
    for app in apps:
        app.resolved_path = first_existing(app.candidate_paths)

        if app.resolved_path is None:
            logger.debug("[Prober] %s: not found", app.name)
        else:
            logger.debug("[Prober] %s: %s", app.name, app.resolved_path)
