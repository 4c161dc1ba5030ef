import logging
import sys
from typing import TextIO
from dataclasses import dataclass
from pathlib import Path

from appcheck.types import ApplicationRecord
from appcheck.utils import HostPlatform, home_app_path

logger = logging.getLogger(__name__)

ADVISORY = "Warning: this tool currently checks macOS-style application paths."


# -------------------------
# Candidate specs
# -------------------------

@dataclass(frozen=True)
class CandidateSpec:
    location: str
    home_relative: bool = False

    def resolve(self) -> Path:
        if self.home_relative:
            return home_app_path(self.location)
        return Path(self.location)


def system_app(bundle: str) -> CandidateSpec:
    return CandidateSpec(f"/Applications/{bundle}")


def user_app(bundle: str) -> CandidateSpec:
    return CandidateSpec(bundle, home_relative=True)


def bundle_candidates(*bundles: str) -> list[CandidateSpec]:
    """
    System-wide bundles first, then the same bundles under ~/Applications.
    """
    return [system_app(b) for b in bundles] + [user_app(b) for b in bundles]


# -------------------------
# Catalog
# -------------------------

APP_CATALOG: list[tuple[str, list[CandidateSpec]]] = [
    ("Bitwarden", bundle_candidates("Bitwarden.app")),
    ("Chrome", bundle_candidates("Google Chrome.app", "Google Chrome Dev.app")),
    ("Firefox", bundle_candidates("Firefox.app", "Firefox Developer Edition.app")),
    ("MacPorts", [CandidateSpec("/opt/local/bin/port")]),
    ("Ollama", bundle_candidates("Ollama.app")),
    ("Rancher Desktop", bundle_candidates("Rancher Desktop.app")),
    ("Safari", bundle_candidates("Safari.app")),
    ("Visual Studio Code", bundle_candidates("Visual Studio Code.app")),
    ("WhatsApp", bundle_candidates("WhatsApp.app")),
]


def build_apps(platform: HostPlatform, stream: TextIO | None = None) -> list[ApplicationRecord]:
    """
    Build the application catalog with home-relative candidates resolved
    against the current home directory.

    Candidates are macOS-style on every platform; other hosts only get an
    advisory on the error stream.
    """
    if platform != HostPlatform.MAC:
        logger.info("[Catalog] host platform is %s", platform.value)
        print(ADVISORY, file=stream or sys.stderr)

    return [
        ApplicationRecord(
            name=name,
            candidate_paths=[spec.resolve() for spec in specs],
        )
        for name, specs in APP_CATALOG
    ]
