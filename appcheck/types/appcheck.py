from dataclasses import dataclass
from pathlib import Path

# -------------------------
# Data model
# -------------------------

@dataclass
class ApplicationRecord:
    name: str
    candidate_paths: list[Path]
    resolved_path: Path | None = None

    def __post_init__(self):
        if not self.candidate_paths:
            raise ValueError(f"{self.name} has no candidate paths")

    @property
    def installed(self) -> bool:
        return self.resolved_path is not None
