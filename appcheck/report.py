import sys
from typing import TextIO
from dataclasses import dataclass, field
from pathlib import Path

from appcheck.config import get_default_config
from appcheck.types import ApplicationRecord

GREEN = "\x1b[32m"
RED = "\x1b[31m"
RESET = "\x1b[0m"


@dataclass
class ReportSections:
    installed: list[tuple[str, Path]] = field(default_factory=list)
    not_installed: list[str] = field(default_factory=list)


def partition_apps(apps: list[ApplicationRecord]) -> ReportSections:
    """
    Split apps into installed (name, path) pairs and missing names,
    keeping catalog order within each section.
    """
    sections = ReportSections()

    for app in apps:
        if app.installed:
            sections.installed.append((app.name, app.resolved_path))
        else:
            sections.not_installed.append(app.name)

    return sections


def header(title: str, code: str, color: bool) -> str:
    if not color:
        return title
    return f"{code}{title}{RESET}"


def render_report(sections: ReportSections, color: bool = True) -> list[str]:
    config = get_default_config()
    name_width = config.name_width
    path_width = config.path_width

    lines = [header("Installed", GREEN, color)]
    for name, path in sections.installed:
        lines.append(f"{name:<{name_width}} {str(path):<{path_width}}")

    lines.append("")
    lines.append(header("Not Installed", RED, color))
    for name in sections.not_installed:
        lines.append(f"{name:<{name_width}}")

    return lines


def print_report(apps: list[ApplicationRecord], stream: TextIO | None = None, color: bool = True) -> None:
    out = stream or sys.stdout

    for line in render_report(partition_apps(apps), color=color):
        print(line, file=out)
