"""Skill installation helper — copies bundled skills to a .claude/skills directory."""

from __future__ import annotations

import importlib.resources
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from ..installer.copier import copy_tree

SKILL_NAMES: tuple[str, ...] = (
    "project-scaffold",
    "sprint-plan",
    "sprint-status",
    "sprint-release",
    "project-emulate",
)


@dataclass
class InstallReport:
    """Outcome of one install run."""

    destination: Path
    installed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.installed)


def package_dir() -> Path:
    """Directory of the installed scrum_skill package."""
    return Path(str(importlib.resources.files("scrum_skill")))


def bundled_skills_dir() -> Path:
    return package_dir() / "skills"


def get_bundled_skills(source_root: Path | None = None) -> list[str]:
    """Return the names from SKILL_NAMES that are present under source_root, in order."""
    root = source_root or bundled_skills_dir()
    return [name for name in SKILL_NAMES if (root / name).is_dir()]


def install_skills(
    destination: Path,
    source_root: Path | None = None,
    names: Sequence[str] = SKILL_NAMES,
    on_result: Callable[[str, bool], None] | None = None,
) -> InstallReport:
    """Install each named skill from source_root into destination.

    Skills are processed in order. A skill whose source directory is missing
    is recorded as skipped and the run moves on.

    Args:
        destination: Destination root, e.g. ``~/.claude/skills``. Created if absent.
        source_root: Where the skill directories live. Defaults to the
            ``skills/`` directory bundled with this package.
        names: Skill names to install.
        on_result: Called with ``(name, copied)`` after each skill.

    Returns:
        An InstallReport listing installed and skipped skills.

    Raises:
        OSError: If the destination cannot be created or a copy fails.
    """
    root = source_root or bundled_skills_dir()
    report = InstallReport(destination=destination)

    destination.mkdir(parents=True, exist_ok=True)

    for name in names:
        copied = copy_tree(root / name, destination / name)
        if copied:
            report.installed.append(name)
        else:
            report.skipped.append(name)
        if on_result is not None:
            on_result(name, copied)

    return report
