"""Type definitions for install configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

# Directory names that mark where a package manager unpacked us. The
# project root is the directory that contains one of these.
DEFAULT_ANCHOR_NAMES: tuple[str, ...] = ("node_modules", ".venv")


class InstallMode(str, Enum):
    """Where skills get installed: the user's home or the current project."""

    GLOBAL = "global"
    LOCAL = "local"

    @classmethod
    def parse(cls, value: str) -> InstallMode:
        """Parse a mode name, case-insensitively.

        Raises:
            ValueError: If *value* is not ``global`` or ``local``.
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown install mode {value!r} (expected 'global' or 'local')"
            ) from None


@dataclass(frozen=True)
class InstallConfig:
    """Everything the destination resolver needs, gathered up front."""

    home: Path
    mode: InstallMode = InstallMode.LOCAL
    project_root: Path | None = None
    anchor_names: tuple[str, ...] = DEFAULT_ANCHOR_NAMES
