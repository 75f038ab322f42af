"""Destination resolution for skill installs.

Global installs land in ``<home>/.claude/skills``. Local installs land in
the project that depends on this package: either an explicit project root,
or the directory containing the nearest ``node_modules`` / ``.venv``
ancestor of the package itself.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..core.types import InstallConfig, InstallMode

logger = logging.getLogger(__name__)

CLAUDE_DIR = ".claude"
SKILLS_DIR = "skills"


def _skills_dir(root: Path) -> Path:
    return root / CLAUDE_DIR / SKILLS_DIR


def _absolute(path: Path) -> Path:
    # Lexical only; symlinks are left alone and the disk is never touched.
    return Path(os.path.abspath(path))


def find_install_root(package_dir: Path, anchor_names: Iterable[str]) -> Path | None:
    """Return the directory containing the nearest anchor ancestor.

    Walks upward from *package_dir* (inclusive) until a directory whose name
    is one of *anchor_names* is found.

    Returns:
        The parent of the matched anchor directory, or None when the walk
        reaches the filesystem root without a match.
    """
    names = frozenset(anchor_names)
    current = _absolute(package_dir)
    while True:
        if current.name in names:
            return current.parent
        if current.parent == current:
            return None
        current = current.parent


def resolve_destination(config: InstallConfig, package_dir: Path) -> Path:
    """Compute the absolute destination root for this install.

    Args:
        config: Install mode, home directory and local-mode hints.
        package_dir: Directory of the installed package on disk.

    Returns:
        ``.claude/skills`` under the home directory (global), the explicit
        project root, the anchor's parent, or, when no anchor exists, the
        parent of the package's parent directory.
    """
    if config.mode is InstallMode.GLOBAL:
        dest = _skills_dir(_absolute(config.home))
        logger.debug("Global install -> %s", dest)
        return dest

    if config.project_root is not None:
        dest = _skills_dir(_absolute(config.project_root))
        logger.debug("Local install with explicit project root -> %s", dest)
        return dest

    root = find_install_root(package_dir, config.anchor_names)
    if root is None:
        root = _absolute(package_dir).parent.parent
        logger.debug("No %s ancestor of %s, falling back to %s",
                     "/".join(config.anchor_names), package_dir, root)
    dest = _skills_dir(root)
    logger.debug("Local install -> %s", dest)
    return dest
