"""Destination resolution and directory mirroring for skill installs."""

from .copier import copy_tree
from .resolver import find_install_root, resolve_destination

__all__ = ["copy_tree", "find_install_root", "resolve_destination"]
