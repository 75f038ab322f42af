"""Structure-preserving directory copy."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def copy_tree(src: Path, dest: Path) -> bool:
    """Mirror *src* onto *dest*, overwriting files that already exist.

    Directories are created as needed. Files are copied byte-for-byte with their
    permission bits and always replace whatever is at the destination.
    Nothing is ever deleted, so extra files already under *dest* survive.

    Args:
        src: Source file or directory.
        dest: Destination path with the same shape as *src*.

    Returns:
        True if something was copied, False if *src* does not exist.

    Raises:
        OSError: Any filesystem error while creating or copying. Entries
            already copied are left in place.
    """
    if not src.exists():
        logger.debug("Source %s missing, skipping", src)
        return False

    pending: list[tuple[Path, Path]] = [(src, dest)]
    while pending:
        source, target = pending.pop()
        if source.is_dir():
            target.mkdir(parents=True, exist_ok=True)
            # Reversed so entries pop off the stack in name order
            for entry in sorted(source.iterdir(), reverse=True):
                pending.append((entry, target / entry.name))
        else:
            shutil.copy(source, target)
            logger.debug("Copied %s -> %s", source, target)

    return True
