"""Locate source files and write generated files."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from enum_sync.errors import MisconfiguredJobError

logger = logging.getLogger(__name__)


def find_file_path(file_name: str, src_dir: str | Path | None) -> Path | None:
    """Recursively find ``file_name`` under ``src_dir``.

    Files of a directory are checked before its subdirectories, which are
    visited depth-first in sorted order. Unreadable directories are skipped.
    """
    if not src_dir:
        raise MisconfiguredJobError(f"No source directory specified for {file_name}")

    root = Path(src_dir)
    try:
        entries = sorted(os.scandir(root), key=lambda e: e.name)
    except OSError as e:
        logger.warning("Cannot read directory %s: %s", root, e)
        return None

    for entry in entries:
        if entry.name == file_name and entry.is_file():
            logger.debug("Found %s at %s", file_name, entry.path)
            return root / entry.name

    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            found = find_file_path(file_name, root / entry.name)
            if found is not None:
                return found
    return None


def read_file(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")


def write_file(base_name: str, dest_dir: str | Path, content: str, extension: str = "ts") -> Path:
    """Write ``content`` to ``dest_dir/base_name.extension`` and return the path."""
    dest = Path(dest_dir)
    dest.mkdir(parents=True, exist_ok=True)
    path = dest / f"{base_name}.{extension.lstrip('.')}"
    path.write_text(content, encoding="utf-8", newline="")
    logger.debug("Wrote %s", path)
    return path
