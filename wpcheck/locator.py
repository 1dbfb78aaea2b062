"""Locate WordPress version marker files below a directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pathspec

from wpcheck.config import DEFAULT_CONFIG, CheckerConfig
from wpcheck.errors import FilesystemError

logger = logging.getLogger(__name__)


def _build_excludes(patterns: tuple[str, ...] | list[str]) -> pathspec.PathSpec | None:
    """Compile gitignore-style exclude patterns, if any."""
    if not patterns:
        return None
    return pathspec.PathSpec.from_lines("gitignore", patterns)


def _is_excluded(path: Path, root: Path, excludes: pathspec.PathSpec | None, is_dir: bool = False) -> bool:
    """Check if path matches an exclude pattern."""
    if excludes is None:
        return False
    rel_path = path.relative_to(root).as_posix()
    if is_dir:
        rel_path += "/"
    return excludes.match_file(rel_path)


def _check_root(root: Path) -> None:
    """Make sure the scan root exists and can be listed."""
    if not root.exists():
        raise FilesystemError(f"Directory not found: {root}")
    if not root.is_dir():
        raise FilesystemError(f"Not a directory: {root}")
    try:
        with os.scandir(root):
            pass
    except OSError as e:
        raise FilesystemError(f"Cannot read directory {root}: {e.strerror or e}") from e


def find_version_files(
    root_dir: str | Path,
    config: CheckerConfig = DEFAULT_CONFIG,
) -> list[Path]:
    """Recursively find all version marker files below root_dir.

    Directory symlinks are not followed, so link cycles cannot loop the walk.

    Args:
        root_dir: Top level folder to search
        config: Checker settings (marker suffix, exclude patterns)

    Returns:
        Absolute marker file paths, sorted ascending

    Raises:
        FilesystemError: If root_dir is missing or not traversable
    """
    root = Path(root_dir).absolute()
    _check_root(root)

    excludes = _build_excludes(config.excludes)

    def _on_walk_error(error: OSError) -> None:
        logger.warning(f"Skipping unreadable directory: {error.filename}")

    matched: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_walk_error):
        current = Path(dirpath)

        if excludes is not None:
            dirnames[:] = [
                name for name in dirnames
                if not _is_excluded(current / name, root, excludes, is_dir=True)
            ]

        for filename in filenames:
            file_path = current / filename
            if not file_path.as_posix().endswith(config.marker_suffix):
                continue
            if _is_excluded(file_path, root, excludes):
                logger.debug(f"Excluded marker file: {file_path}")
                continue
            logger.debug(f"Found marker file: {file_path}")
            matched.append(file_path)

    logger.info(f"Found {len(matched)} version files in {root}")
    return sorted(matched, key=str)
