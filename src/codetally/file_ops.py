"""
File system helpers for codetally.

Root validation, root namespace discovery, and a lazy depth-first walk over
the analyzed tree.
"""

import os
from collections.abc import Generator
from pathlib import Path
from typing import Optional

from .exceptions import FileAccessError, InvalidPathError
from .logging_config import get_logger

logger = get_logger(__name__)


def validate_root_directory(path: Path) -> Path:
    """
    Validate that a root directory can be analyzed.

    Args:
        path: Directory path to validate

    Returns:
        Resolved absolute path

    Raises:
        InvalidPathError: If path is missing, not a directory, or unreadable
    """
    try:
        resolved = path.resolve()
    except (OSError, RuntimeError) as e:
        raise InvalidPathError(path, f"Cannot resolve path: {e}")

    if not resolved.exists():
        raise InvalidPathError(resolved, "Directory does not exist")

    if not resolved.is_dir():
        raise InvalidPathError(resolved, "Path is not a directory")

    if not os.access(resolved, os.R_OK):
        raise InvalidPathError(resolved, "Directory is not readable")

    return resolved


def discover_root_namespaces(root_dir: Path, allow_hidden: bool = True) -> list[str]:
    """First-level subdirectory names of ``root_dir``, sorted."""
    try:
        with os.scandir(root_dir) as it:
            entries = list(it)
    except OSError as e:
        raise FileAccessError(root_dir, f"Directory listing failed: {e}")
    names = [
        entry.name
        for entry in entries
        if entry.is_dir() and (allow_hidden or not entry.name.startswith("."))
    ]
    return sorted(names)


def walk_files(
    root_dir: Path,
    exclude_patterns: Optional[list[str]] = None,
    follow_symlinks: bool = False,
    allow_hidden: bool = True,
) -> Generator[Path, None, None]:
    """
    Lazily yield every file below ``root_dir``, depth-first, in name order.

    Args:
        root_dir: Directory to walk
        exclude_patterns: Glob patterns of files to skip
        follow_symlinks: Whether to descend into symlinked directories
        allow_hidden: Whether to include entries starting with "."

    Yields:
        File paths (never directories)
    """
    patterns = exclude_patterns or []
    visited: set[tuple[int, int]] = set()

    def _walk(directory: Path) -> Generator[Path, None, None]:
        try:
            st = directory.stat()
        except OSError as e:
            logger.warning(f"Cannot stat {directory}: {e}")
            return
        key = (st.st_dev, st.st_ino)
        if key in visited:
            logger.debug(f"Skipped (symlink loop): {directory}")
            return
        visited.add(key)

        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            logger.warning(f"Cannot list {directory}: {e}")
            return

        for entry in entries:
            if not allow_hidden and entry.name.startswith("."):
                continue
            path = Path(entry.path)
            if entry.is_dir(follow_symlinks=follow_symlinks):
                yield from _walk(path)
            elif entry.is_file(follow_symlinks=True):
                if should_skip_file(path, patterns):
                    logger.debug(f"Skipped (pattern): {path}")
                    continue
                yield path

    yield from _walk(root_dir)


def should_skip_file(filepath: Path, exclude_patterns: list[str]) -> bool:
    """
    Check if a file should be skipped based on exclusion patterns.

    Args:
        filepath: File to check
        exclude_patterns: List of glob patterns to exclude

    Returns:
        True if file should be skipped
    """
    for pattern in exclude_patterns:
        if filepath.match(pattern):
            return True
    return False
