"""Recursive template tree copy."""

import logging
import os
import shutil
import stat
from pathlib import Path
from typing import Iterable

from .errors import CopyError
from .filters import DEFAULT_FILTER, PathFilter

logger = logging.getLogger(__name__)


def copy_tree(
    src: Path,
    dest: Path,
    path_filter: PathFilter | None = None,
    skip_files: Iterable[str] = (),
) -> int:
    """Copy a directory tree, leaving out filtered names.

    The walk is depth-first in name order and stops at the first error. Files
    already copied stay in place; nothing is rolled back. Symbolic links are
    recreated as links and never descended into. Existing files in ``dest``
    are overwritten, so copying twice gives the same result as once.

    Args:
        src: Source directory
        dest: Destination directory (created if missing)
        path_filter: Excluded names (default: VCS and CI metadata)
        skip_files: Extra file names to leave out, e.g. the template descriptor

    Returns:
        Number of files copied

    Raises:
        CopyError: On the first I/O failure
    """
    src = Path(src)
    dest = Path(dest)
    path_filter = path_filter or DEFAULT_FILTER
    skipped = frozenset(skip_files)

    if not src.is_dir():
        raise CopyError(src, "source is not a directory")

    _make_dir(dest)
    return _copy_dir(src, dest, path_filter, skipped)


def _copy_dir(src: Path, dest: Path, path_filter: PathFilter, skipped: frozenset[str]) -> int:
    try:
        children = sorted(src.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise CopyError(src, f"cannot list directory: {e}") from e

    copied = 0
    for child in children:
        target = dest / child.name

        # Links are recreated as links, never followed
        if child.is_symlink():
            excluded = path_filter.skip_dir(child.name) or path_filter.skip_file(child.name)
            if excluded or child.name in skipped:
                logger.debug("Skipping excluded link %s", child)
                continue
            _copy_link(child, target)
            copied += 1
            continue

        if child.is_dir():
            if path_filter.skip_dir(child.name):
                logger.debug("Skipping excluded directory %s", child)
                continue
            _make_dir(target)
            copied += _copy_dir(child, target, path_filter, skipped)
            continue

        if path_filter.skip_file(child.name) or child.name in skipped:
            logger.debug("Skipping excluded file %s", child)
            continue

        _copy_file(child, target)
        copied += 1

    return copied


def _make_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise CopyError(path, f"cannot create directory: {e}") from e


def _copy_link(src: Path, dest: Path) -> None:
    try:
        link_target = os.readlink(src)
        if dest.is_symlink() or dest.exists():
            dest.unlink()
        os.symlink(link_target, dest)
    except OSError as e:
        raise CopyError(src, str(e)) from e


def _copy_file(src: Path, dest: Path) -> None:
    """Copy content first, then apply the source permission bits."""
    try:
        mode = stat.S_IMODE(src.stat().st_mode)

        # A read-only copy from an earlier run cannot be opened for writing
        if dest.exists() and not os.access(dest, os.W_OK):
            dest.unlink()

        shutil.copyfile(src, dest)
        os.chmod(dest, mode)
    except OSError as e:
        raise CopyError(src, str(e)) from e
