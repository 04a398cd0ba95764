"""Filesystem helpers shared by the locator and resource adapters."""

from __future__ import annotations

from pathlib import Path

from ..observability import log_debug


def canonicalize(path: Path) -> Path:
    """Return the canonical form of *path*, falling back to its absolute form.

    Symlinks and ``..`` segments are resolved when possible. Any error raised
    while resolving (permission problems, symlink loops) downgrades to
    :meth:`Path.absolute` instead of aborting the caller's search.

    Examples
    --------
    >>> canonicalize(Path("/tmp/../tmp")).is_absolute()
    True
    """

    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        log_debug("canonicalize_fallback", layer="filesystem", path=str(path), error=str(exc))
        return path.absolute()


def is_regular_file(path: Path) -> bool:
    """Return ``True`` when *path* is a regular file (symlinks followed).

    Stat failures of any kind (over-long names, permission denied, embedded
    NUL bytes) count as "not a file" so the search can continue.

    Examples
    --------
    >>> is_regular_file(Path("/")), is_regular_file(Path("x" * 300))
    (False, False)
    """

    try:
        return path.is_file()
    except (OSError, ValueError) as exc:
        log_debug("stat_failed", layer="filesystem", path=str(path), error=str(exc))
        return False


def is_directory(path: Path) -> bool:
    """Return ``True`` when *path* is a directory; stat failures count as ``False``."""

    try:
        return path.is_dir()
    except (OSError, ValueError) as exc:
        log_debug("stat_failed", layer="filesystem", path=str(path), error=str(exc))
        return False
