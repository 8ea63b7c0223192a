"""Asynchronous filesystem helpers on top of :mod:`anyio`.

Existence checks never raise; everything else propagates the underlying
``OSError`` unchanged.
"""

from __future__ import annotations

import os
import shutil
import stat
from collections.abc import AsyncIterator
from pathlib import Path

import anyio
import anyio.to_thread

StrPath = str | os.PathLike[str]


def _first_missing(dir_path: str) -> str | None:
    """Outermost ancestor of *dir_path* (itself included) that does not exist yet."""
    current = Path(os.path.abspath(dir_path))
    first: Path | None = None
    while not current.exists():
        first = current
        if current.parent == current:
            break
        current = current.parent
    return str(first) if first is not None else None


# ---------------------------------------------------------------------------
# Directories
# ---------------------------------------------------------------------------


async def create_directory(dir_path: StrPath, *, recursive: bool = True) -> str | None:
    """Create *dir_path*.

    With *recursive* (the default) missing parents are created and an
    existing directory is accepted; the first directory actually created is
    returned, or None when everything already existed. Without it a single
    ``mkdir`` is attempted and None is returned.
    """
    target = anyio.Path(dir_path)
    if not recursive:
        await target.mkdir()
        return None

    first_created = await anyio.to_thread.run_sync(_first_missing, os.fspath(dir_path))
    await target.mkdir(parents=True, exist_ok=True)
    return first_created


async def remove_directory(
    dir_path: StrPath,
    *,
    recursive: bool = True,
    force: bool = False,
) -> None:
    """Remove the directory at *dir_path*.

    With *force* set, a missing path is ignored and a path that is not a
    directory is unlinked instead of rejected.

    Raises:
        NotADirectoryError: *dir_path* exists but is not a directory and
            *force* is not set.
        OSError: The path cannot be inspected or removed.
    """
    target = anyio.Path(dir_path)
    try:
        stats = await target.stat()
    except OSError:
        if force:
            return
        raise
    if not stat.S_ISDIR(stats.st_mode):
        if force:
            await target.unlink()
            return
        msg = f"Path is not a directory: {dir_path}"
        raise NotADirectoryError(msg)

    if recursive:
        await anyio.to_thread.run_sync(shutil.rmtree, os.fspath(dir_path))
    else:
        await target.rmdir()


# ---------------------------------------------------------------------------
# Existence checks
# ---------------------------------------------------------------------------


async def file_exists(file_path: StrPath) -> bool:
    """Whether anything (file or directory) exists at *file_path*."""
    try:
        return await anyio.Path(file_path).exists()
    except (OSError, ValueError, TypeError):
        return False


async def is_directory(dir_path: StrPath) -> bool:
    """Whether *dir_path* is a directory; False on any error."""
    try:
        return await anyio.Path(dir_path).is_dir()
    except (OSError, ValueError, TypeError):
        return False


async def list_directory_contents(dir_path: StrPath) -> AsyncIterator[str]:
    """Yield the entry names of *dir_path*."""
    async for entry in anyio.Path(dir_path).iterdir():
        yield entry.name


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


async def read_file_async(file_path: StrPath, encoding: str | None = "utf-8") -> str | bytes:
    """Read a whole file; text with *encoding*, or bytes when it is None."""
    path = anyio.Path(file_path)
    if encoding is None:
        return await path.read_bytes()
    return await path.read_text(encoding=encoding)


async def write_file_async(file_path: StrPath, data: str | bytes, encoding: str = "utf-8") -> None:
    """Write *data* to *file_path*, replacing any existing content."""
    path = anyio.Path(file_path)
    if isinstance(data, bytes):
        await path.write_bytes(data)
    else:
        await path.write_text(data, encoding=encoding)
