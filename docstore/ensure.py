from __future__ import annotations

import logging
import os

from .errors import InvalidDirectoryError, InvalidFileError
from .filesystem import AsyncLocalFileSystem, LocalFileSystem
from .interfaces import AsyncFileSystem, EntryKind, FileSystem
from .runner import Steps, run, run_async

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]


def exists_steps(path: str) -> Steps[bool]:
    kind = yield "stat", (path,)
    return kind is not EntryKind.ABSENT


def ensure_dir_steps(path: str) -> Steps[bool]:
    """Returns True when the directory had to be created."""
    if not path:
        # dirname of a bare filename: the working directory.
        return False

    kind = yield "stat", (path,)
    if kind is EntryKind.DIRECTORY:
        return False
    if kind is not EntryKind.ABSENT:
        raise InvalidDirectoryError(path)

    try:
        yield "mkdir", (path,)
    except (FileExistsError, NotADirectoryError) as exc:
        # Something other than a directory sits on the path or one of its ancestors.
        raise InvalidDirectoryError(path) from exc
    logger.debug("ENSURE DIR: created %s", path)
    return True


def ensure_file_steps(path: str, data: str = "") -> Steps[bool]:
    """Returns True when this call wrote the file."""
    kind = yield "stat", (path,)
    if kind is EntryKind.FILE:
        return False
    if kind is not EntryKind.ABSENT:
        raise InvalidFileError(path)

    yield from ensure_dir_steps(os.path.dirname(path))

    try:
        yield "create", (path, data)
    except FileExistsError:
        # Lost a creation race; the winner's file stands.
        kind = yield "stat", (path,)
        if kind is not EntryKind.FILE:
            raise InvalidFileError(path)
        return False
    logger.debug("ENSURE FILE: created %s (%d chars)", path, len(data))
    return True


def exists(path: PathLike, fs: FileSystem | None = None) -> bool:
    return run(exists_steps(os.fspath(path)), fs or LocalFileSystem())


def ensure_dir(path: PathLike, fs: FileSystem | None = None) -> bool:
    return run(ensure_dir_steps(os.fspath(path)), fs or LocalFileSystem())


def ensure_file(path: PathLike, data: str = "", fs: FileSystem | None = None) -> bool:
    return run(ensure_file_steps(os.fspath(path), data), fs or LocalFileSystem())


async def exists_async(path: PathLike, fs: AsyncFileSystem | None = None) -> bool:
    return await run_async(exists_steps(os.fspath(path)), fs or AsyncLocalFileSystem())


async def ensure_dir_async(path: PathLike, fs: AsyncFileSystem | None = None) -> bool:
    return await run_async(ensure_dir_steps(os.fspath(path)), fs or AsyncLocalFileSystem())


async def ensure_file_async(path: PathLike, data: str = "", fs: AsyncFileSystem | None = None) -> bool:
    return await run_async(ensure_file_steps(os.fspath(path), data), fs or AsyncLocalFileSystem())
