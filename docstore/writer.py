from __future__ import annotations

import logging
import os

from .ensure import PathLike, ensure_dir_steps
from .errors import InvalidFileError
from .filesystem import AsyncLocalFileSystem, LocalFileSystem
from .interfaces import AsyncFileSystem, EntryKind, FileSystem
from .runner import Steps, run, run_async

logger = logging.getLogger(__name__)


def write_steps(path: PathLike | None, content: str) -> Steps[None]:
    if path is None:
        return

    path = os.fspath(path)
    kind = yield "stat", (path,)
    if kind is EntryKind.ABSENT:
        yield from ensure_dir_steps(os.path.dirname(path))
    elif kind is not EntryKind.FILE:
        raise InvalidFileError(path)

    yield "write", (path, content)
    logger.debug("STORAGE WRITE: %s (%d chars)", path, len(content))


class StorageWriter:
    """
    Writes the full content of a database storage file, replacing what was there.

    Not atomic: a crash mid-write can leave a partial file.
    """

    def __init__(self, fs: FileSystem | None = None) -> None:
        self._fs = fs if fs is not None else LocalFileSystem()

    def write(self, path: PathLike | None, content: str) -> None:
        run(write_steps(path, content), self._fs)


class AsyncStorageWriter:
    def __init__(self, fs: AsyncFileSystem | None = None) -> None:
        self._fs = fs if fs is not None else AsyncLocalFileSystem()

    async def write(self, path: PathLike | None, content: str) -> None:
        await run_async(write_steps(path, content), self._fs)
