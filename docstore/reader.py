from __future__ import annotations

import os

from .ensure import PathLike, ensure_file_steps
from .errors import InvalidFileError
from .filesystem import AsyncLocalFileSystem, LocalFileSystem
from .interfaces import AsyncFileSystem, EntryKind, FileSystem
from .runner import Steps, run, run_async

# Content of a freshly created storage file: an empty document collection.
EMPTY_COLLECTION = "[]"


def read_steps(path: PathLike | None) -> Steps[str]:
    if path is None:
        return EMPTY_COLLECTION

    path = os.fspath(path)
    kind = yield "stat", (path,)
    if kind is EntryKind.ABSENT:
        yield from ensure_file_steps(path, EMPTY_COLLECTION)
    elif kind is not EntryKind.FILE:
        raise InvalidFileError(path)

    # Read back even after creating: a concurrent creator may have won.
    return (yield "read", (path,))


class StorageReader:
    """
    Reads a database storage file, creating it (and its directory) if missing.

    A path of None means the database has no backing file.
    """

    def __init__(self, fs: FileSystem | None = None) -> None:
        self._fs = fs if fs is not None else LocalFileSystem()

    def read(self, path: PathLike | None) -> str:
        return run(read_steps(path), self._fs)


class AsyncStorageReader:
    """Non-blocking StorageReader; same results for the same filesystem state."""

    def __init__(self, fs: AsyncFileSystem | None = None) -> None:
        self._fs = fs if fs is not None else AsyncLocalFileSystem()

    async def read(self, path: PathLike | None) -> str:
        return await run_async(read_steps(path), self._fs)


def read(path: PathLike | None) -> str:
    return StorageReader().read(path)


async def read_async(path: PathLike | None) -> str:
    return await AsyncStorageReader().read(path)
