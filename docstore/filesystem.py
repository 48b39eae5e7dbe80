from __future__ import annotations

import asyncio
import os
import stat as stat_mode
from pathlib import Path

from .interfaces import AsyncFileSystem, EntryKind, FileSystem

ENCODING = "utf-8"


class LocalFileSystem(FileSystem):
    """
    FileSystem backed by the local disk.

    Text is read and written as UTF-8 with newlines passed through untouched,
    so the bytes on disk round-trip exactly.
    """

    def stat(self, path: str) -> EntryKind:
        try:
            info = os.lstat(path)
        except (FileNotFoundError, NotADirectoryError):
            # ENOTDIR: an ancestor is not a directory, so nothing can live here yet.
            return EntryKind.ABSENT
        if stat_mode.S_ISREG(info.st_mode):
            return EntryKind.FILE
        if stat_mode.S_ISDIR(info.st_mode):
            return EntryKind.DIRECTORY
        return EntryKind.OTHER

    def mkdir(self, path: str) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def create(self, path: str, data: str) -> None:
        with open(path, "x", encoding=ENCODING, newline="") as f:
            f.write(data)

    def read(self, path: str) -> str:
        with open(path, "r", encoding=ENCODING, newline="") as f:
            return f.read()

    def write(self, path: str, data: str) -> None:
        with open(path, "w", encoding=ENCODING, newline="") as f:
            f.write(data)


class AsyncLocalFileSystem(AsyncFileSystem):
    """
    Async wrapper around a blocking FileSystem.
    Uses asyncio.to_thread so each primitive suspends instead of blocking the event loop.
    """

    def __init__(self, fs: FileSystem | None = None) -> None:
        self._fs = fs if fs is not None else LocalFileSystem()

    async def stat(self, path: str) -> EntryKind:
        return await asyncio.to_thread(self._fs.stat, path)

    async def mkdir(self, path: str) -> None:
        await asyncio.to_thread(self._fs.mkdir, path)

    async def create(self, path: str, data: str) -> None:
        await asyncio.to_thread(self._fs.create, path, data)

    async def read(self, path: str) -> str:
        return await asyncio.to_thread(self._fs.read, path)

    async def write(self, path: str, data: str) -> None:
        await asyncio.to_thread(self._fs.write, path, data)
