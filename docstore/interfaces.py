from __future__ import annotations

import enum
from typing import Protocol


class EntryKind(enum.Enum):
    """What occupies a path, as seen by lstat: a symlink is OTHER."""

    ABSENT = "absent"
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


class FileSystem(Protocol):
    """
    Blocking filesystem primitives the ensurers are written against.

    - stat() reports ABSENT instead of raising for "no such entry".
    - Every other failure is raised as the original OSError.
    """

    def stat(self, path: str) -> EntryKind:
        ...

    def mkdir(self, path: str) -> None:
        """Create the directory and any missing ancestors; existing directories are fine."""
        ...

    def create(self, path: str, data: str) -> None:
        """Exclusively create a new file holding data; FileExistsError if taken."""
        ...

    def read(self, path: str) -> str:
        ...

    def write(self, path: str, data: str) -> None:
        ...


class AsyncFileSystem(Protocol):
    """Same primitives as FileSystem, each one awaitable."""

    async def stat(self, path: str) -> EntryKind: ...
    async def mkdir(self, path: str) -> None: ...
    async def create(self, path: str, data: str) -> None: ...
    async def read(self, path: str) -> str: ...
    async def write(self, path: str, data: str) -> None: ...
