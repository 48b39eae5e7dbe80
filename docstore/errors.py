from __future__ import annotations

import os


class StorageError(Exception):
    """
    Base class for classified storage failures.

    Permission and I/O failures are not wrapped: the original OSError propagates.
    """

    def __init__(self, path: str | os.PathLike[str] | None, message: str):
        super().__init__(f"{message}: {path}" if path is not None else message)
        self.path = path


class InvalidFileError(StorageError):
    """The path exists but is not a regular file."""

    def __init__(self, path: str | os.PathLike[str]):
        super().__init__(path, "Invalid file specified")


class InvalidDirectoryError(StorageError):
    """The path exists but is not a directory."""

    def __init__(self, path: str | os.PathLike[str]):
        super().__init__(path, "Invalid directory specified")


class InvalidContentError(StorageError):
    """The storage file does not hold a JSON array of documents."""

    def __init__(self, path: str | os.PathLike[str] | None, detail: str):
        super().__init__(path, f"Invalid storage content ({detail})")
        self.detail = detail
