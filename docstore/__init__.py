from __future__ import annotations

from .disk_store import AsyncDocumentFileStore, DocumentFileStore
from .ensure import (
    ensure_dir,
    ensure_dir_async,
    ensure_file,
    ensure_file_async,
    exists,
    exists_async,
)
from .errors import InvalidContentError, InvalidDirectoryError, InvalidFileError, StorageError
from .filesystem import AsyncLocalFileSystem, LocalFileSystem
from .interfaces import AsyncFileSystem, EntryKind, FileSystem
from .reader import EMPTY_COLLECTION, AsyncStorageReader, StorageReader, read, read_async
from .writer import AsyncStorageWriter, StorageWriter

__all__ = [
    "EMPTY_COLLECTION",
    "EntryKind",
    "FileSystem",
    "AsyncFileSystem",
    "LocalFileSystem",
    "AsyncLocalFileSystem",
    "StorageError",
    "InvalidFileError",
    "InvalidDirectoryError",
    "InvalidContentError",
    "exists",
    "exists_async",
    "ensure_dir",
    "ensure_dir_async",
    "ensure_file",
    "ensure_file_async",
    "read",
    "read_async",
    "StorageReader",
    "AsyncStorageReader",
    "StorageWriter",
    "AsyncStorageWriter",
    "DocumentFileStore",
    "AsyncDocumentFileStore",
]
