from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .errors import InvalidContentError
from .filesystem import AsyncLocalFileSystem, LocalFileSystem
from .interfaces import AsyncFileSystem, FileSystem
from .reader import EMPTY_COLLECTION, AsyncStorageReader, StorageReader
from .writer import AsyncStorageWriter, StorageWriter

Document = dict[str, Any]

_DOCUMENTS = TypeAdapter(list[Document])


def parse_documents(raw: str, path: Path | None = None) -> list[Document]:
    """
    Parse storage file content.

    Raises InvalidContentError unless the content is a JSON array of objects.
    """
    try:
        return _DOCUMENTS.validate_json(raw)
    except ValidationError as exc:
        raise InvalidContentError(path, f"{exc.error_count()} error(s)") from exc


def dump_documents(documents: list[Document], *, indent: int | None = 2) -> str:
    try:
        docs = _DOCUMENTS.validate_python(documents)
    except ValidationError as exc:
        raise InvalidContentError(None, f"{exc.error_count()} error(s)") from exc
    return json.dumps(_DOCUMENTS.dump_python(docs, mode="json"), indent=indent, ensure_ascii=False)


class DocumentFileStore:
    """
    Stores a document collection as a JSON array in a single file.

    - The file (and its directory) is created holding [] on first load.
    - A path of None keeps the collection in memory only.
    """

    def __init__(self, path: Path | str | None, *, indent: int | None = 2, fs: FileSystem | None = None):
        self._path = Path(path) if path is not None else None
        self._indent = indent
        fs = fs if fs is not None else LocalFileSystem()
        self._reader = StorageReader(fs)
        self._writer = StorageWriter(fs)
        self._memory = EMPTY_COLLECTION

    @property
    def path(self) -> Path | None:
        return self._path

    def load(self) -> list[Document]:
        raw = self._memory if self._path is None else self._reader.read(self._path)
        return parse_documents(raw, self._path)

    def save(self, documents: list[Document]) -> None:
        content = dump_documents(documents, indent=self._indent)
        if self._path is None:
            self._memory = content
            return
        self._writer.write(self._path, content)


class AsyncDocumentFileStore:
    """Async DocumentFileStore; every file access suspends instead of blocking."""

    def __init__(
        self,
        path: Path | str | None,
        *,
        indent: int | None = 2,
        fs: AsyncFileSystem | None = None,
    ):
        self._path = Path(path) if path is not None else None
        self._indent = indent
        fs = fs if fs is not None else AsyncLocalFileSystem()
        self._reader = AsyncStorageReader(fs)
        self._writer = AsyncStorageWriter(fs)
        self._memory = EMPTY_COLLECTION

    @property
    def path(self) -> Path | None:
        return self._path

    async def load(self) -> list[Document]:
        raw = self._memory if self._path is None else await self._reader.read(self._path)
        return parse_documents(raw, self._path)

    async def save(self, documents: list[Document]) -> None:
        content = dump_documents(documents, indent=self._indent)
        if self._path is None:
            self._memory = content
            return
        await self._writer.write(self._path, content)
