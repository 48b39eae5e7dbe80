from __future__ import annotations

from pathlib import Path

from docstore.filesystem import LocalFileSystem
from docstore.interfaces import EntryKind


class RecordingFileSystem(LocalFileSystem):
    """LocalFileSystem that remembers which primitives were called."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def stat(self, path: str) -> EntryKind:
        self.calls.append(("stat", path))
        return super().stat(path)

    def mkdir(self, path: str) -> None:
        self.calls.append(("mkdir", path))
        super().mkdir(path)

    def create(self, path: str, data: str) -> None:
        self.calls.append(("create", path))
        super().create(path, data)

    def read(self, path: str) -> str:
        self.calls.append(("read", path))
        return super().read(path)

    def write(self, path: str, data: str) -> None:
        self.calls.append(("write", path))
        super().write(path, data)


class RacingFileSystem(LocalFileSystem):
    """Another writer creates the file between our stat and our create."""

    def __init__(self, winner_content: str) -> None:
        self.winner_content = winner_content

    def create(self, path: str, data: str) -> None:
        super().create(path, self.winner_content)
        super().create(path, data)


class RacingDirectoryFileSystem(LocalFileSystem):
    """Another creator makes the directory between our stat and our mkdir."""

    def mkdir(self, path: str) -> None:
        super().mkdir(path)
        super().mkdir(path)


class DeniedFileSystem(LocalFileSystem):
    """Every stat fails with a permission error."""

    def stat(self, path: str) -> EntryKind:
        raise PermissionError(13, "Permission denied", path)


def snapshot(root: Path) -> dict[str, str | None]:
    """
    Map every entry under root to its text (files) or None (directories).
    """
    tree: dict[str, str | None] = {}
    for p in sorted(root.rglob("*")):
        rel = p.relative_to(root).as_posix()
        tree[rel] = p.read_text(encoding="utf-8") if p.is_file() else None
    return tree
