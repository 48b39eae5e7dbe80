from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .disk_store import AsyncDocumentFileStore, DocumentFileStore


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Storage file; None keeps documents in memory
    storage_path: Path | None

    # JSON layout of the storage file
    pretty: bool

    log_level: str

    @property
    def indent(self) -> int | None:
        return 2 if self.pretty else None


def get_settings(env_file: str | None = "local.env") -> Settings:
    if env_file:
        load_dotenv(env_file)

    raw_path = os.getenv("DOCSTORE_PATH", "").strip()
    storage_path = Path(raw_path).expanduser() if raw_path else None

    pretty = _env_bool("DOCSTORE_PRETTY", True)
    log_level = os.getenv("DOCSTORE_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in logging.getLevelNamesMapping():
        log_level = "WARNING"

    return Settings(storage_path=storage_path, pretty=pretty, log_level=log_level)


def configure_logging(settings: Settings) -> None:
    level = logging.getLevelNamesMapping().get(settings.log_level, logging.WARNING)
    logging.getLogger("docstore").setLevel(level)


def open_store(settings: Settings | None = None) -> DocumentFileStore:
    settings = settings or get_settings()
    return DocumentFileStore(settings.storage_path, indent=settings.indent)


def open_async_store(settings: Settings | None = None) -> AsyncDocumentFileStore:
    settings = settings or get_settings()
    return AsyncDocumentFileStore(settings.storage_path, indent=settings.indent)
