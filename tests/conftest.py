from __future__ import annotations

import logging
from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for `import docstore` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """
    Drop DOCSTORE_* variables so settings tests start from defaults.
    """
    for name in ("DOCSTORE_PATH", "DOCSTORE_PRETTY", "DOCSTORE_LOG_LEVEL"):
        # setenv first so teardown also removes values load_dotenv writes to os.environ
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture
def docstore_logger():
    """
    Restore the package logger level after tests that reconfigure it.
    """
    logger = logging.getLogger("docstore")
    level = logger.level
    yield logger
    logger.setLevel(level)
