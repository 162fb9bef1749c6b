"""Shared fixtures for ConfigScout tests."""

import os
import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import List

import pytest
from loguru import logger


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests (symlinks resolved)."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(os.path.realpath(tmpdir))


@pytest.fixture
def isolated_home(temp_dir: Path, monkeypatch) -> Path:
    """Point HOME at an empty directory and clear CONFIGSCOUT_* variables."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for key in list(os.environ):
        if key.startswith("CONFIGSCOUT_"):
            monkeypatch.delenv(key)
    return home


@pytest.fixture
def loguru_messages() -> Generator[List[str], None, None]:
    """Capture loguru messages at WARNING and above."""
    messages: List[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)
