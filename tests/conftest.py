"""Shared pytest configuration and fixtures for tests."""

import sys
import io
from datetime import datetime, timedelta
from pathlib import Path

import pytest

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from taskboard.core.store import TaskStore
from taskboard.core.session import BoardSession


class SequentialIds:
    """Predictable ids whose short form counts up: 00000001..., 00000002..."""

    def __init__(self):
        self.issued = 0

    def __call__(self) -> str:
        self.issued += 1
        return f"{self.issued:08x}" + "0" * 24


class TickingClock:
    """Clock that advances one second per call."""

    def __init__(self, start: datetime = datetime(2025, 1, 15, 9, 0, 0)):
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now += timedelta(seconds=1)
        return current


@pytest.fixture
def store():
    """Empty store with predictable ids and timestamps."""
    return TaskStore(id_factory=SequentialIds(), clock=TickingClock())


@pytest.fixture
def session(store):
    """Board session wrapping the predictable store."""
    return BoardSession(store)
