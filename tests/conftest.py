"""Shared pytest fixtures for floatsize tests."""

import json
from pathlib import Path

import pytest

from floatsize.core.state import OverlayState
from floatsize.dispatch import LoggingDispatcher

from factories import snapshot_document


@pytest.fixture
def dispatcher() -> LoggingDispatcher:
    return LoggingDispatcher()


@pytest.fixture
def state(dispatcher: LoggingDispatcher) -> OverlayState:
    return OverlayState(dispatcher)


@pytest.fixture
def snapshot_file(tmp_path: Path) -> Path:
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(snapshot_document()))
    return path
