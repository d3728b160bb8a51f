"""Shared test fixtures for opmonitor."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import pytest

from opmonitor.core.poller import OperationPoller
from opmonitor.display.recording import RecordingSink
from opmonitor.models.operations import DatabaseStatus, RestoreStatus
from opmonitor.models.progress import ProgressEntry


@pytest.fixture
def sink() -> RecordingSink:
    """Provide a fresh in-memory display sink."""
    return RecordingSink()


@pytest.fixture
def sleeps() -> list[float]:
    """Records every sleep requested by the ``poller`` fixture."""
    return []


@pytest.fixture
def poller(sleeps: list[float]) -> OperationPoller:
    """Provide a poller that records sleeps instead of sleeping."""
    return OperationPoller(interval=1.0, sleep=sleeps.append)


@pytest.fixture
def fixed_now() -> datetime:
    """A deterministic 'now' for duration formatting."""
    return datetime(2026, 2, 27, 12, 0, 0, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Snapshot factories — shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def make_database(fixed_now: datetime) -> Callable[..., DatabaseStatus]:
    """Factory fixture: build a DatabaseStatus with sensible defaults."""

    def _factory(state: str = "available", **overrides: Any) -> DatabaseStatus:
        defaults: dict[str, Any] = {
            "state": state,
            "state_updated_at": fixed_now,
            "created_at": fixed_now,
        }
        defaults.update(overrides)
        return DatabaseStatus(**defaults)

    return _factory


@pytest.fixture
def make_restore() -> Callable[..., RestoreStatus]:
    """Factory fixture: build a RestoreStatus from (stage, amount) pairs."""

    def _factory(*pairs: tuple[str, Any], **overrides: Any) -> RestoreStatus:
        defaults: dict[str, Any] = {
            "id": "restore-1",
            "progress": [ProgressEntry.model_validate(p) for p in pairs],
        }
        defaults.update(overrides)
        return RestoreStatus(**defaults)

    return _factory
