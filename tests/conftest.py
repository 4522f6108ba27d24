import os

import pytest

os.environ.setdefault("TESTING", "1")

from bff_stub import StubBFF  # noqa: E402

from platformkit.config import reset_settings  # noqa: E402
from platformkit.core.test_implementations import InMemoryAnalytics  # noqa: E402
from platformkit.events.broadcast import BroadcastChannel  # noqa: E402


@pytest.fixture
def bff() -> StubBFF:
    return StubBFF()


@pytest.fixture
def analytics() -> InMemoryAnalytics:
    return InMemoryAnalytics()


@pytest.fixture
def broadcast() -> BroadcastChannel:
    return BroadcastChannel()


@pytest.fixture(autouse=True)
def isolate_settings(monkeypatch):
    """Re-read settings from a clean environment in every test."""
    monkeypatch.setenv("TESTING", "1")
    for key in ("BFF_BASE_URL", "SELF_USER_ID", "ENVIRONMENT", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()
