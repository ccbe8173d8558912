"""Shared pytest fixtures for SkyDNS client tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from tests.factories import FakeDNSTransport, RecordingHandler


@pytest.fixture
def handler() -> RecordingHandler:
    """Control-plane fake answering 200 with an empty body."""
    return RecordingHandler()


@pytest.fixture
def dns() -> FakeDNSTransport:
    """Data-plane fake answering NOERROR with no records."""
    return FakeDNSTransport()


@pytest.fixture(autouse=True)
def _clear_skydns_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SKYDNS_* variables of the developer's shell out of the tests."""
    for name in ("SKYDNS_BASE_URL", "SKYDNS_SECRET", "SKYDNS_DOMAIN", "SKYDNS_DNS_PORT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """Undo root handler and level changes made by configure_logging()."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
