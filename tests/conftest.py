"""Pytest fixtures for the deepprune test-suite."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

import pytest


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield


@pytest.fixture(autouse=True)
def _default_depth_limit(monkeypatch):  # noqa: D401
    """Make sure a DEEPPRUNE_MAX_DEPTH from the developer's shell never leaks in."""
    monkeypatch.delenv("DEEPPRUNE_MAX_DEPTH", raising=False)
    yield


@pytest.fixture()
def timestamp() -> datetime:
    """A fixed, timezone-aware temporal value."""
    return datetime(2024, 5, 17, 9, 30, tzinfo=timezone.utc)


@dataclass
class Address:
    street: str
    city: object = None


class Customer:  # pylint: disable=too-few-public-methods
    """Plain class instance, sanitized through its attributes."""

    def __init__(self, name, email=None, address=None):
        self.name = name
        self.email = email
        self.address = address


@pytest.fixture()
def customer_cls():
    return Customer


@pytest.fixture()
def address_cls():
    return Address
