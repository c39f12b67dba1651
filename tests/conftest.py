"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
Integration tests need a reachable Redis server (ADDR / AUTH_SECRET /
DB_INDEX from the environment, localhost:6379 by default) and are
skipped when none answers.
"""

import os
import queue
import socket
from collections import defaultdict
from contextlib import closing
from typing import Generator
from unittest.mock import MagicMock

import pytest
import redis

from kv_playground.config.connection import create_client
from kv_playground.config.settings import Settings, settings_from_env


def find_free_port() -> int:
    """Find a port with nothing listening on it."""
    with closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind(('', 0))
        s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        return s.getsockname()[1]


# ============================================================================
# Settings Fixtures
# ============================================================================

@pytest.fixture
def clean_env(monkeypatch, tmp_path) -> None:
    """Remove playground variables and point the env file at nothing."""
    for key in list(os.environ):
        if key in ("ADDR", "AUTH_SECRET", "DB_INDEX") or key.startswith("KV_PLAYGROUND_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("KV_PLAYGROUND_ENV_FILE", str(tmp_path / "missing.env"))


@pytest.fixture
def unreachable_settings() -> Settings:
    """Settings pointing at a local port with no server."""
    return Settings(addr=f"127.0.0.1:{find_free_port()}", connect_timeout=1.0)


# ============================================================================
# Client Fixtures
# ============================================================================

@pytest.fixture
def mock_client() -> MagicMock:
    """A mock redis client; configure return values per test."""
    return MagicMock(spec=redis.Redis)


class FakePubSub:
    """
    In-process stand-in for redis.client.PubSub.

    Subscription confirmations and published messages are delivered
    through get_message() like the real object does.
    """

    def __init__(self, bus: "FakeBus"):
        self.bus = bus
        self.messages: "queue.Queue[dict]" = queue.Queue()
        self.closed = False

    def subscribe(self, channel: str) -> None:
        self.bus.subscribers[channel].append(self)
        self.messages.put({"type": "subscribe", "channel": channel, "data": 1})

    def get_message(self, timeout: float = 0.0):
        try:
            return self.messages.get(timeout=timeout)
        except queue.Empty:
            return None

    def close(self) -> None:
        self.closed = True
        for subscribers in self.bus.subscribers.values():
            if self in subscribers:
                subscribers.remove(self)


class FakeBus:
    """Routes publish() calls to FakePubSub subscribers."""

    def __init__(self):
        self.subscribers = defaultdict(list)
        self.created = []

    def pubsub(self) -> FakePubSub:
        ps = FakePubSub(self)
        self.created.append(ps)
        return ps

    def publish(self, channel: str, data: str) -> int:
        subscribers = list(self.subscribers[channel])
        for ps in subscribers:
            ps.messages.put({"type": "message", "channel": channel, "data": data})
        return len(subscribers)


@pytest.fixture
def bus() -> FakeBus:
    return FakeBus()


@pytest.fixture
def pubsub_client(mock_client: MagicMock, bus: FakeBus) -> MagicMock:
    """A mock client whose pub/sub traffic goes through a FakeBus."""
    mock_client.pubsub.side_effect = bus.pubsub
    mock_client.publish.side_effect = bus.publish
    return mock_client


@pytest.fixture
def redis_client() -> Generator[redis.Redis, None, None]:
    """
    A live client for integration tests.

    Skips the test if no Redis server answers at the configured address.
    """
    client = create_client(settings_from_env(os.environ))
    try:
        client.ping()
    except redis.exceptions.RedisError as e:
        client.close()
        pytest.skip(f"Redis not available: {e}")

    yield client

    client.close()


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as needing a live Redis server"
    )
