"""
Tests for the playground entry point

Run with: python -m pytest tests/test_playground.py -v
"""

import io
from unittest.mock import MagicMock

import pytest
import redis

from kv_playground import playground
from kv_playground.errors import StartupError
from kv_playground.menu.dispatcher import FAREWELL


@pytest.fixture
def fake_connect(monkeypatch):
    client = MagicMock(spec=redis.Redis)
    monkeypatch.setattr(playground, "connect", lambda settings: client)
    return client


class TestStartup:
    """Test the fatal startup path."""

    def test_unreachable_store_exits_before_menu(self, clean_env, monkeypatch, capsys):
        monkeypatch.setenv("ADDR", "127.0.0.1:1")
        monkeypatch.setenv("KV_PLAYGROUND_CONNECT_TIMEOUT", "1")
        monkeypatch.setattr("sys.stdin", io.StringIO("1\n\n0\n"))

        status = playground.main()

        captured = capsys.readouterr()
        assert status == 1
        assert "Failed to connect to Redis" in captured.err
        assert "Choose an option" not in captured.out

    def test_startup_error_message(self, clean_env, monkeypatch, capsys):
        def refuse(settings):
            raise StartupError("Connection refused")

        monkeypatch.setattr(playground, "connect", refuse)

        assert playground.main() == 1
        assert "Failed to connect to Redis: Connection refused" in capsys.readouterr().err


class TestSession:
    """Test a full session with a stubbed connection."""

    def test_exit_token(self, clean_env, fake_connect, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))

        status = playground.main()

        out = capsys.readouterr().out
        assert status == 0
        assert "Choose an option" in out
        assert FAREWELL in out
        fake_connect.close.assert_called_once()

    def test_end_of_input(self, clean_env, fake_connect, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(""))

        status = playground.main()

        assert status == 0
        assert FAREWELL not in capsys.readouterr().out
        fake_connect.close.assert_called_once()

    def test_extended_menu_from_environment(self, clean_env, fake_connect, monkeypatch, capsys):
        monkeypatch.setenv("KV_PLAYGROUND_EXTENDED_MENU", "true")
        monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))

        playground.main()

        assert "8. Run Caching Examples" in capsys.readouterr().out
