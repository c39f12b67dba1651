"""
Tests for the menu command registry

Run with: python -m pytest tests/test_commands.py -v
"""

from unittest.mock import MagicMock

import pytest

from kv_playground.demos import (
    run_hash_examples,
    run_list_examples,
    run_set_examples,
    run_sorted_set_examples,
    run_string_examples,
)
from kv_playground.menu.commands import (
    ChoiceType,
    CommandRegistry,
    MenuOption,
    build_registry,
)


class TestDefaultRegistry:
    """Test the tokens registered by default."""

    @pytest.mark.parametrize("token,action", [
        ("1", run_string_examples),
        ("2", run_list_examples),
        ("3", run_set_examples),
        ("4", run_sorted_set_examples),
        ("5", run_hash_examples),
    ])
    def test_token_maps_to_demo(self, token, action):
        choice = build_registry().resolve(token)
        assert choice.type == ChoiceType.RUN
        assert choice.option.action is action

    def test_exit_token(self):
        assert build_registry().resolve("0").type == ChoiceType.EXIT

    def test_only_five_demos(self):
        registry = build_registry()
        assert [option.token for option in registry] == ["1", "2", "3", "4", "5"]

    @pytest.mark.parametrize("token", ["6", "7", "8"])
    def test_extended_tokens_hidden_by_default(self, token):
        assert build_registry().resolve(token).type == ChoiceType.INVALID


class TestExtendedRegistry:
    """Test the registry with the extra demos enabled."""

    def test_extended_tokens(self):
        registry = build_registry(extended=True)
        assert [option.token for option in registry] == [
            "1", "2", "3", "4", "5", "6", "7", "8",
        ]

    def test_pubsub_receives_timeout(self, monkeypatch):
        calls = []
        monkeypatch.setattr(
            "kv_playground.menu.commands.run_pubsub_examples",
            lambda client, **kwargs: calls.append(kwargs),
        )
        registry = build_registry(extended=True, pubsub_timeout=0.25)

        registry.resolve("6").option.action(MagicMock())

        assert calls == [{"timeout": 0.25}]


class TestResolve:
    """Test input resolution rules."""

    @pytest.fixture
    def registry(self) -> CommandRegistry:
        return CommandRegistry([
            MenuOption("1", "One", MagicMock()),
            MenuOption("a", "Lower", MagicMock()),
        ])

    def test_whitespace_is_trimmed(self, registry):
        choice = registry.resolve("  1 \n")
        assert choice.type == ChoiceType.RUN
        assert choice.token == "1"

    def test_exit_with_whitespace(self, registry):
        assert registry.resolve(" 0\n").type == ChoiceType.EXIT

    def test_case_sensitive(self, registry):
        assert registry.resolve("A").type == ChoiceType.INVALID

    @pytest.mark.parametrize("line", ["", "   ", "\n", "9", "01", "1 1", "exit"])
    def test_invalid_inputs(self, registry, line):
        choice = registry.resolve(line)
        assert choice.type == ChoiceType.INVALID
        assert choice.option is None

    def test_exit_token_is_reserved(self):
        with pytest.raises(ValueError):
            CommandRegistry([MenuOption("0", "Nope", MagicMock())])

    def test_duplicate_token_rejected(self):
        with pytest.raises(ValueError):
            CommandRegistry([
                MenuOption("1", "First", MagicMock()),
                MenuOption("1", "Second", MagicMock()),
            ])

    def test_membership(self, registry):
        assert "1" in registry
        assert "0" not in registry
        assert len(registry) == 2
