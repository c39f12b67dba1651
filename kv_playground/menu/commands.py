"""
Menu Command Definitions

Maps the short tokens typed at the playground prompt to the demos they
run. The registry is built once at startup and is read-only afterwards.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Dict, Iterator, Optional

import redis

from ..demos import (
    run_caching_examples,
    run_expiration_examples,
    run_hash_examples,
    run_list_examples,
    run_pubsub_examples,
    run_set_examples,
    run_sorted_set_examples,
    run_string_examples,
)

EXIT_TOKEN = "0"

Action = Callable[[redis.Redis], None]


class ChoiceType(Enum):
    """Enumeration of resolved menu choices."""
    RUN = auto()
    EXIT = auto()
    INVALID = auto()


@dataclass(frozen=True)
class MenuOption:
    """
    A single runnable menu entry.

    Attributes:
        token: Text the user types to select the entry
        label: Text shown in the menu
        action: Callable invoked with the shared client handle
    """
    token: str
    label: str
    action: Action


@dataclass(frozen=True)
class Choice:
    """
    The outcome of looking up one line of user input.

    Attributes:
        type: RUN, EXIT or INVALID
        token: The trimmed input
        option: The matched option for RUN choices
    """
    type: ChoiceType
    token: str = ""
    option: Optional[MenuOption] = None

    @classmethod
    def run(cls, option: MenuOption) -> "Choice":
        return cls(type=ChoiceType.RUN, token=option.token, option=option)

    @classmethod
    def exit(cls) -> "Choice":
        return cls(type=ChoiceType.EXIT, token=EXIT_TOKEN)

    @classmethod
    def invalid(cls, token: str) -> "Choice":
        return cls(type=ChoiceType.INVALID, token=token)


class CommandRegistry:
    """
    Ordered, immutable mapping from menu token to MenuOption.

    Lookups are exact and case-sensitive after trimming surrounding
    whitespace; the exit token is handled here and never bound to an
    action.
    """

    def __init__(self, options):
        table: Dict[str, MenuOption] = {}
        for option in options:
            if option.token == EXIT_TOKEN:
                raise ValueError(f"token '{EXIT_TOKEN}' is reserved for exit")
            if option.token in table:
                raise ValueError(f"duplicate menu token '{option.token}'")
            table[option.token] = option
        self._options = table

    def __iter__(self) -> Iterator[MenuOption]:
        return iter(self._options.values())

    def __len__(self) -> int:
        return len(self._options)

    def __contains__(self, token: str) -> bool:
        return token in self._options

    def resolve(self, line: str) -> Choice:
        """Resolve one raw input line to a Choice."""
        token = line.strip()
        if token == EXIT_TOKEN:
            return Choice.exit()
        option = self._options.get(token)
        if option is None:
            return Choice.invalid(token)
        return Choice.run(option)


BASE_OPTIONS = (
    MenuOption("1", "Run String Examples", run_string_examples),
    MenuOption("2", "Run List Examples", run_list_examples),
    MenuOption("3", "Run Set Examples", run_set_examples),
    MenuOption("4", "Run Sorted Set Examples", run_sorted_set_examples),
    MenuOption("5", "Run Hash Examples", run_hash_examples),
)


def build_registry(
        extended: bool = False,
        pubsub_timeout: Optional[float] = None,
) -> CommandRegistry:
    """
    Build the playground's command registry.

    Args:
        extended: Also register the pub/sub, expiration and caching demos
        pubsub_timeout: Listener deadline handed to the pub/sub demo
    """
    options = list(BASE_OPTIONS)

    if extended:
        def pubsub(client: redis.Redis) -> None:
            if pubsub_timeout is None:
                run_pubsub_examples(client)
            else:
                run_pubsub_examples(client, timeout=pubsub_timeout)

        options.extend([
            MenuOption("6", "Run Pub/Sub Example", pubsub),
            MenuOption("7", "Run Expiration & TTL Examples", run_expiration_examples),
            MenuOption("8", "Run Caching Examples", run_caching_examples),
        ])

    return CommandRegistry(options)
