"""
Interactive Dispatch Loop

Reads one menu choice per line and runs the matching demo to completion
before reading again. The loop is strictly sequential: it never runs
two demos at once and never looks at how a demo ended.

States:
    READING      - menu shown, blocked on the next line of input
    DISPATCHING  - running the selected demo, then pausing for Enter
    EXIT         - token "0" (farewell printed) or end of input (silent)
"""

import logging
import sys
from typing import Optional, TextIO

import redis

from .commands import EXIT_TOKEN, ChoiceType, CommandRegistry

logger = logging.getLogger(__name__)

PROMPT = "Enter your choice: "
FAREWELL = "Exiting Redis Playground. Goodbye!"
INVALID_CHOICE = "Invalid choice, please try again."
CONTINUE = "\nPress Enter to continue..."


def show_menu(registry: CommandRegistry, out: Optional[TextIO] = None) -> None:
    """Print the static menu."""
    print("\n Choose an option:", file=out)
    for option in registry:
        print(f"{option.token}. {option.label}", file=out)
    print(f"{EXIT_TOKEN}. Exit", file=out)


def run_menu(
        client: redis.Redis,
        registry: CommandRegistry,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
) -> int:
    """
    Run the menu loop until the exit token or end of input.

    Args:
        client: Connected client handed to every demo
        registry: Token to demo mapping
        stdin: Source of user input, read one line at a time
        stdout: Destination for menu and prompts

    Returns:
        Process exit status (always 0; both exits are normal).
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    while True:
        show_menu(registry, stdout)
        stdout.write(PROMPT)
        stdout.flush()

        line = stdin.readline()
        if not line:
            logger.debug("End of input, leaving menu")
            return 0

        choice = registry.resolve(line)

        if choice.type == ChoiceType.EXIT:
            print(FAREWELL, file=stdout)
            return 0

        if choice.type == ChoiceType.INVALID:
            logger.debug(f"Invalid choice {choice.token!r}")
            print(INVALID_CHOICE, file=stdout)
            continue

        logger.debug(f"Dispatching {choice.option.label}")
        choice.option.action(client)

        print(CONTINUE, file=stdout)
        stdout.flush()
        if not stdin.readline():
            return 0
