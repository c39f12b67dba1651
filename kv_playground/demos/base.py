"""
Shared helpers for the demos.

Every demo follows the same failure policy: the first remote error ends
the demo, the error is printed, and nothing is raised to the caller.
The menu loop therefore treats every demo as having succeeded.
"""

import functools
import logging

import redis

from ..errors import PlaygroundError

logger = logging.getLogger(__name__)

ABORTING_ERRORS = (redis.exceptions.RedisError, PlaygroundError)


def header(title: str) -> None:
    print(f"\n{title}")
    print("=" * len(title))


def step(number: int, text: str) -> None:
    """Print a numbered step heading."""
    prefix = "" if number == 1 else "\n"
    print(f"{prefix}{number}. {text}")


def cleanup(client: redis.Redis, number: int, keys, what: str) -> int:
    """Delete every key a demo created and report it."""
    step(number, "Cleanup:")
    removed = client.delete(*keys)
    print(f"   Cleaned up {what} examples ✓")
    return removed


def demo(title: str):
    """
    Decorate a demo function with its header and the fail-fast policy.

    Args:
        title: Header printed before the demo runs

    The wrapped function returns None whether it completed or aborted.
    Programming errors (anything outside the store's error hierarchy)
    still propagate.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(client, *args, **kwargs):
            header(title)
            try:
                func(client, *args, **kwargs)
            except ABORTING_ERRORS as e:
                logger.debug(f"{func.__name__} aborted", exc_info=True)
                print(f"Error: {e}")
            return None
        return wrapper
    return decorator
