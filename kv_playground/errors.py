"""
Exception types raised by KV Playground.

Remote call failures surface as ``redis.exceptions.RedisError`` straight
from the client library; the classes here cover the failures that
belong to the playground itself.
"""


class PlaygroundError(Exception):
    """Base class for playground errors."""


class StartupError(PlaygroundError):
    """The store could not be configured or reached at startup."""


class ListenerTimeout(PlaygroundError):
    """A pub/sub listener did not receive its messages before the deadline."""

    def __init__(self, channel: str, expected: int, received: int):
        self.channel = channel
        self.expected = expected
        self.received = received
        super().__init__(
            f"listener on '{channel}' received {received} of "
            f"{expected} messages before the deadline"
        )
