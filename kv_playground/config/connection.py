"""
Redis Connection Bootstrap

Builds the single client handle used for the whole session and checks
that the store answers before anything else runs. There is no retry:
a store that does not answer the first PING is a fatal startup error.
"""

import logging

import redis

from ..errors import StartupError
from .settings import Settings

logger = logging.getLogger(__name__)


def create_client(settings: Settings) -> redis.Redis:
    """
    Create a Redis client from settings without touching the network.

    Raises:
        StartupError: If ADDR does not carry a valid port number.
    """
    try:
        port = settings.port
    except ValueError:
        raise StartupError(f"invalid address '{settings.addr}'")

    return redis.Redis(
        host=settings.host,
        port=port,
        password=settings.password,
        db=settings.db_index,
        socket_connect_timeout=settings.connect_timeout,
        decode_responses=True,
    )


def connect(settings: Settings) -> redis.Redis:
    """
    Open a client and verify it with PING.

    Returns:
        A connected client; the caller owns it and must close it.

    Raises:
        StartupError: If the address is invalid or the store does not
            answer the PING.
    """
    client = create_client(settings)

    try:
        client.ping()
    except redis.exceptions.RedisError as e:
        client.close()
        raise StartupError(str(e)) from e

    logger.info(f"Connected to Redis at {settings.addr} (db {settings.db_index})")
    return client
