"""
KV Playground Configuration Settings

Connection parameters and playground options are read from the process
environment, optionally seeded from a dotenv file. Settings are resolved
once at startup and never change afterwards.

Environment Variables:
    ADDR                            - Redis address as host:port
    AUTH_SECRET                     - Redis password (empty for none)
    DB_INDEX                        - Logical database index
    KV_PLAYGROUND_ENV_FILE          - Optional dotenv file (default .env)
    KV_PLAYGROUND_CONNECT_TIMEOUT   - Socket connect timeout in seconds
    KV_PLAYGROUND_PUBSUB_TIMEOUT    - Pub/sub listener deadline in seconds
    KV_PLAYGROUND_EXTENDED_MENU     - Show pub/sub, TTL and caching demos
    KV_PLAYGROUND_DEBUG             - Enable debug logging (true/false)
    KV_PLAYGROUND_LOG_LEVEL         - Log level name
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_ADDR = "localhost:6379"
DEFAULT_PORT = 6379
DEFAULT_DB_INDEX = 0
DEFAULT_ENV_FILE = ".env"
DEFAULT_CONNECT_TIMEOUT = 5.0
DEFAULT_PUBSUB_TIMEOUT = 5.0

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """Playground configuration settings."""

    # Connection settings
    addr: str = DEFAULT_ADDR
    auth_secret: str = ""
    db_index: int = DEFAULT_DB_INDEX
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT

    # Demo settings
    pubsub_timeout: float = DEFAULT_PUBSUB_TIMEOUT
    extended_menu: bool = False

    # Logging settings
    debug: bool = False
    log_level: str = "INFO"

    @property
    def host(self) -> str:
        host, _, _ = self.addr.rpartition(":")
        return host or self.addr

    @property
    def port(self) -> int:
        """
        Port part of ``addr``.

        Raises:
            ValueError: If the port part is present but not an integer.
        """
        _, sep, port = self.addr.rpartition(":")
        if not sep:
            return DEFAULT_PORT
        return int(port)

    @property
    def password(self) -> Optional[str]:
        return self.auth_secret or None


def get_env(env: Mapping[str, str], key: str, default: str) -> str:
    """Return ``env[key]`` if set, otherwise the default."""
    value = env.get(key)
    return default if value is None else value


def get_env_int(env: Mapping[str, str], key: str, default: int) -> int:
    """
    Return ``env[key]`` as a non-negative integer.

    Missing, malformed or negative values fall back to the default
    without complaint.
    """
    raw = env.get(key, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= 0 else default


def get_env_float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(key, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def get_env_bool(env: Mapping[str, str], key: str, default: bool = False) -> bool:
    raw = env.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def load_env_file(path: str) -> bool:
    """
    Load variables from a dotenv file into the process environment.

    Variables already present in the environment take precedence. A
    missing file is not an error: the playground falls back to the
    environment and the built-in defaults.

    Returns:
        True if the file was found and loaded.
    """
    if not os.path.isfile(path):
        logger.debug(f"No env file at {path}, using environment and defaults")
        return False

    load_dotenv(path, override=False)
    logger.debug(f"Loaded environment from {path}")
    return True


def settings_from_env(env: Mapping[str, str]) -> Settings:
    """Build Settings from an environment mapping."""
    return Settings(
        addr=get_env(env, "ADDR", DEFAULT_ADDR).strip() or DEFAULT_ADDR,
        auth_secret=get_env(env, "AUTH_SECRET", ""),
        db_index=get_env_int(env, "DB_INDEX", DEFAULT_DB_INDEX),
        connect_timeout=get_env_float(
            env, "KV_PLAYGROUND_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT
        ),
        pubsub_timeout=get_env_float(
            env, "KV_PLAYGROUND_PUBSUB_TIMEOUT", DEFAULT_PUBSUB_TIMEOUT
        ),
        extended_menu=get_env_bool(env, "KV_PLAYGROUND_EXTENDED_MENU"),
        debug=get_env_bool(env, "KV_PLAYGROUND_DEBUG"),
        log_level=get_env(env, "KV_PLAYGROUND_LOG_LEVEL", "INFO").upper(),
    )


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Resolve settings for this process.

    Args:
        env_file: Dotenv file to load first (default from
            KV_PLAYGROUND_ENV_FILE, then ``.env``)
    """
    if env_file is None:
        env_file = os.environ.get("KV_PLAYGROUND_ENV_FILE", DEFAULT_ENV_FILE)
    load_env_file(env_file)
    return settings_from_env(os.environ)
