"""Configuration module for KV Playground."""

from .connection import connect
from .settings import Settings, load_settings

__all__ = ["Settings", "connect", "load_settings"]
