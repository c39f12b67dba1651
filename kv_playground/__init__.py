"""
KV Playground: Interactive Redis Command Tour

A menu-driven console playground that walks through the Redis command
surface (strings, lists, sets, sorted sets, hashes, pub/sub, expiration
and caching) using the redis-py client.
"""

__version__ = "1.0.0"
