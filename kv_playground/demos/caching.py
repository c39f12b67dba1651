"""
Caching patterns on top of plain string keys.

Shows cache-aside reads, expiring entries, manual invalidation and
caching the result of an expensive computation.
"""

import time

import redis

from .base import cleanup, demo, step

USER_KEY = "cache:user:42"
EXPIRING_KEY = "cache:expiring"
INVALIDATE_KEY = "cache:invalidate"
EXPENSIVE_KEY = "cache:expensive"


def get_or_compute(client: redis.Redis, key: str, compute, ttl: int) -> str:
    """
    Cache-aside read: return the cached value or compute, store and
    return a fresh one.
    """
    value = client.get(key)
    if value is not None:
        print("   Cache hit!")
        return value

    print("   Cache miss! Computing value...")
    value = compute()
    client.set(key, value, ex=ttl)
    print("   Value cached in Redis")
    return value


@demo("Caching Examples")
def run_caching_examples(client: redis.Redis, sleep=time.sleep) -> None:
    step(1, "Cache-aside pattern:")
    value = get_or_compute(client, USER_KEY, lambda: "Naim", ttl=10)
    print(f"   Value: {value}")

    step(2, "Expiring cache:")
    client.set(EXPIRING_KEY, "temporary", ex=3)
    print(f"   Value before expire: {client.get(EXPIRING_KEY)}")
    sleep(4)
    if client.get(EXPIRING_KEY) is None:
        print("   Value after expire: (cache expired)")

    step(3, "Manual cache invalidation:")
    client.set(INVALIDATE_KEY, "stale")
    client.delete(INVALIDATE_KEY)
    if client.get(INVALIDATE_KEY) is None:
        print("   Value after invalidation: (no cache)")

    step(4, "Practical example - Caching computed result:")
    value = get_or_compute(client, EXPENSIVE_KEY, lambda: "Expensive Result", ttl=5)
    print(f"   Expensive operation result: {value}")

    keys = (USER_KEY, EXPIRING_KEY, INVALIDATE_KEY, EXPENSIVE_KEY)
    cleanup(client, 5, keys, "caching")
