"""
Expiration commands: SET with EX, TTL, EXPIRE and PERSIST.

This demo waits for keys to actually expire, so it takes around fifteen
seconds to run.
"""

import time

import redis

from .base import cleanup, demo, step

KEY = "temp:data"
SESSION_KEY = "session:xyz"
VALUE = "This is a temporary value"

KEY_TTL = 10
SESSION_TTL = 3


@demo("Expiration & TTL Operations")
def run_expiration_examples(client: redis.Redis, sleep=time.sleep) -> None:
    step(1, f"Setting key with expiration ({KEY_TTL} seconds):")
    client.set(KEY, VALUE, ex=KEY_TTL)
    print(f"   Key '{KEY}' set with value '{VALUE}' and TTL {KEY_TTL}s")
    print(f"   TTL for key '{KEY}': {client.ttl(KEY)}s")
    print(f"   Value before expiration: {client.get(KEY)}")

    print("   Waiting for key to expire...")
    sleep(KEY_TTL + 1)
    value = client.get(KEY)
    print(f"   Value after expiration: {'(expired or missing)' if value is None else value}")

    step(2, "Using EXPIRE to set/update expiration:")
    client.set(KEY, VALUE)
    client.expire(KEY, 5)
    print("   Expiration updated to 5 seconds")
    print(f"   New TTL: {client.ttl(KEY)}s")

    step(3, "Using PERSIST to make key permanent:")
    client.persist(KEY)
    print(f"   TTL after PERSIST: {client.ttl(KEY)} (should be -1 for permanent)")

    step(4, "Practical example - Session expiration:")
    client.set(SESSION_KEY, "user_data", ex=SESSION_TTL)
    print(f"   Session created with {SESSION_TTL}s TTL")
    sleep(SESSION_TTL + 1)
    if client.get(SESSION_KEY) is None:
        print("   Session expired and key deleted!")
    else:
        print("   Session still exists (unexpected)")

    cleanup(client, 5, (KEY, SESSION_KEY), "expiration")
