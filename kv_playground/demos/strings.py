"""String commands: SET, GET, TTL, INCR, DECR, APPEND, MSET, MGET."""

import redis

from .base import cleanup, demo, step

KEYS = ("user:1", "temp:session", "counter", "message", "key1", "key2", "key3")


@demo("String Operations Examples")
def run_string_examples(client: redis.Redis) -> None:
    step(1, "Basic SET and GET:")
    client.set("user:1", "Naim Islam")
    print(f"   user:1 = {client.get('user:1')}")

    step(2, "SET with expiration (5 seconds):")
    client.set("temp:session", "12345", ex=5)
    ttl = client.ttl("temp:session")
    print(f"   temp:session will expire in {ttl}s")

    step(3, "Increment and Decrement:")
    client.set("counter", 10)
    print(f"   Counter after increment: {client.incr('counter')}")
    print(f"   Counter after decrement: {client.decr('counter')}")

    step(4, "APPEND operation:")
    client.set("message", "Hello")
    length = client.append("message", " World!")
    print(f"   Appended message: {client.get('message')} (length: {length})")

    step(5, "Multiple SET and GET:")
    client.mset({"key1": "value1", "key2": "value2", "key3": "value3"})
    values = client.mget("key1", "key2", "key3")
    for i, value in enumerate(values, start=1):
        print(f"   key{i} = {'<nil>' if value is None else value}")

    cleanup(client, 6, KEYS, "string")
