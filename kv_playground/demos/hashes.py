"""Hash commands around a user profile and a login session."""

import redis

from .base import cleanup, demo, step

PROFILE_KEY = "user:123"
SESSION_KEY = "session:abc123"

PROFILE = {
    "name": "John Doe",
    "email": "john@example.com",
    "age": "30",
    "location": "San Francisco",
    "role": "Developer",
}

SESSION = {
    "user_id": "123",
    "username": "johndoe",
    "login_time": "2024-01-01T10:00:00Z",
    "ip_address": "192.168.1.1",
    "user_agent": "Mozilla/5.0...",
}


@demo("Hash Operations")
def run_hash_examples(client: redis.Redis) -> None:
    step(1, "Creating user profile with HSET:")
    client.hset(PROFILE_KEY, mapping=PROFILE)
    print("   User profile created ✓")

    step(2, "Getting specific fields with HGET:")
    print(f"   Name: {client.hget(PROFILE_KEY, 'name')}")
    print(f"   Email: {client.hget(PROFILE_KEY, 'email')}")

    step(3, "Getting all fields with HGETALL:")
    print("   Complete profile:")
    for field, value in client.hgetall(PROFILE_KEY).items():
        print(f"     {field}: {value}")

    step(4, "Getting multiple fields with HMGET:")
    field_names = ("name", "role", "location")
    values = client.hmget(PROFILE_KEY, field_names)
    print("   Selected fields:")
    for field, value in zip(field_names, values):
        print(f"     {field}: {value}")

    step(5, "Checking field existence with HEXISTS:")
    for field in ("age", "salary"):
        print(f"   Field '{field}' exists: {client.hexists(PROFILE_KEY, field)}")

    step(6, "Getting all field names with HKEYS:")
    print(f"   Available fields: {client.hkeys(PROFILE_KEY)}")

    step(7, "Getting all values with HVALS:")
    print(f"   All values: {client.hvals(PROFILE_KEY)}")

    step(8, "Getting field count with HLEN:")
    print(f"   Number of fields: {client.hlen(PROFILE_KEY)}")

    step(9, "Incrementing numeric fields with HINCRBY:")
    print(f"   Age after increment: {client.hincrby(PROFILE_KEY, 'age', 1)}")

    step(10, "Deleting fields with HDEL:")
    print(f"   Deleted {client.hdel(PROFILE_KEY, 'location')} field(s)")
    print(f"   Remaining fields: {client.hkeys(PROFILE_KEY)}")

    step(11, "Practical example - Session management:")
    client.hset(SESSION_KEY, mapping=SESSION)
    print(f"   Session {SESSION_KEY} created ✓")
    print("   Session data:")
    for field, value in client.hgetall(SESSION_KEY).items():
        print(f"     {field}: {value}")

    cleanup(client, 12, (PROFILE_KEY, SESSION_KEY), "hash")
