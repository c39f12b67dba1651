"""
Set commands: SADD, SMEMBERS, SCARD, SISMEMBER, SINTER, SUNION, SDIFF,
SPOP, SRANDMEMBER and SREM, followed by tagging and presence examples.
"""

import redis

from .base import cleanup, demo, step

INTERESTS = "user:123:interests"
OTHER_INTERESTS = "user:456:interests"
ONLINE_USERS = "online_users"
ARTICLE_TAGS = {
    "article:1:tags": ("redis", "database", "nosql", "performance"),
    "article:2:tags": ("golang", "programming", "performance", "backend"),
    "article:3:tags": ("redis", "golang", "tutorial", "backend"),
}


@demo("Set Operations")
def run_set_examples(client: redis.Redis) -> None:
    step(1, "Adding members with SADD:")
    added = client.sadd(INTERESTS, "programming", "music", "travel", "photography")
    print(f"   Added {added} interests to user:123")
    added = client.sadd(INTERESTS, "programming", "reading")
    print(f"   Added {added} new interests (duplicates ignored)")

    step(2, "Getting all members with SMEMBERS:")
    print(f"   User interests: {sorted(client.smembers(INTERESTS))}")

    step(3, "Getting set size with SCARD:")
    print(f"   Number of interests: {client.scard(INTERESTS)}")

    step(4, "Checking membership with SISMEMBER:")
    for interest in ("programming", "cooking"):
        is_member = bool(client.sismember(INTERESTS, interest))
        print(f"   Is '{interest}' an interest? {is_member}")

    step(5, "Creating another user's interests:")
    client.sadd(OTHER_INTERESTS, "programming", "gaming", "travel", "cooking")
    print(f"   User 456 interests: {sorted(client.smembers(OTHER_INTERESTS))}")

    step(6, "Finding common interests with SINTER:")
    print(f"   Common interests: {sorted(client.sinter(INTERESTS, OTHER_INTERESTS))}")

    step(7, "Finding all unique interests with SUNION:")
    print(f"   All unique interests: {sorted(client.sunion(INTERESTS, OTHER_INTERESTS))}")

    step(8, "Finding unique interests with SDIFF:")
    only_123 = sorted(client.sdiff(INTERESTS, OTHER_INTERESTS))
    only_456 = sorted(client.sdiff(OTHER_INTERESTS, INTERESTS))
    print(f"   Interests unique to user 123: {only_123}")
    print(f"   Interests unique to user 456: {only_456}")

    step(9, "Random operations with SPOP and SRANDMEMBER:")
    print(f"   Randomly removed interest: {client.spop(INTERESTS)}")
    print(f"   Random interest (not removed): {client.srandmember(INTERESTS)}")
    print(f"   2 random interests: {client.srandmember(INTERESTS, 2)}")

    step(10, "Removing specific members with SREM:")
    removed = client.srem(INTERESTS, "music")
    print(f"   Removed {removed} member(s)")
    print(f"   Remaining interests: {sorted(client.smembers(INTERESTS))}")

    step(11, "Practical example - Article tagging system:")
    for key, tags in ARTICLE_TAGS.items():
        client.sadd(key, *tags)
    articles = list(ARTICLE_TAGS)

    print("   Articles tagged with 'redis':")
    for i, article in enumerate(articles, start=1):
        if client.sismember(article, "redis"):
            print(f"     Article {i} has 'redis' tag")

    print("   Articles tagged with both 'performance' AND 'backend':")
    for i, article in enumerate(articles, start=1):
        if client.sismember(article, "performance") and client.sismember(article, "backend"):
            print(f"     Article {i} has both tags")

    step(12, "Practical example - Online users tracking:")
    client.sadd(ONLINE_USERS, "user:123", "user:456", "user:789")
    print(f"   Online users: {sorted(client.smembers(ONLINE_USERS))}")
    client.srem(ONLINE_USERS, "user:456")
    print(f"   Online user count: {client.scard(ONLINE_USERS)}")

    keys = (INTERESTS, OTHER_INTERESTS, *ARTICLE_TAGS, ONLINE_USERS)
    cleanup(client, 13, keys, "set")
