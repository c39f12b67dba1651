"""
Sorted set commands around a game leaderboard, a time series and a
priority queue.
"""

import redis

from .base import cleanup, demo, step

LEADERBOARD = "game:leaderboard"
TIME_SERIES = "sensor:temperature"
PRIORITY_QUEUE = "task:priority_queue"

PLAYERS = {"alice": 1500, "bob": 2300, "charlie": 1800, "diana": 2100, "eve": 1200}

# member is the reading, score is the unix timestamp
READINGS = {
    "22.5": 1640995200,
    "23.1": 1640995260,
    "22.8": 1640995320,
    "23.4": 1640995380,
    "23.0": 1640995440,
}

# higher score means higher priority
TASKS = {
    "backup_database": 1,
    "fix_critical_bug": 5,
    "deploy_feature": 3,
    "update_documentation": 2,
    "security_patch": 4,
}


def print_ranking(entries, numbered: bool = True) -> None:
    for i, (member, score) in enumerate(entries, start=1):
        prefix = f"{i}. " if numbered else ""
        print(f"     {prefix}{member}: {score:.0f} points")


@demo("Sorted Set Operations")
def run_sorted_set_examples(client: redis.Redis) -> None:
    step(1, "Adding members with scores using ZADD:")
    added = client.zadd(LEADERBOARD, PLAYERS)
    print(f"   Added {added} players to leaderboard")

    step(2, "Getting members by rank with ZRANGE:")
    print("   All players (ascending):")
    print_ranking(client.zrange(LEADERBOARD, 0, -1, withscores=True))

    step(3, "Getting top players with ZREVRANGE:")
    print("   Top 3 players:")
    print_ranking(client.zrevrange(LEADERBOARD, 0, 2, withscores=True))

    step(4, "Getting specific scores with ZSCORE:")
    print(f"   Alice's score: {client.zscore(LEADERBOARD, 'alice'):.0f}")

    step(5, "Getting player ranks with ZRANK and ZREVRANK:")
    print(f"   Alice's rank (ascending): {client.zrank(LEADERBOARD, 'alice')}")
    rev_rank = client.zrevrank(LEADERBOARD, "alice")
    print(f"   Alice's rank (descending): {rev_rank} (position from top)")

    step(6, "Getting leaderboard size with ZCARD:")
    print(f"   Total players: {client.zcard(LEADERBOARD)}")

    step(7, "Updating scores with ZINCRBY:")
    new_score = client.zincrby(LEADERBOARD, 300, "alice")
    print(f"   Alice's new score after +300: {new_score:.0f}")
    print("   Updated top 3:")
    print_ranking(client.zrevrange(LEADERBOARD, 0, 2, withscores=True))

    step(8, "Getting players by score range with ZRANGEBYSCORE:")
    print("   Players with scores 1500-2000:")
    print_ranking(
        client.zrangebyscore(LEADERBOARD, 1500, 2000, withscores=True),
        numbered=False,
    )

    step(9, "Counting players in score range with ZCOUNT:")
    print(f"   Players with scores 1500-2000: {client.zcount(LEADERBOARD, 1500, 2000)}")

    step(10, "Removing players with ZREM:")
    print(f"   Removed {client.zrem(LEADERBOARD, 'eve')} player(s)")

    step(11, "Removing bottom players with ZREMRANGEBYRANK:")
    removed = client.zremrangebyrank(LEADERBOARD, 0, 0)
    print(f"   Removed {removed} bottom player(s)")
    print("   Final leaderboard:")
    print_ranking(client.zrevrange(LEADERBOARD, 0, -1, withscores=True))

    step(12, "Practical example - Time-series data:")
    client.zadd(TIME_SERIES, READINGS)
    print("   Latest 3 temperature readings:")
    for reading, ts in client.zrevrange(TIME_SERIES, 0, 2, withscores=True):
        print(f"     Timestamp {ts:.0f}: {reading}°C")
    print("   Readings in first 2 minutes:")
    window = client.zrangebyscore(TIME_SERIES, 1640995200, 1640995320, withscores=True)
    for reading, ts in window:
        print(f"     Timestamp {ts:.0f}: {reading}°C")

    step(13, "Practical example - Priority queue:")
    client.zadd(PRIORITY_QUEUE, TASKS)
    print("   Processing tasks by priority:")
    for _ in range(3):
        highest = client.zrevrange(PRIORITY_QUEUE, 0, 0, withscores=True)
        if not highest:
            break
        task, priority = highest[0]
        print(f"     Processing (priority {priority:.0f}): {task}")
        client.zrem(PRIORITY_QUEUE, task)

    cleanup(client, 14, (LEADERBOARD, TIME_SERIES, PRIORITY_QUEUE), "sorted set")
