"""
List commands modelled as a task queue, an activity feed and a stack.

Covers RPUSH, LPUSH, LRANGE, LPOP, LLEN, LINDEX, LSET, LREM and LTRIM.
"""

import redis

from .base import cleanup, demo, step

QUEUE_KEY = "task_queue"
FEED_KEY = "user:123:activity_feed"
STACK_KEY = "operation_stack"

ACTIVITIES = (
    "User logged in",
    "User updated profile",
    "User posted a comment",
    "User liked a post",
    "User shared an article",
)


@demo("List Operations")
def run_list_examples(client: redis.Redis) -> None:
    step(1, "Adding elements with LPUSH and RPUSH:")
    length = client.rpush(QUEUE_KEY, "task1", "task2", "task3")
    print(f"   RPUSH {QUEUE_KEY} task1 task2 task3: length = {length}")
    length = client.lpush(QUEUE_KEY, "urgent_task")
    print(f"   LPUSH {QUEUE_KEY} urgent_task: length = {length}")

    step(2, "Viewing list contents with LRANGE:")
    print(f"   Current queue: {client.lrange(QUEUE_KEY, 0, -1)}")
    print(f"   First 2 tasks: {client.lrange(QUEUE_KEY, 0, 1)}")

    step(3, "Processing tasks with LPOP:")
    print(f"   LPOP (processed): {client.lpop(QUEUE_KEY)}")
    print(f"   Remaining tasks: {client.lrange(QUEUE_KEY, 0, -1)}")

    step(4, "Checking queue size with LLEN:")
    print(f"   Queue size: {client.llen(QUEUE_KEY)}")

    step(5, "Getting specific elements with LINDEX:")
    print(f"   First task (index 0): {client.lindex(QUEUE_KEY, 0)}")
    print(f"   Last task (index -1): {client.lindex(QUEUE_KEY, -1)}")

    step(6, "Updating elements with LSET:")
    client.lset(QUEUE_KEY, 0, "updated_task1")
    print(f"   LSET {QUEUE_KEY} 0 'updated_task1' ✓")
    print(f"   Updated queue: {client.lrange(QUEUE_KEY, 0, -1)}")

    step(7, "Removing specific elements with LREM:")
    client.rpush(QUEUE_KEY, "duplicate", "duplicate", "unique")
    removed = client.lrem(QUEUE_KEY, 2, "duplicate")
    print(f"   LREM {QUEUE_KEY} 2 'duplicate': removed {removed} elements")
    print(f"   After removal: {client.lrange(QUEUE_KEY, 0, -1)}")

    step(8, "Practical example - Activity feed:")
    for activity in ACTIVITIES:
        client.lpush(FEED_KEY, activity)
    print("   Recent activities:")
    for i, activity in enumerate(client.lrange(FEED_KEY, 0, 2), start=1):
        print(f"     {i}. {activity}")
    # keep only the newest 10 entries
    client.ltrim(FEED_KEY, 0, 9)
    print("   Activity feed trimmed to last 10 items ✓")

    step(9, "Stack example (LIFO):")
    client.lpush(STACK_KEY, "operation1", "operation2", "operation3")
    print("   Popping from stack:")
    for _ in range(3):
        op = client.lpop(STACK_KEY)
        if op is None:
            break
        print(f"     Popped: {op}")

    cleanup(client, 10, (QUEUE_KEY, FEED_KEY, STACK_KEY), "list")
