"""
Publish/Subscribe Demo

A background listener thread subscribes to a channel and collects a
fixed number of messages while the demo publishes them from the main
thread. The listener has a deadline and a cancellation event, so a
missing message ends the demo with ListenerTimeout instead of hanging
the playground.
"""

import logging
import threading
import time
from typing import List, Optional

import redis

from ..config.settings import DEFAULT_PUBSUB_TIMEOUT
from ..errors import ListenerTimeout
from .base import demo, step

logger = logging.getLogger(__name__)

CHAT_CHANNEL = "chat:room1"
NOTIFY_CHANNEL = "notifications"

# get_message() blocks at most this long so cancellation is noticed
POLL_INTERVAL = 0.1


class ChannelListener:
    """
    Receives an expected number of messages from one channel on a
    background thread.

    Usage:
        listener = ChannelListener(client.pubsub(), "chat", expected=3)
        listener.start()          # returns once subscribed
        client.publish("chat", "hello")
        messages = listener.wait()

    Attributes:
        channel: Channel name
        expected: Number of messages to receive before finishing
        timeout: Seconds allowed from start() until all messages arrive
        received: Payloads received so far, in arrival order
        done: Set once the listener thread has finished, for any reason
    """

    def __init__(
            self,
            pubsub: redis.client.PubSub,
            channel: str,
            expected: int,
            timeout: float = DEFAULT_PUBSUB_TIMEOUT,
            label: str = "Subscriber received",
    ):
        self.pubsub = pubsub
        self.channel = channel
        self.expected = expected
        self.timeout = timeout
        self.label = label

        self.received: List[str] = []
        self.error: Optional[BaseException] = None
        self.subscribed = threading.Event()
        self.cancelled = threading.Event()
        self.done = threading.Event()

        self._deadline = 0.0
        self._thread = threading.Thread(
            target=self._run,
            name=f"listener-{channel}",
            daemon=True,
        )

    def start(self) -> None:
        """
        Subscribe and start listening.

        Blocks until the store has confirmed the subscription so that
        messages published right after this call are not lost.
        """
        self._deadline = time.monotonic() + self.timeout
        self.pubsub.subscribe(self.channel)
        self._thread.start()
        if not self.subscribed.wait(self.timeout):
            self.cancel()
            self._raise_if_failed()
            raise ListenerTimeout(self.channel, self.expected, 0)

    def cancel(self) -> None:
        """Ask the listener to stop and wait briefly for it to exit."""
        self.cancelled.set()
        self.done.wait(POLL_INTERVAL * 5)

    def wait(self) -> List[str]:
        """
        Block until the listener has all its messages or the deadline
        passes.

        Raises:
            ListenerTimeout: If fewer than ``expected`` messages arrived.
            redis.exceptions.RedisError: If receiving failed.
        """
        remaining = max(self._deadline - time.monotonic(), 0.0)
        if not self.done.wait(remaining + POLL_INTERVAL):
            self.cancel()

        self._raise_if_failed()
        if len(self.received) < self.expected:
            raise ListenerTimeout(self.channel, self.expected, len(self.received))
        return list(self.received)

    def _raise_if_failed(self) -> None:
        if self.error is not None:
            raise self.error

    def _run(self) -> None:
        try:
            while len(self.received) < self.expected and not self.cancelled.is_set():
                remaining = self._deadline - time.monotonic()
                if remaining <= 0:
                    logger.debug(f"Listener on {self.channel} hit its deadline")
                    break

                message = self.pubsub.get_message(timeout=min(remaining, POLL_INTERVAL))
                if message is None:
                    continue
                if message["type"] == "subscribe":
                    self.subscribed.set()
                elif message["type"] == "message":
                    self.received.append(message["data"])
                    print(f"   {self.label}: {message['data']}")
        except redis.exceptions.RedisError as e:
            logger.debug(f"Listener on {self.channel} failed: {e}")
            self.error = e
        finally:
            self.done.set()


@demo("Pub/Sub Example")
def run_pubsub_examples(
        client: redis.Redis,
        timeout: float = DEFAULT_PUBSUB_TIMEOUT,
        sleep=time.sleep,
) -> None:
    step(1, "Subscribing to channel and publishing messages:")
    chat = ChannelListener(client.pubsub(), CHAT_CHANNEL, expected=3, timeout=timeout)
    try:
        chat.start()
        for i in range(1, 4):
            payload = f"Hello {i} from publisher!"
            client.publish(CHAT_CHANNEL, payload)
            print(f"   Publisher sent: {payload}")
            sleep(POLL_INTERVAL)
        chat.wait()
    finally:
        chat.cancel()
        chat.pubsub.close()

    step(2, "Practical example - Real-time notification system:")
    notify = ChannelListener(
        client.pubsub(),
        NOTIFY_CHANNEL,
        expected=1,
        timeout=timeout,
        label="Notification received",
    )
    try:
        notify.start()
        client.publish(NOTIFY_CHANNEL, "You have a new follower!")
        notify.wait()
    finally:
        notify.cancel()
        notify.pubsub.close()

    # channels hold no keys, nothing to clean up
    step(3, "Pub/Sub demo complete ✓")
