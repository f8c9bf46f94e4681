"""Live Channel - Imperative Shell.

An in-process publish/subscribe channel carrying batches of new events.
Each subscription is a FIFO queue: whatever transport receives pushed
batches publishes them here, and the controller drains them in arrival
order on its own thread.
"""

import logging
import queue
from typing import Any, Iterator

from disaster_alerts.core.errors import ChannelError


logger = logging.getLogger(__name__)


class ChannelSubscription:
    """Handle for one subscriber's queue on an event name.

    Released with close(); the owning channel stops delivering to it.
    """

    def __init__(self, channel: "QueueChannel", event_name: str) -> None:
        self.channel = channel
        self.event_name = event_name
        self._queue: queue.Queue[list[Any]] = queue.Queue()
        self.closed = False

    def deliver(self, payload: list[Any]) -> None:
        self._queue.put(payload)

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    def drain(self) -> Iterator[list[Any]]:
        """Yield queued batches in arrival order until the queue is empty."""
        while True:
            try:
                yield self._queue.get_nowait()
            except queue.Empty:
                return

    def close(self) -> None:
        if self.closed:
            return
        self.channel.unsubscribe(self)
        self.closed = True


class QueueChannel:
    """Publish/subscribe channel keyed by event name (e.g. 'new-earthquake')."""

    def __init__(self) -> None:
        self._subscriptions: dict[str, list[ChannelSubscription]] = {}
        self.closed = False

    def subscribe(self, event_name: str) -> ChannelSubscription:
        """Open a subscription for an event name.

        Raises:
            ChannelError: If the channel has been closed
        """
        if self.closed:
            raise ChannelError(f"Cannot subscribe to '{event_name}': channel closed")

        subscription = ChannelSubscription(self, event_name)
        self._subscriptions.setdefault(event_name, []).append(subscription)
        logger.info("Subscribed to live channel event '%s'", event_name)
        return subscription

    def unsubscribe(self, subscription: ChannelSubscription) -> None:
        subscribers = self._subscriptions.get(subscription.event_name, [])
        if subscription in subscribers:
            subscribers.remove(subscription)
            logger.info("Unsubscribed from live channel event '%s'", subscription.event_name)

    def subscriber_count(self, event_name: str) -> int:
        return len(self._subscriptions.get(event_name, []))

    def publish(self, event_name: str, payload: list[Any]) -> int:
        """Deliver a batch to every subscriber of an event name.

        Returns:
            Number of subscriptions the batch was delivered to

        Raises:
            ChannelError: If the channel has been closed
        """
        if self.closed:
            raise ChannelError(f"Cannot publish '{event_name}': channel closed")

        subscribers = list(self._subscriptions.get(event_name, []))
        for subscription in subscribers:
            subscription.deliver(payload)

        logger.debug("Published %d records on '%s' to %d subscribers",
                     len(payload), event_name, len(subscribers))
        return len(subscribers)

    def close(self) -> None:
        """Close the channel and release every subscription."""
        for subscribers in list(self._subscriptions.values()):
            for subscription in list(subscribers):
                subscription.close()
        self._subscriptions.clear()
        self.closed = True
