"""Synchronization Controller - Wires Event Store, backend and live channel.

This module bootstraps the event store from the backend, keeps it live
by draining the live channel subscription, and exposes the notification
subscriber's state to the presentation layer.
"""

import logging
from dataclasses import dataclass
from typing import Any

from disaster_alerts.core.disaster_event import parse_events
from disaster_alerts.core.errors import InitialLoadError
from disaster_alerts.core.event_store import EventStore
from disaster_alerts.core.subscription import SubscriptionState
from disaster_alerts.shell.disaster_api_client import DisasterApiClient
from disaster_alerts.shell.live_channel import ChannelSubscription, QueueChannel
from disaster_alerts.subscriber import EnableResult, NotificationSubscriber


logger = logging.getLogger(__name__)


@dataclass
class StartResult:
    """Result of the controller's bootstrap.

    Attributes:
        events_loaded: Events placed in the store by the initial fetch
        records_dropped: Fetched records without a usable id
        error: Error message if the initial fetch failed
    """
    events_loaded: int
    records_dropped: int = 0
    error: str | None = None

    @property
    def success(self) -> bool:
        """Returns True if the initial fetch succeeded."""
        return self.error is None


class SynchronizationController:
    """Owns the event store lifecycle for one category.

    The live channel is passed in and the controller holds a single
    subscription on it between start() and close(). Use as a context
    manager to guarantee the subscription is released.
    """

    def __init__(
        self,
        api_client: DisasterApiClient,
        channel: QueueChannel,
        subscriber: NotificationSubscriber,
        category: str = "earthquake",
        store: EventStore | None = None,
    ) -> None:
        """Initialize controller.

        Args:
            api_client: Backend client for the bulk fetch
            channel: Live channel delivering batches of new events
            subscriber: Notification subscriber (exposed read-only)
            category: Disaster category to follow
            store: Event store (created empty if not provided)
        """
        self.api_client = api_client
        self.channel = channel
        self.subscriber = subscriber
        self.category = category
        self.store = store if store is not None else EventStore(category)
        self._subscription: ChannelSubscription | None = None

    @property
    def event_name(self) -> str:
        """Live channel event name for this category."""
        return f"new-{self.category}"

    @property
    def notification_state(self) -> SubscriptionState:
        """Current notification subscription state."""
        return self.subscriber.state

    def enable_notifications(self) -> EnableResult:
        """Run the notification opt-in flow on explicit user action."""
        return self.subscriber.enable()

    def start(self) -> StartResult:
        """Load current events, then attach to the live channel.

        A failed initial fetch is reported in the result; the store stays
        empty and later batches are still merged.

        Returns:
            StartResult with load details
        """
        result = self._load_initial()
        self._subscription = self.channel.subscribe(self.event_name)
        return result

    def _load_initial(self) -> StartResult:
        try:
            records = self.api_client.fetch_events(self.category)
        except InitialLoadError as e:
            error_msg = f"Initial load failed: {e}"
            logger.error(error_msg)
            return StartResult(events_loaded=0, error=error_msg)

        events = parse_events(records, default_type=self.category)
        dropped = len(records) - len(events)
        if dropped:
            logger.warning("Dropped %d %s records without an id", dropped, self.category)

        self.store.load(events)
        logger.info("Loaded %d %s events", len(self.store), self.category)

        return StartResult(events_loaded=len(self.store), records_dropped=dropped)

    def handle_batch(self, records: list[Any]) -> int:
        """Merge one live batch into the store.

        Args:
            records: Raw event records from the live channel

        Returns:
            Number of events merged
        """
        events = parse_events(records, default_type=self.category)
        if len(events) != len(records):
            logger.warning(
                "Dropped %d %s records without an id",
                len(records) - len(events),
                self.category,
            )

        self.store.merge(events)
        logger.info(
            "Merged %d new %s events (%d held)",
            len(events),
            self.category,
            len(self.store),
        )
        return len(events)

    def pump(self) -> int:
        """Apply every pending live batch in arrival order.

        Returns:
            Number of batches applied
        """
        if self._subscription is None:
            return 0

        applied = 0
        for batch in self._subscription.drain():
            self.handle_batch(batch)
            applied += 1
        return applied

    def close(self) -> None:
        """Release the live channel subscription."""
        if self._subscription is not None:
            self._subscription.close()
            self._subscription = None
            logger.info("Detached from live channel event '%s'", self.event_name)

    def __enter__(self) -> "SynchronizationController":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
