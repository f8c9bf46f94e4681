"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Disaster event parsing
- Merge and pagination logic
- Subscription state rules and key decoding
- Text formatting

EventStore is the one stateful piece; it holds the collection and
delegates every algorithm to the pure functions here.
"""

from disaster_alerts.core.disaster_event import DisasterEvent, parse_events
from disaster_alerts.core.merge import merge_events, page_count, paginate
from disaster_alerts.core.event_store import EventStore, Page
from disaster_alerts.core.subscription import (
    PermissionResult,
    PushSubscriptionRecord,
    SubscriptionState,
)
from disaster_alerts.core.formatter import format_event, format_page

__all__ = [
    # Events
    "DisasterEvent",
    "parse_events",
    # Merge
    "merge_events",
    "page_count",
    "paginate",
    # Store
    "EventStore",
    "Page",
    # Subscription
    "PermissionResult",
    "PushSubscriptionRecord",
    "SubscriptionState",
    # Formatter
    "format_event",
    "format_page",
]
