"""Merge and pagination logic - Pure functions.

This module handles combining incoming event batches with the events
already held, and slicing the result into pages. All functions are pure
with no side effects.

Note: The collection itself is held by EventStore. This module only
contains the pure logic.
"""

import math

from disaster_alerts.core.disaster_event import DisasterEvent


def get_event_ids(events: list[DisasterEvent]) -> set[str]:
    """Extract IDs from a list of events.

    Pure function.

    Args:
        events: List of events

    Returns:
        Set of event IDs
    """
    return {e.id for e in events}


def collapse_by_id(events: list[DisasterEvent]) -> list[DisasterEvent]:
    """Collapse repeated IDs within a single batch.

    Pure function. The first position of an ID is kept and the last
    payload seen for it wins.

    Args:
        events: Events, possibly with repeated IDs

    Returns:
        Events with unique IDs
    """
    by_id: dict[str, DisasterEvent] = {}
    for event in events:
        by_id[event.id] = event
    return list(by_id.values())


def merge_events(
    existing: list[DisasterEvent],
    incoming: list[DisasterEvent],
) -> list[DisasterEvent]:
    """Merge an incoming batch in front of the existing events.

    Pure function.

    The incoming events come first, in the order given, followed by every
    existing event whose ID does not appear in the batch. An event that
    reappears is therefore moved to the front with its new payload.

    Args:
        existing: Events currently held
        incoming: Newly received batch

    Returns:
        New merged list with unique IDs
    """
    fresh = collapse_by_id(incoming)
    fresh_ids = get_event_ids(fresh)
    return fresh + [e for e in existing if e.id not in fresh_ids]


def page_count(total: int, page_size: int) -> int:
    """Number of pages needed for `total` items.

    Pure function. Never less than 1, so page 1 is always addressable.

    Args:
        total: Number of items
        page_size: Items per page (>= 1)

    Returns:
        Page count
    """
    return max(1, math.ceil(total / page_size))


def paginate(
    events: list[DisasterEvent],
    page_size: int,
    page_number: int,
) -> list[DisasterEvent]:
    """Return one page of events.

    Pure function. Caller guarantees page_size >= 1 and page_number >= 1.

    Args:
        events: Ordered events
        page_size: Items per page
        page_number: 1-based page index

    Returns:
        Slice for the page, empty if the page starts past the end
    """
    start = (page_number - 1) * page_size
    return events[start:start + page_size]
