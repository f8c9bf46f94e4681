"""In-memory event store for one disaster category.

The store owns the ordered, deduplicated collection; the merge and
pagination algorithms live in core.merge.
"""

from dataclasses import dataclass

from disaster_alerts.core.disaster_event import DisasterEvent
from disaster_alerts.core.merge import collapse_by_id, merge_events, page_count, paginate


@dataclass(frozen=True)
class Page:
    """A single page of events.

    Attributes:
        items: Events on this page
        number: 1-based page number
        total_pages: Page count for the collection (at least 1)
    """
    items: tuple[DisasterEvent, ...]
    number: int
    total_pages: int

    @property
    def has_previous(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages

    @property
    def is_empty(self) -> bool:
        return not self.items


class EventStore:
    """Deduplicated, ordered collection of events for a category.

    Newly merged events sit in front of previously known ones. Event IDs
    are unique within the store.
    """

    def __init__(self, category: str = "earthquake") -> None:
        self.category = category
        self._events: list[DisasterEvent] = []

    def __len__(self) -> int:
        return len(self._events)

    @property
    def events(self) -> tuple[DisasterEvent, ...]:
        """Snapshot of the current ordered collection."""
        return tuple(self._events)

    def load(self, initial: list[DisasterEvent]) -> None:
        """Replace the collection with a startup seed."""
        self._events = collapse_by_id(list(initial))

    def merge(self, incoming: list[DisasterEvent]) -> None:
        """Merge a batch in front of the held events, replacing stale copies."""
        self._events = merge_events(self._events, list(incoming))

    def paginate(self, page_size: int, page_number: int) -> list[DisasterEvent]:
        """Return the events on a 1-based page (empty past the end)."""
        return paginate(self._events, page_size, page_number)

    def page_count(self, page_size: int) -> int:
        """Return the number of pages, at least 1 even when empty."""
        return page_count(len(self._events), page_size)

    def page(self, page_size: int, page_number: int) -> Page:
        """Return a page together with pager information."""
        return Page(
            items=tuple(self.paginate(page_size, page_number)),
            number=page_number,
            total_pages=self.page_count(page_size),
        )
