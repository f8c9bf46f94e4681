"""Text formatting - Pure functions.

This module formats events, pages, and the notification status as plain
text for the command-line client. All functions are pure with no side
effects.
"""

from urllib.parse import quote_plus

from disaster_alerts.core.disaster_event import DisasterEvent
from disaster_alerts.core.event_store import Page
from disaster_alerts.core.subscription import SubscriptionState


SEARCH_URL = "https://www.google.com/search?q="


def related_articles_url(event: DisasterEvent) -> str:
    """Build a news search URL for an event.

    Pure function.
    """
    return f"{SEARCH_URL}{quote_plus(event.type)}+{quote_plus(event.location)}"


def format_event(event: DisasterEvent) -> str:
    """Format a single event as a text card.

    Pure function.

    Args:
        event: Event to format

    Returns:
        Multi-line string
    """
    if event.has_known_country:
        country_line = f"Country: {event.country}"
    else:
        country_line = "Country: Not specified"

    lines = [event.location, f"  {country_line}"]

    if event.magnitude:
        lines.append(f"  Magnitude: {event.magnitude}")

    if event.severity:
        lines.append(f"  Severity: {event.severity}")

    lines.append(f"  Related Articles: {related_articles_url(event)}")

    return "\n".join(lines)


def format_page(page: Page, category: str = "earthquake") -> str:
    """Format a page of events with its pager line.

    Pure function.

    Args:
        page: Page from the event store
        category: Category name for the empty message

    Returns:
        Multi-line string
    """
    if page.is_empty:
        if page.number <= page.total_pages:
            return f"No {category}s reported in the last 48 hours."
        return f"Page {page.number} of {page.total_pages} (no events on this page)"

    blocks = [format_event(e) for e in page.items]
    blocks.append(f"Page {page.number} of {page.total_pages}")
    return "\n\n".join(blocks)


_STATE_LABELS = {
    SubscriptionState.UNSUPPORTED: "Notifications not supported",
    SubscriptionState.DEFAULT: "Enable Notifications",
    SubscriptionState.REQUESTING: "Enabling Notifications...",
    SubscriptionState.GRANTED: "Notifications Enabled",
    SubscriptionState.DENIED: "Notifications Blocked",
    SubscriptionState.FAILED: "Enable Notifications (retry)",
}


def format_notification_state(state: SubscriptionState) -> str:
    """Get the button-style label for a subscription state.

    Pure function.
    """
    return _STATE_LABELS[state]
