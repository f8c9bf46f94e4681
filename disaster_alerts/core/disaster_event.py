"""Disaster event data models and parsing - Pure functions.

This module handles parsing backend JSON records into typed DisasterEvent
objects. All functions are pure with no side effects.
"""

from dataclasses import dataclass
from typing import Any


# Sentinel the backend uses when it cannot resolve a country
UNKNOWN_COUNTRY = "Unknown"

DEFAULT_LOCATION = "Unknown location"


@dataclass(frozen=True)
class DisasterEvent:
    """Immutable disaster event data model.

    Attributes:
        id: Opaque unique event ID, stable across updates (merge key)
        type: Category tag (e.g., 'earthquake')
        location: Human-readable place description
        country: Country name or the UNKNOWN_COUNTRY sentinel
        magnitude: Seismic magnitude (optional)
        severity: Severity for non-seismic events (optional)
    """
    id: str
    type: str
    location: str
    country: str = UNKNOWN_COUNTRY
    magnitude: float | None = None
    severity: float | str | None = None

    @property
    def has_known_country(self) -> bool:
        """Return True unless country is the unknown sentinel."""
        return bool(self.country) and self.country.lower() != UNKNOWN_COUNTRY.lower()


def _parse_magnitude(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def parse_event(record: Any, default_type: str = "earthquake") -> DisasterEvent | None:
    """Parse a single backend record into a DisasterEvent.

    Pure function: takes raw dict, returns typed DisasterEvent or None if
    the record cannot be keyed.

    Args:
        record: JSON object from the events endpoint or live channel
        default_type: Category used when the record has no 'type'

    Returns:
        DisasterEvent or None if the record is not a mapping or has no id
    """
    if not isinstance(record, dict):
        return None

    raw_id = record.get("id")
    if raw_id is None or raw_id == "":
        return None

    return DisasterEvent(
        id=str(raw_id),
        type=record.get("type") or default_type,
        location=record.get("location") or DEFAULT_LOCATION,
        country=record.get("country") or UNKNOWN_COUNTRY,
        magnitude=_parse_magnitude(record.get("magnitude")),
        severity=record.get("severity"),
    )


def parse_events(records: list[Any], default_type: str = "earthquake") -> list[DisasterEvent]:
    """Parse a batch of backend records into DisasterEvents.

    Pure function: drops records that cannot be keyed, keeps the order of
    the rest exactly as received.

    Args:
        records: JSON array from the events endpoint or live channel
        default_type: Category used when a record has no 'type'

    Returns:
        List of valid DisasterEvent objects in input order
    """
    events = []

    for record in records:
        event = parse_event(record, default_type)
        if event is not None:
            events.append(event)

    return events
