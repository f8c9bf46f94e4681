"""Unit tests for merge and pagination logic.

Pure function tests - no mocks needed.
"""

import pytest

from disaster_alerts.core.disaster_event import DisasterEvent
from disaster_alerts.core.merge import (
    collapse_by_id,
    get_event_ids,
    merge_events,
    page_count,
    paginate,
)


def make_event(event_id: str, location: str = "Test Location", magnitude: float | None = 4.0):
    """Create an event with the given id."""
    return DisasterEvent(
        id=event_id,
        type="earthquake",
        location=location,
        country="Japan",
        magnitude=magnitude,
    )


@pytest.fixture
def existing():
    """Events already held, in display order."""
    return [make_event("eq1"), make_event("eq2"), make_event("eq3")]


class TestGetEventIds:
    """Tests for get_event_ids() function."""

    def test_extracts_ids(self, existing):
        """Should extract all event IDs."""
        assert get_event_ids(existing) == {"eq1", "eq2", "eq3"}

    def test_empty_list(self):
        """Should return empty set for empty list."""
        assert get_event_ids([]) == set()


class TestCollapseById:
    """Tests for collapse_by_id() function."""

    def test_unique_ids_unchanged(self, existing):
        """Batch without repeats is returned as-is."""
        assert collapse_by_id(existing) == existing

    def test_repeated_id_keeps_first_position_last_payload(self):
        """A repeated id keeps its first slot with the last payload."""
        first = make_event("eq1", location="Old")
        other = make_event("eq2")
        last = make_event("eq1", location="New")

        result = collapse_by_id([first, other, last])

        assert [e.id for e in result] == ["eq1", "eq2"]
        assert result[0].location == "New"


class TestMergeEvents:
    """Tests for merge_events() function."""

    def test_new_events_go_first(self, existing):
        """New events are placed before existing ones."""
        incoming = [make_event("eq9"), make_event("eq8")]

        result = merge_events(existing, incoming)

        assert [e.id for e in result] == ["eq9", "eq8", "eq1", "eq2", "eq3"]

    def test_updated_event_moves_to_front(self, existing):
        """An event seen again moves to the front with its new payload."""
        updated = make_event("eq2", location="Updated", magnitude=5.1)

        result = merge_events(existing, [updated])

        assert [e.id for e in result] == ["eq2", "eq1", "eq3"]
        assert result[0].location == "Updated"
        assert result[0].magnitude == 5.1

    def test_no_duplicate_ids(self, existing):
        """Merged collection never holds two events with the same id."""
        incoming = [make_event("eq3"), make_event("eq4"), make_event("eq1")]

        result = merge_events(existing, incoming)
        ids = [e.id for e in result]

        assert len(ids) == len(set(ids))

    def test_duplicates_within_batch_are_collapsed(self, existing):
        """Repeated ids inside one batch do not create duplicates."""
        incoming = [make_event("eq5", location="A"), make_event("eq5", location="B")]

        result = merge_events(existing, incoming)

        assert [e.id for e in result] == ["eq5", "eq1", "eq2", "eq3"]
        assert result[0].location == "B"

    def test_untouched_events_keep_relative_order(self, existing):
        """Events not in the batch keep their original order."""
        result = merge_events(existing, [make_event("eq2")])

        remaining = [e.id for e in result[1:]]
        assert remaining == ["eq1", "eq3"]

    def test_idempotent(self, existing):
        """Merging the same batch twice equals merging it once."""
        batch = [make_event("eq3", location="Moved"), make_event("eq7")]

        once = merge_events(existing, batch)
        twice = merge_events(once, batch)

        assert twice == once

    def test_empty_batch(self, existing):
        """Empty batch leaves the collection unchanged."""
        assert merge_events(existing, []) == existing

    def test_into_empty_collection(self):
        """Merging into an empty collection yields the batch."""
        batch = [make_event("eq1"), make_event("eq2")]
        assert merge_events([], batch) == batch

    def test_does_not_modify_inputs(self, existing):
        """Inputs are not mutated."""
        snapshot = list(existing)
        merge_events(existing, [make_event("eq1", location="X")])
        assert existing == snapshot


class TestPageCount:
    """Tests for page_count() function."""

    @pytest.mark.parametrize("total,size,expected", [
        (0, 10, 1),
        (1, 10, 1),
        (10, 10, 1),
        (11, 10, 2),
        (25, 10, 3),
        (7, 1, 7),
    ])
    def test_page_count(self, total, size, expected):
        """Page count is ceil(total / size), at least 1."""
        assert page_count(total, size) == expected


class TestPaginate:
    """Tests for paginate() function."""

    @pytest.fixture
    def events(self):
        return [make_event(f"eq{i}") for i in range(25)]

    def test_first_page(self, events):
        """First page holds the first page_size events."""
        result = paginate(events, 10, 1)
        assert [e.id for e in result] == [f"eq{i}" for i in range(10)]

    def test_last_page_is_remainder(self, events):
        """Last page holds the remainder."""
        result = paginate(events, 10, 3)
        assert len(result) == 5
        assert result[0].id == "eq20"

    def test_last_page_full_when_evenly_divisible(self, events):
        """Last page is full when length is a multiple of page size."""
        result = paginate(events[:20], 10, 2)
        assert len(result) == 10

    def test_past_end_is_empty(self, events):
        """Page beyond page count is empty."""
        assert paginate(events, 10, 4) == []

    def test_empty_collection(self):
        """Page 1 of an empty collection is empty."""
        assert paginate([], 10, 1) == []
