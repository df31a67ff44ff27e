"""Tests for snapshot validation."""

from dataclasses import replace
from datetime import datetime

import pytest
import pytz

from src.pipelines.calendar.schema import CalendarSnapshot, DateRange
from src.pipelines.calendar.validate import SnapshotValidationError, validate_snapshot

BUILT_AT = datetime(2025, 2, 10, 12, 0, tzinfo=pytz.UTC)


def _snapshot(events):
    return CalendarSnapshot.build(events, completed_at=BUILT_AT)


class TestValidateSnapshot:
    """Test structural checks."""

    def test_valid_snapshot(self, sample_snapshot):
        validate_snapshot(sample_snapshot)

    def test_empty_snapshot(self):
        validate_snapshot(_snapshot([]))

    def test_malformed_date(self, event_factory):
        with pytest.raises(SnapshotValidationError, match="Malformed dates"):
            validate_snapshot(_snapshot([event_factory(date="2025-2-12")]))

    def test_impossible_date(self, event_factory):
        with pytest.raises(SnapshotValidationError, match="Invalid calendar dates"):
            validate_snapshot(_snapshot([event_factory(date="2025-02-30")]))

    def test_malformed_time(self, event_factory):
        with pytest.raises(SnapshotValidationError, match="Malformed times"):
            validate_snapshot(_snapshot([event_factory(time="24:00")]))

    def test_unknown_impact(self, event_factory):
        with pytest.raises(SnapshotValidationError, match="Unknown impact tiers"):
            validate_snapshot(_snapshot([event_factory(impact="critical")]))

    def test_unsorted(self, event_factory):
        events = [event_factory(time="15:00", title="B"), event_factory(time="13:30")]
        with pytest.raises(SnapshotValidationError, match="not sorted"):
            validate_snapshot(_snapshot(events))

    def test_duplicate_within_source(self, event_factory):
        events = [event_factory(), event_factory()]
        with pytest.raises(SnapshotValidationError, match="Duplicate"):
            validate_snapshot(_snapshot(events))

    def test_cross_source_duplicate_allowed(self, event_factory):
        validate_snapshot(_snapshot([event_factory(), event_factory(source="census")]))

    def test_date_range_mismatch(self, sample_snapshot):
        broken = replace(sample_snapshot, date_range=DateRange("2025-01-01", "2025-02-20"))
        with pytest.raises(SnapshotValidationError, match="dateRange"):
            validate_snapshot(broken)

    def test_is_value_error(self):
        assert issubclass(SnapshotValidationError, ValueError)
