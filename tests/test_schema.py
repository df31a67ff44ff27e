"""Tests for calendar schema types."""

from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest
import pytz

from src.pipelines.calendar.schema import (
    EVENT_COLUMNS,
    CalendarSnapshot,
    EconomicEvent,
    GeneratorResult,
)


class TestEconomicEvent:
    """Test event type."""

    def test_frozen(self, event_factory):
        event = event_factory()
        with pytest.raises(FrozenInstanceError):
            event.title = "Changed"  # type: ignore[misc]

    def test_key_and_day(self, event_factory):
        event = event_factory()
        assert event.key == ("2025-02-12", "CPI m/m")
        assert event.day.isoformat() == "2025-02-12"

    def test_with_values(self, event_factory):
        event = event_factory()
        updated = event.with_values(actual="+0.4%", previous="+0.3%")
        assert (updated.actual, updated.previous, updated.forecast) == ("+0.4%", "+0.3%", None)
        assert event.actual is None

    def test_to_dict_camel_case(self, event_factory):
        data = event_factory(why_it_matters="Moves rates", related_assets=("USD",)).to_dict()

        assert data["sourceUrl"].startswith("https://www.bls.gov")
        assert data["whyItMatters"] == "Moves rates"
        assert data["relatedAssets"] == ["USD"]
        assert "description" not in data
        assert data["forecast"] is None and data["previous"] is None and data["actual"] is None

    def test_from_dict(self, event_factory):
        event = event_factory(
            typical_reaction={"hawkish": "USD bullish", "dovish": "USD bearish"},
            related_assets=("USD", "Gold"),
            actual="+0.4%",
        )
        assert EconomicEvent.from_dict(event.to_dict()) == event


class TestGeneratorResult:
    """Test generator result helpers."""

    def test_success(self, event_factory):
        result = GeneratorResult.success("bls", [event_factory()])
        assert result.ok
        assert isinstance(result.events, tuple)

    def test_failure(self):
        result = GeneratorResult.failure("fed", "Timeout: slow")
        assert not result.ok
        assert result.events == ()
        assert result.error == "Timeout: slow"


class TestCalendarSnapshot:
    """Test snapshot construction and serialization."""

    def test_build(self, sample_snapshot, reference):
        assert sample_snapshot.last_updated == reference.isoformat()
        assert sample_snapshot.date_range.start == "2025-02-07"
        assert sample_snapshot.date_range.end == "2025-02-20"
        assert sample_snapshot.version == "2.0"

    def test_build_empty_uses_completion_day(self):
        snapshot = CalendarSnapshot.build([], completed_at=datetime(2025, 3, 1, tzinfo=pytz.UTC))
        assert snapshot.date_range.start == snapshot.date_range.end == "2025-03-01"

    def test_from_dict_round_trip(self, sample_snapshot):
        assert CalendarSnapshot.from_dict(sample_snapshot.to_dict()) == sample_snapshot

    def test_from_dict_without_range(self, sample_snapshot):
        data = sample_snapshot.to_dict()
        del data["dateRange"]
        restored = CalendarSnapshot.from_dict(data)
        assert restored.date_range == sample_snapshot.date_range

    def test_to_dataframe(self, sample_snapshot):
        df = sample_snapshot.to_dataframe()
        assert list(df.columns) == EVENT_COLUMNS
        assert len(df) == 4
        assert df.loc[2, "source"] == "rba"

    def test_to_dataframe_empty(self, reference):
        df = CalendarSnapshot.build([], completed_at=reference).to_dataframe()
        assert df.empty
        assert list(df.columns) == EVENT_COLUMNS
