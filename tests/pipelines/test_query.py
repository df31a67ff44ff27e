"""Tests for the calendar query service."""

from datetime import date, datetime

import pytest
import pytz

from src.pipelines.calendar.query import CalendarFilters, query_calendar
from src.pipelines.calendar.schema import CalendarSnapshot


class TestCalendarFilters:
    """Test filter matching."""

    def test_no_filters_match_everything(self, sample_events):
        assert all(CalendarFilters().matches(e) for e in sample_events)

    @pytest.mark.parametrize("value", [None, "", "all", "ALL", "  "])
    def test_inactive_values(self, sample_events, value):
        filters = CalendarFilters(currency=value, impact=value, category=value)
        assert all(filters.matches(e) for e in sample_events)

    def test_currency_case_insensitive(self, event_factory):
        assert CalendarFilters(currency="usd").matches(event_factory())
        assert not CalendarFilters(currency="eur").matches(event_factory())

    def test_date_bounds_inclusive(self, event_factory):
        event = event_factory(date="2025-02-12")
        assert CalendarFilters(start="2025-02-12", end="2025-02-12").matches(event)
        assert not CalendarFilters(start="2025-02-13").matches(event)
        assert not CalendarFilters(end="2025-02-11").matches(event)


class TestQueryCalendar:
    """Test snapshot queries."""

    def test_unfiltered(self, sample_snapshot):
        result = query_calendar(sample_snapshot)

        assert result.events == sample_snapshot.events
        assert result.total_events == 4
        assert result.is_real_data is True
        assert result.last_updated == sample_snapshot.last_updated

    def test_currency_filter(self, sample_snapshot):
        result = query_calendar(sample_snapshot, CalendarFilters(currency="USD"))
        assert [e.title for e in result.events] == ["Non-Farm Payrolls", "CPI m/m"]

    def test_rba_decision_by_currency(self, sample_snapshot):
        aud = query_calendar(sample_snapshot, CalendarFilters(currency="AUD"))
        usd = query_calendar(sample_snapshot, CalendarFilters(currency="USD"))

        assert [(e.date, e.time, e.title) for e in aud.events] == [
            ("2025-02-18", "03:30", "RBA Interest Rate Decision")
        ]
        assert all(e.title != "RBA Interest Rate Decision" for e in usd.events)

    def test_impact_and_category_filters(self, sample_snapshot):
        assert query_calendar(sample_snapshot, CalendarFilters(impact="medium")).total_events == 1
        result = query_calendar(sample_snapshot, CalendarFilters(category="central_bank"))
        assert [e.source for e in result.events] == ["rba"]

    def test_combined_filters(self, sample_snapshot):
        filters = CalendarFilters(currency="USD", impact="high", start="2025-02-10")
        result = query_calendar(sample_snapshot, filters)
        assert [e.date for e in result.events] == ["2025-02-12"]

    def test_date_range_is_snapshot_range(self, sample_snapshot):
        result = query_calendar(sample_snapshot, CalendarFilters(currency="GBP"))
        assert result.total_events == 1
        assert result.date_range == sample_snapshot.date_range

    def test_no_matches(self, sample_snapshot):
        result = query_calendar(sample_snapshot, CalendarFilters(currency="JPY"))
        assert result.events == ()
        assert result.is_real_data is True

    def test_order_preserved(self, sample_snapshot):
        result = query_calendar(sample_snapshot, CalendarFilters(impact="high"))
        keys = [(e.date, e.time) for e in result.events]
        assert keys == sorted(keys)


class TestEmptySnapshot:
    """Queries before any aggregation has run."""

    def test_missing_snapshot(self):
        result = query_calendar(None, today=date(2025, 2, 10))

        assert result.events == ()
        assert result.is_real_data is False
        assert result.date_range.start == result.date_range.end == "2025-02-10"
        assert datetime.fromisoformat(result.last_updated).tzinfo is not None

    def test_snapshot_without_events(self):
        completed = datetime(2025, 2, 9, 6, 0, tzinfo=pytz.UTC)
        snapshot = CalendarSnapshot.build([], completed_at=completed)

        result = query_calendar(snapshot, today=date(2025, 2, 10))
        assert result.is_real_data is False
        assert result.last_updated == completed.isoformat()
        assert result.date_range.start == "2025-02-10"


class TestQueryResultToDict:
    """Test the response payload layout."""

    def test_layout(self, sample_snapshot):
        payload = query_calendar(sample_snapshot, CalendarFilters(currency="AUD")).to_dict()

        assert set(payload) == {"events", "lastUpdated", "isRealData", "meta"}
        assert payload["meta"] == {
            "totalEvents": 1,
            "dateRange": {"start": "2025-02-07", "end": "2025-02-20"},
        }
        assert payload["events"][0]["sourceUrl"] == "https://www.rba.gov.au/monetary-policy/"
