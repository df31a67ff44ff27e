"""Tests for FRED value enrichment of calendar events."""

from datetime import datetime
from unittest.mock import Mock

import pytest
import pytz

from src.ingestion.collectors.fred_collector import Observation
from src.ingestion.preprocessors.data_enricher import (
    EVENT_TO_SERIES,
    SeriesValues,
    enrich_events_with_data,
    refresh_snapshot_values,
    series_values,
)
from src.ingestion.preprocessors.value_formatter import UnitPolicy

OBSERVATIONS = {
    "PAYEMS": ["159000", "158800", "158500"],
    "CPIAUCSL": ["317.6", "316.4", "315.6"],
    "UNRATE": ["4.0", "4.1", "4.2"],
    "UMCSENT": ["71.7", "74.0", "73.2"],
}


def _observations(values):
    return [Observation(date=f"2025-0{i + 1}-01", value=v) for i, v in enumerate(values)]


@pytest.fixture
def collector():
    """Collector serving canned observations; unknown series raise."""
    mock = Mock()

    def get_latest_observations(series_id, count=3):
        if series_id not in OBSERVATIONS:
            raise ValueError(f"Invalid FRED series ID '{series_id}'")
        return _observations(OBSERVATIONS[series_id])[:count]

    mock.get_latest_observations.side_effect = get_latest_observations
    return mock


class TestSeriesValues:
    """Test latest/prior derivation."""

    def test_change_series(self):
        values = series_values(_observations(OBSERVATIONS["PAYEMS"]), UnitPolicy("change", "K"))
        assert values == SeriesValues(latest="+200K", prior="+300K")

    def test_pct_change_series(self):
        observations = _observations(OBSERVATIONS["CPIAUCSL"])
        values = series_values(observations, UnitPolicy("pct_change", "%"))
        assert values == SeriesValues(latest="+0.4%", prior="+0.3%")

    def test_level_series_needs_two_observations(self):
        values = series_values(_observations(["4.0", "4.1"]), UnitPolicy("level", "%"))
        assert values == SeriesValues(latest="4.0%", prior="4.1%")

    def test_change_series_without_third_observation(self):
        values = series_values(_observations(["159000", "158800"]), UnitPolicy("change", "K"))
        assert values == SeriesValues(latest="+200K", prior=None)

    def test_single_observation(self):
        values = series_values(_observations(["159000"]), UnitPolicy("change", "K"))
        assert values == SeriesValues(latest=None, prior=None)

    def test_no_observations(self):
        assert series_values([], UnitPolicy()) is None


class TestEventMapping:
    """Test the title to series table."""

    def test_payrolls_mapping(self):
        series_id, policy = EVENT_TO_SERIES["Non-Farm Payrolls"]
        assert series_id == "PAYEMS"
        assert policy == UnitPolicy("change", "K")

    def test_sentiment_readings_share_series(self):
        assert (
            EVENT_TO_SERIES["UoM Consumer Sentiment (Preliminary)"][0]
            == EVENT_TO_SERIES["UoM Consumer Sentiment (Final)"][0]
        )


class TestEnrichEventsWithData:
    """Test event enrichment."""

    def test_released_and_upcoming_events(self, sample_events, collector, reference):
        enriched = enrich_events_with_data(sample_events, collector, reference)

        payrolls = enriched[0]
        assert payrolls.date < reference.date().isoformat()
        assert payrolls.actual == "+200K"
        assert payrolls.previous == "+300K"

        cpi = enriched[1]
        assert cpi.date > reference.date().isoformat()
        assert cpi.actual is None
        assert cpi.previous == "+0.4%"

    def test_release_day_counts_as_released(self, event_factory, collector):
        event = event_factory(date="2025-02-12")
        [enriched] = enrich_events_with_data(
            [event], collector, datetime(2025, 2, 12, 23, 0, tzinfo=pytz.UTC)
        )
        assert enriched.actual == "+0.4%"
        assert enriched.previous == "+0.3%"

    def test_non_usd_events_untouched(self, event_factory, collector, reference):
        aud = event_factory(
            currency="AUD", title="Unemployment Rate", date="2025-02-20", source="abs"
        )
        assert enrich_events_with_data([aud], collector, reference) == [aud]
        collector.get_latest_observations.assert_not_called()

    def test_unmapped_events_untouched(self, sample_events, collector, reference):
        enriched = enrich_events_with_data(sample_events, collector, reference)
        assert enriched[2] is sample_events[2]
        assert enriched[3] is sample_events[3]

    def test_forecast_preserved(self, event_factory, collector, reference):
        event = event_factory(forecast="+0.3%")
        [enriched] = enrich_events_with_data([event], collector, reference)
        assert enriched.forecast == "+0.3%"

    def test_each_series_fetched_once(self, event_factory, collector, reference):
        events = [
            event_factory(date="2025-02-14", title="UoM Consumer Sentiment (Preliminary)"),
            event_factory(date="2025-02-28", title="UoM Consumer Sentiment (Final)"),
            event_factory(date="2025-03-14", title="UoM Consumer Sentiment (Preliminary)"),
        ]
        enriched = enrich_events_with_data(events, collector, reference)

        assert collector.get_latest_observations.call_count == 1
        assert [e.previous for e in enriched] == ["71.7", "71.7", "71.7"]

    def test_fetch_failure_skips_series(self, event_factory, collector, reference, caplog):
        events = [
            event_factory(date="2025-02-07", title="Non-Farm Payrolls"),
            event_factory(date="2025-02-19", title="Housing Starts", category="housing"),
        ]
        enriched = enrich_events_with_data(events, collector, reference)

        assert enriched[0].actual == "+200K"
        assert enriched[1] == events[1]
        assert "Failed to fetch HOUST" in caplog.text

    def test_input_not_modified(self, sample_events, collector, reference):
        before = list(sample_events)
        enrich_events_with_data(sample_events, collector, reference)
        assert sample_events == before
        assert sample_events[0].actual is None


class TestRefreshSnapshotValues:
    """Test data-only refresh of a stored snapshot."""

    def test_refresh_keeps_dates_and_stamps(self, sample_snapshot, collector):
        refreshed_at = datetime(2025, 2, 13, 6, 0, tzinfo=pytz.UTC)
        refreshed = refresh_snapshot_values(sample_snapshot, collector, refreshed_at)

        assert [e.key for e in refreshed.events] == [e.key for e in sample_snapshot.events]
        assert refreshed.date_range == sample_snapshot.date_range
        assert refreshed.sources == sample_snapshot.sources
        assert refreshed.last_updated == refreshed_at.isoformat()
        assert refreshed.data_included is True
        # CPI on 2025-02-12 has now been released
        assert refreshed.events[1].actual == "+0.4%"
