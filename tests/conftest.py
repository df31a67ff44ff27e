"""Shared pytest fixtures."""

from datetime import datetime

import pytest
import pytz

from src.pipelines.calendar.schema import CalendarSnapshot, EconomicEvent
from src.storage.snapshot_store import JsonSnapshotStore

REFERENCE = datetime(2025, 2, 10, 12, 0, tzinfo=pytz.UTC)


def make_event(**overrides) -> EconomicEvent:
    """Build an event with sensible defaults; keywords override fields."""
    fields = {
        "date": "2025-02-12",
        "time": "13:30",
        "currency": "USD",
        "title": "CPI m/m",
        "impact": "high",
        "category": "inflation",
        "country": "US",
        "source": "bls",
        "source_url": "https://www.bls.gov/schedule/news_release/cpi.htm",
    }
    fields.update(overrides)
    return EconomicEvent(**fields)


@pytest.fixture
def event_factory():
    return make_event


@pytest.fixture
def reference() -> datetime:
    return REFERENCE


@pytest.fixture
def sample_events() -> list[EconomicEvent]:
    """Small, already sorted event set spanning three currencies."""
    return [
        make_event(
            date="2025-02-07",
            time="13:30",
            title="Non-Farm Payrolls",
            category="employment",
        ),
        make_event(date="2025-02-12", time="13:30"),
        make_event(
            date="2025-02-18",
            time="03:30",
            currency="AUD",
            title="RBA Interest Rate Decision",
            category="central_bank",
            country="AU",
            source="rba",
            source_url="https://www.rba.gov.au/monetary-policy/",
        ),
        make_event(
            date="2025-02-20",
            time="12:00",
            currency="GBP",
            title="Retail Sales m/m",
            impact="medium",
            category="consumer",
            country="UK",
            source="ons",
            source_url="https://www.ons.gov.uk",
        ),
    ]


@pytest.fixture
def sample_snapshot(sample_events) -> CalendarSnapshot:
    return CalendarSnapshot.build(
        sample_events,
        completed_at=REFERENCE,
        sources=["rba", "bls", "boe"],
    )


@pytest.fixture
def store(tmp_path) -> JsonSnapshotStore:
    return JsonSnapshotStore(tmp_path / "calendar-data.json", mirror_paths=())
