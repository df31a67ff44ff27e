"""
Calendar Schema
EconomicEvent, CalendarSnapshot and the per-generator result type.

Events serialize to the camelCase JSON layout consumed by the web client:

    {"date": "2025-02-18", "time": "03:30", "currency": "AUD",
     "title": "RBA Interest Rate Decision", "impact": "high",
     "category": "central_bank", "country": "AU", "source": "rba",
     "sourceUrl": "https://www.rba.gov.au/monetary-policy/",
     "forecast": null, "previous": null, "actual": null}
"""

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Any

import pandas as pd

SNAPSHOT_VERSION = "2.0"

IMPACT_TIERS = ("high", "medium", "low", "holiday")

CATEGORIES = (
    "employment",
    "inflation",
    "central_bank",
    "housing",
    "manufacturing",
    "trade",
    "growth",
    "sentiment",
    "bonds",
    "fiscal",
    "consumer",
    "services",
    "energy",
    "holiday",
)

# Optional descriptive fields: python attribute -> JSON key
ENRICHMENT_FIELDS: dict[str, str] = {
    "description": "description",
    "why_it_matters": "whyItMatters",
    "frequency": "frequency",
    "typical_reaction": "typicalReaction",
    "related_assets": "relatedAssets",
    "historical_volatility": "historicalVolatility",
}

EVENT_COLUMNS = [
    "date",
    "time",
    "currency",
    "title",
    "impact",
    "category",
    "country",
    "source",
    "source_url",
    "forecast",
    "previous",
    "actual",
]


# -------------------------------------------------------------------
# Event
# -------------------------------------------------------------------


@dataclass(frozen=True)
class EconomicEvent:
    """One scheduled release.

    ``date`` is the release day in the issuing institution's local calendar,
    ``time`` the release wall-clock time in UTC.
    """

    date: str
    time: str
    currency: str
    title: str
    impact: str
    category: str
    country: str
    source: str
    source_url: str
    description: str | None = None
    why_it_matters: str | None = None
    frequency: str | None = None
    typical_reaction: dict[str, str] | None = field(default=None, hash=False, compare=True)
    related_assets: tuple[str, ...] | None = None
    historical_volatility: str | None = None
    forecast: str | None = None
    previous: str | None = None
    actual: str | None = None

    @property
    def key(self) -> tuple[str, str]:
        """Natural within-source dedupe key."""
        return (self.date, self.title)

    @property
    def day(self) -> date:
        return date.fromisoformat(self.date)

    def with_values(
        self,
        actual: str | None = None,
        previous: str | None = None,
        forecast: str | None = None,
    ) -> "EconomicEvent":
        """Return a copy carrying new data values."""
        return replace(self, actual=actual, previous=previous, forecast=forecast)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "date": self.date,
            "time": self.time,
            "currency": self.currency,
            "title": self.title,
            "impact": self.impact,
            "category": self.category,
            "country": self.country,
            "source": self.source,
            "sourceUrl": self.source_url,
        }
        for attr, key in ENRICHMENT_FIELDS.items():
            value = getattr(self, attr)
            if value is None:
                continue
            data[key] = list(value) if attr == "related_assets" else value
        data["forecast"] = self.forecast
        data["previous"] = self.previous
        data["actual"] = self.actual
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EconomicEvent":
        related = data.get("relatedAssets")
        return cls(
            date=data["date"],
            time=data.get("time", ""),
            currency=data.get("currency", ""),
            title=data["title"],
            impact=data.get("impact", ""),
            category=data.get("category", ""),
            country=data.get("country", ""),
            source=data.get("source", ""),
            source_url=data.get("sourceUrl", ""),
            description=data.get("description"),
            why_it_matters=data.get("whyItMatters"),
            frequency=data.get("frequency"),
            typical_reaction=data.get("typicalReaction"),
            related_assets=tuple(related) if related is not None else None,
            historical_volatility=data.get("historicalVolatility"),
            forecast=data.get("forecast"),
            previous=data.get("previous"),
            actual=data.get("actual"),
        )


# -------------------------------------------------------------------
# Generator result
# -------------------------------------------------------------------


@dataclass(frozen=True)
class GeneratorResult:
    """Outcome of one generator run: events on success, a reason on failure."""

    source: str
    events: tuple[EconomicEvent, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, source: str, events) -> "GeneratorResult":
        return cls(source=source, events=tuple(events))

    @classmethod
    def failure(cls, source: str, reason: str) -> "GeneratorResult":
        return cls(source=source, events=(), error=reason)


# -------------------------------------------------------------------
# Snapshot
# -------------------------------------------------------------------


@dataclass(frozen=True)
class DateRange:
    start: str
    end: str

    def to_dict(self) -> dict[str, str]:
        return {"start": self.start, "end": self.end}


@dataclass(frozen=True)
class CalendarSnapshot:
    """One complete aggregation result. Replaced wholesale on every run."""

    last_updated: str
    events: tuple[EconomicEvent, ...]
    date_range: DateRange
    sources: tuple[str, ...] = ()
    data_included: bool = False
    version: str = SNAPSHOT_VERSION

    @classmethod
    def build(
        cls,
        events,
        completed_at: datetime,
        sources=(),
        data_included: bool = False,
    ) -> "CalendarSnapshot":
        """Stamp a snapshot from already sorted events.

        Both range bounds fall back to the UTC day of ``completed_at`` when
        there are no events.
        """
        events = tuple(events)
        if events:
            dates = [e.date for e in events]
            date_range = DateRange(start=min(dates), end=max(dates))
        else:
            today = completed_at.date().isoformat()
            date_range = DateRange(start=today, end=today)
        return cls(
            last_updated=completed_at.isoformat(),
            events=events,
            date_range=date_range,
            sources=tuple(sources),
            data_included=data_included,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "lastUpdated": self.last_updated,
            "version": self.version,
            "sources": list(self.sources),
            "dataIncluded": self.data_included,
            "dateRange": self.date_range.to_dict(),
            "events": [e.to_dict() for e in self.events],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CalendarSnapshot":
        events = tuple(EconomicEvent.from_dict(e) for e in data.get("events", []))
        raw_range = data.get("dateRange") or {}
        if raw_range.get("start") and raw_range.get("end"):
            date_range = DateRange(start=raw_range["start"], end=raw_range["end"])
        elif events:
            dates = [e.date for e in events]
            date_range = DateRange(start=min(dates), end=max(dates))
        else:
            today = str(data.get("lastUpdated", ""))[:10]
            date_range = DateRange(start=today, end=today)
        return cls(
            last_updated=data.get("lastUpdated", ""),
            events=events,
            date_range=date_range,
            sources=tuple(data.get("sources", [])),
            data_included=bool(data.get("dataIncluded", False)),
            version=data.get("version", SNAPSHOT_VERSION),
        )

    def to_dataframe(self) -> pd.DataFrame:
        """Flatten the events into a DataFrame (one row per event)."""
        rows = [{col: getattr(e, col) for col in EVENT_COLUMNS} for e in self.events]
        return pd.DataFrame(rows, columns=EVENT_COLUMNS)
