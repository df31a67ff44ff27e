"""
Calendar Query Service
Read-only filtering of a stored snapshot.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

import pytz

from src.pipelines.calendar.schema import CalendarSnapshot, DateRange, EconomicEvent
from src.shared.utils import utc_today

WILDCARD = "all"


@dataclass(frozen=True)
class CalendarFilters:
    """Optional filters. None, "" and "all" disable a filter."""

    currency: str | None = None
    impact: str | None = None
    category: str | None = None
    start: str | None = None
    end: str | None = None

    def matches(self, event: EconomicEvent) -> bool:
        currency = _active(self.currency)
        if currency is not None and event.currency != currency.upper():
            return False

        impact = _active(self.impact)
        if impact is not None and event.impact != impact:
            return False

        category = _active(self.category)
        if category is not None and event.category != category:
            return False

        start = _active(self.start)
        if start is not None and event.date < start:
            return False

        end = _active(self.end)
        if end is not None and event.date > end:
            return False

        return True


@dataclass(frozen=True)
class CalendarQueryResult:
    events: tuple[EconomicEvent, ...]
    last_updated: str
    is_real_data: bool
    date_range: DateRange

    @property
    def total_events(self) -> int:
        return len(self.events)

    def to_dict(self) -> dict[str, Any]:
        return {
            "events": [e.to_dict() for e in self.events],
            "lastUpdated": self.last_updated,
            "isRealData": self.is_real_data,
            "meta": {
                "totalEvents": self.total_events,
                "dateRange": self.date_range.to_dict(),
            },
        }


def query_calendar(
    snapshot: CalendarSnapshot | None,
    filters: CalendarFilters | None = None,
    today: date | None = None,
) -> CalendarQueryResult:
    """
    Filter a snapshot.

    Parameters:
        snapshot: stored snapshot, or None when nothing has been written yet
        filters: CalendarFilters (defaults to no filtering)
        today: day used for the empty result (defaults to the UTC date)

    Returns:
        CalendarQueryResult. meta.dateRange is the snapshot's full range,
        not the range of the filtered events. A missing or empty snapshot
        gives an empty result dated today with is_real_data=False.
    """
    filters = filters or CalendarFilters()

    if snapshot is None or not snapshot.events:
        day = (today or utc_today()).isoformat()
        last_updated = snapshot.last_updated if snapshot is not None else None
        return CalendarQueryResult(
            events=(),
            last_updated=last_updated or datetime.now(pytz.UTC).isoformat(),
            is_real_data=False,
            date_range=DateRange(start=day, end=day),
        )

    events = tuple(e for e in snapshot.events if filters.matches(e))
    return CalendarQueryResult(
        events=events,
        last_updated=snapshot.last_updated,
        is_real_data=True,
        date_range=snapshot.date_range,
    )


def _active(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    if not value or value.lower() == WILDCARD:
        return None
    return value
