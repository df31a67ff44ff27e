"""Federal Reserve events outside the FOMC meeting cycle.

Covers the Jackson Hole symposium, the Chair's semi-annual testimony to
Congress and the Beige Book. Testimony and Beige Book dates exist only as
published tables; Jackson Hole falls back to the Thursday on or after
August 20 once its table runs out. Events are tagged with source "fed" so
they group with the FOMC schedule.
"""

from datetime import date, timedelta
from typing import Iterable

from src.ingestion.generators.base_generator import BaseGenerator, Release
from src.ingestion.generators.date_rules import THURSDAY, next_weekday_on_or_after
from src.pipelines.calendar.schema import EconomicEvent

FED_CALENDAR_URL = "https://www.federalreserve.gov/newsevents/calendar.htm"

SYMPOSIUM_START = Release(
    "Jackson Hole Symposium Begins",
    "08:00",
    "medium",
    "central_bank",
    FED_CALENDAR_URL,
    source="fed",
    timezone="America/Denver",
)
CHAIR_KEYNOTE = Release(
    "Fed Chair Speaks at Jackson Hole",
    "10:00",
    "high",
    "central_bank",
    FED_CALENDAR_URL,
    source="fed",
    timezone="America/Denver",
)
BEIGE_BOOK = Release(
    "Fed Beige Book", "14:00", "medium", "central_bank", FED_CALENDAR_URL, source="fed"
)


def testimony_release(chamber: str) -> Release:
    return Release(
        f"Fed Chair Testifies ({chamber})",
        "10:00",
        "high",
        "central_bank",
        FED_CALENDAR_URL,
        source="fed",
    )


# Opening day of the symposium; the Chair's keynote is the next morning.
JACKSON_HOLE_DATES: dict[int, date] = {
    2024: date(2024, 8, 22),
    2025: date(2025, 8, 21),
    2026: date(2026, 8, 20),
}

# Semi-annual Monetary Policy Report testimony.
TESTIMONY_DATES: tuple[tuple[date, str], ...] = (
    (date(2024, 3, 6), "House"),
    (date(2024, 3, 7), "Senate"),
    (date(2024, 7, 9), "Senate"),
    (date(2024, 7, 10), "House"),
    (date(2025, 2, 11), "Senate"),
    (date(2025, 2, 12), "House"),
    (date(2025, 7, 15), "Senate"),
    (date(2025, 7, 16), "House"),
    (date(2026, 2, 10), "Senate"),
    (date(2026, 2, 11), "House"),
    (date(2026, 7, 14), "Senate"),
    (date(2026, 7, 15), "House"),
)

# Released two weeks before each FOMC meeting.
BEIGE_BOOK_DATES: tuple[date, ...] = (
    date(2024, 1, 17),
    date(2024, 3, 6),
    date(2024, 4, 17),
    date(2024, 5, 29),
    date(2024, 7, 17),
    date(2024, 9, 4),
    date(2024, 10, 23),
    date(2024, 12, 4),
    date(2025, 1, 15),
    date(2025, 3, 5),
    date(2025, 4, 23),
    date(2025, 6, 4),
    date(2025, 7, 16),
    date(2025, 9, 3),
    date(2025, 10, 22),
    date(2025, 12, 3),
    date(2026, 1, 14),
    date(2026, 3, 4),
    date(2026, 4, 22),
    date(2026, 6, 3),
    date(2026, 7, 15),
    date(2026, 9, 2),
    date(2026, 10, 21),
    date(2026, 12, 2),
)

SYMPOSIUM_METADATA = {
    "description": "Annual Federal Reserve economic policy symposium in Jackson Hole, Wyoming.",
    "frequency": "Annual (late August)",
}
KEYNOTE_METADATA = {
    "description": (
        "The Fed Chair's keynote at Jackson Hole, historically used to signal major policy shifts."
    ),
    "frequency": "Annual (late August)",
    "typical_reaction": {
        "hawkish": "USD bullish, stocks bearish, bonds bearish",
        "dovish": "USD bearish, stocks bullish, bonds bullish",
    },
}
TESTIMONY_FREQUENCY = "Semi-annual (Feb and Jul)"
TESTIMONY_REACTION = {
    "hawkish": "USD bullish, stocks bearish",
    "dovish": "USD bearish, stocks bullish",
}


def symposium_start(year: int) -> date:
    """Opening day of the Jackson Hole symposium.

    Example:
        >>> symposium_start(2027)
        datetime.date(2027, 8, 19)
    """
    known = JACKSON_HOLE_DATES.get(year)
    if known is not None:
        return known
    return next_weekday_on_or_after(date(year, 8, 20), THURSDAY)


class FedEventsGenerator(BaseGenerator):
    """Jackson Hole, Congressional testimony and the Beige Book."""

    SOURCE_NAME = "fed_events"
    CURRENCY = "USD"
    COUNTRY = "US"
    TIMEZONE = "America/New_York"

    LOOKBACK_MONTHS = 3
    LOOKAHEAD_MONTHS = 6

    def _candidates(self, today: date) -> Iterable[EconomicEvent]:
        self.check_table_horizon(
            "JACKSON_HOLE_DATES",
            max(JACKSON_HOLE_DATES.values()) + timedelta(days=1),
            today,
            fallback="Thursday on or after August 20",
        )
        self.check_table_horizon("TESTIMONY_DATES", max(d for d, _ in TESTIMONY_DATES), today)
        self.check_table_horizon("BEIGE_BOOK_DATES", max(BEIGE_BOOK_DATES), today)

        for year in range(today.year - 1, today.year + 2):
            start = symposium_start(year)
            yield self.make_event(start, SYMPOSIUM_START, **SYMPOSIUM_METADATA)
            yield self.make_event(start + timedelta(days=1), CHAIR_KEYNOTE, **KEYNOTE_METADATA)

        for day, chamber in TESTIMONY_DATES:
            yield self.make_event(
                day,
                testimony_release(chamber),
                description=(
                    f"Semi-annual monetary policy testimony to the {chamber}. "
                    "Two days of Q&A on Fed policy."
                ),
                frequency=TESTIMONY_FREQUENCY,
                typical_reaction=TESTIMONY_REACTION,
            )

        for day in BEIGE_BOOK_DATES:
            yield self.make_event(day, BEIGE_BOOK)
