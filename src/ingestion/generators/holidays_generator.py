"""US market holiday generator (NYSE/NASDAQ).

Every date is computed, so the calendar never needs a table update:

    - Fixed-date holidays (New Year's Day, Juneteenth, Independence Day,
      Christmas) are observed on Friday when they fall on a Saturday and on
      Monday when they fall on a Sunday
    - MLK Jr. Day and Presidents' Day: third Monday of January / February
    - Good Friday: two days before Easter Sunday
    - Memorial Day: last Monday of May
    - Labor Day: first Monday of September
    - Thanksgiving: fourth Thursday of November

Markets close early (1:00 PM ET) the day after Thanksgiving, and on July 3
and December 24 when those fall on a weekday that is not itself a closure.
Full closures are stamped at New York midnight.
"""

from datetime import date, timedelta
from typing import Callable, Iterable

from src.ingestion.generators.base_generator import BaseGenerator, Release
from src.ingestion.generators.date_rules import (
    MONDAY,
    THURSDAY,
    easter_sunday,
    is_weekend,
    last_weekday,
    nth_weekday,
    observed_holiday,
)
from src.pipelines.calendar.schema import EconomicEvent

NYSE_HOURS_URL = "https://www.nyse.com/markets/hours-calendars"

EARLY_CLOSE = Release("Early Close (1:00 PM ET)", "13:00", "holiday", "holiday", NYSE_HOURS_URL)

# (name, year -> closure day)
MARKET_HOLIDAYS: tuple[tuple[str, Callable[[int], date]], ...] = (
    ("New Year's Day", lambda y: observed_holiday(date(y, 1, 1))),
    ("MLK Jr. Day", lambda y: nth_weekday(y, 1, MONDAY, 3)),
    ("Presidents' Day", lambda y: nth_weekday(y, 2, MONDAY, 3)),
    ("Good Friday", lambda y: easter_sunday(y) - timedelta(days=2)),
    ("Memorial Day", lambda y: last_weekday(y, 5, MONDAY)),
    ("Juneteenth", lambda y: observed_holiday(date(y, 6, 19))),
    ("Independence Day", lambda y: observed_holiday(date(y, 7, 4))),
    ("Labor Day", lambda y: nth_weekday(y, 9, MONDAY, 1)),
    ("Thanksgiving Day", lambda y: nth_weekday(y, 11, THURSDAY, 4)),
    ("Christmas Day", lambda y: observed_holiday(date(y, 12, 25))),
)


def closure_release(name: str) -> Release:
    return Release(f"{name} (Market Closed)", "00:00", "holiday", "holiday", NYSE_HOURS_URL)


def market_closures(year: int) -> list[tuple[date, str]]:
    """(closure day, holiday name) for every full closure of ``year``.

    A New Year's Day that falls on a Saturday is not observed: the Friday
    before belongs to the previous year and the market stays open.

    Example:
        >>> market_closures(2025)[3]
        (datetime.date(2025, 4, 18), 'Good Friday')
    """
    closures = [(rule(year), name) for name, rule in MARKET_HOLIDAYS]
    return [(day, name) for day, name in closures if day.year == year]


def early_closes(year: int) -> list[date]:
    """Half-day sessions of ``year``; days that are full closures are skipped."""
    closed = {day for day, _ in market_closures(year)}
    candidates = [
        nth_weekday(year, 11, THURSDAY, 4) + timedelta(days=1),
        date(year, 7, 3),
        date(year, 12, 24),
    ]
    return sorted(d for d in candidates if not is_weekend(d) and d not in closed)


class HolidayGenerator(BaseGenerator):
    """US market closures and early closes."""

    SOURCE_NAME = "holidays"
    CURRENCY = "USD"
    COUNTRY = "US"
    TIMEZONE = "America/New_York"

    LOOKBACK_MONTHS = 3
    LOOKAHEAD_MONTHS = 6

    def _candidates(self, today: date) -> Iterable[EconomicEvent]:
        for year in range(today.year - 1, today.year + 2):
            for day, name in market_closures(year):
                yield self.make_event(day, closure_release(name))
            for day in early_closes(year):
                yield self.make_event(day, EARLY_CLOSE)
