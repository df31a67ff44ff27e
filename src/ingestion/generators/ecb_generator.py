"""European Central Bank and euro-area data release generator.

Monetary policy meetings come from the ECB's published meeting calendar
(https://www.ecb.europa.eu/press/calendars/mgcgc/html/index.en.html).
Euro-area statistics follow their usual release patterns:

    - Eurostat CPI flash estimate: last business day of the month
    - Eurostat GDP: the 14th, moved off weekends
    - German ZEW sentiment: third Tuesday
    - German Ifo business climate: the 24th, moved off weekends
"""

from datetime import date, timedelta
from typing import Iterable

from src.ingestion.generators.base_generator import BaseGenerator, Release
from src.ingestion.generators.date_rules import (
    TUESDAY,
    day_of_month,
    last_business_day,
    nth_weekday,
)
from src.ingestion.generators.meetings import Meeting, last_meeting
from src.pipelines.calendar.schema import EconomicEvent

ECB_CALENDAR_URL = "https://www.ecb.europa.eu/press/calendars/mgcgc/html/index.en.html"
EUROSTAT_URL = "https://ec.europa.eu/eurostat"

MINUTES_LAG = timedelta(days=28)

RATE_DECISION = Release(
    "ECB Interest Rate Decision", "14:15", "high", "central_bank", ECB_CALENDAR_URL
)
PRESS_CONFERENCE = Release(
    "ECB Press Conference", "14:45", "high", "central_bank", ECB_CALENDAR_URL
)
MINUTES = Release("ECB Meeting Minutes", "13:30", "medium", "central_bank", ECB_CALENDAR_URL)

CPI_FLASH = Release(
    "CPI Flash Estimate y/y",
    "11:00",
    "high",
    "inflation",
    EUROSTAT_URL,
    source="eurostat",
    timezone="Europe/Luxembourg",
)
GDP = Release(
    "GDP q/q",
    "11:00",
    "medium",
    "growth",
    EUROSTAT_URL,
    source="eurostat",
    timezone="Europe/Luxembourg",
)
ZEW = Release(
    "German ZEW Economic Sentiment",
    "11:00",
    "medium",
    "sentiment",
    "https://www.zew.de",
    source="zew",
    country="DE",
)
IFO = Release(
    "German Ifo Business Climate",
    "10:00",
    "medium",
    "sentiment",
    "https://www.ifo.de",
    source="ifo",
    country="DE",
)

# Every meeting is followed by a press conference.
ECB_MEETINGS: tuple[Meeting, ...] = (
    Meeting(date(2025, 1, 30)),
    Meeting(date(2025, 3, 6)),
    Meeting(date(2025, 4, 17)),
    Meeting(date(2025, 6, 5)),
    Meeting(date(2025, 7, 17)),
    Meeting(date(2025, 9, 11)),
    Meeting(date(2025, 10, 30)),
    Meeting(date(2025, 12, 18)),
    Meeting(date(2026, 1, 22)),
    Meeting(date(2026, 3, 5)),
    Meeting(date(2026, 4, 16)),
    Meeting(date(2026, 6, 4)),
)


class ECBGenerator(BaseGenerator):
    """ECB decisions, press conferences, minutes and euro-area statistics."""

    SOURCE_NAME = "ecb"
    CURRENCY = "EUR"
    COUNTRY = "EU"
    TIMEZONE = "Europe/Berlin"

    LOOKBACK_DAYS = 7
    MONTH_OFFSETS = range(0, 4)

    def _candidates(self, today: date) -> Iterable[EconomicEvent]:
        self.check_table_horizon("ECB_MEETINGS", last_meeting(ECB_MEETINGS), today)

        for meeting in ECB_MEETINGS:
            yield self.make_event(meeting.day, RATE_DECISION)
            yield self.make_event(meeting.day, PRESS_CONFERENCE)
            yield self.make_event(meeting.day + MINUTES_LAG, MINUTES)

        for year, month in self.month_iter(today):
            yield self.make_event(last_business_day(year, month), CPI_FLASH)
            yield self.make_event(nth_weekday(year, month, TUESDAY, 3), ZEW)
            yield self.make_event(day_of_month(year, month, 24), IFO)
            yield self.make_event(day_of_month(year, month, 14), GDP)
