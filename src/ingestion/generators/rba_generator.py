"""Reserve Bank of Australia and ABS release generator.

Board decisions come from the RBA's published meeting schedule; minutes
follow two weeks later on a Tuesday. Australian Bureau of Statistics
releases follow their usual patterns:

    - Labour Force: third Thursday
    - CPI: quarterly (January, April, July, October), the 25th moved off weekends
    - Retail trade: the 4th, moved off weekends
"""

from datetime import date, timedelta
from typing import Iterable

from src.ingestion.generators.base_generator import BaseGenerator, Release
from src.ingestion.generators.date_rules import (
    THURSDAY,
    TUESDAY,
    day_of_month,
    next_weekday_on_or_after,
    nth_weekday,
)
from src.ingestion.generators.meetings import Meeting, last_meeting
from src.pipelines.calendar.schema import EconomicEvent

RBA_POLICY_URL = "https://www.rba.gov.au/monetary-policy/"
RBA_MINUTES_URL = "https://www.rba.gov.au/monetary-policy/rba-board-minutes/"
ABS_URL = "https://www.abs.gov.au"

CPI_MONTHS = (1, 4, 7, 10)
MINUTES_LAG = timedelta(days=14)

RATE_DECISION = Release(
    "RBA Interest Rate Decision", "14:30", "high", "central_bank", RBA_POLICY_URL
)
RATE_STATEMENT = Release("RBA Rate Statement", "14:30", "high", "central_bank", RBA_POLICY_URL)
MINUTES = Release("RBA Meeting Minutes", "11:30", "medium", "central_bank", RBA_MINUTES_URL)

EMPLOYMENT = Release("Employment Change", "11:30", "high", "employment", ABS_URL, source="abs")
UNEMPLOYMENT = Release("Unemployment Rate", "11:30", "high", "employment", ABS_URL, source="abs")
CPI = Release("CPI q/q", "11:30", "high", "inflation", ABS_URL, source="abs")
RETAIL_SALES = Release("Retail Sales m/m", "11:30", "medium", "consumer", ABS_URL, source="abs")

RBA_MEETINGS: tuple[Meeting, ...] = (
    Meeting(date(2025, 2, 18)),
    Meeting(date(2025, 4, 1)),
    Meeting(date(2025, 5, 20)),
    Meeting(date(2025, 7, 8)),
    Meeting(date(2025, 8, 12)),
    Meeting(date(2025, 9, 16)),
    Meeting(date(2025, 11, 4)),
    Meeting(date(2025, 12, 9)),
    Meeting(date(2026, 2, 17)),
    Meeting(date(2026, 3, 31)),
    Meeting(date(2026, 5, 5)),
    Meeting(date(2026, 6, 2)),
)


class RBAGenerator(BaseGenerator):
    """RBA decisions, statements, minutes and ABS statistics."""

    SOURCE_NAME = "rba"
    CURRENCY = "AUD"
    COUNTRY = "AU"
    TIMEZONE = "Australia/Sydney"

    LOOKBACK_DAYS = 7
    MONTH_OFFSETS = range(0, 4)

    def _candidates(self, today: date) -> Iterable[EconomicEvent]:
        self.check_table_horizon("RBA_MEETINGS", last_meeting(RBA_MEETINGS), today)

        for meeting in RBA_MEETINGS:
            yield self.make_event(meeting.day, RATE_DECISION)
            yield self.make_event(meeting.day, RATE_STATEMENT)
            minutes_day = next_weekday_on_or_after(meeting.day + MINUTES_LAG, TUESDAY)
            yield self.make_event(minutes_day, MINUTES)

        for year, month in self.month_iter(today):
            jobs_day = nth_weekday(year, month, THURSDAY, 3)
            yield self.make_event(jobs_day, EMPLOYMENT)
            yield self.make_event(jobs_day, UNEMPLOYMENT)

            if month in CPI_MONTHS:
                yield self.make_event(day_of_month(year, month, 25), CPI)

            yield self.make_event(day_of_month(year, month, 4), RETAIL_SALES)
