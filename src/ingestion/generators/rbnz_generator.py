"""Reserve Bank of New Zealand and Stats NZ release generator.

OCR reviews come from the RBNZ schedule; Monetary Policy Statement
meetings add the statement itself and a press conference. Stats NZ
releases are mostly quarterly and only emitted in their target months:

    - Labour market (February, May, August, November): first Wednesday on or after the 5th
    - CPI (January, April, July, October): the 18th, moved off weekends
    - GDP (March, June, September, December): the 19th, moved off weekends
    - Overseas merchandise trade (monthly): the 26th, moved off weekends

Global Dairy Trade auctions run on the first Tuesday and two weeks later.
"""

from datetime import date, timedelta
from typing import Iterable

from src.ingestion.generators.base_generator import BaseGenerator, Release
from src.ingestion.generators.date_rules import (
    TUESDAY,
    WEDNESDAY,
    day_of_month,
    first_weekday_on_or_after,
    nth_weekday,
)
from src.ingestion.generators.meetings import Meeting, last_meeting
from src.pipelines.calendar.schema import EconomicEvent

RBNZ_POLICY_URL = "https://www.rbnz.govt.nz/monetary-policy/"
STATSNZ_URL = "https://www.stats.govt.nz"

EMPLOYMENT_MONTHS = (2, 5, 8, 11)
CPI_MONTHS = (1, 4, 7, 10)
GDP_MONTHS = (3, 6, 9, 12)

RATE_DECISION = Release(
    "RBNZ Interest Rate Decision", "14:00", "high", "central_bank", RBNZ_POLICY_URL
)
RATE_STATEMENT = Release("RBNZ Rate Statement", "14:00", "high", "central_bank", RBNZ_POLICY_URL)
POLICY_STATEMENT = Release(
    "RBNZ Monetary Policy Statement", "14:00", "high", "central_bank", RBNZ_POLICY_URL
)
PRESS_CONFERENCE = Release(
    "RBNZ Press Conference", "15:00", "high", "central_bank", RBNZ_POLICY_URL
)

EMPLOYMENT = Release(
    "Employment Change q/q", "10:45", "high", "employment", STATSNZ_URL, source="statsnz"
)
UNEMPLOYMENT = Release(
    "Unemployment Rate", "10:45", "high", "employment", STATSNZ_URL, source="statsnz"
)
CPI = Release("CPI q/q", "10:45", "high", "inflation", STATSNZ_URL, source="statsnz")
GDP = Release("GDP q/q", "10:45", "high", "growth", STATSNZ_URL, source="statsnz")
TRADE_BALANCE = Release("Trade Balance", "10:45", "low", "trade", STATSNZ_URL, source="statsnz")
GDT_AUCTION = Release(
    "GDT Price Index",
    "14:00",
    "low",
    "trade",
    "https://www.globaldairytrade.info",
    source="gdt",
    timezone="UTC",
)

# with_report marks the Monetary Policy Statement meetings.
RBNZ_MEETINGS: tuple[Meeting, ...] = (
    Meeting(date(2025, 2, 19), with_report=True),
    Meeting(date(2025, 4, 9)),
    Meeting(date(2025, 5, 28), with_report=True),
    Meeting(date(2025, 7, 9)),
    Meeting(date(2025, 8, 20), with_report=True),
    Meeting(date(2025, 10, 8)),
    Meeting(date(2025, 11, 26), with_report=True),
    Meeting(date(2026, 2, 18), with_report=True),
    Meeting(date(2026, 4, 8)),
    Meeting(date(2026, 5, 27), with_report=True),
)


class RBNZGenerator(BaseGenerator):
    """RBNZ decisions and Stats NZ releases."""

    SOURCE_NAME = "rbnz"
    CURRENCY = "NZD"
    COUNTRY = "NZ"
    TIMEZONE = "Pacific/Auckland"

    LOOKBACK_DAYS = 7
    MONTH_OFFSETS = range(0, 4)

    def _candidates(self, today: date) -> Iterable[EconomicEvent]:
        self.check_table_horizon("RBNZ_MEETINGS", last_meeting(RBNZ_MEETINGS), today)

        for meeting in RBNZ_MEETINGS:
            yield self.make_event(meeting.day, RATE_DECISION)
            yield self.make_event(meeting.day, RATE_STATEMENT)
            if meeting.with_report:
                yield self.make_event(meeting.day, POLICY_STATEMENT)
                yield self.make_event(meeting.day, PRESS_CONFERENCE)

        for year, month in self.month_iter(today):
            if month in EMPLOYMENT_MONTHS:
                jobs_day = first_weekday_on_or_after(year, month, 5, WEDNESDAY)
                yield self.make_event(jobs_day, EMPLOYMENT)
                yield self.make_event(jobs_day, UNEMPLOYMENT)
            if month in CPI_MONTHS:
                yield self.make_event(day_of_month(year, month, 18), CPI)
            if month in GDP_MONTHS:
                yield self.make_event(day_of_month(year, month, 19), GDP)

            yield self.make_event(day_of_month(year, month, 26), TRADE_BALANCE)

            first_auction = nth_weekday(year, month, TUESDAY, 1)
            yield self.make_event(first_auction, GDT_AUCTION)
            yield self.make_event(first_auction + timedelta(days=14), GDT_AUCTION)
