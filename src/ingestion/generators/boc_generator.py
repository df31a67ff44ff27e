"""Bank of Canada and Statistics Canada release generator.

Rate announcements come from the Bank's published schedule; four of them
per year are accompanied by the Monetary Policy Report and a press
conference. Statistics Canada releases follow their usual patterns:

    - Labour Force Survey: first Friday
    - CPI: first Tuesday on or after the 15th
    - Retail trade: first Friday on or after the 20th
    - Monthly GDP: the 28th, moved off weekends
"""

from datetime import date
from typing import Iterable

from src.ingestion.generators.base_generator import BaseGenerator, Release
from src.ingestion.generators.date_rules import (
    FRIDAY,
    TUESDAY,
    day_of_month,
    first_weekday_on_or_after,
    nth_weekday,
)
from src.ingestion.generators.meetings import Meeting, last_meeting
from src.pipelines.calendar.schema import EconomicEvent

BOC_POLICY_URL = "https://www.bankofcanada.ca/core-functions/monetary-policy/"
BOC_MPR_URL = "https://www.bankofcanada.ca/publications/mpr/"
STATCAN_URL = "https://www.statcan.gc.ca"

RATE_DECISION = Release(
    "BoC Interest Rate Decision", "09:45", "high", "central_bank", BOC_POLICY_URL
)
RATE_STATEMENT = Release("BoC Rate Statement", "09:45", "high", "central_bank", BOC_POLICY_URL)
POLICY_REPORT = Release("BoC Monetary Policy Report", "09:45", "high", "central_bank", BOC_MPR_URL)
PRESS_CONFERENCE = Release("BoC Press Conference", "10:30", "high", "central_bank", BOC_MPR_URL)

EMPLOYMENT = Release(
    "Employment Change", "08:30", "high", "employment", STATCAN_URL, source="statcan"
)
UNEMPLOYMENT = Release(
    "Unemployment Rate", "08:30", "high", "employment", STATCAN_URL, source="statcan"
)
CPI = Release("CPI m/m", "08:30", "high", "inflation", STATCAN_URL, source="statcan")
CORE_CPI = Release("Core CPI m/m", "08:30", "medium", "inflation", STATCAN_URL, source="statcan")
RETAIL_SALES = Release(
    "Retail Sales m/m", "08:30", "medium", "consumer", STATCAN_URL, source="statcan"
)
GDP = Release("GDP m/m", "08:30", "medium", "growth", STATCAN_URL, source="statcan")

# with_report marks the Monetary Policy Report meetings.
BOC_MEETINGS: tuple[Meeting, ...] = (
    Meeting(date(2025, 1, 29), with_report=True),
    Meeting(date(2025, 3, 12)),
    Meeting(date(2025, 4, 16), with_report=True),
    Meeting(date(2025, 6, 4)),
    Meeting(date(2025, 7, 30), with_report=True),
    Meeting(date(2025, 9, 17)),
    Meeting(date(2025, 10, 29), with_report=True),
    Meeting(date(2025, 12, 10)),
    Meeting(date(2026, 1, 28), with_report=True),
    Meeting(date(2026, 3, 11)),
    Meeting(date(2026, 4, 15), with_report=True),
)


class BoCGenerator(BaseGenerator):
    """BoC decisions and Statistics Canada releases."""

    SOURCE_NAME = "boc"
    CURRENCY = "CAD"
    COUNTRY = "CA"
    TIMEZONE = "America/Toronto"

    LOOKBACK_DAYS = 7
    MONTH_OFFSETS = range(0, 4)

    def _candidates(self, today: date) -> Iterable[EconomicEvent]:
        self.check_table_horizon("BOC_MEETINGS", last_meeting(BOC_MEETINGS), today)

        for meeting in BOC_MEETINGS:
            yield self.make_event(meeting.day, RATE_DECISION)
            yield self.make_event(meeting.day, RATE_STATEMENT)
            if meeting.with_report:
                yield self.make_event(meeting.day, POLICY_REPORT)
                yield self.make_event(meeting.day, PRESS_CONFERENCE)

        for year, month in self.month_iter(today):
            jobs_day = nth_weekday(year, month, FRIDAY, 1)
            yield self.make_event(jobs_day, EMPLOYMENT)
            yield self.make_event(jobs_day, UNEMPLOYMENT)

            cpi_day = first_weekday_on_or_after(year, month, 15, TUESDAY)
            yield self.make_event(cpi_day, CPI)
            yield self.make_event(cpi_day, CORE_CPI)

            yield self.make_event(first_weekday_on_or_after(year, month, 20, FRIDAY), RETAIL_SALES)
            yield self.make_event(day_of_month(year, month, 28), GDP)
