"""Bank of England and UK data release generator.

MPC announcements come from the Bank's published schedule; the Monetary
Policy Report is released with the February, May, August and November
decisions. ONS statistics follow their usual patterns:

    - CPI: first Wednesday on or after the 15th
    - Claimant count and average earnings: the day before CPI
    - Retail sales: third Friday
    - Monthly GDP: the 12th, moved off weekends
    - S&P Global manufacturing PMI: the 1st, moved off weekends
"""

from datetime import date, timedelta
from typing import Iterable

from src.ingestion.generators.base_generator import BaseGenerator, Release
from src.ingestion.generators.date_rules import (
    FRIDAY,
    WEDNESDAY,
    day_of_month,
    first_weekday_on_or_after,
    nth_weekday,
)
from src.ingestion.generators.meetings import Meeting, last_meeting
from src.pipelines.calendar.schema import EconomicEvent

BOE_POLICY_URL = "https://www.bankofengland.co.uk/monetary-policy"
BOE_REPORT_URL = "https://www.bankofengland.co.uk/monetary-policy-report"
ONS_URL = "https://www.ons.gov.uk"

RATE_DECISION = Release(
    "BoE Interest Rate Decision", "12:00", "high", "central_bank", BOE_POLICY_URL
)
MINUTES = Release("MPC Meeting Minutes", "12:00", "high", "central_bank", BOE_POLICY_URL)
POLICY_REPORT = Release(
    "BoE Monetary Policy Report", "12:00", "high", "central_bank", BOE_REPORT_URL
)

CPI = Release("CPI y/y", "07:00", "high", "inflation", ONS_URL, source="ons")
CLAIMANT_COUNT = Release(
    "Claimant Count Change", "07:00", "medium", "employment", ONS_URL, source="ons"
)
AVERAGE_EARNINGS = Release(
    "Average Earnings Index 3m/y", "07:00", "medium", "employment", ONS_URL, source="ons"
)
RETAIL_SALES = Release("Retail Sales m/m", "07:00", "medium", "consumer", ONS_URL, source="ons")
GDP = Release("GDP m/m", "07:00", "high", "growth", ONS_URL, source="ons")
MANUFACTURING_PMI = Release(
    "Manufacturing PMI",
    "09:30",
    "medium",
    "manufacturing",
    "https://www.pmi.spglobal.com",
    source="spglobal",
)

BOE_MEETINGS: tuple[Meeting, ...] = (
    Meeting(date(2025, 2, 6), with_report=True),
    Meeting(date(2025, 3, 20)),
    Meeting(date(2025, 5, 8), with_report=True),
    Meeting(date(2025, 6, 19)),
    Meeting(date(2025, 8, 7), with_report=True),
    Meeting(date(2025, 9, 18)),
    Meeting(date(2025, 11, 6), with_report=True),
    Meeting(date(2025, 12, 18)),
    Meeting(date(2026, 2, 5), with_report=True),
    Meeting(date(2026, 3, 19)),
    Meeting(date(2026, 5, 7), with_report=True),
    Meeting(date(2026, 6, 18)),
)


class BoEGenerator(BaseGenerator):
    """BoE decisions, minutes, Monetary Policy Reports and ONS statistics."""

    SOURCE_NAME = "boe"
    CURRENCY = "GBP"
    COUNTRY = "UK"
    TIMEZONE = "Europe/London"

    LOOKBACK_DAYS = 7
    MONTH_OFFSETS = range(0, 4)

    def _candidates(self, today: date) -> Iterable[EconomicEvent]:
        self.check_table_horizon("BOE_MEETINGS", last_meeting(BOE_MEETINGS), today)

        for meeting in BOE_MEETINGS:
            yield self.make_event(meeting.day, RATE_DECISION)
            yield self.make_event(meeting.day, MINUTES)
            if meeting.with_report:
                yield self.make_event(meeting.day, POLICY_REPORT)

        for year, month in self.month_iter(today):
            cpi_day = first_weekday_on_or_after(year, month, 15, WEDNESDAY)
            yield self.make_event(cpi_day, CPI)
            yield self.make_event(cpi_day - timedelta(days=1), CLAIMANT_COUNT)
            yield self.make_event(cpi_day - timedelta(days=1), AVERAGE_EARNINGS)
            yield self.make_event(nth_weekday(year, month, FRIDAY, 3), RETAIL_SALES)
            yield self.make_event(day_of_month(year, month, 12), GDP)
            yield self.make_event(day_of_month(year, month, 1), MANUFACTURING_PMI)
