"""US Treasury auction and budget release generator.

The 10-year note and 30-year bond auctions drift too much from any simple
rule, so their dates come from the published auction schedule; months
outside the table fall back to the 10th/13th moved off weekends. Other
auctions use their regular pattern:

    - 4- and 8-week bills: every Monday
    - 2-, 5- and 7-year notes: the 24th, 25th and 26th
    - Monthly Treasury Statement: the 11th
"""

from datetime import date
from typing import Iterable

from src.ingestion.generators.base_generator import BaseGenerator, Release
from src.ingestion.generators.date_rules import MONDAY, day_of_month, weekdays_in_month
from src.pipelines.calendar.schema import EconomicEvent

AUCTIONS_URL = "https://www.treasurydirect.gov/auctions/announcements-data-results/"

BILL_4_WEEK = Release("4-Week Bill Auction", "11:30", "low", "bonds", AUCTIONS_URL)
BILL_8_WEEK = Release("8-Week Bill Auction", "11:30", "low", "bonds", AUCTIONS_URL)
NOTE_2_YEAR = Release("2-Year Note Auction", "13:00", "medium", "bonds", AUCTIONS_URL)
NOTE_5_YEAR = Release("5-Year Note Auction", "13:00", "medium", "bonds", AUCTIONS_URL)
NOTE_7_YEAR = Release("7-Year Note Auction", "13:00", "medium", "bonds", AUCTIONS_URL)
NOTE_10_YEAR = Release("10-Year Note Auction", "13:00", "high", "bonds", AUCTIONS_URL)
BOND_30_YEAR = Release("30-Year Bond Auction", "13:00", "high", "bonds", AUCTIONS_URL)
BUDGET_BALANCE = Release(
    "Federal Budget Balance", "14:00", "low", "fiscal", "https://fiscaldata.treasury.gov/"
)

TEN_YEAR_AUCTIONS: dict[tuple[int, int], date] = {
    (2025, 1): date(2025, 1, 8),
    (2025, 2): date(2025, 2, 11),
    (2025, 3): date(2025, 3, 11),
    (2025, 4): date(2025, 4, 9),
    (2025, 5): date(2025, 5, 12),
    (2025, 6): date(2025, 6, 11),
    (2025, 7): date(2025, 7, 9),
    (2025, 8): date(2025, 8, 12),
    (2025, 9): date(2025, 9, 10),
    (2025, 10): date(2025, 10, 8),
    (2025, 11): date(2025, 11, 12),
    (2025, 12): date(2025, 12, 9),
}

THIRTY_YEAR_AUCTIONS: dict[tuple[int, int], date] = {
    (2025, 1): date(2025, 1, 9),
    (2025, 2): date(2025, 2, 13),
    (2025, 3): date(2025, 3, 13),
    (2025, 4): date(2025, 4, 10),
    (2025, 5): date(2025, 5, 8),
    (2025, 6): date(2025, 6, 12),
    (2025, 7): date(2025, 7, 10),
    (2025, 8): date(2025, 8, 14),
    (2025, 9): date(2025, 9, 11),
    (2025, 10): date(2025, 10, 9),
    (2025, 11): date(2025, 11, 13),
    (2025, 12): date(2025, 12, 11),
}

# Fallback day of month when a month is missing from the table
TEN_YEAR_FALLBACK_DAY = 10
THIRTY_YEAR_FALLBACK_DAY = 13


class TreasuryGenerator(BaseGenerator):
    """Bill, note and bond auctions plus the monthly budget statement."""

    SOURCE_NAME = "treasury"
    CURRENCY = "USD"
    COUNTRY = "US"
    TIMEZONE = "America/New_York"

    LOOKBACK_MONTHS = 3
    MONTH_OFFSETS = range(-3, 5)
    CAP_TO_OFFSETS = True

    def _candidates(self, today: date) -> Iterable[EconomicEvent]:
        self.check_table_horizon(
            "TEN_YEAR_AUCTIONS",
            max(TEN_YEAR_AUCTIONS.values()),
            today,
            fallback=f"day {TEN_YEAR_FALLBACK_DAY} rule",
        )
        self.check_table_horizon(
            "THIRTY_YEAR_AUCTIONS",
            max(THIRTY_YEAR_AUCTIONS.values()),
            today,
            fallback=f"day {THIRTY_YEAR_FALLBACK_DAY} rule",
        )

        for year, month in self.month_iter(today):
            for monday in weekdays_in_month(year, month, MONDAY):
                yield self.make_event(monday, BILL_4_WEEK)
                yield self.make_event(monday, BILL_8_WEEK)

            yield self.make_event(day_of_month(year, month, 24), NOTE_2_YEAR)
            yield self.make_event(day_of_month(year, month, 25), NOTE_5_YEAR)
            yield self.make_event(day_of_month(year, month, 26), NOTE_7_YEAR)

            yield self.make_event(
                self.auction_day(TEN_YEAR_AUCTIONS, year, month, TEN_YEAR_FALLBACK_DAY),
                NOTE_10_YEAR,
            )
            yield self.make_event(
                self.auction_day(THIRTY_YEAR_AUCTIONS, year, month, THIRTY_YEAR_FALLBACK_DAY),
                BOND_30_YEAR,
            )

            yield self.make_event(day_of_month(year, month, 11), BUDGET_BALANCE)

    @staticmethod
    def auction_day(
        table: dict[tuple[int, int], date], year: int, month: int, fallback_day: int
    ) -> date:
        """Table date for the month if published, else the fallback rule."""
        known = table.get((year, month))
        if known is not None:
            return known
        return day_of_month(year, month, fallback_day)
