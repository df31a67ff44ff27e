"""U.S. Energy Information Administration release generator.

All rules, no tables:
    - Weekly Petroleum Status Report (Crude Oil Inventories): every Wednesday
    - Weekly Natural Gas Storage Report: every Thursday
    - Short-Term Energy Outlook: second Tuesday of the month
"""

from datetime import date
from typing import Iterable

from src.ingestion.generators.base_generator import BaseGenerator, Release
from src.ingestion.generators.date_rules import (
    THURSDAY,
    TUESDAY,
    WEDNESDAY,
    nth_weekday,
    weekdays_in_month,
)
from src.pipelines.calendar.schema import EconomicEvent

CRUDE_INVENTORIES = Release(
    "Crude Oil Inventories",
    "10:30",
    "medium",
    "energy",
    "https://www.eia.gov/petroleum/supply/weekly/",
)
NATGAS_STORAGE = Release(
    "Natural Gas Storage", "10:30", "low", "energy", "https://www.eia.gov/naturalgas/storage/"
)
ENERGY_OUTLOOK = Release(
    "EIA Short-Term Energy Outlook", "12:00", "low", "energy", "https://www.eia.gov/outlooks/steo/"
)


class EIAGenerator(BaseGenerator):
    """Weekly oil and gas inventories plus the monthly outlook."""

    SOURCE_NAME = "eia"
    CURRENCY = "USD"
    COUNTRY = "US"
    TIMEZONE = "America/New_York"

    LOOKBACK_MONTHS = 3
    LOOKAHEAD_MONTHS = 6
    MONTH_OFFSETS = range(-3, 7)

    def _candidates(self, today: date) -> Iterable[EconomicEvent]:
        for year, month in self.month_iter(today):
            for wednesday in weekdays_in_month(year, month, WEDNESDAY):
                yield self.make_event(wednesday, CRUDE_INVENTORIES)
            for thursday in weekdays_in_month(year, month, THURSDAY):
                yield self.make_event(thursday, NATGAS_STORAGE)
            yield self.make_event(nth_weekday(year, month, TUESDAY, 2), ENERGY_OUTLOOK)
