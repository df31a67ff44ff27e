"""National Association of Realtors release generator.

Existing Home Sales dates come from NAR's published release schedule;
months outside the table fall back to the 20th moved off weekends.
"""

from datetime import date
from typing import Iterable

from src.ingestion.generators.base_generator import BaseGenerator, Release
from src.ingestion.generators.date_rules import day_of_month
from src.pipelines.calendar.schema import EconomicEvent

EXISTING_HOME_SALES = Release(
    "Existing Home Sales",
    "10:00",
    "medium",
    "housing",
    "https://www.nar.realtor/research-and-statistics/housing-statistics/existing-home-sales",
)

EXISTING_HOME_SALES_DATES: dict[tuple[int, int], date] = {
    (2025, 9): date(2025, 9, 19),
    (2025, 10): date(2025, 10, 23),
    (2025, 11): date(2025, 11, 21),
    (2025, 12): date(2025, 12, 19),
    (2026, 1): date(2026, 1, 23),
    (2026, 2): date(2026, 2, 20),
    (2026, 3): date(2026, 3, 20),
    (2026, 4): date(2026, 4, 23),
}

FALLBACK_DAY = 20

DESCRIPTION = "Monthly count of existing home sales from the National Association of Realtors."
WHY_IT_MATTERS = "Key indicator of housing market health. Represents ~90% of all home sales."
FREQUENCY = "Monthly (around 3rd-4th week)"


class NARGenerator(BaseGenerator):
    """Existing Home Sales."""

    SOURCE_NAME = "nar"
    CURRENCY = "USD"
    COUNTRY = "US"
    TIMEZONE = "America/New_York"

    LOOKBACK_MONTHS = 3
    LOOKAHEAD_MONTHS = 6
    MONTH_OFFSETS = range(-3, 7)

    def _candidates(self, today: date) -> Iterable[EconomicEvent]:
        self.check_table_horizon(
            "EXISTING_HOME_SALES_DATES",
            max(EXISTING_HOME_SALES_DATES.values()),
            today,
            fallback=f"day {FALLBACK_DAY} rule",
        )

        for year, month in self.month_iter(today):
            release_day = EXISTING_HOME_SALES_DATES.get((year, month))
            if release_day is None:
                release_day = day_of_month(year, month, FALLBACK_DAY)
            yield self.make_event(
                release_day,
                EXISTING_HOME_SALES,
                description=DESCRIPTION,
                why_it_matters=WHY_IT_MATTERS,
                frequency=FREQUENCY,
            )
