"""Bureau of Labor Statistics release generator.

    - Employment Situation (payrolls, unemployment rate): first Friday
    - CPI and core CPI: the 12th, moved off weekends
    - PPI: the day after CPI, moved off weekends
    - JOLTS: first Tuesday on or after the 7th
    - Weekly jobless claims: every Thursday
"""

from datetime import date, timedelta
from typing import Iterable

from src.ingestion.generators.base_generator import BaseGenerator, Release
from src.ingestion.generators.date_rules import (
    FRIDAY,
    THURSDAY,
    TUESDAY,
    day_of_month,
    first_weekday_on_or_after,
    nth_weekday,
    shift_weekend_forward,
    weekdays_in_month,
)
from src.pipelines.calendar.schema import EconomicEvent

SCHEDULE_URL = "https://www.bls.gov/schedule/news_release"

NON_FARM_PAYROLLS = Release(
    "Non-Farm Payrolls", "08:30", "high", "employment", f"{SCHEDULE_URL}/empsit.htm"
)
UNEMPLOYMENT = Release(
    "Unemployment Rate", "08:30", "high", "employment", f"{SCHEDULE_URL}/empsit.htm"
)
CPI = Release("CPI m/m", "08:30", "high", "inflation", f"{SCHEDULE_URL}/cpi.htm")
CORE_CPI = Release("Core CPI m/m", "08:30", "high", "inflation", f"{SCHEDULE_URL}/cpi.htm")
PPI = Release("PPI m/m", "08:30", "medium", "inflation", f"{SCHEDULE_URL}/ppi.htm")
JOLTS = Release("JOLTS Job Openings", "10:00", "medium", "employment", f"{SCHEDULE_URL}/jolts.htm")
JOBLESS_CLAIMS = Release(
    "Unemployment Claims", "08:30", "medium", "employment", "https://www.bls.gov/ui/home.htm"
)


class BLSGenerator(BaseGenerator):
    """US labour and price statistics."""

    SOURCE_NAME = "bls"
    CURRENCY = "USD"
    COUNTRY = "US"
    TIMEZONE = "America/New_York"

    LOOKBACK_DAYS = 7
    MONTH_OFFSETS = range(0, 4)
    CAP_TO_OFFSETS = True

    def _candidates(self, today: date) -> Iterable[EconomicEvent]:
        for year, month in self.month_iter(today):
            jobs_day = nth_weekday(year, month, FRIDAY, 1)
            yield self.make_event(jobs_day, NON_FARM_PAYROLLS)
            yield self.make_event(jobs_day, UNEMPLOYMENT)

            cpi_day = day_of_month(year, month, 12)
            yield self.make_event(cpi_day, CPI)
            yield self.make_event(cpi_day, CORE_CPI)
            yield self.make_event(shift_weekend_forward(cpi_day + timedelta(days=1)), PPI)

            yield self.make_event(first_weekday_on_or_after(year, month, 7, TUESDAY), JOLTS)

            for thursday in weekdays_in_month(year, month, THURSDAY):
                yield self.make_event(thursday, JOBLESS_CLAIMS)
