"""US Census Bureau release generator.

All dates are day-of-month approximations moved forward off weekends.
"""

from datetime import date
from typing import Iterable

from src.ingestion.generators.base_generator import BaseGenerator, Release
from src.ingestion.generators.date_rules import day_of_month
from src.pipelines.calendar.schema import EconomicEvent

CENSUS_URL = "https://www.census.gov"

RETAIL_SALES = Release(
    "Retail Sales m/m", "08:30", "high", "consumer", f"{CENSUS_URL}/retail/index.html"
)
CORE_RETAIL_SALES = Release(
    "Core Retail Sales m/m", "08:30", "high", "consumer", f"{CENSUS_URL}/retail/index.html"
)
HOUSING_STARTS = Release(
    "Housing Starts", "08:30", "medium", "housing", f"{CENSUS_URL}/construction/nrc/index.html"
)
BUILDING_PERMITS = Release(
    "Building Permits", "08:30", "medium", "housing", f"{CENSUS_URL}/construction/nrc/index.html"
)
DURABLE_GOODS = Release(
    "Durable Goods Orders m/m",
    "08:30",
    "medium",
    "manufacturing",
    f"{CENSUS_URL}/manufacturing/m3/index.html",
)
CORE_DURABLE_GOODS = Release(
    "Core Durable Goods Orders m/m",
    "08:30",
    "medium",
    "manufacturing",
    f"{CENSUS_URL}/manufacturing/m3/index.html",
)
NEW_HOME_SALES = Release(
    "New Home Sales", "10:00", "medium", "housing", f"{CENSUS_URL}/construction/nrs/index.html"
)
TRADE_BALANCE = Release(
    "Trade Balance", "08:30", "medium", "trade", f"{CENSUS_URL}/foreign-trade/index.html"
)
WHOLESALE_INVENTORIES = Release(
    "Wholesale Inventories m/m",
    "10:00",
    "low",
    "manufacturing",
    f"{CENSUS_URL}/wholesale/index.html",
)

# (day of month, releases published that day)
MONTHLY_SCHEDULE: tuple[tuple[int, tuple[Release, ...]], ...] = (
    (15, (RETAIL_SALES, CORE_RETAIL_SALES)),
    (18, (HOUSING_STARTS, BUILDING_PERMITS)),
    (26, (DURABLE_GOODS, CORE_DURABLE_GOODS)),
    (25, (NEW_HOME_SALES,)),
    (5, (TRADE_BALANCE,)),
    (9, (WHOLESALE_INVENTORIES,)),
)


class CensusGenerator(BaseGenerator):
    """Retail, housing, durable goods, trade and inventory releases."""

    SOURCE_NAME = "census"
    CURRENCY = "USD"
    COUNTRY = "US"
    TIMEZONE = "America/New_York"

    LOOKBACK_DAYS = 7
    MONTH_OFFSETS = range(0, 5)
    CAP_TO_OFFSETS = True

    def _candidates(self, today: date) -> Iterable[EconomicEvent]:
        for year, month in self.month_iter(today):
            for day, releases in MONTHLY_SCHEDULE:
                release_day = day_of_month(year, month, day)
                for release in releases:
                    yield self.make_event(release_day, release)
