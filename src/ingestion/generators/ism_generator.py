"""ISM Report On Business release generator.

Manufacturing is published on the first business day of the month and
Services on the third, both at 10:00 ET.
"""

from datetime import date
from typing import Iterable

from src.ingestion.generators.base_generator import BaseGenerator, Release
from src.ingestion.generators.date_rules import nth_business_day
from src.pipelines.calendar.schema import EconomicEvent

ISM_URL = (
    "https://www.ismworld.org/supply-management-news-and-reports/reports/ism-report-on-business/"
)

MANUFACTURING_RELEASES = (
    Release("ISM Manufacturing PMI", "10:00", "high", "manufacturing", ISM_URL),
    Release("ISM Manufacturing Prices", "10:00", "medium", "manufacturing", ISM_URL),
    Release("ISM Manufacturing Employment", "10:00", "medium", "employment", ISM_URL),
    Release("ISM Manufacturing New Orders", "10:00", "medium", "manufacturing", ISM_URL),
)

SERVICES_RELEASES = (
    Release("ISM Services PMI", "10:00", "high", "services", ISM_URL),
    Release("ISM Services Prices", "10:00", "medium", "services", ISM_URL),
    Release("ISM Services Employment", "10:00", "medium", "employment", ISM_URL),
)

MANUFACTURING_BUSINESS_DAY = 1
SERVICES_BUSINESS_DAY = 3


class ISMGenerator(BaseGenerator):
    """ISM manufacturing and services surveys."""

    SOURCE_NAME = "ism"
    CURRENCY = "USD"
    COUNTRY = "US"
    TIMEZONE = "America/New_York"

    LOOKBACK_MONTHS = 3
    LOOKAHEAD_MONTHS = 6
    MONTH_OFFSETS = range(-3, 7)

    def _candidates(self, today: date) -> Iterable[EconomicEvent]:
        for year, month in self.month_iter(today):
            manufacturing_day = nth_business_day(year, month, MANUFACTURING_BUSINESS_DAY)
            for release in MANUFACTURING_RELEASES:
                yield self.make_event(manufacturing_day, release)

            services_day = nth_business_day(year, month, SERVICES_BUSINESS_DAY)
            for release in SERVICES_RELEASES:
                yield self.make_event(services_day, release)
