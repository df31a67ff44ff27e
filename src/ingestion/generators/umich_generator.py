"""University of Michigan Surveys of Consumers release generator.

The preliminary reading (with inflation expectations) comes out on the
second Friday, the final reading on the fourth Friday.
"""

from datetime import date
from typing import Iterable

from src.ingestion.generators.base_generator import BaseGenerator, Release
from src.ingestion.generators.date_rules import FRIDAY, nth_weekday
from src.pipelines.calendar.schema import EconomicEvent

UMICH_URL = "http://www.sca.isr.umich.edu/"

PRELIMINARY_RELEASES = (
    Release("UoM Consumer Sentiment (Preliminary)", "10:00", "high", "sentiment", UMICH_URL),
    Release("UoM Inflation Expectations", "10:00", "high", "inflation", UMICH_URL),
    Release("UoM 5-Year Inflation Expectations", "10:00", "medium", "inflation", UMICH_URL),
)
FINAL_SENTIMENT = Release(
    "UoM Consumer Sentiment (Final)", "10:00", "medium", "sentiment", UMICH_URL
)


class UMichGenerator(BaseGenerator):
    """Consumer sentiment and inflation expectations."""

    SOURCE_NAME = "umich"
    CURRENCY = "USD"
    COUNTRY = "US"
    TIMEZONE = "America/New_York"

    LOOKBACK_DAYS = 7
    MONTH_OFFSETS = range(0, 5)
    CAP_TO_OFFSETS = True

    def _candidates(self, today: date) -> Iterable[EconomicEvent]:
        for year, month in self.month_iter(today):
            preliminary_day = nth_weekday(year, month, FRIDAY, 2)
            for release in PRELIMINARY_RELEASES:
                yield self.make_event(preliminary_day, release)

            yield self.make_event(nth_weekday(year, month, FRIDAY, 4), FINAL_SENTIMENT)
