"""Abstract base class for all release-date generators.

A generator turns a reference instant into the scheduled releases of one
institution for a bounded window around it. Dates come from, in order:

1. an authoritative table (meeting calendars, fixed auction dates),
2. an ordinal rule ("first Friday", "third business day", "day 12"),
3. a weekend shift (Saturday +2 days, Sunday +1 day).

Subclasses implement ``_candidates()``. The base class then filters the
candidates to the generator's window, drops repeated (date, title) pairs and
wraps the outcome in a GeneratorResult so a broken source never takes the
whole aggregation run down with it.

Example:
    >>> from datetime import datetime, timezone
    >>> from src.ingestion.generators import get_generator
    >>> result = get_generator("rba").run(datetime(2025, 2, 10, tzinfo=timezone.utc))
    >>> result.ok
    True
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Iterable

from src.ingestion.generators.date_rules import add_months, last_day_of_month, month_offset
from src.ingestion.indicators import get_indicator_info
from src.pipelines.calendar.schema import EconomicEvent, GeneratorResult
from src.shared.utils import setup_logger, utc_clock, utc_today


@dataclass(frozen=True)
class Release:
    """Static description of one recurring release.

    ``local_time`` is the wall-clock publication time in ``timezone``
    (the generator's TIMEZONE when None).
    """

    title: str
    local_time: str
    impact: str
    category: str
    source_url: str
    source: str | None = None
    country: str | None = None
    timezone: str | None = None


class BaseGenerator(ABC):
    """Base class for all calendar generators.

    Subclasses must define:
        SOURCE_NAME (str): generator id (e.g. "fed", "bls").
        CURRENCY, COUNTRY, TIMEZONE: defaults applied by make_event().

    Window constants (per generator, never shared):
        LOOKBACK_DAYS / LOOKBACK_MONTHS: how far before the reference day
            events are kept. LOOKBACK_MONTHS wins when set.
        LOOKAHEAD_MONTHS: exact upper bound (reference day + N months).
        MONTH_OFFSETS: months, relative to the reference month, for which
            rule-based releases are computed.
        CAP_TO_OFFSETS: when True and LOOKAHEAD_MONTHS is None, the window
            ends on the last day of the final MONTH_OFFSETS month.
    """

    SOURCE_NAME: str
    CURRENCY: str
    COUNTRY: str
    TIMEZONE: str

    LOOKBACK_DAYS: int = 7
    LOOKBACK_MONTHS: int | None = None
    LOOKAHEAD_MONTHS: int | None = None
    MONTH_OFFSETS: range = range(0, 4)
    CAP_TO_OFFSETS: bool = False

    # How far ahead an open-ended window must be covered by a date table
    # before exhaustion is reported.
    TABLE_HORIZON_MONTHS: int = 6

    def __init__(self, log_file: Path | None = None) -> None:
        """Initialize the generator.

        Args:
            log_file: Optional path for file-based logging.
        """
        self.logger = setup_logger(self.__class__.__name__, log_file)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def generate(self, reference: datetime) -> list[EconomicEvent]:
        """Compute this source's events for the window around ``reference``.

        Deterministic for a given reference instant (and, for live sources,
        the same fetched content).

        Args:
            reference: The "as of" instant; its UTC calendar day anchors the window.

        Returns:
            Events inside the window, in emission order, unique by (date, title).
        """
        today = utc_today(reference)
        start, end = self.window(today)

        events: list[EconomicEvent] = []
        seen: set[tuple[str, str]] = set()
        for event in self._candidates(today):
            day = event.day
            if day < start or (end is not None and day > end):
                continue
            if event.key in seen:
                continue
            seen.add(event.key)
            events.append(event)

        self.logger.debug("%s produced %d events", self.SOURCE_NAME, len(events))
        return events

    def run(self, reference: datetime) -> GeneratorResult:
        """Soft-fail wrapper around generate(): never raises."""
        try:
            events = self.generate(reference)
        except Exception as e:
            self.logger.error("Generator %s failed: %s", self.SOURCE_NAME, e, exc_info=True)
            return GeneratorResult.failure(self.SOURCE_NAME, f"{type(e).__name__}: {e}")
        return GeneratorResult.success(self.SOURCE_NAME, events)

    def window(self, today: date) -> tuple[date, date | None]:
        """Inclusive (start, end) bounds for emitted dates; end None means open."""
        if self.LOOKBACK_MONTHS is not None:
            start = add_months(today, -self.LOOKBACK_MONTHS)
        else:
            start = today - timedelta(days=self.LOOKBACK_DAYS)

        if self.LOOKAHEAD_MONTHS is not None:
            end = add_months(today, self.LOOKAHEAD_MONTHS)
        elif self.CAP_TO_OFFSETS:
            end = last_day_of_month(*month_offset(today, self.MONTH_OFFSETS[-1]))
        else:
            end = None
        return start, end

    # ------------------------------------------------------------------
    # Subclass hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def _candidates(self, today: date) -> Iterable[EconomicEvent]:
        """Yield candidate events; window filtering and dedupe happen in generate()."""
        ...

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def make_event(self, day: date, release: Release, **metadata) -> EconomicEvent:
        """Build an event for ``release`` published on ``day``.

        The release's local time is interpreted in its time zone (defaulting to
        the generator's TIMEZONE) and stored converted to UTC. Catalogue
        metadata is attached by title; explicit ``metadata`` keywords win.
        """
        info = get_indicator_info(release.title)
        fields = {}
        if info is not None:
            fields = {
                "description": info.description,
                "why_it_matters": info.why_it_matters,
                "frequency": info.frequency,
                "typical_reaction": dict(info.typical_reaction) or None,
                "related_assets": info.related_assets or None,
                "historical_volatility": info.historical_volatility,
            }
        fields.update(metadata)

        return EconomicEvent(
            date=day.isoformat(),
            time=utc_clock(day, release.local_time, release.timezone or self.TIMEZONE),
            currency=self.CURRENCY,
            title=release.title,
            impact=release.impact,
            category=release.category,
            country=release.country or self.COUNTRY,
            source=release.source or self.SOURCE_NAME,
            source_url=release.source_url,
            **fields,
        )

    def check_table_horizon(
        self,
        table_name: str,
        last_entry: date,
        today: date,
        fallback: str | None = None,
    ) -> bool:
        """Warn when the window reaches past the last entry of a date table.

        Args:
            table_name: Name used in the log message.
            last_entry: Latest date the table knows.
            today: Reference day.
            fallback: Rule used past the table, if any.

        Returns:
            True if the table still covers the window, False if exhausted.
        """
        _, end = self.window(today)
        horizon = end if end is not None else add_months(today, self.TABLE_HORIZON_MONTHS)
        if horizon <= last_entry:
            return True
        self.logger.warning(
            "%s table '%s' ends on %s but the window runs to %s; %s",
            self.SOURCE_NAME,
            table_name,
            last_entry.isoformat(),
            horizon.isoformat(),
            f"falling back to {fallback}" if fallback else "no dates emitted past the table",
        )
        return False

    def month_iter(self, today: date):
        """(year, month) pairs for this generator's MONTH_OFFSETS."""
        for offset in self.MONTH_OFFSETS:
            yield month_offset(today, offset)
