"""Fill actual/previous values on calendar events from FRED observations.

Each mapped release title points at a FRED series and the unit policy used
to display it. For every series the three most recent observations are
fetched once, giving two display values:

    latest - the most recent release
    prior  - the release before it

Events on or before the reference day are treated as released
(``actual=latest``, ``previous=prior``); later events have not happened yet
(``actual=None``, ``previous=latest``). Only USD events are enriched, since
every mapped series is a US statistic.

Example:
    >>> from src.ingestion.collectors.fred_collector import FREDCollector
    >>> from src.ingestion.preprocessors.data_enricher import enrich_events_with_data
    >>>
    >>> events = enrich_events_with_data(snapshot.events, FREDCollector())
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Iterable

import pytz

from src.ingestion.preprocessors.value_formatter import UnitPolicy, format_value
from src.pipelines.calendar.schema import CalendarSnapshot, EconomicEvent
from src.shared.utils import setup_logger, utc_today

logger = setup_logger(__name__)

ENRICHED_CURRENCY = "USD"
OBSERVATION_COUNT = 3

# Release title -> (FRED series id, display policy)
EVENT_TO_SERIES: dict[str, tuple[str, UnitPolicy]] = {
    # Employment
    "Non-Farm Payrolls": ("PAYEMS", UnitPolicy("change", "K")),
    "Unemployment Rate": ("UNRATE", UnitPolicy("level", "%")),
    "Unemployment Claims": ("ICSA", UnitPolicy("level", "K")),
    "JOLTS Job Openings": ("JTSJOL", UnitPolicy("level", "M")),
    # Inflation
    "CPI m/m": ("CPIAUCSL", UnitPolicy("pct_change", "%")),
    "Core CPI m/m": ("CPILFESL", UnitPolicy("pct_change", "%")),
    "PPI m/m": ("PPIACO", UnitPolicy("pct_change", "%")),
    "Core PCE Price Index m/m": ("PCEPILFE", UnitPolicy("pct_change", "%")),
    # Growth
    "GDP q/q": ("A191RL1Q225SBEA", UnitPolicy("level", "%")),
    # Consumer
    "Retail Sales m/m": ("RSAFS", UnitPolicy("pct_change", "%")),
    "UoM Consumer Sentiment (Preliminary)": ("UMCSENT", UnitPolicy("level")),
    "UoM Consumer Sentiment (Final)": ("UMCSENT", UnitPolicy("level")),
    # Manufacturing
    "ISM Manufacturing PMI": ("NAPM", UnitPolicy("level")),
    "Industrial Production m/m": ("INDPRO", UnitPolicy("pct_change", "%")),
    "Durable Goods Orders m/m": ("DGORDER", UnitPolicy("pct_change", "%")),
    "Empire State Manufacturing Index": ("GACDISA066MSFRBNY", UnitPolicy("level")),
    # Housing
    "Housing Starts": ("HOUST", UnitPolicy("level", "K")),
    "Building Permits": ("PERMIT", UnitPolicy("level", "K")),
    "New Home Sales": ("HSN1F", UnitPolicy("level", "K")),
    # Trade
    "Trade Balance": ("BOPGSTB", UnitPolicy("level", "B")),
}


@dataclass(frozen=True)
class SeriesValues:
    """Formatted display values of one series."""

    latest: str | None
    prior: str | None


def series_values(observations, policy: UnitPolicy) -> SeriesValues | None:
    """Derive latest/prior display values from newest-first observations."""
    values = [obs.value for obs in observations]
    if not values:
        return None

    previous = values[1] if len(values) > 1 else None
    latest = format_value(values[0], previous, policy)

    prior = None
    if previous is not None:
        if policy.unit == "level":
            prior = format_value(previous, None, policy)
        elif len(values) > 2:
            prior = format_value(previous, values[2], policy)

    return SeriesValues(latest=latest, prior=prior)


def _fetch_values(collector, titles: Iterable[str]) -> dict[str, SeriesValues]:
    """Fetch every series needed for ``titles`` once; failures are skipped."""
    by_series: dict[str, SeriesValues | None] = {}
    by_title: dict[str, SeriesValues] = {}

    for title in titles:
        series_id, policy = EVENT_TO_SERIES[title]
        if series_id not in by_series:
            try:
                observations = collector.get_latest_observations(series_id, OBSERVATION_COUNT)
                by_series[series_id] = series_values(observations, policy)
            except Exception as e:
                logger.error("Failed to fetch %s for '%s': %s", series_id, title, e)
                by_series[series_id] = None

        values = by_series[series_id]
        if values is not None:
            by_title[title] = values

    logger.info(
        "Fetched %d/%d FRED series",
        sum(1 for v in by_series.values() if v is not None),
        len(by_series),
    )
    return by_title


def enrich_events_with_data(
    events: Iterable[EconomicEvent],
    collector,
    reference: datetime | None = None,
) -> list[EconomicEvent]:
    """Return copies of ``events`` with actual/previous filled where a series is mapped.

    Args:
        events: Calendar events (not modified).
        collector: Object exposing ``get_latest_observations(series_id, count)``,
            normally a FREDCollector.
        reference: Instant deciding which events are already released
            (defaults to now, UTC).

    Returns:
        New event list in the input order. Unmapped and non-USD events are
        returned unchanged.
    """
    events = list(events)
    today = utc_today(reference).isoformat()

    titles = sorted(
        {e.title for e in events if e.currency == ENRICHED_CURRENCY and e.title in EVENT_TO_SERIES}
    )
    if not titles:
        logger.info("No events map to a FRED series")
        return events

    values = _fetch_values(collector, titles)

    enriched = []
    filled = 0
    for event in events:
        data = values.get(event.title) if event.currency == ENRICHED_CURRENCY else None
        if data is None:
            enriched.append(event)
            continue

        if event.date <= today:
            event = event.with_values(
                actual=data.latest, previous=data.prior, forecast=event.forecast
            )
        else:
            event = event.with_values(actual=None, previous=data.latest, forecast=event.forecast)
        enriched.append(event)
        filled += 1

    logger.info("Enriched %d/%d events with FRED values", filled, len(events))
    return enriched


def refresh_snapshot_values(
    snapshot: CalendarSnapshot,
    collector,
    reference: datetime | None = None,
) -> CalendarSnapshot:
    """Re-run enrichment on an existing snapshot (the data-only refresh).

    Dates, sources and range are kept; ``lastUpdated`` moves to ``reference``
    (or now) and ``dataIncluded`` is set.
    """
    completed_at = reference or datetime.now(pytz.UTC)
    events = enrich_events_with_data(snapshot.events, collector, completed_at)
    return replace(
        snapshot,
        events=tuple(events),
        last_updated=completed_at.isoformat(),
        data_included=True,
    )
