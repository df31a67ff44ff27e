"""
Calendar Pipeline Runner (GENERATE → ENRICH → VALIDATE → STORE)
"""

from datetime import datetime
from typing import Sequence

import pytz

from src.ingestion.generators import GENERATORS, all_generators, get_generator
from src.ingestion.preprocessors.data_enricher import (
    enrich_events_with_data,
    refresh_snapshot_values,
)
from src.pipelines.calendar.aggregator import aggregate
from src.pipelines.calendar.schema import CalendarSnapshot
from src.pipelines.calendar.validate import validate_snapshot
from src.shared.utils import setup_logger
from src.storage.snapshot_store import JsonSnapshotStore

logger = setup_logger(__name__)


# -------------------------------------------------------------------
# Pipeline
# -------------------------------------------------------------------

def run_full(
    store: JsonSnapshotStore,
    sources: Sequence[str] | None = None,
    collector=None,
    reference: datetime | None = None,
    fetch_live: bool = True,
) -> CalendarSnapshot:
    """
    Full aggregation run.

    Parameters:
        store: destination snapshot store
        sources: generator names to run (defaults to all, in registry order)
        collector: FRED collector; None skips value enrichment
        reference: instant the windows are computed from (defaults to now)
        fetch_live: allow the Fed generator to read the live FOMC calendar

    Raises:
        KeyError: unknown source name
        SnapshotValidationError: the new snapshot is malformed; the stored
            snapshot is left untouched
    """
    reference = reference or datetime.now(pytz.UTC)

    # ---------------------------------------------------------------
    # Generate
    # ---------------------------------------------------------------

    if sources:
        # A repeated name runs once
        names = dict.fromkeys(name.lower() for name in sources)
        generators = [
            get_generator(name, fetch_live=fetch_live) if name == "fed"
            else get_generator(name)
            for name in names
        ]
        # Keep registry order regardless of the order names were given in
        order = list(GENERATORS)
        generators.sort(key=lambda g: order.index(g.SOURCE_NAME))
    else:
        generators = all_generators(fetch_live=fetch_live)

    snapshot = aggregate(generators, reference)

    # ---------------------------------------------------------------
    # Enrich
    # ---------------------------------------------------------------

    if collector is not None:
        events = enrich_events_with_data(snapshot.events, collector, reference)
        snapshot = CalendarSnapshot.build(
            events,
            completed_at=datetime.now(pytz.UTC),
            sources=snapshot.sources,
            data_included=True,
        )
    else:
        logger.info("Skipping FRED value enrichment")

    # ---------------------------------------------------------------
    # Validate + persist
    # ---------------------------------------------------------------

    validate_snapshot(snapshot)
    store.write(snapshot)
    return snapshot


def run_data_only(
    store: JsonSnapshotStore,
    collector,
    reference: datetime | None = None,
) -> CalendarSnapshot:
    """
    Refresh actual/previous values of the stored snapshot without
    regenerating dates.

    Raises:
        FileNotFoundError: no snapshot has been stored yet
    """
    snapshot = store.read()
    if snapshot is None:
        raise FileNotFoundError(
            f"No existing snapshot at {store.path}. Run a full aggregation first."
        )

    refreshed = refresh_snapshot_values(snapshot, collector, reference)
    validate_snapshot(refreshed)
    store.write(refreshed)
    return refreshed


def upcoming_high_impact(
    snapshot: CalendarSnapshot, today: str, limit: int = 10
) -> list:
    """First ``limit`` high-impact events dated ``today`` or later."""
    upcoming = [e for e in snapshot.events if e.impact == "high" and e.date >= today]
    return upcoming[:limit]


def health_check(fed=None, collector=None) -> dict[str, bool]:
    """
    Check the live dependencies of a run.

    Parameters:
        fed: generator whose FOMC calendar page is checked; None skips it
        collector: FRED collector; None skips the FRED check

    Returns:
        check name -> passed, for every dependency that was checked
    """
    results = {}
    if fed is not None:
        results["fomc_calendar"] = fed.health_check()
    if collector is not None:
        results["fred"] = collector.health_check()

    for name, ok in results.items():
        logger.info("Health check %s: %s", name, "PASSED" if ok else "FAILED")
    return results
