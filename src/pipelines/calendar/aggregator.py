"""
Calendar Aggregator
Runs every generator and merges their events into one CalendarSnapshot.
"""

from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Sequence

import pytz

from src.pipelines.calendar.schema import CalendarSnapshot, EconomicEvent, GeneratorResult
from src.shared.config import Config
from src.shared.utils import setup_logger

logger = setup_logger(__name__)


# -------------------------------------------------------------------
# Public API
# -------------------------------------------------------------------

def aggregate(
    generators: Sequence,
    reference: datetime | None = None,
    now: datetime | None = None,
    max_workers: int | None = None,
) -> CalendarSnapshot:
    """
    Run all generators and build a snapshot.

    Parameters:
        generators: generator instances, in registry order
        reference: instant the generator windows are computed from
                   (defaults to now)
        now: completion timestamp used for lastUpdated (defaults to the
             wall clock once every generator has finished)
        max_workers: thread pool size (defaults to Config.MAX_WORKERS)

    Returns:
        CalendarSnapshot with events sorted by (date, time). Ties keep
        registry order, then each generator's emission order.

    A failing generator contributes zero events; the run continues.
    """
    reference = reference or datetime.now(pytz.UTC)
    workers = max(1, min(max_workers or Config.MAX_WORKERS, len(generators) or 1))

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(_run_isolated, g, reference) for g in generators]
        # Collected in submission order, not completion order
        results = [f.result() for f in futures]

    events: list[EconomicEvent] = []
    for result in results:
        if result.ok:
            events.extend(result.events)
        else:
            logger.error("Generator '%s' failed: %s", result.source, result.error)

    # list.sort is stable
    events.sort(key=lambda e: (e.date, e.time))

    completed_at = now or datetime.now(pytz.UTC)
    snapshot = CalendarSnapshot.build(
        events,
        completed_at=completed_at,
        sources=[r.source for r in results],
    )

    _log_summary(snapshot, results)
    return snapshot


# -------------------------------------------------------------------
# Internal helpers
# -------------------------------------------------------------------

def _run_isolated(generator, reference: datetime) -> GeneratorResult:
    source = getattr(generator, "SOURCE_NAME", type(generator).__name__)
    try:
        result = generator.run(reference)
    except Exception as e:
        logger.error("Generator '%s' raised: %s", source, e, exc_info=True)
        return GeneratorResult.failure(source, f"{type(e).__name__}: {e}")

    if not isinstance(result, GeneratorResult):
        return GeneratorResult.failure(source, f"unexpected result type {type(result).__name__}")
    return result


def _log_summary(snapshot: CalendarSnapshot, results: list[GeneratorResult]) -> None:
    failed = [r.source for r in results if not r.ok]
    logger.info(
        "Aggregated %d events from %d/%d generators (%s to %s)",
        len(snapshot.events),
        len(results) - len(failed),
        len(results),
        snapshot.date_range.start,
        snapshot.date_range.end,
    )
    if failed:
        logger.warning("Failed generators: %s", ", ".join(failed))

    by_source = Counter(r.source for r in results for _ in r.events)
    for source, count in by_source.items():
        logger.info("  %-10s %d events", source, count)

    by_category = Counter(e.category for e in snapshot.events)
    for category, count in sorted(by_category.items()):
        logger.debug("  category %-14s %d", category, count)
