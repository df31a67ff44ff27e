"""Economic calendar aggregation script.

Runs every release-date generator, optionally fills actual/previous values
from FRED, validates the result and writes the snapshot JSON consumed by
the calendar API.

Usage:
    # Full run with FRED values
    python scripts/run_calendar_aggregation.py

    # Skip FRED values (faster, no API key needed)
    python scripts/run_calendar_aggregation.py --no-data

    # Only refresh FRED values on the existing snapshot
    python scripts/run_calendar_aggregation.py --data-only

    # Check the FOMC calendar page and the FRED API, then exit
    python scripts/run_calendar_aggregation.py --health-check

    # Run selected generators only
    python scripts/run_calendar_aggregation.py --source fed --source bls

    # Reproducible run for a fixed reference day, also exported as CSV
    python scripts/run_calendar_aggregation.py --reference 2025-02-10 --csv data/calendar.csv

Example:
    $ python scripts/run_calendar_aggregation.py --no-data
    [INFO] Running 15 generators
    [INFO] Aggregated 655 events from 15/15 generators (2025-02-03 to 2025-08-29)
    [INFO] Saved 655 events to data/calendar-data.json
    [INFO] SUCCESS: Calendar aggregation complete
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path

import pytz

from src.ingestion.collectors.fred_collector import FREDCollector
from src.ingestion.generators import available_generators, get_generator
from src.pipelines.calendar.run_calendar_pipeline import (
    health_check,
    run_data_only,
    run_full,
    upcoming_high_impact,
)
from src.pipelines.calendar.validate import SnapshotValidationError
from src.shared.config import Config
from src.shared.utils import setup_logger, utc_today
from src.storage.snapshot_store import JsonSnapshotStore


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Build the economic calendar snapshot",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--source",
        action="append",
        choices=available_generators(),
        help="Run only this generator (repeatable). Default: all",
        metavar="NAME",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--no-data",
        action="store_true",
        help="Skip fetching actual/previous values from FRED",
    )
    mode.add_argument(
        "--data-only",
        action="store_true",
        help="Only refresh FRED values on the existing snapshot",
    )

    parser.add_argument(
        "--output",
        type=Path,
        help=f"Snapshot path. Default: {Config.SNAPSHOT_PATH}",
        metavar="PATH",
    )

    parser.add_argument(
        "--mirror",
        type=Path,
        action="append",
        help="Extra copy of the snapshot, written if its directory exists (repeatable)",
        metavar="PATH",
    )

    parser.add_argument(
        "--csv",
        type=Path,
        help="Also export the events as CSV",
        metavar="PATH",
    )

    parser.add_argument(
        "--reference",
        type=str,
        help="Reference day (YYYY-MM-DD, midnight UTC). Default: now",
        metavar="DATE",
    )

    parser.add_argument(
        "--no-live",
        action="store_true",
        help="Do not read the live FOMC calendar page",
    )

    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Bypass the FRED cache and force fresh API calls",
    )

    parser.add_argument(
        "--clear-cache",
        action="store_true",
        help="Clear the FRED cache before fetching",
    )

    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Only check the FOMC calendar page and the FRED API, then exit",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def build_collector(args: argparse.Namespace) -> FREDCollector:
    """Create the FRED collector, clearing its cache first if requested."""
    collector = FREDCollector(use_cache=not args.no_cache)
    if args.clear_cache:
        collector.clear_cache()
    return collector


def main() -> int:
    """Main aggregation script."""
    args = parse_args()

    level = "DEBUG" if args.verbose else Config.LOG_LEVEL
    logger = setup_logger("run_calendar", level=level)

    try:
        if args.reference:
            try:
                reference = pytz.UTC.localize(datetime.strptime(args.reference, "%Y-%m-%d"))
            except ValueError:
                logger.error("Invalid reference date format. Use YYYY-MM-DD")
                return 1
        else:
            reference = datetime.now(pytz.UTC)

        # Health check only
        if args.health_check:
            fed = None if args.no_live else get_generator("fed")
            try:
                collector = FREDCollector(use_cache=False)
            except ValueError as e:
                logger.warning("%s; skipping the FRED check", e)
                collector = None

            if not all(health_check(fed=fed, collector=collector).values()):
                logger.error("Health check: FAILED")
                return 1
            logger.info("Health check complete, exiting")
            return 0

        sources = list(dict.fromkeys(args.source)) if args.source else None
        mirrors = args.mirror if args.mirror is not None else Config.SNAPSHOT_MIRROR_PATHS
        store = JsonSnapshotStore(args.output or Config.SNAPSHOT_PATH, mirrors)

        # Data-only refresh
        if args.data_only:
            logger.info("Data-only mode: refreshing values in %s", store.path)
            collector = build_collector(args)
            snapshot = run_data_only(store, collector, reference)

        # Full run
        else:
            collector = None
            if not args.no_data:
                try:
                    collector = build_collector(args)
                except ValueError as e:
                    logger.warning("%s", e)
                    logger.warning("Continuing without FRED values (use --no-data to silence)")

            logger.info("Running %d generators", len(sources or available_generators()))
            snapshot = run_full(
                store,
                sources=sources,
                collector=collector,
                reference=reference,
                fetch_live=not args.no_live,
            )

        if args.csv:
            store.export_csv(snapshot, args.csv)

        upcoming = upcoming_high_impact(snapshot, utc_today(reference).isoformat())
        logger.info("Upcoming high impact events:")
        if not upcoming:
            logger.info("  (none)")
        for event in upcoming:
            suffix = f" | Prev: {event.previous}" if event.previous else ""
            logger.info(
                "  %s %s | %s %s%s", event.date, event.time, event.currency, event.title, suffix
            )

        logger.info("SUCCESS: Calendar aggregation complete")
        return 0

    except FileNotFoundError as e:
        logger.error("%s", e)
        return 1

    except SnapshotValidationError as e:
        logger.error("Snapshot failed validation, previous snapshot kept: %s", e)
        return 1

    except ValueError as e:
        logger.error("Configuration error: %s", e)
        logger.error("Make sure FRED_API_KEY is set in .env")
        logger.error("Get a free API key at: https://fred.stlouisfed.org/docs/api/api_key.html")
        return 1

    except KeyboardInterrupt:
        logger.warning("Aggregation interrupted by user")
        return 130

    except Exception as e:
        logger.exception("Unexpected error during aggregation: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
