"""
Calendar Snapshot Validation
Offline checks run before a snapshot is persisted.
"""

import pandas as pd

from src.pipelines.calendar.schema import IMPACT_TIERS, CalendarSnapshot

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class SnapshotValidationError(ValueError):
    """Raised when a snapshot violates its structural rules."""


def validate_snapshot(snapshot: CalendarSnapshot) -> None:
    """
    Validate a snapshot's events.

    Enforces:
    - YYYY-MM-DD dates and HH:MM times
    - known impact tiers
    - ordering by (date, time)
    - unique (date, title) within each source
    - dateRange matching the event dates

    Does NOT:
    - check cross-source duplicates (they are allowed)
    - modify the snapshot
    """
    df = snapshot.to_dataframe()
    if df.empty:
        return

    # ---------------------------------------------------------------
    # Formats
    # ---------------------------------------------------------------

    bad_dates = df.loc[~df["date"].str.match(DATE_PATTERN), "date"]
    if not bad_dates.empty:
        raise SnapshotValidationError(f"Malformed dates: {sorted(set(bad_dates))[:5]}")

    parsed = pd.to_datetime(df["date"], format="%Y-%m-%d", errors="coerce")
    if parsed.isna().any():
        invalid = df.loc[parsed.isna(), "date"]
        raise SnapshotValidationError(f"Invalid calendar dates: {sorted(set(invalid))[:5]}")

    bad_times = df.loc[~df["time"].str.match(TIME_PATTERN), "time"]
    if not bad_times.empty:
        raise SnapshotValidationError(f"Malformed times: {sorted(set(bad_times))[:5]}")

    unknown_impact = set(df["impact"]) - set(IMPACT_TIERS)
    if unknown_impact:
        raise SnapshotValidationError(f"Unknown impact tiers: {sorted(unknown_impact)}")

    # ---------------------------------------------------------------
    # Ordering
    # ---------------------------------------------------------------

    order = list(zip(df["date"], df["time"]))
    if order != sorted(order):
        raise SnapshotValidationError("Events are not sorted by (date, time)")

    # ---------------------------------------------------------------
    # Within-source duplicates
    # ---------------------------------------------------------------

    duplicated = df.duplicated(subset=["source", "date", "title"], keep=False)
    if duplicated.any():
        dupes = df.loc[duplicated, ["source", "date", "title"]].drop_duplicates()
        raise SnapshotValidationError(
            f"Duplicate (date, title) within a source: {dupes.to_dict('records')[:5]}"
        )

    # ---------------------------------------------------------------
    # Range
    # ---------------------------------------------------------------

    expected = (df["date"].min(), df["date"].max())
    actual = (snapshot.date_range.start, snapshot.date_range.end)
    if expected != actual:
        raise SnapshotValidationError(
            f"dateRange {actual} does not match event dates {expected}"
        )
