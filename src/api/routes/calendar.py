"""Calendar API Routes.

Read-only access to the stored snapshot. Aggregation never runs inside a
request; snapshots are produced by the scheduled CLI run.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from src.api.dependencies import get_store
from src.api.models import CalendarResponse, SnapshotStatusResponse
from src.pipelines.calendar.query import CalendarFilters, query_calendar
from src.storage.snapshot_store import JsonSnapshotStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/calendar", tags=["Calendar"])


@router.get("", response_model=CalendarResponse)
def get_calendar(
    currency: Optional[str] = Query(default=None, description="e.g. USD, or 'all'"),
    impact: Optional[str] = Query(default=None, description="high, medium, low, holiday"),
    category: Optional[str] = Query(default=None),
    start: Optional[str] = Query(default=None, description="YYYY-MM-DD, inclusive"),
    end: Optional[str] = Query(default=None, description="YYYY-MM-DD, inclusive"),
    store: JsonSnapshotStore = Depends(get_store),
) -> CalendarResponse:
    """Filter the current snapshot."""
    filters = CalendarFilters(
        currency=currency, impact=impact, category=category, start=start, end=end
    )
    result = query_calendar(store.read(), filters)
    if not result.is_real_data:
        logger.warning("No calendar snapshot available, serving empty placeholder")
    return CalendarResponse.model_validate(result.to_dict())


@router.post("", response_model=SnapshotStatusResponse)
def calendar_status(store: JsonSnapshotStore = Depends(get_store)) -> SnapshotStatusResponse:
    """Report the state of the stored snapshot."""
    snapshot = store.read()
    if snapshot is None:
        return SnapshotStatusResponse(
            success=False,
            message="No calendar data available - run the aggregation to build a snapshot",
            event_count=0,
        )

    return SnapshotStatusResponse(
        success=True,
        message=f"Snapshot built from {len(snapshot.sources)} sources",
        event_count=len(snapshot.events),
        last_updated=snapshot.last_updated,
    )
