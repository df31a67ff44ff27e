"""API Request/Response Models.

Pydantic schemas for the calendar endpoints. Field names are snake_case in
Python and camelCase on the wire.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ─── Calendar ────────────────────────────────────────────────────────────


class DateRangeModel(BaseModel):
    start: str
    end: str


class CalendarMeta(CamelModel):
    total_events: int = Field(alias="totalEvents")
    date_range: DateRangeModel = Field(alias="dateRange")


class CalendarResponse(CamelModel):
    """Filtered calendar query result."""

    # Event dicts keep their own camelCase layout and optional fields
    events: list[dict[str, Any]]
    last_updated: str = Field(alias="lastUpdated")
    is_real_data: bool = Field(alias="isRealData")
    meta: CalendarMeta


class SnapshotStatusResponse(CamelModel):
    """Status of the stored snapshot (POST /calendar)."""

    success: bool
    message: str
    event_count: int = Field(default=0, alias="eventCount")
    last_updated: Optional[str] = Field(default=None, alias="lastUpdated")


# ─── Refresh trigger ─────────────────────────────────────────────────────


class DispatchResponse(CamelModel):
    """Outcome of a workflow dispatch request."""

    success: bool
    message: str
    triggered_at: Optional[str] = Field(default=None, alias="triggeredAt")
    error: Optional[str] = None


# ─── Health ──────────────────────────────────────────────────────────────


class HealthResponse(BaseModel):
    status: str = "ok"
    timestamp: str
    snapshot: str
