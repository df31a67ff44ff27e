"""Preprocessors that turn raw observations into calendar values."""

from src.ingestion.preprocessors.data_enricher import (
    EVENT_TO_SERIES,
    enrich_events_with_data,
    refresh_snapshot_values,
)
from src.ingestion.preprocessors.value_formatter import UnitPolicy, format_value

__all__ = [
    "EVENT_TO_SERIES",
    "UnitPolicy",
    "enrich_events_with_data",
    "format_value",
    "refresh_snapshot_values",
]
