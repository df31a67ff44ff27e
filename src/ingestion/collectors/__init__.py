"""Collectors package."""

from src.ingestion.collectors.fred_collector import FREDCollector, Observation

__all__ = ["FREDCollector", "Observation"]
