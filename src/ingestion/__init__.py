"""Data ingestion module - release generators, collectors, and preprocessors."""

from src.ingestion.collectors import FREDCollector
from src.ingestion.generators import BaseGenerator, available_generators, get_generator

__all__ = [
    "BaseGenerator",
    "FREDCollector",
    "available_generators",
    "get_generator",
]
