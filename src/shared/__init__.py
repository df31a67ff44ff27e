"""Shared utilities and configuration."""

from src.shared.config import Config
from src.shared.utils import setup_logger, to_utc, utc_clock, utc_today

__all__ = ["Config", "setup_logger", "to_utc", "utc_clock", "utc_today"]
