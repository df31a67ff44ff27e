"""Shared utility functions for the calendar engine."""

import logging
from datetime import date, datetime
from pathlib import Path

import pytz


def setup_logger(
    name: str, log_file: Path | None = None, level: int | str = logging.INFO
) -> logging.Logger:
    """Set up logger with console and file handlers.

    Calling this twice for the same name reconfigures the level but does not
    stack duplicate handlers.

    Args:
        name: Logger name
        log_file: Optional path to log file
        level: Logging level (int constant or string name like 'DEBUG', 'INFO')

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Convert string level to int if needed
    if isinstance(level, str):
        numeric_level = getattr(logging, level.upper(), logging.INFO)
        logger.setLevel(numeric_level)
    else:
        logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # Console handler
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    # File handler
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def to_utc(dt: datetime, from_tz: str = "US/Eastern") -> datetime:
    """Convert datetime to UTC."""
    if dt.tzinfo is None:
        dt = pytz.timezone(from_tz).localize(dt)
    return dt.astimezone(pytz.UTC)


def utc_clock(day: date, local_time: str, from_tz: str) -> str:
    """Convert a local wall-clock release time on ``day`` to a UTC ``HH:MM``.

    Example:
        >>> utc_clock(date(2025, 2, 18), "14:30", "Australia/Sydney")
        '03:30'
        >>> utc_clock(date(2025, 7, 2), "08:30", "America/New_York")
        '12:30'
    """
    hour, minute = (int(part) for part in local_time.split(":"))
    local = datetime(day.year, day.month, day.day, hour, minute)
    return to_utc(local, from_tz).strftime("%H:%M")


def utc_today(now: datetime | None = None) -> date:
    """Return the UTC calendar date of ``now`` (defaults to the current instant)."""
    now = now or datetime.now(pytz.UTC)
    if now.tzinfo is None:
        return now.date()
    return now.astimezone(pytz.UTC).date()
