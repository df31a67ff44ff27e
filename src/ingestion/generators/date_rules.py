"""Calendar arithmetic shared by the release-date generators.

Every rule here encodes a publicly known release *pattern* ("first Friday",
"third business day", "day 12, moved off the weekend") rather than a
published date. Authoritative tables live in the individual generators.

Weekends are the only non-working days the release rules know; public
holidays never move a release. The holiday helpers at the bottom compute
the US market holidays themselves.

Example:
    >>> from src.ingestion.generators.date_rules import nth_weekday, FRIDAY
    >>> nth_weekday(2025, 3, FRIDAY, 1)
    datetime.date(2025, 3, 7)
"""

import calendar
from datetime import date, timedelta

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)

# ---------------------------------------------------------------------------
# Month arithmetic
# ---------------------------------------------------------------------------


def add_months(day: date, months: int) -> date:
    """Shift ``day`` by whole months, clamping to the target month's length.

    Example:
        >>> add_months(date(2025, 8, 31), 6)
        datetime.date(2026, 2, 28)
        >>> add_months(date(2025, 1, 15), -3)
        datetime.date(2024, 10, 15)
    """
    index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    return date(year, month, min(day.day, calendar.monthrange(year, month)[1]))


def month_offset(day: date, offset: int) -> tuple[int, int]:
    """Return (year, month) ``offset`` months away from ``day``'s month."""
    shifted = add_months(day.replace(day=1), offset)
    return shifted.year, shifted.month


def last_day_of_month(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])


# ---------------------------------------------------------------------------
# Weekend correction
# ---------------------------------------------------------------------------


def is_weekend(day: date) -> bool:
    return day.weekday() >= SATURDAY


def shift_weekend_forward(day: date) -> date:
    """Saturday moves forward two days, Sunday one; weekdays are unchanged."""
    if day.weekday() == SATURDAY:
        return day + timedelta(days=2)
    if day.weekday() == SUNDAY:
        return day + timedelta(days=1)
    return day


def shift_weekend_backward(day: date) -> date:
    """Saturday moves back one day, Sunday two (to the preceding Friday)."""
    if day.weekday() == SATURDAY:
        return day - timedelta(days=1)
    if day.weekday() == SUNDAY:
        return day - timedelta(days=2)
    return day


# ---------------------------------------------------------------------------
# Ordinal rules
# ---------------------------------------------------------------------------


def day_of_month(year: int, month: int, day: int) -> date:
    """Day ``day`` of the month (clamped to month end), shifted forward off weekends."""
    clamped = min(day, calendar.monthrange(year, month)[1])
    return shift_weekend_forward(date(year, month, clamped))


def first_weekday_on_or_after(year: int, month: int, day: int, weekday: int) -> date:
    """First ``weekday`` falling on or after ``day`` of the month.

    Example:
        >>> first_weekday_on_or_after(2025, 1, 15, WEDNESDAY)
        datetime.date(2025, 1, 15)
    """
    start = date(year, month, day)
    return start + timedelta(days=(weekday - start.weekday()) % 7)


def next_weekday_on_or_after(day: date, weekday: int) -> date:
    return day + timedelta(days=(weekday - day.weekday()) % 7)


def nth_weekday(year: int, month: int, weekday: int, n: int) -> date:
    """The ``n``-th (1-based) ``weekday`` of the month.

    Raises:
        ValueError: If the month has fewer than ``n`` such weekdays.
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    result = first_weekday_on_or_after(year, month, 1, weekday) + timedelta(weeks=n - 1)
    if result.month != month:
        raise ValueError(f"{calendar.month_name[month]} {year} has no weekday #{n}")
    return result


def last_weekday(year: int, month: int, weekday: int) -> date:
    """The last ``weekday`` of the month.

    Example:
        >>> last_weekday(2025, 5, MONDAY)
        datetime.date(2025, 5, 26)
    """
    last = last_day_of_month(year, month)
    return last - timedelta(days=(last.weekday() - weekday) % 7)


def weekdays_in_month(year: int, month: int, weekday: int) -> list[date]:
    """Every occurrence of ``weekday`` in the month, in order."""
    current = first_weekday_on_or_after(year, month, 1, weekday)
    days = []
    while current.month == month:
        days.append(current)
        current += timedelta(weeks=1)
    return days


def nth_business_day(year: int, month: int, n: int) -> date:
    """The ``n``-th Monday-to-Friday day of the month."""
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    current = date(year, month, 1)
    count = 0
    while current.month == month:
        if not is_weekend(current):
            count += 1
            if count == n:
                return current
        current += timedelta(days=1)
    raise ValueError(f"{calendar.month_name[month]} {year} has fewer than {n} business days")


def last_business_day(year: int, month: int) -> date:
    """Last day of the month, moved back to Friday when it lands on a weekend."""
    return shift_weekend_backward(last_day_of_month(year, month))


# ---------------------------------------------------------------------------
# Holidays
# ---------------------------------------------------------------------------


def observed_holiday(day: date) -> date:
    """Fixed-date holiday as observed: Saturday moves back to Friday, Sunday on to Monday."""
    if day.weekday() == SATURDAY:
        return day - timedelta(days=1)
    if day.weekday() == SUNDAY:
        return day + timedelta(days=1)
    return day


def easter_sunday(year: int) -> date:
    """Western Easter Sunday (anonymous Gregorian algorithm).

    Example:
        >>> easter_sunday(2025)
        datetime.date(2025, 4, 20)
    """
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)
