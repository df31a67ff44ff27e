"""Display formatting for raw statistical observations.

Turns a raw FRED-style observation (string or number, "." for missing)
plus a unit policy into the short strings shown in the calendar:

    >>> format_value("3.3", "3.1", UnitPolicy("pct_change", "%"))
    '+6.5%'
    >>> format_value("159000", "158800", UnitPolicy("change", "K"))
    '+200K'
    >>> format_value("7744", None, UnitPolicy("level", "M"))
    '7.7M'
    >>> format_value(".", "3.1", UnitPolicy("level", "%")) is None
    True
"""

import math
from dataclasses import dataclass

VALID_UNITS = ("level", "pct_change", "change")
VALID_LABELS = ("", "%", "K", "M", "B")

MISSING_MARKER = "."


@dataclass(frozen=True)
class UnitPolicy:
    """How a series is displayed.

    unit:
        level       - the value itself with the label as suffix
        pct_change  - percent change versus the previous observation
        change      - absolute difference versus the previous observation
    label:
        "%", "K", "M" or "B" suffix. "M" and "B" divide by 1000 because the
        underlying series are published in the next-smaller unit.
    """

    unit: str = "level"
    label: str = ""

    def __post_init__(self) -> None:
        if self.unit not in VALID_UNITS:
            raise ValueError(f"Unknown unit '{self.unit}', expected one of {VALID_UNITS}")
        if self.label not in VALID_LABELS:
            raise ValueError(f"Unknown label '{self.label}', expected one of {VALID_LABELS}")


def parse_observation(raw) -> float | None:
    """Convert a raw observation to float; missing or non-numeric input gives None."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw or raw == MISSING_MARKER:
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def _signed(value: float, decimals: int) -> str:
    value = round(value, decimals)
    if value == 0:
        value = 0.0
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.{decimals}f}"


def format_value(raw, previous, policy: UnitPolicy) -> str | None:
    """Format one observation according to ``policy``.

    Args:
        raw: Latest observation ("." / None / "" mean missing).
        previous: The observation before it; required by change-type policies.
        policy: Unit policy of the series.

    Returns:
        Display string, or None when the value (or a required previous value)
        is missing.
    """
    value = parse_observation(raw)
    if value is None:
        return None

    if policy.unit == "pct_change":
        prior = parse_observation(previous)
        if prior is None or prior == 0:
            return None
        return _signed((value - prior) / abs(prior) * 100, 1) + "%"

    if policy.unit == "change":
        prior = parse_observation(previous)
        if prior is None:
            return None
        suffix = "K" if policy.label == "K" else ""
        return _signed(value - prior, 0) + suffix

    # level
    if policy.label == "%":
        return f"{value:.1f}%"
    if policy.label == "K":
        return f"{value:.0f}K"
    if policy.label in ("M", "B"):
        return f"{value / 1000:.1f}{policy.label}"
    return f"{value:.1f}"
