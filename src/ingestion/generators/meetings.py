"""Meeting-table entries shared by the central-bank generators."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Meeting:
    """One scheduled policy meeting.

    ``with_report`` marks meetings that also publish the bank's forecast
    document (Fed SEP, BoE/BoC report, RBNZ statement). ``minutes`` is the
    publication day of the minutes when the bank pre-announces it.
    """

    day: date
    with_report: bool = False
    minutes: date | None = None


def last_meeting(table: tuple[Meeting, ...]) -> date:
    return max(m.day for m in table)
