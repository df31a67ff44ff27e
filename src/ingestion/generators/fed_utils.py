"""Federal Reserve calendar page utilities.

Provides the HTTP session and the FOMC calendar parser used by the Fed
generator's live path.
"""

import calendar
import re
from dataclasses import dataclass
from datetime import date

import requests
from bs4 import BeautifulSoup
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

BASE_URL = "https://www.federalreserve.gov"
FOMC_CALENDAR_URL = BASE_URL + "/monetarypolicy/fomccalendars.htm"

_MONTHS: dict[str, int] = {
    name.lower()[:3]: number for number, name in enumerate(calendar.month_name) if name
}

_YEAR_RE = re.compile(r"\b(20\d{2})\b")
_DAY_RE = re.compile(r"\d{1,2}")
# "January 28-29, 2025" style mentions in free text
_TEXT_MEETING_RE = re.compile(
    r"([A-Z][a-z]+(?:/[A-Z][a-z]+)?)\s+(\d{1,2})(?:\s*[-–]\s*(\d{1,2}))?(\*)?,?\s*(\d{4})"
)
_SKIP_MARKERS = ("notation vote", "unscheduled", "conference call")


@dataclass(frozen=True)
class ScrapedMeeting:
    """A meeting read off the FOMC calendar page (decision day = last day)."""

    day: date
    with_projections: bool = False


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def month_number(text: str) -> int | None:
    """Map a month name or abbreviation to its number.

    For ranges such as "Apr/May" the final month is used.

    Example:
        >>> month_number("Apr/May")
        5
        >>> month_number("Sept")
        9
        >>> month_number("Agenda") is None
        True
    """
    name = text.split("/")[-1].strip().rstrip(".").lower()
    number = _MONTHS.get(name[:3])
    if len(name) < 3 or number is None:
        return None
    return number if calendar.month_name[number].lower().startswith(name) else None


def meeting_from_parts(year: int, month_text: str, date_text: str) -> ScrapedMeeting | None:
    """Build a meeting from the month cell and the date cell of one row.

    Example:
        >>> meeting_from_parts(2026, "March", "17-18*")
        ScrapedMeeting(day=datetime.date(2026, 3, 18), with_projections=True)
    """
    lowered = date_text.lower()
    if any(marker in lowered for marker in _SKIP_MARKERS):
        return None

    month = month_number(month_text)
    days = _DAY_RE.findall(date_text)
    if month is None or not days:
        return None

    try:
        day = date(year, month, int(days[-1]))
    except ValueError:
        return None
    return ScrapedMeeting(day=day, with_projections="*" in date_text)


def _scan_text(text: str) -> list[ScrapedMeeting]:
    meetings = []
    for match in _TEXT_MEETING_RE.finditer(text):
        month_text, first_day, last_day, star, year = match.groups()
        day_text = f"{first_day}-{last_day}" if last_day else first_day
        meeting = meeting_from_parts(int(year), month_text, day_text + (star or ""))
        if meeting is not None:
            meetings.append(meeting)
    return meetings


def parse_fomc_calendar(html: str | bytes) -> list[ScrapedMeeting]:
    """Extract scheduled meetings from the FOMC calendar page.

    Structured ``fomc-meeting`` rows inside year panels are read first; if
    none are found the page text is scanned for "Month DD-DD, YYYY" mentions.

    Returns:
        Meetings sorted by day, unique by day.
    """
    soup = BeautifulSoup(html, "html.parser")

    meetings: list[ScrapedMeeting] = []
    for panel in soup.select("div.panel"):
        heading = panel.select_one(".panel-heading")
        year_match = _YEAR_RE.search(heading.get_text(" ", strip=True)) if heading else None
        if not year_match:
            continue
        year = int(year_match.group(1))

        for row in panel.select("div.fomc-meeting"):
            month_el = row.select_one(".fomc-meeting__month")
            date_el = row.select_one(".fomc-meeting__date")
            if month_el is None or date_el is None:
                continue
            meeting = meeting_from_parts(
                year, month_el.get_text(strip=True), date_el.get_text(" ", strip=True)
            )
            if meeting is not None:
                meetings.append(meeting)

    if not meetings:
        meetings = _scan_text(soup.get_text(" ", strip=True))

    unique: dict[date, ScrapedMeeting] = {}
    for meeting in meetings:
        existing = unique.get(meeting.day)
        if existing is None or (meeting.with_projections and not existing.with_projections):
            unique[meeting.day] = meeting
    return [unique[d] for d in sorted(unique)]


# ---------------------------------------------------------------------------
# HTTP Session
# ---------------------------------------------------------------------------


def create_fed_session() -> requests.Session:
    """Create the requests session used for the FOMC calendar page.

    A fetch is a single attempt bounded by the caller's timeout: transport
    retries are disabled and 5xx responses are returned as-is, so a failure
    surfaces at once and the next scheduled run retries.

    Returns:
        Configured requests session with:
            - no retries (connect, read or status)
            - the calendar bot User-Agent

    Example:
        >>> session = create_fed_session()
        >>> response = session.get(FOMC_CALENDAR_URL, timeout=8)
    """
    session = requests.Session()

    retry = Retry(total=0, raise_on_status=False)

    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)

    session.headers.update(
        {
            "User-Agent": "Mozilla/5.0 (EconTimeline Calendar Bot)",
        }
    )

    return session
