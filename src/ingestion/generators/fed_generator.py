"""Federal Reserve (FOMC) release generator.

Meeting dates come from the FOMC table below. Meetings published on the
Fed's calendar page after the table's last entry are picked up by the live
path, which fetches https://www.federalreserve.gov/monetarypolicy/fomccalendars.htm
with a bounded timeout and degrades to "no live meetings" on any failure.

Events per meeting:
    - FOMC Rate Decision (14:00 ET)
    - Fed Chair Press Conference (14:30 ET)
    - FOMC Economic Projections (14:00 ET, SEP meetings only)
    - FOMC Meeting Minutes (14:00 ET, three weeks later)

Example:
    >>> from datetime import datetime, timezone
    >>> generator = FedGenerator(fetch_live=False)
    >>> events = generator.generate(datetime(2025, 3, 1, tzinfo=timezone.utc))
    >>> events[0].title
    'FOMC Rate Decision'
"""

from datetime import date, timedelta
from pathlib import Path
from typing import Iterable

import requests

from src.ingestion.generators.base_generator import BaseGenerator, Release
from src.ingestion.generators.fed_utils import (
    FOMC_CALENDAR_URL,
    ScrapedMeeting,
    create_fed_session,
    parse_fomc_calendar,
)
from src.ingestion.generators.meetings import Meeting, last_meeting
from src.pipelines.calendar.schema import EconomicEvent
from src.shared.config import Config

MINUTES_LAG = timedelta(days=21)

RATE_DECISION = Release("FOMC Rate Decision", "14:00", "high", "central_bank", FOMC_CALENDAR_URL)
PRESS_CONFERENCE = Release(
    "Fed Chair Press Conference", "14:30", "high", "central_bank", FOMC_CALENDAR_URL
)
PROJECTIONS = Release(
    "FOMC Economic Projections", "14:00", "high", "central_bank", FOMC_CALENDAR_URL
)
MINUTES = Release("FOMC Meeting Minutes", "14:00", "medium", "central_bank", FOMC_CALENDAR_URL)

FOMC_MEETINGS: tuple[Meeting, ...] = (
    Meeting(date(2025, 1, 29), minutes=date(2025, 2, 19)),
    Meeting(date(2025, 3, 19), with_report=True, minutes=date(2025, 4, 9)),
    Meeting(date(2025, 5, 7), minutes=date(2025, 5, 28)),
    Meeting(date(2025, 6, 18), with_report=True, minutes=date(2025, 7, 9)),
    Meeting(date(2025, 7, 30), minutes=date(2025, 8, 20)),
    Meeting(date(2025, 9, 17), with_report=True, minutes=date(2025, 10, 8)),
    Meeting(date(2025, 10, 29), minutes=date(2025, 11, 19)),
    Meeting(date(2025, 12, 10), with_report=True, minutes=date(2025, 12, 31)),
    Meeting(date(2026, 1, 28), minutes=date(2026, 2, 18)),
    Meeting(date(2026, 3, 18), with_report=True, minutes=date(2026, 4, 8)),
    Meeting(date(2026, 4, 29), minutes=date(2026, 5, 20)),
    Meeting(date(2026, 6, 17), with_report=True, minutes=date(2026, 7, 8)),
    Meeting(date(2026, 7, 29), minutes=date(2026, 8, 19)),
    Meeting(date(2026, 9, 16), with_report=True, minutes=date(2026, 10, 7)),
    Meeting(date(2026, 10, 28), minutes=date(2026, 11, 18)),
    Meeting(date(2026, 12, 9), with_report=True, minutes=date(2026, 12, 30)),
)


class FedGenerator(BaseGenerator):
    """FOMC decisions, press conferences, projections and minutes."""

    SOURCE_NAME = "fed"
    CURRENCY = "USD"
    COUNTRY = "US"
    TIMEZONE = "America/New_York"

    LOOKBACK_DAYS = 7
    LOOKAHEAD_MONTHS = 6

    def __init__(
        self,
        fetch_live: bool = True,
        session: requests.Session | None = None,
        page_html: str | None = None,
        timeout: float | None = None,
        log_file: Path | None = None,
    ) -> None:
        """Initialize the Fed generator.

        Args:
            fetch_live: Whether to consult the FOMC calendar page at all.
            session: HTTP session (defaults to a retrying session).
            page_html: Pre-fetched calendar page; skips the network when given.
            timeout: Request timeout in seconds (defaults to Config.FETCH_TIMEOUT).
            log_file: Optional path for file-based logging.
        """
        super().__init__(log_file=log_file)
        self.fetch_live = fetch_live
        self.page_html = page_html
        self.timeout = timeout if timeout is not None else Config.FETCH_TIMEOUT
        self.session = session or create_fed_session()

    # ------------------------------------------------------------------
    # BaseGenerator interface
    # ------------------------------------------------------------------

    def _candidates(self, today: date) -> Iterable[EconomicEvent]:
        last_table_day = last_meeting(FOMC_MEETINGS)
        covered = self.check_table_horizon("FOMC_MEETINGS", last_table_day, today)

        for meeting in FOMC_MEETINGS:
            yield from self._meeting_events(meeting)

        if not self.fetch_live and self.page_html is None:
            return

        live = [m for m in self.fetch_live_meetings() if m.day > last_table_day]
        if live:
            self.logger.info("Using %d live FOMC meetings past the table", len(live))
        elif not covered:
            self.logger.warning("No live FOMC meetings found past %s", last_table_day)

        for scraped in live:
            meeting = Meeting(
                scraped.day,
                with_report=scraped.with_projections,
                minutes=scraped.day + MINUTES_LAG,
            )
            yield from self._meeting_events(meeting)

    def health_check(self) -> bool:
        """Check the FOMC calendar page responds."""
        try:
            response = self.session.head(FOMC_CALENDAR_URL, timeout=self.timeout)
            return response.status_code == 200
        except Exception as e:
            self.logger.error("Health check failed: %s", e)
            return False

    # ------------------------------------------------------------------
    # Live path
    # ------------------------------------------------------------------

    def fetch_live_meetings(self) -> list[ScrapedMeeting]:
        """Read meetings off the FOMC calendar page.

        Returns:
            Parsed meetings, or an empty list on network/parse failure.
        """
        try:
            html = self.page_html
            if html is None:
                response = self.session.get(FOMC_CALENDAR_URL, timeout=self.timeout)
                response.raise_for_status()
                html = response.text
            meetings = parse_fomc_calendar(html)
        except Exception as e:
            self.logger.error("Failed to fetch %s: %s", FOMC_CALENDAR_URL, e)
            return []

        self.logger.debug("Parsed %d meetings from FOMC calendar", len(meetings))
        return meetings

    # ------------------------------------------------------------------
    # Event construction
    # ------------------------------------------------------------------

    def _meeting_events(self, meeting: Meeting) -> list[EconomicEvent]:
        events = [
            self.make_event(meeting.day, RATE_DECISION),
            self.make_event(meeting.day, PRESS_CONFERENCE),
        ]
        if meeting.with_report:
            events.append(self.make_event(meeting.day, PROJECTIONS))
        if meeting.minutes is not None:
            events.append(self.make_event(meeting.minutes, MINUTES))
        return events
