"""Tests for FOMC calendar page utilities (fed_utils.py)."""

from datetime import date

import requests

from src.ingestion.generators.fed_utils import (
    BASE_URL,
    FOMC_CALENDAR_URL,
    ScrapedMeeting,
    create_fed_session,
    meeting_from_parts,
    month_number,
    parse_fomc_calendar,
)

CALENDAR_HTML = """
<html><body>
<div class="panel panel-default">
  <div class="panel-heading"><h4>2027 FOMC Meetings</h4></div>
  <div class="row fomc-meeting">
    <div class="fomc-meeting__month"><strong>January</strong></div>
    <div class="fomc-meeting__date">26-27</div>
  </div>
  <div class="row fomc-meeting">
    <div class="fomc-meeting__month"><strong>March</strong></div>
    <div class="fomc-meeting__date">16-17*</div>
  </div>
  <div class="row fomc-meeting">
    <div class="fomc-meeting__month"><strong>Apr/May</strong></div>
    <div class="fomc-meeting__date">30-1</div>
  </div>
  <div class="row fomc-meeting">
    <div class="fomc-meeting__month"><strong>August</strong></div>
    <div class="fomc-meeting__date">16 (unscheduled)</div>
  </div>
</div>
<div class="panel panel-default">
  <div class="panel-heading"><h4>Meeting calendars and information</h4></div>
  <div class="row fomc-meeting">
    <div class="fomc-meeting__month">June</div>
    <div class="fomc-meeting__date">8-9</div>
  </div>
</div>
</body></html>
"""


class TestConstants:
    """Test module constants."""

    def test_calendar_url(self):
        """FOMC_CALENDAR_URL should point to the Federal Reserve site."""
        assert BASE_URL == "https://www.federalreserve.gov"
        assert FOMC_CALENDAR_URL.startswith(BASE_URL)
        assert FOMC_CALENDAR_URL.endswith("fomccalendars.htm")


class TestMonthNumber:
    """Test month name parsing."""

    def test_full_and_abbreviated_names(self):
        assert month_number("January") == 1
        assert month_number("Sept") == 9
        assert month_number("Dec.") == 12

    def test_range_uses_final_month(self):
        """'Apr/May' meetings end in May."""
        assert month_number("Apr/May") == 5

    def test_not_a_month(self):
        assert month_number("Agenda") is None
        assert month_number("Ma") is None


class TestMeetingFromParts:
    """Test building meetings from table cells."""

    def test_decision_day_is_last_day(self):
        meeting = meeting_from_parts(2027, "January", "26-27")
        assert meeting == ScrapedMeeting(day=date(2027, 1, 27), with_projections=False)

    def test_asterisk_marks_projections(self):
        meeting = meeting_from_parts(2026, "March", "17-18*")
        assert meeting.day == date(2026, 3, 18)
        assert meeting.with_projections is True

    def test_unscheduled_rows_skipped(self):
        assert meeting_from_parts(2027, "August", "16 (unscheduled)") is None
        assert meeting_from_parts(2027, "August", "16 (notation vote)") is None

    def test_invalid_day_returns_none(self):
        assert meeting_from_parts(2027, "February", "30-31") is None
        assert meeting_from_parts(2027, "February", "TBD") is None


class TestParseFomcCalendar:
    """Test FOMC calendar page parsing."""

    def test_structured_rows(self):
        """Rows inside year panels are parsed; panels without a year are ignored."""
        meetings = parse_fomc_calendar(CALENDAR_HTML)
        assert meetings == [
            ScrapedMeeting(day=date(2027, 1, 27)),
            ScrapedMeeting(day=date(2027, 3, 17), with_projections=True),
            ScrapedMeeting(day=date(2027, 5, 1)),
        ]

    def test_text_fallback(self):
        """Without structured rows, free text mentions are scanned."""
        html = (
            "<p>The Committee will meet January 26-27, 2027 and "
            "March 16-17*, 2027.</p>"
        )
        meetings = parse_fomc_calendar(html)
        assert [m.day for m in meetings] == [date(2027, 1, 27), date(2027, 3, 17)]
        assert meetings[1].with_projections is True

    def test_duplicates_collapse_keeping_projections(self):
        html = "<p>March 16-17, 2027. March 16-17*, 2027.</p>"
        meetings = parse_fomc_calendar(html)
        assert meetings == [ScrapedMeeting(day=date(2027, 3, 17), with_projections=True)]

    def test_empty_page(self):
        assert parse_fomc_calendar("<html></html>") == []


class TestCreateFedSession:
    """Test HTTP session factory."""

    def test_session_never_retries(self):
        session = create_fed_session()
        assert isinstance(session, requests.Session)
        for url in (BASE_URL, "http://www.federalreserve.gov"):
            retry = session.get_adapter(url).max_retries
            assert retry.total == 0
            assert not retry.status_forcelist
            assert retry.raise_on_status is False
        assert "Mozilla" in session.headers["User-Agent"]
