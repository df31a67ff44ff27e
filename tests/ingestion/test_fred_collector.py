"""Unit tests for the FRED latest-observations collector."""

import json
from unittest.mock import Mock, patch

import pandas as pd
import pytest

from src.ingestion.collectors.fred_collector import FREDCollector, Observation

# ---------------------------------------------------------------------------
# Sample Data
# ---------------------------------------------------------------------------


def make_monthly_series(values, start="2024-10-01") -> pd.Series:
    """Create a monthly FRED-style series (oldest first, as fredapi returns it)."""
    index = pd.date_range(start=start, periods=len(values), freq="MS")
    return pd.Series(values, index=index, dtype="float64")


PAYEMS = make_monthly_series([158500.0, 158800.0, 159000.0])
UNRATE = make_monthly_series([4.1, float("nan"), 4.0, 4.1])


@pytest.fixture
def mock_fred():
    with patch("src.ingestion.collectors.fred_collector.Fred") as mock_fred_class:
        fred = Mock()
        mock_fred_class.return_value = fred
        yield fred


@pytest.fixture
def collector(mock_fred, tmp_path):
    with patch("src.ingestion.collectors.fred_collector.time.sleep"):
        yield FREDCollector(api_key="test_key", cache_dir=tmp_path / "cache")


# ---------------------------------------------------------------------------
# Initialization
# ---------------------------------------------------------------------------


class TestFREDCollectorInit:
    """Test FREDCollector initialization."""

    def test_init_with_api_key(self, mock_fred, tmp_path):
        collector = FREDCollector(api_key="test_key_12345", cache_dir=tmp_path / "cache")
        assert collector._api_key == "test_key_12345"
        assert collector._cache_dir.exists()

    def test_init_without_api_key_raises(self, monkeypatch):
        monkeypatch.setattr("src.shared.config.Config.FRED_API_KEY", None)
        with pytest.raises(ValueError, match="FRED API key is required"):
            FREDCollector()

    def test_init_with_placeholder_api_key_raises(self, monkeypatch):
        monkeypatch.setattr("src.shared.config.Config.FRED_API_KEY", "your_fred_api_key_here")
        with pytest.raises(ValueError, match="FRED API key is required"):
            FREDCollector()

    def test_default_cache_dir(self, mock_fred, tmp_path, monkeypatch):
        monkeypatch.setattr("src.shared.config.Config.DATA_DIR", tmp_path)
        monkeypatch.setattr("src.shared.config.Config.FRED_API_KEY", "test_key")
        collector = FREDCollector()
        assert collector._cache_dir == tmp_path / "cache" / "fred"

    def test_no_cache_dir_created_when_disabled(self, mock_fred, tmp_path):
        cache_dir = tmp_path / "unused"
        FREDCollector(api_key="test_key", cache_dir=cache_dir, use_cache=False)
        assert not cache_dir.exists()


# ---------------------------------------------------------------------------
# Health Check
# ---------------------------------------------------------------------------


class TestHealthCheck:
    """Test health_check method."""

    def test_health_check_success(self, collector, mock_fred):
        mock_fred.get_series_info.return_value = {"id": "UNRATE"}
        assert collector.health_check() is True
        mock_fred.get_series_info.assert_called_once_with("UNRATE")

    def test_health_check_failure(self, collector, mock_fred):
        mock_fred.get_series_info.side_effect = Exception("API Error")
        assert collector.health_check() is False


# ---------------------------------------------------------------------------
# get_latest_observations
# ---------------------------------------------------------------------------


class TestGetLatestObservations:
    """Test get_latest_observations method."""

    def test_newest_first(self, collector, mock_fred):
        mock_fred.get_series.return_value = PAYEMS

        observations = collector.get_latest_observations("PAYEMS")

        assert observations == [
            Observation(date="2024-12-01", value="159000"),
            Observation(date="2024-11-01", value="158800"),
            Observation(date="2024-10-01", value="158500"),
        ]
        args, kwargs = mock_fred.get_series.call_args
        assert args == ("PAYEMS",)
        assert "observation_start" in kwargs

    def test_count_limits_result(self, collector, mock_fred):
        mock_fred.get_series.return_value = PAYEMS
        assert len(collector.get_latest_observations("PAYEMS", count=2)) == 2

    def test_missing_values_use_marker(self, collector, mock_fred):
        mock_fred.get_series.return_value = UNRATE
        values = [o.value for o in collector.get_latest_observations("UNRATE", count=4)]
        assert values == ["4.1", "4", ".", "4.1"]

    def test_unsorted_series_sorted_by_date(self, collector, mock_fred):
        mock_fred.get_series.return_value = PAYEMS.iloc[::-1]
        assert collector.get_latest_observations("PAYEMS")[0].value == "159000"

    def test_empty_series(self, collector, mock_fred):
        mock_fred.get_series.return_value = pd.Series(dtype="float64")
        assert collector.get_latest_observations("PAYEMS") == []

    def test_invalid_series_id(self, collector, mock_fred):
        mock_fred.get_series.side_effect = ValueError("Bad Request. The series does not exist.")
        with pytest.raises(ValueError, match="Invalid FRED series ID 'NOPE'"):
            collector.get_latest_observations("NOPE")

    def test_api_error_propagates(self, collector, mock_fred):
        mock_fred.get_series.side_effect = ConnectionError("timeout")
        with pytest.raises(ConnectionError):
            collector.get_latest_observations("PAYEMS")

    def test_argument_validation(self, collector):
        with pytest.raises(ValueError, match="series_id cannot be empty"):
            collector.get_latest_observations("  ")
        with pytest.raises(ValueError, match="count must be >= 1"):
            collector.get_latest_observations("PAYEMS", count=0)


# ---------------------------------------------------------------------------
# Caching
# ---------------------------------------------------------------------------


class TestCaching:
    """Test JSON cache."""

    def test_second_call_served_from_cache(self, collector, mock_fred):
        mock_fred.get_series.return_value = PAYEMS

        first = collector.get_latest_observations("PAYEMS")
        second = collector.get_latest_observations("PAYEMS")

        assert first == second
        assert mock_fred.get_series.call_count == 1

    def test_cache_file_layout(self, collector, mock_fred):
        mock_fred.get_series.return_value = PAYEMS
        collector.get_latest_observations("PAYEMS")

        data = json.loads(collector._get_cache_path("PAYEMS").read_text())
        assert data["series_id"] == "PAYEMS"
        assert data["observations"][0] == {"date": "2024-12-01", "value": "159000"}

    def test_corrupt_cache_ignored(self, collector, mock_fred):
        collector._get_cache_path("PAYEMS").write_text("{not json")
        mock_fred.get_series.return_value = PAYEMS

        assert collector.get_latest_observations("PAYEMS")[0].value == "159000"
        assert mock_fred.get_series.call_count == 1

    def test_use_cache_false_always_fetches(self, mock_fred, tmp_path):
        mock_fred.get_series.return_value = PAYEMS
        with patch("src.ingestion.collectors.fred_collector.time.sleep"):
            collector = FREDCollector(api_key="test_key", cache_dir=tmp_path, use_cache=False)
            collector.get_latest_observations("PAYEMS")
            collector.get_latest_observations("PAYEMS")
        assert mock_fred.get_series.call_count == 2

    def test_clear_cache(self, collector, mock_fred):
        mock_fred.get_series.return_value = PAYEMS
        collector.get_latest_observations("PAYEMS")
        collector.get_latest_observations("UNRATE")

        collector.clear_cache("PAYEMS")
        assert not collector._get_cache_path("PAYEMS").exists()
        assert collector._get_cache_path("UNRATE").exists()

        collector.clear_cache()
        assert list(collector._cache_dir.glob("*.json")) == []
