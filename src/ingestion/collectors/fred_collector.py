"""FRED Time-Series Collector.

Fetches the most recent observations of the FRED series that back the
calendar's actual/previous values:
    - PAYEMS: Total nonfarm payrolls
    - UNRATE: Unemployment rate
    - CPIAUCSL / CPILFESL: CPI, headline and core
    - ...see src.ingestion.preprocessors.data_enricher.EVENT_TO_SERIES

Missing observations are reported with FRED's "." marker so the value
formatter can treat them uniformly.

Implements a short-lived JSON cache and throttles requests to stay within
the API rate limit (120 calls/min).

API Documentation: https://fred.stlouisfed.org/docs/api/
Get API Key: https://fred.stlouisfed.org/docs/api/api_key.html

Example:
    >>> from src.ingestion.collectors.fred_collector import FREDCollector
    >>>
    >>> collector = FREDCollector()
    >>> latest, prior, two_prior = collector.get_latest_observations("UNRATE")
    >>> latest.value
    '4.1'
"""

import json
import math
import time
from dataclasses import asdict, dataclass
from datetime import datetime, timedelta
from pathlib import Path

from fredapi import Fred

from src.shared.config import Config
from src.shared.utils import setup_logger

MISSING_VALUE = "."


@dataclass(frozen=True)
class Observation:
    """One FRED observation; ``value`` is the raw string ("." when missing)."""

    date: str
    value: str


class FREDCollector:
    """Client for the latest observations of FRED series.

    Uses the official FRED API via the fredapi package.

    Rate Limits:
        FRED API allows 120 requests per minute. This collector automatically
        throttles requests to stay within limits.
    """

    SOURCE_NAME = "fred"

    # Rate limiting: 120 calls/min = 1 call every 0.5 seconds
    MIN_REQUEST_INTERVAL = 0.5  # seconds
    CACHE_EXPIRY_HOURS = 6
    # Long enough to hold three observations of a quarterly series
    LOOKBACK_DAYS = 3 * 366

    def __init__(
        self,
        api_key: str | None = None,
        cache_dir: Path | None = None,
        use_cache: bool = True,
        log_file: Path | None = None,
    ) -> None:
        """Initialize the FRED collector.

        Args:
            api_key: FRED API key (defaults to Config.FRED_API_KEY).
            cache_dir: Directory for JSON cache (defaults to data/cache/fred).
            use_cache: Whether to read and write the JSON cache.
            log_file: Optional path for file-based logging.

        Raises:
            ValueError: If api_key is not provided and not in Config.
        """
        self.logger = setup_logger(self.__class__.__name__, log_file)

        self._api_key = api_key or Config.FRED_API_KEY
        if not self._api_key or self._api_key == "your_fred_api_key_here":
            raise ValueError(
                "FRED API key is required. Set FRED_API_KEY in .env or pass api_key parameter. "
                "Get a free key at https://fred.stlouisfed.org/docs/api/api_key.html"
            )

        self._fred = Fred(api_key=self._api_key)
        self._use_cache = use_cache
        self._cache_dir = cache_dir or Config.DATA_DIR / "cache" / "fred"
        if self._use_cache:
            self._cache_dir.mkdir(parents=True, exist_ok=True)

        self._last_request_time: float = 0.0

        self.logger.info("FREDCollector initialized, cache_dir=%s", self._cache_dir)

    def health_check(self) -> bool:
        """Verify FRED API is reachable.

        Returns:
            True if API responds successfully, False otherwise.
        """
        try:
            # Try fetching info for a well-known series
            self._fred.get_series_info("UNRATE")
            return True
        except Exception as e:
            self.logger.error("FRED health check failed: %s", e)
            return False

    # ------------------------------------------------------------------
    # Observations
    # ------------------------------------------------------------------

    def get_latest_observations(self, series_id: str, count: int = 3) -> list[Observation]:
        """Get the ``count`` most recent observations of a series, newest first.

        Args:
            series_id: FRED series identifier (e.g., "PAYEMS", "UNRATE").
            count: Number of observations to return (fewer if the series is short).

        Returns:
            Observations ordered newest first; empty if FRED returned nothing.

        Raises:
            ValueError: If series_id is empty or unknown to FRED.
            Exception: If the API request fails.
        """
        if not series_id or not series_id.strip():
            raise ValueError("series_id cannot be empty")
        if count < 1:
            raise ValueError(f"count must be >= 1, got {count}")

        if self._use_cache:
            cached = self._load_from_cache(series_id)
            if cached is not None and len(cached) >= count:
                self.logger.debug("Loaded %s from cache", series_id)
                return cached[:count]

        # Respect rate limits
        self._throttle_request()

        start = datetime.now() - timedelta(days=self.LOOKBACK_DAYS)
        try:
            series = self._fred.get_series(
                series_id, observation_start=start.strftime("%Y-%m-%d")
            )
        except ValueError as e:
            self.logger.error("Invalid series ID '%s': %s", series_id, e)
            raise ValueError(f"Invalid FRED series ID '{series_id}'") from e
        except Exception as e:
            self.logger.error("Failed to fetch series '%s': %s", series_id, e)
            raise

        if series is None or series.empty:
            self.logger.warning("No data returned for series %s", series_id)
            return []

        series = series.sort_index()
        observations = [
            Observation(date=index.strftime("%Y-%m-%d"), value=_raw_value(value))
            for index, value in series.items()
        ]
        observations.reverse()

        if self._use_cache:
            self._save_to_cache(series_id, observations)
        return observations[:count]

    # ------------------------------------------------------------------
    # Caching
    # ------------------------------------------------------------------

    def _get_cache_path(self, series_id: str) -> Path:
        return self._cache_dir / f"{series_id}.json"

    def _load_from_cache(self, series_id: str) -> list[Observation] | None:
        cache_path = self._get_cache_path(series_id)
        if not cache_path.exists():
            return None

        try:
            cache_age = datetime.now().timestamp() - cache_path.stat().st_mtime
            if cache_age > self.CACHE_EXPIRY_HOURS * 3600:
                self.logger.debug("Cache expired for %s", series_id)
                return None

            with open(cache_path, encoding="utf-8") as f:
                cache_data = json.load(f)
            return [Observation(**item) for item in cache_data["observations"]]

        except (json.JSONDecodeError, KeyError, TypeError) as e:
            self.logger.warning("Invalid cache for %s: %s", series_id, e)
            return None

    def _save_to_cache(self, series_id: str, observations: list[Observation]) -> None:
        cache_path = self._get_cache_path(series_id)
        try:
            cache_data = {
                "series_id": series_id,
                "cached_at": datetime.now().isoformat(),
                "observations": [asdict(o) for o in observations],
            }
            with open(cache_path, "w", encoding="utf-8") as f:
                json.dump(cache_data, f, indent=2)
            self.logger.debug("Cached %s (%d observations)", series_id, len(observations))
        except OSError as e:
            self.logger.warning("Failed to cache %s: %s", series_id, e)

    def clear_cache(self, series_id: str | None = None) -> None:
        """Clear cache for a specific series or all series."""
        if series_id:
            cache_path = self._get_cache_path(series_id)
            if cache_path.exists():
                cache_path.unlink()
                self.logger.info("Cleared cache for %s", series_id)
        else:
            for cache_file in self._cache_dir.glob("*.json"):
                cache_file.unlink()
            self.logger.info("Cleared all cache")

    # ------------------------------------------------------------------
    # Rate limiting
    # ------------------------------------------------------------------

    def _throttle_request(self) -> None:
        """Ensure minimum interval between API requests to respect rate limits."""
        elapsed = time.time() - self._last_request_time
        if elapsed < self.MIN_REQUEST_INTERVAL:
            time.sleep(self.MIN_REQUEST_INTERVAL - elapsed)
        self._last_request_time = time.time()


def _raw_value(value) -> str:
    if value is None:
        return MISSING_VALUE
    number = float(value)
    if math.isnan(number):
        return MISSING_VALUE
    return repr(number) if not number.is_integer() else str(int(number))
