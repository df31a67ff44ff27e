"""Configuration management for the economic calendar engine."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _split_paths(raw: str | None) -> tuple[Path, ...]:
    if not raw:
        return ()
    return tuple(Path(p) for p in raw.split(os.pathsep) if p.strip())


class Config:
    """Application configuration."""

    # Project paths
    ROOT_DIR = Path(__file__).parent.parent.parent
    DATA_DIR = ROOT_DIR / "data"
    LOGS_DIR = ROOT_DIR / "logs"

    # Snapshot storage
    SNAPSHOT_PATH: Path = Path(os.getenv("SNAPSHOT_PATH", str(DATA_DIR / "calendar-data.json")))
    SNAPSHOT_MIRROR_PATHS: tuple[Path, ...] = _split_paths(os.getenv("SNAPSHOT_MIRROR_PATHS"))

    # API Keys
    FRED_API_KEY: Optional[str] = os.getenv("FRED_API_KEY")

    # Aggregation settings
    FETCH_TIMEOUT: float = float(os.getenv("FETCH_TIMEOUT", "8.0"))
    MAX_WORKERS: int = int(os.getenv("MAX_WORKERS", "4"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Refresh trigger (workflow dispatch)
    CRON_SECRET: Optional[str] = os.getenv("CRON_SECRET")
    GITHUB_TOKEN: Optional[str] = os.getenv("GITHUB_TOKEN")
    GITHUB_REPO_OWNER: Optional[str] = os.getenv("GITHUB_REPO_OWNER")
    GITHUB_REPO_NAME: Optional[str] = os.getenv("GITHUB_REPO_NAME")
    GITHUB_WORKFLOW: str = os.getenv("GITHUB_WORKFLOW", "update-calendar.yml")
    GITHUB_REF: str = os.getenv("GITHUB_REF", "master")

    # HTTP API
    API_CORS_ORIGINS: list[str] = [
        o.strip() for o in os.getenv("API_CORS_ORIGINS", "*").split(",") if o.strip()
    ]

    @classmethod
    def validate(cls) -> None:
        """Validate required configuration."""
        if not cls.FRED_API_KEY:
            raise ValueError("FRED_API_KEY not set in environment")
        if cls.FETCH_TIMEOUT <= 0:
            raise ValueError("FETCH_TIMEOUT must be positive")
        if cls.MAX_WORKERS < 1:
            raise ValueError("MAX_WORKERS must be at least 1")

    @classmethod
    def dispatch_configured(cls) -> bool:
        """Whether workflow dispatch credentials are all present."""
        return bool(cls.GITHUB_TOKEN and cls.GITHUB_REPO_OWNER and cls.GITHUB_REPO_NAME)


config = Config()
