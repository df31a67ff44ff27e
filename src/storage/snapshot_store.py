"""
JSON Snapshot Store
Persists the latest CalendarSnapshot as one JSON document.
"""

import json
from pathlib import Path
from typing import Iterable

from src.pipelines.calendar.schema import CalendarSnapshot
from src.shared.config import Config
from src.shared.utils import setup_logger

logger = setup_logger(__name__)


# -----------------------------
# Store
# -----------------------------

class JsonSnapshotStore:
    """
    File-backed snapshot store.

    Notes:
    - Each write replaces the previous snapshot wholesale
    - Mirrors are written only when their parent directory already exists
      (e.g. a web client's public/ folder that may not be checked out)
    - A missing or unreadable file reads as None
    """

    def __init__(
        self,
        path: Path | None = None,
        mirror_paths: Iterable[Path] | None = None,
    ) -> None:
        self.path = Path(path) if path is not None else Config.SNAPSHOT_PATH
        if mirror_paths is None:
            mirror_paths = Config.SNAPSHOT_MIRROR_PATHS
        self.mirror_paths = tuple(Path(p) for p in mirror_paths)

    def write(self, snapshot: CalendarSnapshot) -> Path:
        """Serialize ``snapshot`` to the primary path and any mirrors."""
        payload = json.dumps(snapshot.to_dict(), indent=2, ensure_ascii=False)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(payload, encoding="utf-8")
        logger.info("Saved %d events to %s", len(snapshot.events), self.path)

        for mirror in self.mirror_paths:
            if not mirror.parent.is_dir():
                logger.debug("Skipping mirror %s (no parent directory)", mirror)
                continue
            mirror.write_text(payload, encoding="utf-8")
            logger.info("Mirrored snapshot to %s", mirror)

        return self.path

    def read(self) -> CalendarSnapshot | None:
        """Load the stored snapshot, or None when there is none."""
        if not self.path.exists():
            return None

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
            return CalendarSnapshot.from_dict(data)
        except (OSError, json.JSONDecodeError, KeyError, TypeError, AttributeError) as e:
            logger.error("Could not load snapshot from %s: %s", self.path, e)
            return None

    def export_csv(self, snapshot: CalendarSnapshot, path: Path) -> Path:
        """Write the snapshot's events as a flat CSV file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        df = snapshot.to_dataframe()
        df.to_csv(path, index=False)
        logger.info("Exported %d events to %s", len(df), path)
        return path
