"""FastAPI dependencies."""

from typing import Optional

from src.storage.snapshot_store import JsonSnapshotStore

_store: Optional[JsonSnapshotStore] = None


def get_store() -> JsonSnapshotStore:
    """Return (or create) the process-wide snapshot store."""
    global _store
    if _store is None:
        _store = JsonSnapshotStore()
    return _store
