"""Tests for the JSON snapshot store."""

import json

import pandas as pd

from src.storage.snapshot_store import JsonSnapshotStore


class TestJsonSnapshotStore:
    """Test snapshot persistence."""

    def test_read_missing_returns_none(self, store):
        assert store.read() is None

    def test_write_then_read(self, store, sample_snapshot):
        path = store.write(sample_snapshot)

        assert path == store.path
        assert store.read() == sample_snapshot

    def test_json_layout(self, store, sample_snapshot):
        store.write(sample_snapshot)
        data = json.loads(store.path.read_text(encoding="utf-8"))

        assert data["lastUpdated"] == sample_snapshot.last_updated
        assert data["version"] == "2.0"
        assert data["dateRange"] == {"start": "2025-02-07", "end": "2025-02-20"}
        assert data["events"][2]["sourceUrl"] == "https://www.rba.gov.au/monetary-policy/"
        assert "forecast" in data["events"][0]

    def test_write_replaces_previous(self, store, sample_snapshot, event_factory, reference):
        store.write(sample_snapshot)
        replacement = type(sample_snapshot).build([event_factory()], completed_at=reference)
        store.write(replacement)

        assert store.read() == replacement

    def test_creates_parent_directory(self, tmp_path, sample_snapshot):
        store = JsonSnapshotStore(tmp_path / "nested" / "dir" / "calendar.json", mirror_paths=())
        store.write(sample_snapshot)
        assert store.path.exists()

    def test_corrupt_file_reads_as_none(self, store, caplog):
        store.path.write_text("{broken", encoding="utf-8")
        assert store.read() is None
        assert "Could not load snapshot" in caplog.text

    def test_default_paths_from_config(self, tmp_path, monkeypatch):
        monkeypatch.setattr("src.shared.config.Config.SNAPSHOT_PATH", tmp_path / "default.json")
        monkeypatch.setattr("src.shared.config.Config.SNAPSHOT_MIRROR_PATHS", ())

        store = JsonSnapshotStore()
        assert store.path == tmp_path / "default.json"
        assert store.mirror_paths == ()


class TestMirrors:
    """Test mirrored copies."""

    def test_mirror_written_when_directory_exists(self, tmp_path, sample_snapshot):
        public = tmp_path / "client" / "public"
        public.mkdir(parents=True)
        store = JsonSnapshotStore(tmp_path / "data.json", mirror_paths=[public / "data.json"])

        store.write(sample_snapshot)

        assert (public / "data.json").read_text() == store.path.read_text()

    def test_mirror_skipped_without_directory(self, tmp_path, sample_snapshot):
        missing = tmp_path / "absent" / "data.json"
        store = JsonSnapshotStore(tmp_path / "data.json", mirror_paths=[missing])

        store.write(sample_snapshot)

        assert not missing.exists()
        assert not missing.parent.exists()


class TestExportCsv:
    """Test CSV export."""

    def test_export(self, store, sample_snapshot, tmp_path):
        path = store.export_csv(sample_snapshot, tmp_path / "out" / "calendar.csv")

        df = pd.read_csv(path)
        assert len(df) == 4
        assert list(df.columns[:4]) == ["date", "time", "currency", "title"]
        assert df["currency"].tolist() == ["USD", "USD", "AUD", "GBP"]
