"""Tests for the JSON-file stores."""

import json
from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from reelboard.db import AccountStore, ContentStore, StorageError, get_data_dir
from reelboard.db.json_store import JsonFileStore
from reelboard.db.models import AccountsSnapshot, ContentRecord


class TestJsonFileStore:
    """Tests for JsonFileStore."""

    def test_missing_file_returns_default(self, tmp_path):
        store = JsonFileStore(tmp_path / "missing.json", default=[])

        assert store.read() == []

    def test_corrupt_file_returns_default(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text("{not json")

        assert JsonFileStore(path, default=[]).read() == []

    def test_write_then_read(self, tmp_path):
        store = JsonFileStore(tmp_path / "doc.json", default={})

        store.write({"a": 1})

        assert store.read() == {"a": 1}

    def test_write_creates_directory(self, tmp_path):
        store = JsonFileStore(tmp_path / "nested" / "doc.json", default={})

        store.write({"a": 1})

        assert (tmp_path / "nested" / "doc.json").exists()

    def test_failed_write_keeps_previous_file(self, tmp_path):
        store = JsonFileStore(tmp_path / "doc.json", default={})
        store.write({"version": 1})

        with patch("reelboard.db.json_store.os.replace", side_effect=OSError("read-only")):
            with pytest.raises(StorageError, match="read-only"):
                store.write({"version": 2})

        assert store.read() == {"version": 1}
        assert [p.name for p in tmp_path.iterdir()] == ["doc.json"]

    def test_check_writable(self, tmp_path):
        assert JsonFileStore(tmp_path / "doc.json", default={}).check_writable() is None

    def test_check_writable_missing_directory(self, tmp_path):
        store = JsonFileStore(tmp_path / "gone" / "doc.json", default={})

        assert "does not exist" in store.check_writable()


class TestContentStore:
    """Tests for ContentStore."""

    def test_empty_when_no_file(self, content_store):
        assert content_store.load() == []

    def test_round_trip_uses_camel_case(self, content_store):
        record = ContentRecord(
            id="1",
            title="Garden tour",
            due_date="2026-03-04",
            tiktok_url="https://tiktok.com/video/1",
            last_imported=datetime(2026, 3, 1, tzinfo=timezone.utc),
        )

        content_store.save([record])

        raw = json.loads(content_store.path.read_text())
        assert raw[0]["dueDate"] == "2026-03-04"
        assert raw[0]["tiktokUrl"] == "https://tiktok.com/video/1"
        assert content_store.load() == [record]

    def test_unreadable_entry_survives_save(self, content_store):
        orphan = {"title": "no id", "legacy": 1}
        content_store.path.write_text(json.dumps([{"id": "ok", "title": "Fine"}, orphan]))

        records = content_store.load()
        assert [r.id for r in records] == ["ok"]

        content_store.save(records)

        saved = json.loads(content_store.path.read_text())
        assert [entry.get("id") for entry in saved] == ["ok", None]
        assert saved[1] == orphan

    def test_unknown_status_and_null_metrics_load(self, content_store):
        content_store.path.write_text(json.dumps([
            {"id": "bad", "title": "Old idea", "status": "published", "views": None},
        ]))

        [record] = content_store.load()

        assert record.status == "published"
        assert record.views == 0
        content_store.save([record])
        assert json.loads(content_store.path.read_text())[0]["status"] == "published"

    def test_non_array_document_ignored(self, content_store):
        content_store.path.write_text(json.dumps({"id": "1"}))

        assert content_store.load() == []

    def test_data_dir_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DATA_DIR", str(tmp_path))

        assert get_data_dir() == tmp_path
        assert ContentStore().path == tmp_path / "data.json"


class TestAccountStore:
    """Tests for AccountStore."""

    def test_empty_snapshot_when_no_file(self, account_store):
        assert account_store.load() == AccountsSnapshot()

    def test_round_trip(self, account_store, tmp_path):
        synced = datetime(2026, 3, 1, 12, tzinfo=timezone.utc)
        snapshot = AccountsSnapshot(tiktok={"follower_count": 10}, last_synced=synced)

        account_store.save(snapshot)

        raw = json.loads((tmp_path / "accounts.json").read_text())
        assert "lastSynced" in raw
        loaded = account_store.load()
        assert loaded.tiktok == {"follower_count": 10}
        assert loaded.last_synced == synced

    def test_invalid_file_gives_empty_snapshot(self, account_store, tmp_path):
        (tmp_path / "accounts.json").write_text(json.dumps(["not", "a", "dict"]))

        assert account_store.load() == AccountsSnapshot()
