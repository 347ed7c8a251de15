"""
Candidate Store Tests - OSPA Scorer
tests/test_candidate_store.py

JSON file store against a temp directory; Redis store against a mocked client.
"""
import json
import pytest
from unittest.mock import patch, MagicMock

import redis

from ospa.core.exceptions import EntityNotFoundException, StoreConnectionException
from ospa.models.candidate import Candidate
from ospa.repositories.json_store import JsonFileCandidateStore
from ospa.repositories.redis_store import RedisCandidateStore


def _candidate(name):
    return Candidate(name=name, school="Araullo High School", division="Manila")


class TestJsonFileCandidateStore:
    """Tests for the JSON file backend."""

    def test_empty_store(self, store):
        assert store.get() == []
        assert store.get_last_sync() is None

    def test_put_appends_in_insertion_order(self, store):
        for name in ("Ana", "Ben", "Cora"):
            store.put(_candidate(name))
        assert [c.name for c in store.get()] == ["Ana", "Ben", "Cora"]

    def test_put_replaces_same_id_in_place(self, store):
        first, second = _candidate("Ana"), _candidate("Ben")
        store.put(first)
        store.put(second)

        first.name = "Ana Reyes"
        store.put(first)

        stored = store.get()
        assert len(stored) == 2
        assert stored[0].id == first.id
        assert stored[0].name == "Ana Reyes"

    def test_get_by_id(self, store, candidate):
        store.put(candidate)
        assert store.get_by_id(candidate.id).total_score == 36.0
        with pytest.raises(EntityNotFoundException):
            store.get_by_id("missing")

    def test_delete(self, store):
        keep, drop = _candidate("Ana"), _candidate("Ben")
        store.put(keep)
        store.put(drop)
        assert store.delete(drop.id) is True
        assert [c.id for c in store.get()] == [keep.id]

    def test_delete_missing_id(self, store):
        store.put(_candidate("Ana"))
        assert store.delete("missing") is False
        assert len(store.get()) == 1

    def test_file_layout(self, store, candidate):
        store.put(candidate)
        store.set_last_sync("2026-10-19T08:15:00+00:00")

        data = json.loads(store.path.read_text(encoding="utf-8"))
        assert data["ospa_last_sync"] == "2026-10-19T08:15:00+00:00"
        assert data["ospa_candidates"][0]["id"] == candidate.id
        assert data["ospa_candidates"][0]["totalScore"] == 36.0

    def test_stored_total_is_recomputed_on_read(self, store, candidate):
        store.put(candidate)
        data = json.loads(store.path.read_text(encoding="utf-8"))
        data["ospa_candidates"][0]["totalScore"] = 999
        store.path.write_text(json.dumps(data), encoding="utf-8")
        assert store.get()[0].total_score == 36.0

    def test_custom_keys(self, tmp_path):
        s = JsonFileCandidateStore(path=tmp_path / "s.json", key="cands", last_sync_key="synced")
        s.put(_candidate("Ana"))
        s.set_last_sync("2026-01-01T00:00:00+00:00")
        assert set(json.loads(s.path.read_text(encoding="utf-8"))) == {"cands", "synced"}

    def test_corrupt_file_raises(self, store):
        store.path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StoreConnectionException):
            store.get()
        assert store.ping() is False

    def test_non_array_value_raises(self, store):
        store.path.write_text(json.dumps({"ospa_candidates": {"id": "x"}}), encoding="utf-8")
        with pytest.raises(StoreConnectionException):
            store.get()

    def test_invalid_record_raises(self, store):
        bad = {"ospa_candidates": [{"interview": {"principles": 7}}]}
        store.path.write_text(json.dumps(bad), encoding="utf-8")
        with pytest.raises(StoreConnectionException):
            store.get()

    def test_ping(self, store):
        assert store.ping() is True


class TestRedisCandidateStore:
    """Tests for the Redis backend."""

    def test_init_uses_url(self):
        with patch('ospa.repositories.redis_store.redis.from_url') as mock_from_url:
            RedisCandidateStore(url="redis://cache:6379/2")
            mock_from_url.assert_called_once_with(
                "redis://cache:6379/2",
                decode_responses=True,
                socket_connect_timeout=5,
            )

    def test_put_writes_json_array(self):
        with patch('ospa.repositories.redis_store.redis.from_url') as mock_from_url:
            mock_client = MagicMock()
            mock_client.get.return_value = None
            mock_from_url.return_value = mock_client

            store = RedisCandidateStore()
            c = _candidate("Ana")
            store.put(c)

            key, value = mock_client.set.call_args[0]
            assert key == "ospa_candidates"
            assert json.loads(value)[0]["id"] == c.id

    def test_get_decodes_records(self, candidate):
        with patch('ospa.repositories.redis_store.redis.from_url') as mock_from_url:
            mock_client = MagicMock()
            mock_client.get.return_value = json.dumps([candidate.to_storage()])
            mock_from_url.return_value = mock_client

            stored = RedisCandidateStore().get()
            assert len(stored) == 1
            assert stored[0].id == candidate.id
            assert stored[0].total_score == 36.0

    def test_last_sync(self):
        with patch('ospa.repositories.redis_store.redis.from_url') as mock_from_url:
            mock_client = MagicMock()
            mock_client.get.return_value = json.dumps("2026-10-19T08:15:00+00:00")
            mock_from_url.return_value = mock_client

            store = RedisCandidateStore()
            assert store.get_last_sync() == "2026-10-19T08:15:00+00:00"
            mock_client.get.assert_called_with("ospa_last_sync")

    def test_connection_error_raises_store_exception(self):
        with patch('ospa.repositories.redis_store.redis.from_url') as mock_from_url:
            mock_client = MagicMock()
            mock_client.get.side_effect = redis.ConnectionError("Connection refused")
            mock_from_url.return_value = mock_client

            with pytest.raises(StoreConnectionException):
                RedisCandidateStore().get()

    def test_ping_failure(self):
        with patch('ospa.repositories.redis_store.redis.from_url') as mock_from_url:
            mock_client = MagicMock()
            mock_client.ping.side_effect = redis.ConnectionError("Connection refused")
            mock_from_url.return_value = mock_client

            assert RedisCandidateStore().ping() is False
