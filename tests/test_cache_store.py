# tests/test_cache_store.py
"""
Tests for indexnow_sync.cache.store module.

Key tests verify that:
1. Storage setup is idempotent and never clobbers an existing cache
2. Corrupt or missing cache files load as an empty mapping
3. save() fully replaces the file (no merge)
"""

import json
import os
import stat
from pathlib import Path

import pytest

from indexnow_sync.cache.store import CACHE_FILENAME, CacheStore, resolve_cache_path


class TestResolveCachePath:
    """Tests for resolve_cache_path."""

    def test_defaults_to_project_root(self, tmp_path: Path):
        assert resolve_cache_path(None, tmp_path) == tmp_path / CACHE_FILENAME

    def test_cache_dir_relative_to_project_root(self, tmp_path: Path):
        path = resolve_cache_path(".cache/indexnow", tmp_path)

        assert path == (tmp_path / ".cache" / "indexnow").resolve() / CACHE_FILENAME

    def test_absolute_cache_dir(self, tmp_path: Path):
        target = tmp_path / "elsewhere"

        assert resolve_cache_path(str(target), "/unused") == target.resolve() / CACHE_FILENAME

    def test_defaults_to_cwd(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert resolve_cache_path() == Path.cwd() / CACHE_FILENAME


class TestEnsureStorageReady:
    """Tests for CacheStore.ensure_storage_ready."""

    def test_creates_directory_and_empty_cache(self, tmp_path: Path):
        path = tmp_path / "nested" / "dir" / CACHE_FILENAME
        store = CacheStore(path)

        store.ensure_storage_ready()

        assert path.exists()
        assert json.loads(path.read_text(encoding="utf-8")) == {}

    def test_idempotent(self, tmp_path: Path):
        store = CacheStore(tmp_path / CACHE_FILENAME)

        store.ensure_storage_ready()
        store.ensure_storage_ready()

        assert store.load() == {}

    def test_keeps_existing_cache(self, tmp_path: Path):
        path = tmp_path / CACHE_FILENAME
        path.write_text(json.dumps({"https://example.com/": "sha256:a"}), encoding="utf-8")
        store = CacheStore(path)

        store.ensure_storage_ready()

        assert store.load() == {"https://example.com/": "sha256:a"}


class TestLoad:
    """Tests for CacheStore.load."""

    def test_missing_file_is_empty(self, tmp_path: Path):
        assert CacheStore(tmp_path / CACHE_FILENAME).load() == {}

    def test_invalid_json_is_empty(self, tmp_path: Path):
        path = tmp_path / CACHE_FILENAME
        path.write_text("{not json", encoding="utf-8")

        assert CacheStore(path).load() == {}

    def test_non_object_is_empty(self, tmp_path: Path):
        path = tmp_path / CACHE_FILENAME
        path.write_text('["https://example.com/"]', encoding="utf-8")

        assert CacheStore(path).load() == {}

    def test_binary_garbage_is_empty(self, tmp_path: Path):
        path = tmp_path / CACHE_FILENAME
        path.write_bytes(b"\xff\xfe\x00garbage")

        assert CacheStore(path).load() == {}

    def test_directory_in_place_of_file_is_empty(self, tmp_path: Path):
        path = tmp_path / CACHE_FILENAME
        path.mkdir()

        assert CacheStore(path).load() == {}

    def test_drops_non_string_entries(self, tmp_path: Path):
        path = tmp_path / CACHE_FILENAME
        path.write_text(
            json.dumps({"https://example.com/a/": "sha256:a", "https://example.com/b/": 42}),
            encoding="utf-8",
        )

        assert CacheStore(path).load() == {"https://example.com/a/": "sha256:a"}

    def test_corruption_is_logged(self, tmp_path: Path, caplog):
        path = tmp_path / CACHE_FILENAME
        path.write_text("oops", encoding="utf-8")

        with caplog.at_level("WARNING", logger="indexnow_sync"):
            CacheStore(path).load()

        assert "cache file unreadable" in caplog.text


class TestSave:
    """Tests for CacheStore.save."""

    def test_round_trip(self, tmp_path: Path):
        store = CacheStore(tmp_path / CACHE_FILENAME)
        cache = {
            "https://example.com/": "sha256:" + "0" * 64,
            "https://example.com/blog/ünïcode/": "sha256:" + "f" * 64,
        }

        store.save(cache)

        assert store.load() == cache

    def test_full_replace(self, tmp_path: Path):
        store = CacheStore(tmp_path / CACHE_FILENAME)
        store.save({"https://example.com/old/": "sha256:old"})

        store.save({"https://example.com/new/": "sha256:new"})

        assert store.load() == {"https://example.com/new/": "sha256:new"}

    def test_writes_plain_json_object(self, tmp_path: Path):
        path = tmp_path / CACHE_FILENAME
        CacheStore(path).save({"https://example.com/": "sha256:a"})

        assert json.loads(path.read_text(encoding="utf-8")) == {"https://example.com/": "sha256:a"}

    def test_leaves_no_temp_files(self, tmp_path: Path):
        store = CacheStore(tmp_path / CACHE_FILENAME)
        store.save({"https://example.com/": "sha256:a"})

        assert [p.name for p in tmp_path.iterdir()] == [CACHE_FILENAME]

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
    def test_keeps_existing_file_mode(self, tmp_path: Path):
        path = tmp_path / CACHE_FILENAME
        path.write_text("{}", encoding="utf-8")
        path.chmod(0o640)

        CacheStore(path).save({"https://example.com/": "sha256:a"})

        assert stat.S_IMODE(path.stat().st_mode) == 0o640

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
    def test_new_file_follows_umask(self, tmp_path: Path):
        path = tmp_path / CACHE_FILENAME
        old_umask = os.umask(0o022)
        try:
            CacheStore(path).save({"https://example.com/": "sha256:a"})
        finally:
            os.umask(old_umask)

        assert stat.S_IMODE(path.stat().st_mode) == 0o644

    def test_overwrites_corrupt_file(self, tmp_path: Path):
        path = tmp_path / CACHE_FILENAME
        path.write_text("garbage", encoding="utf-8")
        store = CacheStore(path)

        store.save({"https://example.com/": "sha256:a"})

        assert store.load() == {"https://example.com/": "sha256:a"}


class TestClear:
    """Tests for CacheStore.clear."""

    def test_removes_file(self, tmp_path: Path):
        store = CacheStore(tmp_path / CACHE_FILENAME)
        store.save({"https://example.com/": "sha256:a"})

        assert store.clear() is True
        assert not store.path.exists()

    def test_missing_file(self, tmp_path: Path):
        assert CacheStore(tmp_path / CACHE_FILENAME).clear() is False
