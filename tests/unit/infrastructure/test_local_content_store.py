"""
Unit tests for LocalContentStore and ContentStoreFactory.
"""

import pytest

from files_manager.domain.errors import StoreUnavailableError
from files_manager.infrastructure.content_store_factory import (
    DEFAULT_FOLDER_PATH,
    ContentStoreFactory,
)
from files_manager.infrastructure.local_content_store import LocalContentStore


@pytest.fixture
def store(tmp_path):
    return LocalContentStore(str(tmp_path / "files"))


def test_write_creates_missing_directory(store, tmp_path):
    store.write("abc", b"hello")

    assert (tmp_path / "files" / "abc").read_bytes() == b"hello"
    assert store.exists("abc")
    assert store.read("abc") == b"hello"


def test_write_recreates_removed_directory(store, tmp_path):
    store.write("first", b"1")
    (tmp_path / "files" / "first").unlink()
    (tmp_path / "files").rmdir()

    store.write("second", b"2")

    assert store.read("second") == b"2"


def test_write_never_overwrites(store):
    store.write("abc", b"one")

    with pytest.raises(StoreUnavailableError):
        store.write("abc", b"two")
    assert store.read("abc") == b"one"


def test_empty_content(store):
    store.write("empty", b"")

    assert store.read("empty") == b""


@pytest.mark.parametrize("handle", ["", "   ", "../escape", "a/b", ".."])
def test_rejects_invalid_handles(store, handle):
    with pytest.raises(ValueError):
        store.write(handle, b"x")
    assert store.exists(handle) is False


def test_missing_handle(store):
    assert store.exists("nope") is False
    with pytest.raises(StoreUnavailableError):
        store.read("nope")


def test_base_path_is_a_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with pytest.raises(StoreUnavailableError):
        LocalContentStore(str(blocker)).write("abc", b"x")


class TestContentStoreFactory:
    def test_explicit_path(self, tmp_path):
        store = ContentStoreFactory.create_storage(str(tmp_path))

        assert isinstance(store, LocalContentStore)
        assert store.base_path == tmp_path

    def test_env_path(self, monkeypatch, tmp_path):
        monkeypatch.setenv("FOLDER_PATH", str(tmp_path / "env"))

        assert ContentStoreFactory.create_storage().base_path == tmp_path / "env"

    def test_default_path(self, monkeypatch):
        monkeypatch.delenv("FOLDER_PATH", raising=False)

        assert str(ContentStoreFactory.create_storage().base_path) == DEFAULT_FOLDER_PATH
