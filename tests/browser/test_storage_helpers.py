"""Tests for local storage JSON helpers, cookies and query params."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from helper_utils.browser.backends import FileStorage, MemoryStorage
from helper_utils.browser.html import HtmlDocument
from helper_utils.browser.storage import (
    get_cookie,
    get_local_storage_json,
    parse_query_params,
    set_local_storage_json,
)
from helper_utils.browser.window import Window
from helper_utils.errors import StorageQuotaExceededError, StorageUnavailableError


class TestLocalStorageJson:
    def test_set_then_get(self, window: Window) -> None:
        assert set_local_storage_json("prefs", {"theme": "dark", "size": [1, 2]}) is True
        assert get_local_storage_json("prefs") == {"theme": "dark", "size": [1, 2]}

    def test_missing_key(self, window: Window) -> None:
        assert get_local_storage_json("nope") is None

    def test_stored_null(self, storage: MemoryStorage) -> None:
        assert set_local_storage_json("k", None, storage=storage) is True
        assert storage.get_item("k") == "null"
        assert get_local_storage_json("k", storage=storage) is None

    def test_callable_stored_as_null(self, storage: MemoryStorage) -> None:
        assert set_local_storage_json("fn", lambda: 1, storage=storage) is True
        assert storage.get_item("fn") == "null"

    def test_non_finite_floats_stored_as_null(self, storage: MemoryStorage) -> None:
        assert set_local_storage_json("n", float("nan"), storage=storage) is True
        assert storage.get_item("n") == "null"
        value = {"a": [1, float("inf")], "b": {"c": float("-inf")}, "d": (0.5,)}
        assert set_local_storage_json("nested", value, storage=storage) is True
        assert storage.get_item("nested") == '{"a": [1, null], "b": {"c": null}, "d": [0.5]}'

    def test_malformed_json_propagates(self, storage: MemoryStorage) -> None:
        storage.set_item("bad", "{not json")
        with pytest.raises(json.JSONDecodeError):
            get_local_storage_json("bad", storage=storage)

    def test_unserializable_value_returns_false(self, storage: MemoryStorage) -> None:
        circular: list[object] = []
        circular.append(circular)
        assert set_local_storage_json("c", circular, storage=storage) is False
        assert set_local_storage_json("s", {1, 2}, storage=storage) is False
        assert storage.get_item("c") is None

    def test_quota_exceeded_returns_false(self) -> None:
        small = MemoryStorage(quota_bytes=16)
        assert set_local_storage_json("k", "x" * 100, storage=small) is False
        assert small.length == 0

    @pytest.mark.usefixtures("empty_window")
    def test_no_storage_raises(self) -> None:
        with pytest.raises(StorageUnavailableError, match="localStorage is not available"):
            get_local_storage_json("k")
        with pytest.raises(StorageUnavailableError):
            set_local_storage_json("k", 1)


class TestMemoryStorage:
    def test_basic_operations(self) -> None:
        store = MemoryStorage()
        store.set_item("a", "1")
        store.set_item("b", "2")
        assert store.length == 2
        assert store.key(0) == "a"
        assert store.key(5) is None
        store.remove_item("a")
        assert store.get_item("a") is None
        store.clear()
        assert store.length == 0

    def test_quota_leaves_store_unchanged(self) -> None:
        store = MemoryStorage(quota_bytes=10)
        store.set_item("ab", "cd")
        with pytest.raises(StorageQuotaExceededError):
            store.set_item("ab", "0123456789")
        assert store.get_item("ab") == "cd"


class TestFileStorage:
    def test_persists_across_instances(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "store.json"
        first = FileStorage(path)
        first.set_item("user", '{"id": 1}')
        second = FileStorage(path)
        assert second.get_item("user") == '{"id": 1}'
        assert json.loads(path.read_text(encoding="utf-8")) == {"user": '{"id": 1}'}

    def test_remove_rewrites_file(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        store = FileStorage(path)
        store.set_item("a", "1")
        store.remove_item("a")
        assert json.loads(path.read_text(encoding="utf-8")) == {}


class TestGetCookie:
    def test_reads_active_document(self, window: Window) -> None:
        assert get_cookie("session") == "abc123"
        assert get_cookie("theme") == "dark"

    def test_empty_value(self, window: Window) -> None:
        assert get_cookie("empty") == ""

    def test_missing_cookie(self, window: Window) -> None:
        assert get_cookie("nope") is None

    def test_case_sensitive(self, window: Window) -> None:
        assert get_cookie("Session") is None

    def test_value_with_equals(self) -> None:
        doc = HtmlDocument(cookie="token=a=b==; x=1")
        assert get_cookie("token", document=doc) == "a=b=="

    def test_no_cookie_string(self) -> None:
        assert get_cookie("a", document=HtmlDocument()) is None

    @pytest.mark.usefixtures("empty_window")
    def test_no_document(self) -> None:
        assert get_cookie("a") is None


class TestParseQueryParams:
    def test_from_window(self, window: Window) -> None:
        assert parse_query_params() == {"q": "search", "page": "2"}

    def test_explicit_string(self) -> None:
        assert parse_query_params("?a=1&b=hello%20world&a=3") == {"a": "3", "b": "hello world"}

    def test_last_occurrence_wins(self) -> None:
        assert parse_query_params("?a=1&a=2") == {"a": "2"}

    def test_without_question_mark(self) -> None:
        assert parse_query_params("x=1") == {"x": "1"}

    def test_blank_values_kept(self) -> None:
        assert parse_query_params("?flag=&k=v") == {"flag": "", "k": "v"}

    def test_plus_is_space(self) -> None:
        assert parse_query_params("q=a+b") == {"q": "a b"}

    def test_empty(self) -> None:
        assert parse_query_params("") == {}

    @pytest.mark.usefixtures("empty_window")
    def test_no_url(self) -> None:
        assert parse_query_params() == {}
