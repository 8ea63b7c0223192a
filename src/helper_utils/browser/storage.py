"""Local storage, cookie and query-string helpers.

Error policy differs between the two storage helpers: reading propagates a
malformed-JSON error, writing reports any failure as ``False``.
"""

from __future__ import annotations

import json
import math
from typing import Any
from urllib.parse import parse_qsl

from helper_utils.browser.window import Window, get_global
from helper_utils.errors import StorageUnavailableError
from helper_utils.result import attempt


def _resolve_storage(storage: Any) -> Any:
    resolved = storage if storage is not None else get_global().local_storage
    if resolved is None:
        msg = "localStorage is not available in this environment."
        raise StorageUnavailableError(msg)
    return resolved


def get_local_storage_json(key: str, *, storage: Any = None) -> Any:
    """Read and JSON-decode the value stored under *key*.

    Returns None when the key is absent.

    Raises:
        StorageUnavailableError: No storage was passed and none is active.
        json.JSONDecodeError: The stored value is not valid JSON.
    """
    item = _resolve_storage(storage).get_item(key)
    if item is None:
        return None
    return json.loads(item)


def _finite(value: Any, path: set[int]) -> Any:
    # NaN and the infinities become null at any depth.
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if not isinstance(value, (dict, list, tuple)):
        return value
    if id(value) in path:
        msg = "Circular reference detected"
        raise ValueError(msg)
    path.add(id(value))
    try:
        if isinstance(value, dict):
            return {key: _finite(item, path) for key, item in value.items()}
        return [_finite(item, path) for item in value]
    finally:
        path.discard(id(value))


def _serialize(value: Any) -> str:
    # Top-level values JSON has no representation for are stored as null.
    if callable(value):
        return "null"
    return json.dumps(_finite(value, set()), allow_nan=False)


def set_local_storage_json(key: str, value: Any, *, storage: Any = None) -> bool:
    """JSON-encode *value* and store it under *key*.

    Returns True on success and False when encoding fails (circular
    references, unsupported types) or the backend rejects the write
    (e.g. quota exceeded).

    Raises:
        StorageUnavailableError: No storage was passed and none is active.
    """
    backend = _resolve_storage(storage)
    encoded = attempt("set_local_storage_json", _serialize, value)
    if not encoded.ok:
        return False
    stored = attempt("set_local_storage_json", backend.set_item, key, encoded.value)
    return stored.ok


def get_cookie(name: str, *, document: Any = None) -> str | None:
    """Value of the cookie called *name*, or None.

    Names are matched case-sensitively; an empty value yields ``""``.
    """
    doc = document if document is not None else get_global().document
    cookie = getattr(doc, "cookie", None)
    if not cookie or not isinstance(cookie, str):
        return None

    for chunk in cookie.split(";"):
        entry = chunk.lstrip()
        if "=" not in entry:
            continue
        cookie_name, _, cookie_value = entry.partition("=")
        if cookie_name.strip() == name:
            return cookie_value.strip()
    return None


def parse_query_params(query_string: str | None = None, *, window: Window | None = None) -> dict[str, str]:
    """Parse a query string into a dict; the last occurrence of a key wins.

    Defaults to the ``location_search`` of *window* (or the active window).
    """
    if query_string is None:
        win = window if window is not None else get_global()
        query_string = getattr(win, "location_search", "") or ""
    if query_string.startswith("?"):
        query_string = query_string[1:]
    return dict(parse_qsl(query_string, keep_blank_values=True))
