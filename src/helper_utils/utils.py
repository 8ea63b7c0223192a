"""Runtime-agnostic collection helpers."""

from __future__ import annotations

import math
from typing import Any


def _identity_key(item: Any) -> tuple[Any, ...]:
    # Set semantics: primitives compare by value (1 and True stay distinct,
    # NaN equals NaN), everything else by identity.
    if isinstance(item, bool) or item is None:
        return (type(item), item)
    if isinstance(item, float) and math.isnan(item):
        return ("nan",)
    if isinstance(item, (int, float)):
        return ("number", item)
    if isinstance(item, (str, bytes)):
        return (type(item), item)
    return ("id", id(item))


def get_unique_elements(items: Any) -> list[Any]:
    """Return the distinct elements of *items*, keeping first-seen order.

    Anything other than a list or tuple yields ``[]``.

    Examples:
        >>> get_unique_elements([1, 2, 2, 3])
        [1, 2, 3]
        >>> get_unique_elements("hello")
        []
    """
    if not isinstance(items, (list, tuple)):
        return []
    seen: set[tuple[Any, ...]] = set()
    result: list[Any] = []
    for item in items:
        key = _identity_key(item)
        if key in seen:
            continue
        seen.add(key)
        result.append(item)
    return result
