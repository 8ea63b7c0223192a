"""Selector query helpers.

Malformed selectors are indistinguishable from "no match": every failure
becomes ``None``, ``[]`` or ``False``.
"""

from __future__ import annotations

from typing import Any

from helper_utils.browser.window import get_global
from helper_utils.result import attempt

_OMITTED: Any = object()


def query_selector_wrapper(selector: str, container: Any = _OMITTED) -> Any:
    """First element matching *selector* inside *container*, or None.

    The active document is used only when *container* is omitted; passing
    ``None`` explicitly yields ``None``.
    """
    target = get_global().document if container is _OMITTED else container
    query = getattr(target, "query_selector", None)
    if target is None or not callable(query):
        return None
    return attempt("query_selector", query, selector).value_or(None)


def query_selector_all_wrapper(selector: str, container: Any = None) -> list[Any]:
    """Every element matching *selector* inside *container* (default: the active document)."""
    target = container if container is not None else get_global().document
    query = getattr(target, "query_selector_all", None)
    if target is None or not callable(query):
        return []
    return attempt("query_selector_all", lambda: list(query(selector))).value_or([])


query_selector_wrapper_all = query_selector_all_wrapper


def find_closest(element: Any, selector: str) -> Any:
    """Nearest ancestor of *element* (itself included) matching *selector*, or None."""
    if element is None:
        return None
    closest = getattr(element, "closest", None)
    if not callable(closest):
        return None
    return attempt("find_closest", closest, selector).value_or(None)


def has_class(element: Any, class_name: str) -> bool:
    """Whether *element* carries *class_name*."""
    class_list = getattr(element, "class_list", None)
    if class_list is None or not isinstance(class_name, str) or not class_name.strip():
        return False
    contains = getattr(class_list, "contains", None)
    if not callable(contains):
        return False
    return bool(attempt("has_class", contains, class_name).value_or(False))
