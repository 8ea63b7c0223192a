"""DOM manipulation helpers.

INVARIANT: A missing or shape-incompatible element is a no-op, and an
exception from the element itself (e.g. an invalid class token) is
swallowed. None of these helpers report whether anything changed.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from helper_utils.browser.window import Window, get_global
from helper_utils.errors import DocumentUnavailableError
from helper_utils.result import attempt


def add_class(element: Any, *class_names: str) -> None:
    """Add one or more CSS classes to *element*; falsy names are ignored."""
    class_list = getattr(element, "class_list", None)
    if class_list is None:
        return
    names = [name for name in class_names if name]
    attempt("add_class", class_list.add, *names)


def remove_class(element: Any, *class_names: str) -> None:
    """Remove one or more CSS classes from *element*; falsy names are ignored."""
    class_list = getattr(element, "class_list", None)
    if class_list is None:
        return
    names = [name for name in class_names if name]
    if names:
        attempt("remove_class", class_list.remove, *names)


def toggle_class(element: Any, class_name: str, force: bool | None = None) -> None:
    """Toggle *class_name* on *element*, or force it on/off with *force*."""
    class_list = getattr(element, "class_list", None)
    if class_list is None or not class_name or not isinstance(class_name, str):
        return
    attempt("toggle_class", class_list.toggle, class_name, force)


def set_attribute(element: Any, attribute_name: str, value: Any) -> None:
    """Set an attribute on *element*; invalid names are ignored."""
    setter = getattr(element, "set_attribute", None)
    if not callable(setter) or not attribute_name:
        return
    attempt("set_attribute", setter, attribute_name, value)


def set_style(element: Any, property: str | Mapping[str, Any], value: Any = None) -> None:
    """Set inline styles on *element*.

    Either a single ``property``/``value`` pair or a mapping of properties.
    A single property with ``value=None`` is left untouched.
    """
    style = getattr(element, "style", None)
    if element is None or style is None:
        return

    if isinstance(property, Mapping):
        for key, val in property.items():
            attempt("set_style", style.__setitem__, key, val)
    elif isinstance(property, str) and value is not None:
        attempt("set_style", style.__setitem__, property, value)


def hide_element(element: Any) -> None:
    """Hide *element* with an inline ``display: none``."""
    style = getattr(element, "style", None)
    if style is not None:
        attempt("hide_element", style.set_property, "display", "none")


def show_element(element: Any) -> None:
    """Undo :func:`hide_element` by dropping the inline ``display`` property."""
    style = getattr(element, "style", None)
    if style is not None:
        attempt("show_element", style.remove_property, "display")


def remove_element(element: Any) -> None:
    """Detach *element* from its parent, if it has one."""
    parent = getattr(element, "parent_node", None)
    if parent is None:
        return
    remover = getattr(parent, "remove_child", None)
    if callable(remover):
        attempt("remove_element", remover, element)


def create_element(
    tag_name: str,
    attributes: Mapping[str, Any] | None = None,
    children: Any = None,
    *,
    document: Any = None,
) -> Any:
    """Create an element with optional attributes and children.

    Args:
        tag_name: Tag name of the new element.
        attributes: Attributes set in iteration order.
        children: A string, a node, or a list/tuple of those. Strings become
            text nodes; falsy entries are skipped.
        document: Document to create in (default: the active window's).

    Raises:
        DocumentUnavailableError: No document was passed and none is active.
    """
    doc = document if document is not None else get_global().document
    if doc is None:
        msg = "No document is available to create elements in."
        raise DocumentUnavailableError(msg)

    element = doc.create_element(tag_name)
    for key, val in (attributes or {}).items():
        element.set_attribute(key, val)

    items: Iterable[Any] = children if isinstance(children, (list, tuple)) else [children]
    for child in items:
        if isinstance(child, str):
            element.append_child(doc.create_text_node(child))
        elif child:
            element.append_child(child)
    return element


def get_style(element: Any, pseudo_elt: str | None = None, *, window: Window | None = None) -> Any:
    """Return the computed style of *element*, or None when it cannot be computed."""
    win = window if window is not None else get_global()
    compute = getattr(win, "get_computed_style", None)
    if element is None or not callable(compute):
        return None
    return compute(element, pseudo_elt)
