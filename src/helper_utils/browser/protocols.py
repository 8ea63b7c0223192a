"""Protocols (interfaces) for the browser-side handles.

The browser helpers never build their own DOM, storage or clipboard; they
operate on handles supplied by the caller or by the active
:class:`~helper_utils.browser.window.Window`. Any object that implements
these members satisfies the protocol structurally, so
:mod:`helper_utils.browser.html` is one implementation among many.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ClassList(Protocol):
    """DOMTokenList-like view over an element's ``class`` attribute."""

    def add(self, *tokens: str) -> None: ...  # pragma: no cover

    def remove(self, *tokens: str) -> None: ...  # pragma: no cover

    def toggle(self, token: str, force: bool | None = None) -> bool: ...  # pragma: no cover

    def contains(self, token: str) -> bool: ...  # pragma: no cover

    def __iter__(self) -> Iterator[str]: ...  # pragma: no cover


@runtime_checkable
class StyleDeclaration(Protocol):
    """Inline style declaration of an element."""

    def set_property(self, name: str, value: str) -> None: ...  # pragma: no cover

    def get_property_value(self, name: str) -> str: ...  # pragma: no cover

    def remove_property(self, name: str) -> str: ...  # pragma: no cover

    def __setitem__(self, name: str, value: str) -> None: ...  # pragma: no cover


@runtime_checkable
class EventTarget(Protocol):
    """Anything that accepts event listeners."""

    def add_event_listener(
        self,
        event_type: str,
        listener: Callable[[Any], Any],
        options: bool | Mapping[str, Any] | None = None,
    ) -> None: ...  # pragma: no cover


@runtime_checkable
class Element(EventTarget, Protocol):
    """A DOM element handle."""

    @property
    def class_list(self) -> ClassList: ...  # pragma: no cover

    @property
    def style(self) -> StyleDeclaration: ...  # pragma: no cover

    @property
    def parent_node(self) -> Any: ...  # pragma: no cover

    def set_attribute(self, name: str, value: Any) -> None: ...  # pragma: no cover

    def append_child(self, child: Any) -> Any: ...  # pragma: no cover

    def remove_child(self, child: Any) -> Any: ...  # pragma: no cover

    def matches(self, selector: str) -> bool: ...  # pragma: no cover

    def closest(self, selector: str) -> Element | None: ...  # pragma: no cover

    def query_selector(self, selector: str) -> Element | None: ...  # pragma: no cover

    def query_selector_all(self, selector: str) -> list[Element]: ...  # pragma: no cover


@runtime_checkable
class Document(EventTarget, Protocol):
    """A DOM document handle."""

    cookie: str

    def create_element(self, tag_name: str) -> Element: ...  # pragma: no cover

    def create_text_node(self, text: str) -> Any: ...  # pragma: no cover

    def query_selector(self, selector: str) -> Element | None: ...  # pragma: no cover

    def query_selector_all(self, selector: str) -> list[Element]: ...  # pragma: no cover


@runtime_checkable
class Storage(Protocol):
    """String-only persistent key/value store (``localStorage``)."""

    def get_item(self, key: str) -> str | None: ...  # pragma: no cover

    def set_item(self, key: str, value: str) -> None: ...  # pragma: no cover

    def remove_item(self, key: str) -> None: ...  # pragma: no cover


@runtime_checkable
class Clipboard(Protocol):
    """Asynchronous clipboard writer."""

    async def write_text(self, text: str) -> None: ...  # pragma: no cover
