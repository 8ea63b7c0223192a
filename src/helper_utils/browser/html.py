"""Headless DOM adapter over BeautifulSoup and soupsieve.

Provides the document, element, class-list, style and event objects the
browser helpers operate on when no real browser is involved (server-side
rendering, tests, scripted HTML rewriting).

INVARIANT: One :class:`HtmlElement` wrapper exists per tag for as long as the
tag lives, so identity comparisons and registered event listeners survive
repeated queries. The wrapper is kept on the tag itself, so a removed subtree
that nothing references is collected together with its wrappers.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

import soupsieve as sv
from bs4 import BeautifulSoup, NavigableString, Tag

from helper_utils.errors import InvalidCharacterError, InvalidTokenError

logger = logging.getLogger(__name__)

_ATTRIBUTE_NAME_RE = re.compile(r"^[^\s\"'>/=\x00-\x1f\x7f]+$")
_CAMEL_BOUNDARY_RE = re.compile(r"(?<!^)(?=[A-Z])")
_WRAPPER_KEY = "_helper_utils_element"


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


@dataclass
class Event:
    """A dispatched event.

    ``target`` and ``current_target`` are filled in during dispatch.
    """

    type: str
    bubbles: bool = True
    detail: Any = None
    target: Any = field(default=None, init=False)
    current_target: Any = field(default=None, init=False)
    default_prevented: bool = field(default=False, init=False)
    _propagation_stopped: bool = field(default=False, init=False, repr=False)
    _immediate_stopped: bool = field(default=False, init=False, repr=False)

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self._propagation_stopped = True

    def stop_immediate_propagation(self) -> None:
        self._propagation_stopped = True
        self._immediate_stopped = True


@dataclass(eq=False)
class _Listener:
    callback: Callable[[Event], Any]
    capture: bool
    once: bool


def _listener_flags(options: bool | Mapping[str, Any] | None) -> tuple[bool, bool]:
    """Return ``(capture, once)`` for an ``add_event_listener`` options value."""
    if isinstance(options, bool):
        return options, False
    if isinstance(options, Mapping):
        return bool(options.get("capture", False)), bool(options.get("once", False))
    return False, False


class _EventTarget:
    """Listener registry plus capture/target/bubble dispatch."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[_Listener]] = {}

    def add_event_listener(
        self,
        event_type: str,
        listener: Callable[[Event], Any],
        options: bool | Mapping[str, Any] | None = None,
    ) -> None:
        capture, once = _listener_flags(options)
        bucket = self._listeners.setdefault(event_type, [])
        for existing in bucket:
            if existing.callback is listener and existing.capture == capture:
                return
        bucket.append(_Listener(listener, capture, once))

    def remove_event_listener(
        self,
        event_type: str,
        listener: Callable[[Event], Any],
        options: bool | Mapping[str, Any] | None = None,
    ) -> None:
        capture, _ = _listener_flags(options)
        bucket = self._listeners.get(event_type, [])
        self._listeners[event_type] = [
            entry for entry in bucket if not (entry.callback is listener and entry.capture == capture)
        ]

    def listener_count(self, event_type: str) -> int:
        """Number of listeners currently registered for *event_type*."""
        return len(self._listeners.get(event_type, []))

    def dispatch_event(self, event: Event) -> bool:
        """Dispatch *event* with this node as target.

        Returns False when a listener called :meth:`Event.prevent_default`.
        """
        event.target = self
        path = self._event_path()
        ancestors = path[1:]

        for node in reversed(ancestors):
            if event._propagation_stopped:
                break
            node._invoke(event, capture=True)
        if not event._propagation_stopped:
            self._invoke(event, capture=None)
        if event.bubbles:
            for node in ancestors:
                if event._propagation_stopped:
                    break
                node._invoke(event, capture=False)

        event.current_target = None
        return not event.default_prevented

    def _event_path(self) -> list[_EventTarget]:
        path: list[_EventTarget] = [self]
        node = getattr(self, "parent_node", None)
        while node is not None:
            path.append(node)
            node = getattr(node, "parent_node", None)
        return path

    def _invoke(self, event: Event, *, capture: bool | None) -> None:
        bucket = self._listeners.get(event.type)
        if not bucket:
            return
        for entry in list(bucket):
            if capture is not None and entry.capture != capture:
                continue
            current = self._listeners.get(event.type, [])
            if not any(e is entry for e in current):
                continue
            if entry.once:
                current.remove(entry)
            event.current_target = self
            try:
                entry.callback(event)
            except Exception:
                logger.exception("Error in %r listener", event.type)
            if event._immediate_stopped:
                break


# ---------------------------------------------------------------------------
# Class list / style views
# ---------------------------------------------------------------------------


class ClassList:
    """DOMTokenList view over a tag's ``class`` attribute.

    Mutators validate every token before touching the attribute, so an
    invalid token leaves the list unchanged.
    """

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    def _tokens(self) -> list[str]:
        raw = self._tag.get("class")
        if raw is None:
            return []
        items = raw.split() if isinstance(raw, str) else list(raw)
        return list(dict.fromkeys(items))

    def _write(self, tokens: list[str]) -> None:
        self._tag["class"] = tokens

    @staticmethod
    def _validate(token: str) -> str:
        token = str(token)
        if token == "":
            msg = "The token provided must not be empty."
            raise InvalidTokenError(msg)
        if any(ch.isspace() for ch in token):
            msg = f"The token provided ({token!r}) contains HTML space characters"
            raise InvalidTokenError(msg)
        return token

    def add(self, *tokens: str) -> None:
        valid = [self._validate(t) for t in tokens]
        current = self._tokens()
        for token in valid:
            if token not in current:
                current.append(token)
        self._write(current)

    def remove(self, *tokens: str) -> None:
        valid = {self._validate(t) for t in tokens}
        self._write([t for t in self._tokens() if t not in valid])

    def toggle(self, token: str, force: bool | None = None) -> bool:
        token = self._validate(token)
        current = self._tokens()
        if token in current:
            if force is True:
                return True
            current.remove(token)
            self._write(current)
            return False
        if force is False:
            return False
        current.append(token)
        self._write(current)
        return True

    def contains(self, token: str) -> bool:
        return token in self._tokens()

    @property
    def value(self) -> str:
        return " ".join(self._tokens())

    def __contains__(self, token: object) -> bool:
        return token in self._tokens()

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens())

    def __len__(self) -> int:
        return len(self._tokens())

    def __repr__(self) -> str:
        return f"ClassList({self._tokens()!r})"


def _css_property_name(name: str) -> str:
    """``backgroundColor`` -> ``background-color``; custom properties untouched."""
    if name.startswith("--"):
        return name
    return _CAMEL_BOUNDARY_RE.sub("-", name).lower()


class StyleDeclaration:
    """Inline ``style`` attribute view; an empty value removes the property."""

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    def _read(self) -> dict[str, str]:
        raw = self._tag.get("style") or ""
        declarations: dict[str, str] = {}
        for chunk in str(raw).split(";"):
            name, sep, value = chunk.partition(":")
            name = name.strip()
            if not name.startswith("--"):
                name = name.lower()
            if sep and name:
                declarations[name] = value.strip()
        return declarations

    def _write(self, declarations: dict[str, str]) -> None:
        if declarations:
            self._tag["style"] = " ".join(f"{k}: {v};" for k, v in declarations.items())
        else:
            self._tag.attrs.pop("style", None)

    def set_property(self, name: str, value: Any) -> None:
        prop = _css_property_name(name)
        text = "" if value is None else str(value)
        declarations = self._read()
        if text == "":
            declarations.pop(prop, None)
        else:
            declarations[prop] = text
        self._write(declarations)

    def get_property_value(self, name: str) -> str:
        return self._read().get(_css_property_name(name), "")

    def remove_property(self, name: str) -> str:
        declarations = self._read()
        old = declarations.pop(_css_property_name(name), "")
        self._write(declarations)
        return old

    def items(self) -> list[tuple[str, str]]:
        return list(self._read().items())

    @property
    def css_text(self) -> str:
        return str(self._tag.get("style") or "")

    def __getitem__(self, name: str) -> str:
        return self.get_property_value(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.set_property(name, value)

    def __repr__(self) -> str:
        return f"StyleDeclaration({self._read()!r})"


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------


def _stringify(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class TextNode:
    """A text node created by :meth:`HtmlDocument.create_text_node`."""

    def __init__(self, text: str) -> None:
        self._string = NavigableString(text)

    @property
    def text_content(self) -> str:
        return str(self._string)

    def __repr__(self) -> str:
        return f"TextNode({self.text_content!r})"


def _unwrap(node: Any) -> Tag | NavigableString:
    if isinstance(node, HtmlElement):
        return node.tag
    if isinstance(node, TextNode):
        return node._string
    msg = f"Expected an HtmlElement or TextNode, got {type(node).__name__}"
    raise TypeError(msg)


class HtmlElement(_EventTarget):
    """Element handle bound to one BeautifulSoup tag."""

    def __init__(self, document: HtmlDocument, tag: Tag) -> None:
        super().__init__()
        self._document = document
        self._tag = tag
        self._class_list = ClassList(tag)
        self._style = StyleDeclaration(tag)

    @property
    def tag(self) -> Tag:
        return self._tag

    @property
    def owner_document(self) -> HtmlDocument:
        return self._document

    @property
    def tag_name(self) -> str:
        return self._tag.name.upper()

    @property
    def id(self) -> str:
        return self.get_attribute("id") or ""

    @property
    def class_list(self) -> ClassList:
        return self._class_list

    @property
    def class_name(self) -> str:
        return self._class_list.value

    @property
    def style(self) -> StyleDeclaration:
        return self._style

    @property
    def parent_node(self) -> HtmlElement | HtmlDocument | None:
        return self._document._node_for(self._tag.parent)

    @property
    def children(self) -> list[HtmlElement]:
        return [self._document._wrap(child) for child in self._tag.children if isinstance(child, Tag)]

    @property
    def text_content(self) -> str:
        return self._tag.get_text()

    @property
    def outer_html(self) -> str:
        return str(self._tag)

    # --- attributes --------------------------------------------------------

    def get_attribute(self, name: str) -> str | None:
        value = self._tag.get(name.lower())
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def set_attribute(self, name: str, value: Any) -> None:
        if not _ATTRIBUTE_NAME_RE.match(name or ""):
            msg = f"{name!r} is not a valid attribute name"
            raise InvalidCharacterError(msg)
        key = name.lower()
        text = _stringify(value)
        if key == "class":
            self._tag["class"] = text.split()
        else:
            self._tag[key] = text

    def has_attribute(self, name: str) -> bool:
        return name.lower() in self._tag.attrs

    def remove_attribute(self, name: str) -> None:
        self._tag.attrs.pop(name.lower(), None)

    # --- tree --------------------------------------------------------------

    def append_child(self, child: HtmlElement | TextNode) -> HtmlElement | TextNode:
        self._tag.append(_unwrap(child))
        return child

    def remove_child(self, child: HtmlElement) -> HtmlElement:
        if not isinstance(child, HtmlElement) or child.tag.parent is not self._tag:
            msg = "The node to be removed is not a child of this node."
            raise ValueError(msg)
        child.tag.extract()
        return child

    # --- selectors ---------------------------------------------------------

    def matches(self, selector: str) -> bool:
        return sv.match(selector, self._tag)

    def closest(self, selector: str) -> HtmlElement | None:
        return self._document._wrap(sv.closest(selector, self._tag))

    def query_selector(self, selector: str) -> HtmlElement | None:
        return self._document._wrap(sv.select_one(selector, self._tag))

    def query_selector_all(self, selector: str) -> list[HtmlElement]:
        return [self._document._wrap(tag) for tag in sv.select(selector, self._tag)]

    def __repr__(self) -> str:
        return f"<HtmlElement {self._tag.name}>"


class HtmlDocument(_EventTarget):
    """Document handle over a parsed (or empty) HTML tree.

    Parameters:
        markup: Initial HTML.
        parser: BeautifulSoup parser name.
        cookie: Initial ``document.cookie`` string.
    """

    def __init__(self, markup: str = "", *, parser: str = "html.parser", cookie: str = "") -> None:
        super().__init__()
        self._soup = BeautifulSoup(markup, parser)
        self.cookie = cookie

    @property
    def soup(self) -> BeautifulSoup:
        return self._soup

    @property
    def parent_node(self) -> None:
        return None

    @property
    def document_element(self) -> HtmlElement | None:
        for child in self._soup.children:
            if isinstance(child, Tag):
                return self._wrap(child)
        return None

    @property
    def body(self) -> HtmlElement | None:
        return self._wrap(self._soup.find("body"))

    def _wrap(self, tag: Any) -> Any:
        if tag is None:
            return None
        # Read through __dict__; Tag.__getattr__ would search for a child tag.
        element = tag.__dict__.get(_WRAPPER_KEY)
        if element is None:
            element = HtmlElement(self, tag)
            tag.__dict__[_WRAPPER_KEY] = element
        return element

    def _node_for(self, tag: Any) -> HtmlElement | HtmlDocument | None:
        if tag is None:
            return None
        if tag is self._soup:
            return self
        return self._wrap(tag)

    def create_element(self, tag_name: str) -> HtmlElement:
        return self._wrap(self._soup.new_tag(tag_name.lower()))

    def create_text_node(self, text: str) -> TextNode:
        return TextNode(text)

    def get_element_by_id(self, element_id: str) -> HtmlElement | None:
        return self._wrap(self._soup.find(id=element_id))

    def query_selector(self, selector: str) -> HtmlElement | None:
        return self._wrap(sv.select_one(selector, self._soup))

    def query_selector_all(self, selector: str) -> list[HtmlElement]:
        return [self._wrap(tag) for tag in sv.select(selector, self._soup)]

    def append_child(self, child: HtmlElement | TextNode) -> HtmlElement | TextNode:
        self._soup.append(_unwrap(child))
        return child

    def remove_child(self, child: HtmlElement) -> HtmlElement:
        if not isinstance(child, HtmlElement) or child.tag.parent is not self._soup:
            msg = "The node to be removed is not a child of this node."
            raise ValueError(msg)
        child.tag.extract()
        return child

    def __str__(self) -> str:
        return str(self._soup)

    def __repr__(self) -> str:
        return f"<HtmlDocument {len(self._soup.find_all(True))} elements>"
