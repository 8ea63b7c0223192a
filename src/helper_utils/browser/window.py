"""The browser global object, made explicit.

A :class:`Window` bundles the capabilities the browser helpers would read
from ambient globals in a real browser: the document, local storage, the
clipboard and the page URL. The active window lives in a context variable;
helpers fall back to it only when no handle is passed explicitly.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit

from helper_utils.browser.backends import FileStorage, MemoryClipboard, MemoryStorage
from helper_utils.browser.html import HtmlDocument

if TYPE_CHECKING:
    from helper_utils.browser.protocols import Clipboard, Document, Storage
    from helper_utils.config.settings import HelperSettings


@dataclass
class Window:
    """Capabilities of one (headless) browsing context.

    Attributes:
        document: Document handle, or None outside a page.
        local_storage: ``localStorage`` backend, or None when unavailable.
        clipboard: Clipboard backend, or None when unavailable.
        url: Current page URL.
    """

    document: Document | None = None
    local_storage: Storage | None = None
    clipboard: Clipboard | None = None
    url: str = ""

    @property
    def location_search(self) -> str:
        """The ``?query`` part of :attr:`url` (empty when there is none)."""
        query = urlsplit(self.url).query
        return f"?{query}" if query else ""

    def get_computed_style(self, element: Any, pseudo_elt: str | None = None) -> dict[str, str]:
        """Inline declarations of *element*; a headless window has no cascade."""
        if pseudo_elt:
            return {}
        style = getattr(element, "style", None)
        items = getattr(style, "items", None)
        if not callable(items):
            return {}
        return dict(items())


_active_window: ContextVar[Window] = ContextVar("helper_utils_window", default=Window())


def get_global(_options: Any = None) -> Window:
    """Return the active :class:`Window` (an empty one when none was set)."""
    return _active_window.get()


@contextmanager
def use_window(window: Window) -> Iterator[Window]:
    """Make *window* the active window for the duration of the block."""
    token = _active_window.set(window)
    try:
        yield window
    finally:
        _active_window.reset(token)


def create_window(settings: HelperSettings) -> Window:
    """Build a headless window from the ``[storage]`` and ``[document]`` sections."""
    doc_cfg = settings.document
    storage_cfg = settings.storage

    storage: Storage
    if storage_cfg.backend == "file":
        if storage_cfg.path is None:
            msg = "storage.path is required when storage.backend is 'file'"
            raise ValueError(msg)
        storage = FileStorage(storage_cfg.path, quota_bytes=storage_cfg.quota_bytes)
    else:
        storage = MemoryStorage(quota_bytes=storage_cfg.quota_bytes)

    return Window(
        document=HtmlDocument(doc_cfg.markup, parser=doc_cfg.parser, cookie=doc_cfg.cookie),
        local_storage=storage,
        clipboard=MemoryClipboard(),
        url=doc_cfg.url,
    )
