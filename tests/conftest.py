"""Shared pytest fixtures for helper_utils tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from helper_utils.browser.backends import MemoryClipboard, MemoryStorage
from helper_utils.browser.html import HtmlDocument
from helper_utils.browser.window import Window, use_window

PAGE_MARKUP = """
<html>
  <head><title>Fixture</title></head>
  <body>
    <nav id="menu" class="menu">
      <ul class="items">
        <li class="item active" data-id="1"><a href="#one">One</a></li>
        <li class="item" data-id="2"><a href="#two">Two</a></li>
        <li class="item" data-id="3"><span>Three</span></li>
      </ul>
    </nav>
    <div id="box" class="box" style="color: red; margin-top: 4px;">content</div>
  </body>
</html>
"""


@pytest.fixture
def document() -> HtmlDocument:
    """Headless document parsed from a small navigation page."""
    return HtmlDocument(PAGE_MARKUP, cookie="session=abc123; theme=dark; empty=")


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage(quota_bytes=1024)


@pytest.fixture
def window(document: HtmlDocument, storage: MemoryStorage) -> Iterator[Window]:
    """Active window wired to the fixture document and storage.

    The window is active for the duration of the test.
    """
    win = Window(
        document=document,
        local_storage=storage,
        clipboard=MemoryClipboard(),
        url="https://example.com/page?q=search&page=2",
    )
    with use_window(win):
        yield win


@pytest.fixture
def empty_window() -> Iterator[Window]:
    """Active window with no document, storage or clipboard."""
    with use_window(Window()) as win:
        yield win
