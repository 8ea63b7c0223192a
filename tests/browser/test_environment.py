"""Tests for clipboard, OS info and UUID helpers."""

from __future__ import annotations

import re
import sys

import anyio
import pytest

from helper_utils.browser.backends import MemoryClipboard
from helper_utils.browser.environment import copy_to_clipboard_async, get_os_info, uuid
from helper_utils.browser.window import Window
from helper_utils.errors import ClipboardUnavailableError

UUID_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")


class _FailingClipboard:
    async def write_text(self, text: str) -> None:
        raise PermissionError("denied")


class TestCopyToClipboard:
    def test_writes_to_active_clipboard(self, window: Window) -> None:
        anyio.run(copy_to_clipboard_async, "copied")
        assert isinstance(window.clipboard, MemoryClipboard)
        assert anyio.run(window.clipboard.read_text) == "copied"

    def test_explicit_clipboard(self) -> None:
        clipboard = MemoryClipboard()

        async def run() -> None:
            await copy_to_clipboard_async("hi", clipboard=clipboard)

        anyio.run(run)
        assert anyio.run(clipboard.read_text) == "hi"

    @pytest.mark.usefixtures("empty_window")
    def test_unavailable(self) -> None:
        with pytest.raises(ClipboardUnavailableError, match="Clipboard API not available"):
            anyio.run(copy_to_clipboard_async, "x")

    def test_backend_error_propagates(self) -> None:
        async def run() -> None:
            await copy_to_clipboard_async("x", clipboard=_FailingClipboard())

        with pytest.raises(PermissionError):
            anyio.run(run)


class TestGetOsInfo:
    def test_fields(self) -> None:
        info = get_os_info()
        assert set(info) == {"platform", "release", "type", "arch"}
        assert info["platform"] == sys.platform
        assert all(isinstance(v, str) for v in info.values())


class TestUuid:
    def test_format(self) -> None:
        assert UUID_RE.match(uuid())

    def test_unique(self) -> None:
        assert len({uuid() for _ in range(50)}) == 50
