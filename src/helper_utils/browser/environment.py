"""Browser environment helpers: clipboard, OS details, UUIDs."""

from __future__ import annotations

import platform
import sys
import uuid as _uuid
from typing import Any

from helper_utils.browser.window import get_global
from helper_utils.errors import ClipboardUnavailableError


async def copy_to_clipboard_async(text: str, *, clipboard: Any = None) -> None:
    """Write *text* to the clipboard.

    Raises:
        ClipboardUnavailableError: No clipboard was passed and none is active.
        Exception: Whatever the clipboard backend raises, unchanged.
    """
    target = clipboard if clipboard is not None else get_global().clipboard
    if target is None:
        msg = "Clipboard API not available. Use a fallback or ensure secure context (HTTPS)."
        raise ClipboardUnavailableError(msg)
    await target.write_text(text)


def get_os_info() -> dict[str, str]:
    """Platform identifier, OS release, OS name and machine architecture."""
    return {
        "platform": sys.platform,
        "release": platform.release(),
        "type": platform.system(),
        "arch": platform.machine(),
    }


def uuid() -> str:
    """Random version 4 UUID in canonical string form."""
    return str(_uuid.uuid4())
