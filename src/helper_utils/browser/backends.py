"""Storage and clipboard backends for headless windows.

Backends satisfy :class:`~helper_utils.browser.protocols.Storage` and
:class:`~helper_utils.browser.protocols.Clipboard`. Values are strings
only; JSON encoding is the caller's concern.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from helper_utils.errors import StorageQuotaExceededError

logger = logging.getLogger(__name__)


class MemoryStorage:
    """In-process ``localStorage`` with an optional byte quota.

    The quota counts the UTF-8 size of every key and value. A write that
    would exceed it raises :class:`StorageQuotaExceededError` and leaves
    the store unchanged.
    """

    def __init__(self, quota_bytes: int | None = None) -> None:
        self._items: dict[str, str] = {}
        self.quota_bytes = quota_bytes

    @property
    def length(self) -> int:
        return len(self._items)

    def key(self, index: int) -> str | None:
        keys = list(self._items)
        return keys[index] if 0 <= index < len(keys) else None

    def get_item(self, key: str) -> str | None:
        return self._items.get(str(key))

    def set_item(self, key: str, value: str) -> None:
        key, value = str(key), str(value)
        candidate = dict(self._items)
        candidate[key] = value
        self._check_quota(candidate)
        self._items = candidate
        self._persist()

    def remove_item(self, key: str) -> None:
        if self._items.pop(str(key), None) is not None:
            self._persist()

    def clear(self) -> None:
        self._items.clear()
        self._persist()

    def _check_quota(self, items: dict[str, str]) -> None:
        if self.quota_bytes is None:
            return
        used = sum(len(k.encode("utf-8")) + len(v.encode("utf-8")) for k, v in items.items())
        if used > self.quota_bytes:
            logger.debug("Storage write rejected: %d bytes over quota %d", used, self.quota_bytes)
            msg = f"Storage quota of {self.quota_bytes} bytes exceeded"
            raise StorageQuotaExceededError(msg)

    def _persist(self) -> None:
        """Hook for subclasses that write through to disk."""


class FileStorage(MemoryStorage):
    """``localStorage`` persisted as a single JSON object file.

    The file is read once at construction and rewritten on every mutation.
    """

    def __init__(self, path: Path, quota_bytes: int | None = None) -> None:
        super().__init__(quota_bytes)
        self.path = Path(path)
        if self.path.is_file():
            raw = self.path.read_text(encoding="utf-8")
            data = json.loads(raw) if raw.strip() else {}
            self._items = {str(k): str(v) for k, v in data.items()}

    def _persist(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._items, ensure_ascii=False), encoding="utf-8")


class MemoryClipboard:
    """Clipboard that keeps the last written text in memory."""

    def __init__(self) -> None:
        self._text = ""

    async def write_text(self, text: str) -> None:
        self._text = str(text)

    async def read_text(self) -> str:
        return self._text
