"""Exception hierarchy for helper-utils.

Most helpers swallow platform failures into sentinel values (see
:mod:`helper_utils.result`). The types below are what the minority of
helpers raise when the caller has to handle a failure.

Hierarchy
---------
HelperUtilsError
├── InvalidTokenError          (also ValueError)
├── InvalidCharacterError      (also ValueError)
├── DocumentUnavailableError
├── StorageUnavailableError
├── StorageQuotaExceededError
├── ClipboardUnavailableError
├── HTTPStatusError
└── DecryptionError
"""

from __future__ import annotations


class HelperUtilsError(Exception):
    """Base exception for all helper-utils errors."""


# --- DOM -------------------------------------------------------------------


class InvalidTokenError(HelperUtilsError, ValueError):
    """Raised by a class list for an empty token or one containing whitespace."""


class InvalidCharacterError(HelperUtilsError, ValueError):
    """Raised when an attribute name is not a valid name."""


class DocumentUnavailableError(HelperUtilsError):
    """Raised when an operation needs a document and none is active."""


# --- Storage / clipboard -----------------------------------------------------


class StorageUnavailableError(HelperUtilsError):
    """Raised when no local storage is available in the active window."""


class StorageQuotaExceededError(HelperUtilsError):
    """Raised by a storage backend when a write would exceed its quota."""


class ClipboardUnavailableError(HelperUtilsError):
    """Raised when no clipboard is available in the active window."""


# --- Network -----------------------------------------------------------------


class HTTPStatusError(HelperUtilsError):
    """Raised by :func:`~helper_utils.browser.network.fetch_json` for non-2xx responses."""

    def __init__(self, status: int, status_text: str, body: str) -> None:
        super().__init__(f"HTTP error {status}: {status_text}. Body: {body}")
        self.status = status
        self.status_text = status_text
        self.body = body


# --- Crypto ------------------------------------------------------------------


class DecryptionError(HelperUtilsError):
    """Raised when an ``ivHex:cipherHex`` payload cannot be decrypted."""
