"""Hashing, symmetric encryption and UUID helpers.

Ciphertext wire format: ``"{iv_hex}:{ciphertext_hex}"`` (AES-256-CBC,
PKCS#7 padding). :func:`encrypt` and :func:`decrypt` must stay compatible
with each other on this format.
"""

from __future__ import annotations

import base64
import hashlib
import secrets
import uuid as _uuid

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from helper_utils.errors import DecryptionError

KEY_LENGTH = 32
IV_LENGTH = 16
_BLOCK_BITS = algorithms.AES.block_size


# ---------------------------------------------------------------------------
# Hashing
# ---------------------------------------------------------------------------


def _encode_digest(digest: bytes, encoding: str | None) -> str | bytes:
    if encoding is None:
        return digest
    if encoding == "hex":
        return digest.hex()
    if encoding == "base64":
        return base64.b64encode(digest).decode("ascii")
    if encoding == "base64url":
        return base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")
    if encoding in ("latin1", "binary"):
        return digest.decode("latin-1")
    msg = f"Unsupported digest encoding: {encoding!r}"
    raise ValueError(msg)


def generate_hash(
    data: str | bytes,
    algorithm: str = "sha256",
    encoding: str | None = "hex",
) -> str | bytes:
    """Digest *data* with *algorithm*.

    Args:
        data: Text (UTF-8 encoded first) or bytes.
        algorithm: Any name :func:`hashlib.new` accepts.
        encoding: ``"hex"``, ``"base64"``, ``"base64url"``, ``"latin1"`` /
            ``"binary"``, or None for raw bytes.

    Raises:
        ValueError: Unknown algorithm or encoding.
    """
    payload = data.encode("utf-8") if isinstance(data, str) else data
    hasher = hashlib.new(algorithm)
    hasher.update(payload)
    return _encode_digest(hasher.digest(), encoding)


# ---------------------------------------------------------------------------
# AES-256-CBC
# ---------------------------------------------------------------------------


def encrypt(text: str, key: bytes, iv: bytes) -> str:
    """Encrypt *text* and return ``"{iv_hex}:{ciphertext_hex}"``.

    Raises:
        TypeError: *key* or *iv* is not bytes.
        ValueError: *key* is not 32 bytes or *iv* is not 16 bytes.
    """
    if not isinstance(key, (bytes, bytearray)):
        msg = "Key must be bytes"
        raise TypeError(msg)
    if not isinstance(iv, (bytes, bytearray)):
        msg = "IV must be bytes"
        raise TypeError(msg)
    if len(key) != KEY_LENGTH:
        msg = "Invalid key length"
        raise ValueError(msg)
    if len(iv) != IV_LENGTH:
        msg = "Invalid IV length"
        raise ValueError(msg)

    padder = padding.PKCS7(_BLOCK_BITS).padder()
    padded = padder.update(text.encode("utf-8")) + padder.finalize()
    encryptor = Cipher(algorithms.AES(bytes(key)), modes.CBC(bytes(iv))).encryptor()
    ciphertext = encryptor.update(padded) + encryptor.finalize()
    return f"{bytes(iv).hex()}:{ciphertext.hex()}"


def decrypt(encrypted_text_with_iv: str, key: bytes) -> str:
    """Decrypt a payload produced by :func:`encrypt`.

    Raises:
        ValueError: The payload is not in ``ivHex:encryptedHex`` form.
        DecryptionError: Anything else went wrong (bad hex, wrong key,
            corrupt padding, non-UTF-8 plaintext).
    """
    iv_hex, _, encrypted_hex = encrypted_text_with_iv.partition(":")
    encrypted_hex = encrypted_hex.split(":", 1)[0]
    if not iv_hex or not encrypted_hex:
        msg = "Invalid encrypted text format. Expected ivHex:encryptedHex"
        raise ValueError(msg)

    try:
        iv = bytes.fromhex(iv_hex)
        ciphertext = bytes.fromhex(encrypted_hex)
        decryptor = Cipher(algorithms.AES(bytes(key)), modes.CBC(iv)).decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()
        unpadder = padding.PKCS7(_BLOCK_BITS).unpadder()
        plaintext = unpadder.update(padded) + unpadder.finalize()
        return plaintext.decode("utf-8")
    except (ValueError, TypeError) as exc:
        message = str(exc) or "Unknown error"
        msg = f"Decryption failed: {message}"
        raise DecryptionError(msg) from exc


# ---------------------------------------------------------------------------
# UUID
# ---------------------------------------------------------------------------


def uuid(force_letter_start: bool = True) -> str:
    """Random version 4 UUID.

    With *force_letter_start* a leading digit is replaced by a random
    letter ``a``-``f``, so the result is usable as an HTML id or CSS class.
    """
    result = str(_uuid.uuid4())
    if force_letter_start and result[0].isdigit():
        result = secrets.choice("abcdef") + result[1:]
    return result
