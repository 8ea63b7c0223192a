"""Pure path-string helpers with Node ``path`` semantics.

Unlike :mod:`os.path`, trailing separators never change the last segment
(``get_basename("a/b/") == "b"``) and later absolute segments do not reset
:func:`join_paths`.
"""

from __future__ import annotations

import os
import re
import sys

_WINDOWS_DRIVE_RE = re.compile(r"^[A-Za-z]:[\\/]")
_WINDOWS_SEPARATORS_RE = re.compile(r"[\\/]+")


def _require_str(value: object) -> str:
    if not isinstance(value, str):
        msg = f'The "path" argument must be of type str, got {type(value).__name__}'
        raise TypeError(msg)
    return value


def _strip_trailing(p: str) -> str:
    return p.rstrip(os.sep + (os.altsep or ""))


def _single_root(p: str) -> str:
    # posixpath keeps exactly two leading slashes; Node keeps one.
    if os.sep == "/" and p.startswith("//"):
        return p[1:]
    return p


def _posix_dirname(p: str) -> str:
    has_root = p.startswith("/")
    end = -1
    matched_slash = True
    for i in range(len(p) - 1, 0, -1):
        if p[i] == "/":
            if not matched_slash:
                end = i
                break
        else:
            matched_slash = False
    if end == -1:
        return "/" if has_root else "."
    if has_root and end == 1:
        return "//"
    return p[:end]


def get_basename(p: str, ext: str | None = None) -> str:
    """Last segment of *p*, minus *ext* when it is a proper suffix.

    Empty or non-string input yields ``""``, as does an *ext* equal to the
    whole of *p*.
    """
    if not p or not isinstance(p, str) or p == ext:
        return ""
    base = os.path.basename(_strip_trailing(p))
    if ext and base.endswith(ext) and base != ext:
        base = base[: -len(ext)]
    return base


def get_dirname(p: str) -> str:
    """Directory part of *p*; ``"."`` for empty or non-string input.

    Windows drive paths are understood on POSIX hosts too:
    ``C:\\file.txt`` -> ``C:\\`` and ``C:\\a\\b`` -> ``C:\\a``.
    """
    if not p or not isinstance(p, str):
        return "."

    if sys.platform != "win32" and _WINDOWS_DRIVE_RE.match(p):
        segments = _WINDOWS_SEPARATORS_RE.split(p)
        if len(segments) <= 2:
            return segments[0] + "\\"
        segments.pop()
        return "\\".join(segments)

    if os.sep == "/":
        return _posix_dirname(p)

    stripped = _strip_trailing(p)
    if not stripped:
        return os.sep
    head = os.path.dirname(stripped)
    if not head:
        return "."
    return _strip_trailing(head) or os.sep


def get_extension(p: str) -> str:
    """Extension of the last segment of *p*, dot included (``".txt"``).

    Dot-files (``.bashrc``) have no extension; ``"file."`` yields ``"."``.
    """
    if not p or not isinstance(p, str):
        return ""
    _, ext = os.path.splitext(os.path.basename(_strip_trailing(p)))
    return ext


def join_paths(*paths: str) -> str:
    """Join and normalise *paths*; ``"."`` when nothing remains.

    Examples:
        >>> join_paths("a", "b", "../c")
        'a/c'
        >>> join_paths("a", "/b")
        'a/b'
    """
    parts = [_require_str(p) for p in paths]
    joined = os.sep.join(p for p in parts if p)
    if not joined:
        return "."
    normalized = _single_root(os.path.normpath(joined))
    if joined.endswith(os.sep) and not normalized.endswith(os.sep):
        normalized += os.sep
    return normalized


def resolve_path(*paths: str) -> str:
    """Absolute, normalised path built right-to-left from *paths* and the cwd."""
    parts = [_require_str(p) for p in paths]
    return _single_root(os.path.abspath(os.path.join(os.getcwd(), *(p for p in parts if p))))
