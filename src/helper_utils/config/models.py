"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, helper_utils.toml only contains
overrides. An empty file (or no file) yields a fully usable configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True}

    verbose: bool = False
    log_json: bool = False


class StorageConfig(BaseModel):
    """[storage] section: backend used for a window's local storage."""

    model_config = {"frozen": True}

    backend: Literal["memory", "file"] = "memory"
    path: Path | None = None
    quota_bytes: int | None = 5 * 1024 * 1024


class DocumentConfig(BaseModel):
    """[document] section: the headless document a window starts with."""

    model_config = {"frozen": True}

    parser: str = "html.parser"
    markup: str = "<html><head></head><body></body></html>"
    cookie: str = ""
    url: str = ""

