"""CallResult and CallError: the explicit form of a swallowed failure.

INVARIANT: Helpers documented as "never raises" route their single platform
call through :func:`attempt` and return ``result.value_or(sentinel)``.
The caller-visible contract stays a sentinel; the failure path is logged
and inspectable here.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class CallError(BaseModel):
    """Structured description of the exception a platform call raised."""

    model_config = {"frozen": True}

    code: str
    message: str


class CallResult(BaseModel):
    """Outcome of one platform call.

    Attributes:
        ok: Whether the call returned normally.
        op: Name of the operation (e.g. ``"add_class"``).
        value: Return value of the call on success.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    ok: bool
    op: str
    value: Any = None
    error: CallError | None = None

    def value_or(self, default: Any) -> Any:
        """Return :attr:`value` on success, *default* otherwise."""
        return self.value if self.ok else default


def attempt(op: str, func: Callable[..., Any], *args: Any, **kwargs: Any) -> CallResult:
    """Run ``func(*args, **kwargs)`` and capture any exception as a CallResult."""
    try:
        value = func(*args, **kwargs)
    except Exception as exc:
        logger.debug("%s swallowed %s", op, type(exc).__name__, exc_info=True)
        return CallResult(
            ok=False,
            op=op,
            error=CallError(code=type(exc).__name__, message=str(exc)),
        )
    return CallResult(ok=True, op=op, value=value)
