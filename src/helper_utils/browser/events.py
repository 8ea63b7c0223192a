"""Timing control and event registration helpers.

``debounce`` and ``throttle`` keep their state (one timer, one timestamp)
inside the returned wrapper; nothing is shared between wrappers.
"""

from __future__ import annotations

import functools
import logging
import threading
import time
from collections.abc import Callable, Mapping
from typing import Any

from helper_utils.result import attempt

logger = logging.getLogger(__name__)


def debounce(func: Callable[..., Any], delay: float) -> Callable[..., None]:
    """Delay *func* until *delay* milliseconds pass without another call.

    Each call cancels the pending timer and schedules a new one, so only the
    last call's arguments reach *func*. *func* runs on a timer thread;
    exceptions it raises are logged, not re-raised.
    """
    lock = threading.Lock()
    timer: threading.Timer | None = None

    def run(args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        try:
            func(*args, **kwargs)
        except Exception:
            logger.exception("Error in debounced function")

    @functools.wraps(func)
    def debounced(*args: Any, **kwargs: Any) -> None:
        nonlocal timer
        with lock:
            if timer is not None:
                timer.cancel()
            timer = threading.Timer(max(delay, 0) / 1000, run, args=(args, kwargs))
            timer.daemon = True
            timer.start()

    return debounced


def throttle(func: Callable[..., Any], limit: float) -> Callable[..., Any]:
    """Run *func* at most once per *limit* milliseconds.

    The first call in an open window runs immediately and returns *func*'s
    result; calls inside the window are dropped and return None. A limit of
    zero never throttles.
    """
    lock = threading.Lock()
    last_call: float | None = None

    @functools.wraps(func)
    def throttled(*args: Any, **kwargs: Any) -> Any:
        nonlocal last_call
        now = time.monotonic()
        with lock:
            is_open = limit == 0 or last_call is None or (now - last_call) * 1000 >= limit
            if not is_open:
                return None
            last_call = now
        return func(*args, **kwargs)

    return throttled


def once(
    element: Any,
    event_type: str,
    listener: Callable[[Any], Any],
    options: bool | Mapping[str, Any] | None = None,
) -> None:
    """Register *listener* so that it is removed after its first invocation."""
    register = getattr(element, "add_event_listener", None)
    if element is None or not callable(register):
        return

    if isinstance(options, bool):
        event_options: dict[str, Any] = {"capture": options, "once": True}
    elif isinstance(options, Mapping):
        event_options = {**options, "once": True}
    else:
        event_options = {"once": True}

    register(event_type, listener, event_options)


def on_delegate(
    parent_element: Any,
    event_type: str,
    selector: str,
    callback: Callable[[Any], Any],
    options: bool | Mapping[str, Any] | None = None,
) -> None:
    """Listen on *parent_element* and call *callback* for matching targets.

    Only the event's own target is tested against *selector*; ancestors of
    the target are not considered. Errors raised by ``matches`` or by
    *callback* are logged and swallowed.
    """
    if parent_element is None:
        return

    def handler(event: Any) -> None:
        target = getattr(event, "target", None)
        matches = getattr(target, "matches", None)
        if target is None or not callable(matches):
            return
        if attempt("on_delegate", matches, selector).value_or(False):
            attempt("on_delegate", callback, event)

    parent_element.add_event_listener(event_type, handler, options)
