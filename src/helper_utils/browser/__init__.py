"""Browser utility catalog: DOM, storage, events and environment helpers.

Helpers operate on caller-supplied handles or on the active
:class:`~helper_utils.browser.window.Window`.
"""

from helper_utils.browser.dom import (
    add_class,
    create_element,
    get_style,
    hide_element,
    remove_class,
    remove_element,
    set_attribute,
    set_style,
    show_element,
    toggle_class,
)
from helper_utils.browser.environment import copy_to_clipboard_async, get_os_info, uuid
from helper_utils.browser.events import debounce, on_delegate, once, throttle
from helper_utils.browser.network import fetch_json
from helper_utils.browser.query import (
    find_closest,
    has_class,
    query_selector_all_wrapper,
    query_selector_wrapper,
    query_selector_wrapper_all,
)
from helper_utils.browser.storage import (
    get_cookie,
    get_local_storage_json,
    parse_query_params,
    set_local_storage_json,
)
from helper_utils.browser.window import Window, create_window, get_global, use_window
from helper_utils.utils import get_unique_elements

__all__ = [
    "Window",
    "add_class",
    "copy_to_clipboard_async",
    "create_element",
    "create_window",
    "debounce",
    "fetch_json",
    "find_closest",
    "get_cookie",
    "get_global",
    "get_local_storage_json",
    "get_os_info",
    "get_style",
    "get_unique_elements",
    "has_class",
    "hide_element",
    "on_delegate",
    "once",
    "parse_query_params",
    "query_selector_all_wrapper",
    "query_selector_wrapper",
    "query_selector_wrapper_all",
    "remove_class",
    "remove_element",
    "set_attribute",
    "set_local_storage_json",
    "set_style",
    "show_element",
    "throttle",
    "toggle_class",
    "use_window",
    "uuid",
]
