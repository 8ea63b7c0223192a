"""helper-utils: browser and host utility catalogs behind one import.

``uuid`` exists in both catalogs; the host variant (with
``force_letter_start``) is the one exported here.
"""

from helper_utils.browser import (
    Window,
    add_class,
    copy_to_clipboard_async,
    create_element,
    create_window,
    debounce,
    fetch_json,
    find_closest,
    get_cookie,
    get_global,
    get_local_storage_json,
    get_os_info,
    get_style,
    has_class,
    hide_element,
    on_delegate,
    once,
    parse_query_params,
    query_selector_all_wrapper,
    query_selector_wrapper,
    query_selector_wrapper_all,
    remove_class,
    remove_element,
    set_attribute,
    set_local_storage_json,
    set_style,
    show_element,
    throttle,
    toggle_class,
    use_window,
)
from helper_utils.errors import (
    ClipboardUnavailableError,
    DecryptionError,
    DocumentUnavailableError,
    HelperUtilsError,
    HTTPStatusError,
    InvalidCharacterError,
    InvalidTokenError,
    StorageQuotaExceededError,
    StorageUnavailableError,
)
from helper_utils.result import CallError, CallResult, attempt
from helper_utils.system import (
    ExecResult,
    create_directory,
    decrypt,
    encrypt,
    env,
    exec_async,
    file_exists,
    generate_hash,
    get_basename,
    get_cpu_info,
    get_dirname,
    get_extension,
    get_hostname,
    get_memory_info,
    get_network_interfaces,
    is_directory,
    join_paths,
    list_directory_contents,
    read_file_async,
    remove_directory,
    resolve_path,
    uuid,
    write_file_async,
)
from helper_utils.utils import get_unique_elements

__version__ = "1.2.0"

__all__ = [
    "CallError",
    "CallResult",
    "ClipboardUnavailableError",
    "DecryptionError",
    "DocumentUnavailableError",
    "ExecResult",
    "HTTPStatusError",
    "HelperUtilsError",
    "InvalidCharacterError",
    "InvalidTokenError",
    "StorageQuotaExceededError",
    "StorageUnavailableError",
    "Window",
    "__version__",
    "add_class",
    "attempt",
    "copy_to_clipboard_async",
    "create_directory",
    "create_element",
    "create_window",
    "debounce",
    "decrypt",
    "encrypt",
    "env",
    "exec_async",
    "fetch_json",
    "file_exists",
    "find_closest",
    "generate_hash",
    "get_basename",
    "get_cookie",
    "get_cpu_info",
    "get_dirname",
    "get_extension",
    "get_global",
    "get_hostname",
    "get_local_storage_json",
    "get_memory_info",
    "get_network_interfaces",
    "get_os_info",
    "get_style",
    "get_unique_elements",
    "has_class",
    "hide_element",
    "is_directory",
    "join_paths",
    "list_directory_contents",
    "on_delegate",
    "once",
    "parse_query_params",
    "query_selector_all_wrapper",
    "query_selector_wrapper",
    "query_selector_wrapper_all",
    "read_file_async",
    "remove_class",
    "remove_directory",
    "remove_element",
    "resolve_path",
    "set_attribute",
    "set_local_storage_json",
    "set_style",
    "show_element",
    "throttle",
    "toggle_class",
    "use_window",
    "uuid",
    "write_file_async",
]
