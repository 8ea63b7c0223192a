"""Host utility catalog: filesystem, paths, processes, crypto and OS info."""

from helper_utils.system.crypto import decrypt, encrypt, generate_hash, uuid
from helper_utils.system.filesystem import (
    create_directory,
    file_exists,
    is_directory,
    list_directory_contents,
    read_file_async,
    remove_directory,
    write_file_async,
)
from helper_utils.system.osinfo import (
    get_cpu_info,
    get_hostname,
    get_memory_info,
    get_network_interfaces,
)
from helper_utils.system.paths import (
    get_basename,
    get_dirname,
    get_extension,
    join_paths,
    resolve_path,
)
from helper_utils.system.process import ExecResult, env, exec_async

__all__ = [
    "ExecResult",
    "create_directory",
    "decrypt",
    "encrypt",
    "env",
    "exec_async",
    "file_exists",
    "generate_hash",
    "get_basename",
    "get_cpu_info",
    "get_dirname",
    "get_extension",
    "get_hostname",
    "get_memory_info",
    "get_network_interfaces",
    "is_directory",
    "join_paths",
    "list_directory_contents",
    "read_file_async",
    "remove_directory",
    "resolve_path",
    "uuid",
    "write_file_async",
]
