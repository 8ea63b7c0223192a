"""Host information: CPUs, memory, hostname and network interfaces.

Backed by :mod:`psutil`; shapes follow the browser-side ``get_os_info``
conventions (plain dicts, JSON-serialisable).
"""

from __future__ import annotations

import ipaddress
import platform
import socket
import sys
from pathlib import Path
from typing import Any

import psutil

_NULL_MAC = "00:00:00:00:00:00"
_FAMILIES = {socket.AF_INET: "IPv4", socket.AF_INET6: "IPv6"}


def _cpu_model() -> str:
    if sys.platform.startswith("linux"):
        try:
            for line in Path("/proc/cpuinfo").read_text(encoding="utf-8").splitlines():
                key, _, value = line.partition(":")
                if key.strip() in ("model name", "Hardware", "Processor"):
                    return value.strip()
        except OSError:
            pass
    return platform.processor() or platform.machine()


def get_cpu_info() -> list[dict[str, Any]]:
    """One entry per logical CPU with ``model``, ``speed`` (MHz) and ``times`` (ms)."""
    model = _cpu_model()
    times = psutil.cpu_times(percpu=True)
    try:
        freqs = psutil.cpu_freq(percpu=True) or []
    except (NotImplementedError, OSError):
        freqs = []

    cpus: list[dict[str, Any]] = []
    for index, cpu_times in enumerate(times):
        if index < len(freqs):
            speed = int(freqs[index].current)
        elif freqs:
            speed = int(freqs[0].current)
        else:
            speed = 0
        cpus.append(
            {
                "model": model,
                "speed": speed,
                "times": {
                    "user": int(getattr(cpu_times, "user", 0.0) * 1000),
                    "nice": int(getattr(cpu_times, "nice", 0.0) * 1000),
                    "sys": int(getattr(cpu_times, "system", 0.0) * 1000),
                    "idle": int(getattr(cpu_times, "idle", 0.0) * 1000),
                    "irq": int(getattr(cpu_times, "irq", 0.0) * 1000),
                },
            }
        )
    return cpus


def get_memory_info() -> dict[str, int]:
    """Total and available system memory in bytes."""
    memory = psutil.virtual_memory()
    return {"total_memory": int(memory.total), "free_memory": int(memory.available)}


def get_hostname() -> str:
    return socket.gethostname()


# ---------------------------------------------------------------------------
# Network interfaces
# ---------------------------------------------------------------------------


def _cidr(address: str, netmask: str | None) -> str | None:
    if not netmask:
        return None
    bare = address.split("%", 1)[0]
    try:
        ipaddress.ip_address(bare)
        mask = ipaddress.ip_address(netmask)
    except ValueError:
        return None
    prefixlen = bin(int(mask)).count("1")
    return f"{bare}/{prefixlen}"


def _is_internal(name: str, address: str) -> bool:
    try:
        return ipaddress.ip_address(address.split("%", 1)[0]).is_loopback
    except ValueError:
        return name.startswith("lo")


def get_network_interfaces() -> dict[str, list[dict[str, Any]]]:
    """IPv4/IPv6 addresses per interface.

    Each entry carries ``address``, ``netmask``, ``family`` (``"IPv4"`` or
    ``"IPv6"``), ``mac``, ``internal`` and ``cidr``. Interfaces without an IP
    address are omitted.
    """
    interfaces: dict[str, list[dict[str, Any]]] = {}
    for name, addrs in psutil.net_if_addrs().items():
        mac = next((a.address for a in addrs if a.family == psutil.AF_LINK), _NULL_MAC)
        entries = [
            {
                "address": addr.address,
                "netmask": addr.netmask,
                "family": _FAMILIES[addr.family],
                "mac": mac,
                "internal": _is_internal(name, addr.address),
                "cidr": _cidr(addr.address, addr.netmask),
            }
            for addr in addrs
            if addr.family in _FAMILIES
        ]
        if entries:
            interfaces[name] = entries
    return interfaces
