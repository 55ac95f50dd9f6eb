"""Probe the integer layout of the interpreter's own host."""

from __future__ import annotations

import ctypes
import platform as _pyplatform
import sys
from typing import Dict

# Targets whose ABI makes plain ``char`` unsigned (outside Windows and Apple).
_UNSIGNED_CHAR_MACHINES = ("arm", "aarch64", "ppc", "powerpc", "s390", "riscv")

HOST_CHAR_BIT: int = 8


def host_sizes() -> Dict[str, int]:
    """Return ``sizeof`` of each fundamental type on the host, in bytes."""
    return {
        "bool": ctypes.sizeof(ctypes.c_bool),
        "short": ctypes.sizeof(ctypes.c_short),
        "int": ctypes.sizeof(ctypes.c_int),
        "long": ctypes.sizeof(ctypes.c_long),
        "long_long": ctypes.sizeof(ctypes.c_longlong),
        "float": ctypes.sizeof(ctypes.c_float),
        "double": ctypes.sizeof(ctypes.c_double),
        "long_double": ctypes.sizeof(ctypes.c_longdouble),
        "wchar_t": ctypes.sizeof(ctypes.c_wchar),
        "size_t": ctypes.sizeof(ctypes.c_size_t),
        "pointer": ctypes.sizeof(ctypes.c_void_p),
    }


def host_char_is_signed() -> bool:
    if sys.platform.startswith(("win", "cygwin", "darwin")):
        return True
    machine = _pyplatform.machine().lower()
    return not machine.startswith(_UNSIGNED_CHAR_MACHINES)


HOST_SIZES: Dict[str, int] = host_sizes()
