"""
Predefined platform registry.

A read-only table from :class:`PlatformType` to the fixed descriptor for
that platform.  ``UNSPECIFIED`` and ``FILE`` have no entry: the first is the
default descriptor, the second marks a descriptor loaded from a file.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from cppcheck_platform.descriptor import Platform, PlatformType, Sign

_CHAR_BIT = 8

_WIN32_SIZES: Dict[str, int] = {
    "bool": 1,
    "short": 2,
    "int": 4,
    "long": 4,
    "long_long": 8,
    "float": 4,
    "double": 8,
    "long_double": 8,
    "wchar_t": 2,
    "size_t": 4,
    "pointer": 4,
}

_WIN64_SIZES: Dict[str, int] = dict(_WIN32_SIZES, size_t=8, pointer=8)

_UNIX32_SIZES: Dict[str, int] = dict(_WIN32_SIZES, long_double=12, wchar_t=4)

_UNIX64_SIZES: Dict[str, int] = dict(
    _WIN32_SIZES, long=8, long_double=16, wchar_t=4, size_t=8, pointer=8
)


def _entry(t: PlatformType, sizes: Mapping[str, int]) -> Platform:
    return Platform.from_sizes(_CHAR_BIT, sizes, default_sign=Sign.UNSPECIFIED, type=t)


REGISTRY: Mapping[PlatformType, Platform] = MappingProxyType({
    PlatformType.NATIVE: Platform().replace(type=PlatformType.NATIVE),
    PlatformType.WIN32A: _entry(PlatformType.WIN32A, _WIN32_SIZES),
    PlatformType.WIN32W: _entry(PlatformType.WIN32W, _WIN32_SIZES),
    PlatformType.WIN64: _entry(PlatformType.WIN64, _WIN64_SIZES),
    PlatformType.UNIX32: _entry(PlatformType.UNIX32, _UNIX32_SIZES),
    PlatformType.UNIX64: _entry(PlatformType.UNIX64, _UNIX64_SIZES),
})


def lookup(t: PlatformType) -> Optional[Platform]:
    """Return the predefined descriptor for *t*, or ``None`` if it has none."""
    return REGISTRY.get(t)


def registry_names() -> List[str]:
    """Identifiers accepted for registry lookup, in table order."""
    return [PlatformType.to_string(t) for t in REGISTRY]
