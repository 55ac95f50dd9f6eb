"""
``limits.h`` / ``<climits>`` macro generation.

Produces the integer-limit macros a compiler's standard headers would
define for a platform, as the ``NAME=value;NAME=value`` define list a
preprocessor emulation consumes::

    >>> get_limits_defines(lookup(PlatformType.UNIX64), "c89")[:40]
    'CHAR_BIT=8;SCHAR_MIN=-128;SCHAR_MAX=127;'

Which macros exist depends on the language standard:

=================================  ==========================
macros                             defined since
=================================  ==========================
``CHAR_BIT`` ... ``ULONG_MAX``     C89, C++98
``LLONG_MIN`` ``LLONG_MAX``        C99, C++11
``ULLONG_MAX``
``*_WIDTH``                        C23, C++26
=================================  ==========================
"""

from __future__ import annotations

from typing import Dict, Union

from cppcheck_platform.descriptor import Platform
from cppcheck_platform.ranges import max_value, max_value_unsigned, min_value
from cppcheck_platform.standards import (
    CppStandard,
    CStandard,
    Standard,
    is_cpp,
    parse_standard,
)


def _has_long_long(standard: Standard) -> bool:
    if is_cpp(standard):
        return standard >= CppStandard.CPP11
    return standard >= CStandard.C99


def _has_width_macros(standard: Standard) -> bool:
    if is_cpp(standard):
        return standard >= CppStandard.CPP26
    return standard >= CStandard.C23


def _negative_min(maximum: int, suffix: str = "") -> str:
    # written as -MAX - 1: the literal MIN itself would not fit the type
    return f"(-{maximum}{suffix} - 1{suffix})"


def limits_macros(platform: Platform, standard: Union[str, Standard]) -> Dict[str, str]:
    """Ordered mapping of limit macro name to its replacement text."""
    std = parse_standard(standard)
    p = platform

    macros: Dict[str, str] = {
        "CHAR_BIT": str(p.char_bit),
        "SCHAR_MIN": str(p.signed_char_min()),
        "SCHAR_MAX": str(p.signed_char_max()),
        "UCHAR_MAX": str(p.unsigned_char_max()),
        "CHAR_MIN": str(p.char_min()),
        "CHAR_MAX": str(p.char_max()),
        "SHRT_MIN": str(min_value(p.short_bit)),
        "SHRT_MAX": str(max_value(p.short_bit)),
        "USHRT_MAX": str(max_value_unsigned(p.short_bit)),
        "INT_MIN": _negative_min(max_value(p.int_bit)),
        "INT_MAX": str(max_value(p.int_bit)),
        "UINT_MAX": f"{max_value_unsigned(p.int_bit)}U",
        "LONG_MIN": _negative_min(max_value(p.long_bit), "L"),
        "LONG_MAX": f"{max_value(p.long_bit)}L",
        "ULONG_MAX": f"{max_value_unsigned(p.long_bit)}UL",
    }

    if _has_long_long(std):
        macros["LLONG_MIN"] = _negative_min(max_value(p.long_long_bit), "LL")
        macros["LLONG_MAX"] = f"{max_value(p.long_long_bit)}LL"
        macros["ULLONG_MAX"] = f"{max_value_unsigned(p.long_long_bit)}ULL"

    if _has_width_macros(std):
        macros.update({
            "BOOL_WIDTH": "1",
            "CHAR_WIDTH": str(p.char_bit),
            "SCHAR_WIDTH": str(p.char_bit),
            "UCHAR_WIDTH": str(p.char_bit),
            "SHRT_WIDTH": str(p.short_bit),
            "USHRT_WIDTH": str(p.short_bit),
            "INT_WIDTH": str(p.int_bit),
            "UINT_WIDTH": str(p.int_bit),
            "LONG_WIDTH": str(p.long_bit),
            "ULONG_WIDTH": str(p.long_bit),
            "LLONG_WIDTH": str(p.long_long_bit),
            "ULLONG_WIDTH": str(p.long_long_bit),
        })

    return macros


def get_limits_defines(platform: Platform, standard: Union[str, Standard]) -> str:
    """The limit macros of *standard* for *platform* as a define list."""
    return ";".join(f"{k}={v}" for k, v in limits_macros(platform, standard).items())
