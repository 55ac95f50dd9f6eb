"""
Range arithmetic for two's-complement integer types.

Converts a bit width into the signed minimum, signed maximum and unsigned
maximum of an integer type of that width.  Widths of 64 and above are
treated as exactly 64 and answered from the fixed 64-bit limits, so no
bound is ever derived by shifting a value by its full width.
"""

from __future__ import annotations

import functools

from cppcheck_platform.errors import PlatformContractError, PlatformErrorCodes

# Native 64-bit limits (long long / unsigned long long)
LLONG_MIN: int = -0x8000000000000000
LLONG_MAX: int = 0x7FFFFFFFFFFFFFFF
ULLONG_MAX: int = 0xFFFFFFFFFFFFFFFF

MAX_BIT_WIDTH: int = 64


def _check_width(bit: int) -> None:
    if bit <= 0:
        raise PlatformContractError(
            f"bit width must be positive, got {bit}",
            PlatformErrorCodes.BAD_BIT_WIDTH,
        )


@functools.lru_cache(maxsize=None)
def min_value(bit: int) -> int:
    """Smallest signed value representable in *bit* bits."""
    _check_width(bit)
    if bit >= MAX_BIT_WIDTH:
        return LLONG_MIN
    return -(1 << (bit - 1))


@functools.lru_cache(maxsize=None)
def max_value(bit: int) -> int:
    """Largest signed value representable in *bit* bits."""
    _check_width(bit)
    if bit >= MAX_BIT_WIDTH:
        return LLONG_MAX
    return (1 << (bit - 1)) - 1


@functools.lru_cache(maxsize=None)
def max_value_unsigned(bit: int) -> int:
    """Largest unsigned value representable in *bit* bits."""
    _check_width(bit)
    if bit >= MAX_BIT_WIDTH:
        return ULLONG_MAX
    return (1 << bit) - 1
