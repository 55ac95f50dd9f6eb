"""
cppcheck_platform/descriptor.py
═══════════════════════════════

The platform descriptor: bit widths, byte sizes, default ``char`` sign and
the tag recording how the descriptor was produced.

A :class:`Platform` is immutable.  Resolving a different platform builds a
whole new record (see :mod:`cppcheck_platform.resolver`); nothing ever
patches the fields of a record another reader may be holding.

Usage
─────
    from cppcheck_platform import Platform, PlatformType, lookup

    p = lookup(PlatformType.UNIX64)
    p.is_long_value(2**40)          # True, long is 64 bits
    p.is_int_value(2**40)           # False
    p.is_windows()                  # False
"""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from cppcheck_platform.errors import PlatformContractError, PlatformErrorCodes
from cppcheck_platform.host import HOST_CHAR_BIT, HOST_SIZES, host_char_is_signed
from cppcheck_platform.ranges import max_value, max_value_unsigned, min_value


# ═════════════════════════════════════════════════════════════════════════
#  ENUMS
# ═════════════════════════════════════════════════════════════════════════

class Sign(enum.Enum):
    """Signedness of plain ``char``."""

    UNSIGNED = "u"
    SIGNED = "s"
    UNSPECIFIED = "\0"

    @classmethod
    def from_text(cls, text: str) -> Sign:
        """Map ``"signed"`` / ``"unsigned"`` or ``"s"`` / ``"u"``.

        Raises :class:`ValueError` for anything else.
        """
        try:
            return _SIGN_WORDS[text.strip().lower()]
        except KeyError:
            raise ValueError(f"not a char sign: {text!r}") from None

    @property
    def text(self) -> str:
        return {
            Sign.UNSIGNED: "unsigned",
            Sign.SIGNED: "signed",
            Sign.UNSPECIFIED: "unspecified",
        }[self]


class PlatformType(enum.Enum):
    """How a descriptor was produced."""

    UNSPECIFIED = enum.auto()   # no platform specified
    NATIVE = enum.auto()        # the host running the analysis
    WIN32A = enum.auto()
    WIN32W = enum.auto()
    WIN64 = enum.auto()
    UNIX32 = enum.auto()
    UNIX64 = enum.auto()
    FILE = enum.auto()          # loaded from a platform file

    @staticmethod
    def to_string(pt: PlatformType) -> str:
        try:
            return _TYPE_NAMES[pt]
        except (KeyError, TypeError):
            raise PlatformContractError(
                f"unknown platform: {pt!r}", PlatformErrorCodes.UNKNOWN_TYPE
            ) from None

    @classmethod
    def from_string(cls, name: str) -> Optional[PlatformType]:
        """Exact, case-sensitive reverse of :meth:`to_string`."""
        return _NAMES_TO_TYPE.get(name)

    def __str__(self) -> str:
        return PlatformType.to_string(self)


_SIGN_WORDS: Dict[str, Sign] = {
    "signed": Sign.SIGNED,
    "s": Sign.SIGNED,
    "unsigned": Sign.UNSIGNED,
    "u": Sign.UNSIGNED,
}

_TYPE_NAMES: Dict[PlatformType, str] = {
    PlatformType.UNSPECIFIED: "unspecified",
    PlatformType.NATIVE: "native",
    PlatformType.WIN32A: "win32A",
    PlatformType.WIN32W: "win32W",
    PlatformType.WIN64: "win64",
    PlatformType.UNIX32: "unix32",
    PlatformType.UNIX64: "unix64",
    PlatformType.FILE: "platformFile",
}

_NAMES_TO_TYPE: Dict[str, PlatformType] = {v: k for k, v in _TYPE_NAMES.items()}

_WINDOWS_TYPES = frozenset({PlatformType.WIN32A, PlatformType.WIN32W, PlatformType.WIN64})

# Field name suffixes of the sizeof_* members, in declaration order.
SIZEOF_FIELDS = (
    "bool",
    "short",
    "int",
    "long",
    "long_long",
    "float",
    "double",
    "long_double",
    "wchar_t",
    "size_t",
    "pointer",
)

BIT_FIELDS = ("char_bit", "short_bit", "int_bit", "long_bit", "long_long_bit")

# Types whose *_bit width defaults to char_bit * sizeof_*.
DERIVED_BIT_TYPES = ("short", "int", "long", "long_long")


# ═════════════════════════════════════════════════════════════════════════
#  DESCRIPTOR
# ═════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Platform:
    """Integer-type characteristics of a target platform.

    The no-argument constructor yields the default descriptor: the host's
    own layout tagged :attr:`PlatformType.UNSPECIFIED`.
    """

    char_bit: int = HOST_CHAR_BIT
    short_bit: int = HOST_CHAR_BIT * HOST_SIZES["short"]
    int_bit: int = HOST_CHAR_BIT * HOST_SIZES["int"]
    long_bit: int = HOST_CHAR_BIT * HOST_SIZES["long"]
    long_long_bit: int = HOST_CHAR_BIT * HOST_SIZES["long_long"]

    sizeof_bool: int = HOST_SIZES["bool"]
    sizeof_short: int = HOST_SIZES["short"]
    sizeof_int: int = HOST_SIZES["int"]
    sizeof_long: int = HOST_SIZES["long"]
    sizeof_long_long: int = HOST_SIZES["long_long"]
    sizeof_float: int = HOST_SIZES["float"]
    sizeof_double: int = HOST_SIZES["double"]
    sizeof_long_double: int = HOST_SIZES["long_double"]
    sizeof_wchar_t: int = HOST_SIZES["wchar_t"]
    sizeof_size_t: int = HOST_SIZES["size_t"]
    sizeof_pointer: int = HOST_SIZES["pointer"]

    default_sign: Sign = Sign.SIGNED if host_char_is_signed() else Sign.UNSIGNED
    type: PlatformType = PlatformType.UNSPECIFIED

    def __post_init__(self) -> None:
        for name in BIT_FIELDS:
            if getattr(self, name) <= 0:
                raise PlatformContractError(
                    f"{name} must be positive, got {getattr(self, name)}",
                    PlatformErrorCodes.BAD_BIT_WIDTH,
                )
        for name in SIZEOF_FIELDS:
            if getattr(self, f"sizeof_{name}") < 1:
                raise PlatformContractError(
                    f"sizeof_{name} must be at least 1, got {getattr(self, f'sizeof_{name}')}",
                    PlatformErrorCodes.BAD_SIZE,
                )

    @classmethod
    def from_sizes(
        cls,
        char_bit: int,
        sizes: Mapping[str, int],
        default_sign: Sign = Sign.UNSPECIFIED,
        type: PlatformType = PlatformType.UNSPECIFIED,
        bits: Optional[Mapping[str, int]] = None,
    ) -> Platform:
        """Build a descriptor whose bit widths are ``char_bit * sizeof``.

        *sizes* maps every name in :data:`SIZEOF_FIELDS` to a byte count.
        *bits* overrides individual widths, keyed by ``short_bit`` and the
        other :data:`BIT_FIELDS` names except ``char_bit``.
        """
        widths = {
            f"{name}_bit": char_bit * sizes[name] for name in DERIVED_BIT_TYPES
        }
        widths.update(bits or {})
        return cls(
            char_bit=char_bit,
            default_sign=default_sign,
            type=type,
            **widths,
            **{f"sizeof_{name}": sizes[name] for name in SIZEOF_FIELDS},
        )

    def sizes(self) -> Dict[str, int]:
        return {name: getattr(self, f"sizeof_{name}") for name in SIZEOF_FIELDS}

    def explicit_bits(self) -> Dict[str, int]:
        """Widths that differ from ``char_bit * sizeof``."""
        return {
            f"{name}_bit": getattr(self, f"{name}_bit")
            for name in DERIVED_BIT_TYPES
            if getattr(self, f"{name}_bit") != self.char_bit * getattr(self, f"sizeof_{name}")
        }

    def replace(self, **changes: Any) -> Platform:
        return dataclasses.replace(self, **changes)

    def same_layout(self, other: Platform) -> bool:
        """True when every field except :attr:`type` matches."""
        return self.replace(type=other.type) == other

    # ── range queries ────────────────────────────────────────────────────

    def is_int_value(self, value: int) -> bool:
        return min_value(self.int_bit) <= value <= max_value(self.int_bit)

    def is_int_value_unsigned(self, value: int) -> bool:
        return value <= max_value(self.int_bit)

    def is_long_value(self, value: int) -> bool:
        return min_value(self.long_bit) <= value <= max_value(self.long_bit)

    def is_long_value_unsigned(self, value: int) -> bool:
        return value <= max_value(self.long_bit)

    def is_long_long_value(self, value: int) -> bool:
        return min_value(self.long_long_bit) <= value <= max_value(self.long_long_bit)

    def is_long_long_value_unsigned(self, value: int) -> bool:
        # compared against the signed maximum: a literal above it needs an
        # unsigned type
        return value <= max_value(self.long_long_bit)

    def unsigned_char_max(self) -> int:
        return max_value_unsigned(self.char_bit)

    def signed_char_max(self) -> int:
        return max_value(self.char_bit)

    def signed_char_min(self) -> int:
        return min_value(self.char_bit)

    def char_is_signed(self) -> bool:
        return self.default_sign is not Sign.UNSIGNED

    def char_min(self) -> int:
        return self.signed_char_min() if self.char_is_signed() else 0

    def char_max(self) -> int:
        return self.signed_char_max() if self.char_is_signed() else self.unsigned_char_max()

    # ── classification ───────────────────────────────────────────────────

    def is_windows(self) -> bool:
        return self.type in _WINDOWS_TYPES

    def to_string(self) -> str:
        return PlatformType.to_string(self.type)

    def get_limits_defines(self, standard: Any) -> str:
        """See :func:`cppcheck_platform.limits.get_limits_defines`."""
        from cppcheck_platform.limits import get_limits_defines

        return get_limits_defines(self, standard)

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"type": self.to_string()}
        for name in BIT_FIELDS:
            d[name] = getattr(self, name)
        for name in SIZEOF_FIELDS:
            d[f"sizeof_{name}"] = getattr(self, f"sizeof_{name}")
        d["default_sign"] = self.default_sign.text
        return d
