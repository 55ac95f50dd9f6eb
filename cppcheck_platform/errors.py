# cppcheck_platform/errors.py
"""
Platform Error Types

Error Hierarchy:
────────────────
┌──────────────────────────────────────────────────────────────────┐
│  PlatformError (base)                                            │
│  ├── PlatformContractError   - caller defects (never caught)     │
│  ├── PlatformResolutionError - unknown name / no file found      │
│  │   └── PlatformFileError   - file found but invalid            │
│  └── UnknownStandardError    - bad language-standard tag         │
└──────────────────────────────────────────────────────────────────┘

Error Codes:
────────────
Each error carries a code of the form PLAT-XXXX:
  - 1000-1999: Resolution errors
  - 2000-2999: Platform file errors
  - 3000-3999: Language standard errors
  - 9000-9999: Contract violations (bugs in the caller)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class ErrorCode:
    """A stable error identifier."""

    number: int
    name: str
    prefix: str = "PLAT"

    @property
    def code(self) -> str:
        return f"{self.prefix}-{self.number:04d}"

    def __str__(self) -> str:
        return self.code


class PlatformErrorCodes:
    UNKNOWN_PLATFORM = ErrorCode(1001, "unknown-platform")
    NOT_RESOLVABLE = ErrorCode(1002, "not-resolvable")

    XML_PARSE = ErrorCode(2001, "xml-parse")
    BAD_ROOT = ErrorCode(2002, "bad-root")
    MISSING_ELEMENT = ErrorCode(2003, "missing-element")
    BAD_VALUE = ErrorCode(2004, "bad-value")

    UNKNOWN_STANDARD = ErrorCode(3001, "unknown-standard")

    BAD_BIT_WIDTH = ErrorCode(9001, "bad-bit-width")
    UNKNOWN_TYPE = ErrorCode(9002, "unknown-platform-type")
    BAD_SIZE = ErrorCode(9003, "bad-size")


# (path, reason) for every candidate file tried during a lookup
Attempt = Tuple[str, str]


class PlatformError(Exception):
    """Base exception for all platform errors."""

    default_code: ErrorCode = PlatformErrorCodes.UNKNOWN_PLATFORM

    def __init__(self, message: str, code: Optional[ErrorCode] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code

    def to_gcc_format(self) -> str:
        return f"error: {self.message} [{self.code}]"


class PlatformContractError(PlatformError):
    """A programming error in the caller: bad bit width, unknown type tag.

    These signal a defect, not bad input data, and are never turned into a
    boolean failure by the library.
    """

    default_code = PlatformErrorCodes.BAD_BIT_WIDTH


class PlatformResolutionError(PlatformError):
    """No predefined platform matched and no platform file could be loaded."""

    default_code = PlatformErrorCodes.UNKNOWN_PLATFORM

    def __init__(
        self,
        message: str,
        name: str = "",
        attempts: Sequence[Attempt] = (),
        code: Optional[ErrorCode] = None,
    ) -> None:
        super().__init__(message, code)
        self.name = name
        self.attempts: List[Attempt] = list(attempts)


class PlatformFileError(PlatformResolutionError):
    """A platform file was found but is not a valid platform description."""

    default_code = PlatformErrorCodes.MISSING_ELEMENT

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        code: Optional[ErrorCode] = None,
        attempts: Sequence[Attempt] = (),
    ) -> None:
        super().__init__(message, name=str(path or ""), attempts=attempts, code=code)
        self.path = path


class UnknownStandardError(PlatformError, ValueError):
    """The language-standard tag is not recognised."""

    default_code = PlatformErrorCodes.UNKNOWN_STANDARD

    def __init__(self, tag: Any) -> None:
        super().__init__(f"unknown language standard: '{tag}'")
        self.tag = tag
