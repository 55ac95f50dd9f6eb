"""
cppcheck_platform — Target Platform Integer Model
=================================================

Bit widths, byte sizes and default ``char`` signedness of the platform a
C/C++ analysis targets, with the integer ranges derived from them.

Core modules
------------
ranges
    Signed/unsigned bounds for a bit width.
descriptor
    The immutable :class:`Platform` record and its range queries.
registry
    Predefined platforms (``win32A`` ... ``unix64``, ``native``).
document
    Platform-description XML files.
resolver
    Name / file resolution and the :class:`PlatformSettings` handle.
standards
    C and C++ standard tags.
limits
    ``limits.h`` macro generation.

Quick start
-----------
>>> from cppcheck_platform import PlatformSettings
>>> settings = PlatformSettings()
>>> settings.set("win64")
True
>>> settings.platform.is_windows()
True
>>> settings.platform.is_long_value(2**31)
False
"""

from __future__ import annotations

import logging
from typing import List

from cppcheck_platform.descriptor import Platform, PlatformType, Sign
from cppcheck_platform.document import (
    dump_xml_document,
    load_from_xml_document,
    parse_document,
    to_xml_string,
    write_platform_file,
)
from cppcheck_platform.errors import (
    PlatformContractError,
    PlatformError,
    PlatformFileError,
    PlatformResolutionError,
    UnknownStandardError,
)
from cppcheck_platform.limits import get_limits_defines, limits_macros
from cppcheck_platform.ranges import max_value, max_value_unsigned, min_value
from cppcheck_platform.registry import REGISTRY, lookup, registry_names
from cppcheck_platform.resolver import (
    PlatformSettings,
    load_from_file,
    resolve_platform,
)
from cppcheck_platform.standards import CppStandard, CStandard, parse_standard

__version__ = "0.2.0"

__all__: List[str] = [
    "Platform",
    "PlatformType",
    "Sign",
    "PlatformSettings",
    "REGISTRY",
    "lookup",
    "registry_names",
    "resolve_platform",
    "load_from_file",
    "load_from_xml_document",
    "parse_document",
    "dump_xml_document",
    "to_xml_string",
    "write_platform_file",
    "min_value",
    "max_value",
    "max_value_unsigned",
    "CStandard",
    "CppStandard",
    "parse_standard",
    "get_limits_defines",
    "limits_macros",
    "PlatformError",
    "PlatformContractError",
    "PlatformResolutionError",
    "PlatformFileError",
    "UnknownStandardError",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
