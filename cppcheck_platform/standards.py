"""
C and C++ language standards.

Standard tags are the spellings compilers accept for ``-std=``::

    c89  c90  iso9899:1990  gnu89        -> CStandard.C89
    c99  c9x  iso9899:1999  gnu99        -> CStandard.C99
    c11  c1x  iso9899:2011  gnu11        -> CStandard.C11
    c17  c18  iso9899:2017  gnu17        -> CStandard.C17
    c23  c2x  iso9899:2024  gnu23        -> CStandard.C23
    c++98 c++03 gnu++98                  -> CppStandard.CPP03
    c++11 c++0x                          -> CppStandard.CPP11
    c++14 c++1y   c++17 c++1z   c++20 c++2a
    c++23 c++2b   c++26 c++2c

Tags are matched case-insensitively by a small PEG grammar.
"""

from __future__ import annotations

import enum
from typing import Dict, Union

from parsimonious.exceptions import ParseError, VisitationError
from parsimonious.grammar import Grammar
from parsimonious.nodes import NodeVisitor

from cppcheck_platform.errors import UnknownStandardError


class CStandard(enum.IntEnum):
    C89 = 0
    C99 = 1
    C11 = 2
    C17 = 3
    C23 = 4

    def __str__(self) -> str:
        return "c" + self.name[1:]


class CppStandard(enum.IntEnum):
    CPP03 = 0
    CPP11 = 1
    CPP14 = 2
    CPP17 = 3
    CPP20 = 4
    CPP23 = 5
    CPP26 = 6

    def __str__(self) -> str:
        return "c++" + self.name[3:]


Standard = Union[CStandard, CppStandard]

C_LATEST = CStandard.C23
CPP_LATEST = CppStandard.CPP26


STANDARD_GRAMMAR = Grammar(r'''
    standard    = cpp_std / c_std

    cpp_std     = cpp_prefix cpp_version
    cpp_prefix  = "c++" / "gnu++"
    cpp_version = "98" / "03" / "0x" / "11" / "1y" / "14" / "1z" / "17"
                / "2a" / "20" / "2b" / "23" / "2c" / "26"

    c_std       = iso_std / c_short
    iso_std     = "iso9899:" iso_year
    iso_year    = "199409" / "1990" / "1999" / "2011" / "2017" / "2018" / "2024"
    c_short     = c_prefix c_version
    c_prefix    = "c" / "gnu"
    c_version   = "89" / "90" / "99" / "9x" / "11" / "1x" / "17" / "18"
                / "23" / "2x"
''')

_CPP_VERSIONS: Dict[str, CppStandard] = {
    "98": CppStandard.CPP03,
    "03": CppStandard.CPP03,
    "0x": CppStandard.CPP11,
    "11": CppStandard.CPP11,
    "1y": CppStandard.CPP14,
    "14": CppStandard.CPP14,
    "1z": CppStandard.CPP17,
    "17": CppStandard.CPP17,
    "2a": CppStandard.CPP20,
    "20": CppStandard.CPP20,
    "2b": CppStandard.CPP23,
    "23": CppStandard.CPP23,
    "2c": CppStandard.CPP26,
    "26": CppStandard.CPP26,
}

_C_VERSIONS: Dict[str, CStandard] = {
    "89": CStandard.C89,
    "90": CStandard.C89,
    "99": CStandard.C99,
    "9x": CStandard.C99,
    "11": CStandard.C11,
    "1x": CStandard.C11,
    "17": CStandard.C17,
    "18": CStandard.C17,
    "23": CStandard.C23,
    "2x": CStandard.C23,
}

_ISO_YEARS: Dict[str, CStandard] = {
    "1990": CStandard.C89,
    "199409": CStandard.C89,
    "1999": CStandard.C99,
    "2011": CStandard.C11,
    "2017": CStandard.C17,
    "2018": CStandard.C17,
    "2024": CStandard.C23,
}


class _StandardVisitor(NodeVisitor):
    """Parse tree -> CStandard / CppStandard."""

    def visit_standard(self, node, visited_children):
        return visited_children[0]

    def visit_c_std(self, node, visited_children):
        return visited_children[0]

    def visit_cpp_std(self, node, visited_children):
        _, version = visited_children
        return _CPP_VERSIONS[version]

    def visit_iso_std(self, node, visited_children):
        _, year = visited_children
        return _ISO_YEARS[year]

    def visit_c_short(self, node, visited_children):
        _, version = visited_children
        return _C_VERSIONS[version]

    def visit_cpp_version(self, node, visited_children):
        return node.text

    visit_c_version = visit_cpp_version
    visit_iso_year = visit_cpp_version

    def generic_visit(self, node, visited_children):
        return visited_children or node


_VISITOR = _StandardVisitor()


def parse_standard(tag: Union[str, Standard]) -> Standard:
    """Parse a standard tag; enum members are returned unchanged."""
    if isinstance(tag, (CStandard, CppStandard)):
        return tag
    if not isinstance(tag, str):
        raise UnknownStandardError(tag)
    try:
        tree = STANDARD_GRAMMAR.parse(tag.strip().lower())
        return _VISITOR.visit(tree)
    except (ParseError, VisitationError):
        raise UnknownStandardError(tag) from None


def is_cpp(standard: Standard) -> bool:
    return isinstance(standard, CppStandard)
