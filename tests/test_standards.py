# tests/test_standards.py
"""
Tests for the language-standard tag grammar.
"""

import pytest
from parsimonious.exceptions import ParseError

from cppcheck_platform.errors import UnknownStandardError
from cppcheck_platform.standards import (
    CPP_LATEST,
    C_LATEST,
    STANDARD_GRAMMAR,
    CppStandard,
    CStandard,
    is_cpp,
    parse_standard,
)


class TestGrammar:

    def test_rules_present(self):
        for rule in ("standard", "cpp_std", "c_std", "iso_std", "c_short"):
            assert rule in STANDARD_GRAMMAR

    def test_cpp_prefix_before_c(self):
        tree = STANDARD_GRAMMAR.parse("c++11")
        assert tree.children[0].expr_name == "cpp_std"

    def test_rejects_trailing_text(self):
        with pytest.raises(ParseError):
            STANDARD_GRAMMAR.parse("c99x")


class TestParseC:

    @pytest.mark.parametrize("tag, std", [
        ("c89", CStandard.C89),
        ("c90", CStandard.C89),
        ("gnu89", CStandard.C89),
        ("iso9899:1990", CStandard.C89),
        ("iso9899:199409", CStandard.C89),
        ("c99", CStandard.C99),
        ("c9x", CStandard.C99),
        ("gnu99", CStandard.C99),
        ("iso9899:1999", CStandard.C99),
        ("c11", CStandard.C11),
        ("c1x", CStandard.C11),
        ("iso9899:2011", CStandard.C11),
        ("c17", CStandard.C17),
        ("c18", CStandard.C17),
        ("gnu17", CStandard.C17),
        ("iso9899:2018", CStandard.C17),
        ("c23", CStandard.C23),
        ("c2x", CStandard.C23),
        ("gnu23", CStandard.C23),
    ])
    def test_tags(self, tag, std):
        assert parse_standard(tag) is std
        assert not is_cpp(std)


class TestParseCpp:

    @pytest.mark.parametrize("tag, std", [
        ("c++98", CppStandard.CPP03),
        ("c++03", CppStandard.CPP03),
        ("gnu++98", CppStandard.CPP03),
        ("c++11", CppStandard.CPP11),
        ("c++0x", CppStandard.CPP11),
        ("c++14", CppStandard.CPP14),
        ("c++1y", CppStandard.CPP14),
        ("c++17", CppStandard.CPP17),
        ("gnu++1z", CppStandard.CPP17),
        ("c++20", CppStandard.CPP20),
        ("c++2a", CppStandard.CPP20),
        ("c++23", CppStandard.CPP23),
        ("c++2b", CppStandard.CPP23),
        ("c++26", CppStandard.CPP26),
        ("c++2c", CppStandard.CPP26),
    ])
    def test_tags(self, tag, std):
        assert parse_standard(tag) is std
        assert is_cpp(std)


class TestParseMisc:

    def test_case_and_whitespace(self):
        assert parse_standard(" C99 ") is CStandard.C99
        assert parse_standard("C++17") is CppStandard.CPP17

    def test_enum_passthrough(self):
        assert parse_standard(CppStandard.CPP11) is CppStandard.CPP11

    @pytest.mark.parametrize("tag", ["", "c42", "c++42", "cpp17", "iso9899:2000", "latest"])
    def test_unknown(self, tag):
        with pytest.raises(UnknownStandardError) as ei:
            parse_standard(tag)
        assert ei.value.tag == tag

    def test_unknown_is_value_error(self):
        with pytest.raises(ValueError):
            parse_standard("k&r")

    @pytest.mark.parametrize("tag", [99, None, 11.0, b"c99"])
    def test_non_string_tag(self, tag):
        with pytest.raises(UnknownStandardError) as ei:
            parse_standard(tag)
        assert ei.value.tag == tag

    def test_ordering(self):
        assert CStandard.C89 < CStandard.C99 < CStandard.C23
        assert CppStandard.CPP03 < CppStandard.CPP11 < CppStandard.CPP26

    def test_str(self):
        assert str(CStandard.C11) == "c11"
        assert str(CppStandard.CPP17) == "c++17"
        assert parse_standard(str(C_LATEST)) is C_LATEST
        assert parse_standard(str(CPP_LATEST)) is CPP_LATEST
