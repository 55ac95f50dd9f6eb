# tests/test_document.py
"""
Tests for reading and writing platform-description documents.
"""

import xml.etree.ElementTree as ET
from unittest.mock import MagicMock

import pytest

from cppcheck_platform import (
    Platform,
    PlatformType,
    Sign,
    dump_xml_document,
    load_from_xml_document,
    lookup,
    parse_document,
    to_xml_string,
    write_platform_file,
)
from cppcheck_platform.errors import PlatformErrorCodes, PlatformFileError
from tests.conftest import make_platform_element, make_platform_xml


class TestLoad:

    def test_full_document(self):
        p = load_from_xml_document(make_platform_element())
        assert p.type is PlatformType.FILE
        assert p.char_bit == 8
        assert p.default_sign is Sign.SIGNED
        assert (p.short_bit, p.int_bit, p.long_bit, p.long_long_bit) == (16, 32, 64, 64)
        assert p.sizeof_long_double == 16
        assert p.sizeof_pointer == 8

    def test_matches_unix64_layout(self, unix64):
        p = load_from_xml_document(make_platform_element(sign=None))
        assert p.same_layout(unix64)

    def test_accepts_element_tree(self):
        tree = ET.ElementTree(make_platform_element())
        assert load_from_xml_document(tree).int_bit == 32

    def test_unsigned_default_sign(self):
        p = load_from_xml_document(make_platform_element(sign="unsigned"))
        assert p.default_sign is Sign.UNSIGNED

    def test_missing_default_sign_is_unspecified(self):
        p = load_from_xml_document(make_platform_element(sign=None))
        assert p.default_sign is Sign.UNSPECIFIED

    def test_bit_widths_scale_with_char_bit(self):
        p = load_from_xml_document(make_platform_element(char_bit="16"))
        assert p.short_bit == 32
        assert p.int_bit == 64

    def test_whitespace_around_values(self):
        p = load_from_xml_document(make_platform_element(char_bit=" 8 "))
        assert p.char_bit == 8

    @pytest.mark.parametrize("text, sign", [("s", Sign.SIGNED), ("U", Sign.UNSIGNED)])
    def test_single_letter_sign(self, text, sign):
        assert load_from_xml_document(make_platform_element(sign=text)).default_sign is sign

    def test_explicit_widths_override(self):
        root = make_platform_element()
        ET.SubElement(root, "int_bit").text = "24"
        ET.SubElement(root, "long_long_bit").text = " 48 "
        p = load_from_xml_document(root)
        assert p.int_bit == 24
        assert p.long_long_bit == 48
        assert p.long_bit == 64
        assert p.sizeof_int == 4

    def test_unknown_elements_ignored(self):
        root = make_platform_element()
        ET.SubElement(root, "comment").text = "extra"
        ET.SubElement(root.find("sizeof"), "int128").text = "16"
        assert load_from_xml_document(root).type is PlatformType.FILE


class TestLoadFailures:

    def test_wrong_root(self):
        with pytest.raises(PlatformFileError) as ei:
            load_from_xml_document(make_platform_element(root="library"))
        assert ei.value.code is PlatformErrorCodes.BAD_ROOT

    def test_missing_char_bit(self):
        with pytest.raises(PlatformFileError) as ei:
            load_from_xml_document(make_platform_element(drop=("char_bit",)))
        assert "char_bit" in ei.value.message
        assert ei.value.code is PlatformErrorCodes.MISSING_ELEMENT

    def test_missing_sizeof_entry(self):
        with pytest.raises(PlatformFileError) as ei:
            load_from_xml_document(make_platform_element(drop=("long-double", "pointer")))
        assert "sizeof/long-double" in ei.value.message
        assert "sizeof/pointer" in ei.value.message

    @pytest.mark.parametrize("bad", ["", "eight", "-8", "0", "8.0"])
    def test_bad_char_bit(self, bad):
        with pytest.raises(PlatformFileError) as ei:
            load_from_xml_document(make_platform_element(char_bit=bad))
        assert ei.value.code is PlatformErrorCodes.BAD_VALUE

    def test_bad_sizeof_value(self):
        sizes = make_platform_element()
        sizes.find("sizeof/int").text = "four"
        with pytest.raises(PlatformFileError):
            load_from_xml_document(sizes)

    def test_empty_default_sign(self):
        with pytest.raises(PlatformFileError):
            load_from_xml_document(make_platform_element(sign=""))

    @pytest.mark.parametrize("bad", ["banana", "sausage", "x", "unspecified"])
    def test_unrecognised_default_sign(self, bad):
        with pytest.raises(PlatformFileError) as ei:
            load_from_xml_document(make_platform_element(sign=bad))
        assert ei.value.code is PlatformErrorCodes.BAD_VALUE
        assert bad in ei.value.message

    @pytest.mark.parametrize("bad", ["0", "wide", "-16"])
    def test_bad_explicit_width(self, bad):
        root = make_platform_element()
        ET.SubElement(root, "int_bit").text = bad
        with pytest.raises(PlatformFileError) as ei:
            load_from_xml_document(root)
        assert ei.value.code is PlatformErrorCodes.BAD_VALUE
        assert "int_bit" in ei.value.message


class TestDocumentSeam:
    """The loader only needs tag/text/iteration from the document."""

    def _node(self, tag, text=None, children=()):
        node = MagicMock()
        node.tag = tag
        node.text = text
        node.__iter__.return_value = iter(list(children))
        return node

    def test_mock_document(self):
        sizes = [self._node(tag, str(v)) for tag, v in {
            "bool": 1, "short": 2, "int": 2, "long": 4, "long-long": 8,
            "float": 4, "double": 4, "long-double": 4, "wchar_t": 2,
            "size_t": 2, "pointer": 2,
        }.items()]
        root = self._node("platform", children=[
            self._node("char_bit", "8"),
            self._node("default-sign", "signed"),
            self._node("sizeof", children=sizes),
        ])
        del root.getroot
        p = load_from_xml_document(root)
        assert p.int_bit == 16
        assert p.sizeof_pointer == 2


class TestWrite:

    def test_dump_structure(self, unix64):
        root = dump_xml_document(unix64)
        assert root.tag == "platform"
        assert root.findtext("char_bit") == "8"
        assert root.findtext("sizeof/long-long") == "8"
        assert root.find("default-sign") is None

    def test_dump_writes_sign(self):
        root = dump_xml_document(Platform(default_sign=Sign.UNSIGNED))
        assert root.findtext("default-sign") == "unsigned"

    def test_xml_string_has_declaration(self, unix64):
        text = to_xml_string(unix64)
        assert text.startswith('<?xml version="1.0"?>')
        assert "<long-double>16</long-double>" in text

    @pytest.mark.parametrize("t", [
        PlatformType.NATIVE, PlatformType.WIN32A, PlatformType.WIN64,
        PlatformType.UNIX32, PlatformType.UNIX64,
    ])
    def test_round_trip(self, tmp_path, t):
        original = lookup(t)
        path = write_platform_file(original, tmp_path / f"{t}.xml")
        loaded = load_from_xml_document(parse_document(path))
        assert loaded.type is PlatformType.FILE
        assert loaded.replace(type=original.type) == original

    def test_round_trip_keeps_sign(self, tmp_path):
        original = lookup(PlatformType.UNIX32).replace(default_sign=Sign.UNSIGNED)
        path = write_platform_file(original, tmp_path / "sub" / "p.xml")
        assert load_from_xml_document(parse_document(path)).same_layout(original)

    def test_conventional_layout_has_no_width_elements(self, unix64):
        root = dump_xml_document(unix64)
        assert [el.tag for el in root if el.tag.endswith("_bit")] == ["char_bit"]

    def test_dump_writes_non_derived_widths(self, unix64):
        root = dump_xml_document(unix64.replace(int_bit=16, long_bit=40))
        assert root.findtext("int_bit") == "16"
        assert root.findtext("long_bit") == "40"
        assert root.find("short_bit") is None

    @pytest.mark.parametrize("changes", [
        {"int_bit": 16},
        {"short_bit": 12, "long_long_bit": 48},
        {"char_bit": 16},
    ])
    def test_round_trip_non_derived_widths(self, tmp_path, changes):
        original = lookup(PlatformType.UNIX64).replace(**changes)
        path = write_platform_file(original, tmp_path / "custom.xml")
        loaded = load_from_xml_document(parse_document(path))
        assert loaded.same_layout(original)


class TestParse:

    def test_parse_file(self, write_platform):
        path = write_platform("p.xml")
        assert parse_document(path).tag == "platform"

    def test_parse_error(self, write_platform, not_xml):
        path = write_platform("bad.xml", text=not_xml)
        with pytest.raises(ET.ParseError):
            parse_document(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_document(tmp_path / "absent.xml")

    def test_text_round_trip(self):
        assert ET.fromstring(make_platform_xml()).findtext("sizeof/int") == "4"
