# tests/conftest.py
"""
Shared fixtures for the cppcheck_platform tests.
"""

import textwrap
import xml.etree.ElementTree as ET

import pytest

from cppcheck_platform import PlatformType, lookup

UNIX64_SIZES = {
    "bool": 1,
    "short": 2,
    "int": 4,
    "long": 8,
    "long-long": 8,
    "float": 4,
    "double": 8,
    "long-double": 16,
    "wchar_t": 4,
    "size_t": 8,
    "pointer": 8,
}


def make_platform_xml(char_bit="8", sign="signed", sizes=None, drop=(), root="platform"):
    """Build platform-file text; *drop* names elements to leave out."""
    sizes = dict(UNIX64_SIZES if sizes is None else sizes)
    lines = ['<?xml version="1.0"?>', f"<{root}>"]
    if "char_bit" not in drop:
        lines.append(f"  <char_bit>{char_bit}</char_bit>")
    if sign is not None and "default-sign" not in drop:
        lines.append(f"  <default-sign>{sign}</default-sign>")
    lines.append("  <sizeof>")
    for tag, value in sizes.items():
        if tag not in drop:
            lines.append(f"    <{tag}>{value}</{tag}>")
    lines.append("  </sizeof>")
    lines.append(f"</{root}>")
    return "\n".join(lines) + "\n"


def make_platform_element(**kwargs):
    return ET.fromstring(make_platform_xml(**kwargs))


@pytest.fixture
def write_platform(tmp_path):
    """Write a platform file under tmp_path and return its path."""

    def _write(relpath="custom.xml", text=None, **kwargs):
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text if text is not None else make_platform_xml(**kwargs))
        return path

    return _write


@pytest.fixture
def unix64():
    return lookup(PlatformType.UNIX64)


@pytest.fixture
def win32():
    return lookup(PlatformType.WIN32A)


@pytest.fixture
def not_xml():
    return textwrap.dedent("""\
        this is not
        <xml
    """)
