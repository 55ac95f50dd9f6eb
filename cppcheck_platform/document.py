"""
Platform-description documents.

Reads and writes the XML form of a :class:`Platform`::

    <?xml version="1.0"?>
    <platform>
      <char_bit>8</char_bit>
      <int_bit>32</int_bit>          (optional, defaults to char_bit * sizeof)
      <default-sign>signed</default-sign>
      <sizeof>
        <bool>1</bool>
        <short>2</short>
        ...
        <pointer>8</pointer>
      </sizeof>
    </platform>

Parsing is delegated to :mod:`xml.etree.ElementTree`; the schema walk in
:func:`load_from_xml_document` only needs an element exposing ``tag``,
``text`` and iteration over its children, so any object of that shape can
stand in for a parsed document.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Dict, Optional, Union

from cppcheck_platform.descriptor import (
    DERIVED_BIT_TYPES,
    SIZEOF_FIELDS,
    Platform,
    PlatformType,
    Sign,
)
from cppcheck_platform.errors import PlatformErrorCodes, PlatformFileError

logger = logging.getLogger(__name__)

ROOT_TAG = "platform"

# <sizeof> child tag -> sizeof_* suffix
_SIZEOF_TAGS: Dict[str, str] = {
    "bool": "bool",
    "short": "short",
    "int": "int",
    "long": "long",
    "long-long": "long_long",
    "float": "float",
    "double": "double",
    "long-double": "long_double",
    "wchar_t": "wchar_t",
    "size_t": "size_t",
    "pointer": "pointer",
}
_SIZEOF_NAMES: Dict[str, str] = {v: k for k, v in _SIZEOF_TAGS.items()}

# Optional top-level widths; absent ones are char_bit * sizeof.
_WIDTH_TAGS = tuple(f"{name}_bit" for name in DERIVED_BIT_TYPES)

PathLike = Union[str, Path]


def parse_document(path: PathLike) -> ET.Element:
    """Parse *path* as XML and return its root element.

    Raises :class:`OSError` when the file cannot be opened and
    :class:`xml.etree.ElementTree.ParseError` when it is not well formed.
    """
    return ET.parse(str(path)).getroot()


def _uint(node: Any, where: str, path: Optional[Path]) -> int:
    text = (node.text or "").strip()
    if not (text.isascii() and text.isdigit()) or int(text) == 0:
        raise PlatformFileError(
            f"invalid value '{text}' for <{where}>: expected a positive integer",
            path=path,
            code=PlatformErrorCodes.BAD_VALUE,
        )
    return int(text)


def load_from_xml_document(doc: Any, path: Optional[Path] = None) -> Platform:
    """Build a ``FILE`` descriptor from a parsed platform document.

    *doc* is either a root element or an object with ``getroot()``.  The
    descriptor is only built once every required element has been read, so
    a failure never yields a partially populated platform.
    """
    root = doc.getroot() if hasattr(doc, "getroot") else doc
    if root is None or root.tag != ROOT_TAG:
        tag = getattr(root, "tag", None)
        raise PlatformFileError(
            f"root element is <{tag}>, expected <{ROOT_TAG}>",
            path=path,
            code=PlatformErrorCodes.BAD_ROOT,
        )

    char_bit: Optional[int] = None
    sign = Sign.UNSPECIFIED
    sizes: Dict[str, int] = {}
    bits: Dict[str, int] = {}

    for node in root:
        if node.tag == "default-sign":
            text = (node.text or "").strip()
            if not text:
                raise PlatformFileError(
                    "empty <default-sign>", path=path, code=PlatformErrorCodes.BAD_VALUE
                )
            try:
                sign = Sign.from_text(text)
            except ValueError:
                raise PlatformFileError(
                    f"invalid value '{text}' for <default-sign>: expected signed or unsigned",
                    path=path,
                    code=PlatformErrorCodes.BAD_VALUE,
                ) from None
        elif node.tag == "char_bit":
            char_bit = _uint(node, "char_bit", path)
        elif node.tag in _WIDTH_TAGS:
            bits[node.tag] = _uint(node, node.tag, path)
        elif node.tag == "sizeof":
            for sz in node:
                name = _SIZEOF_TAGS.get(sz.tag)
                if name is None:
                    logger.debug("ignoring unknown <sizeof> entry <%s>", sz.tag)
                    continue
                sizes[name] = _uint(sz, f"sizeof/{sz.tag}", path)
        else:
            logger.debug("ignoring unknown element <%s>", node.tag)

    if char_bit is None:
        raise PlatformFileError(
            "missing required element <char_bit>",
            path=path,
            code=PlatformErrorCodes.MISSING_ELEMENT,
        )
    missing = [_SIZEOF_NAMES[n] for n in SIZEOF_FIELDS if n not in sizes]
    if missing:
        raise PlatformFileError(
            "missing required element(s) "
            + ", ".join(f"<sizeof/{m}>" for m in missing),
            path=path,
            code=PlatformErrorCodes.MISSING_ELEMENT,
        )

    return Platform.from_sizes(
        char_bit, sizes, default_sign=sign, type=PlatformType.FILE, bits=bits
    )


# ═════════════════════════════════════════════════════════════════════════
#  WRITING
# ═════════════════════════════════════════════════════════════════════════

def dump_xml_document(platform: Platform) -> ET.Element:
    """Serialise *platform* to a ``<platform>`` element.

    Widths equal to ``char_bit * sizeof`` are left implicit, so files for
    conventional layouts keep the plain Cppcheck schema.
    """
    root = ET.Element(ROOT_TAG)
    ET.SubElement(root, "char_bit").text = str(platform.char_bit)
    for tag, value in platform.explicit_bits().items():
        ET.SubElement(root, tag).text = str(value)
    if platform.default_sign is not Sign.UNSPECIFIED:
        ET.SubElement(root, "default-sign").text = platform.default_sign.text
    sizeof = ET.SubElement(root, "sizeof")
    for name, value in platform.sizes().items():
        ET.SubElement(sizeof, _SIZEOF_NAMES[name]).text = str(value)
    return root


def to_xml_string(platform: Platform) -> str:
    root = dump_xml_document(platform)
    ET.indent(root)
    return '<?xml version="1.0"?>\n' + ET.tostring(root, encoding="unicode") + "\n"


def write_platform_file(platform: Platform, path: PathLike) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(to_xml_string(platform), encoding="utf-8")
    logger.debug("wrote platform file %s", p)
    return p
