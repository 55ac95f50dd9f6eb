#!/usr/bin/env python3
"""cppcheck_platform/main.py — command-line front-end.

Usage examples
--------------
    # Show a predefined platform
    cppcheck-platform show unix64

    # Show a platform file as XML
    cppcheck-platform -I ./cfg show avr8 --format xml

    # limits.h defines for C99 on 32-bit Windows
    cppcheck-platform limits win32A --std c99 --split

    # Does 3000000000 fit in a long on win64?
    cppcheck-platform check win64 3000000000 --type long

    # List predefined and bundled platforms
    cppcheck-platform list

Exit codes
----------
    0   Success (value in range for ``check``).
    1   ``check``: value out of range.
    2   Platform could not be resolved, or bad arguments.

Search directories may also be given through the ``CPPCHECK_PLATFORM_PATH``
environment variable (``os.pathsep`` separated); ``-I`` directories are
searched first.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
import textwrap
from typing import List, Optional, Sequence

import sexpdata
from sexpdata import Symbol
from termcolor import colored

from cppcheck_platform import __version__
from cppcheck_platform.descriptor import BIT_FIELDS, SIZEOF_FIELDS, Platform
from cppcheck_platform.document import to_xml_string
from cppcheck_platform.errors import PlatformError
from cppcheck_platform.limits import limits_macros
from cppcheck_platform.registry import registry_names
from cppcheck_platform.resolver import bundled_platform_files, resolve_platform
from cppcheck_platform.standards import CPP_LATEST, parse_standard

_log = logging.getLogger("cppcheck_platform")

EXIT_OK: int = 0
EXIT_OUT_OF_RANGE: int = 1
EXIT_INFRA: int = 2

ENV_PLATFORM_PATH = "CPPCHECK_PLATFORM_PATH"

_TYPE_CHECKS = {
    "int": ("is_int_value", "is_int_value_unsigned"),
    "long": ("is_long_value", "is_long_value_unsigned"),
    "long-long": ("is_long_long_value", "is_long_long_value_unsigned"),
}


# ===========================================================================
# Utility helpers
# ===========================================================================

def _configure_logging(verbosity: int) -> None:
    """Set up the ``cppcheck_platform`` logger.

    Parameters
    ----------
    verbosity:
        0 → WARNING, 1 → INFO, 2+ → DEBUG.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)-5.5s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root = logging.getLogger("cppcheck_platform")
    for old in [h for h in root.handlers if getattr(h, "_cli_handler", False)]:
        root.removeHandler(old)
    handler._cli_handler = True  # type: ignore[attr-defined]
    root.setLevel(level)
    root.addHandler(handler)


class _Painter:
    def __init__(self, enabled: bool) -> None:
        self.enabled = enabled

    def __call__(self, text: str, color: Optional[str] = None, bold: bool = False) -> str:
        return colored(
            text,
            color,
            attrs=["bold"] if bold else None,
            no_color=None if self.enabled else True,
        )


def _search_paths(args: argparse.Namespace) -> List[str]:
    paths = list(args.platform_path or [])
    env = os.environ.get(ENV_PLATFORM_PATH, "")
    paths.extend(p for p in env.split(os.pathsep) if p)
    return paths


def _resolve(args: argparse.Namespace) -> Platform:
    return resolve_platform(
        args.platform,
        search_paths=_search_paths(args),
        debug=args.debug,
    )


def _error(args: argparse.Namespace, message: str) -> int:
    paint = _Painter(not args.no_color)
    sys.stderr.write(f"{paint('error:', 'red', bold=True)} {message}\n")
    return EXIT_INFRA


# ===========================================================================
# Output formats
# ===========================================================================

def format_text(platform: Platform, paint: _Painter) -> str:
    lines = [paint(f"platform {platform.to_string()}", "cyan", bold=True)]
    for name in BIT_FIELDS:
        lines.append(f"  {name:<20} {getattr(platform, name)}")
    for name in SIZEOF_FIELDS:
        lines.append(f"  {'sizeof_' + name:<20} {getattr(platform, 'sizeof_' + name)}")
    lines.append(f"  {'default_sign':<20} {platform.default_sign.text}")
    lines.append(f"  {'windows':<20} {'yes' if platform.is_windows() else 'no'}")
    return "\n".join(lines) + "\n"


def format_sexp(platform: Platform) -> str:
    body = [[Symbol(k), Symbol(v) if isinstance(v, str) else v]
            for k, v in platform.to_dict().items()]
    return sexpdata.dumps([Symbol("platform")] + body) + "\n"


def format_json(platform: Platform) -> str:
    return json.dumps(platform.to_dict(), indent=2) + "\n"


# ===========================================================================
# Command handlers
# ===========================================================================

def _cmd_show(args: argparse.Namespace) -> int:
    try:
        platform = _resolve(args)
    except PlatformError as exc:
        return _error(args, exc.message)

    if args.format == "json":
        out = format_json(platform)
    elif args.format == "xml":
        out = to_xml_string(platform)
    elif args.format == "sexp":
        out = format_sexp(platform)
    else:
        out = format_text(platform, _Painter(not args.no_color))
    sys.stdout.write(out)
    return EXIT_OK


def _cmd_limits(args: argparse.Namespace) -> int:
    try:
        standard = parse_standard(args.std)
        platform = _resolve(args)
    except PlatformError as exc:
        return _error(args, exc.message)

    macros = limits_macros(platform, standard)
    _log.info("%d limit macros for %s on %s", len(macros), standard, platform.to_string())
    if args.split:
        sys.stdout.write("".join(f"{k}={v}\n" for k, v in macros.items()))
    else:
        sys.stdout.write(";".join(f"{k}={v}" for k, v in macros.items()) + "\n")
    return EXIT_OK


def _cmd_check(args: argparse.Namespace) -> int:
    try:
        value = int(args.value, 0)
    except ValueError:
        return _error(args, f"not an integer: '{args.value}'")
    if args.unsigned and value < 0:
        return _error(args, f"negative value {value} given with --unsigned")
    try:
        platform = _resolve(args)
    except PlatformError as exc:
        return _error(args, exc.message)

    signed_check, unsigned_check = _TYPE_CHECKS[args.type]
    fits = getattr(platform, unsigned_check if args.unsigned else signed_check)(value)
    paint = _Painter(not args.no_color)
    verdict = paint("fits", "green") if fits else paint("out of range", "red", bold=True)
    kind = f"unsigned value {value}" if args.unsigned else str(value)
    sys.stdout.write(f"{kind} as {args.type} on {platform.to_string()}: {verdict}\n")
    return EXIT_OK if fits else EXIT_OUT_OF_RANGE


def _cmd_list(args: argparse.Namespace) -> int:
    paint = _Painter(not args.no_color)
    sys.stdout.write(paint("predefined:", bold=True) + "\n")
    for name in registry_names():
        sys.stdout.write(f"  {name}\n")
    sys.stdout.write(paint("bundled files:", bold=True) + "\n")
    for path in bundled_platform_files():
        sys.stdout.write(f"  {path.stem}\n")
    return EXIT_OK


# ===========================================================================
# Argument parser
# ===========================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cppcheck-platform",
        description="Inspect target platform integer models.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""\
            examples:
              %(prog)s show unix64
              %(prog)s limits win32A --std c99
              %(prog)s check win64 3000000000 --type long
        """),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-I", "--platform-path",
        action="append",
        metavar="DIR",
        help="directory searched for platform files (repeatable)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="report every platform file lookup attempt",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="increase log verbosity (-v info, -vv debug)",
    )
    parser.add_argument("--no-color", action="store_true", help="disable coloured output")

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    p_show = subparsers.add_parser("show", help="print a resolved platform")
    p_show.add_argument("platform", help="platform name or file")
    p_show.add_argument(
        "--format",
        choices=("text", "json", "xml", "sexp"),
        default="text",
    )
    p_show.set_defaults(func=_cmd_show)

    p_limits = subparsers.add_parser("limits", help="print limits.h macro defines")
    p_limits.add_argument("platform", help="platform name or file")
    p_limits.add_argument(
        "--std",
        default=str(CPP_LATEST),
        help="language standard, e.g. c89, c99, gnu11, c++03, c++17 (default: %(default)s)",
    )
    p_limits.add_argument("--split", action="store_true", help="one define per line")
    p_limits.set_defaults(func=_cmd_limits)

    p_check = subparsers.add_parser("check", help="check whether a value fits a type")
    p_check.add_argument("platform", help="platform name or file")
    p_check.add_argument("value", help="integer literal (decimal, 0x, 0o or 0b)")
    p_check.add_argument("--type", choices=tuple(_TYPE_CHECKS), default="int")
    p_check.add_argument("--unsigned", action="store_true", help="treat the value as unsigned")
    p_check.set_defaults(func=_cmd_check)

    p_list = subparsers.add_parser("list", help="list known platforms")
    p_list.set_defaults(func=_cmd_list)

    return parser


# ===========================================================================
# Main
# ===========================================================================

def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_OK

    _configure_logging(args.verbose if not args.debug else max(args.verbose, 1))
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
