"""
Platform resolution.

Turns a platform name, a :class:`PlatformType` or a platform file into a
fully populated :class:`Platform`.

Lookup order for a name
-----------------------
1. The predefined identifiers ``native``, ``win32A``, ``win32W``, ``win64``,
   ``unix32`` and ``unix64`` (case-sensitive) resolve from the registry;
   ``unspecified`` resets to the default descriptor.
2. Anything else is a platform file.  Base locations are tried in order:
   the current directory (or the absolute path itself), each search path,
   the directory of the invoking executable, then the platform files that
   ship with this package.  In each base, ``NAME``, ``NAME.xml``,
   ``platforms/NAME`` and ``platforms/NAME.xml`` are tried.  The first file
   that parses wins; files are never merged.

The module-level functions raise :class:`PlatformResolutionError`.
:class:`PlatformSettings` wraps them in the boolean-plus-``errstr`` form and
only ever swaps in a complete new descriptor.
"""

from __future__ import annotations

import logging
import sys
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Callable, Iterable, List, Optional, Sequence, Union

from cppcheck_platform.descriptor import Platform, PlatformType
from cppcheck_platform.document import PathLike, load_from_xml_document, parse_document
from cppcheck_platform.errors import (
    Attempt,
    PlatformError,
    PlatformErrorCodes,
    PlatformFileError,
    PlatformResolutionError,
)
from cppcheck_platform.registry import lookup

logger = logging.getLogger(__name__)

DocumentLoader = Callable[[Path], Any]

PLATFORM_FILE_SUFFIX = ".xml"
PLATFORMS_DIR = "platforms"

# Directory holding the bundled platforms/ folder.
BUNDLED_BASE: Path = Path(__file__).resolve().parent


def bundled_platform_files() -> List[Path]:
    return sorted((BUNDLED_BASE / PLATFORMS_DIR).glob(f"*{PLATFORM_FILE_SUFFIX}"))


def _file_names(filename: str) -> List[str]:
    names = [filename]
    if not filename.endswith(PLATFORM_FILE_SUFFIX):
        names.append(filename + PLATFORM_FILE_SUFFIX)
    return names + [f"{PLATFORMS_DIR}/{n}" for n in names]


def candidate_paths(
    filename: str,
    search_paths: Sequence[PathLike] = (),
    exe_path: Optional[PathLike] = None,
) -> List[Path]:
    """All locations tried for *filename*, in lookup order, without duplicates."""
    bases: List[Optional[Path]] = [None]
    bases.extend(Path(p) for p in search_paths)
    if exe_path:
        bases.append(Path(exe_path).parent)
    bases.append(BUNDLED_BASE)

    seen = set()
    result: List[Path] = []
    for base in bases:
        for name in _file_names(filename):
            path = Path(name) if base is None else base / name
            key = str(path)
            if key not in seen:
                seen.add(key)
                result.append(path)
    return result


def _format_attempts(attempts: Iterable[Attempt]) -> str:
    return "".join(f"\n  {path}: {reason}" for path, reason in attempts)


def _load_first(
    filename: str,
    search_paths: Sequence[PathLike],
    exe_path: Optional[PathLike],
    debug: bool,
    loader: DocumentLoader,
) -> Platform:
    log = logger.info if debug else logger.debug
    attempts: List[Attempt] = []

    for path in candidate_paths(filename, search_paths, exe_path):
        try:
            doc = loader(path)
        except FileNotFoundError:
            reason = "not found"
        except (OSError, ET.ParseError) as exc:
            reason = str(exc) or type(exc).__name__
        else:
            log("try to load platform file '%s' ... Success", path)
            attempts.append((str(path), "loaded"))
            try:
                return load_from_xml_document(doc, path=path)
            except PlatformFileError as exc:
                exc.attempts = list(attempts)
                exc.message = f"platform file '{path}' is invalid: {exc.message}"
                exc.args = (exc.message,)
                raise
        log("try to load platform file '%s' ... %s", path, reason)
        attempts.append((str(path), reason))

    message = f"unrecognized platform: '{filename}'."
    if debug:
        message += " Tried:" + _format_attempts(attempts)
    raise PlatformResolutionError(message, name=filename, attempts=attempts)


def load_from_file(
    exe_path: Optional[PathLike],
    filename: str,
    debug: bool = False,
    loader: DocumentLoader = parse_document,
) -> Platform:
    """Load the platform file *filename*, searching next to *exe_path*."""
    return _load_first(filename, (), exe_path, debug, loader)


def resolve_platform(
    name: str,
    search_paths: Sequence[PathLike] = (),
    exe_path: Optional[PathLike] = None,
    debug: bool = False,
    loader: DocumentLoader = parse_document,
) -> Platform:
    """Resolve *name* to a descriptor (see module docstring for the order).

    *exe_path* defaults to ``sys.argv[0]``.
    """
    if name == PlatformType.to_string(PlatformType.UNSPECIFIED):
        return Platform()
    t = PlatformType.from_string(name)
    if t is not None:
        entry = lookup(t)
        if entry is not None:
            return entry
    if exe_path is None and sys.argv and sys.argv[0]:
        exe_path = sys.argv[0]
    if debug:
        for p in search_paths:
            logger.info("looking for platform '%s' in '%s'", name, p)
    return _load_first(name, search_paths, exe_path, debug, loader)


# ═════════════════════════════════════════════════════════════════════════
#  OWNING HANDLE
# ═════════════════════════════════════════════════════════════════════════

class PlatformSettings:
    """Holds the platform of one analysis configuration.

    Every successful ``set``/``load_*`` call replaces :attr:`platform` with a
    new record; a failed call leaves it untouched and describes the problem
    in :attr:`errstr`.
    """

    def __init__(
        self,
        platform: Optional[Platform] = None,
        exe_path: Optional[PathLike] = None,
        loader: DocumentLoader = parse_document,
    ) -> None:
        self._platform = platform if platform is not None else Platform()
        self.exe_path = exe_path
        self.loader = loader
        self.errstr = ""
        self.last_error: Optional[PlatformError] = None

    @property
    def platform(self) -> Platform:
        return self._platform

    def _swap(self, platform: Platform) -> bool:
        self._platform = platform
        self.errstr = ""
        self.last_error = None
        return True

    def _fail(self, exc: PlatformError) -> bool:
        self.errstr = exc.message
        self.last_error = exc
        return False

    def set_type(self, t: PlatformType) -> bool:
        """Switch to the predefined platform *t*; ``False`` if it has none."""
        entry = lookup(t)
        if entry is None:
            return self._fail(PlatformResolutionError(
                f"platform '{PlatformType.to_string(t)}' is not a predefined platform",
                name=PlatformType.to_string(t),
                code=PlatformErrorCodes.NOT_RESOLVABLE,
            ))
        return self._swap(entry)

    def set(
        self,
        platform: Union[PlatformType, str],
        search_paths: Sequence[PathLike] = (),
        debug: bool = False,
    ) -> bool:
        if isinstance(platform, PlatformType):
            return self.set_type(platform)
        try:
            resolved = resolve_platform(
                platform, search_paths, self.exe_path, debug, self.loader
            )
        except PlatformResolutionError as exc:
            return self._fail(exc)
        return self._swap(resolved)

    def load_from_file(
        self,
        filename: str,
        debug: bool = False,
        exe_path: Optional[PathLike] = None,
    ) -> bool:
        try:
            loaded = load_from_file(exe_path or self.exe_path, filename, debug, self.loader)
        except PlatformResolutionError as exc:
            return self._fail(exc)
        return self._swap(loaded)

    def load_from_xml_document(self, doc: Any) -> bool:
        try:
            loaded = load_from_xml_document(doc)
        except PlatformFileError as exc:
            return self._fail(exc)
        return self._swap(loaded)

    def __repr__(self) -> str:
        return f"PlatformSettings(platform={self._platform.to_string()!r})"
