"""
Install-directory resolution.

User files live next to the installed program rather than in a profile
directory. The program's location is expressed as a ``file:`` URI (the form a
packaged build reports), so resolving it means percent-decoding the URI and
taking its parent directory.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Optional
from urllib.parse import unquote, urlsplit

from .errors import PathResolutionError

BaseDirStrategy = Callable[[], Path]

_PACKAGE_DIR = Path(__file__).resolve().parent.parent  # arcadestore/


def code_source() -> str:
    """Return the program's own install location as a ``file:`` URI."""
    # When frozen by PyInstaller the executable is the packaged artifact
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().as_uri()
    return _PACKAGE_DIR.as_uri()


def resolve_base_dir(location: Optional[str] = None) -> Path:
    """Return the directory containing the program's packaged artifact.

    ``location`` defaults to :func:`code_source`. Both ``file:`` URIs and
    bare paths are accepted; percent escapes are decoded as strict UTF-8.
    """
    if location is None:
        try:
            location = code_source()
        except (OSError, ValueError) as exc:
            raise PathResolutionError("Cannot determine install location") from exc
    if not location:
        raise PathResolutionError("Cannot determine install location", location)

    parts = urlsplit(location)
    # single letters are drive names on Windows, not schemes
    if parts.scheme and len(parts.scheme) > 1:
        if parts.scheme != "file":
            raise PathResolutionError("Install location is not a local file", location)
        raw = parts.path
    else:
        raw = location
    try:
        decoded = unquote(raw, encoding="utf-8", errors="strict")
    except UnicodeDecodeError as exc:
        raise PathResolutionError("Install location is not valid UTF-8", location) from exc
    if not decoded:
        raise PathResolutionError("Install location is empty", location)

    # file:///C:/dir -> /C:/dir
    if len(decoded) > 2 and decoded[0] == "/" and decoded[2] == ":":
        decoded = decoded[1:]
    return Path(decoded).parent


def user_file(name: str, get_base_dir: BaseDirStrategy = resolve_base_dir) -> Path:
    base_obj = get_base_dir()
    base = base_obj if isinstance(base_obj, Path) else Path(str(base_obj))
    return base / name


def bundle_dir() -> Path:
    # When frozen by PyInstaller, sys._MEIPASS points to the temp extraction folder
    if getattr(sys, "frozen", False) and getattr(sys, "_MEIPASS", None):
        return Path(getattr(sys, "_MEIPASS")) / "arcadestore" / "res"  # type: ignore[attr-defined]
    return _PACKAGE_DIR / "res"
