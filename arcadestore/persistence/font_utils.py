from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import pygame
import pygame.freetype

from .errors import FontFormatError
from .resources import BundledResources

logger = logging.getLogger(__name__)

FONT_FILE = "font.ttf"
FALLBACK_FAMILY = "serif"

# sfnt version tags: TrueType, CFF OpenType, Apple TrueType, collection
_SFNT_MAGIC = (b"\x00\x01\x00\x00", b"OTTO", b"true", b"ttcf")


def check_font_file(path: Path) -> None:
    """Raise FontFormatError unless ``path`` holds an outline font FreeType can open.

    pygame.font.Font accepts garbage without complaint and only fails (hard)
    once the font is used, so the file is checked before it is handed over.
    """
    with open(path, "rb") as fh:
        magic = fh.read(4)
    if magic not in _SFNT_MAGIC:
        raise FontFormatError(f"Not a TrueType/OpenType font (header {magic!r})", FONT_FILE)
    if not pygame.freetype.get_init():
        pygame.freetype.init()
    try:
        pygame.freetype.Font(str(path))
    # pygame.error derives from RuntimeError
    except (RuntimeError, OSError) as exc:
        raise FontFormatError(f"Cannot parse font: {exc}", FONT_FILE) from exc


def load_font(size: float, resources: Optional[BundledResources] = None) -> pygame.font.Font:
    """Load the bundled font at ``size`` points.

    A missing font file is not an error: a system serif font of the same
    size is returned instead. A font file that pygame cannot parse raises
    FontFormatError.
    """
    if size <= 0:
        raise ValueError(f"Font size must be positive: {size}")
    if not pygame.font.get_init():
        pygame.font.init()
    res = resources or BundledResources()
    path = res.path(FONT_FILE)
    pt = max(1, int(round(size)))
    if not path.is_file():
        logger.warning("Custom font not found, applying default font.")
        return pygame.font.SysFont(FALLBACK_FAMILY, pt)
    check_font_file(path)
    try:
        return pygame.font.Font(str(path), pt)
    except (RuntimeError, OSError) as exc:
        raise FontFormatError(f"Cannot parse font: {exc}", FONT_FILE) from exc
