"""
Monochrome sprite bitmaps.

The bundled ``graphics`` resource is a bare run of ``0``/``1`` bytes.
Any other byte (newlines, spaces) only separates them. There are no kind tags,
so bitmaps must be read in exactly the order they were authored.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Mapping, Optional, Tuple

from .errors import ResourceLoadError
from .resources import BundledResources

logger = logging.getLogger(__name__)

GRAPHICS_FILE = "graphics"

Bitmap = List[List[bool]]


class SpriteType(Enum):
    """Sprite kinds, declared in the order of the bundled graphics resource."""
    SHIP = "ship"
    SHIP_DESTROYED = "ship_destroyed"
    BULLET = "bullet"
    ENEMY_BULLET = "enemy_bullet"
    ENEMY_SHIP_A1 = "enemy_ship_a1"
    ENEMY_SHIP_A2 = "enemy_ship_a2"
    ENEMY_SHIP_B1 = "enemy_ship_b1"
    ENEMY_SHIP_B2 = "enemy_ship_b2"
    ENEMY_SHIP_C1 = "enemy_ship_c1"
    ENEMY_SHIP_C2 = "enemy_ship_c2"
    ENEMY_SHIP_SPECIAL = "enemy_ship_special"
    EXPLOSION = "explosion"


# (width, height) of each bitmap
DEFAULT_SPRITE_SIZES: Dict[SpriteType, Tuple[int, int]] = {
    SpriteType.SHIP: (13, 8),
    SpriteType.SHIP_DESTROYED: (13, 8),
    SpriteType.BULLET: (3, 5),
    SpriteType.ENEMY_BULLET: (3, 5),
    SpriteType.ENEMY_SHIP_A1: (12, 8),
    SpriteType.ENEMY_SHIP_A2: (12, 8),
    SpriteType.ENEMY_SHIP_B1: (12, 8),
    SpriteType.ENEMY_SHIP_B2: (12, 8),
    SpriteType.ENEMY_SHIP_C1: (12, 8),
    SpriteType.ENEMY_SHIP_C2: (12, 8),
    SpriteType.ENEMY_SHIP_SPECIAL: (16, 7),
    SpriteType.EXPLOSION: (13, 7),
}


def new_sprite_map(sizes: Optional[Mapping[SpriteType, Tuple[int, int]]] = None) -> Dict[SpriteType, Bitmap]:
    """Allocate blank bitmaps, indexed ``bitmap[x][y]``, in declared order."""
    sizes = DEFAULT_SPRITE_SIZES if sizes is None else sizes
    return {kind: [[False] * h for _ in range(w)] for kind, (w, h) in sizes.items()}


def load_sprites(sprite_map: Mapping[object, Bitmap], resources: Optional[BundledResources] = None) -> None:
    """Fill every cell of every bitmap in ``sprite_map`` from the graphics resource.

    The matrices are mutated in place, in the mapping's iteration order.
    Raises ResourceLoadError if the resource is missing or runs out of pixels.
    """
    res = resources or BundledResources()
    with res.open_binary(GRAPHICS_FILE) as fh:
        for kind, bitmap in sprite_map.items():
            for column in bitmap:
                for j in range(len(column)):
                    column[j] = _next_pixel(fh, kind)
            logger.debug("Sprite %s loaded.", getattr(kind, "name", kind))


def _next_pixel(fh, kind) -> bool:
    while True:
        c = fh.read(1)
        if not c:
            raise ResourceLoadError(f"Graphics ended before sprite {getattr(kind, 'name', kind)} was complete", GRAPHICS_FILE)
        if c == b"1":
            return True
        if c == b"0":
            return False
