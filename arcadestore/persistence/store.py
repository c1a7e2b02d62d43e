"""
PersistenceStore - single entry point for bundled assets and user state.

Combines:
- sprite bitmaps and the UI font (bundled, read-only)
- high scores, statistics and currency (user files with bundled defaults)

The store holds no state of its own beyond where to look: a base-directory
strategy for user files and a locator for bundled resources.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

import pygame

from . import currency_io, font_utils, score_io, sprites, stats_io
from .paths import BaseDirStrategy, resolve_base_dir, user_file
from .records import Score, Statistics
from .resources import BundledResources


class PersistenceStore:
    """
    Loads and saves everything the game keeps on disk.

    Usage:
        store = PersistenceStore()
        scores = store.load_high_scores()
        store.save_currency(store.load_currency() + 10)

        # tests
        store = PersistenceStore(get_base_dir=lambda: tmp_path)
    """

    def __init__(
        self,
        get_base_dir: BaseDirStrategy = resolve_base_dir,
        resources: Optional[BundledResources] = None,
    ):
        self._get_base_dir = get_base_dir
        self._resources = resources or BundledResources()

    @property
    def base_dir(self) -> Path:
        return self._get_base_dir()

    @property
    def resources(self) -> BundledResources:
        return self._resources

    def user_file(self, name: str) -> Path:
        return user_file(name, self._get_base_dir)

    # =========================================
    # Bundled assets
    # =========================================

    def load_sprites(self, sprite_map: Mapping[Any, sprites.Bitmap]) -> None:
        sprites.load_sprites(sprite_map, self._resources)

    def load_font(self, size: float) -> pygame.font.Font:
        return font_utils.load_font(size, self._resources)

    # =========================================
    # High scores
    # =========================================

    def load_high_scores(self) -> List[Score]:
        return score_io.load_high_scores(self._get_base_dir, self._resources)

    def load_default_high_scores(self) -> List[Score]:
        return score_io.load_default_high_scores(self._resources)

    def save_high_scores(self, scores: Iterable[Any]) -> int:
        return score_io.save_high_scores(scores, self._get_base_dir)

    # =========================================
    # Statistics
    # =========================================

    def load_statistics(self) -> Statistics:
        return stats_io.load_statistics(self._get_base_dir, self._resources)

    def load_default_statistics(self) -> Statistics:
        return stats_io.load_default_statistics(self._resources)

    def save_statistics(self, stats: Sequence[Any]) -> None:
        stats_io.save_statistics(stats, self._get_base_dir)

    # =========================================
    # Currency
    # =========================================

    def load_currency(self) -> int:
        return currency_io.load_currency(self._get_base_dir, self._resources)

    def load_default_currency(self) -> int:
        return currency_io.load_default_currency(self._resources)

    def save_currency(self, amount: int) -> None:
        currency_io.save_currency(amount, self._get_base_dir)


def create_store(
    base_dir: Union[str, Path],
    resources_dir: Optional[Union[str, Path]] = None,
) -> PersistenceStore:
    """Build a store whose user files live in a fixed directory."""
    base = Path(base_dir)
    res = BundledResources(resources_dir) if resources_dir is not None else None
    return PersistenceStore(get_base_dir=lambda: base, resources=res)
