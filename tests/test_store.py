"""
Tests for the PersistenceStore facade.
"""
import os
import pytest
from pathlib import Path

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class TestPersistenceStore:
    """End-to-end use of the store with a temporary install directory."""

    def test_fresh_environment_uses_defaults(self, tmp_path):
        from arcadestore.persistence import PersistenceStore

        store = PersistenceStore(get_base_dir=lambda: tmp_path)
        assert store.base_dir == tmp_path
        assert store.load_high_scores() == store.load_default_high_scores()
        assert store.load_statistics() == store.load_default_statistics()
        assert store.load_currency() == store.load_default_currency()
        assert list(tmp_path.iterdir()) == []

    def test_saves_land_next_to_base_dir(self, tmp_path):
        from arcadestore.persistence import Score, Statistics, create_store

        store = create_store(tmp_path)
        store.save_high_scores([Score("Lia", 10, 1, 1, 1)])
        store.save_statistics([Statistics(2, 3, 4)])
        store.save_currency(99)

        names = sorted(p.name for p in tmp_path.iterdir())
        assert names == ["Statistic.properties", "currency", "scores"]
        assert store.user_file("scores") == tmp_path / "scores"

        reopened = create_store(tmp_path)
        assert [s.name for s in reopened.load_high_scores()] == ["Lia"]
        assert reopened.load_statistics() == Statistics(2, 3, 4)
        assert reopened.load_currency() == 99

    def test_base_dir_is_resolved_on_every_call(self, tmp_path):
        from arcadestore.persistence import PersistenceStore

        calls = []

        def get_base_dir():
            calls.append(1)
            return tmp_path

        store = PersistenceStore(get_base_dir=get_base_dir)
        store.save_currency(1)
        store.load_currency()
        store.load_currency()
        assert len(calls) == 3

    def test_path_resolution_failure_propagates(self, tmp_path):
        from arcadestore.persistence import PathResolutionError, PersistenceStore, resolve_base_dir

        store = PersistenceStore(get_base_dir=lambda: resolve_base_dir("http://example.com/x"))
        with pytest.raises(PathResolutionError):
            store.save_currency(5)
        with pytest.raises(PathResolutionError):
            store.load_high_scores()

    def test_missing_bundled_default_is_a_resource_error(self, tmp_path):
        from arcadestore.persistence import BundledResources, PersistenceStore, ResourceLoadError

        empty = tmp_path / "res"
        empty.mkdir()
        store = PersistenceStore(get_base_dir=lambda: tmp_path, resources=BundledResources(empty))
        with pytest.raises(ResourceLoadError):
            store.load_currency()

    def test_custom_resources_dir(self, tmp_path):
        from arcadestore.persistence import create_store, new_sprite_map

        res = tmp_path / "res"
        res.mkdir()
        (res / "currency").write_text("250\n", encoding="utf-8")
        (res / "graphics").write_text("1" * 2000, encoding="utf-8")

        store = create_store(tmp_path, resources_dir=res)
        assert store.load_currency() == 250
        sprite_map = new_sprite_map()
        store.load_sprites(sprite_map)
        assert all(all(all(col) for col in bitmap) for bitmap in sprite_map.values())

    def test_font_fallback(self, tmp_path):
        import pygame
        from arcadestore.persistence import create_store

        font = create_store(tmp_path, resources_dir=tmp_path).load_font(20)
        assert isinstance(font, pygame.font.Font)
