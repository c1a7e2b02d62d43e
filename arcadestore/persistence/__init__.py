"""
arcadestore persistence

Local files for a single-player arcade game:
- paths: install-directory resolution
- resources: bundled read-only data
- sprites / font_utils: bitmaps and the UI font
- score_io / stats_io / currency_io: user state with bundled defaults
- store: the PersistenceStore facade
"""

from .errors import (
    PersistenceError,
    PathResolutionError,
    ResourceLoadError,
    FontFormatError,
    RecordFormatError,
)

from .paths import (
    code_source,
    resolve_base_dir,
    user_file,
    bundle_dir,
)

from .records import (
    Score,
    Statistics,
)

from .resources import BundledResources

from .sprites import (
    SpriteType,
    DEFAULT_SPRITE_SIZES,
    new_sprite_map,
    load_sprites,
)

from .score_io import MAX_SCORES

from .store import (
    PersistenceStore,
    create_store,
)

__all__ = [
    'PersistenceError',
    'PathResolutionError',
    'ResourceLoadError',
    'FontFormatError',
    'RecordFormatError',
    'code_source',
    'resolve_base_dir',
    'user_file',
    'bundle_dir',
    'Score',
    'Statistics',
    'BundledResources',
    'SpriteType',
    'DEFAULT_SPRITE_SIZES',
    'new_sprite_map',
    'load_sprites',
    'MAX_SCORES',
    'PersistenceStore',
    'create_store',
]
