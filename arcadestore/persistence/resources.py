from __future__ import annotations

from pathlib import Path
from typing import IO, Optional, Union

from .errors import ResourceLoadError
from .paths import bundle_dir


class BundledResources:
    """Read-only access to the data files shipped with the program.

    Usage:
        res = BundledResources()              # arcadestore/res
        res = BundledResources(tmp_path)      # tests
        with res.open_text("scores") as fh:
            ...
    """

    def __init__(self, root: Optional[Union[str, Path]] = None):
        self._root = Path(root) if root is not None else None

    @property
    def root(self) -> Path:
        return self._root if self._root is not None else bundle_dir()

    def path(self, name: str) -> Path:
        return self.root / name

    def exists(self, name: str) -> bool:
        return self.path(name).is_file()

    def open_text(self, name: str) -> IO[str]:
        """Open a bundled text resource as UTF-8.

        A missing bundled resource is a packaging error, never a fallback case,
        so it is reported as :class:`ResourceLoadError`.
        """
        try:
            return open(self.path(name), "r", encoding="utf-8")
        except FileNotFoundError as exc:
            raise ResourceLoadError("Bundled resource not found", name) from exc

    def open_binary(self, name: str) -> IO[bytes]:
        try:
            return open(self.path(name), "rb")
        except FileNotFoundError as exc:
            raise ResourceLoadError("Bundled resource not found", name) from exc

    def __repr__(self) -> str:
        return f"BundledResources({str(self.root)!r})"
