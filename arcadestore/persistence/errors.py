from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PersistenceError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover - formatting
        return self.message


@dataclass
class PathResolutionError(PersistenceError):
    """The install location could not be determined or decoded."""
    location: str | None = None

    def __str__(self) -> str:  # pragma: no cover - formatting
        loc = f" ({self.location!r})" if self.location else ""
        return f"{self.message}{loc}"


@dataclass
class ResourceLoadError(PersistenceError):
    """A bundled resource is missing or ends early."""
    resource: str | None = None

    def __str__(self) -> str:  # pragma: no cover - formatting
        res = f" [{self.resource}]" if self.resource else ""
        return f"{self.message}{res}"


@dataclass
class FontFormatError(PersistenceError):
    """The bundled font exists but pygame could not parse it."""
    resource: str | None = None

    def __str__(self) -> str:  # pragma: no cover - formatting
        res = f" [{self.resource}]" if self.resource else ""
        return f"{self.message}{res}"


@dataclass
class RecordFormatError(PersistenceError, ValueError):
    """A persisted file exists but its content does not parse."""
    source: str | None = None
    line: int | None = None

    def __str__(self) -> str:  # pragma: no cover - formatting
        src = f" in {self.source}" if self.source else ""
        loc = f" (line {self.line})" if self.line else ""
        return f"{self.message}{src}{loc}"
