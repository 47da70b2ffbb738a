"""Fatal map loading errors.

Every failure that aborts a build derives from MapLoadError, so callers can
treat ``except MapLoadError`` as "level failed to load". Recoverable problems
(unknown material ids, incomplete material entries, absent optional
sections) are absorbed by the loader and never raise.
"""

from __future__ import annotations

from pathlib import Path


class MapLoadError(Exception):
    """Base class for errors that abort a scene build."""

    pass


class ResourceUnavailableError(MapLoadError):
    """Raised when the map file is missing or cannot be read."""

    def __init__(self, path: Path | str, reason: str = "not found") -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Map resource {self.path} unavailable: {reason}")


class MalformedDocumentError(MapLoadError):
    """Raised when the map file is not a well-formed document."""

    def __init__(self, source: Path | str, detail: str) -> None:
        self.source = str(source)
        self.detail = detail
        super().__init__(f"Malformed map document {self.source}: {detail}")


class MissingRequiredSectionError(MapLoadError):
    """Raised when a section every map must define is absent."""

    def __init__(self, section: str) -> None:
        self.section = section
        super().__init__(f"No {section} section defined")
