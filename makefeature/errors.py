"""Exception taxonomy for makefeature.

Every error aborts the scaffold run immediately and is surfaced to the caller
unchanged.  Filesystem failures are not wrapped: ``OSError`` raised by the
filesystem collaborator propagates as-is.
"""

from __future__ import annotations

from pathlib import Path


class MakeFeatureError(Exception):
    """Base class for all makefeature errors."""


class FeatureExistsError(MakeFeatureError):
    """Raised when the feature root directory is already present on disk."""

    def __init__(self, feature_name: str, path: str | Path) -> None:
        self.feature_name = feature_name
        self.path = Path(path)
        super().__init__(f"Feature {feature_name} already exists!")


class TemplateNotFound(MakeFeatureError):
    """Raised when no stub directory provides the requested stub key."""

    def __init__(self, stub_key: str, searched: list[Path] | None = None) -> None:
        self.stub_key = stub_key
        self.searched = list(searched or [])
        where = ", ".join(str(p) for p in self.searched) or "<no stub directories>"
        super().__init__(f"Stub not found: {stub_key} (searched: {where})")


class InvalidVariantError(MakeFeatureError, ValueError):
    """Raised at the CLI boundary for a controller type outside the enumeration."""

    def __init__(self, value: str, allowed: list[str]) -> None:
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"Invalid controller type: {value!r} (expected one of {', '.join(allowed)})"
        )


class DuplicateArtifactError(MakeFeatureError):
    """Raised when two planned artifacts resolve to the same path."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Two artifacts target the same path: {path}")
