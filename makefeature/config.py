"""makefeature configuration.

Typed configuration for the scaffolder.  Settings use a Pydantic v2 model so
they are validated at construction time and can be serialised to/from JSON or
read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator


class Config(BaseModel):
    """Global makefeature configuration.

    Describes where the host application lives, where generated features and
    published stubs go, and how generated source files are named.  Instances
    are created once by the CLI entry point and passed to the planner and the
    scaffolder.
    """

    base_path: Path = Field(default=Path("."), description="Host application root")
    app_dir: str = Field(default="app", description="Application source directory")
    features_dir: str = Field(default="Features")
    stubs_dir: str = Field(
        default="stubs/features/controllers",
        description="Published controller stub directory, relative to base_path",
    )
    root_namespace: str = Field(default="App")
    test_namespace_root: str | None = Field(
        default=None,
        description="Test namespace root; defaults to Tests and Feature joined by the separator",
    )
    namespace_separator: str = Field(default="\\", min_length=1)
    file_extension: str = Field(default=".php")

    @field_validator("file_extension")
    @classmethod
    def _extension_has_dot(cls, value: str) -> str:
        if not value.startswith("."):
            raise ValueError("file_extension must start with '.'")
        return value

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def app_path(self) -> Path:
        """Application source directory (``<base>/app``)."""
        return self.base_path / self.app_dir

    @property
    def features_path(self) -> Path:
        """Directory that holds every generated feature."""
        return self.app_path / self.features_dir

    @property
    def stub_path(self) -> Path:
        """Directory where controller stubs are published for customisation."""
        return self.base_path / self.stubs_dir

    def feature_root(self, feature_name: str) -> Path:
        """Root directory of a single feature."""
        return self.features_path / feature_name

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            MAKEFEATURE_BASE_PATH, MAKEFEATURE_APP_DIR,
            MAKEFEATURE_STUBS_DIR, MAKEFEATURE_ROOT_NAMESPACE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("MAKEFEATURE_BASE_PATH"):
            kwargs["base_path"] = Path(os.environ["MAKEFEATURE_BASE_PATH"])
        if os.environ.get("MAKEFEATURE_APP_DIR"):
            kwargs["app_dir"] = os.environ["MAKEFEATURE_APP_DIR"]
        if os.environ.get("MAKEFEATURE_STUBS_DIR"):
            kwargs["stubs_dir"] = os.environ["MAKEFEATURE_STUBS_DIR"]
        # An empty root namespace is meaningful, so only absence keeps the default.
        if "MAKEFEATURE_ROOT_NAMESPACE" in os.environ:
            kwargs["root_namespace"] = os.environ["MAKEFEATURE_ROOT_NAMESPACE"]
        return cls(**kwargs)
