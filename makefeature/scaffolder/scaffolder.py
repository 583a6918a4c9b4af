"""Top-level feature scaffolding driver.

Checks that the feature does not exist yet, plans every artifact, creates the
feature's directory set and writes each artifact.  There is no rollback: if a
write fails part-way, files written so far stay on disk and the error
propagates to the caller.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from rich.console import Console

from makefeature.config import Config
from makefeature.errors import FeatureExistsError
from makefeature.utils import console as default_console
from makefeature.utils import print_info, print_success

from .artifacts import Artifact
from .filesystem import FileSystem, LocalFileSystem
from .naming import FEATURE_DIRECTORIES
from .planner import ArtifactPlanner
from .templates import BUNDLED_STUB_DIR, TemplateRenderer
from .variants import ControllerVariant


class ScaffoldResult(BaseModel):
    """Outcome of a successful scaffold run."""

    feature_name: str
    variant: ControllerVariant
    feature_root: Path
    directories: list[Path] = Field(default_factory=list)
    files: list[Path] = Field(default_factory=list)


class Scaffolder:
    """Generates one feature slice inside the host application.

    Attributes:
        config: Paths and naming configuration.
        filesystem: Existence check, directory creation and file writes.
        planner: Produces the artifact list.
        console: Rich console for progress output.
    """

    def __init__(
        self,
        config: Config | None = None,
        filesystem: FileSystem | None = None,
        planner: ArtifactPlanner | None = None,
        console: Console | None = None,
    ) -> None:
        self.config = config or Config()
        self.filesystem = filesystem or LocalFileSystem()
        self.planner = planner or ArtifactPlanner(
            TemplateRenderer([self.config.stub_path, BUNDLED_STUB_DIR]), self.config
        )
        self.console = console or default_console

    # -- Public API --------------------------------------------------------

    def scaffold(self, feature_name: str, variant: ControllerVariant) -> ScaffoldResult:
        """Create the feature *feature_name* with a *variant* controller.

        Raises:
            FeatureExistsError: If the feature root already exists.  Nothing
                is created or written in that case.
            TemplateNotFound: If the controller stub is missing.  Raised
                before any directory is created.
            OSError: If a directory or file cannot be written.
        """
        feature_root = self.config.feature_root(feature_name)
        if self.filesystem.exists(feature_root):
            raise FeatureExistsError(feature_name, feature_root)

        artifacts = self.planner.plan(feature_name, variant)

        result = ScaffoldResult(
            feature_name=feature_name, variant=variant, feature_root=feature_root
        )

        print_info(f"Creating directories for feature {feature_name}...", self.console)
        for directory in FEATURE_DIRECTORIES:
            path = feature_root / directory
            print_info(f"Creating directory: {path}", self.console)
            self.filesystem.make_directory(path, recursive=True)
            result.directories.append(path)

        print_info(f"Creating files for feature {feature_name}...", self.console)
        for artifact in artifacts:
            path = self.config.app_path / artifact.path
            print_info(f"Creating {artifact.label}: {path}", self.console)
            self.filesystem.write_file(path, artifact.content)
            result.files.append(path)

        print_success(f"Feature {feature_name} created successfully!", self.console)
        return result

    def preview(self, feature_name: str, variant: ControllerVariant) -> list[Artifact]:
        """Return the artifact plan without touching the filesystem."""
        return self.planner.plan(feature_name, variant)
