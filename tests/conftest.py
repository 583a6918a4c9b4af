"""Shared pytest fixtures for the makefeature test suite.

Provides reusable fixtures for:
- A configuration rooted in a temporary application directory
- An in-memory recording filesystem collaborator
- A quiet Rich console so progress output does not clutter test runs
- A renderer/planner pair over the bundled controller stubs
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from makefeature.config import Config
from makefeature.scaffolder.planner import ArtifactPlanner
from makefeature.scaffolder.templates import BUNDLED_STUB_DIR, TemplateRenderer


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


class RecordingFileSystem:
    """In-memory filesystem that records every call in order."""

    def __init__(self, existing: set[Path] | None = None) -> None:
        self.existing: set[Path] = set(existing or ())
        self.calls: list[tuple[str, Path]] = []
        self.directories: list[Path] = []
        self.files: dict[Path, str] = {}
        self.fail_on: Path | None = None

    def exists(self, path: Path) -> bool:
        self.calls.append(("exists", Path(path)))
        return Path(path) in self.existing or Path(path) in self.files

    def make_directory(self, path: Path, recursive: bool = True) -> None:
        self.calls.append(("make_directory", Path(path)))
        self.directories.append(Path(path))

    def write_file(self, path: Path, content: str) -> None:
        self.calls.append(("write_file", Path(path)))
        if self.fail_on is not None and Path(path) == self.fail_on:
            raise PermissionError(f"Permission denied: {path}")
        self.files[Path(path)] = content

    def read_text(self, path: Path) -> str:
        self.calls.append(("read_text", Path(path)))
        if Path(path) in self.files:
            return self.files[Path(path)]
        return Path(path).read_text(encoding="utf-8")

    @property
    def writes(self) -> list[tuple[str, Path]]:
        return [c for c in self.calls if c[0] in ("make_directory", "write_file")]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def app_root(tmp_path: Path) -> Path:
    """Temporary Laravel-style application root (auto-cleanup)."""
    root = tmp_path / "laravel-app"
    (root / "app").mkdir(parents=True)
    yield root


@pytest.fixture
def config(app_root: Path) -> Config:
    """Default configuration pointing at the temporary application."""
    return Config(base_path=app_root)


@pytest.fixture
def fake_fs() -> RecordingFileSystem:
    """Empty in-memory filesystem."""
    return RecordingFileSystem()


@pytest.fixture
def quiet_console() -> Console:
    """Console that writes into a buffer instead of the terminal."""
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def renderer() -> TemplateRenderer:
    """Renderer over the bundled controller stubs only."""
    return TemplateRenderer([BUNDLED_STUB_DIR])


@pytest.fixture
def planner(renderer: TemplateRenderer, config: Config) -> ArtifactPlanner:
    return ArtifactPlanner(renderer, config)


@pytest.fixture
def stub_dir(tmp_path: Path) -> Path:
    """Directory holding a hand-written stub for renderer tests."""
    d = tmp_path / "stubs"
    d.mkdir()
    (d / "sample.stub").write_text(
        "namespace {{ namespace }};\n\nclass {{ class }} uses {{ unknown }}\n",
        encoding="utf-8",
    )
    yield d
