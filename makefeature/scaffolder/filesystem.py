"""Filesystem collaborator used by the scaffolder and stub publishing.

The scaffolder only needs four primitives, so they are expressed as a small
protocol.  ``LocalFileSystem`` is the real implementation; tests substitute
an in-memory recorder.  ``OSError`` from any primitive propagates unchanged.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    """Primitives the scaffolder requests from its environment."""

    def exists(self, path: Path) -> bool: ...

    def make_directory(self, path: Path, recursive: bool = True) -> None: ...

    def write_file(self, path: Path, content: str) -> None: ...

    def read_text(self, path: Path) -> str: ...


class LocalFileSystem:
    """``pathlib``-backed filesystem."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def make_directory(self, path: Path, recursive: bool = True) -> None:
        """Create *path*; with *recursive* missing parents are created too."""
        Path(path).mkdir(mode=0o755, parents=recursive, exist_ok=recursive)

    def write_file(self, path: Path, content: str) -> None:
        """Write *content*, overwriting any existing file."""
        Path(path).write_text(content, encoding="utf-8")

    def read_text(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")
