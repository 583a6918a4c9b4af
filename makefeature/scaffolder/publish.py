"""Publishing bundled controller stubs into the host application.

Published stubs live in ``Config.stub_path`` and take precedence over the
bundled copies when rendering, so a project can customise its controllers.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from makefeature.config import Config
from makefeature.utils import console as default_console
from makefeature.utils import print_info, print_warning

from .filesystem import FileSystem, LocalFileSystem
from .templates import BUNDLED_STUB_DIR


def bundled_stubs() -> list[Path]:
    """Sorted list of stub files shipped with the package."""
    return sorted(BUNDLED_STUB_DIR.glob("*.stub"))


def publish_stubs(
    config: Config,
    filesystem: FileSystem | None = None,
    *,
    force: bool = False,
    console: Console | None = None,
) -> list[Path]:
    """Copy every bundled stub into ``config.stub_path``.

    Args:
        config: Supplies the destination directory.
        filesystem: Filesystem collaborator (defaults to the local disk).
        force: Overwrite stubs that were already published.
        console: Console for progress output.

    Returns:
        Paths that were written.  Skipped stubs are not included.
    """
    fs = filesystem or LocalFileSystem()
    out = console or default_console
    target_dir = config.stub_path
    fs.make_directory(target_dir, recursive=True)

    written: list[Path] = []
    for stub in bundled_stubs():
        target = target_dir / stub.name
        if fs.exists(target) and not force:
            print_warning(f"Skipping existing stub: {target}", out)
            continue
        print_info(f"Publishing stub: {target}", out)
        fs.write_file(target, fs.read_text(stub))
        written.append(target)
    return written
