"""Stub loading and placeholder substitution for feature scaffolding.

Provides the TemplateRenderer class which loads ``*.stub`` files from an
ordered list of stub directories (published stubs first, bundled stubs last)
through a Jinja2 loader and substitutes ``{{ placeholder }}`` tokens.  The
stub text is never compiled as a Jinja template: substitution is a literal,
non-recursive replace of the exact ``{{ name }}`` token, and any other
braces (Blade echoes, ``{# ... #}``, ``{% ... %}``, tokens without a value)
are written back unchanged.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path

import jinja2
from jinja2 import ChoiceLoader, Environment, FileSystemLoader

from makefeature.errors import TemplateNotFound


# ---------------------------------------------------------------------------
# Stub directory discovery
# ---------------------------------------------------------------------------

BUNDLED_STUB_DIR = Path(__file__).parent / "stubs" / "controllers"


# ---------------------------------------------------------------------------
# Placeholder substitution
# ---------------------------------------------------------------------------


def placeholder(name: str) -> str:
    """Return the exact token for *name*, e.g. ``{{ class }}``."""
    return "{{ " + name + " }}"


def substitute(source: str, substitutions: Mapping[str, str]) -> str:
    """Replace every exact ``{{ key }}`` token in *source* in a single pass.

    Replacement text is inserted verbatim and never rescanned, so a value
    that itself looks like a placeholder stays as written.
    """
    if not substitutions:
        return source
    tokens = {placeholder(key): str(value) for key, value in substitutions.items()}
    # Longest first so no token can shadow a longer one sharing its prefix.
    pattern = re.compile(
        "|".join(re.escape(token) for token in sorted(tokens, key=len, reverse=True))
    )
    return pattern.sub(lambda match: tokens[match.group(0)], source)


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders controller stubs and inline artifact templates.

    The renderer searches *stub_dirs* in order, so a stub published into the
    host application overrides the bundled copy with the same name.
    """

    def __init__(self, stub_dirs: list[str | Path] | None = None) -> None:
        if stub_dirs is None:
            stub_dirs = [BUNDLED_STUB_DIR]
        self.stub_dirs = [Path(d) for d in stub_dirs]
        self.env = Environment(
            loader=ChoiceLoader([FileSystemLoader(str(d)) for d in self.stub_dirs]),
            autoescape=False,
            keep_trailing_newline=True,
        )

    # -- Rendering ---------------------------------------------------------

    def load(self, stub_key: str) -> str:
        """Return the raw text of the stub named *stub_key*.

        Raises:
            TemplateNotFound: If no stub directory contains *stub_key*.
        """
        try:
            source, _filename, _uptodate = self.env.loader.get_source(self.env, stub_key)
        except jinja2.TemplateNotFound as exc:
            raise TemplateNotFound(stub_key, self.stub_dirs) from exc
        return source

    def render(self, stub_key: str, substitutions: Mapping[str, str]) -> str:
        """Render the stub named *stub_key* with *substitutions*.

        Args:
            stub_key: Stub file name (e.g. ``"controller.api.stub"``).
            substitutions: Placeholder name -> replacement text.

        Returns:
            The rendered stub content.

        Raises:
            TemplateNotFound: If no stub directory contains *stub_key*.
        """
        return substitute(self.load(stub_key), substitutions)

    def render_string(self, source: str, substitutions: Mapping[str, str]) -> str:
        """Render an inline template string with the same substitution rules."""
        return substitute(source, substitutions)

    # -- Utility -----------------------------------------------------------

    def has_stub(self, stub_key: str) -> bool:
        """Return ``True`` if any stub directory provides *stub_key*."""
        try:
            self.load(stub_key)
        except TemplateNotFound:
            return False
        return True

    def list_stubs(self) -> list[str]:
        """Return the sorted, de-duplicated stub names across all directories."""
        return sorted({
            name for name in self.env.list_templates() if name.endswith(".stub")
        })
