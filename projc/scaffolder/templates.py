"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``projc/scaffolder/templates/`` directory, plus the pure ``render_*``
helpers used by the orchestrator.  Rendering never touches the target
filesystem: every helper returns a string and the caller decides where (and
whether) to write it.
"""

from __future__ import annotations

import string
from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .plan import MAKEFILE_VARIANTS, ContentKind


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

_HEADER_TEMPLATE = "header.h.j2"
_SOURCE_TEMPLATE = "source.c.j2"
_GENERIC_TEMPLATE = "generic.c.j2"

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Templates are rendered with a context dictionary
    that holds the project name (and, for sources, the header to include).
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self.env.filters["ascii_upper"] = ascii_upper

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"Makefile.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    # -- Scaffold content --------------------------------------------------

    def render_header(self, name: str) -> str:
        return self.render(_HEADER_TEMPLATE, {"project_name": name})

    def render_source(self, name: str, include: str | None = None) -> str:
        return self.render(
            _SOURCE_TEMPLATE,
            {"project_name": name, "include_name": include or name},
        )

    def render_generic(self, name: str) -> str:
        return self.render(_GENERIC_TEMPLATE, {"project_name": name})

    def render_makefile(self, variant: str, name: str) -> str:
        """Render the Makefile *variant* (``"Makefile"`` or ``"Makefile.win"``).

        Raises:
            KeyError: If *variant* is not a known Makefile variant.
        """
        templates = {spec.variant_name: spec.template_name for spec in MAKEFILE_VARIANTS}
        return self.render(templates[variant], {"project_name": name})

    def render_content(self, kind: ContentKind, name: str) -> str:
        """Render the seed file content for *kind*.

        Every source flavour includes the project header; the suffix only
        changes the file name, not the include.
        """
        if kind is ContentKind.HEADER:
            return self.render_header(name)
        if kind in (
            ContentKind.SOURCE,
            ContentKind.SOURCE_WITH_APP_SUFFIX,
            ContentKind.SOURCE_WITH_TEST_SUFFIX,
        ):
            return self.render_source(name, include=name)
        if kind is ContentKind.GENERIC:
            return self.render_generic(name)
        raise ValueError(f"Unknown content kind: {kind!r}")


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def ascii_upper(value: str) -> str:
    """Upper-case ASCII ``a``-``z`` only; every other character is unchanged.

    Examples::

        ascii_upper("my_proj1") -> "MY_PROJ1"
        ascii_upper("straße")   -> "STRAßE"
    """
    return value.translate(_ASCII_UPPER)


# ---------------------------------------------------------------------------
# Module-level helpers over the packaged templates
# ---------------------------------------------------------------------------

@lru_cache(maxsize=1)
def default_renderer() -> TemplateRenderer:
    """Return the shared renderer over the packaged templates."""
    return TemplateRenderer()


def render_header(name: str) -> str:
    """Include-guarded header using ``<NAME>_H`` as the guard token."""
    return default_renderer().render_header(name)


def render_source(name: str, include: str | None = None) -> str:
    """Source stub that includes ``<include or name>.h``."""
    return default_renderer().render_source(name, include)


def render_generic(name: str) -> str:
    """One-line ``/* Project <name> */`` stub."""
    return default_renderer().render_generic(name)


def render_makefile(variant: str, name: str) -> str:
    return default_renderer().render_makefile(variant, name)


def render_content(kind: ContentKind, name: str) -> str:
    return default_renderer().render_content(kind, name)
