"""Makefile generation for the POSIX and Windows toolchains.

Uses the packaged Jinja2 templates (``Makefile.j2``, ``Makefile.win.j2``) to
write both build files at the project root. An existing Makefile is never
replaced.
"""

from __future__ import annotations

from pathlib import Path

from .fs import FilesystemBackend, StepStatus, ensure_file
from .plan import MAKEFILE_VARIANTS, MakefileSpec
from .templates import TemplateRenderer


class MakefileGenerator:
    """Generates ``Makefile`` and ``Makefile.win`` for a scaffolded project."""

    def __init__(
        self,
        renderer: TemplateRenderer,
        *,
        backend: FilesystemBackend | None = None,
        max_path: int | None = None,
    ) -> None:
        self.renderer = renderer
        self.backend = backend
        self.max_path = max_path

    @property
    def variants(self) -> tuple[MakefileSpec, ...]:
        return MAKEFILE_VARIANTS

    def generate(self, output_dir: Path, variant: str, project_name: str) -> StepStatus:
        """Write a single Makefile *variant* into *output_dir*.

        Raises:
            FileCreationError: If the file cannot be written.
        """
        content = self.renderer.render_makefile(variant, project_name)
        return ensure_file(
            output_dir,
            variant,
            content,
            backend=self.backend,
            max_path=self.max_path,
        )

    def generate_all(self, output_dir: Path, project_name: str) -> dict[str, StepStatus]:
        """Write every Makefile variant into *output_dir*.

        Stops at the first failure; callers that want best-effort behaviour
        should loop over :attr:`variants` and call :meth:`generate`.

        Returns:
            Mapping of variant name to its step status, e.g.
            ``{"Makefile": StepStatus.CREATED, "Makefile.win": StepStatus.EXISTS}``.
        """
        return {
            spec.variant_name: self.generate(output_dir, spec.variant_name, project_name)
            for spec in self.variants
        }
