"""Main scaffolding orchestrator.

Takes a ``ProjectContext`` and lays down the C project skeleton: the
``lib``/``src``/``test``/``include`` directories, the seed header and
sources, and the two Makefiles. Every step is best-effort: a failure is
recorded and reported, and the remaining steps still run.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from projc.errors import ArtifactError
from projc.utils import print_error, print_info, print_success, print_warning

from .fs import FilesystemBackend, StepStatus, default_backend, ensure_directory, ensure_file
from .makefile_gen import MakefileGenerator
from .paths import ProjectContext
from .plan import SCAFFOLD_DIRECTORIES, SCAFFOLD_FILES, FileSpec
from .templates import TemplateRenderer, default_renderer


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------


class StepResult(BaseModel):
    """Outcome of creating one directory, seed file or Makefile."""

    kind: Literal["directory", "file", "makefile"]
    target: Path
    status: StepStatus
    message: str = Field(default="", description="Failure reason, empty otherwise")


class ScaffoldReport(BaseModel):
    """Everything a single ``ProjectGenerator.generate`` call did."""

    context: ProjectContext
    steps: list[StepResult] = Field(default_factory=list)

    @property
    def created(self) -> list[StepResult]:
        return [s for s in self.steps if s.status is StepStatus.CREATED]

    @property
    def skipped(self) -> list[StepResult]:
        return [s for s in self.steps if s.status is StepStatus.EXISTS]

    @property
    def failed(self) -> list[StepResult]:
        return [s for s in self.steps if s.status is StepStatus.FAILED]

    @property
    def ok(self) -> bool:
        return not self.failed

    def as_table(self) -> dict[str, str]:
        """Return a ``{relative target: status}`` mapping for display."""
        rows: dict[str, str] = {}
        for step in self.steps:
            try:
                label = str(step.target.relative_to(self.context.root))
            except ValueError:
                label = str(step.target)
            if step.kind == "directory":
                label += "/"
            value = step.status.value
            if step.message:
                value = f"{value}: {step.message}"
            rows[label] = value
        return rows


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Given a ``ProjectContext``, generates:
    - ``lib/``, ``src/``, ``test/`` and an empty ``include/``
    - ``lib/<name>.h`` with an include guard
    - ``src/<name>.c`` and ``src/<name>_app.c`` including that header
    - ``test/<name>_test.c`` placeholder
    - ``Makefile`` and ``Makefile.win``

    Steps run strictly in that order because files are written into the
    directories created first.
    """

    def __init__(
        self,
        context: ProjectContext,
        *,
        backend: FilesystemBackend | None = None,
        renderer: TemplateRenderer | None = None,
        max_path: int | None = None,
        quiet: bool = False,
    ) -> None:
        self.context = context
        self.backend = backend or default_backend()
        self.renderer = renderer or default_renderer()
        self.max_path = max_path
        self.quiet = quiet
        self.makefile_gen = MakefileGenerator(
            self.renderer, backend=self.backend, max_path=max_path
        )

    # -- Public API --------------------------------------------------------

    def generate(self) -> ScaffoldReport:
        """Generate the complete project skeleton.

        Returns:
            A report with one ``StepResult`` per directory and file.
        """
        report = ScaffoldReport(context=self.context)

        # 1. Directory tree
        for dir_name in SCAFFOLD_DIRECTORIES:
            report.steps.append(self._create_directory(dir_name))

        # 2. Seed header and sources
        for spec in SCAFFOLD_FILES:
            report.steps.append(self._create_file(spec))

        # 3. Makefiles
        for spec in self.makefile_gen.variants:
            report.steps.append(self._create_makefile(spec.variant_name))

        return report

    # -- Steps -------------------------------------------------------------

    def _create_directory(self, dir_name: str) -> StepResult:
        root = self.context.root
        self._info(f"Creating {dir_name} directory...")
        try:
            status = ensure_directory(
                root, dir_name, backend=self.backend, max_path=self.max_path
            )
        except ArtifactError as exc:
            print_error(f"Failed to create {dir_name} directory: {exc.reason}")
            return _failed("directory", exc)

        if status is StepStatus.EXISTS:
            self._warning(f"Directory {dir_name} already exists.")
        else:
            self._success(f"Directory {dir_name} created.")
        return StepResult(kind="directory", target=root / dir_name, status=status)

    def _create_file(self, spec: FileSpec) -> StepResult:
        name = self.context.project_name
        file_name = spec.file_name(name)
        directory = self.context.root / spec.target_directory
        where = spec.target_directory

        self._info(f"Creating file {file_name} in {where} directory...")
        try:
            content = self.renderer.render_content(spec.content_kind, name)
            status = ensure_file(
                directory, file_name, content, backend=self.backend, max_path=self.max_path
            )
        except ArtifactError as exc:
            print_error(f"Failed to create {file_name} in {where}: {exc.reason}")
            return _failed("file", exc)

        if status is StepStatus.EXISTS:
            self._warning(f"{file_name} already exists in {where}; left unchanged.")
        else:
            self._success(f"{file_name} created in {where}.")
        return StepResult(kind="file", target=directory / file_name, status=status)

    def _create_makefile(self, variant: str) -> StepResult:
        root = self.context.root
        self._info(f"Creating {variant}...")
        try:
            status = self.makefile_gen.generate(root, variant, self.context.project_name)
        except ArtifactError as exc:
            print_error(f"Failed to create {variant}: {exc.reason}")
            return _failed("makefile", exc)

        if status is StepStatus.EXISTS:
            self._warning(f"{variant} already exists; skipped.")
        else:
            self._success(f"{variant} was created.")
        return StepResult(kind="makefile", target=root / variant, status=status)

    # -- Output ------------------------------------------------------------

    def _info(self, message: str) -> None:
        if not self.quiet:
            print_info(message)

    def _success(self, message: str) -> None:
        if not self.quiet:
            print_success(message)

    def _warning(self, message: str) -> None:
        if not self.quiet:
            print_warning(message)


def _failed(kind: Literal["directory", "file", "makefile"], exc: ArtifactError) -> StepResult:
    return StepResult(kind=kind, target=exc.path, status=StepStatus.FAILED, message=exc.reason)
