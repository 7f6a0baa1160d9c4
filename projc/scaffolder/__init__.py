"""projc scaffolder -- lays down a C project skeleton.

Quick usage (from the directory that contains ``widget/``)::

    from projc.scaffolder import ProjectContext, ProjectGenerator, resolve

    root, name = resolve(["widget"])
    report = ProjectGenerator(ProjectContext.create(root, name)).generate()
    assert report.ok

The argument is used verbatim as the project name, so it must not contain
a path separator; pass ``[]`` to scaffold the current directory instead.
"""

from projc.scaffolder.fs import StepStatus, ensure_directory, ensure_file
from projc.scaffolder.generator import ProjectGenerator, ScaffoldReport, StepResult
from projc.scaffolder.makefile_gen import MakefileGenerator
from projc.scaffolder.paths import ProjectContext, resolve
from projc.scaffolder.templates import TemplateRenderer

__all__ = [
    "MakefileGenerator",
    "ProjectContext",
    "ProjectGenerator",
    "ScaffoldReport",
    "StepResult",
    "StepStatus",
    "TemplateRenderer",
    "ensure_directory",
    "ensure_file",
    "resolve",
]
