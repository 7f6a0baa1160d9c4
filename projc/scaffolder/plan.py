"""Static scaffold plan.

The directories, seed files and Makefile variants a projc scaffold consists
of. These tables are constants; nothing here is derived from user input
beyond the project name substituted into file names.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class ContentKind(str, Enum):
    """Which template a seed file is rendered from."""

    HEADER = "header"
    SOURCE = "source"
    SOURCE_WITH_APP_SUFFIX = "source_app"
    SOURCE_WITH_TEST_SUFFIX = "source_test"
    GENERIC = "generic"


class FileSpec(NamedTuple):
    """One seed file: ``<target_directory>/<project><suffix><extension>``."""

    target_directory: str
    suffix: str
    extension: str
    content_kind: ContentKind

    def file_name(self, project_name: str) -> str:
        return f"{project_name}{self.suffix}{self.extension}"


class MakefileSpec(NamedTuple):
    """A Makefile variant and the template it is rendered from."""

    variant_name: str
    template_name: str


# Creation order matters: files are written into these directories.
SCAFFOLD_DIRECTORIES: tuple[str, ...] = ("lib", "src", "test", "include")

SCAFFOLD_FILES: tuple[FileSpec, ...] = (
    FileSpec("lib", "", ".h", ContentKind.HEADER),
    FileSpec("src", "", ".c", ContentKind.SOURCE),
    FileSpec("src", "_app", ".c", ContentKind.SOURCE_WITH_APP_SUFFIX),
    FileSpec("test", "_test", ".c", ContentKind.GENERIC),
)

MAKEFILE_VARIANTS: tuple[MakefileSpec, ...] = (
    MakefileSpec("Makefile", "Makefile.j2"),
    MakefileSpec("Makefile.win", "Makefile.win.j2"),
)
