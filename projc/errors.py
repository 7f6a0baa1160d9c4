"""Exception hierarchy for projc.

Everything raised on purpose by the scaffolder derives from
:class:`ProjcError`, so the CLI can catch the fatal cases with one clause
while the orchestrator handles the per-artifact ones.
"""

from __future__ import annotations

from pathlib import Path


class ProjcError(Exception):
    """Base exception for all projc errors."""


class InvalidArgumentError(ProjcError):
    """Raised when the command line cannot be turned into a project context."""


class PathResolutionError(ProjcError):
    """Raised when the target path cannot be canonicalised."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot resolve path '{path}': {reason}")


class ArtifactError(ProjcError):
    """Raised when a single scaffold artifact cannot be created.

    Attributes:
        path: The directory or file that could not be created.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class DirectoryCreationError(ArtifactError):
    """Raised when a scaffold directory cannot be created."""


class FileCreationError(ArtifactError):
    """Raised when a scaffold file cannot be created or written."""
