"""Target path resolution and the immutable project context."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from projc.errors import InvalidArgumentError, PathResolutionError

from .fs import FilesystemBackend, default_backend

_SEPARATORS = frozenset(s for s in ("/", os.sep, os.altsep) if s)


class ProjectContext(BaseModel):
    """Where to scaffold and what to call the project.

    Built once from the command line and never modified afterwards.
    """

    model_config = ConfigDict(frozen=True)

    root: Path = Field(..., description="Absolute path of the directory to scaffold")
    project_name: str = Field(..., description="Stem used for every generated file name")

    @field_validator("root")
    @classmethod
    def _root_is_absolute(cls, value: Path) -> Path:
        if not value.is_absolute():
            raise ValueError(f"root must be an absolute path, got '{value}'")
        return value

    @field_validator("project_name")
    @classmethod
    def _name_is_a_single_segment(cls, value: str) -> str:
        if not value:
            raise ValueError("project name must not be empty")
        bad = sorted(s for s in _SEPARATORS if s in value)
        if bad:
            raise ValueError(
                f"project name '{value}' must not contain a path separator ({' '.join(bad)})"
            )
        return value

    @classmethod
    def create(cls, root: Path, project_name: str) -> "ProjectContext":
        """Validate and build a context, raising ``InvalidArgumentError`` on bad input."""
        try:
            return cls(root=root, project_name=project_name)
        except ValidationError as exc:
            messages = "; ".join(err["msg"].removeprefix("Value error, ") for err in exc.errors())
            raise InvalidArgumentError(messages) from exc


def project_name_from_path(path: str, sep: str) -> str | None:
    """Return the final segment of *path*, or ``None`` if there is none.

    Examples::

        project_name_from_path("/home/alice/widget", "/") -> "widget"
        project_name_from_path("/", "/")                  -> None
    """
    _, found, tail = path.rpartition(sep)
    if not found or not tail:
        return None
    return tail


def resolve(
    args: Sequence[str],
    *,
    backend: FilesystemBackend | None = None,
    max_path: int | None = None,
) -> tuple[Path, str]:
    """Turn the positional command-line arguments into ``(root, project_name)``.

    With one argument the root is its absolute form and the project name is
    the argument exactly as typed. With none, the current directory is the
    root and its base name is the project name.

    Raises:
        InvalidArgumentError: Wrong argument count, or no usable base name.
        PathResolutionError: The given path does not resolve to a directory.
    """
    backend = backend or default_backend()
    limit = max_path or backend.max_path

    if len(args) > 1:
        raise InvalidArgumentError(f"expected at most one path argument, got {len(args)}")

    if len(args) == 1:
        raw = args[0]
        if not raw:
            raise InvalidArgumentError("path argument must not be empty")
        root = _canonicalize(raw, backend)
        if not root.is_dir():
            raise PathResolutionError(raw, "not a directory")
        if len(str(root)) > limit:
            raise PathResolutionError(raw, f"absolute path exceeds limit of {limit}")
        return root, raw

    root = _canonicalize(".", backend)
    name = project_name_from_path(str(root), backend.sep)
    if name is None:
        raise InvalidArgumentError(
            f"cannot derive a project name from '{root}'; pass a directory explicitly"
        )
    return root, name


def _canonicalize(raw: str, backend: FilesystemBackend) -> Path:
    try:
        return backend.canonicalize(raw)
    except FileNotFoundError as exc:
        raise PathResolutionError(raw, "no such file or directory") from exc
    except (OSError, RuntimeError) as exc:
        raise PathResolutionError(raw, str(exc)) from exc
