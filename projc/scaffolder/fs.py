"""Idempotent filesystem primitives for scaffolding.

``ensure_directory`` and ``ensure_file`` never delete or overwrite anything:
an existing target is reported as :attr:`StepStatus.EXISTS` and left alone.
Path-length limits are checked before the first filesystem call so that an
oversized path can never leave a truncated artifact behind.

The platform specifics (separator, default length limit, how directories are
created and paths canonicalised) live behind the :class:`FilesystemBackend`
protocol; :func:`default_backend` picks the implementation for the running
interpreter.
"""

from __future__ import annotations

import contextlib
import os
from enum import Enum
from pathlib import Path
from typing import Protocol, runtime_checkable

from projc.errors import ArtifactError, DirectoryCreationError, FileCreationError

# Fallback when the OS will not report PATH_MAX (Linux <linux/limits.h> value).
_POSIX_PATH_MAX_FALLBACK = 4096
# Win32 MAX_PATH.
_WINDOWS_MAX_PATH = 260


class StepStatus(str, Enum):
    """Outcome of a single scaffold step."""

    CREATED = "created"
    EXISTS = "exists"
    FAILED = "failed"


# ---------------------------------------------------------------------------
# Backends
# ---------------------------------------------------------------------------


@runtime_checkable
class FilesystemBackend(Protocol):
    """Platform capabilities the scaffolder needs.

    Implementations only have to provide these members; no inheritance is
    required.
    """

    sep: str

    @property
    def max_path(self) -> int:
        """Longest path (in characters) the platform accepts."""
        ...

    def create_directory(self, path: Path) -> None:
        """Create a single directory. The parent must already exist."""
        ...

    def create_file(self, path: Path, content: str) -> None:
        """Create *path* exclusively and write *content* to it verbatim.

        Raises ``FileExistsError`` when *path* already exists.
        """
        ...

    def path_exists(self, path: Path) -> bool:
        ...

    def canonicalize(self, path: str | Path) -> Path:
        """Return the absolute, symlink-free form of an existing *path*."""
        ...


class _LocalBackend:
    """Operations shared by the local-disk backends."""

    sep: str = os.sep

    @property
    def max_path(self) -> int:
        return _POSIX_PATH_MAX_FALLBACK

    def create_directory(self, path: Path) -> None:
        os.mkdir(path)

    def create_file(self, path: Path, content: str) -> None:
        handle = open(path, "x", encoding="utf-8", newline="")
        try:
            with handle:
                handle.write(content)
        except OSError:
            # Do not leave a half-written file that a rerun would then skip.
            with contextlib.suppress(OSError):
                path.unlink()
            raise

    def path_exists(self, path: Path) -> bool:
        return path.exists()

    def canonicalize(self, path: str | Path) -> Path:
        return Path(path).resolve(strict=True)


class PosixBackend(_LocalBackend):
    """Backend for Linux, macOS and other POSIX systems."""

    sep = "/"

    @property
    def max_path(self) -> int:
        try:
            return int(os.pathconf("/", "PC_PATH_MAX"))
        except (AttributeError, OSError, ValueError):
            return _POSIX_PATH_MAX_FALLBACK


class WindowsBackend(_LocalBackend):
    """Backend for Windows, bounded by the classic ``MAX_PATH``."""

    sep = "\\"

    @property
    def max_path(self) -> int:
        return _WINDOWS_MAX_PATH


def default_backend() -> FilesystemBackend:
    """Return the backend for the running platform."""
    if os.name == "nt":
        return WindowsBackend()
    return PosixBackend()


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


def check_path_length(path: Path, limit: int, error_cls: type[ArtifactError]) -> None:
    """Raise *error_cls* if ``str(path)`` is longer than *limit* characters."""
    length = len(str(path))
    if length > limit:
        raise error_cls(path, f"path length {length} exceeds limit of {limit}")


def ensure_directory(
    parent: str | Path,
    name: str,
    *,
    backend: FilesystemBackend | None = None,
    max_path: int | None = None,
) -> StepStatus:
    """Create ``parent/name`` unless it already exists.

    Args:
        parent: Existing directory to create *name* in.
        name: Name of the directory to create.
        backend: Filesystem backend; defaults to :func:`default_backend`.
        max_path: Path-length limit; defaults to ``backend.max_path``.

    Returns:
        ``StepStatus.CREATED`` or ``StepStatus.EXISTS``.

    Raises:
        DirectoryCreationError: If the path is too long or creation fails.
    """
    backend = backend or default_backend()
    target = Path(parent) / name
    check_path_length(target, max_path or backend.max_path, DirectoryCreationError)

    if backend.path_exists(target):
        return StepStatus.EXISTS
    try:
        backend.create_directory(target)
    except FileExistsError:
        return StepStatus.EXISTS
    except OSError as exc:
        raise DirectoryCreationError(target, exc.strerror or str(exc)) from exc
    return StepStatus.CREATED


def ensure_file(
    directory: str | Path,
    file_name: str,
    content: str,
    *,
    backend: FilesystemBackend | None = None,
    max_path: int | None = None,
) -> StepStatus:
    """Create ``directory/file_name`` holding *content*, never overwriting.

    Returns:
        ``StepStatus.CREATED`` or ``StepStatus.EXISTS``.

    Raises:
        FileCreationError: If the path is too long or the write fails.
    """
    backend = backend or default_backend()
    target = Path(directory) / file_name
    check_path_length(target, max_path or backend.max_path, FileCreationError)

    if backend.path_exists(target):
        return StepStatus.EXISTS
    try:
        backend.create_file(target, content)
    except FileExistsError:
        return StepStatus.EXISTS
    except OSError as exc:
        raise FileCreationError(target, exc.strerror or str(exc)) from exc
    return StepStatus.CREATED
