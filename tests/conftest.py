"""Shared pytest fixtures for the projc test suite.

Provides reusable fixtures for:
- Temporary project directories and contexts
- Filesystem backends that fail on demand
- A clean environment for ``Config.from_env``
"""

from __future__ import annotations

from pathlib import Path

import pytest

from projc.scaffolder.fs import PosixBackend
from projc.scaffolder.paths import ProjectContext


# ---------------------------------------------------------------------------
# Backends
# ---------------------------------------------------------------------------


class FailingBackend(PosixBackend):
    """Local backend that raises ``OSError`` for selected targets.

    ``fail_names`` holds the base names (``"src"``, ``"demo.h"``, ``"Makefile"``)
    whose creation should fail; everything else hits the real filesystem.
    """

    def __init__(self, fail_names: set[str] | None = None, max_path: int = 4096) -> None:
        self.fail_names = set(fail_names or ())
        self._max_path = max_path
        self.created: list[Path] = []

    @property
    def max_path(self) -> int:
        return self._max_path

    def create_directory(self, path: Path) -> None:
        if path.name in self.fail_names:
            raise PermissionError(13, "Permission denied", str(path))
        super().create_directory(path)
        self.created.append(path)

    def create_file(self, path: Path, content: str) -> None:
        if path.name in self.fail_names:
            raise OSError(28, "No space left on device", str(path))
        super().create_file(path, content)
        self.created.append(path)


class FixedCwdBackend(PosixBackend):
    """Backend whose canonical form of every path is a fixed location."""

    def __init__(self, cwd: str) -> None:
        self.cwd = Path(cwd)

    def canonicalize(self, path: str | Path) -> Path:
        return self.cwd


@pytest.fixture
def failing_backend() -> type[FailingBackend]:
    """The ``FailingBackend`` class, for tests to instantiate as needed."""
    return FailingBackend


@pytest.fixture
def fixed_cwd_backend() -> type[FixedCwdBackend]:
    return FixedCwdBackend


# ---------------------------------------------------------------------------
# Paths & contexts
# ---------------------------------------------------------------------------


@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Empty ``demo`` directory to scaffold into (auto-cleanup)."""
    project_dir = tmp_path / "demo"
    project_dir.mkdir()
    return project_dir.resolve()


@pytest.fixture
def demo_context(tmp_project_dir: Path) -> ProjectContext:
    """Context for project ``demo`` rooted at ``tmp_project_dir``."""
    return ProjectContext.create(tmp_project_dir, "demo")


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every ``PROJC_*`` variable so config defaults apply."""
    for name in ("PROJC_MAX_PATH", "PROJC_QUIET", "PROJC_NO_SUMMARY"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
