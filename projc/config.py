"""projc configuration.

Typed settings for a single scaffolding run. Values come from the
environment (``Config.from_env``) and are then overridden by CLI flags.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


class Config(BaseModel):
    """Settings for one ``projc`` invocation.

    Attributes:
        max_path: Upper bound on the length of any path the scaffolder
            creates. ``None`` defers to the platform backend.
        quiet: Suppress per-step success lines (failures still print).
        show_summary: Print the summary table after the run.
    """

    max_path: int | None = Field(
        default=None, ge=1, description="Path-length limit; None uses the platform default"
    )
    quiet: bool = Field(default=False)
    show_summary: bool = Field(default=True)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            PROJC_MAX_PATH, PROJC_QUIET, PROJC_NO_SUMMARY.
        """
        max_path: int | None = None
        if os.environ.get("PROJC_MAX_PATH"):
            max_path = int(os.environ["PROJC_MAX_PATH"])

        return cls(
            max_path=max_path,
            quiet=_env_flag("PROJC_QUIET"),
            show_summary=not _env_flag("PROJC_NO_SUMMARY"),
        )
