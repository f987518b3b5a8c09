"""gomvc configuration.

Typed settings for the scaffolder. The model is Pydantic v2 so it can be
validated at construction time and serialised to/from JSON or environment
variables without boiler-plate.
"""

from __future__ import annotations

import os
import shlex
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator


DEFAULT_INIT_COMMAND: list[str] = ["go", "mod", "init"]
DEFAULT_MANIFEST_NAME = "go.mod"


class ScaffoldConfig(BaseModel):
    """Settings shared by provisioning and decommissioning.

    ``init_command`` is the argv prefix of the module initializer; the module
    identifier is appended as its final argument.  ``manifest_name`` is the
    file the initializer leaves in the project root, and the only file outside
    the fixed directory set that decommissioning removes.
    """

    init_command: list[str] = Field(
        default_factory=lambda: list(DEFAULT_INIT_COMMAND),
        description="Module initializer argv; the module identifier is appended",
    )
    manifest_name: str = Field(
        default=DEFAULT_MANIFEST_NAME,
        description="Module manifest file created by the initializer",
    )

    @field_validator("init_command")
    @classmethod
    def _init_command_not_empty(cls, value: list[str]) -> list[str]:
        if not value or not value[0].strip():
            raise ValueError("init_command must name a program")
        return value

    @field_validator("manifest_name")
    @classmethod
    def _manifest_is_bare_name(cls, value: str) -> str:
        # Decommissioning unlinks root / manifest_name, so it must stay inside root.
        if not value or value in (".", "..") or "/" in value or "\\" in value:
            raise ValueError(f"manifest_name must be a bare file name, got {value!r}")
        return value

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "ScaffoldConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            GOMVC_INIT_COMMAND   -- shell-quoted argv, e.g. ``"go mod init"``
            GOMVC_MANIFEST_NAME  -- e.g. ``go.mod``
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("GOMVC_INIT_COMMAND"):
            kwargs["init_command"] = shlex.split(os.environ["GOMVC_INIT_COMMAND"])
        if os.environ.get("GOMVC_MANIFEST_NAME"):
            kwargs["manifest_name"] = os.environ["GOMVC_MANIFEST_NAME"]
        return cls(**kwargs)
