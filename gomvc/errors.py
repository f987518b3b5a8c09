"""Exception hierarchy for gomvc.

Every failure the scaffolder reports derives from ``ScaffoldError`` so the
CLI can catch one type and print the message.  Operations abort on the first
failure and never roll back what they already did.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all gomvc failures."""


class InputFailure(ScaffoldError):
    """Raised when the interactive module identifier cannot be read."""


# ---------------------------------------------------------------------------
# Provisioning
# ---------------------------------------------------------------------------


class ProvisionError(ScaffoldError):
    """Raised when provisioning a project tree fails."""


class ModuleInitFailed(ProvisionError):
    """Raised when the module initializer cannot be launched or exits non-zero."""

    def __init__(
        self,
        message: str,
        command: str = "",
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)


class ProvisionIOFailure(ProvisionError):
    """Raised when a directory or file of the project tree cannot be created."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


# ---------------------------------------------------------------------------
# Decommissioning
# ---------------------------------------------------------------------------


class DeleteError(ScaffoldError):
    """Raised when tearing down a project tree fails."""


class DeleteIOFailure(DeleteError):
    """Raised when an existing entry of the project tree cannot be removed."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)
