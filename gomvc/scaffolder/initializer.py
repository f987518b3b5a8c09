"""Module initializer collaborator.

Provisioning hands module initialization to an external program (``go mod
init`` by default).  The generator only talks to the ``ModuleInitializer``
protocol, so tests can substitute a stub that never spawns a process.
"""

from __future__ import annotations

import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from gomvc.config import ScaffoldConfig


@dataclass
class InitOutcome:
    """Result of one module-initializer invocation."""

    returncode: int
    stdout: str = ""
    stderr: str = ""
    command: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class ModuleInitializer(Protocol):
    """Anything that can initialize a module in a working directory."""

    def run(self, working_dir: Path, module_id: str) -> InitOutcome:
        ...


class CommandModuleInitializer:
    """Runs ``config.init_command + [module_id]`` inside the project root.

    The call blocks until the child exits; there is no timeout.  Launch errors
    (missing or non-executable program) propagate as ``OSError``.
    """

    def __init__(self, config: ScaffoldConfig | None = None) -> None:
        self.config = config or ScaffoldConfig()

    def command_for(self, module_id: str) -> list[str]:
        """Return the full argv used for *module_id*."""
        return [*self.config.init_command, module_id]

    def run(self, working_dir: Path, module_id: str) -> InitOutcome:
        cmd = self.command_for(module_id)
        completed = subprocess.run(
            cmd,
            cwd=str(working_dir),
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
        return InitOutcome(
            returncode=completed.returncode,
            stdout=(completed.stdout or "").strip(),
            stderr=(completed.stderr or "").strip(),
            command=shlex.join(cmd),
        )
