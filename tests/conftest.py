"""Shared pytest fixtures for the gomvc test suite.

Provides reusable fixtures for:
- Temporary project roots
- Stub module initializers (no ``go`` binary needed)
- Filesystem snapshots for round-trip assertions
"""

from __future__ import annotations

from pathlib import Path

import pytest

from gomvc.scaffolder import InitOutcome, ProjectGenerator


# ---------------------------------------------------------------------------
# Stub initializer
# ---------------------------------------------------------------------------


class StubInitializer:
    """Records calls and writes a ``go.mod`` the way ``go mod init`` would."""

    def __init__(
        self,
        returncode: int = 0,
        stderr: str = "",
        manifest_name: str = "go.mod",
        error: OSError | None = None,
    ) -> None:
        self.returncode = returncode
        self.stderr = stderr
        self.manifest_name = manifest_name
        self.error = error
        self.calls: list[tuple[Path, str]] = []

    def run(self, working_dir: Path, module_id: str) -> InitOutcome:
        self.calls.append((Path(working_dir), module_id))
        if self.error is not None:
            raise self.error
        if self.returncode == 0:
            manifest = Path(working_dir) / self.manifest_name
            manifest.write_text(f"module {module_id}\n\ngo 1.22\n", encoding="utf-8")
        return InitOutcome(
            returncode=self.returncode,
            stderr=self.stderr,
            command=f"go mod init {module_id}",
        )


def snapshot(root: Path) -> dict[str, bytes | None]:
    """Map every path under *root* to its bytes (``None`` for directories)."""
    state: dict[str, bytes | None] = {}
    for p in sorted(root.rglob("*")):
        rel = p.relative_to(root).as_posix()
        state[rel] = None if p.is_dir() else p.read_bytes()
    return state


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Existing, empty project root."""
    project_dir = tmp_path / "test-project"
    project_dir.mkdir()
    return project_dir


@pytest.fixture
def stub_initializer() -> StubInitializer:
    return StubInitializer()


@pytest.fixture
def failing_initializer() -> StubInitializer:
    return StubInitializer(returncode=1, stderr="go: module already exists")


@pytest.fixture
def generator(stub_initializer: StubInitializer) -> ProjectGenerator:
    """ProjectGenerator wired to the stub initializer."""
    return ProjectGenerator(initializer=stub_initializer)
