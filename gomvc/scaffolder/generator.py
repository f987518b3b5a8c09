"""Provisioning orchestrator.

Takes a root path and a Go module identifier, runs the module initializer,
then materializes the fixed MVC skeleton: eight directories and six Go files
rendered from Jinja2 templates.  Every filesystem step is idempotent, so a
run that failed part-way can simply be repeated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from gomvc.config import ScaffoldConfig
from gomvc.errors import ModuleInitFailed, ProvisionIOFailure
from gomvc.utils import print_info, print_warning

from .initializer import CommandModuleInitializer, ModuleInitializer
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Fixed skeleton layout
# ---------------------------------------------------------------------------

DIRECTORIES: tuple[str, ...] = (
    "cmd/api",
    "controller",
    "models",
    "pkg",
    "config",
    "views",
    "router",
    "middleware",
)


@dataclass(frozen=True)
class ScaffoldFile:
    """One generated file: where it goes and which template renders it."""

    path: str
    template: str


FILES: tuple[ScaffoldFile, ...] = (
    ScaffoldFile("cmd/api/main.go", "cmd/api/main.go.j2"),
    ScaffoldFile("controller/home_controller.go", "controller/home_controller.go.j2"),
    ScaffoldFile("models/user.go", "models/user.go.j2"),
    ScaffoldFile("pkg/utility.go", "pkg/utility.go.j2"),
    ScaffoldFile("router/router.go", "router/router.go.j2"),
    ScaffoldFile("middleware/request_logger.go", "middleware/request_logger.go.j2"),
)


def _top_level_names(directories: tuple[str, ...]) -> tuple[str, ...]:
    names: list[str] = []
    for d in directories:
        head = d.split("/", 1)[0]
        if head not in names:
            names.append(head)
    return tuple(names)


# Decommissioning removes exactly these entries under the root.
TOP_LEVEL_NAMES: tuple[str, ...] = _top_level_names(DIRECTORIES)


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------


@dataclass
class MakeDirectory:
    """Create a directory unless something already exists at the path."""

    path: Path

    def apply(self) -> bool:
        if self.path.exists():
            return False
        self.path.mkdir(parents=True, exist_ok=True)
        return True


@dataclass
class WriteFile:
    """Write *content* to a new file; an existing file is left untouched."""

    path: Path
    content: str

    def apply(self) -> bool:
        if self.path.exists():
            return False
        self.path.write_text(self.content, encoding="utf-8")
        return True


@dataclass
class ProvisionResult:
    """What a provisioning run changed on disk."""

    root: Path
    module_id: str
    created_dirs: list[Path] = field(default_factory=list)
    written_files: list[Path] = field(default_factory=list)
    skipped_files: list[Path] = field(default_factory=list)

    def record(self, step: MakeDirectory | WriteFile, changed: bool) -> None:
        if isinstance(step, MakeDirectory):
            if changed:
                self.created_dirs.append(step.path)
        elif changed:
            self.written_files.append(step.path)
        else:
            self.skipped_files.append(step.path)


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Provisions the Go MVC skeleton under a root directory.

    The module initializer and the template renderer are injectable; by
    default the initializer runs ``go mod init`` (see ``ScaffoldConfig``).
    """

    def __init__(
        self,
        config: ScaffoldConfig | None = None,
        initializer: ModuleInitializer | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or ScaffoldConfig()
        self.initializer = initializer or CommandModuleInitializer(self.config)
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def provision(self, root_path: str | Path, module_id: str) -> ProvisionResult:
        """Initialize the module and create the skeleton under *root_path*.

        Args:
            root_path: Project root.  Created if missing.
            module_id: Go module path, used verbatim as the import prefix of
                every cross-package reference.

        Returns:
            A ``ProvisionResult`` listing what was created and skipped.

        Raises:
            ModuleInitFailed: The initializer could not run or exited
                non-zero.  No skeleton directory or file has been created.
            ProvisionIOFailure: A directory or file could not be created.
                Everything created before the failure is kept.
        """
        root = Path(root_path)
        if not module_id:
            print_warning(
                "Module identifier is empty; generated import paths will "
                "start with '/'."
            )

        self._ensure_root(root)
        self._init_module(root, module_id)

        result = ProvisionResult(root=root, module_id=module_id)
        for step in self.plan_steps(root, module_id):
            try:
                changed = step.apply()
            except OSError as exc:
                raise ProvisionIOFailure(
                    f"failed to create {step.path}: {exc}", path=step.path
                ) from exc
            result.record(step, changed)
        return result

    def plan_steps(
        self, root: Path, module_id: str
    ) -> list[MakeDirectory | WriteFile]:
        """Return the ordered filesystem steps: all directories, then all files."""
        steps: list[MakeDirectory | WriteFile] = [
            MakeDirectory(root / d) for d in DIRECTORIES
        ]
        for scaffold_file in FILES:
            steps.append(
                WriteFile(
                    root / scaffold_file.path,
                    self.render_file(scaffold_file, module_id),
                )
            )
        return steps

    def render_file(self, scaffold_file: ScaffoldFile, module_id: str) -> str:
        """Render the content of one generated file."""
        return self.renderer.render(scaffold_file.template, {"module_id": module_id})

    # -- Internals ---------------------------------------------------------

    def _ensure_root(self, root: Path) -> None:
        if root.is_dir():
            return
        try:
            root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ProvisionIOFailure(
                f"failed to create project root {root}: {exc}", path=root
            ) from exc

    def _init_module(self, root: Path, module_id: str) -> None:
        try:
            outcome = self.initializer.run(root, module_id)
        except OSError as exc:
            raise ModuleInitFailed(
                f"failed to initialize go module: {exc}",
                command=str(exc.filename or ""),
            ) from exc

        if not outcome.ok:
            message = (
                f"failed to initialize go module: {outcome.command or 'initializer'} "
                f"exited with status {outcome.returncode}"
            )
            if outcome.stderr:
                message += f"\n{outcome.stderr}"
            raise ModuleInitFailed(
                message,
                command=outcome.command,
                returncode=outcome.returncode,
                stderr=outcome.stderr,
            )
        print_info(f"Initialized Go module: {module_id}")


def provision(
    root_path: str | Path,
    module_id: str,
    config: ScaffoldConfig | None = None,
    initializer: ModuleInitializer | None = None,
) -> ProvisionResult:
    """Shortcut for ``ProjectGenerator(config, initializer).provision(...)``."""
    return ProjectGenerator(config, initializer).provision(root_path, module_id)
