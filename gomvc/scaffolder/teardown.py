"""Removal of a provisioned skeleton.

Deletion is scoped to the fixed top-level names of the skeleton plus the
module manifest.  Nothing else under the root is ever touched, and there is
no confirmation or dry-run step.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path

from gomvc.config import ScaffoldConfig
from gomvc.errors import DeleteIOFailure
from gomvc.utils import print_info

from .generator import TOP_LEVEL_NAMES


@dataclass
class DecommissionResult:
    """What a decommissioning run removed."""

    root: Path
    removed: list[Path] = field(default_factory=list)
    manifest_removed: bool = False


def _remove_entry(path: Path) -> bool:
    """Remove *path* without following symlinks.  Returns ``False`` if absent."""
    if path.is_symlink():
        path.unlink()
    elif path.is_dir():
        shutil.rmtree(path)
    elif path.exists():
        path.unlink()
    else:
        return False
    return True


def decommission(
    root_path: str | Path, config: ScaffoldConfig | None = None
) -> DecommissionResult:
    """Remove the skeleton directories and the module manifest from *root_path*.

    Missing entries are skipped, so calling this twice is harmless.

    Raises:
        DeleteIOFailure: An existing entry could not be removed.  Entries
            removed before the failure stay removed.
    """
    config = config or ScaffoldConfig()
    root = Path(root_path)
    result = DecommissionResult(root=root)

    for name in TOP_LEVEL_NAMES:
        target = root / name
        try:
            if _remove_entry(target):
                result.removed.append(target)
        except OSError as exc:
            raise DeleteIOFailure(
                f"failed to delete {target}: {exc}", path=target
            ) from exc

    manifest = root / config.manifest_name
    if manifest.is_symlink() or manifest.exists():
        try:
            manifest.unlink()
        except OSError as exc:
            raise DeleteIOFailure(
                f"failed to delete {config.manifest_name}: {exc}", path=manifest
            ) from exc
        result.removed.append(manifest)
        result.manifest_removed = True
        print_info(f"Deleted {config.manifest_name} file.")

    return result
