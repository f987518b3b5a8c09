"""Tests for decommissioning a provisioned skeleton."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from unittest.mock import patch

import pytest

from gomvc.config import ScaffoldConfig
from gomvc.errors import DeleteError, DeleteIOFailure
from gomvc.scaffolder.generator import TOP_LEVEL_NAMES
from gomvc.scaffolder.teardown import decommission

pytestmark = pytest.mark.unit


@pytest.fixture
def provisioned(generator, tmp_project_dir: Path) -> Path:
    generator.provision(tmp_project_dir, "example.com/u/p1")
    return tmp_project_dir


class TestDecommission:
    def test_removes_everything_provisioned(self, provisioned: Path):
        result = decommission(provisioned)

        assert list(provisioned.iterdir()) == []
        assert result.manifest_removed is True
        assert len(result.removed) == 9

    def test_prints_manifest_deletion(self, provisioned: Path, capsys):
        decommission(provisioned)
        assert "Deleted go.mod file." in capsys.readouterr().out

    def test_unrelated_files_survive(self, provisioned: Path):
        (provisioned / "README.md").write_text("keep me", encoding="utf-8")
        (provisioned / "internal").mkdir()
        (provisioned / "internal" / "db.go").write_text("package internal\n")
        (provisioned / "go.sum").write_text("")

        decommission(provisioned)

        assert (provisioned / "README.md").read_text(encoding="utf-8") == "keep me"
        assert (provisioned / "internal" / "db.go").is_file()
        assert (provisioned / "go.sum").is_file()

    def test_user_files_inside_fixed_dirs_are_removed(self, provisioned: Path):
        (provisioned / "controller" / "extra.go").write_text("package controller\n")
        decommission(provisioned)
        assert not (provisioned / "controller").exists()

    def test_whole_cmd_tree_removed(self, provisioned: Path):
        (provisioned / "cmd" / "worker").mkdir()
        decommission(provisioned)
        assert not (provisioned / "cmd").exists()

    def test_second_call_is_harmless(self, provisioned: Path):
        decommission(provisioned)
        result = decommission(provisioned)
        assert result.removed == []
        assert result.manifest_removed is False

    def test_empty_root(self, tmp_project_dir: Path):
        result = decommission(tmp_project_dir)
        assert result.removed == []

    def test_missing_root(self, tmp_path: Path):
        result = decommission(tmp_path / "never-created")
        assert result.removed == []

    def test_partial_tree(self, tmp_project_dir: Path):
        (tmp_project_dir / "models").mkdir()
        result = decommission(tmp_project_dir)
        assert result.removed == [tmp_project_dir / "models"]
        assert result.manifest_removed is False

    def test_plain_file_with_fixed_name_removed(self, tmp_project_dir: Path):
        (tmp_project_dir / "config").write_text("a file, not a dir")
        decommission(tmp_project_dir)
        assert not (tmp_project_dir / "config").exists()

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlinked_dir_is_unlinked_not_followed(self, tmp_path: Path):
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "precious.txt").write_text("do not delete")
        root = tmp_path / "root"
        root.mkdir()
        (root / "views").symlink_to(outside, target_is_directory=True)

        decommission(root)

        assert not (root / "views").is_symlink()
        assert (outside / "precious.txt").read_text() == "do not delete"

    def test_custom_manifest_name(self, tmp_project_dir: Path):
        (tmp_project_dir / "go.mod").write_text("module x\n")
        (tmp_project_dir / "go.work").write_text("go 1.22\n")

        result = decommission(tmp_project_dir, ScaffoldConfig(manifest_name="go.work"))

        assert result.manifest_removed is True
        assert not (tmp_project_dir / "go.work").exists()
        assert (tmp_project_dir / "go.mod").exists()


class TestDecommissionFailures:
    def test_failure_aborts_and_keeps_earlier_removals(self, provisioned: Path):
        real_rmtree = shutil.rmtree

        def flaky_rmtree(path, *args, **kwargs):
            if Path(path).name == "pkg":
                raise PermissionError(13, "Permission denied", str(path))
            return real_rmtree(path, *args, **kwargs)

        with patch("gomvc.scaffolder.teardown.shutil.rmtree", flaky_rmtree):
            with pytest.raises(DeleteIOFailure) as excinfo:
                decommission(provisioned)

        assert excinfo.value.path == provisioned / "pkg"
        assert not (provisioned / "cmd").exists()
        assert not (provisioned / "models").exists()
        assert (provisioned / "pkg").is_dir()
        assert (provisioned / "router").is_dir()
        assert (provisioned / "go.mod").exists()

    def test_retry_after_failure_completes(self, provisioned: Path):
        real_rmtree = shutil.rmtree

        def flaky_rmtree(path, *args, **kwargs):
            if Path(path).name == "pkg":
                raise PermissionError(13, "Permission denied", str(path))
            return real_rmtree(path, *args, **kwargs)

        with patch("gomvc.scaffolder.teardown.shutil.rmtree", flaky_rmtree):
            with pytest.raises(DeleteError):
                decommission(provisioned)

        decommission(provisioned)
        for name in TOP_LEVEL_NAMES:
            assert not (provisioned / name).exists()
        assert not (provisioned / "go.mod").exists()

    def test_manifest_failure(self, provisioned: Path):
        real_unlink = Path.unlink

        def flaky_unlink(self, *args, **kwargs):
            if self.name == "go.mod":
                raise PermissionError(13, "Permission denied", str(self))
            return real_unlink(self, *args, **kwargs)

        with patch.object(Path, "unlink", flaky_unlink):
            with pytest.raises(DeleteIOFailure, match="go.mod"):
                decommission(provisioned)

        for name in TOP_LEVEL_NAMES:
            assert not (provisioned / name).exists()
