# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the command-line trigger."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner

from pyhusky.cli import app
from pyhusky.constants import HUSKY_MARKER

WriteHook = Callable[[str, str], Path]


def test_cli_installs_hooks(project: Path, write_hook: WriteHook) -> None:
    write_hook("pre-commit", "#!/bin/sh\necho ok\n")

    result = CliRunner().invoke(app, ["--root", str(project), "--no-emoji"])

    assert result.exit_code == 0
    assert "Installed 1 hooks" in result.output
    assert HUSKY_MARKER in (project / ".git" / "hooks" / "pre-commit").read_text(encoding="utf-8")


def test_cli_dry_run(project: Path, write_hook: WriteHook) -> None:
    write_hook("pre-push", "echo ok\n")

    result = CliRunner().invoke(app, ["--root", str(project), "--dry-run", "--no-emoji"])

    assert result.exit_code == 0
    assert "DRY RUN" in result.output
    assert not (project / ".git" / "hooks").exists()


def test_cli_empty_hook_exits_non_zero(project: Path, write_hook: WriteHook) -> None:
    source = write_hook("commit-msg", "\n\n")

    result = CliRunner().invoke(app, ["--root", str(project), "--no-emoji"])

    assert result.exit_code == 1
    assert "User hook script is empty" in result.output
    assert str(source) in result.output


def test_cli_outside_repository_succeeds(tmp_path: Path) -> None:
    result = CliRunner().invoke(app, ["--root", str(tmp_path), "--no-emoji"])

    assert result.exit_code == 0
    assert "Git directory not found" in result.output


def test_cli_disable_switch(project: Path, write_hook: WriteHook, monkeypatch: pytest.MonkeyPatch) -> None:
    write_hook("pre-commit", "echo ok\n")
    monkeypatch.setenv("NO_HUSKY_HOOKS", "1")

    result = CliRunner().invoke(app, ["--root", str(project), "--no-emoji"])

    assert result.exit_code == 0
    assert "skipping hook installation" in result.output
    assert not (project / ".git" / "hooks").exists()


def test_cli_reports_kept_hooks(project: Path, write_hook: WriteHook) -> None:
    write_hook("pre-commit", "echo ok\n")
    runner = CliRunner()
    runner.invoke(app, ["--root", str(project), "--no-emoji"])

    result = runner.invoke(app, ["--root", str(project), "--no-emoji"])

    assert result.exit_code == 0
    assert "Installed 0 hooks" in result.output
    assert "Kept hooks already installed" in result.output


def test_cli_undecodable_git_pointer_is_skipped(tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / ".git").write_bytes(b"gitdir: /tmp/\xff\xfe\n")

    result = CliRunner().invoke(app, ["--root", str(nested), "--no-emoji"])

    assert result.exit_code == 0
    assert result.exception is None


def test_cli_undecodable_pyproject_exits_non_zero(project: Path, write_hook: WriteHook) -> None:
    write_hook("pre-commit", "echo ok\n")
    (project / "pyproject.toml").write_bytes(b"[tool.pyhusky]\n# \xff\xfe\n")

    result = CliRunner().invoke(app, ["--root", str(project), "--no-emoji"])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
    assert not (project / ".git" / "hooks" / "pre-commit").exists()
