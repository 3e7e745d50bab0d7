# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for hook file classification."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from pyhusky.hooks.classifier import has_executable_bit, is_valid_hook_file
from pyhusky.registry import HookSet, allowed_hook_names, available_hooks

DEFAULT_ALLOWED = allowed_hook_names()

posix_only = pytest.mark.skipif(os.name != "posix", reason="requires POSIX permission bits")


def _touch(path: Path, content: str = "echo hook\n") -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def test_default_registry_lists_three_hooks() -> None:
    assert available_hooks() == ("pre-commit", "commit-msg", "pre-push")


def test_standard_registry_extends_defaults() -> None:
    standard = allowed_hook_names(HookSet.STANDARD)

    assert DEFAULT_ALLOWED < standard
    assert "post-checkout" in standard
    assert "prepare-commit-msg" in standard
    assert "prepare-commit-msg" not in DEFAULT_ALLOWED


@pytest.mark.parametrize("name", ["pre-commit", "commit-msg", "pre-push"])
def test_allowed_regular_file_is_valid(tmp_path: Path, name: str) -> None:
    assert is_valid_hook_file(_touch(tmp_path / name), DEFAULT_ALLOWED)


@pytest.mark.parametrize("name", ["not-a-hook", "Pre-Commit", "pre-commit.sample", "pre-comm", "pre-commit "])
def test_names_must_match_exactly(tmp_path: Path, name: str) -> None:
    assert not is_valid_hook_file(_touch(tmp_path / name), DEFAULT_ALLOWED)


def test_directory_is_rejected(tmp_path: Path) -> None:
    (tmp_path / "pre-commit").mkdir()

    assert not is_valid_hook_file(tmp_path / "pre-commit", DEFAULT_ALLOWED)


@posix_only
def test_symlink_to_regular_file_is_followed(tmp_path: Path) -> None:
    target = _touch(tmp_path / "shared-hook")
    link = tmp_path / "pre-push"
    link.symlink_to(target)

    assert is_valid_hook_file(link, DEFAULT_ALLOWED)


@posix_only
def test_symlink_to_directory_or_nothing_is_rejected(tmp_path: Path) -> None:
    (tmp_path / "somewhere").mkdir()
    (tmp_path / "pre-push").symlink_to(tmp_path / "somewhere")
    (tmp_path / "commit-msg").symlink_to(tmp_path / "missing")

    assert not is_valid_hook_file(tmp_path / "pre-push", DEFAULT_ALLOWED)
    assert not is_valid_hook_file(tmp_path / "commit-msg", DEFAULT_ALLOWED)


@posix_only
def test_executable_bit_only_required_when_requested(tmp_path: Path) -> None:
    hook = _touch(tmp_path / "pre-commit")
    hook.chmod(0o644)

    assert not has_executable_bit(hook)
    assert is_valid_hook_file(hook, DEFAULT_ALLOWED)
    assert not is_valid_hook_file(hook, DEFAULT_ALLOWED, require_executable=True)

    hook.chmod(0o744)

    assert has_executable_bit(hook)
    assert is_valid_hook_file(hook, DEFAULT_ALLOWED, require_executable=True)


def test_platform_without_permission_bits_treats_files_as_executable(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    hook = _touch(tmp_path / "pre-commit")
    monkeypatch.setattr("pyhusky.hooks.classifier.supports_executable_bit", lambda: False)

    assert has_executable_bit(hook)
    assert is_valid_hook_file(hook, DEFAULT_ALLOWED, require_executable=True)
