# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for detecting hooks that were already installed."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from pyhusky.constants import HUSKY_MARKER
from pyhusky.hooks.guard import is_installed_by_husky


def test_missing_destination_is_not_installed(tmp_path: Path) -> None:
    assert not is_installed_by_husky(tmp_path / "pre-commit")


def test_foreign_hook_is_not_installed(tmp_path: Path) -> None:
    hook = tmp_path / "pre-commit"
    hook.write_text("#!/bin/sh\nexec lint-staged\n", encoding="utf-8")

    assert not is_installed_by_husky(hook)


def test_marker_anywhere_counts_as_installed(tmp_path: Path) -> None:
    hook = tmp_path / "pre-commit"
    hook.write_text(f"#!/bin/sh\necho first\n# {HUSKY_MARKER}\n", encoding="utf-8")

    assert is_installed_by_husky(hook)


def test_undecodable_bytes_do_not_break_detection(tmp_path: Path) -> None:
    hook = tmp_path / "pre-commit"
    hook.write_bytes(b"#!/bin/sh\n\xff\xfe\n# " + HUSKY_MARKER.encode() + b"\n")

    assert is_installed_by_husky(hook)


@pytest.mark.skipif(os.name != "posix", reason="requires symlink support")
def test_symlink_to_marked_file_is_not_installed(tmp_path: Path) -> None:
    marked = tmp_path / "elsewhere"
    marked.write_text(f"#!/bin/sh\n# {HUSKY_MARKER}\n", encoding="utf-8")
    hook = tmp_path / "pre-commit"
    hook.symlink_to(marked)

    assert not is_installed_by_husky(hook)
