# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Fixed names shared across the hook installer."""

from __future__ import annotations

from typing import Final

HUSKY_DIR_NAME: Final[str] = ".husky"
HUSKY_HOOKS_DIR_NAME: Final[str] = "hooks"
GIT_METADATA_NAME: Final[str] = ".git"
GIT_HOOKS_DIR_NAME: Final[str] = "hooks"
GITDIR_POINTER_PREFIX: Final[str] = "gitdir:"

HUSKY_MARKER: Final[str] = "This hook was set by husky-rs"

DISABLE_ENV: Final[str] = "NO_HUSKY_HOOKS"
OUT_DIR_ENV: Final[str] = "OUT_DIR"

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "pyhusky"

EXECUTABLE_MODE: Final[int] = 0o755

__all__ = [
    "DISABLE_ENV",
    "EXECUTABLE_MODE",
    "GITDIR_POINTER_PREFIX",
    "GIT_HOOKS_DIR_NAME",
    "GIT_METADATA_NAME",
    "HUSKY_DIR_NAME",
    "HUSKY_HOOKS_DIR_NAME",
    "HUSKY_MARKER",
    "OUT_DIR_ENV",
    "PYPROJECT_FILENAME",
    "PYPROJECT_SECTION_KEY",
    "PYPROJECT_TOOL_KEY",
]
