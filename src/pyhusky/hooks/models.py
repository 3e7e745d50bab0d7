# SPDX-License-Identifier: MIT
"""Dataclasses describing hook installation inputs and outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class InstallStatus(str, Enum):
    """Enumerate how an installation run finished."""

    INSTALLED = "installed"
    DISABLED = "disabled"
    NO_GIT_DIR = "no-git-dir"
    NO_HOOKS_DIR = "no-hooks-dir"


@dataclass(frozen=True, slots=True)
class HookDirectories:
    """Describe filesystem locations used during hook installation."""

    project_root: Path
    git_dir: Path
    source_dir: Path
    target_dir: Path


@dataclass(slots=True)
class InstallResult:
    """Aggregate outcome from attempting to install git hooks."""

    status: InstallStatus
    installed: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    ignored: list[Path] = field(default_factory=list)


__all__ = ["HookDirectories", "InstallResult", "InstallStatus"]
