# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Hook discovery, transformation and installation services."""

from __future__ import annotations

from .gitdir import GitDirectoryLocation, find_git_dir, locate_repository
from .models import InstallResult, InstallStatus
from .runner import install_hooks

__all__ = [
    "GitDirectoryLocation",
    "InstallResult",
    "InstallStatus",
    "find_git_dir",
    "install_hooks",
    "locate_repository",
]
