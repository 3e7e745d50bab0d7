# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Decide which entries of the user hooks directory are installable."""

from __future__ import annotations

import stat
from collections.abc import Collection
from pathlib import Path

from .writer import supports_executable_bit

_ANY_EXECUTE_BIT = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def has_executable_bit(path: Path) -> bool:
    """Return ``True`` when ``path`` carries at least one execute permission bit.

    Platforms without POSIX permission bits treat every file as executable.
    """

    if not supports_executable_bit():
        return True
    return bool(path.stat().st_mode & _ANY_EXECUTE_BIT)


def is_valid_hook_file(
    path: Path,
    allowed: Collection[str],
    *,
    require_executable: bool = False,
) -> bool:
    """Return whether ``path`` should be installed as a git hook.

    Args:
        path: Entry of the user hooks directory. Symlinks are followed.
        allowed: Exact hook names admitted by the active allow-list.
        require_executable: Also demand an execute bit on the source file.

    Returns:
        bool: ``True`` when the entry is a regular file with an allowed name
        (and, if requested, executable).
    """

    if path.name not in allowed:
        return False
    if not path.is_file():
        return False
    if require_executable and not has_executable_bit(path):
        return False
    return True


__all__ = ["has_executable_bit", "is_valid_hook_file"]
