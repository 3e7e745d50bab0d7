# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Detect hooks that this tool has already installed."""

from __future__ import annotations

from pathlib import Path

from ..constants import HUSKY_MARKER


def is_installed_by_husky(destination: Path) -> bool:
    """Return ``True`` when ``destination`` exists and carries the provenance marker.

    Foreign hooks without the marker return ``False`` and get overwritten. So
    does a symbolic link: installed hooks are always regular files, and a
    marker seen through a link belongs to the file it points at.

    Raises:
        OSError: If an existing destination cannot be read.
    """

    if destination.is_symlink() or not destination.exists():
        return False
    content = destination.read_text(encoding="utf-8", errors="replace")
    return HUSKY_MARKER in content


__all__ = ["is_installed_by_husky"]
