# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Create hook files that are executable from the moment they exist."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterable
from pathlib import Path
from typing import Final

from ..constants import EXECUTABLE_MODE

_ANY_EXECUTE_BIT = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH
# Where O_NOFOLLOW exists a link that reappears after the unlink fails with ELOOP.
_CREATE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, "O_NOFOLLOW", 0)
# Bytes that are not valid UTF-8 in the source hook round-trip unchanged.
_TEXT_OPTIONS: Final[dict[str, str]] = {
    "encoding": "utf-8",
    "errors": "surrogateescape",
    "newline": "\n",
}


def supports_executable_bit() -> bool:
    """Return ``True`` when the running platform exposes POSIX permission bits."""

    return os.name == "posix"


def _open_executable(path: Path) -> int:
    """Open ``path`` for writing with mode ``0o755`` applied at creation time.

    A file that already existed keeps its old mode through ``open``; it is
    corrected via ``fchmod`` on the same descriptor when it lacks execute bits.
    """

    fd = os.open(path, _CREATE_FLAGS, EXECUTABLE_MODE)
    try:
        if not os.fstat(fd).st_mode & _ANY_EXECUTE_BIT:
            os.fchmod(fd, EXECUTABLE_MODE)
    except OSError:
        os.close(fd)
        raise
    return fd


def write_executable_file(path: Path, lines: Iterable[str]) -> None:
    """Create or truncate ``path``, write ``lines`` and make the file executable.

    A symbolic link at ``path`` is removed and replaced by a regular file; the
    file it pointed at is never written.

    Args:
        path: Destination file.
        lines: Content lines; each is written followed by ``\\n``.

    Raises:
        OSError: If the file cannot be created or written.
    """

    if path.is_symlink():
        path.unlink()
    if supports_executable_bit():
        handle = os.fdopen(_open_executable(path), "w", **_TEXT_OPTIONS)
    else:
        handle = path.open("w", **_TEXT_OPTIONS)
    with handle:
        for line in lines:
            handle.write(f"{line}\n")


__all__ = ["supports_executable_bit", "write_executable_file"]
