# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Turn user hook scripts into installable content carrying a provenance header."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from ..config import HeaderInfo
from ..constants import HUSKY_MARKER
from ..errors import EmptyUserHookError

DEFAULT_SHEBANG: Final[str] = "#!/usr/bin/env bash"

RECOGNISED_SHEBANGS: Final[frozenset[str]] = frozenset(
    {
        "#!/bin/sh",
        "#!/usr/bin/env sh",
        "#!/usr/bin/env bash",
        "#!/usr/bin/env python",
        "#!/usr/bin/env python3",
        "#!/usr/bin/env ruby",
        "#!/usr/bin/env node",
        "#!/usr/bin/env perl",
    }
)


@dataclass(frozen=True, slots=True)
class HookScript:
    """Interpreter directive plus the body lines that follow the header."""

    shebang: str
    body: tuple[str, ...]


def read_hook_lines(path: Path) -> list[str]:
    """Return the lines of ``path`` with surrounding blank lines removed.

    Trailing whitespace is stripped from every line; indentation and interior
    blank lines are kept.

    Raises:
        OSError: If the file cannot be read.
    """

    text = path.read_text(encoding="utf-8", errors="surrogateescape")
    # Only "\n" ends a line; rstrip drops the "\r" of "\r\n" endings.
    lines = [line.rstrip() for line in text.split("\n")]
    start = 0
    while start < len(lines) and not lines[start]:
        start += 1
    end = len(lines)
    while end > start and not lines[end - 1]:
        end -= 1
    return lines[start:end]


def split_shebang(lines: Sequence[str]) -> HookScript:
    """Separate a recognised interpreter directive from the script body.

    Args:
        lines: Trimmed script lines.

    Returns:
        HookScript: The detected shebang (or the bash default) and the body.
        A detected shebang is removed together with blank lines following it.
    """

    if lines and lines[0].strip() in RECOGNISED_SHEBANGS:
        shebang = lines[0].strip()
        rest = list(lines[1:])
        while rest and not rest[0].strip():
            rest.pop(0)
        return HookScript(shebang=shebang, body=tuple(rest))
    return HookScript(shebang=DEFAULT_SHEBANG, body=tuple(lines))


def render_header(shebang: str, header: HeaderInfo) -> list[str]:
    """Return the header block that marks a hook as installed by this tool."""

    return [
        shebang,
        "#",
        f"# {HUSKY_MARKER}",
        f"# v{header.version}: {header.homepage}",
        "#",
    ]


def build_hook_script(lines: Sequence[str], header: HeaderInfo, *, source: Path) -> list[str]:
    """Return the final lines of an installed hook.

    Args:
        lines: Trimmed lines of the user hook.
        header: Provenance values for the header block.
        source: Hook file the lines came from, used in error reports.

    Returns:
        list[str]: Shebang, header comment block, then the script body.

    Raises:
        EmptyUserHookError: If nothing but (at most) a shebang remains.
    """

    script = split_shebang(lines)
    if not script.body:
        raise EmptyUserHookError(source)
    return [*render_header(script.shebang, header), *script.body]


__all__ = [
    "DEFAULT_SHEBANG",
    "RECOGNISED_SHEBANGS",
    "HookScript",
    "build_hook_script",
    "read_hook_lines",
    "render_header",
    "split_shebang",
]
