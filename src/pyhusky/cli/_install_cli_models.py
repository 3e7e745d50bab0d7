# SPDX-License-Identifier: MIT
"""Data structures for the hook installation CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

ROOT_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--root",
        "-r",
        help="Directory where the git directory search starts (default: $OUT_DIR or the working directory).",
    ),
]
DRY_RUN_OPTION = Annotated[
    bool,
    typer.Option("--dry-run", help="Show actions without modifying files."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]


@dataclass(slots=True)
class InstallCLIOptions:
    """Capture CLI options for hook installation."""

    root: Path | None
    dry_run: bool
    emoji: bool

    @classmethod
    def from_cli(cls, root: Path | None, *, dry_run: bool, emoji: bool) -> InstallCLIOptions:
        """Return options parsed from CLI arguments."""

        return cls(
            root=root.expanduser().resolve() if root is not None else None,
            dry_run=dry_run,
            emoji=emoji,
        )


__all__ = [
    "DRY_RUN_OPTION",
    "EMOJI_OPTION",
    "ROOT_OPTION",
    "InstallCLIOptions",
]
