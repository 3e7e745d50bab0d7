# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Typer application that installs the project's git hooks."""

from __future__ import annotations

import typer

from ._install_cli_models import DRY_RUN_OPTION, EMOJI_OPTION, ROOT_OPTION, InstallCLIOptions
from ._install_cli_services import emit_install_summary, perform_installation
from .shared import CLIError, build_cli_logger

app = typer.Typer(
    name="pyhusky",
    help="Install git hooks from .husky/hooks into the repository's hooks directory.",
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def install(
    root: ROOT_OPTION = None,
    dry_run: DRY_RUN_OPTION = False,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Install pyhusky git hooks for the surrounding repository.

    Raises:
        typer.Exit: Always raised to terminate the command with an exit status.
    """

    options = InstallCLIOptions.from_cli(root, dry_run=dry_run, emoji=emoji)
    logger = build_cli_logger(emoji=options.emoji)
    try:
        result = perform_installation(options, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    emit_install_summary(result, options, logger=logger)
    raise typer.Exit(code=0)


def main() -> None:
    """Run the Typer application; used by the console script and ``python -m``."""

    app()


__all__ = ["app", "install", "main"]
