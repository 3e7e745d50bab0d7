# SPDX-License-Identifier: MIT
"""Helper services used by the hook installation CLI."""

from __future__ import annotations

from ..errors import HuskyError
from ..hooks import InstallResult, install_hooks
from ._install_cli_models import InstallCLIOptions
from .shared import CLIError, CLILogger


def perform_installation(options: InstallCLIOptions, *, logger: CLILogger) -> InstallResult:
    """Install hooks for the provided options.

    Args:
        options: Normalized CLI options containing paths and runtime flags.
        logger: Logger used to emit user-facing messages.

    Returns:
        The result reported by :func:`install_hooks`.

    Raises:
        CLIError: Raised when installation fails with a fatal condition.
    """

    try:
        return install_hooks(
            options.root,
            dry_run=options.dry_run,
            use_emoji=options.emoji,
        )
    except (HuskyError, OSError) as exc:
        message = f"Error during hook installation: {exc}"
        logger.fail(message)
        raise CLIError(message) from exc


def emit_install_summary(
    result: InstallResult,
    options: InstallCLIOptions,
    *,
    logger: CLILogger,
) -> None:
    """Emit summary notes after attempting hook installation.

    Args:
        result: The installation result from :func:`perform_installation`.
        options: CLI options controlling dry-run behaviour and emoji output.
        logger: Logger used to display summary notes.
    """

    if result.skipped:
        kept = ", ".join(str(path) for path in result.skipped)
        logger.info(f"Kept hooks already installed by pyhusky: {kept}")
    if options.dry_run and result.installed:
        planned = ", ".join(str(path) for path in result.installed)
        logger.warn(f"DRY RUN: would install {planned}")


__all__ = ["emit_install_summary", "perform_installation"]
