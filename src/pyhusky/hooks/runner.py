# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Execution utilities for installing project git hooks."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from ..config import HeaderInfo, InstallerConfig, hooks_disabled, load_config, output_dir_hint
from ..constants import DISABLE_ENV, GIT_HOOKS_DIR_NAME, HUSKY_DIR_NAME, HUSKY_HOOKS_DIR_NAME
from ..errors import GitDirNotFoundError
from ..logging import info, ok, warn
from .classifier import is_valid_hook_file
from .gitdir import GitDirectoryLocation, locate_repository
from .guard import is_installed_by_husky
from .header import build_hook_script, read_hook_lines
from .models import HookDirectories, InstallResult, InstallStatus
from .writer import write_executable_file


def install_hooks(
    start: Path | None = None,
    *,
    env: Mapping[str, str] | None = None,
    header: HeaderInfo | None = None,
    dry_run: bool = False,
    use_emoji: bool = True,
) -> InstallResult:
    """Install user hooks from ``.husky/hooks`` into the repository's git hooks directory.

    Args:
        start: Directory where the git directory search begins. Defaults to
            the ``OUT_DIR`` build hint, then the current working directory.
        env: Optional environment mapping used instead of :data:`os.environ`.
        header: Provenance values written into each hook header.
        dry_run: When ``True`` avoid filesystem mutations while reporting actions.
        use_emoji: Whether console messages may include emoji.

    Returns:
        InstallResult: Status of the run plus installed, skipped and ignored paths.

    Raises:
        EmptyUserHookError: If an allowed hook file has no content.
        EnvironmentVariableError: If ``OUT_DIR`` is set but unusable.
        ConfigError: If ``[tool.pyhusky]`` is invalid.
        OSError: On any filesystem failure.
    """

    environment = os.environ if env is None else env
    if hooks_disabled(environment):
        info(f"{DISABLE_ENV} is set, skipping hook installation", use_emoji=use_emoji)
        return InstallResult(status=InstallStatus.DISABLED)

    origin = start if start is not None else output_dir_hint(environment) or Path.cwd()
    try:
        location = locate_repository(origin)
    except GitDirNotFoundError as exc:
        warn(f"{exc}; skipping hook installation", use_emoji=use_emoji)
        return InstallResult(status=InstallStatus.NO_GIT_DIR)

    directories = _compute_directories(location)
    if not directories.source_dir.is_dir():
        return InstallResult(status=InstallStatus.NO_HOOKS_DIR)

    config = load_config(directories.project_root)
    provenance = header or HeaderInfo()
    if not dry_run:
        directories.target_dir.mkdir(parents=True, exist_ok=True)

    result = InstallResult(status=InstallStatus.INSTALLED)
    for entry in sorted(directories.source_dir.iterdir()):
        _install_single_hook(
            entry,
            directories=directories,
            config=config,
            header=provenance,
            result=result,
            dry_run=dry_run,
            use_emoji=use_emoji,
        )

    if dry_run:
        ok(f"Dry run complete: would install {len(result.installed)} hooks", use_emoji=use_emoji)
    else:
        ok(f"Installed {len(result.installed)} hooks", use_emoji=use_emoji)
    return result


def _compute_directories(location: GitDirectoryLocation) -> HookDirectories:
    """Return the source and target hook directories for ``location``.

    Args:
        location: Resolved repository location.

    Returns:
        HookDirectories: Project root, git directory, user hooks and git hooks paths.
    """

    return HookDirectories(
        project_root=location.work_tree,
        git_dir=location.git_dir,
        source_dir=location.work_tree / HUSKY_DIR_NAME / HUSKY_HOOKS_DIR_NAME,
        target_dir=location.git_dir / GIT_HOOKS_DIR_NAME,
    )


def _install_single_hook(
    source: Path,
    *,
    directories: HookDirectories,
    config: InstallerConfig,
    header: HeaderInfo,
    result: InstallResult,
    dry_run: bool,
    use_emoji: bool,
) -> None:
    """Install one entry of the user hooks directory when it qualifies.

    Args:
        source: Candidate hook file.
        directories: Prepared source and target directories.
        config: Project configuration controlling the allow-list.
        header: Provenance values for the header block.
        result: Aggregate result updated in place.
        dry_run: When ``True`` avoid performing filesystem mutations.
        use_emoji: Whether console messages may include emoji.
    """

    if not is_valid_hook_file(
        source,
        config.allowed_hooks,
        require_executable=config.require_executable,
    ):
        result.ignored.append(source)
        return

    destination = directories.target_dir / source.name
    if is_installed_by_husky(destination):
        info(f"{source.name} hook already installed, leaving it untouched", use_emoji=use_emoji)
        result.skipped.append(destination)
        return

    content = build_hook_script(read_hook_lines(source), header, source=source)
    info(f"Installing {source.name} hook", use_emoji=use_emoji)
    if not dry_run:
        write_executable_file(destination, content)
    result.installed.append(destination)


__all__ = ["install_hooks"]
