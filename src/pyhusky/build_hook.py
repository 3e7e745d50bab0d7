# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Hatchling build hook installing git hooks whenever a project is built.

Enable it from a consuming project's ``pyproject.toml``::

    [build-system]
    requires = ["hatchling", "pyhusky"]
    build-backend = "hatchling.build"

    [tool.hatch.build.hooks.pyhusky]

Setting ``NO_HUSKY_HOOKS`` skips installation; builds outside a git checkout
carry on with a warning.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from hatchling.builders.hooks.plugin.interface import BuildHookInterface
from hatchling.plugin import hookimpl

from .hooks import install_hooks

PLUGIN_NAME = "pyhusky"


class PyhuskyBuildHook(BuildHookInterface):
    """Install ``.husky/hooks`` into the enclosing repository before building."""

    PLUGIN_NAME = PLUGIN_NAME

    def initialize(self, version: str, build_data: dict[str, Any]) -> None:
        """Run the installer from the project root.

        Args:
            version: Build target version requested by hatchling (unused).
            build_data: Mutable build metadata (unused).

        Raises:
            EmptyUserHookError: If a user hook is empty; the build fails.
            OSError: On filesystem failures; the build fails.
        """

        del version, build_data
        install_hooks(Path(self.root), use_emoji=False)


@hookimpl
def hatch_register_build_hook() -> type[BuildHookInterface]:
    """Register :class:`PyhuskyBuildHook` with hatchling's plugin manager."""

    return PyhuskyBuildHook


__all__ = ["PLUGIN_NAME", "PyhuskyBuildHook", "hatch_register_build_hook"]
