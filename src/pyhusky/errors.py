# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Error types raised while installing git hooks."""

from __future__ import annotations

from pathlib import Path


class HuskyError(Exception):
    """Base class for every failure raised by the hook installer."""


class GitDirNotFoundError(HuskyError):
    """Raised when no git directory can be located from a starting path."""

    def __init__(self, path: Path | str) -> None:
        """Initialise the error with the path where the search started.

        Args:
            path: Directory (or dangling pointer target) that yielded no git directory.
        """

        super().__init__(f"Git directory not found in '{path}' or its parent directories")
        self.path = Path(path)


class EmptyUserHookError(HuskyError):
    """Raised when a user hook script holds no content besides whitespace."""

    def __init__(self, path: Path) -> None:
        """Initialise the error with the offending hook path.

        Args:
            path: Source hook file that turned out to be empty.
        """

        super().__init__(f"User hook script is empty: '{path}'")
        self.path = path


class EnvironmentVariableError(HuskyError):
    """Raised when an environment variable is present but unusable."""

    def __init__(self, name: str, reason: str) -> None:
        """Initialise the error with the variable name and failure reason.

        Args:
            name: Environment variable that could not be used.
            reason: Human-readable explanation of the problem.
        """

        super().__init__(f"Environment variable error: {name}: {reason}")
        self.name = name
        self.reason = reason


class ConfigError(HuskyError):
    """Raised when ``[tool.pyhusky]`` configuration is invalid."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initialise the error with the configuration file and reason.

        Args:
            path: Configuration file that failed to load.
            reason: Human-readable explanation of the problem.
        """

        super().__init__(f"Invalid configuration in '{path}': {reason}")
        self.path = path
        self.reason = reason


__all__ = [
    "ConfigError",
    "EmptyUserHookError",
    "EnvironmentVariableError",
    "GitDirNotFoundError",
    "HuskyError",
]
