# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and environment helpers for the hook installer."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from . import HOMEPAGE, __version__
from .constants import (
    DISABLE_ENV,
    OUT_DIR_ENV,
    PYPROJECT_FILENAME,
    PYPROJECT_SECTION_KEY,
    PYPROJECT_TOOL_KEY,
)
from .errors import ConfigError, EnvironmentVariableError
from .registry import HookSet, allowed_hook_names


class HeaderInfo(BaseModel):
    """Provenance values rendered into every installed hook header."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    version: str = Field(default=__version__, min_length=1)
    homepage: str = Field(default=HOMEPAGE, min_length=1)


class InstallerConfig(BaseModel):
    """Project-level options read from ``[tool.pyhusky]``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    hook_set: HookSet = HookSet.DEFAULT
    require_executable: bool = False

    @property
    def allowed_hooks(self) -> frozenset[str]:
        """Return the hook-name allow-list selected by :attr:`hook_set`."""

        return allowed_hook_names(self.hook_set)


def load_config(project_root: Path) -> InstallerConfig:
    """Return the installer configuration declared for ``project_root``.

    Args:
        project_root: Work tree that may contain a ``pyproject.toml``.

    Returns:
        InstallerConfig: Parsed configuration, or defaults when the file or
        the ``[tool.pyhusky]`` table is absent.

    Raises:
        ConfigError: If the file is not UTF-8 TOML or the table fails validation.
    """

    path = project_root / PYPROJECT_FILENAME
    if not path.is_file():
        return InstallerConfig()
    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(path, str(exc)) from exc

    section = _extract_section(document)
    if section is None:
        return InstallerConfig()
    try:
        return InstallerConfig.model_validate(section)
    except ValidationError as exc:
        raise ConfigError(path, _summarise_validation_error(exc)) from exc


def _extract_section(document: Mapping[str, Any]) -> Mapping[str, Any] | None:
    tool_section = document.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return None
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if not isinstance(section, Mapping):
        return None
    return section


def _summarise_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"]) or PYPROJECT_SECTION_KEY
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def hooks_disabled(env: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when the disable switch is present, whatever its value.

    Args:
        env: Optional environment mapping used instead of :data:`os.environ`.

    Returns:
        bool: ``True`` when hook installation must be skipped.
    """

    environment = os.environ if env is None else env
    return DISABLE_ENV in environment


def output_dir_hint(env: Mapping[str, str] | None = None) -> Path | None:
    """Return the build-output directory used to seed the git directory search.

    Args:
        env: Optional environment mapping used instead of :data:`os.environ`.

    Returns:
        Path | None: Directory named by ``OUT_DIR`` or ``None`` when unset.

    Raises:
        EnvironmentVariableError: If the variable is present but empty.
    """

    environment = os.environ if env is None else env
    value = environment.get(OUT_DIR_ENV)
    if value is None:
        return None
    if not value.strip():
        raise EnvironmentVariableError(OUT_DIR_ENV, "variable is set but empty")
    return Path(value).expanduser()


__all__ = [
    "HeaderInfo",
    "InstallerConfig",
    "hooks_disabled",
    "load_config",
    "output_dir_hint",
]
