# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from pyhusky.config import HeaderInfo
from pyhusky.constants import DISABLE_ENV, OUT_DIR_ENV


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own switches from leaking into tests."""
    monkeypatch.delenv(DISABLE_ENV, raising=False)
    monkeypatch.delenv(OUT_DIR_ENV, raising=False)


@pytest.fixture
def header() -> HeaderInfo:
    """Return fixed provenance values so rendered hooks are predictable."""
    return HeaderInfo(version="1.2.3", homepage="https://example.test/pyhusky")


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Return a work tree with a ``.git`` directory and an empty ``.husky/hooks``."""
    root = tmp_path / "project"
    (root / ".git").mkdir(parents=True)
    (root / ".husky" / "hooks").mkdir(parents=True)
    return root.resolve()


@pytest.fixture
def write_hook(project: Path) -> Callable[[str, str], Path]:
    """Return a helper writing user hooks under ``.husky/hooks`` of ``project``."""

    def _write(name: str, content: str) -> Path:
        path = project / ".husky" / "hooks" / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
