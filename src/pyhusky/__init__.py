# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core package metadata for the pyhusky hook installer."""

from __future__ import annotations

from importlib import metadata

__all__ = ["DISTRIBUTION_NAME", "HOMEPAGE", "__version__"]

DISTRIBUTION_NAME = "pyhusky"
_FALLBACK_HOMEPAGE = "https://github.com/pyhusky/pyhusky"


def _discover_homepage() -> str:
    """Return the homepage URL advertised by the installed distribution.

    Returns:
        str: ``Homepage`` project URL, the legacy ``Home-page`` field, or the
        fallback URL when the package metadata is unavailable.
    """

    try:
        meta = metadata.metadata(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
        return _FALLBACK_HOMEPAGE
    for entry in meta.get_all("Project-URL") or ():
        label, _, url = entry.partition(",")
        if label.strip().lower() == "homepage" and url.strip():
            return url.strip()
    return meta.get("Home-page") or _FALLBACK_HOMEPAGE


try:
    __version__ = metadata.version(DISTRIBUTION_NAME)
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"

HOMEPAGE = _discover_homepage()
