# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line entry point used by build scripts to trigger hook installation."""

from __future__ import annotations

from .app import app, main

__all__ = ["app", "main"]
