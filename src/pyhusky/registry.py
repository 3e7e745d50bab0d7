# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Registry helpers describing which git hook names may be installed."""

from __future__ import annotations

from enum import Enum

_DEFAULT_HOOKS: tuple[str, ...] = ("pre-commit", "commit-msg", "pre-push")

# Every hook documented by githooks(5).
_STANDARD_HOOKS: tuple[str, ...] = (
    "applypatch-msg",
    "pre-applypatch",
    "post-applypatch",
    "pre-commit",
    "pre-merge-commit",
    "prepare-commit-msg",
    "commit-msg",
    "post-commit",
    "pre-rebase",
    "post-checkout",
    "post-merge",
    "pre-push",
    "pre-receive",
    "update",
    "proc-receive",
    "post-receive",
    "post-update",
    "reference-transaction",
    "push-to-checkout",
    "pre-auto-gc",
    "post-rewrite",
    "sendemail-validate",
    "fsmonitor-watchman",
    "p4-changelist",
    "p4-prepare-changelist",
    "p4-post-changelist",
    "p4-pre-submit",
    "post-index-change",
)


class HookSet(str, Enum):
    """Enumerate the allow-lists a project may opt into."""

    DEFAULT = "default"
    STANDARD = "standard"


def available_hooks(hook_set: HookSet = HookSet.DEFAULT) -> tuple[str, ...]:
    """Return the hook names admitted by ``hook_set``.

    Args:
        hook_set: Allow-list selection.

    Returns:
        tuple[str, ...]: Supported git hook identifiers.
    """

    if hook_set is HookSet.STANDARD:
        return _STANDARD_HOOKS
    return _DEFAULT_HOOKS


def allowed_hook_names(hook_set: HookSet = HookSet.DEFAULT) -> frozenset[str]:
    """Return the allow-list for ``hook_set`` as a set for membership checks."""

    return frozenset(available_hooks(hook_set))


__all__ = ["HookSet", "allowed_hook_names", "available_hooks"]
