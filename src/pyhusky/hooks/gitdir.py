# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate the real git directory above a starting path."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import chain
from pathlib import Path

from ..constants import GIT_METADATA_NAME, GITDIR_POINTER_PREFIX
from ..errors import GitDirNotFoundError


@dataclass(frozen=True, slots=True)
class GitDirectoryLocation:
    """Describe where a repository's metadata lives.

    Attributes:
        work_tree: Directory holding the ``.git`` entry; also the project root.
        git_dir: Real git directory, possibly reached through a pointer file.
    """

    work_tree: Path
    git_dir: Path


def iter_ancestors(start: Path) -> Iterator[Path]:
    """Yield ``start`` and its parents, nearest first, each directory once.

    Args:
        start: Directory whose ancestors should be traversed.

    Yields:
        Path: Absolute candidate directories up to the filesystem root.
    """

    origin = start.absolute()
    seen: set[Path] = set()
    for candidate in chain([origin], origin.parents):
        resolved = candidate.resolve()
        if resolved in seen:
            continue
        seen.add(resolved)
        yield resolved


def read_gitdir_pointer(pointer: Path) -> Path:
    """Return the git directory named by a submodule/worktree ``.git`` file.

    The file holds a single path, optionally prefixed with ``gitdir:``.
    Relative paths are resolved against the directory holding the file.

    Args:
        pointer: ``.git`` file to read.

    Returns:
        Path: Existing git directory referenced by ``pointer``.

    Raises:
        GitDirNotFoundError: If the file is not UTF-8 text or the referenced
            path is not a directory.
        OSError: If ``pointer`` cannot be read.
    """

    try:
        content = pointer.read_text(encoding="utf-8").rstrip("\r\n")
    except UnicodeDecodeError as exc:
        raise GitDirNotFoundError(pointer) from exc
    if content.startswith(GITDIR_POINTER_PREFIX):
        content = content[len(GITDIR_POINTER_PREFIX) :].strip()
    if not content:
        raise GitDirNotFoundError(pointer)
    target = Path(content).expanduser()
    if not target.is_absolute():
        target = pointer.parent / target
    if not target.is_dir():
        raise GitDirNotFoundError(target)
    return target.resolve()


def locate_repository(start: Path) -> GitDirectoryLocation:
    """Return the nearest repository location at or above ``start``.

    Args:
        start: Directory where the upward search begins.

    Returns:
        GitDirectoryLocation: Work tree and resolved git directory.

    Raises:
        GitDirNotFoundError: If no ancestor holds a usable ``.git`` entry.
    """

    for directory in iter_ancestors(start):
        dotgit = directory / GIT_METADATA_NAME
        if dotgit.is_dir():
            return GitDirectoryLocation(work_tree=directory, git_dir=dotgit)
        if dotgit.is_file():
            try:
                git_dir = read_gitdir_pointer(dotgit)
            except GitDirNotFoundError:
                continue
            return GitDirectoryLocation(work_tree=directory, git_dir=git_dir)
    raise GitDirNotFoundError(start)


def find_git_dir(start: Path) -> Path:
    """Return the real git directory at or above ``start``.

    Raises:
        GitDirNotFoundError: If no ancestor holds a usable ``.git`` entry.
    """

    return locate_repository(start).git_dir


__all__ = [
    "GitDirectoryLocation",
    "find_git_dir",
    "iter_ancestors",
    "locate_repository",
    "read_gitdir_pointer",
]
