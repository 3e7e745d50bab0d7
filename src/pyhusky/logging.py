# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Installer status messages rendered through rich.

Every message belongs to a :class:`Level` that fixes its emoji prefix, its
colour and the stream it is written to. Progress (``info``, ``ok``) goes to
stdout; problems (``warn``, ``fail``) go to stderr so build tools that
capture stdout still surface them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rich.text import Text

from .console import detect_tty, get_console_manager


@dataclass(frozen=True, slots=True)
class _LevelStyle:
    prefix: str
    style: str
    stderr: bool


class Level(str, Enum):
    """Severity of an installer message."""

    INFO = "info"
    OK = "ok"
    WARN = "warn"
    FAIL = "fail"


_STYLES: dict[Level, _LevelStyle] = {
    Level.INFO: _LevelStyle(prefix="ℹ️ ", style="cyan", stderr=False),
    Level.OK: _LevelStyle(prefix="✅ ", style="green", stderr=False),
    Level.WARN: _LevelStyle(prefix="⚠️ ", style="yellow", stderr=True),
    Level.FAIL: _LevelStyle(prefix="❌ ", style="red", stderr=True),
}


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when ``enable`` is set, otherwise an empty string."""

    return symbol if enable else ""


def emit(level: Level, msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Write ``msg`` on the stream owned by ``level``.

    Colour follows ``use_color`` when given and otherwise whether the target
    stream is a terminal.

    Args:
        level: Message severity selecting prefix, colour and stream.
        msg: Message text.
        use_emoji: Whether to prefix the level's emoji.
        use_color: Explicit colour override; ``None`` auto-detects.
    """

    spec = _STYLES[level]
    colour = detect_tty(stderr=spec.stderr) if use_color is None else use_color
    console = get_console_manager().get(color=colour, emoji=use_emoji, stderr=spec.stderr)
    line = Text(emoji(spec.prefix, use_emoji) + msg)
    if colour:
        line.stylize(spec.style)
    console.print(line)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Report installer progress on stdout."""

    emit(Level.INFO, msg, use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Report a completed installation on stdout."""

    emit(Level.OK, msg, use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Report a non-fatal condition, such as a missing repository, on stderr."""

    emit(Level.WARN, msg, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Report a fatal installation error on stderr."""

    emit(Level.FAIL, msg, use_emoji=use_emoji, use_color=use_color)


__all__ = ["Level", "emit", "emoji", "fail", "info", "ok", "warn"]
