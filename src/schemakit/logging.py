# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Logging setup and user-facing console helpers for the CLI."""

from __future__ import annotations

import logging
import sys

from rich.console import Console
from rich.text import Text

PACKAGE_LOGGER = "schemakit"


def configure_verbose_logging() -> None:
    """Stream package debug records to stderr.

    Records stop propagating to the root logger so they are printed once.
    Repeated calls are no-ops.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    if getattr(logger, "_schemakit_verbose_configured", False):
        return
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    setattr(logger, "_schemakit_verbose_configured", True)


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(console: Console, msg: str, *, style: str) -> None:
    """Print ``msg`` as plain text styled with ``style``.

    Args:
        console: Console receiving the line.
        msg: Message to print; never parsed as markup.
        style: Rich style applied to the whole line.
    """

    text = Text(msg)
    text.stylize(style)
    console.print(text)


def info(console: Console, msg: str, *, use_emoji: bool = True) -> None:
    """Emit an informational message."""

    _print_line(console, f"{emoji('ℹ️ ', use_emoji)}{msg}", style="cyan")


def ok(console: Console, msg: str, *, use_emoji: bool = True) -> None:
    """Emit a success message."""

    _print_line(console, f"{emoji('✅ ', use_emoji)}{msg}", style="green")


def warn(console: Console, msg: str, *, use_emoji: bool = True) -> None:
    """Emit a warning message."""

    _print_line(console, f"{emoji('⚠️ ', use_emoji)}{msg}", style="yellow")


__all__ = ["configure_verbose_logging", "emoji", "info", "ok", "warn"]
