# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Report command registration."""

from __future__ import annotations

import typer

from .command import report_command


def register(app: typer.Typer) -> None:
    """Register the report command on ``app``.

    Args:
        app: Typer application receiving the command.
    """

    app.command(name="report")(report_command)


__all__ = ["register", "report_command"]
