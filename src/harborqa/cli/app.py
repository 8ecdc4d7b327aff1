# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .commands import register_commands

app = typer.Typer(
    name="harborqa",
    help="Convert cargo diagnostics and test results into a Harbormaster build message.",
    add_completion=False,
)
register_commands(app)

__all__ = ["app"]
