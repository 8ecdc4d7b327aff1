# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command producing the Harbormaster build message payload."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ....config import TOKEN_ENV_VAR, ConfigError, build_report_config
from ....core.logging import configure_logging
from ....core.models import BuildStatus
from ...core.shared import CLIError, build_cli_logger
from .services import emit_payload


def report_command(
    build_phid: Annotated[str, typer.Argument(help="Build target PHID (PHID-HMBT-...).", show_default=False)],
    status: Annotated[
        BuildStatus,
        typer.Option("--status", case_sensitive=False, help="Build status to report.", show_default=False),
    ],
    workspace: Annotated[
        Path | None,
        typer.Option("--workspace", help="Workspace root stripped from diagnostic file paths."),
    ] = None,
    token: Annotated[
        str | None,
        typer.Option("--token", envvar=TOKEN_ENV_VAR, help="Conduit API token.", show_default=False),
    ] = None,
    check_json: Annotated[
        Path | None,
        typer.Option("--check-json", help="Path to 'cargo check --message-format=json' output."),
    ] = None,
    clippy_json: Annotated[
        Path | None,
        typer.Option("--clippy-json", help="Path to 'cargo clippy --message-format=json' output."),
    ] = None,
    nextest_stderr: Annotated[
        Path | None,
        typer.Option("--nextest-stderr", help="Path to 'cargo nextest' (or 'cargo test') output."),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log skipped input lines.")] = False,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in status output.")] = False,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable coloured status output.")] = False,
) -> None:
    """Convert cargo diagnostics and test results into a Harbormaster payload.

    Raises:
        typer.BadParameter: If the token is missing or a value fails validation.
        typer.Exit: Raised with status ``1`` when a requested input cannot be read.
    """

    configure_logging(verbose=verbose, use_color=False if no_color else None)
    logger = build_cli_logger(emoji=not no_emoji, no_color=no_color)
    if token is None:
        raise typer.BadParameter(f"Provide --token or set {TOKEN_ENV_VAR}.", param_hint="'--token'")
    try:
        config = build_report_config(
            build_phid=build_phid,
            status=status,
            token=token,
            workspace=workspace,
            check_json=check_json,
            clippy_json=clippy_json,
            nextest_stderr=nextest_stderr,
        )
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        emit_payload(config, logger=logger, verbose=verbose)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
