# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Services backing the report command."""

from __future__ import annotations

from ....config import ReportConfig
from ....errors import HarborqaError, InputReadError
from ....pipeline import run_pipeline
from ....reporting import encode_payload
from ...core.shared import CLIError, CLILogger


def emit_payload(config: ReportConfig, *, logger: CLILogger, verbose: bool = False) -> None:
    """Build the payload for ``config`` and write it to standard output.

    Nothing is written to standard output when any stage fails.

    Args:
        config: Validated invocation configuration.
        logger: CLI logger used for status and payload output.
        verbose: Emit a collection summary when ``True``.

    Raises:
        CLIError: If an input cannot be read or the payload cannot be encoded.
    """

    if next(config.sources(), None) is None:
        logger.warn("No inputs supplied; reporting build status only.")
    try:
        report = run_pipeline(config)
        payload = encode_payload(report, config.token)
    except InputReadError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc
    except HarborqaError as exc:
        logger.fail(f"internal error: {exc}")
        raise CLIError(str(exc)) from exc

    if verbose:
        logger.info(
            f"{len(report.diagnostics)} diagnostic(s), {len(report.tests)} test result(s), "
            f"{len(report.failed_tests())} failed",
        )
    logger.echo(payload)
