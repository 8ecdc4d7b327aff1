# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Diagnostic normalisation helpers."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Final

from ..core.models import Diagnostic, RawDiagnostic
from ..core.severity import SEVERITY_TABLES, Severity, SourceKind, map_severity
from ..filesystem.paths import relativize

CLIPPY_TOOL: Final[str] = "cargo-clippy"
CHECK_TOOL: Final[str] = "cargo-check"
_CLIPPY_CODE_MARKER: Final[str] = "clippy"

LOGGER = logging.getLogger(__name__)


def tool_for_code(code: str | None) -> str:
    """Return the Harbormaster linter name responsible for ``code``.

    Clippy output also carries plain rustc findings, so the tool is derived
    from the lint code rather than from the input file.

    Args:
        code: Lint or error code reported with the diagnostic.

    Returns:
        str: ``cargo-clippy`` for clippy lints, otherwise ``cargo-check``.
    """

    if code and _CLIPPY_CODE_MARKER in code:
        return CLIPPY_TOOL
    return CHECK_TOOL


def normalize_diagnostic(
    raw: RawDiagnostic,
    *,
    workspace: str | Path | None = None,
    severity_tables: Mapping[SourceKind, Mapping[str, Severity]] = SEVERITY_TABLES,
) -> Diagnostic | None:
    """Convert a parser record into a canonical :class:`Diagnostic`.

    Args:
        raw: Raw record emitted by a structured parser.
        workspace: Optional workspace root stripped from file paths.
        severity_tables: Per-source severity vocabulary tables.

    Returns:
        Diagnostic | None: Normalised diagnostic, or ``None`` when the record
        lacks a message.
    """

    message = (raw.message or "").strip()
    if not message:
        LOGGER.warning(
            "dropping %s diagnostic without a message (file=%s, line=%s)",
            raw.source_kind.value,
            raw.file,
            raw.line,
        )
        return None
    severity = map_severity(raw.level, raw.source_kind, tables=severity_tables)
    file_path = relativize(raw.file, workspace) if raw.file else ""
    return Diagnostic(
        severity=severity,
        file_path=file_path,
        line=raw.line,
        column=raw.column,
        message=message,
        source_kind=raw.source_kind,
        code=raw.code,
        tool=tool_for_code(raw.code),
    )


def normalize_diagnostics(
    candidates: Iterable[RawDiagnostic],
    *,
    workspace: str | Path | None = None,
) -> Iterator[Diagnostic]:
    """Yield normalised diagnostics for ``candidates`` preserving their order.

    Args:
        candidates: Raw records emitted by a structured parser.
        workspace: Optional workspace root stripped from file paths.

    Yields:
        Diagnostic: Canonical diagnostics; message-less records are dropped.
    """

    for raw in candidates:
        diagnostic = normalize_diagnostic(raw, workspace=workspace)
        if diagnostic is not None:
            yield diagnostic


__all__ = [
    "CHECK_TOOL",
    "CLIPPY_TOOL",
    "normalize_diagnostic",
    "normalize_diagnostics",
    "tool_for_code",
]
