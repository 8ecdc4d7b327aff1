# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and vocabulary tables."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity levels normalising the compiler and linter vocabularies."""

    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"


class SourceKind(str, Enum):
    """Identify which build-tool input produced a record."""

    CHECK = "check"
    LINT = "lint"
    TEST = "test"


RUSTC_SEVERITY_MAP: Final[dict[str, Severity]] = {
    "error": Severity.ERROR,
    "error: internal compiler error": Severity.ERROR,
    "warning": Severity.WARNING,
    "note": Severity.NOTE,
    "help": Severity.NOTE,
    "failure-note": Severity.NOTE,
}

# check and lint share the rustc vocabulary today; keep them keyed separately.
SEVERITY_TABLES: Final[dict[SourceKind, Mapping[str, Severity]]] = {
    SourceKind.CHECK: RUSTC_SEVERITY_MAP,
    SourceKind.LINT: RUSTC_SEVERITY_MAP,
}

DEFAULT_SEVERITY: Final[Severity] = Severity.WARNING


def map_severity(
    label: object,
    source_kind: SourceKind,
    *,
    tables: Mapping[SourceKind, Mapping[str, Severity]] | None = None,
    default: Severity = DEFAULT_SEVERITY,
) -> Severity:
    """Return the :class:`Severity` matching ``label`` for ``source_kind``.

    Args:
        label: Raw severity token emitted by the tool.
        source_kind: Input the token originates from.
        tables: Optional override of :data:`SEVERITY_TABLES`.
        default: Severity returned when the token is unknown.

    Returns:
        Severity: Normalised severity for the token.
    """

    if not isinstance(label, str):
        return default
    active = tables if tables is not None else SEVERITY_TABLES
    mapping = active.get(source_kind, {})
    return mapping.get(label.strip().lower(), default)


_SEVERITY_TO_HARBORMASTER: Final[dict[Severity, str]] = {
    Severity.ERROR: "error",
    Severity.WARNING: "warning",
    Severity.NOTE: "advice",
}


def severity_to_harbormaster(severity: Severity) -> str:
    """Map :class:`Severity` to a Harbormaster lint severity.

    Args:
        severity: Severity value to translate.

    Returns:
        str: Harbormaster lint severity string.
    """
    return _SEVERITY_TO_HARBORMASTER.get(severity, "warning")


__all__ = [
    "DEFAULT_SEVERITY",
    "RUSTC_SEVERITY_MAP",
    "SEVERITY_TABLES",
    "Severity",
    "SourceKind",
    "map_severity",
    "severity_to_harbormaster",
]
