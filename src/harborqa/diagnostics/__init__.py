# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Diagnostic normalisation package."""

from __future__ import annotations

from .normalize import (
    CHECK_TOOL,
    CLIPPY_TOOL,
    normalize_diagnostic,
    normalize_diagnostics,
    tool_for_code,
)

__all__ = [
    "CHECK_TOOL",
    "CLIPPY_TOOL",
    "normalize_diagnostic",
    "normalize_diagnostics",
    "tool_for_code",
]
