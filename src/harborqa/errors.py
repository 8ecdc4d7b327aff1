# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while building a Harbormaster report."""

from __future__ import annotations

from pathlib import Path

from harborqa.core.severity import SourceKind


class HarborqaError(RuntimeError):
    """Base class for fatal report generation errors."""


class InputReadError(HarborqaError):
    """Raised when a requested input file cannot be opened or read."""

    def __init__(self, path: Path, source_kind: SourceKind, reason: str) -> None:
        """Initialise the error with the failing input.

        Args:
            path: Input file that could not be read.
            source_kind: Which input the file was supplied for.
            reason: Underlying operating system error message.
        """

        super().__init__(f"cannot read {source_kind.value} input '{path}': {reason}")
        self.path = path
        self.source_kind = source_kind


class PayloadEncodingError(HarborqaError):
    """Raised when the report cannot be serialised into a request payload."""


__all__ = ["HarborqaError", "InputReadError", "PayloadEncodingError"]
