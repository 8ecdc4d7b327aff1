# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the harborqa package."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from harborqa.core.severity import Severity, SourceKind

type JsonScalar = str | int | float | bool | None
type JsonValue = JsonScalar | list[JsonValue] | dict[str, JsonValue]


class BuildStatus(str, Enum):
    """Harbormaster build states forwarded verbatim to the remote API."""

    ABORT = "abort"
    FAIL = "fail"
    PASS = "pass"
    PAUSE = "pause"
    RESTART = "restart"
    RESUME = "resume"
    WORK = "work"


class TestStatus(str, Enum):
    """Outcome of a single test case."""

    __test__ = False

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


class RawDiagnostic(BaseModel):
    """Capture tool-native diagnostic records prior to normalisation."""

    model_config = ConfigDict(frozen=True)

    message: str | None = None
    level: str | None = None
    file: str | None = None
    line: int | None = None
    column: int | None = None
    code: str | None = None
    source_kind: SourceKind = SourceKind.CHECK


class Diagnostic(BaseModel):
    """Standardize compiler and lint findings into a common schema."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    file_path: str = ""
    line: int | None = None
    column: int | None = None
    message: str
    source_kind: SourceKind
    code: str | None = None
    tool: str = "cargo-check"

    @field_validator("line", "column")
    @classmethod
    def _positive_or_unset(cls, value: int | None) -> int | None:
        """Drop positions that are not positive integers.

        Args:
            value: Raw line or column number.

        Returns:
            int | None: ``value`` when positive, otherwise ``None``.
        """

        if value is None or value < 1:
            return None
        return value


class TestOutcome(BaseModel):
    """Result of one test case extracted from the test runner output."""

    __test__ = False

    model_config = ConfigDict(frozen=True)

    name: str
    status: TestStatus
    duration: float | None = None
    failure_detail: str | None = None
    namespace: str | None = None
    engine: str = "cargo-test"


class Report(BaseModel):
    """Aggregate of every diagnostic and test outcome for a single build."""

    model_config = ConfigDict(frozen=True)

    build_phid: str
    status: BuildStatus
    diagnostics: tuple[Diagnostic, ...] = Field(default_factory=tuple)
    tests: tuple[TestOutcome, ...] = Field(default_factory=tuple)

    def failed_tests(self) -> tuple[TestOutcome, ...]:
        """Return the failed test outcomes in report order.

        Returns:
            tuple[TestOutcome, ...]: Outcomes whose status is ``FAILED``.
        """

        return tuple(outcome for outcome in self.tests if outcome.status is TestStatus.FAILED)


__all__ = [
    "BuildStatus",
    "Diagnostic",
    "JsonScalar",
    "JsonValue",
    "RawDiagnostic",
    "Report",
    "TestOutcome",
    "TestStatus",
]
