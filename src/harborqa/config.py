# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model describing a single report invocation."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .core.models import BuildStatus
from .core.severity import SourceKind

TOKEN_ENV_VAR: Final[str] = "PHAB_TOKEN"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class ReportConfig(BaseModel):
    """Inputs and build metadata collected from the command line."""

    model_config = ConfigDict(frozen=True)

    build_phid: str
    status: BuildStatus
    token: str
    workspace: Path | None = None
    check_json: Path | None = None
    clippy_json: Path | None = None
    nextest_stderr: Path | None = None

    @field_validator("build_phid", "token")
    @classmethod
    def _require_text(cls, value: str) -> str:
        """Reject blank identifiers and credentials.

        Args:
            value: Raw field value.

        Returns:
            str: ``value`` stripped of surrounding whitespace.

        Raises:
            ValueError: If ``value`` is blank.
        """

        stripped = value.strip()
        if not stripped:
            raise ValueError("must not be empty")
        return stripped

    def sources(self) -> Iterator[tuple[SourceKind, Path]]:
        """Yield the requested inputs in processing order.

        Yields:
            tuple[SourceKind, Path]: Input kind and path, check then lint then tests.
        """

        for kind, path in (
            (SourceKind.CHECK, self.check_json),
            (SourceKind.LINT, self.clippy_json),
            (SourceKind.TEST, self.nextest_stderr),
        ):
            if path is not None:
                yield kind, path


def build_report_config(**values: object) -> ReportConfig:
    """Return a validated :class:`ReportConfig` built from ``values``.

    Args:
        **values: Field values collected from the command line.

    Returns:
        ReportConfig: Validated configuration.

    Raises:
        ConfigError: If any field fails validation.
    """

    try:
        return ReportConfig.model_validate(values)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigError(f"invalid configuration: {problems}") from exc


__all__ = ["TOKEN_ENV_VAR", "ConfigError", "ReportConfig", "build_report_config"]
