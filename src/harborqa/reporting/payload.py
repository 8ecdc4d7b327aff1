# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Serialise reports into ``harbormaster.sendmessage`` request payloads.

Conduit expects the method parameters as a JSON *string* next to the API
token::

    {"token": "api-...", "params": "{\\"buildTargetPHID\\": ...}"}

Key names and ordering follow the Harbormaster schema and must stay stable so
identical inputs always produce byte-identical payloads.
"""

from __future__ import annotations

import json
from typing import Final

from pydantic import BaseModel, ConfigDict

from ..core.models import Diagnostic, JsonValue, Report, TestOutcome, TestStatus
from ..core.severity import severity_to_harbormaster
from ..errors import PayloadEncodingError

CONDUIT_AUTH_KEY: Final[str] = "__conduit__"
OUTER_INDENT: Final[int] = 2

_UNIT_RESULTS: Final[dict[TestStatus, str]] = {
    TestStatus.PASSED: "pass",
    TestStatus.FAILED: "fail",
    TestStatus.SKIPPED: "skip",
}

type SerializableMapping = dict[str, JsonValue]


def serialize_diagnostic(diag: Diagnostic) -> SerializableMapping:
    """Convert a diagnostic into a Harbormaster lint result mapping."""
    entry: SerializableMapping = {
        "name": diag.tool,
        "code": diag.code or diag.tool,
        "severity": severity_to_harbormaster(diag.severity),
        "path": diag.file_path,
    }
    if diag.line is not None:
        entry["line"] = diag.line
    if diag.column is not None:
        entry["char"] = diag.column
    entry["description"] = diag.message
    return entry


def serialize_test_outcome(outcome: TestOutcome) -> SerializableMapping:
    """Convert a test outcome into a Harbormaster unit result mapping."""
    entry: SerializableMapping = {
        "name": outcome.name,
        "result": _UNIT_RESULTS[outcome.status],
    }
    if outcome.namespace is not None:
        entry["namespace"] = outcome.namespace
    entry["engine"] = outcome.engine
    if outcome.duration is not None:
        entry["duration"] = outcome.duration
    if outcome.failure_detail is not None:
        entry["details"] = outcome.failure_detail
    return entry


def build_params(report: Report, token: str) -> SerializableMapping:
    """Return the ``harbormaster.sendmessage`` parameters for ``report``.

    Args:
        report: Aggregated build report.
        token: Conduit API token.

    Returns:
        SerializableMapping: Parameters in the order expected by Harbormaster.
    """

    return {
        "buildTargetPHID": report.build_phid,
        "type": report.status.value,
        "unit": [serialize_test_outcome(outcome) for outcome in report.tests],
        "lint": [serialize_diagnostic(diag) for diag in report.diagnostics],
        CONDUIT_AUTH_KEY: {"token": token},
    }


class Payload(BaseModel):
    """Wire envelope handed to the Conduit HTTP sink."""

    model_config = ConfigDict(frozen=True)

    token: str
    params: str

    @classmethod
    def from_report(cls, report: Report, token: str) -> Payload:
        """Build the envelope for ``report``.

        Args:
            report: Aggregated build report.
            token: Conduit API token.

        Returns:
            Payload: Envelope whose ``params`` field holds the encoded parameters.

        Raises:
            PayloadEncodingError: If the parameters cannot be serialised.
        """

        return cls(token=token, params=_dumps(build_params(report, token)))

    def to_json(self) -> str:
        """Return the envelope as the JSON document printed for the sink.

        Returns:
            str: Deterministic JSON text with ``token`` before ``params``.

        Raises:
            PayloadEncodingError: If the envelope cannot be serialised.
        """

        return _dumps({"token": self.token, "params": self.params}, indent=OUTER_INDENT)


def encode_payload(report: Report, token: str) -> str:
    """Serialise ``report`` and ``token`` into the final request body.

    Args:
        report: Aggregated build report.
        token: Conduit API token.

    Returns:
        str: JSON document ready to print or POST.
    """

    return Payload.from_report(report, token).to_json()


def _dumps(value: JsonValue, *, indent: int | None = None) -> str:
    try:
        return json.dumps(value, indent=indent, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise PayloadEncodingError(f"failed to encode payload: {exc}") from exc


__all__ = [
    "CONDUIT_AUTH_KEY",
    "Payload",
    "build_params",
    "encode_payload",
    "serialize_diagnostic",
    "serialize_test_outcome",
]
