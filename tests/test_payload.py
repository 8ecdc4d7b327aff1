# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for report aggregation and payload serialisation."""

from __future__ import annotations

import json

import pytest

from harborqa.core.models import BuildStatus, Diagnostic, Report, TestOutcome, TestStatus
from harborqa.core.severity import Severity, SourceKind
from harborqa.errors import PayloadEncodingError
from harborqa.reporting import Payload, aggregate_report, build_params, encode_payload

PHID = "PHID-HMBT-abc"
TOKEN = "api-secret"


def _diagnostic(message: str, *, source_kind: SourceKind = SourceKind.CHECK, **extra: object) -> Diagnostic:
    values: dict[str, object] = {
        "severity": Severity.WARNING,
        "file_path": "src/main.rs",
        "line": 10,
        "message": message,
        "source_kind": source_kind,
        "code": "unused_variables",
    }
    values.update(extra)
    return Diagnostic.model_validate(values)


def test_aggregate_orders_check_before_lint() -> None:
    report = aggregate_report(
        PHID,
        BuildStatus.FAIL,
        check=[_diagnostic("c1"), _diagnostic("c2")],
        lint=[_diagnostic("l1", source_kind=SourceKind.LINT)],
        tests=[TestOutcome(name="t", status=TestStatus.PASSED)],
    )
    assert [diag.message for diag in report.diagnostics] == ["c1", "c2", "l1"]
    assert [outcome.name for outcome in report.tests] == ["t"]


def test_aggregate_keeps_duplicates_across_sources() -> None:
    diag = _diagnostic("same")
    lint = diag.model_copy(update={"source_kind": SourceKind.LINT})
    report = aggregate_report(PHID, BuildStatus.PASS, check=[diag], lint=[lint])
    assert len(report.diagnostics) == 2


def test_aggregate_without_sources() -> None:
    report = aggregate_report(PHID, BuildStatus.WORK)
    assert report.diagnostics == ()
    assert report.tests == ()
    assert report.failed_tests() == ()


def test_failed_tests() -> None:
    outcomes = [
        TestOutcome(name="a", status=TestStatus.PASSED),
        TestOutcome(name="b", status=TestStatus.FAILED),
        TestOutcome(name="c", status=TestStatus.SKIPPED),
    ]
    report = aggregate_report(PHID, BuildStatus.FAIL, tests=outcomes)
    assert [outcome.name for outcome in report.failed_tests()] == ["b"]


def test_build_params_shape() -> None:
    report = aggregate_report(
        PHID,
        BuildStatus.FAIL,
        check=[_diagnostic("unused variable", column=9)],
        tests=[
            TestOutcome(
                name="tests::breaks",
                status=TestStatus.FAILED,
                duration=0.01,
                failure_detail="boom",
                namespace="demo",
                engine="cargo-nextest",
            ),
        ],
    )
    params = build_params(report, TOKEN)
    assert list(params) == ["buildTargetPHID", "type", "unit", "lint", "__conduit__"]
    assert params["buildTargetPHID"] == PHID
    assert params["type"] == "fail"
    assert params["__conduit__"] == {"token": TOKEN}
    assert params["lint"] == [
        {
            "name": "cargo-check",
            "code": "unused_variables",
            "severity": "warning",
            "path": "src/main.rs",
            "line": 10,
            "char": 9,
            "description": "unused variable",
        },
    ]
    assert params["unit"] == [
        {
            "name": "tests::breaks",
            "result": "fail",
            "namespace": "demo",
            "engine": "cargo-nextest",
            "duration": 0.01,
            "details": "boom",
        },
    ]


def test_optional_keys_are_omitted() -> None:
    report = aggregate_report(
        PHID,
        BuildStatus.PASS,
        check=[_diagnostic("aborting", file_path="", line=None, code=None, severity=Severity.NOTE)],
        tests=[TestOutcome(name="a", status=TestStatus.SKIPPED)],
    )
    params = build_params(report, TOKEN)
    assert params["lint"] == [
        {
            "name": "cargo-check",
            "code": "cargo-check",
            "severity": "advice",
            "path": "",
            "description": "aborting",
        },
    ]
    assert params["unit"] == [{"name": "a", "result": "skip", "engine": "cargo-test"}]


@pytest.mark.parametrize("status", list(BuildStatus))
def test_payload_round_trip(status: BuildStatus) -> None:
    report = aggregate_report(PHID, status)
    document = json.loads(encode_payload(report, TOKEN))
    assert list(document) == ["token", "params"]
    assert document["token"] == TOKEN
    params = json.loads(document["params"])
    assert params["buildTargetPHID"] == PHID
    assert params["type"] == status.value
    assert params["unit"] == []
    assert params["lint"] == []


def test_payload_is_deterministic() -> None:
    report = aggregate_report(PHID, BuildStatus.FAIL, check=[_diagnostic("héllo")])
    first = encode_payload(report, TOKEN)
    assert first == encode_payload(report, TOKEN)
    assert "héllo" in json.loads(first)["params"]
    assert first.startswith('{\n  "token": ')


def test_payload_model_from_report() -> None:
    report = aggregate_report(PHID, BuildStatus.PASS)
    payload = Payload.from_report(report, TOKEN)
    assert payload.token == TOKEN
    assert json.loads(payload.params)["__conduit__"] == {"token": TOKEN}
    assert json.loads(payload.to_json()) == {"token": TOKEN, "params": payload.params}


def test_non_finite_duration_cannot_be_encoded() -> None:
    report = Report(
        build_phid=PHID,
        status=BuildStatus.PASS,
        tests=(TestOutcome(name="a", status=TestStatus.PASSED, duration=float("nan")),),
    )
    with pytest.raises(PayloadEncodingError):
        encode_payload(report, TOKEN)
