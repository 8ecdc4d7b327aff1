# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI tests for the harborqa report command."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

from typer.testing import CliRunner

from harborqa.cli.app import app

PHID = "PHID-HMBT-abc"


def _params(stdout: str) -> dict[str, object]:
    document = json.loads(stdout)
    return json.loads(document["params"])


def test_report_success(
    write_input: Callable[[str, list[str]], Path],
    cargo_message: Callable[..., str],
) -> None:
    check = write_input("check.json", [cargo_message("unused variable: `x`", file_name="/ws/src/main.rs")])
    tests = write_input("tests.log", ["test tests::adds ... ok"])
    runner = CliRunner()

    result = runner.invoke(
        app,
        [
            PHID,
            "--status",
            "fail",
            "--token",
            "api-secret",
            "--workspace",
            "/ws",
            "--check-json",
            str(check),
            "--nextest-stderr",
            str(tests),
            "--no-emoji",
            "--no-color",
        ],
    )

    assert result.exit_code == 0, result.output
    document = json.loads(result.stdout)
    assert document["token"] == "api-secret"
    params = _params(result.stdout)
    assert params["buildTargetPHID"] == PHID
    assert params["type"] == "fail"
    assert params["lint"][0]["path"] == "src/main.rs"
    assert params["unit"] == [{"name": "tests::adds", "result": "pass", "engine": "cargo-test"}]


def test_report_without_inputs_reports_status_only() -> None:
    runner = CliRunner()
    result = runner.invoke(app, [PHID, "--status", "PASS", "--token", "t", "--no-emoji"])

    assert result.exit_code == 0, result.output
    params = _params(result.stdout)
    assert params["type"] == "pass"
    assert params["unit"] == []
    assert params["lint"] == []
    assert "No inputs supplied" in result.stderr


def test_report_reads_token_from_environment() -> None:
    runner = CliRunner()
    result = runner.invoke(app, [PHID, "--status", "work"], env={"PHAB_TOKEN": "from-env"})

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["token"] == "from-env"


def test_report_missing_input_fails_without_payload(tmp_path: Path) -> None:
    runner = CliRunner()
    missing = tmp_path / "missing.json"
    result = runner.invoke(
        app,
        [PHID, "--status", "fail", "--token", "t", "--clippy-json", str(missing), "--no-emoji"],
    )

    assert result.exit_code == 1
    assert result.stdout == ""
    assert "cannot read lint input" in result.stderr


def test_report_rejects_unknown_status() -> None:
    runner = CliRunner()
    result = runner.invoke(app, [PHID, "--status", "exploded", "--token", "t"])

    assert result.exit_code == 2
    assert result.stdout == ""


def test_report_requires_token() -> None:
    runner = CliRunner()
    result = runner.invoke(app, [PHID, "--status", "pass"], env={"PHAB_TOKEN": None})

    assert result.exit_code == 2
    assert result.stdout == ""
    assert "PHAB_TOKEN" in result.stderr


def test_report_rejects_blank_build_phid() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["  ", "--status", "pass", "--token", "t"])

    assert result.exit_code == 2
    assert result.stdout == ""


def test_verbose_summary_goes_to_stderr(
    write_input: Callable[[str, list[str]], Path],
    cargo_message: Callable[..., str],
) -> None:
    check = write_input("check.json", [cargo_message("a"), "garbage"])
    runner = CliRunner()
    result = runner.invoke(
        app,
        [PHID, "--status", "fail", "--token", "t", "--check-json", str(check), "-v", "--no-emoji", "--no-color"],
    )

    assert result.exit_code == 0, result.output
    assert "1 diagnostic(s), 0 test result(s), 0 failed" in result.stderr
    assert len(_params(result.stdout)["lint"]) == 1


def test_help_lists_report_options() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"], env={"COLUMNS": "200"})

    assert result.exit_code == 0
    for option in ("--status", "--token", "--workspace", "--check-json", "--clippy-json", "--nextest-stderr"):
        assert option in result.stdout
