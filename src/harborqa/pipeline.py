# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Straight-line pipeline turning build-tool outputs into a Conduit payload."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .config import ReportConfig
from .core.models import Diagnostic, RawDiagnostic, Report, TestOutcome
from .core.severity import SourceKind
from .diagnostics import normalize_diagnostics
from .errors import InputReadError
from .interfaces.parsers import RecordParser
from .parsers import cargo_check_parser, cargo_clippy_parser, runner_log_parser
from .reporting import aggregate_report, encode_payload

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SourceParsers:
    """Parsers used for each kind of input.

    Attributes:
        check: Parser for ``cargo check --message-format=json`` output.
        lint: Parser for ``cargo clippy --message-format=json`` output.
        tests: Parser for test runner output.
    """

    check: RecordParser[RawDiagnostic] = field(default_factory=cargo_check_parser)
    lint: RecordParser[RawDiagnostic] = field(default_factory=cargo_clippy_parser)
    tests: RecordParser[TestOutcome] = field(default_factory=runner_log_parser)


def read_source_lines(path: Path, source_kind: SourceKind) -> list[str]:
    """Return the text lines of a requested input file.

    Invalid UTF-8 sequences are replaced rather than rejected; only failing to
    open or read the file is fatal.

    Args:
        path: Input file supplied on the command line.
        source_kind: Input the file was supplied for.

    Returns:
        list[str]: Lines of the file without line terminators.

    Raises:
        InputReadError: If the file cannot be opened or read.
    """

    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise InputReadError(path, source_kind, exc.strerror or str(exc)) from exc
    return text.splitlines()


def run_pipeline(config: ReportConfig, *, parsers: SourceParsers | None = None) -> Report:
    """Parse every requested input and aggregate the results.

    Args:
        config: Validated invocation configuration.
        parsers: Optional parser overrides; defaults to the cargo parsers.

    Returns:
        Report: Aggregated report for the build.

    Raises:
        InputReadError: If a requested input cannot be read.
    """

    active = parsers or SourceParsers()
    diagnostics: dict[SourceKind, list[Diagnostic]] = {}
    tests: list[TestOutcome] = []
    for kind, path in config.sources():
        lines = read_source_lines(path, kind)
        if kind is SourceKind.TEST:
            tests = list(active.tests.parse(lines))
            LOGGER.info("parsed %d test outcome(s) from %s", len(tests), path)
            continue
        parser = active.check if kind is SourceKind.CHECK else active.lint
        diagnostics[kind] = list(normalize_diagnostics(parser.parse(lines), workspace=config.workspace))
        LOGGER.info("parsed %d %s diagnostic(s) from %s", len(diagnostics[kind]), kind.value, path)
    return aggregate_report(
        config.build_phid,
        config.status,
        check=diagnostics.get(SourceKind.CHECK, ()),
        lint=diagnostics.get(SourceKind.LINT, ()),
        tests=tests,
    )


def build_payload(config: ReportConfig, *, parsers: SourceParsers | None = None) -> str:
    """Run the pipeline and return the encoded request body.

    Args:
        config: Validated invocation configuration.
        parsers: Optional parser overrides.

    Returns:
        str: JSON payload for ``harbormaster.sendmessage``.
    """

    report = run_pipeline(config, parsers=parsers)
    return encode_payload(report, config.token)


__all__ = ["SourceParsers", "build_payload", "read_source_lines", "run_pipeline"]
