# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Merge per-source results into a single build report."""

from __future__ import annotations

from collections.abc import Iterable

from ..core.models import BuildStatus, Diagnostic, Report, TestOutcome


def aggregate_report(
    build_phid: str,
    status: BuildStatus,
    *,
    check: Iterable[Diagnostic] = (),
    lint: Iterable[Diagnostic] = (),
    tests: Iterable[TestOutcome] = (),
) -> Report:
    """Return a :class:`Report` combining every requested source.

    Diagnostics are concatenated check first, then lint, each in the order the
    tool emitted them. Identical findings reported by both sources are kept;
    sources that were not requested contribute nothing.

    Args:
        build_phid: Harbormaster build target PHID.
        status: Build status forwarded verbatim.
        check: Normalised ``cargo check`` diagnostics.
        lint: Normalised ``cargo clippy`` diagnostics.
        tests: Test outcomes in runner order.

    Returns:
        Report: Immutable report for the build.
    """

    return Report(
        build_phid=build_phid,
        status=status,
        diagnostics=(*check, *lint),
        tests=tuple(tests),
    )


__all__ = ["aggregate_report"]
