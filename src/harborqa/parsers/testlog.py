# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pattern-based parser for Rust test runner output.

Neither ``cargo test`` (libtest) nor ``cargo nextest`` offer a stable
structured output mode, so results are recovered from their human readable
status lines::

    test suite::case_one ... ok
    test suite::case_two ... FAILED
    test suite::slow ... ok <1.250s>
            PASS [   0.004s] my-crate tests::it_works
            FAIL [   0.010s] my-crate tests::it_breaks

Lines that do not match one of these shapes are ignored, which lets the parser
consume a full build log with progress output and summary banners.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Final

from ..core.models import TestOutcome, TestStatus
from ..core.severity import SourceKind
from .base import TextParser

LIBTEST_ENGINE: Final[str] = "cargo-test"
NEXTEST_ENGINE: Final[str] = "cargo-nextest"

LIBTEST_STATUS_MAP: Final[dict[str, TestStatus]] = {
    "ok": TestStatus.PASSED,
    "failed": TestStatus.FAILED,
    "ignored": TestStatus.SKIPPED,
}
NEXTEST_STATUS_MAP: Final[dict[str, TestStatus]] = {
    "PASS": TestStatus.PASSED,
    "LEAK": TestStatus.PASSED,
    "FAIL": TestStatus.FAILED,
    "LEAK-FAIL": TestStatus.FAILED,
    "TIMEOUT": TestStatus.FAILED,
    "ABORT": TestStatus.FAILED,
    "SIGABRT": TestStatus.FAILED,
    "SIGBUS": TestStatus.FAILED,
    "SIGFPE": TestStatus.FAILED,
    "SIGILL": TestStatus.FAILED,
    "SIGKILL": TestStatus.FAILED,
    "SIGSEGV": TestStatus.FAILED,
    "SIGTERM": TestStatus.FAILED,
    "SKIP": TestStatus.SKIPPED,
}

LIBTEST_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"""
    ^test\s(?P<name>.+?)\s\.\.\.\s
    (?P<word>[A-Za-z]+)
    (?:,\s(?P<reason>.*?))?
    (?:\s+<?(?P<duration>\d+(?:\.\d+)?)s>?)?
    $
    """,
    re.VERBOSE,
)
NEXTEST_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"""
    ^(?P<word>[A-Z]+(?:-[A-Z]+)?)\s+
    \[\s*(?:(?P<duration>\d+(?:\.\d+)?)s)?\s*\]\s+
    (?:\(\s*\d+/\d+\)\s+)?
    (?P<namespace>\S+)\s+(?P<name>\S+)
    $
    """,
    re.VERBOSE,
)
LIBTEST_DETAIL_HEADER: Final[re.Pattern[str]] = re.compile(r"^---- (?P<name>.+?) std(?:out|err) ----$")
NEXTEST_DETAIL_HEADER: Final[re.Pattern[str]] = re.compile(
    r"^--- STD(?:OUT|ERR):\s+(?P<namespace>\S+)\s+(?P<name>\S+)\s+---$",
)
NEXTEST_SUMMARY_PREFIX: Final[str] = "Summary ["
NEXTEST_SEPARATOR: Final[re.Pattern[str]] = re.compile(r"^-{3,}$")
LIBTEST_RUN_BANNER: Final[re.Pattern[str]] = re.compile(r"^(?:Running|Doc-tests)\s+\S")
_DETAIL_TERMINATORS: Final[frozenset[str]] = frozenset({"failures:", "successes:"})

LOGGER = logging.getLogger(__name__)

_DetailKey = tuple[str | int, str]


@dataclass(slots=True)
class _PendingOutcome:
    """Result line recognised before its failure output has been seen."""

    name: str
    status: TestStatus
    duration: float | None
    namespace: str | None
    engine: str
    detail_key: _DetailKey

    def build(self, detail: str | None) -> TestOutcome:
        return TestOutcome(
            name=self.name,
            status=self.status,
            duration=self.duration,
            failure_detail=detail if self.status is TestStatus.FAILED else None,
            namespace=self.namespace,
            engine=self.engine,
        )


@dataclass(slots=True)
class _TestLogScanner:
    """Accumulate result lines and captured failure output from a test log."""

    outcomes: list[_PendingOutcome] = field(default_factory=list)
    details: dict[_DetailKey, list[str]] = field(default_factory=dict)
    current_detail: list[str] | None = None
    detail_engine: str | None = None
    in_summary: bool = False
    libtest_run: int = 0

    def feed(self, raw_line: str) -> None:
        """Consume one line of runner output.

        Args:
            raw_line: Line read from the log, with or without its newline.
        """

        if self.in_summary:
            # nextest repeats results and may replay failure output after its summary
            return
        line = raw_line.strip()
        if self._start_detail(line):
            return
        if line.startswith(NEXTEST_SUMMARY_PREFIX):
            self.in_summary = True
            self._close_detail()
            return
        if self.detail_engine == NEXTEST_ENGINE:
            # nextest captures the raw libtest harness output of each test
            if self._match_nextest(line) or NEXTEST_SEPARATOR.match(line):
                self._close_detail()
            elif self.current_detail is not None:
                self.current_detail.append(raw_line.rstrip("\r\n"))
            return
        if LIBTEST_RUN_BANNER.match(line):
            self.libtest_run += 1
            self._close_detail()
            return
        if line in _DETAIL_TERMINATORS or self._match_libtest(line) or self._match_nextest(line):
            self._close_detail()
            return
        if self.current_detail is not None:
            self.current_detail.append(raw_line.rstrip("\r\n"))

    def finish(self) -> Iterator[TestOutcome]:
        """Yield outcomes in appearance order with their failure output attached."""

        for pending in self.outcomes:
            lines = self.details.get(pending.detail_key)
            yield pending.build(_join_detail(lines))

    def _close_detail(self) -> None:
        self.current_detail = None
        self.detail_engine = None

    def _start_detail(self, line: str) -> bool:
        match = NEXTEST_DETAIL_HEADER.match(line)
        key: _DetailKey
        if match:
            key = (match.group("namespace"), match.group("name"))
            self.detail_engine = NEXTEST_ENGINE
        else:
            if self.detail_engine == NEXTEST_ENGINE:
                return False
            match = LIBTEST_DETAIL_HEADER.match(line)
            if not match:
                return False
            key = (self.libtest_run, match.group("name"))
            self.detail_engine = LIBTEST_ENGINE
        self.current_detail = self.details.setdefault(key, [])
        return True

    def _match_libtest(self, line: str) -> bool:
        match = LIBTEST_PATTERN.match(line)
        if not match:
            return False
        status = LIBTEST_STATUS_MAP.get(match.group("word").lower())
        self._record(match, status, None, LIBTEST_ENGINE, (self.libtest_run, match.group("name")))
        return True

    def _match_nextest(self, line: str) -> bool:
        match = NEXTEST_PATTERN.match(line)
        if not match:
            return False
        status = NEXTEST_STATUS_MAP.get(match.group("word"))
        namespace = match.group("namespace")
        self._record(match, status, namespace, NEXTEST_ENGINE, (namespace, match.group("name")))
        return True

    def _record(
        self,
        match: re.Match[str],
        status: TestStatus | None,
        namespace: str | None,
        engine: str,
        detail_key: _DetailKey,
    ) -> None:
        if status is None:
            LOGGER.debug("ignoring test line with unknown status: %s", match.group(0))
            return
        self.outcomes.append(
            _PendingOutcome(
                name=match.group("name"),
                status=status,
                duration=_parse_duration(match.group("duration")),
                namespace=namespace,
                engine=engine,
                detail_key=detail_key,
            ),
        )


def _parse_duration(token: str | None) -> float | None:
    if token is None:
        return None
    try:
        return float(token)
    except ValueError:
        return None


def _join_detail(lines: list[str] | None) -> str | None:
    if not lines:
        return None
    text = "\n".join(lines).strip("\n")
    return text or None


def parse_test_log(lines: Iterable[str], source_kind: SourceKind = SourceKind.TEST) -> Iterator[TestOutcome]:
    """Yield test outcomes recognised in libtest or nextest output.

    Args:
        lines: Lines of the runner's human readable output.
        source_kind: Input kind; accepted for parser interface symmetry.

    Yields:
        TestOutcome: One outcome per recognised result line, in log order.
    """

    del source_kind
    scanner = _TestLogScanner()
    for raw_line in lines:
        scanner.feed(raw_line)
    yield from scanner.finish()


def runner_log_parser() -> TextParser[TestOutcome]:
    """Return the parser used for test runner output."""

    return TextParser(parse_test_log, SourceKind.TEST)


__all__ = [
    "LIBTEST_STATUS_MAP",
    "NEXTEST_STATUS_MAP",
    "parse_test_log",
    "runner_log_parser",
]
