# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parsers turning build-tool output into raw records."""

from __future__ import annotations

from .base import JsonLinesParser, TextParser, iter_json_records
from .cargo import cargo_check_parser, cargo_clippy_parser, parse_cargo_messages
from .testlog import parse_test_log, runner_log_parser

__all__ = [
    "JsonLinesParser",
    "TextParser",
    "cargo_check_parser",
    "cargo_clippy_parser",
    "iter_json_records",
    "parse_cargo_messages",
    "parse_test_log",
    "runner_log_parser",
]
