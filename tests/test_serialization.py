# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for JSON value coercion helpers."""

from __future__ import annotations

import pytest

from harborqa.core.serialization import coerce_optional_int, coerce_optional_str, first_mapping, mapping_sequence


@pytest.mark.parametrize(
    ("value", "expected"),
    [(3, 3), (4.0, 4), (" 7 ", 7), (4.5, None), ("x", None), (True, None), (None, None), ([1], None)],
)
def test_coerce_optional_int(value: object, expected: int | None) -> None:
    assert coerce_optional_int(value) == expected  # type: ignore[arg-type]


def test_coerce_optional_str() -> None:
    assert coerce_optional_str("E0308") == "E0308"
    assert coerce_optional_str(12) == "12"
    assert coerce_optional_str(None) is None
    assert coerce_optional_str({"code": "x"}) is None
    assert coerce_optional_str(["x"]) is None


def test_mapping_helpers() -> None:
    assert first_mapping({"a": 1}) == {"a": 1}
    assert first_mapping("nope") == {}
    assert mapping_sequence([{"a": 1}, 2, "s", {"b": 2}]) == [{"a": 1}, {"b": 2}]
    assert mapping_sequence("abc") == []
    assert mapping_sequence(None) == []
