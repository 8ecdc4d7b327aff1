# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers for coercing decoded JSON values into typed fields."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from harborqa.core.models import JsonValue


def coerce_optional_int(value: JsonValue | None) -> int | None:
    """Return an optional integer parsed from ``value`` when feasible."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def coerce_optional_str(value: JsonValue | None) -> str | None:
    """Return a string representation of ``value`` or ``None`` when unset."""
    if value is None:
        return None
    if isinstance(value, (Mapping, list)):
        return None
    return str(value)


def first_mapping(value: JsonValue | None) -> Mapping[str, JsonValue]:
    """Return ``value`` when it is a mapping, otherwise an empty mapping."""

    if isinstance(value, Mapping):
        return value
    return {}


def mapping_sequence(value: JsonValue | None) -> list[Mapping[str, JsonValue]]:
    """Return the mapping items of ``value`` when it is a JSON array.

    Args:
        value: Decoded JSON value expected to be a list of objects.

    Returns:
        list[Mapping[str, JsonValue]]: Mapping entries, skipping other item types.
    """

    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        return []
    return [item for item in value if isinstance(item, Mapping)]


__all__ = [
    "coerce_optional_int",
    "coerce_optional_str",
    "first_mapping",
    "mapping_sequence",
]
