# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared parser infrastructure and helper utilities."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import TypeVar, cast

from ..core.models import JsonValue
from ..core.severity import SourceKind
from ..interfaces.parsers import RecordParser

RecordT = TypeVar("RecordT")

JsonTransform = Callable[[Iterable[Mapping[str, JsonValue]], SourceKind], Iterator[RecordT]]
TextTransform = Callable[[Iterable[str], SourceKind], Iterator[RecordT]]

LOGGER = logging.getLogger(__name__)


def iter_json_records(lines: Iterable[str]) -> Iterator[Mapping[str, JsonValue]]:
    """Yield JSON objects decoded from newline-delimited ``lines``.

    Lines that are blank, fail to decode, or decode to a non-object value are
    skipped so a single corrupt record never hides the rest of the stream.

    Args:
        lines: Raw text lines emitted by a tool's machine-readable mode.

    Yields:
        Mapping[str, JsonValue]: Decoded JSON objects in input order.
    """

    for number, raw_line in enumerate(lines, start=1):
        trimmed = raw_line.strip()
        if not trimmed:
            continue
        try:
            payload = cast(JsonValue, json.loads(trimmed))
        except (ValueError, RecursionError) as exc:
            # oversized integers and deep nesting fail outside JSONDecodeError
            LOGGER.debug("skipping line %d: not decodable JSON (%s)", number, exc)
            continue
        if not isinstance(payload, Mapping):
            LOGGER.debug("skipping line %d: expected a JSON object", number)
            continue
        yield payload


@dataclass(frozen=True, slots=True)
class JsonLinesParser(RecordParser[RecordT]):
    """Decode newline-delimited JSON and delegate to a transform function."""

    transform: JsonTransform[RecordT]
    kind: SourceKind

    @property
    def source_kind(self) -> SourceKind:
        return self.kind

    def parse(self, lines: Iterable[str]) -> Iterator[RecordT]:
        return self.transform(iter_json_records(lines), self.kind)


@dataclass(frozen=True, slots=True)
class TextParser(RecordParser[RecordT]):
    """Parse free-form text via a line-oriented transform function."""

    transform: TextTransform[RecordT]
    kind: SourceKind

    @property
    def source_kind(self) -> SourceKind:
        return self.kind

    def parse(self, lines: Iterable[str]) -> Iterator[RecordT]:
        return self.transform(lines, self.kind)


__all__ = [
    "JsonLinesParser",
    "JsonTransform",
    "TextParser",
    "TextTransform",
    "iter_json_records",
]
