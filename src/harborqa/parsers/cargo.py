# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parsers for ``cargo check`` and ``cargo clippy`` JSON message streams."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Final

from ..core.models import JsonValue, RawDiagnostic
from ..core.serialization import (
    coerce_optional_int,
    coerce_optional_str,
    first_mapping,
    mapping_sequence,
)
from ..core.severity import SourceKind
from .base import JsonLinesParser

CARGO_DIAGNOSTIC_REASON: Final[str] = "compiler-message"
_FLAT_LEVEL_KEYS: Final[tuple[str, ...]] = ("level", "severity")
_FLAT_FILE_KEYS: Final[tuple[str, ...]] = ("file", "file_name", "path")
_FLAT_COLUMN_KEYS: Final[tuple[str, ...]] = ("column", "col")

LOGGER = logging.getLogger(__name__)


def parse_cargo_messages(
    records: Iterable[Mapping[str, JsonValue]],
    source_kind: SourceKind,
) -> Iterator[RawDiagnostic]:
    """Yield raw diagnostics from decoded cargo JSON records.

    Cargo ``--message-format=json`` records wrap the compiler diagnostic in a
    ``message`` object and are tagged with a ``reason``; only
    ``compiler-message`` records carry findings. Records without a ``reason``
    are treated as flat diagnostics carrying ``message``/``level``/``file``
    fields directly.

    Args:
        records: Decoded JSON objects in stream order.
        source_kind: Input the records were read from.

    Yields:
        RawDiagnostic: One raw diagnostic per record carrying a message.
    """

    for record in records:
        if "reason" in record:
            diagnostic = _from_cargo_record(record, source_kind)
        else:
            diagnostic = _from_flat_record(record, source_kind)
        if diagnostic is not None:
            yield diagnostic


def _from_cargo_record(record: Mapping[str, JsonValue], source_kind: SourceKind) -> RawDiagnostic | None:
    """Return the diagnostic wrapped in a cargo ``compiler-message`` record.

    Args:
        record: Decoded cargo message record.
        source_kind: Input the record was read from.

    Returns:
        RawDiagnostic | None: Raw diagnostic, or ``None`` for non-diagnostic events.
    """

    if record.get("reason") != CARGO_DIAGNOSTIC_REASON:
        return None
    message_mapping = first_mapping(record.get("message"))
    if "message" not in message_mapping:
        LOGGER.debug("skipping compiler-message without message text")
        return None
    spans = mapping_sequence(message_mapping.get("spans"))
    primary = next(
        (span for span in spans if span.get("is_primary") is True),
        spans[0] if spans else None,
    )
    code_mapping = first_mapping(message_mapping.get("code"))
    return RawDiagnostic(
        message=coerce_optional_str(message_mapping.get("message")),
        level=coerce_optional_str(message_mapping.get("level")),
        file=coerce_optional_str(primary.get("file_name")) if primary else None,
        line=coerce_optional_int(primary.get("line_start")) if primary else None,
        column=coerce_optional_int(primary.get("column_start")) if primary else None,
        code=coerce_optional_str(code_mapping.get("code")),
        source_kind=source_kind,
    )


def _from_flat_record(record: Mapping[str, JsonValue], source_kind: SourceKind) -> RawDiagnostic | None:
    """Return a diagnostic from a record carrying its fields at the top level.

    Args:
        record: Decoded JSON object.
        source_kind: Input the record was read from.

    Returns:
        RawDiagnostic | None: Raw diagnostic, or ``None`` when no message is present.
    """

    if "message" not in record:
        LOGGER.debug("skipping record without a message field")
        return None
    return RawDiagnostic(
        message=coerce_optional_str(record.get("message")),
        level=coerce_optional_str(_first_present(record, _FLAT_LEVEL_KEYS)),
        file=coerce_optional_str(_first_present(record, _FLAT_FILE_KEYS)),
        line=coerce_optional_int(record.get("line")),
        column=coerce_optional_int(_first_present(record, _FLAT_COLUMN_KEYS)),
        code=coerce_optional_str(record.get("code")),
        source_kind=source_kind,
    )


def _first_present(record: Mapping[str, JsonValue], keys: tuple[str, ...]) -> JsonValue | None:
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return None


def cargo_check_parser() -> JsonLinesParser[RawDiagnostic]:
    """Return the parser used for ``cargo check --message-format=json`` output."""

    return JsonLinesParser(parse_cargo_messages, SourceKind.CHECK)


def cargo_clippy_parser() -> JsonLinesParser[RawDiagnostic]:
    """Return the parser used for ``cargo clippy --message-format=json`` output."""

    return JsonLinesParser(parse_cargo_messages, SourceKind.LINT)


__all__ = [
    "CARGO_DIAGNOSTIC_REASON",
    "cargo_check_parser",
    "cargo_clippy_parser",
    "parse_cargo_messages",
]
