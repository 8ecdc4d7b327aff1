# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Protocols describing the input parsers feeding the report pipeline."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable, Iterator
from typing import Protocol, TypeVar, runtime_checkable

from ..core.severity import SourceKind

RecordT_co = TypeVar("RecordT_co", covariant=True)


@runtime_checkable
class RecordParser(Protocol[RecordT_co]):
    """Produce a lazy record sequence from the lines of one build-tool input.

    Structured and pattern-based parsers share this capability so that either
    can back a source without changes to the aggregation stage.
    """

    @property
    @abstractmethod
    def source_kind(self) -> SourceKind:
        """Return the input kind handled by the parser.

        Returns:
            SourceKind: Kind of build-tool input consumed by the parser.
        """
        raise NotImplementedError

    @abstractmethod
    def parse(self, lines: Iterable[str]) -> Iterator[RecordT_co]:
        """Yield records extracted from ``lines`` in input order.

        Args:
            lines: Text lines read from the input file.

        Returns:
            Iterator[RecordT_co]: Records recognised in ``lines``.
        """
        raise NotImplementedError


__all__ = ["RecordParser"]
