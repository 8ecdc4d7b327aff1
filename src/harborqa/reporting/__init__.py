# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Report aggregation and payload encoding."""

from __future__ import annotations

from .aggregate import aggregate_report
from .payload import Payload, build_params, encode_payload

__all__ = ["Payload", "aggregate_report", "build_params", "encode_payload"]
