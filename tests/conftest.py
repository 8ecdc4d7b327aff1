# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest


def cargo_message(
    message: str,
    *,
    level: str = "warning",
    file_name: str = "src/main.rs",
    line: int = 2,
    column: int = 9,
    code: str | None = "unused_variables",
) -> str:
    """Return a ``cargo --message-format=json`` compiler-message line."""
    record = {
        "reason": "compiler-message",
        "package_id": "demo 0.1.0 (path+file:///ws)",
        "manifest_path": "/ws/Cargo.toml",
        "message": {
            "$message_type": "diagnostic",
            "rendered": f"{level}: {message}\n",
            "children": [],
            "code": {"code": code, "explanation": None} if code else None,
            "level": level,
            "message": message,
            "spans": [
                {
                    "file_name": file_name,
                    "line_start": line,
                    "line_end": line,
                    "column_start": column,
                    "column_end": column + 1,
                    "is_primary": True,
                    "label": None,
                    "text": [],
                },
            ],
        },
    }
    return json.dumps(record)


ARTIFACT_LINE = json.dumps(
    {
        "reason": "compiler-artifact",
        "package_id": "demo 0.1.0 (path+file:///ws)",
        "target": {"name": "demo", "kind": ["bin"]},
        "fresh": False,
    },
)
FINISHED_LINE = json.dumps({"reason": "build-finished", "success": True})


@pytest.fixture
def write_input(tmp_path: Path) -> Callable[[str, list[str]], Path]:
    """Return a helper writing ``lines`` into a file under ``tmp_path``."""

    def _write(name: str, lines: list[str]) -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture(name="cargo_message")
def cargo_message_fixture() -> Callable[..., str]:
    """Return the compiler-message line builder."""
    return cargo_message


@pytest.fixture
def cargo_noise() -> tuple[str, str]:
    """Return non-diagnostic cargo events (artifact, build-finished)."""
    return ARTIFACT_LINE, FINISHED_LINE
