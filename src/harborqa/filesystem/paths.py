# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for reasoning about diagnostic file paths."""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path, PurePath, PurePosixPath
from typing import Final

_Pathish = str | PathLike[str] | Path
_CURRENT_DIR: Final[str] = "."

LOGGER = logging.getLogger(__name__)


def relativize(path: str, root: _Pathish | None) -> str:
    """Return ``path`` with the workspace ``root`` prefix stripped.

    The comparison is purely lexical and component-wise, so ``crates`` strips
    ``crates/core/src/lib.rs`` but leaves ``crates-extra/lib.rs`` untouched. No
    filesystem access takes place.

    Args:
        path: File path reported by the tool.
        root: Configured workspace root, or ``None`` when unset.

    Returns:
        str: Workspace-relative POSIX path when ``path`` lives under ``root``;
        otherwise ``path`` unchanged.
    """

    if root is None or not path:
        return path
    root_parts = PurePath(root).parts
    if not root_parts:
        return path
    path_parts = PurePath(path).parts
    if len(path_parts) < len(root_parts) or path_parts[: len(root_parts)] != root_parts:
        LOGGER.debug("path %s is outside workspace %s; leaving it unchanged", path, root)
        return path
    remainder = path_parts[len(root_parts) :]
    if not remainder:
        return _CURRENT_DIR
    return PurePosixPath(*remainder).as_posix()


__all__ = ["relativize"]
