# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT
"""Centralised recovery policy configuration.

The limits guard the document layer against oversized inputs and pick the
share selection order. Values can be overridden by environment variables so
batch jobs can be tuned without code changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal, Optional

SelectionOrder = Literal["sorted", "document"]


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_selection(name: str, default: SelectionOrder) -> SelectionOrder:
    value = (os.environ.get(name) or "").strip().lower()
    if value in ("sorted", "document"):
        return value  # type: ignore[return-value]
    return default


@dataclass(frozen=True)
class RecoveryPolicy:
    """Holds runtime tunables for share parsing and selection."""

    max_threshold: int = 1024
    max_value_length: int = 65536
    selection: SelectionOrder = "sorted"
    audit_dir: Optional[str] = None


def load_policy() -> RecoveryPolicy:
    """Load the recovery policy considering environment overrides."""

    return RecoveryPolicy(
        max_threshold=_load_int("SSS_RECOVER_MAX_THRESHOLD", 1024),
        max_value_length=_load_int("SSS_RECOVER_MAX_VALUE_LENGTH", 65536),
        selection=_load_selection("SSS_RECOVER_SELECTION", "sorted"),
        audit_dir=os.environ.get("SSS_RECOVER_AUDIT_DIR") or None,
    )


policy = load_policy()


__all__ = ["RecoveryPolicy", "SelectionOrder", "policy", "load_policy"]
