# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT
"""Immutable share and point value types."""
from __future__ import annotations

from dataclasses import dataclass

from .decoder import check_base, decode_value


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Share:
    """One encoded evaluation point: the polynomial at ``index`` written in ``base``."""

    index: int
    base: int
    digits: str

    def __post_init__(self) -> None:
        check_base(self.base)

    def to_point(self) -> Point:
        return Point(self.index, decode_value(self.digits, self.base))


__all__ = ["Point", "Share"]
