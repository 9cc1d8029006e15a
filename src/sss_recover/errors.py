# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT
"""Error taxonomy for share decoding and secret recovery."""
from __future__ import annotations


class ShareError(ValueError):
    """Base class for every recovery failure.

    ``kind`` mirrors the class name so that reports and audit records can
    carry the error category without pickling the exception.
    """

    @property
    def kind(self) -> str:
        return type(self).__name__


class InvalidBase(ShareError):
    """Raised when a base lies outside ``[2, 36]``."""


class InvalidDigit(ShareError):
    """Raised when a value contains a character that is not a digit of its base."""


class MissingField(ShareError):
    """Raised when a required field is absent from a record."""


class InvalidField(ShareError):
    """Raised when a field is present but has an unusable type or value."""


class InsufficientPoints(ShareError):
    """Raised when fewer points than the threshold are available."""


class DuplicateXCoordinate(ShareError):
    """Raised when two selected points share an x value."""


class NonIntegerResult(ShareError):
    """Raised when the interpolated constant term is not an integer."""


__all__ = [
    "ShareError",
    "InvalidBase",
    "InvalidDigit",
    "MissingField",
    "InvalidField",
    "InsufficientPoints",
    "DuplicateXCoordinate",
    "NonIntegerResult",
]
