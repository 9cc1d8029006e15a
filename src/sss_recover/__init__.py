# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT
"""Exact Shamir secret recovery from base-N encoded shares.

``decode_value``
    Decode a digit string in base 2-36 into an exact integer.

``interpolate_at_zero``
    Recover the constant term of the integer polynomial through a set of
    points, using exact rational arithmetic.

``solve_case`` / ``solve_batch``
    Drive both over the ``{"keys": {...}, "1": {...}}`` share documents.
"""

from .decoder import decode_value
from .document import CaseResult, load_document, recover_secret, solve_batch, solve_case
from .errors import (
    DuplicateXCoordinate,
    InsufficientPoints,
    InvalidBase,
    InvalidDigit,
    InvalidField,
    MissingField,
    NonIntegerResult,
    ShareError,
)
from .interpolation import interpolate_at_zero, lagrange_weights_at_zero
from .shares import Point, Share

__version__ = "0.1.0"

__all__ = [
    "decode_value",
    "interpolate_at_zero",
    "lagrange_weights_at_zero",
    "Point",
    "Share",
    "CaseResult",
    "load_document",
    "recover_secret",
    "solve_case",
    "solve_batch",
    "ShareError",
    "InvalidBase",
    "InvalidDigit",
    "MissingField",
    "InvalidField",
    "InsufficientPoints",
    "DuplicateXCoordinate",
    "NonIntegerResult",
]
