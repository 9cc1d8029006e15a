# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT
"""Exact decoding of base-N digit strings."""
from __future__ import annotations

import string

from .errors import InvalidBase, InvalidDigit

MIN_BASE = 2
MAX_BASE = 36

_DIGITS = {ch: value for value, ch in enumerate(string.digits + string.ascii_lowercase)}
_DIGITS.update({ch.upper(): value for ch, value in _DIGITS.items() if ch.isalpha()})

_CHUNK_DIGITS = 1000
_CHUNK = 10**_CHUNK_DIGITS


def check_base(base: int) -> int:
    """Return *base* unchanged or raise :class:`InvalidBase`."""
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(f"Base must be an integer, got {base!r}")
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(f"Base {to_decimal(base)} is outside [{MIN_BASE}, {MAX_BASE}]")
    return base


def digit_value(char: str, base: int) -> int:
    """Return the value of a single digit character in *base*."""
    value = _DIGITS.get(char)
    if value is None or value >= base:
        raise InvalidDigit(f"{char!r} is not a valid base-{base} digit")
    return value


def decode_value(digits: str, base: int) -> int:
    """Decode *digits* written in *base* into an exact integer.

    Digits are accumulated most significant first with ``acc * base + d`` so
    the result never passes through a bounded numeric type. Letters are
    accepted in either case.
    """
    check_base(base)
    if not digits:
        raise InvalidDigit(f"Empty value is not a base-{base} number")

    acc = 0
    for position, char in enumerate(digits):
        try:
            acc = acc * base + digit_value(char, base)
        except InvalidDigit as exc:
            raise InvalidDigit(f"{exc} at position {position}") from None
    return acc


def to_decimal(value: int) -> str:
    """Format *value* in base 10 regardless of the interpreter's digit limit.

    ``str(int)`` refuses integers above ``sys.get_int_max_str_digits()``
    digits, so the value is split into fixed-size chunks that each stay
    below it.
    """
    if value < 0:
        return "-" + to_decimal(-value)
    chunks: list[int] = []
    while True:
        value, chunk = divmod(value, _CHUNK)
        chunks.append(chunk)
        if not value:
            break
    head = str(chunks.pop())
    return head + "".join(f"{chunk:0{_CHUNK_DIGITS}d}" for chunk in reversed(chunks))


__all__ = ["MIN_BASE", "MAX_BASE", "check_base", "digit_value", "decode_value", "to_decimal"]
