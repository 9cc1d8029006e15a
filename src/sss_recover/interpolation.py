# SPDX-FileCopyrightText: 2025 Zilant Prime Core contributors
# SPDX-License-Identifier: MIT
"""Exact Lagrange interpolation at ``x = 0`` over the integers.

Shares produced over the integers (no prime field) only guarantee that the
*sum* of the Lagrange terms is integral; an individual term
``y_i * L_i(0)`` can be a proper fraction. Every term is therefore kept as an
exact rational and the division happens once, on the final sum.
"""
from __future__ import annotations

from fractions import Fraction
from typing import Iterable, Sequence, Tuple, Union

from .decoder import to_decimal
from .errors import DuplicateXCoordinate, InsufficientPoints, NonIntegerResult
from .shares import Point

PointLike = Union[Point, Tuple[int, int]]


def _as_points(points: Iterable[PointLike]) -> list[Point]:
    result: list[Point] = []
    for point in points:
        if not isinstance(point, Point):
            x, y = point
            point = Point(x, y)
        result.append(point)
    return result


def _check_distinct(xs: Sequence[int]) -> None:
    seen: set[int] = set()
    for x in xs:
        if x in seen:
            raise DuplicateXCoordinate(f"x = {to_decimal(x)} appears more than once")
        seen.add(x)


def lagrange_weights_at_zero(xs: Sequence[int]) -> list[Fraction]:
    """Return the exact basis values ``L_i(0)`` for the x-coordinates *xs*.

    The weights always sum to one, since they interpolate the constant
    polynomial ``1``.
    """
    _check_distinct(xs)
    weights: list[Fraction] = []
    for i, x_i in enumerate(xs):
        numerator = 1
        denominator = 1
        for j, x_j in enumerate(xs):
            if i == j:
                continue
            numerator *= -x_j
            denominator *= x_i - x_j
        weights.append(Fraction(numerator, denominator))
    return weights


def interpolate_at_zero(points: Iterable[PointLike]) -> int:
    """Return the constant term of the polynomial through *points*.

    Raises :class:`InsufficientPoints` for an empty input,
    :class:`DuplicateXCoordinate` for repeated x values and
    :class:`NonIntegerResult` when the interpolated value is not an integer,
    which means the points do not come from one integer polynomial of degree
    below ``len(points)``.
    """
    pts = _as_points(points)
    if not pts:
        raise InsufficientPoints("At least one point is required")

    weights = lagrange_weights_at_zero([p.x for p in pts])
    total = sum((p.y * w for p, w in zip(pts, weights)), Fraction(0))
    if total.denominator != 1:
        raise NonIntegerResult(
            f"Interpolated value is not an integer (denominator {to_decimal(total.denominator)})"
        )
    return total.numerator


__all__ = ["PointLike", "interpolate_at_zero", "lagrange_weights_at_zero"]
