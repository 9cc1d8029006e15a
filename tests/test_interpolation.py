from fractions import Fraction
from itertools import combinations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sss_recover.errors import DuplicateXCoordinate, InsufficientPoints, NonIntegerResult
from sss_recover.interpolation import interpolate_at_zero, lagrange_weights_at_zero
from sss_recover.shares import Point


def evaluate(coeffs, x):
    y = 0
    for c in reversed(coeffs):
        y = y * x + c
    return y


def test_classic_three_points():
    assert interpolate_at_zero([(1, 6), (2, 15), (3, 28)]) == 1


def test_accepts_point_objects():
    points = [Point(1, 6), Point(2, 15), Point(3, 28)]
    assert interpolate_at_zero(points) == 1


def test_single_point_is_constant():
    assert interpolate_at_zero([(7, 42)]) == 42


def test_non_integral_terms_still_give_exact_result():
    # f(x) = x^2 + x + 1; L_2(0) = 10/3 and L_5(0) = 8/3
    points = [(x, evaluate([1, 1, 1], x)) for x in (2, 4, 5)]
    assert lagrange_weights_at_zero([2, 4, 5]) == [Fraction(10, 3), Fraction(-5), Fraction(8, 3)]
    assert interpolate_at_zero(points) == 1


def test_large_secret_is_exact():
    secret = 2**521 - 1
    coeffs = [secret, 3**200, -(7**150), 11**90]
    points = [(x, evaluate(coeffs, x)) for x in (3, 8, 13, 21)]
    assert interpolate_at_zero(points) == secret


def test_negative_and_zero_coordinates():
    coeffs = [-17, 4, -2]
    points = [(x, evaluate(coeffs, x)) for x in (-3, 0, 5)]
    assert interpolate_at_zero(points) == -17


def test_empty_input():
    with pytest.raises(InsufficientPoints):
        interpolate_at_zero([])


def test_duplicate_x():
    with pytest.raises(DuplicateXCoordinate):
        interpolate_at_zero([(1, 6), (2, 15), (1, 6)])


def test_non_integer_result():
    # the line through (1, 0) and (3, 1) crosses x = 0 at -1/2
    with pytest.raises(NonIntegerResult):
        interpolate_at_zero([(1, 0), (3, 1)])


def test_weights_sum_to_one():
    assert sum(lagrange_weights_at_zero([1, 2, 3, 10, 11])) == 1


polynomials = st.lists(st.integers(min_value=-(10**40), max_value=10**40), min_size=1, max_size=6)


@given(st.data(), polynomials)
def test_recovers_constant_term(data, coeffs):
    xs = data.draw(
        st.lists(
            st.integers(min_value=-60, max_value=60),
            min_size=len(coeffs),
            max_size=len(coeffs) + 2,
            unique=True,
        )
    )
    points = [(x, evaluate(coeffs, x)) for x in xs]
    assert interpolate_at_zero(points) == coeffs[0]


@given(st.data(), polynomials)
def test_order_does_not_matter(data, coeffs):
    points = [(x, evaluate(coeffs, x)) for x in range(1, len(coeffs) + 1)]
    shuffled = data.draw(st.permutations(points))
    assert interpolate_at_zero(shuffled) == interpolate_at_zero(points)


def test_every_threshold_subset_agrees():
    coeffs = [123456789, 987, -65, 4]
    points = [(x, evaluate(coeffs, x)) for x in range(1, 8)]
    secrets_ = {interpolate_at_zero(subset) for subset in combinations(points, 4)}
    assert secrets_ == {123456789}
