"""Tests for polynomial generation, evaluation and interpolation."""

from __future__ import annotations

import pytest

from helpers import SeededRandomSource
from paperback_shamir.core.polynomial import (
    combine_weighted,
    evaluate,
    interpolate_at_zero,
    lagrange_weights,
    random_polynomial,
)
from paperback_shamir.utils.field import PRIME


class _CountingSource:
    def __init__(self) -> None:
        self.bounds: list[int] = []

    def randbelow(self, exclusive_upper_bound: int) -> int:
        self.bounds.append(exclusive_upper_bound)
        return len(self.bounds)


class TestRandomPolynomial:
    def test_constant_term_fixed(self) -> None:
        coeffs = random_polynomial(3, 42, SeededRandomSource(1))
        assert len(coeffs) == 4
        assert coeffs[0] == 42

    def test_degree_zero(self) -> None:
        assert random_polynomial(0, 7, SeededRandomSource(1)) == [7]

    def test_draws_from_full_field(self) -> None:
        source = _CountingSource()
        assert random_polynomial(2, 5, source) == [5, 1, 2]
        assert source.bounds == [PRIME, PRIME]

    def test_independent_draws(self) -> None:
        coeffs = random_polynomial(6, 0, SeededRandomSource(9))
        assert len(set(coeffs[1:])) == 6

    def test_negative_degree_raises(self) -> None:
        with pytest.raises(ValueError, match="degree"):
            random_polynomial(-1, 0, SeededRandomSource(1))

    def test_constant_outside_field_raises(self) -> None:
        with pytest.raises(ValueError, match="field element"):
            random_polynomial(1, PRIME, SeededRandomSource(1))


class TestEvaluate:
    def test_horner_matches_naive(self) -> None:
        coeffs = [5, PRIME - 2, 17, 2**100]
        for x in (0, 1, 2, 255):
            naive = sum(c * pow(x, j, PRIME) for j, c in enumerate(coeffs)) % PRIME
            assert evaluate(coeffs, x) == naive

    def test_at_zero_is_constant(self) -> None:
        assert evaluate([99, 1, 2, 3], 0) == 99

    def test_empty_polynomial_is_zero(self) -> None:
        assert evaluate([], 5) == 0


class TestInterpolation:
    def test_recovers_constant_term(self) -> None:
        coeffs = random_polynomial(4, 123456789, SeededRandomSource(3))
        points = [(x, evaluate(coeffs, x)) for x in (2, 5, 7, 8, 11)]
        assert interpolate_at_zero(points) == 123456789

    def test_single_point(self) -> None:
        assert interpolate_at_zero([(3, 77)]) == 77

    def test_weights_sum_to_one(self) -> None:
        weights = lagrange_weights([1, 2, 3, 4])
        assert sum(weights) % PRIME == 1

    def test_weighted_combination(self) -> None:
        weights = lagrange_weights([1, 2])
        # f(x) = 10 + 3x
        assert combine_weighted(weights, [13, 16]) == 10


class TestSmallField:
    """Hand-checkable arithmetic in GF(7)."""

    def test_evaluate_wraps(self) -> None:
        # 3 + 2x + x^2 at x=4 is 27, which is 6 mod 7
        assert evaluate([3, 2, 1], 4, prime=7) == 6

    def test_weights(self) -> None:
        # L_1(0) = 2/(2-1) = 2, L_2(0) = 1/(1-2) = -1 = 6
        assert lagrange_weights([1, 2], prime=7) == [2, 6]

    def test_interpolation(self) -> None:
        # f(x) = 5 + 3x: f(1) = 1, f(2) = 4 (mod 7)
        assert interpolate_at_zero([(1, 1), (2, 4)], prime=7) == 5
