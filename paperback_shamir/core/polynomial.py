"""Polynomial generation, evaluation and interpolation over the share field."""

from __future__ import annotations

from collections.abc import Sequence

from paperback_shamir.utils.entropy import RandomSource
from paperback_shamir.utils.field import PRIME, add, inverse, mul, neg, sub


def random_polynomial(
    degree: int,
    constant_term: int,
    rng: RandomSource,
    prime: int = PRIME,
) -> list[int]:
    """Coefficients ``[a0, a1, ..., a_degree]`` with ``a0 = constant_term``.

    a1..a_degree are drawn independently and uniformly from [0, prime). The
    confidentiality of every share depends on ``rng`` being unpredictable.
    """
    if degree < 0:
        raise ValueError(f"degree must be >= 0, got {degree}")
    if not 0 <= constant_term < prime:
        raise ValueError("constant_term must be a field element")
    return [constant_term] + [rng.randbelow(prime) for _ in range(degree)]


def evaluate(coefficients: Sequence[int], x: int, prime: int = PRIME) -> int:
    """Evaluate the polynomial at ``x`` using Horner's rule."""
    y = 0
    for c in reversed(coefficients):
        y = add(mul(y, x, prime), c, prime)
    return y


def lagrange_weights(xs: Sequence[int], prime: int = PRIME) -> list[int]:
    """Lagrange basis values L_i(0) for the given distinct x-coordinates.

    f(0) = sum(L_i(0) * y_i), so the weights depend only on the x-coordinates
    and can be reused for every block of a share set.
    """
    weights = []
    for i, xi in enumerate(xs):
        numerator = 1
        denominator = 1
        for j, xj in enumerate(xs):
            if i == j:
                continue
            numerator = mul(numerator, neg(xj, prime), prime)
            denominator = mul(denominator, sub(xi, xj, prime), prime)
        weights.append(mul(numerator, inverse(denominator, prime), prime))
    return weights


def combine_weighted(weights: Sequence[int], ys: Sequence[int], prime: int = PRIME) -> int:
    """Sum of ``weights[i] * ys[i]`` in the field."""
    total = 0
    for w, y in zip(weights, ys):
        total = add(total, mul(w, y, prime), prime)
    return total


def interpolate_at_zero(points: Sequence[tuple[int, int]], prime: int = PRIME) -> int:
    """Recover f(0) from ``(x, y)`` samples of a polynomial of degree < len(points)."""
    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    return combine_weighted(lagrange_weights(xs, prime), ys, prime)
