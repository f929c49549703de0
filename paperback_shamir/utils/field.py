"""Prime field arithmetic shared by the split and combine paths."""

from __future__ import annotations

from paperback_shamir.errors import FieldInvariantError

# Bytes per block. Every block of a secret maps to one field element.
DEFAULT_BLOCK_SIZE = 16

# Smallest prime above 2**128, so any 16-byte block value is a valid element.
PRIME = 2**128 + 51


def add(a: int, b: int, prime: int = PRIME) -> int:
    return (a + b) % prime


def sub(a: int, b: int, prime: int = PRIME) -> int:
    return (a - b) % prime


def neg(a: int, prime: int = PRIME) -> int:
    return -a % prime


def mul(a: int, b: int, prime: int = PRIME) -> int:
    return (a * b) % prime


def inverse(a: int, prime: int = PRIME) -> int:
    """Modular multiplicative inverse using the extended Euclidean algorithm."""
    a %= prime
    if a == 0:
        raise FieldInvariantError("Zero has no multiplicative inverse")
    g, x, _ = _extended_gcd(a, prime)
    if g != 1:
        raise FieldInvariantError(f"Modulus is not prime: gcd={g}")
    return x % prime


def _extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    # Iterative so recursion depth never depends on operand size.
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t
    return old_r, old_s, old_t


def is_element(value: int, prime: int = PRIME) -> bool:
    """True if ``value`` is a reduced field element in [0, prime)."""
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < prime
