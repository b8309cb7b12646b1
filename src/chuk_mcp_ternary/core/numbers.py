"""
Number theory helpers used by the word and necklace routines.
"""

from __future__ import annotations

import math


def gcd(a: int, b: int) -> int:
    """Greatest common divisor (gcd(0, 0) == 0)."""
    return math.gcd(a, b)


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """
    Extended Euclidean algorithm.

    Returns:
        (g, x, y) with a*x + b*y == g == gcd(a, b)
    """
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t
    return old_r, old_s, old_t


def modinv(a: int, m: int) -> int:
    """
    Inverse of a modulo m, in range(m).

    Raises:
        ValueError: If a and m are not coprime
    """
    g, x, _ = extended_gcd(a % m if m else a, m)
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return x % m


def prime_factors(n: int) -> list[int]:
    """Distinct prime factors of n in ascending order."""
    factors: list[int] = []
    p = 2
    while p * p <= n:
        if n % p == 0:
            factors.append(p)
            while n % p == 0:
                n //= p
        p += 1
    if n > 1:
        factors.append(n)
    return factors


def divisors(n: int) -> list[int]:
    """Positive divisors of n in ascending order."""
    return [d for d in range(1, n + 1) if n % d == 0]


def euler_phi(n: int) -> int:
    """Euler's totient."""
    result = n
    for p in prime_factors(n):
        result -= result // p
    return result
