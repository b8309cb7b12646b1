"""
3x3 integer matrix kernel.

Matrices are given as three column vectors. Entries stay small (bounded by
the scale length), so Python ints never need range checks here.
"""

from __future__ import annotations

from collections.abc import Sequence

Vector3 = Sequence[int]


def det3(col0: Vector3, col1: Vector3, col2: Vector3) -> int:
    """Determinant by the rule of Sarrus."""
    a0, a1, a2 = col0[0], col0[1], col0[2]
    b0, b1, b2 = col1[0], col1[1], col1[2]
    c0, c1, c2 = col2[0], col2[1], col2[2]
    return (
        a0 * b1 * c2
        + a1 * b2 * c0
        + a2 * b0 * c1
        - a2 * b1 * c0
        - a1 * b0 * c2
        - a0 * b2 * c1
    )


def unimodular_inverse(col0: Vector3, col1: Vector3, col2: Vector3) -> list[list[int]]:
    """
    Adjugate of the matrix, as three column vectors.

    For a matrix of determinant 1 this is the inverse; for determinant -1 it
    is the negated inverse. No division is performed, so the caller must
    check the determinant.
    """
    a, d, g = col0[0], col0[1], col0[2]
    b, e, h = col1[0], col1[1], col1[2]
    c, f, i = col2[0], col2[1], col2[2]
    return [
        [e * i - f * h, f * g - d * i, d * h - e * g],
        [c * h - b * i, a * i - c * g, b * g - a * h],
        [b * f - c * e, c * d - a * f, a * e - b * d],
    ]


def matrix_times_vector(
    col0: Vector3, col1: Vector3, col2: Vector3, vector: Vector3
) -> list[int]:
    """Apply the matrix with the given columns to a vector."""
    return [col0[r] * vector[0] + col1[r] * vector[1] + col2[r] * vector[2] for r in range(3)]
