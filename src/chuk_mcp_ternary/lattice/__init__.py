"""
Lattice - unimodular bases, pitch-class projection and quasi-parallelograms.
"""

from chuk_mcp_ternary.lattice.basis import (
    get_unimodular_basis,
    pitch_class_lattice,
    unimodular_basis,
)
from chuk_mcp_ternary.lattice.parallelogram import (
    QuasiParallelogram,
    classify_quasi_parallelogram,
    pairwise_differences,
    quasi_parallelogram_of,
)

__all__ = [
    # Basis
    "get_unimodular_basis",
    "unimodular_basis",
    "pitch_class_lattice",
    # Parallelogram
    "QuasiParallelogram",
    "classify_quasi_parallelogram",
    "pairwise_differences",
    "quasi_parallelogram_of",
]
