"""
Core scale-word primitives - the Radix layer.

These are the combinatorial invariants that everything else composes on:
- CountVector: An interval as a letterwise count of steps
- Words: Rotations, least modes (Booth), variety, chirality, substitution
- MOS construction: Bresenham and Bjorklund brightest modes, MOS substitution
- Necklaces: Every word with fixed letter counts, one per rotation class
- Matrix kernel: 3x3 integer determinant, adjugate and product
- Cancellation: Cooperative stop of long enumerations
"""

from chuk_mcp_ternary.core.cancellation import cancellation_scope, check_cancelled
from chuk_mcp_ternary.core.count_vector import CountVector
from chuk_mcp_ternary.core.matrix import det3, matrix_times_vector, unimodular_inverse
from chuk_mcp_ternary.core.necklaces import (
    iter_necklaces_fixed_content,
    necklace_count,
    necklaces_fixed_content,
    sift_zeros,
)
from chuk_mcp_ternary.core.numbers import (
    divisors,
    euler_phi,
    extended_gcd,
    gcd,
    modinv,
    prime_factors,
)
from chuk_mcp_ternary.core.words import (
    block_balance,
    booth,
    brightest_mos_mode_and_gener_bjorklund,
    brightest_mos_mode_and_gener_bresenham,
    chirality,
    delete,
    dyad_on_degree,
    is_monotone_mos,
    is_mos_subst,
    is_mos_subst_one_perm,
    is_pairwise_mos,
    least_mode,
    maximum_variety,
    maximum_variety_is,
    monotone_lm,
    monotone_ms,
    monotone_s0,
    mos_mode,
    mos_substitution_scales,
    mos_substitution_scales_one_perm,
    period_pattern,
    replace,
    rotate,
    rotations,
    step_signature,
    step_variety,
    subst,
    weak_period_pattern,
    word_on_degree,
)

__all__ = [
    # Cancellation
    "cancellation_scope",
    "check_cancelled",
    # Count vectors
    "CountVector",
    # Words
    "rotate",
    "rotations",
    "word_on_degree",
    "dyad_on_degree",
    "period_pattern",
    "weak_period_pattern",
    "booth",
    "least_mode",
    "chirality",
    "step_variety",
    "step_signature",
    "maximum_variety",
    "maximum_variety_is",
    "block_balance",
    "delete",
    "replace",
    "subst",
    # MOS
    "brightest_mos_mode_and_gener_bresenham",
    "brightest_mos_mode_and_gener_bjorklund",
    "mos_mode",
    "mos_substitution_scales",
    "mos_substitution_scales_one_perm",
    "monotone_lm",
    "monotone_ms",
    "monotone_s0",
    "is_monotone_mos",
    "is_pairwise_mos",
    "is_mos_subst",
    "is_mos_subst_one_perm",
    # Necklaces
    "iter_necklaces_fixed_content",
    "necklaces_fixed_content",
    "necklace_count",
    "sift_zeros",
    # Matrix kernel
    "det3",
    "unimodular_inverse",
    "matrix_times_vector",
    # Numbers
    "gcd",
    "extended_gcd",
    "modinv",
    "prime_factors",
    "divisors",
    "euler_phi",
]
