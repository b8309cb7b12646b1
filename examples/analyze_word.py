#!/usr/bin/env python3
"""
Example: Analyzing a Scale Word.

This demonstrates the profile of a single ternary scale: its brightest
mode, chirality, MOS properties, guide frames, and the lattice shape of
its pitch classes.

Usage:
    python examples/analyze_word.py [WORD]
"""

import sys

from chuk_mcp_ternary.analysis import analyze_word


def main() -> None:
    """Print the profile of a scale word."""
    word = sys.argv[1] if len(sys.argv) > 1 else "LmLsLmLsL"

    print("CHUK Ternary Scale Analysis Demo")
    print("=" * 40)
    print()

    profile = analyze_word(word)

    print(f"Word: {word}")
    print(f"  Brightest mode: {profile.canonical_word}")
    print(f"  Reversed: {profile.reversed_canonical}")
    print(f"  Step signature: {profile.step_signature}")
    print(f"  Chirality: {profile.chirality.value}")
    print(f"  Maximum variety: {profile.max_variety}")
    print()

    print("MOS properties:")
    print(f"  Monotone L = m: {profile.monotone_lm}")
    print(f"  Monotone m = s: {profile.monotone_ms}")
    print(f"  Monotone s = 0: {profile.monotone_s0}")
    print(f"  MOS substitution L (m s): {profile.mos_subst_L_ms}")
    print(f"  MOS substitution m (L s): {profile.mos_subst_m_Ls}")
    print(f"  MOS substitution s (L m): {profile.mos_subst_s_Lm}")
    print()

    print(f"Guide frames ({len(profile.guide_frames)}):")
    for frame in profile.guide_frames[:5]:
        print(
            f"  gs={frame.gs} offsets={frame.offset_chord} "
            f"complexity={frame.complexity}"
        )
    print()

    if profile.lattice_basis is None:
        print("No unimodular basis - the scale has no lattice view")
        return

    print(f"Lattice basis: {profile.lattice_basis}")
    print(f"  Pitch classes: {profile.pitch_classes}")
    shape = profile.quasi_parallelogram
    if shape is None:
        print("  Not a quasi-parallelogram")
    else:
        print(
            f"  Quasi-parallelogram: {shape.row_count} rows of {shape.full_row_len}, "
            f"first {shape.first_row_len}, last {shape.last_row_len}"
        )


if __name__ == "__main__":
    main()
