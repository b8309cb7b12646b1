#!/usr/bin/env python3
"""
Example: Enumerating a Step Signature.

This demonstrates searching every scale with a given number of L, m and
s steps, keeping only monotone-MOS scales, and listing the named scales
that ship with the package.

Usage:
    python examples/enumerate_signature.py
"""

from chuk_mcp_ternary.analysis import analyze_signature
from chuk_mcp_ternary.catalog import ScaleCatalog
from chuk_mcp_ternary.core import necklace_count
from chuk_mcp_ternary.models import SignatureFilters


def main() -> None:
    """Enumerate 5L 2m 2s scales."""
    print("CHUK Ternary Signature Search Demo")
    print("=" * 40)
    print()

    signature = (5, 2, 2)
    print(f"Step signature {signature[0]}L {signature[1]}m {signature[2]}s")
    print(f"  Necklaces: {necklace_count(signature)}")
    print()

    filters = SignatureFilters(lm=True, ms=True, s0=True)
    result = analyze_signature(*signature, filters=filters)
    print(f"Monotone-MOS scales: {result.count} of {result.scanned}")
    for profile in result.profiles:
        print(f"  {profile.canonical_word} ({profile.chirality.value}, mv={profile.max_variety})")
    print()

    result = analyze_signature(*signature, mode="mos_substitution")
    print(f"MOS substitution scales: {result.count}")
    for profile in result.profiles:
        print(f"  {profile.canonical_word}")
    print()

    catalog = ScaleCatalog()
    print("Named scales:")
    for meta in catalog.list_scales():
        print(f"  {meta.name}: {meta.word} - {meta.description}")


if __name__ == "__main__":
    main()
