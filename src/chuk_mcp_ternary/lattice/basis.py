"""
Unimodular bases and the 2D pitch-class lattice.

A pair of intervals (v, w) is a unimodular basis for a ternary scale when
the matrix with columns (step signature, v, w) has determinant +-1. Every
pitch class then has unique integer (v, w)-coordinates modulo the equave,
which places the scale on a plane lattice.
"""

from __future__ import annotations

from collections.abc import Sequence

from chuk_mcp_ternary.core.matrix import det3, matrix_times_vector, unimodular_inverse
from chuk_mcp_ternary.core.words import step_signature
from chuk_mcp_ternary.guide.frames import GuideFrame, guide_frames

Triple = list[int]
UnimodularBasis = tuple[Triple, Triple]
Point = tuple[int, int]


def _is_unimodular(signature: Triple, v: Triple, w: Triple) -> bool:
    return abs(det3(signature, v, w)) == 1


def get_unimodular_basis(
    frames: Sequence[GuideFrame], signature: Sequence[int]
) -> tuple[UnimodularBasis, GuideFrame] | None:
    """
    First unimodular basis found in a list of guide frames.

    Frames are searched in order. For a simple frame, pairs of generators
    are tried before (offset, generator) pairs; for a multiple frame,
    (generator, offset) pairs are tried.

    Returns:
        ((v, w), frame) for the first frame admitting a basis, or None
    """
    sig = list(signature[:3])
    for frame in frames:
        gs = [v.to_triple() for v in frame.gs]
        chord = [v.to_triple() for v in frame.offset_chord]
        if frame.multiplicity == 1:
            for i in range(len(gs)):
                for j in range(i + 1, len(gs)):
                    if _is_unimodular(sig, gs[i], gs[j]):
                        return (gs[i], gs[j]), frame
            for offset in chord:
                for gener in gs:
                    if _is_unimodular(sig, offset, gener):
                        return (offset, gener), frame
        else:
            for offset in chord:
                for gener in gs:
                    if _is_unimodular(sig, gener, offset):
                        return (gener, offset), frame
    return None


def _is_ternary(scale: Sequence[int]) -> bool:
    return all(0 <= letter <= 2 for letter in scale)


def unimodular_basis(scale: Sequence[int]) -> tuple[UnimodularBasis, GuideFrame] | None:
    """Search the guide frames of a ternary scale for a unimodular basis."""
    if not scale or not _is_ternary(scale):
        return None
    return get_unimodular_basis(guide_frames(scale), step_signature(scale))


def pitch_class_lattice(
    scale: Sequence[int], basis: UnimodularBasis | None = None
) -> list[Point] | None:
    """
    Project the pitch classes of a ternary scale onto the plane.

    Each cumulative interval (degree 1 up to the equave) is written in the
    basis (signature, v, w) and its signature coordinate dropped. The last
    point, the equave, lands on the origin.

    Args:
        scale: Ternary scale word
        basis: Unimodular basis to use; searched for when omitted

    Returns:
        One point per degree, or None when there is no unimodular basis
    """
    if not scale or not _is_ternary(scale):
        return None
    signature = step_signature(scale)
    if basis is None:
        found = unimodular_basis(scale)
        if found is None:
            return None
        basis = found[0]
    v, w = basis
    det = det3(signature, v, w)
    if abs(det) != 1:
        return None

    # The adjugate is det * inverse, so scaling by det gives the inverse
    col0, col1, col2 = unimodular_inverse(signature, v, w)
    cumulative = [0, 0, 0]
    points: list[Point] = []
    for letter in scale:
        cumulative[letter] += 1
        _, x, y = matrix_times_vector(col0, col1, col2, cumulative)
        points.append((det * x, det * y))
    return points
