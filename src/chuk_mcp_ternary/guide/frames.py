"""
Guide frames - decompositions of a scale into generator-sequence chains.

A guide frame pairs a guided generator sequence with an offset chord. A
simple frame (offset chord {0}) generates the whole scale with one chain.
A multiple frame generates it as m interleaved copies of one chain, each
copy starting on a different offset.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from chuk_mcp_ternary.core.cancellation import check_cancelled
from chuk_mcp_ternary.core.count_vector import CountVector
from chuk_mcp_ternary.core.numbers import gcd, prime_factors
from chuk_mcp_ternary.core.words import dyad_on_degree, rotate, rotations, weak_period_pattern
from chuk_mcp_ternary.guide.generators import (
    guided_gs_chains,
    guided_gs_list,
    guided_gs_list_for_subscale,
    stacked_step_class,
)


def _chord_key(vector: CountVector) -> tuple[int, CountVector]:
    return (vector.taxicab_length, vector)


def offset_of(reference: Sequence[CountVector], other: Sequence[CountVector]) -> int | None:
    """Smallest left rotation taking `other` to `reference`, if any."""
    if len(reference) != len(other):
        return None
    target = list(reference)
    for i in range(len(other)):
        if rotate(other, i) == target:
            return i
    return None


@dataclass(frozen=True, order=True)
class GuideFrame:
    """
    A guided generator sequence together with an offset chord.

    The offset chord is kept in canonical order (by step count, then by
    count vector), so frames compare equal whenever they describe the same
    decomposition.

    Immutable and hashable.
    """

    gs: tuple[CountVector, ...]
    offset_chord: tuple[CountVector, ...] = (CountVector.ZERO,)

    def __post_init__(self) -> None:
        chord = tuple(sorted(self.offset_chord, key=_chord_key))
        if not chord:
            raise ValueError("Offset chord must not be empty")
        object.__setattr__(self, "gs", tuple(self.gs))
        object.__setattr__(self, "offset_chord", chord)

    @classmethod
    def simple(cls, gs: Iterable[CountVector]) -> GuideFrame:
        """A frame with offset chord {0}."""
        return cls(tuple(gs), (CountVector.ZERO,))

    @classmethod
    def multiple(cls, gs: Iterable[CountVector], offset_chord: Iterable[CountVector]) -> GuideFrame:
        return cls(tuple(gs), tuple(offset_chord))

    @property
    def multiplicity(self) -> int:
        """Number of interleaved chains."""
        return len(self.offset_chord)

    @property
    def complexity(self) -> int:
        """GS length times multiplicity."""
        return len(self.gs) * len(self.offset_chord)

    @property
    def is_simple(self) -> bool:
        return self.multiplicity == 1

    @property
    def aggregate(self) -> CountVector:
        """Sum of the generators."""
        total = CountVector.ZERO
        for gener in self.gs:
            total = total + gener
        return total

    @classmethod
    def try_simple(cls, scale: Sequence[int], step_class: int) -> list[GuideFrame]:
        """
        Simple guide frames generated by stacked `step_class`-steps.

        Empty unless gcd(len(scale), step_class) == 1.
        """
        if not scale or gcd(len(scale), step_class) != 1:
            return []
        chain = stacked_step_class(step_class, scale)
        return sorted({cls.simple(gs) for gs in guided_gs_chains(chain)})

    @classmethod
    def try_multiple(
        cls, scale: Sequence[int], multiplicity: int, step_class: int
    ) -> list[GuideFrame]:
        """
        Guide frames of the given multiplicity using `step_class`-steps.

        The scale must be non-empty and its length divisible by the
        multiplicity; otherwise there are no frames.
        """
        n = len(scale)
        if multiplicity == 1 or n == 0 or n % multiplicity != 0:
            return []
        gcd_value = gcd(step_class, n)
        coprime_part = n // gcd_value
        if coprime_part % multiplicity != 0:
            if gcd_value != multiplicity:
                return []
            return cls._interleaved(scale, gcd_value)
        return cls._disjoint_chains(scale, multiplicity, step_class)

    @classmethod
    def _interleaved(cls, scale: Sequence[int], gcd_value: int) -> list[GuideFrame]:
        # The k-steps split the scale into gcd_value strands, each a subscale
        # whose steps are gcd_value-steps of the scale.
        n = len(scale)
        subscales = [
            stacked_step_class(gcd_value, rotate(scale, degree))[: n // gcd_value]
            for degree in range(gcd_value)
        ]
        root = subscales[0]

        offsets: list[CountVector] = []
        for i, subscale in enumerate(subscales):
            offset = offset_of(root, subscale)
            if offset is None:
                return []
            offsets.append(CountVector.from_slice(scale[: offset * gcd_value + i]))

        if len(offsets) == 1:
            gses = guided_gs_list(scale)
        else:
            gses = guided_gs_list_for_subscale(root)
        return sorted({cls.multiple(gs, offsets) for gs in gses})

    @classmethod
    def _disjoint_chains(
        cls, scale: Sequence[int], multiplicity: int, step_class: int
    ) -> list[GuideFrame]:
        n = len(scale)
        chain_length = n // multiplicity
        if chain_length == 1:
            return []

        # Chains of k-steps on each degree, keyed by the degree they start on
        chains: list[tuple[int, list[CountVector]]] = []
        for degree, mode in enumerate(rotations(scale)):
            stack = stacked_step_class(step_class, mode)[:chain_length]
            if stack[-1] not in stack[:-1]:
                chains.append((degree, stack))

        by_gs: dict[tuple[CountVector, ...], list[int]] = {}
        for degree, stack in chains:
            gs = tuple(weak_period_pattern(stack[:-1]))
            by_gs.setdefault(gs, []).append(degree)

        frames: list[GuideFrame] = []
        for gs in sorted(by_gs):
            degrees = by_gs[gs]
            if len(degrees) != multiplicity:
                continue
            covered = {
                (first + i * step_class) % n for first in degrees for i in range(chain_length)
            }
            if len(covered) != n:
                continue
            first_degree = degrees[0]
            offset_chord = [
                dyad_on_degree(scale, first_degree, degree - first_degree) for degree in degrees
            ]
            frames.append(cls.multiple(gs, offset_chord))
        return frames

    def __str__(self) -> str:
        gs = ", ".join(str(v) for v in self.gs)
        chord = ", ".join(str(v) for v in self.offset_chord)
        return f"GuideFrame(gs=[{gs}], offset_chord=[{chord}])"


def try_all_variants(scale: Sequence[int], step_class: int) -> list[GuideFrame]:
    """
    Simple frames plus multiple frames for every prime dividing the length.

    Scales with a single distinct letter get no multiple frames.
    """
    frames = GuideFrame.try_simple(scale, step_class)
    if len(set(scale)) > 1:
        for prime in prime_factors(len(scale)):
            frames.extend(GuideFrame.try_multiple(scale, prime, step_class))
    return sorted(frames, key=lambda frame: frame.complexity)


def guide_frames(scale: Sequence[int]) -> list[GuideFrame]:
    """
    Every guide frame of a scale, least complex first.

    Step classes from 2 to half the scale length are searched. Generators
    spanning more than half the scale are not tried on their own, which can
    miss frames whose step class lies between n/2 and n - 2.
    """
    frames: set[GuideFrame] = set()
    for step_class in range(2, len(scale) // 2 + 1):
        check_cancelled()
        frames.update(try_all_variants(scale, step_class))
    return sorted(frames, key=lambda frame: (frame.complexity, frame))
