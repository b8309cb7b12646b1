"""
Generator sequences - stacked k-steps and the guided GSes they carry.

Stacking the k-step on degrees 0, k, 2k, ... of a scale gives a chain of
intervals. When gcd(k, n) == 1 the chain visits every degree, and any
rotation of it whose closing interval differs from all earlier ones is
generated by a guided generator sequence: the weak period of the chain
without its closing interval.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import singledispatch
from typing import Any

from chuk_mcp_ternary.core.count_vector import CountVector
from chuk_mcp_ternary.core.numbers import gcd
from chuk_mcp_ternary.core.words import rotations, weak_period_pattern, word_on_degree

GeneratorSequence = list[CountVector]


@singledispatch
def _interval_of(first: Any, items: Sequence[Any]) -> CountVector:
    # Letters: count them
    return CountVector.from_slice(items)


@_interval_of.register
def _(first: CountVector, items: Sequence[CountVector]) -> CountVector:
    # Intervals of an outer scale: add them up
    total = CountVector.ZERO
    for item in items:
        total = total + item
    return total


def interval_from_slice(items: Sequence[int] | Sequence[CountVector]) -> CountVector:
    """
    The interval spanned by a run of steps.

    Works on letter sequences (counting letters) and on sequences of count
    vectors (summing them), so subscales built from larger intervals can be
    stacked the same way as plain scale words.
    """
    if not items:
        return CountVector.ZERO
    return _interval_of(items[0], items)


def stacked_step_class(
    step_class: int, scale: Sequence[int] | Sequence[CountVector]
) -> list[CountVector]:
    """
    The chain of `step_class`-steps stacked from degree 0.

    Entry i is the interval on degree step_class * i; the final entry
    closes the cycle.

    Example:
        stacked_step_class(2, [0, 1, 0, 2, 0, 1, 0, 2, 0])
        -> [{0: 1, 1: 1}, {0: 1, 2: 1}, {0: 1, 1: 1}, {0: 1, 2: 1}, {0: 2},
            {0: 1, 1: 1}, {0: 1, 2: 1}, {0: 1, 1: 1}, {0: 1, 2: 1}]
    """
    return [
        interval_from_slice(word_on_degree(scale, step_class * i, step_class))
        for i in range(len(scale))
    ]


def guided_gs_chains(chain: Sequence[CountVector]) -> list[GeneratorSequence]:
    """Guided GSes of every rotation of a chain whose closing interval is unique."""
    result: list[GeneratorSequence] = []
    for rotation in rotations(chain):
        body, closing = rotation[:-1], rotation[-1]
        if closing not in body:
            result.append(weak_period_pattern(body))
    return result


def step_class_guided_gs_list(step_class: int, scale: Sequence[int]) -> list[GeneratorSequence]:
    return guided_gs_chains(stacked_step_class(step_class, scale))


def guided_gs_list(scale: Sequence[int]) -> list[GeneratorSequence]:
    """All guided GSes of a scale, over every step class coprime to its length."""
    n = len(scale)
    result: list[GeneratorSequence] = []
    for step_class in range(1, n):
        if gcd(step_class, n) == 1:
            result.extend(step_class_guided_gs_list(step_class, scale))
    return result


def guided_gs_list_of_len(gs_length: int, scale: Sequence[int]) -> list[GeneratorSequence]:
    """Guided GSes of a given length, over step classes up to half the scale."""
    n = len(scale)
    result: list[GeneratorSequence] = []
    for step_class in range(1, n // 2 + 1):
        if gcd(step_class, n) == 1:
            result.extend(
                gs for gs in step_class_guided_gs_list(step_class, scale) if len(gs) == gs_length
            )
    return result


def guided_gs_list_for_subscale(subscale: Sequence[CountVector]) -> list[GeneratorSequence]:
    """Guided GSes of a subscale whose steps are themselves intervals."""
    if len(subscale) == 2:
        return [[subscale[0]]]
    n = len(subscale)
    result: list[GeneratorSequence] = []
    for step_class in range(1, n // 2 + 1):
        if gcd(step_class, n) == 1:
            result.extend(guided_gs_chains(stacked_step_class(step_class, subscale)))
    return result
