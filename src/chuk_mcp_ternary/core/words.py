"""
Word utilities - rotations, canonical modes and MOS-related tests.

A scale word is a sequence of letters read cyclically. Letter 0 is the
largest step, so the lexicographically least rotation of a word is its
brightest mode.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from chuk_mcp_ternary.constants import Chirality
from chuk_mcp_ternary.core.count_vector import CountVector
from chuk_mcp_ternary.core.numbers import gcd, modinv

T = TypeVar("T")

Word = list[int]


# ---------------------------------------------------------------------------
# Rotations and subwords
# ---------------------------------------------------------------------------


def rotate(word: Sequence[T], degree: int) -> list[T]:
    """
    Rotate a word left by `degree` positions (change mode).

    Example:
        rotate([0, 0, 0, 1, 0, 0, 1], 1) == [0, 0, 1, 0, 0, 1, 0]
    """
    if not word:
        return []
    degree %= len(word)
    return list(word[degree:]) + list(word[:degree])


def word_on_degree(word: Sequence[T], degree: int, length: int) -> list[T]:
    """The cyclic subword of the given length starting on a degree."""
    n = len(word)
    if n == 0:
        return []
    return [word[(degree + i) % n] for i in range(length)]


def dyad_on_degree(word: Sequence[int], degree: int, interval_class: int) -> CountVector:
    """The interval spanning `interval_class` steps up from a degree."""
    return CountVector.from_slice(word_on_degree(word, degree, interval_class))


def period_pattern(word: Sequence[T]) -> list[T]:
    """
    The repeating portion of a word.

    Example:
        period_pattern([0, 1, 0, 1, 0, 1, 0, 1]) == [0, 1]
    """
    n = len(word)
    for d in range(1, n // 2 + 1):
        if n % d == 0 and all(word[i] == word[i % d] for i in range(n)):
            return list(word[:d])
    return list(word)


def weak_period_pattern(word: Sequence[T]) -> list[T]:
    """
    The shortest prefix p such that the word is a prefix of p repeated.

    Unlike `period_pattern`, the word need not be a whole number of
    copies of p.
    """
    n = len(word)
    for length in range(1, n):
        if all(word[i] == word[i % length] for i in range(n)):
            return list(word[:length])
    return list(word)


def rotations(word: Sequence[T]) -> list[list[T]]:
    """The distinct rotations of a word, in rotation order."""
    return [rotate(word, i) for i in range(len(period_pattern(word)))]


# ---------------------------------------------------------------------------
# Canonical forms
# ---------------------------------------------------------------------------


def booth(word: Sequence[int]) -> int:
    """
    Booth's algorithm: index of the lexicographically least rotation.

    Runs in linear time over the doubled word.
    """
    n = len(word)
    if n == 0:
        return 0
    failure = [-1] * (2 * n)
    k = 0
    for j in range(1, 2 * n):
        current = word[j % n]
        i = failure[j - k - 1]
        while i != -1 and current != word[(k + i + 1) % n]:
            if current < word[(k + i + 1) % n]:
                k = j - i - 1
            i = failure[i]
        if i == -1 and current != word[(k + i + 1) % n]:
            if current < word[(k + i + 1) % n]:
                k = j
            failure[j - k] = -1
        else:
            failure[j - k] = i + 1
    return k % n


def least_mode(word: Sequence[int]) -> Word:
    """The lexicographically least (brightest) rotation of a word."""
    return rotate(word, booth(word))


def chirality(word: Sequence[int]) -> Chirality:
    """
    Compare the least mode of a word with the least mode of its reversal.

    Returns RIGHT when the word's own least mode is smaller, LEFT when it
    is larger and ACHIRAL when the two coincide.
    """
    forward = least_mode(word)
    backward = least_mode(list(reversed(word)))
    if forward < backward:
        return Chirality.RIGHT
    if forward > backward:
        return Chirality.LEFT
    return Chirality.ACHIRAL


# ---------------------------------------------------------------------------
# Variety and balance
# ---------------------------------------------------------------------------


def step_set(word: Sequence[int]) -> set[int]:
    return set(word)


def step_variety(word: Sequence[int]) -> int:
    """Number of distinct letters."""
    return len(set(word))


def step_signature(word: Sequence[int], arity: int = 3) -> list[int]:
    """Letter counts for letters 0..arity-1."""
    counts = [0] * max(arity, max(word, default=-1) + 1)
    for letter in word:
        counts[letter] += 1
    return counts


def distinct_spectra(word: Sequence[int], length: int) -> set[CountVector]:
    """The distinct intervals spanning `length` steps."""
    return {dyad_on_degree(word, degree, length) for degree in range(len(word))}


def maximum_variety(word: Sequence[int]) -> int:
    """
    Largest number of distinct sizes of any interval class.

    Only classes up to half the scale need checking. The empty word has
    no intervals and variety 0; any other word has at least 1.
    """
    if not word:
        return 0
    result = 1
    for length in range(1, len(word) // 2 + 1):
        result = max(result, len(distinct_spectra(word, length)))
    return result


def maximum_variety_is(word: Sequence[int], variety: int) -> bool:
    """Whether a word has the given maximum variety, stopping early on excess."""
    if not word:
        return variety == 0
    result = 1
    for length in range(1, len(word) // 2 + 1):
        size = len(distinct_spectra(word, length))
        if size > variety:
            return False
        result = max(result, size)
    return result == variety


def block_balance(word: Sequence[int]) -> int:
    """
    Largest spread in the count of any letter among intervals of one class.

    MOS words have block balance 1.
    """
    if len(word) <= 1:
        return len(word)
    letters = sorted(set(word))
    result = 0
    for length in range(1, len(word) // 2 + 1):
        spectrum = distinct_spectra(word, length)
        for letter in letters:
            counts = [interval.get(letter) for interval in spectrum]
            result = max(result, max(counts) - min(counts))
    return result


# ---------------------------------------------------------------------------
# Substitution
# ---------------------------------------------------------------------------


def delete(word: Sequence[int], letter: int) -> Word:
    """Remove every occurrence of a letter."""
    return [x for x in word if x != letter]


def subst(template: Sequence[int], x: int, filler: Sequence[int]) -> Word:
    """
    Replace the occurrences of `x` in a template by the letters of a filler,
    cycling through the filler. An empty filler deletes `x`.
    """
    if not filler:
        return delete(template, x)
    result: Word = []
    i = 0
    for letter in template:
        if letter == x:
            result.append(filler[i % len(filler)])
            i += 1
        else:
            result.append(letter)
    return result


def replace(word: Sequence[int], from_letter: int, to_letter: int) -> Word:
    """Identify one letter with another."""
    return subst(word, from_letter, [to_letter])


# ---------------------------------------------------------------------------
# MOS construction
# ---------------------------------------------------------------------------


def brightest_mos_mode_and_gener_bresenham(a: int, b: int) -> tuple[Word, CountVector]:
    """
    Brightest mode of the MOS aLbs and its bright generator.

    Walks the lattice path under the line y = (b/a) x, taking a north step
    whenever it stays on or under the line. The bright generator spans
    (b^-1 mod (a + b)) steps.

    Example:
        brightest_mos_mode_and_gener_bresenham(5, 2)
        == ([0, 0, 0, 1, 0, 0, 1], CountVector({0: 3, 1: 1}))
    """
    d = gcd(a, b)
    if d == 0:
        return [], CountVector.ZERO
    if d > 1:
        primitive, gener = brightest_mos_mode_and_gener_bresenham(a // d, b // d)
        return primitive * d, gener

    gener_steps = modinv(b, a + b)
    result: Word = []
    x = y = 0
    while x < a or y < b:
        if a * (y + 1) <= b * x:
            y += 1
            result.append(1)
        else:
            x += 1
            result.append(0)
    return result, CountVector.from_slice(result[:gener_steps])


def brightest_mos_mode_and_gener_bjorklund(a: int, b: int) -> tuple[Word, CountVector]:
    """
    Brightest mode of the MOS aLbs and its bright generator, by Bjorklund's
    algorithm.

    Keeps two subwords with `first < second`, appending the second to the
    first until a single copy of the second is left.
    """
    d = gcd(a, b)
    if d == 0:
        return [], CountVector.ZERO
    if d > 1:
        primitive, gener = brightest_mos_mode_and_gener_bjorklund(a // d, b // d)
        return primitive * d, gener

    gener_steps = modinv(b, a + b)
    first: Word = [0]
    second: Word = [1]
    count_first, count_second = a, b
    while count_second != 1:
        old_first = first
        first = first + second
        if count_first > count_second:
            second = old_first
            count_first, count_second = count_second, count_first - count_second
        else:
            count_second -= count_first
        if first > second:
            first, second = second, first
            count_first, count_second = count_second, count_first
    scale = first * count_first + second
    return scale, CountVector.from_slice(scale[:gener_steps])


def mos_mode(a: int, b: int, brightness: int) -> Word:
    """
    The mode of aLbs with the given brightness.

    Brightness is taken modulo a + b; 0 is the darkest mode and a + b - 1
    the brightest.
    """
    n = a + b
    brightness %= n
    mos, gener = brightest_mos_mode_and_gener_bresenham(a, b)
    return rotate(mos, (n - 1 - brightness) * len(gener))


def mos_substitution_scales_one_perm(n0: int, n1: int, n2: int) -> list[Word]:
    """
    All scales subst n0*0 (n1*1 n2*2), in least mode, sorted and distinct.

    The template MOS has signature n0*0 (n1 + n2)*X; its X slots are filled
    with every mode of the filling MOS reachable by stacking its generator.
    """
    template, _ = brightest_mos_mode_and_gener_bresenham(n0, n1 + n2)
    filler, gener = brightest_mos_mode_and_gener_bresenham(n1, n2)
    filler = [x + 1 for x in filler]
    gener_size = len(gener)
    scales = {
        tuple(least_mode(subst(template, 1, rotate(filler, (i * gener_size) % len(filler)))))
        for i in range(n1 + n2)
    }
    return [list(scale) for scale in sorted(scales)]


def mos_substitution_scales(signature: Sequence[int]) -> list[Word]:
    """
    Every MOS substitution ternary scale with the given step signature.

    Three role assignments suffice: each letter in turn takes the template
    role while the other two form the filling MOS. Signatures with a zero
    count have no ternary scales.
    """
    n0, n1, n2 = signature[0], signature[1], signature[2]
    if min(n0, n1, n2) <= 0:
        return []
    candidates: list[Word] = list(mos_substitution_scales_one_perm(n0, n1, n2))
    candidates.extend(
        [(x + 1) % 3 for x in scale] for scale in mos_substitution_scales_one_perm(n1, n2, n0)
    )
    candidates.extend(
        [2 if x == 0 else x - 1 for x in scale]
        for scale in mos_substitution_scales_one_perm(n2, n0, n1)
    )
    unique = {tuple(least_mode(scale)) for scale in candidates}
    return [list(scale) for scale in sorted(unique)]


# ---------------------------------------------------------------------------
# MOS-related properties of ternary words
# ---------------------------------------------------------------------------


def monotone_lm(word: Sequence[int]) -> bool:
    """Whether equating L = m gives a MOS."""
    return maximum_variety_is(replace(word, 1, 0), 2)


def monotone_ms(word: Sequence[int]) -> bool:
    """Whether equating m = s gives a MOS."""
    return maximum_variety_is(replace(word, 2, 1), 2)


def monotone_s0(word: Sequence[int]) -> bool:
    """Whether deleting s gives a MOS."""
    return maximum_variety_is(delete(word, 2), 2)


def is_monotone_mos(word: Sequence[int]) -> bool:
    return step_variety(word) == 3 and monotone_lm(word) and monotone_ms(word) and monotone_s0(word)


def is_pairwise_mos(word: Sequence[int]) -> bool:
    """Whether identifying any two of the three step sizes gives a MOS."""
    return (
        step_variety(word) == 3
        and maximum_variety_is(replace(word, 1, 0), 2)
        and maximum_variety_is(replace(word, 1, 2), 2)
        and maximum_variety_is(replace(word, 2, 0), 2)
    )


def _mos_subst_holds(word: Sequence[int], t: int, f1: int, f2: int) -> bool:
    return maximum_variety_is(delete(word, t), 2) and maximum_variety_is(replace(word, f1, f2), 2)


def is_mos_subst_one_perm(word: Sequence[int], t: int, f1: int, f2: int) -> bool:
    """
    Whether a ternary word is the MOS substitution scale subst t (f1 f2).

    Deleting the template letter and identifying the two filler letters
    must both leave MOS words.

    Example:
        blackdye = [2, 0, 1, 0, 2, 0, 1, 0, 2, 0]
        is_mos_subst_one_perm(blackdye, 0, 1, 2) is True
        is_mos_subst_one_perm(blackdye, 1, 0, 2) is False
    """
    return step_variety(word) == 3 and _mos_subst_holds(word, t, f1, f2)


def is_mos_subst(word: Sequence[int]) -> bool:
    """Whether a ternary word is a MOS substitution scale for some role assignment."""
    letters = sorted(set(word))
    if len(letters) != 3:
        return False
    x, y, z = letters
    return (
        _mos_subst_holds(word, x, y, z)
        or _mos_subst_holds(word, y, x, z)
        or _mos_subst_holds(word, z, x, y)
    )
