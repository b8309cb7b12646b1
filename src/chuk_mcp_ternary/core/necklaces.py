"""
Fixed-content necklaces - every scale word with a given step signature.

Generates one representative per rotation class, in least-rotation form,
using Sawada's algorithm for necklaces with fixed content (2003). The
algorithm requires every letter to occur, so zero counts are first moved
to the tail and the letters renamed back on output.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from functools import reduce
from math import factorial

from chuk_mcp_ternary.constants import MAX_SCALE_LENGTH, ErrorMessages
from chuk_mcp_ternary.core.cancellation import check_cancelled
from chuk_mcp_ternary.core.numbers import divisors, euler_phi, gcd
from chuk_mcp_ternary.core.words import Word, least_mode
from chuk_mcp_ternary.errors import InvalidInputError, NumericRangeError


def sift_zeros(content: Sequence[int]) -> tuple[list[int], list[int]]:
    """
    Move the zero entries of a content vector behind the non-zero ones.

    Pairs the first zero from the front with the first non-zero from the
    back and swaps them, working inwards. The swaps are disjoint, so the
    returned permutation is its own inverse.

    Returns:
        (sifted content, permutation as a list of images)

    Example:
        sift_zeros([1, 0, 2, 0, 3, 0]) == ([1, 3, 2, 0, 0, 0], [0, 4, 2, 3, 1, 5])
    """
    values = list(content)
    perm = list(range(len(values)))
    lo, hi = 0, len(values) - 1
    while lo < hi:
        while lo < hi and values[lo] != 0:
            lo += 1
        while hi > lo and values[hi] == 0:
            hi -= 1
        if lo >= hi:
            break
        values[lo], values[hi] = values[hi], values[lo]
        perm[lo], perm[hi] = hi, lo
        lo += 1
        hi -= 1
    return values, perm


def _insert_descending(letters: list[int], letter: int) -> None:
    for index, existing in enumerate(letters):
        if existing < letter:
            letters.insert(index, letter)
            return
    letters.append(letter)


def _next_smaller(letters: list[int], letter: int) -> int | None:
    for existing in letters:
        if existing < letter:
            return existing
    return None


def _sawada(
    rem: list[int],
    runs: list[int],
    avail: list[int],
    a: list[int],
    t: int,
    p: int,
    s: int,
) -> Iterator[Word]:
    # rem: copies of each letter still to place
    # runs[i]: length of the run of the top letter starting at i
    # avail: letters with rem > 0, descending
    # a: prenecklace, positions >= t hold the top letter
    check_cancelled()
    n = len(a)
    top = len(rem) - 1
    if rem[top] == n - t:
        # only the top letter remains
        if (rem[top] == runs[t - p] and n % p == 0) or rem[top] > runs[t - p]:
            yield list(a)
    elif rem[0] != n - t:
        # otherwise the word would both begin and end with 0
        j = avail[0] if avail else None
        while j is not None and j >= a[t - p]:
            runs[s] = t - s
            if rem[j] == 1:
                avail.remove(j)
            rem[j] -= 1
            a[t] = j
            yield from _sawada(
                rem,
                runs,
                avail,
                a,
                t + 1,
                p if j == a[t - p] else t + 1,
                s if j == top else t + 1,
            )
            if rem[j] == 0:
                _insert_descending(avail, j)
            rem[j] += 1
            j = _next_smaller(avail, j)
        a[t] = top


def iter_necklaces_fixed_content(content: Sequence[int]) -> Iterator[Word]:
    """
    Stream the necklaces with the given letter counts.

    Each word is the least rotation of its class. Order is deterministic.

    Letters are tried largest first, so on balanced content such as
    [k, k, k] the search passes through many dead prefixes before the
    first word; its delay grows exponentially with k. The search stops
    with AnalysisCancelledError once the current cancellation event is set.

    Args:
        content: Count of each letter, letter i occurring content[i] times

    Raises:
        InvalidInputError: If a count is negative
        NumericRangeError: If the total length exceeds MAX_SCALE_LENGTH
        AnalysisCancelledError: If the enumeration is cancelled
    """
    if any(c < 0 for c in content):
        raise InvalidInputError(ErrorMessages.NEGATIVE_MULTIPLICITY.format(content=list(content)))
    n = sum(content)
    if n > MAX_SCALE_LENGTH:
        raise NumericRangeError(
            ErrorMessages.SCALE_TOO_LONG.format(length=n, maximum=MAX_SCALE_LENGTH)
        )
    if n == 0:
        return

    rem, perm = sift_zeros(content)
    while rem[-1] == 0:
        rem.pop()
    arity = len(rem)
    renamed = perm != list(range(len(perm)))

    # The word starts with the single 0 we place up front
    rem[0] -= 1
    a = [0] + [arity - 1] * (n - 1)
    runs = [0] * n
    avail = list(range(arity - 1, -1, -1)) if rem[0] else list(range(arity - 1, 0, -1))

    for word in _sawada(rem, runs, avail, a, 1, 1, 1):
        if renamed:
            yield least_mode([perm[letter] for letter in word])
        else:
            yield word


def necklaces_fixed_content(content: Sequence[int]) -> list[Word]:
    """
    All necklaces with the given letter counts.

    Example:
        necklaces_fixed_content([5, 2]) holds the three words
        0000011, 0000101 and 0001001
    """
    return list(iter_necklaces_fixed_content(content))


def necklace_count(content: Sequence[int]) -> int:
    """
    Number of necklaces with the given content, by the closed form

        (1/n) * sum over d | gcd(c) of phi(d) * (n/d)! / prod (c_i/d)!
    """
    counts = [c for c in content if c > 0]
    n = sum(counts)
    if n == 0:
        return 0
    g = reduce(gcd, counts)
    total = 0
    for d in divisors(g):
        multinomial = factorial(n // d)
        for c in counts:
            multinomial //= factorial(c // d)
        total += euler_phi(d) * multinomial
    return total // n
