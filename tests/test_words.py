"""
Tests for word utilities.

Tests cover:
- Rotations, subwords and periods
- Least modes (Booth) and chirality
- Maximum variety and block balance
- MOS construction and MOS substitution
- Monotone-MOS and MOS substitution properties
"""

import pytest
from conftest import BLACKDYE, DIASEM

from chuk_mcp_ternary.constants import Chirality
from chuk_mcp_ternary.core import (
    CountVector,
    block_balance,
    booth,
    brightest_mos_mode_and_gener_bjorklund,
    brightest_mos_mode_and_gener_bresenham,
    chirality,
    delete,
    dyad_on_degree,
    gcd,
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
    necklaces_fixed_content,
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

DIATONIC = [0, 0, 0, 1, 0, 0, 1]
COPRIME_PAIRS = [(a, b) for a in range(1, 11) for b in range(1, 11) if gcd(a, b) == 1]

# Non-canonical rotations of every 3L 2m 2s scale, plus two named scales
SAMPLE_WORDS = [rotate(w, 2) for w in necklaces_fixed_content([3, 2, 2])] + [DIASEM, BLACKDYE]

OPPOSITE = {
    Chirality.LEFT: Chirality.RIGHT,
    Chirality.RIGHT: Chirality.LEFT,
    Chirality.ACHIRAL: Chirality.ACHIRAL,
}


class TestRotations:
    """Tests for rotations and subwords."""

    def test_rotate(self) -> None:
        assert rotate(DIATONIC, 1) == [0, 0, 1, 0, 0, 1, 0]
        assert rotate(DIATONIC, 7) == DIATONIC
        assert rotate(DIATONIC, -1) == [1, 0, 0, 0, 1, 0, 0]
        assert rotate([], 3) == []

    def test_word_on_degree_wraps(self) -> None:
        assert word_on_degree([0, 1, 2], 2, 4) == [2, 0, 1, 2]

    def test_dyad_on_degree(self) -> None:
        assert dyad_on_degree(DIASEM, 0, 2) == CountVector({0: 1, 1: 1})
        assert dyad_on_degree(DIASEM, 8, 2) == CountVector({0: 2})

    def test_period_pattern(self) -> None:
        assert period_pattern([0, 1, 2] * 3) == [0, 1, 2]
        assert period_pattern(DIASEM) == DIASEM
        assert period_pattern([0, 0, 0, 0]) == [0]

    def test_weak_period_pattern(self) -> None:
        """The word need only be a prefix of the repeated pattern."""
        assert weak_period_pattern(DIASEM) == [0, 1, 0, 2]
        assert weak_period_pattern([0, 1, 0, 1, 0]) == [0, 1]

    def test_rotations_are_distinct(self) -> None:
        assert rotations([0, 1, 0, 1]) == [[0, 1, 0, 1], [1, 0, 1, 0]]
        assert len(rotations(DIATONIC)) == 7


class TestLeastMode:
    """Tests for Booth's algorithm and least modes."""

    def test_booth(self) -> None:
        assert booth([1, 0, 0]) == 1
        assert booth([0, 1, 0, 1]) == 0
        assert booth([]) == 0

    def test_least_mode_of_blackdye(self) -> None:
        assert least_mode(BLACKDYE) == [0, 1, 0, 2, 0, 1, 0, 2, 0, 2]

    def test_least_mode_of_diasem(self) -> None:
        assert least_mode(DIASEM) == [0, 0, 1, 0, 2, 0, 1, 0, 2]

    def test_least_mode_is_smallest_rotation(self) -> None:
        """Booth agrees with brute force."""
        for word in (BLACKDYE, DIASEM, [2, 1, 2, 0, 1, 1, 0], [1, 1, 1]):
            assert least_mode(word) == min(rotations(word))


class TestCanonicalRoundTrip:
    """Least modes are fixed points; reversal mirrors chirality."""

    @pytest.mark.parametrize("word", SAMPLE_WORDS)
    def test_least_mode_is_idempotent(self, word: list[int]) -> None:
        canonical = least_mode(word)
        assert least_mode(canonical) == canonical
        assert canonical in rotations(word)

    @pytest.mark.parametrize("word", SAMPLE_WORDS)
    def test_reversal_flips_chirality(self, word: list[int]) -> None:
        assert chirality(list(reversed(word))) == OPPOSITE[chirality(word)]


class TestChirality:
    """Tests for chirality."""

    def test_diasem_is_right_handed(self) -> None:
        assert chirality(DIASEM) == Chirality.RIGHT

    def test_reversed_diasem_is_left_handed(self) -> None:
        assert chirality([0, 2, 0, 1, 0, 2, 0, 1, 0]) == Chirality.LEFT

    def test_blackdye_is_achiral(self) -> None:
        assert chirality(BLACKDYE) == Chirality.ACHIRAL

    def test_diachrome_modes(self) -> None:
        assert chirality([0, 1, 2, 0, 2, 0, 2, 0, 1, 2, 0, 2]) == Chirality.RIGHT
        assert chirality([0, 2, 0, 2, 0, 1, 2, 0, 2, 0, 2, 1]) == Chirality.ACHIRAL
        assert chirality([0, 2, 1, 0, 2, 0, 2, 0, 2, 1, 0, 2]) == Chirality.LEFT


class TestVariety:
    """Tests for step signature, maximum variety and block balance."""

    def test_step_signature(self) -> None:
        assert step_signature(DIASEM) == [5, 2, 2]
        assert step_signature([0, 0]) == [2, 0, 0]
        assert step_signature([0, 3]) == [1, 0, 0, 1]

    def test_step_variety(self) -> None:
        assert step_variety(DIASEM) == 3
        assert step_variety(DIATONIC) == 2

    def test_maximum_variety(self) -> None:
        assert maximum_variety([0, 0, 0, 0]) == 1
        assert maximum_variety(DIATONIC) == 2
        assert maximum_variety([1, 1, 1, 1, 2, 1, 2]) == 3
        assert maximum_variety(DIASEM) == 3
        assert maximum_variety(BLACKDYE) == 4

    def test_maximum_variety_of_empty_word(self) -> None:
        assert maximum_variety([]) == 0

    def test_maximum_variety_is(self) -> None:
        assert maximum_variety_is(DIASEM, 3)
        assert not maximum_variety_is(DIASEM, 2)
        assert not maximum_variety_is(DIASEM, 4)

    def test_block_balance(self) -> None:
        """MOS words have block balance 1."""
        assert block_balance(DIATONIC) == 1
        assert block_balance([0, 0, 0, 1, 1, 1]) == 3


class TestSubstitution:
    """Tests for delete, subst and replace."""

    def test_delete(self) -> None:
        assert delete(DIASEM, 2) == [0, 1, 0, 0, 1, 0, 0]

    def test_subst_cycles_filler(self) -> None:
        assert subst([0, 1, 0, 1, 0, 1], 1, [1, 2]) == [0, 1, 0, 2, 0, 1]

    def test_subst_empty_filler_deletes(self) -> None:
        assert subst([0, 1, 0, 1], 1, []) == [0, 0]

    def test_replace(self) -> None:
        assert replace([0, 1, 2], 2, 1) == [0, 1, 1]


class TestMosConstruction:
    """Tests for brightest MOS modes and generators."""

    def test_bresenham_diatonic(self) -> None:
        mos, gener = brightest_mos_mode_and_gener_bresenham(5, 2)
        assert mos == [0, 0, 0, 1, 0, 0, 1]
        assert gener == CountVector({0: 3, 1: 1})

    def test_bresenham_oneirotonic(self) -> None:
        mos, gener = brightest_mos_mode_and_gener_bresenham(5, 3)
        assert mos == [0, 0, 1, 0, 0, 1, 0, 1]
        assert gener == CountVector({0: 2, 1: 1})

    @pytest.mark.parametrize("a", range(1, 21))
    @pytest.mark.parametrize("b", range(1, 21))
    def test_bjorklund_agrees_with_bresenham(self, a: int, b: int) -> None:
        assert brightest_mos_mode_and_gener_bjorklund(
            a, b
        ) == brightest_mos_mode_and_gener_bresenham(a, b)

    @pytest.mark.parametrize("a, b", COPRIME_PAIRS)
    def test_every_mode_is_a_balanced_mos(self, a: int, b: int) -> None:
        """Each mode of a single-period MOS has variety 2 and block balance 1."""
        for brightness in range(a + b):
            mode = mos_mode(a, b, brightness)
            assert maximum_variety(mode) == 2
            assert block_balance(mode) == 1

    def test_multiperiod_mos(self) -> None:
        """Non-coprime counts repeat the primitive MOS."""
        mos, gener = brightest_mos_mode_and_gener_bresenham(4, 2)
        assert mos == [0, 0, 1, 0, 0, 1]
        assert gener == CountVector({0: 1})

    def test_empty_mos(self) -> None:
        assert brightest_mos_mode_and_gener_bresenham(0, 0) == ([], CountVector.ZERO)
        assert brightest_mos_mode_and_gener_bjorklund(0, 0) == ([], CountVector.ZERO)

    def test_mos_mode_brightness(self) -> None:
        """Brightest is n - 1, darkest is 0."""
        assert mos_mode(5, 2, 6) == DIATONIC
        assert mos_mode(5, 2, 0) == [1, 0, 0, 1, 0, 0, 0]

    def test_mos_modes_are_rotations(self) -> None:
        modes = {tuple(mos_mode(5, 2, i)) for i in range(7)}
        assert modes == {tuple(r) for r in rotations(DIATONIC)}


class TestMosSubstitution:
    """Tests for MOS substitution scale generation and detection."""

    def test_one_perm_single_scale(self) -> None:
        assert len(mos_substitution_scales_one_perm(6, 5, 5)) == 1

    def test_diasem_is_generated(self) -> None:
        assert least_mode(DIASEM) in mos_substitution_scales([5, 2, 2])

    def test_generated_scales_are_mos_substitution(self) -> None:
        scales = mos_substitution_scales([5, 2, 3])
        assert scales
        assert scales == sorted(scales)
        for scale in scales:
            assert step_signature(scale) == [5, 2, 3]
            assert least_mode(scale) == scale
            assert is_mos_subst(scale)

    def test_zero_count_gives_nothing(self) -> None:
        assert mos_substitution_scales([5, 2, 0]) == []

    def test_is_mos_subst(self) -> None:
        assert is_mos_subst(BLACKDYE)
        assert not is_mos_subst([1, 2, 0, 0, 0, 0, 0, 2, 1, 0, 0, 0, 0, 2, 0, 0, 0])

    def test_is_mos_subst_one_perm(self) -> None:
        assert is_mos_subst_one_perm(BLACKDYE, 0, 1, 2)
        assert not is_mos_subst_one_perm(BLACKDYE, 1, 0, 2)

    def test_binary_word_is_not_mos_subst(self) -> None:
        assert not is_mos_subst(DIATONIC)


class TestMonotoneMos:
    """Tests for monotone-MOS properties."""

    def test_diasem_is_monotone_mos(self) -> None:
        assert monotone_lm(DIASEM)
        assert monotone_ms(DIASEM)
        assert monotone_s0(DIASEM)
        assert is_monotone_mos(DIASEM)

    def test_blackdye_is_not_monotone_mos(self) -> None:
        assert not monotone_lm(BLACKDYE)
        assert not is_monotone_mos(BLACKDYE)

    def test_pairwise_mos(self) -> None:
        assert is_pairwise_mos(DIASEM)
        assert not is_pairwise_mos(BLACKDYE)
