"""
Tests for word encoding and the analysis operations.

Tests cover:
- Letter tables, parsing and formatting
- analyze_word profiles
- analyze_signature enumeration, filtering and ordering
- quasi_parallelogram on scale words
"""

import threading

import pytest
from pydantic import ValidationError

from chuk_mcp_ternary.analysis import (
    alphabet_for_arity,
    analyze_signature,
    analyze_word,
    detect_alphabet,
    format_word,
    parse_word,
    passes_filters,
    profile_word,
    quasi_parallelogram,
    read_word,
)
from chuk_mcp_ternary.constants import (
    MAX_SCALE_LENGTH,
    Chirality,
    Constraint,
    EnumerationMode,
)
from chuk_mcp_ternary.core import cancellation_scope, mos_substitution_scales, necklace_count
from chuk_mcp_ternary.errors import AnalysisCancelledError, InvalidInputError, NumericRangeError
from chuk_mcp_ternary.guide import guide_frames
from chuk_mcp_ternary.models import ScaleProfile, SignatureFilters


class TestEncoding:
    """Tests for letter tables."""

    def test_alphabet_for_arity(self) -> None:
        assert alphabet_for_arity(2) == "Ls"
        assert alphabet_for_arity(3) == "Lms"
        assert alphabet_for_arity(4) == "Lmns"
        assert len(alphabet_for_arity(40)) == 52

    def test_parse_letters(self) -> None:
        assert parse_word("LmLsLmLsL") == [0, 1, 0, 2, 0, 1, 0, 2, 0]

    def test_parse_digits(self) -> None:
        assert parse_word("010201020") == [0, 1, 0, 2, 0, 1, 0, 2, 0]

    def test_parse_widens_table(self) -> None:
        """Two distinct letters can still come from the ternary table."""
        assert parse_word("LmLm") == [0, 1, 0, 1]
        assert parse_word("LsLs") == [0, 1, 0, 1]
        assert detect_alphabet("LmLm") == "Lms"

    def test_parse_strips_whitespace(self) -> None:
        assert parse_word("  Lms\n") == [0, 1, 2]
        assert parse_word("   ") == []

    def test_parse_is_case_sensitive(self) -> None:
        assert parse_word("LMs") != parse_word("Lms")

    def test_unknown_letter(self) -> None:
        with pytest.raises(InvalidInputError):
            parse_word("L?s")

    def test_format(self) -> None:
        assert format_word([0, 1, 2]) == "Lms"
        assert format_word([0, 1, 2, 3]) == "Lmns"
        assert format_word([0, 1]) == "Lm"
        assert format_word([]) == ""

    def test_read_word_too_long(self) -> None:
        with pytest.raises(NumericRangeError):
            read_word("L" * (MAX_SCALE_LENGTH + 1))


class TestAnalyzeWord:
    """Tests for single-word profiles."""

    def test_diasem(self) -> None:
        profile = analyze_word("LmLsLmLsL")
        assert profile.canonical_word == "LLmLsLmLs"
        assert profile.reversed_canonical == "LLsLmLsLm"
        assert profile.step_signature == [5, 2, 2]
        assert profile.chirality == Chirality.RIGHT
        assert profile.monotone_lm
        assert profile.monotone_ms
        assert profile.monotone_s0
        assert profile.mos_subst_L_ms
        assert profile.max_variety == 3

    def test_diasem_lattice(self) -> None:
        profile = analyze_word("LmLsLmLsL")
        assert profile.structure is not None
        assert profile.lattice_basis is not None
        assert profile.pitch_classes is not None
        assert len(profile.pitch_classes) == 9
        assert profile.quasi_parallelogram is not None
        assert profile.guide_frames
        assert profile.structure in profile.guide_frames

    def test_digits_give_same_profile(self) -> None:
        assert analyze_word("010201020") == profile_word([0, 1, 0, 2, 0, 1, 0, 2, 0])

    def test_blackdye(self) -> None:
        profile = analyze_word("LmLsLmLsLs")
        assert profile.chirality == Chirality.ACHIRAL
        assert profile.max_variety == 4
        assert profile.mos_subst_L_ms
        assert not profile.mos_subst_m_Ls
        assert not profile.monotone_lm

    def test_without_frames(self) -> None:
        profile = analyze_word("LmLsLmLsL", include_frames=False)
        assert profile.guide_frames == []
        assert profile.structure is not None

    def test_no_basis(self) -> None:
        """Scales without guide frames have no lattice data."""
        profile = analyze_word("LLLL")
        assert profile.structure is None
        assert profile.lattice_basis is None
        assert profile.quasi_parallelogram is None
        assert profile.max_variety == 1

    def test_serializes(self) -> None:
        profile = analyze_word("LmLsLmLsL")
        data = profile.model_dump(mode="json")
        assert data["chirality"] == "Right"
        assert ScaleProfile.model_validate(data) == profile

    def test_precomputed_frames(self) -> None:
        """Passing the frames of the least mode gives the same profile."""
        word = [0, 0, 1, 0, 2, 0, 1, 0, 2]
        assert profile_word(word, frames=guide_frames(word)) == profile_word(word)

    def test_structure_and_basis_together(self) -> None:
        data = analyze_word("LmLsLmLsL").model_dump()
        data["lattice_basis"] = None
        with pytest.raises(ValidationError):
            ScaleProfile.model_validate(data)

    def test_unknown_letter(self) -> None:
        with pytest.raises(InvalidInputError):
            analyze_word("Lm?s")


class TestQuasiParallelogramOperation:
    """Tests for quasi_parallelogram on words."""

    def test_blackdye(self) -> None:
        shape = quasi_parallelogram("LmLsLmLsLs")
        assert shape is not None
        assert shape.size == 10

    def test_diaslen(self) -> None:
        assert quasi_parallelogram("sLmLsLsLmLs") is not None

    def test_nonexample(self) -> None:
        assert quasi_parallelogram("LLLLsLmLLsLLLms") is None


class TestSignatureFilters:
    """Tests for filter settings."""

    def test_defaults(self) -> None:
        filters = SignatureFilters()
        assert not filters.lm
        assert filters.mv == 0
        assert filters.mv_constraint == Constraint.EXACTLY

    def test_constraint_spellings(self) -> None:
        assert SignatureFilters(mv_constraint="at most").mv_constraint == Constraint.AT_MOST
        assert SignatureFilters(mv_constraint="at-most").mv_constraint == Constraint.AT_MOST
        assert SignatureFilters(mv_constraint="Exactly").mv_constraint == Constraint.EXACTLY

    def test_unknown_constraint(self) -> None:
        with pytest.raises(ValidationError):
            SignatureFilters(mv_constraint="roughly")

    def test_passes_filters(self) -> None:
        diasem = [0, 0, 1, 0, 2, 0, 1, 0, 2]
        blackdye = [0, 1, 0, 2, 0, 1, 0, 2, 0, 2]
        assert passes_filters(diasem, SignatureFilters(lm=True, ms=True, s0=True))
        assert not passes_filters(blackdye, SignatureFilters(lm=True))
        assert passes_filters(blackdye, SignatureFilters(mv=4))
        assert not passes_filters(blackdye, SignatureFilters(mv=3))
        assert passes_filters(diasem, SignatureFilters(mv=4, mv_constraint="at_most"))
        simple = SignatureFilters(complexity=2, complexity_constraint="at_most")
        assert passes_filters(diasem, simple)
        assert passes_filters(diasem, simple, guide_frames(diasem))
        assert not passes_filters(diasem, simple, [])


class TestAnalyzeSignature:
    """Tests for step signature enumeration."""

    def test_all_necklaces(self) -> None:
        result = analyze_signature(5, 2, 2)
        assert result.mode == EnumerationMode.ALL_NECKLACES
        assert result.scanned == necklace_count([5, 2, 2])
        assert result.count == result.scanned

    def test_monotone_filters(self) -> None:
        result = analyze_signature(5, 2, 2, SignatureFilters(lm=True, ms=True, s0=True))
        words = [p.canonical_word for p in result.profiles]
        assert "LLmLsLmLs" in words
        assert all(p.monotone_lm and p.monotone_ms and p.monotone_s0 for p in result.profiles)

    def test_max_variety_filter(self) -> None:
        result = analyze_signature(5, 2, 2, SignatureFilters(mv=3, mv_constraint="at_most"))
        assert result.count > 0
        assert all(p.max_variety <= 3 for p in result.profiles)

    def test_mos_substitution_mode(self) -> None:
        result = analyze_signature(5, 2, 2, mode="mos_substitution")
        assert result.mode == EnumerationMode.MOS_SUBSTITUTION
        assert result.scanned == len(mos_substitution_scales([5, 2, 2]))

    def test_profiles_omit_frames(self) -> None:
        result = analyze_signature(2, 1, 1)
        assert result.profiles
        assert all(p.guide_frames == [] for p in result.profiles)

    def test_ordered_by_complexity(self) -> None:
        """Scales whose least complex frame is simpler come first."""
        result = analyze_signature(4, 2, 2)
        first_frames = [analyze_word(p.canonical_word).guide_frames for p in result.profiles]
        ranks = [f[0].complexity if f else MAX_SCALE_LENGTH + 1 for f in first_frames]
        assert ranks == sorted(ranks)

    def test_empty_signature(self) -> None:
        result = analyze_signature(0, 0, 0)
        assert result.scanned == 0
        assert result.profiles == []

    def test_negative_count(self) -> None:
        with pytest.raises(InvalidInputError):
            analyze_signature(-1, 2, 2)

    def test_too_long(self) -> None:
        with pytest.raises(NumericRangeError):
            analyze_signature(MAX_SCALE_LENGTH, 1, 0)

    def test_unknown_mode(self) -> None:
        with pytest.raises(InvalidInputError):
            analyze_signature(5, 2, 2, mode="bogus")

    def test_cancelled(self) -> None:
        stop = threading.Event()
        stop.set()
        with cancellation_scope(stop), pytest.raises(AnalysisCancelledError):
            analyze_signature(5, 2, 2)

    def test_cancelled_mos_substitution(self) -> None:
        """The signature loop stops even when scales are not enumerated lazily."""
        stop = threading.Event()
        stop.set()
        with cancellation_scope(stop), pytest.raises(AnalysisCancelledError):
            analyze_signature(5, 2, 2, mode="mos_substitution")
