"""
Scale analysis - the primary operations.

- analyze_word: profile of one scale word
- analyze_signature: filtered profiles of every scale with a step signature
- quasi_parallelogram: lattice shape of one scale word
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from chuk_mcp_ternary.analysis.encoding import alphabet_for_arity, detect_alphabet, parse_word
from chuk_mcp_ternary.analysis.encoding import format_word as _format_word
from chuk_mcp_ternary.constants import MAX_SCALE_LENGTH, EnumerationMode, ErrorMessages
from chuk_mcp_ternary.core.cancellation import check_cancelled
from chuk_mcp_ternary.core.necklaces import iter_necklaces_fixed_content
from chuk_mcp_ternary.core.words import (
    chirality,
    is_mos_subst_one_perm,
    least_mode,
    maximum_variety,
    monotone_lm,
    monotone_ms,
    monotone_s0,
    mos_substitution_scales,
    step_signature,
)
from chuk_mcp_ternary.errors import InvalidInputError, NumericRangeError
from chuk_mcp_ternary.guide.frames import GuideFrame, guide_frames
from chuk_mcp_ternary.lattice.basis import get_unimodular_basis, pitch_class_lattice
from chuk_mcp_ternary.lattice.parallelogram import (
    QuasiParallelogram,
    classify_quasi_parallelogram,
)
from chuk_mcp_ternary.models.profile import (
    GuideResult,
    ParallelogramShape,
    ScaleProfile,
    SignatureFilters,
    SignatureResult,
)

logger = logging.getLogger(__name__)

TERNARY_ALPHABET = alphabet_for_arity(3)


def _check_length(length: int) -> None:
    if length > MAX_SCALE_LENGTH:
        raise NumericRangeError(
            ErrorMessages.SCALE_TOO_LONG.format(length=length, maximum=MAX_SCALE_LENGTH)
        )


def _alphabet_for(word: Sequence[int]) -> str:
    if not word or max(word) <= 2:
        return TERNARY_ALPHABET
    return alphabet_for_arity(max(word) + 1)


def format_word(word: Sequence[int], alphabet: str | None = None) -> str:
    """Write a word in L/m/s letters, or a wider table for larger alphabets."""
    return _format_word(word, alphabet or _alphabet_for(word))


def read_word(text: str) -> tuple[list[int], str | None]:
    """
    Parse a word and remember the table it was written in.

    Raises:
        InvalidInputError: On an unknown letter
        NumericRangeError: If the word is longer than MAX_SCALE_LENGTH
    """
    word = parse_word(text)
    _check_length(len(word))
    return word, detect_alphabet(text.strip()) if word else None


def profile_word(
    word: Sequence[int],
    alphabet: str | None = None,
    include_frames: bool = True,
    frames: list[GuideFrame] | None = None,
) -> ScaleProfile:
    """
    Analyze a parsed scale word.

    Args:
        word: Letters, 0 for the largest step
        alphabet: Letter table for the string fields (L/m/s by default)
        include_frames: Whether to list every guide frame in the profile
        frames: Guide frames of the word's least mode, if already known

    Returns:
        ScaleProfile of the word
    """
    word = list(word)
    _check_length(len(word))
    brightest = least_mode(word)
    if frames is None:
        frames = guide_frames(brightest)
    signature = step_signature(brightest)

    structure: GuideResult | None = None
    lattice_basis: list[list[int]] | None = None
    pitch_classes: list[tuple[int, int]] | None = None
    shape: ParallelogramShape | None = None
    found = get_unimodular_basis(frames, signature) if len(signature) == 3 else None
    if found is not None:
        basis, frame = found
        structure = GuideResult.from_frame(frame)
        lattice_basis = [list(basis[0]), list(basis[1])]
        pitch_classes = pitch_class_lattice(brightest, basis)
        if pitch_classes is not None:
            descriptor = classify_quasi_parallelogram(pitch_classes)
            if descriptor is not None:
                shape = ParallelogramShape.from_descriptor(descriptor)

    return ScaleProfile(
        canonical_word=format_word(brightest, alphabet),
        reversed_canonical=format_word(least_mode(list(reversed(word))), alphabet),
        step_signature=signature,
        chirality=chirality(word),
        monotone_lm=monotone_lm(word),
        monotone_ms=monotone_ms(word),
        monotone_s0=monotone_s0(word),
        mos_subst_L_ms=is_mos_subst_one_perm(word, 0, 1, 2),
        mos_subst_m_Ls=is_mos_subst_one_perm(word, 1, 0, 2),
        mos_subst_s_Lm=is_mos_subst_one_perm(word, 2, 0, 1),
        max_variety=maximum_variety(word),
        structure=structure,
        lattice_basis=lattice_basis,
        pitch_classes=pitch_classes,
        quasi_parallelogram=shape,
        guide_frames=[GuideResult.from_frame(f) for f in frames] if include_frames else [],
    )


def analyze_word(text: str, include_frames: bool = True) -> ScaleProfile:
    """
    Analyze a scale word given as a string.

    Example:
        profile = analyze_word("LmLsLmLsL")
        profile.canonical_word == "LLmLsLmLs"
        profile.chirality == Chirality.RIGHT
    """
    word, alphabet = read_word(text)
    return profile_word(word, alphabet, include_frames=include_frames)


def quasi_parallelogram(text: str) -> QuasiParallelogram | None:
    """Quasi-parallelogram shape of a scale word's lattice, if it has one."""
    word, _ = read_word(text)
    points = pitch_class_lattice(least_mode(word))
    if points is None:
        return None
    return classify_quasi_parallelogram(points)


def _first_frame(frames: list[GuideFrame]) -> GuideFrame | None:
    return frames[0] if frames else None


def _passes_word_filters(word: Sequence[int], filters: SignatureFilters) -> bool:
    if filters.lm and not monotone_lm(word):
        return False
    if filters.ms and not monotone_ms(word):
        return False
    if filters.s0 and not monotone_s0(word):
        return False
    if filters.mv and not filters.mv_constraint.admits(maximum_variety(word), filters.mv):
        return False
    return True


def _passes_frame_filters(frames: list[GuideFrame], filters: SignatureFilters) -> bool:
    if not (filters.ggs_len or filters.complexity):
        return True
    first = _first_frame(frames)
    if first is None:
        return False
    if filters.ggs_len and not filters.ggs_len_constraint.admits(len(first.gs), filters.ggs_len):
        return False
    if filters.complexity and not filters.complexity_constraint.admits(
        first.complexity, filters.complexity
    ):
        return False
    return True


def passes_filters(
    word: Sequence[int],
    filters: SignatureFilters,
    frames: list[GuideFrame] | None = None,
) -> bool:
    """
    Whether a scale passes every enabled signature filter.

    The guide frame filters use `frames` when given, else search the word.
    """
    if not _passes_word_filters(word, filters):
        return False
    if frames is None and (filters.ggs_len or filters.complexity):
        frames = guide_frames(word)
    return _passes_frame_filters(frames or [], filters)


def candidate_scales(signature: Sequence[int], mode: EnumerationMode) -> Iterable[list[int]]:
    """Scales with a step signature, one per rotation class."""
    if mode is EnumerationMode.MOS_SUBSTITUTION:
        return mos_substitution_scales(signature)
    return iter_necklaces_fixed_content(signature)


def _parse_mode(mode: EnumerationMode | str) -> EnumerationMode:
    try:
        return EnumerationMode(mode)
    except ValueError as e:
        raise InvalidInputError(ErrorMessages.UNKNOWN_MODE.format(mode=mode)) from e


def analyze_signature(
    n0: int,
    n1: int,
    n2: int,
    filters: SignatureFilters | None = None,
    mode: EnumerationMode | str = EnumerationMode.ALL_NECKLACES,
) -> SignatureResult:
    """
    Profiles of every scale with step signature n0 L, n1 m, n2 s.

    Scales are generated as all necklaces or as MOS substitution scales,
    filtered, then ordered by the complexity of their least complex guide
    frame. Scales without guide frames come last.

    Raises:
        InvalidInputError: On a negative count or unknown mode
        NumericRangeError: If the scale would be longer than MAX_SCALE_LENGTH
        AnalysisCancelledError: If the analysis is cancelled
    """
    signature = [n0, n1, n2]
    if any(c < 0 for c in signature):
        raise InvalidInputError(ErrorMessages.NEGATIVE_MULTIPLICITY.format(content=signature))
    _check_length(sum(signature))
    filters = filters or SignatureFilters()
    enumeration = _parse_mode(mode)

    scanned = 0
    kept: list[tuple[int, list[int], list[GuideFrame]]] = []
    for scale in candidate_scales(signature, enumeration):
        check_cancelled()
        scanned += 1
        if not _passes_word_filters(scale, filters):
            continue
        frames = guide_frames(scale)
        if not _passes_frame_filters(frames, filters):
            continue
        first = _first_frame(frames)
        rank = first.complexity if first is not None else MAX_SCALE_LENGTH + 1
        kept.append((rank, scale, frames))
    kept.sort(key=lambda item: item[0])
    logger.debug(
        "Signature %s (%s): %d scales, %d after filtering",
        signature,
        enumeration.value,
        scanned,
        len(kept),
    )

    return SignatureResult(
        step_signature=signature,
        mode=enumeration,
        filters=filters,
        scanned=scanned,
        profiles=[
            profile_word(scale, include_frames=False, frames=frames) for _, scale, frames in kept
        ],
    )
