"""
Profile models - the wire format of analysis results.

Count vectors are serialized densely as [L, m, s] counts.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from chuk_mcp_ternary.constants import Chirality, Constraint, EnumerationMode
from chuk_mcp_ternary.guide.frames import GuideFrame
from chuk_mcp_ternary.lattice.parallelogram import QuasiParallelogram


class GuideResult(BaseModel):
    """A serialized guide frame."""

    gs: list[list[int]] = Field(..., description="Generators as [L, m, s] counts")
    aggregate: list[int] = Field(..., description="Sum of the generators")
    offset_chord: list[list[int]] = Field(..., description="Offsets of the interleaved chains")
    multiplicity: int = Field(..., ge=1, description="Number of interleaved chains")
    complexity: int = Field(..., ge=0, description="GS length times multiplicity")

    model_config = {"frozen": True}

    @classmethod
    def from_frame(cls, frame: GuideFrame) -> GuideResult:
        """Serialize a guide frame."""
        return cls(
            gs=[v.to_triple() for v in frame.gs],
            aggregate=frame.aggregate.to_triple(),
            offset_chord=[v.to_triple() for v in frame.offset_chord],
            multiplicity=frame.multiplicity,
            complexity=frame.complexity,
        )


class ParallelogramShape(BaseModel):
    """Serialized quasi-parallelogram descriptor."""

    row_count: int = Field(..., ge=1)
    full_row_len: int = Field(..., ge=1)
    first_row_len: int = Field(..., ge=1)
    last_row_len: int = Field(..., ge=1)

    model_config = {"frozen": True}

    @classmethod
    def from_descriptor(cls, shape: QuasiParallelogram) -> ParallelogramShape:
        return cls(
            row_count=shape.row_count,
            full_row_len=shape.full_row_len,
            first_row_len=shape.first_row_len,
            last_row_len=shape.last_row_len,
        )


class ScaleProfile(BaseModel):
    """
    Everything known about one scale word.

    `structure` is the guide frame that supplied `lattice_basis`; the two
    are present together or not at all.
    """

    canonical_word: str = Field(..., description="Brightest mode")
    reversed_canonical: str = Field(..., description="Brightest mode of the reversed word")
    step_signature: list[int] = Field(..., description="Counts of L, m and s")
    chirality: Chirality = Field(..., description="Left, Right or Achiral")
    monotone_lm: bool = Field(..., description="Equating L = m gives a MOS")
    monotone_ms: bool = Field(..., description="Equating m = s gives a MOS")
    monotone_s0: bool = Field(..., description="Deleting s gives a MOS")
    mos_subst_L_ms: bool = Field(..., description="MOS substitution scale L (m s)")
    mos_subst_m_Ls: bool = Field(..., description="MOS substitution scale m (L s)")
    mos_subst_s_Lm: bool = Field(..., description="MOS substitution scale s (L m)")
    max_variety: int = Field(..., ge=0, description="Maximum variety")
    structure: GuideResult | None = Field(None, description="Guide frame of the lattice basis")
    lattice_basis: list[list[int]] | None = Field(None, description="Unimodular basis (v, w)")
    pitch_classes: list[tuple[int, int]] | None = Field(
        None, description="Pitch classes on the (v, w) lattice"
    )
    quasi_parallelogram: ParallelogramShape | None = Field(
        None, description="Quasi-parallelogram shape of the lattice scale"
    )
    guide_frames: list[GuideResult] = Field(
        default_factory=list, description="All guide frames, least complex first"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_structure_and_basis(self) -> ScaleProfile:
        """Structure and lattice basis come as a pair."""
        if (self.structure is None) != (self.lattice_basis is None):
            raise ValueError("structure and lattice_basis must be present together")
        return self


class SignatureFilters(BaseModel):
    """
    Filters applied to the scales of a step signature.

    A numeric bound of 0 disables that filter. Guide-sequence length and
    complexity are read from a scale's least complex guide frame; scales
    without guide frames fail those filters.
    """

    lm: bool = Field(False, description="Require monotone L = m")
    ms: bool = Field(False, description="Require monotone m = s")
    s0: bool = Field(False, description="Require monotone s = 0")
    ggs_len: int = Field(0, ge=0, description="Bound on guided GS length")
    ggs_len_constraint: Constraint = Field(Constraint.EXACTLY)
    complexity: int = Field(0, ge=0, description="Bound on guide frame complexity")
    complexity_constraint: Constraint = Field(Constraint.EXACTLY)
    mv: int = Field(0, ge=0, description="Bound on maximum variety")
    mv_constraint: Constraint = Field(Constraint.EXACTLY)

    @field_validator("ggs_len_constraint", "complexity_constraint", "mv_constraint", mode="before")
    @classmethod
    def normalize_constraint(cls, v: object) -> object:
        """Accept 'at most' and 'at-most' spellings."""
        if isinstance(v, str):
            return v.strip().lower().replace(" ", "_").replace("-", "_")
        return v


class SignatureResult(BaseModel):
    """Profiles of every scale with a step signature that passes the filters."""

    step_signature: list[int] = Field(..., description="Counts of L, m and s")
    mode: EnumerationMode = Field(..., description="How candidate scales were generated")
    filters: SignatureFilters = Field(default_factory=SignatureFilters)
    scanned: int = Field(0, ge=0, description="Number of candidate scales")
    profiles: list[ScaleProfile] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.profiles)
