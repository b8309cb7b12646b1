"""
Catalog models - named scales shipped with the package or kept in a project.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_ternary.analysis.encoding import parse_word


class CatalogScale(BaseModel):
    """
    A named scale word.

    Example YAML:
        name: diasem
        word: LmLsLmLsL
        description: Diatonic with semitones split, right-handed
        aliases: [diasem-2sr]
        tags: [mos-substitution, monotone-mos]
    """

    schema_version: str = Field("scale/v1", alias="schema", description="Schema version")
    name: str = Field(..., description="Scale name")
    word: str = Field(..., description="Scale word in L/m/s letters or digits")
    description: str = Field("", description="Human-readable description")
    aliases: list[str] = Field(default_factory=list, description="Other names")
    tags: list[str] = Field(default_factory=list, description="Free-form tags")

    model_config = {"populate_by_name": True}

    @field_validator("word")
    @classmethod
    def validate_word(cls, v: str) -> str:
        """Ensure the word parses."""
        if not parse_word(v):
            raise ValueError("Scale word must not be empty")
        return v.strip()

    @property
    def letters(self) -> list[int]:
        return parse_word(self.word)


class CatalogScaleMetadata(BaseModel):
    """Summary of a catalog scale for listings."""

    name: str = Field(..., description="Scale name")
    word: str = Field(..., description="Scale word")
    description: str = Field("", description="Human-readable description")
    size: int = Field(..., ge=1, description="Number of steps")
    tags: list[str] = Field(default_factory=list, description="Free-form tags")
    path: str | None = Field(None, description="Path to the scale file")

    @classmethod
    def from_scale(cls, scale: CatalogScale, path: str | None = None) -> CatalogScaleMetadata:
        """Create metadata from a catalog scale."""
        return cls(
            name=scale.name,
            word=scale.word,
            description=scale.description,
            size=len(scale.letters),
            tags=list(scale.tags),
            path=path,
        )
