"""
Pydantic models for analysis results.

This module provides:
- GuideResult: Serialized guide frame
- ParallelogramShape: Serialized quasi-parallelogram descriptor
- ScaleProfile: Full analysis of one scale word
- SignatureFilters: Filters for step-signature searches
- SignatureResult: Filtered profiles of a step signature
- CatalogScale: A named scale from the catalog
"""

from chuk_mcp_ternary.models.catalog import CatalogScale, CatalogScaleMetadata
from chuk_mcp_ternary.models.profile import (
    GuideResult,
    ParallelogramShape,
    ScaleProfile,
    SignatureFilters,
    SignatureResult,
)

__all__ = [
    "CatalogScale",
    "CatalogScaleMetadata",
    "GuideResult",
    "ParallelogramShape",
    "ScaleProfile",
    "SignatureFilters",
    "SignatureResult",
]
