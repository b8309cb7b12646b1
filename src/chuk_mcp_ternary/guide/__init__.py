"""
Guide frames - how a scale is generated by stacked intervals.

- Generator sequences: stacked k-steps and their guided GSes
- GuideFrame: a guided GS with the offset chord of its interleaved copies
"""

from chuk_mcp_ternary.guide.frames import GuideFrame, guide_frames, offset_of, try_all_variants
from chuk_mcp_ternary.guide.generators import (
    guided_gs_chains,
    guided_gs_list,
    guided_gs_list_for_subscale,
    guided_gs_list_of_len,
    interval_from_slice,
    stacked_step_class,
)

__all__ = [
    # Generators
    "interval_from_slice",
    "stacked_step_class",
    "guided_gs_chains",
    "guided_gs_list",
    "guided_gs_list_of_len",
    "guided_gs_list_for_subscale",
    # Frames
    "GuideFrame",
    "offset_of",
    "try_all_variants",
    "guide_frames",
]
