"""
Analysis tools - MCP tools for profiling a single scale word.

Tools for the full scale profile, the quasi-parallelogram shape of the
lattice scale, and the list of guide frames.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_ternary.analysis import analyze_word, format_word, quasi_parallelogram, read_word
from chuk_mcp_ternary.catalog import ScaleCatalog
from chuk_mcp_ternary.core.words import least_mode
from chuk_mcp_ternary.errors import TernaryError
from chuk_mcp_ternary.guide import guide_frames
from chuk_mcp_ternary.models.profile import GuideResult, ParallelogramShape
from chuk_mcp_ternary.tools.runner import AnalysisTimeoutError, run_bounded

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _frames_of(word: str) -> dict[str, Any]:
    letters, alphabet = read_word(word)
    brightest = least_mode(letters)
    return {
        "canonical_word": format_word(brightest, alphabet),
        "guide_frames": [
            GuideResult.from_frame(f).model_dump(mode="json") for f in guide_frames(brightest)
        ],
    }


def register_analysis_tools(
    mcp: ChukMCPServer,
    catalog: ScaleCatalog,
    timeout: float,
) -> dict[str, Any]:
    """
    Register scale word analysis tools with the MCP server.

    Args:
        mcp: The MCP server instance
        catalog: The scale catalog, used to name known scales
        timeout: Time budget for each analysis, in seconds

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def ternary_analyze_word(word: str, include_frames: bool = True) -> str:
        """
        Analyze a scale word.

        Returns the brightest mode, chirality, monotone-MOS and MOS
        substitution properties, maximum variety, guide frames, and the
        lattice basis with its quasi-parallelogram shape when the scale
        has one.

        Args:
            word: Scale word in L/m/s letters (e.g. 'LmLsLmLsL') or digits (e.g. '010201020')
            include_frames: Whether to list every guide frame

        Returns:
            JSON string with the scale profile

        Example:
            ternary_analyze_word(word="LmLsLmLsL")
        """
        try:
            profile = await run_bounded(timeout, analyze_word, word, include_frames)
            known = catalog.find_by_word(read_word(word)[0])

            return json.dumps(
                {
                    "status": "success",
                    "word": word.strip(),
                    "profile": profile.model_dump(mode="json"),
                    "known_as": [s.name for s in known],
                }
            )
        except (TernaryError, AnalysisTimeoutError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to analyze word")
            return json.dumps({"status": "error", "message": str(e)})

    tools["ternary_analyze_word"] = ternary_analyze_word

    @mcp.tool  # type: ignore[arg-type]
    async def ternary_quasi_parallelogram(word: str) -> str:
        """
        Check whether a scale's lattice scale is a quasi-parallelogram.

        The scale is projected onto the plane spanned by a unimodular
        basis taken from its guide frames. The shape is reported as row
        count and row lengths.

        Args:
            word: Scale word in L/m/s letters or digits

        Returns:
            JSON string with the shape, or is_quasi_parallelogram=false

        Example:
            ternary_quasi_parallelogram(word="LmLsLmLsLs")
        """
        try:
            shape = await run_bounded(timeout, quasi_parallelogram, word)

            return json.dumps(
                {
                    "status": "success",
                    "word": word.strip(),
                    "is_quasi_parallelogram": shape is not None,
                    "shape": (
                        ParallelogramShape.from_descriptor(shape).model_dump()
                        if shape is not None
                        else None
                    ),
                }
            )
        except (TernaryError, AnalysisTimeoutError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to classify quasi-parallelogram")
            return json.dumps({"status": "error", "message": str(e)})

    tools["ternary_quasi_parallelogram"] = ternary_quasi_parallelogram

    @mcp.tool  # type: ignore[arg-type]
    async def ternary_guide_frames(word: str) -> str:
        """
        List the guide frames of a scale word, least complex first.

        Args:
            word: Scale word in L/m/s letters or digits

        Returns:
            JSON string with guide frames (generators as [L, m, s] counts)

        Example:
            ternary_guide_frames(word="LLmLmLLs")
        """
        try:
            result = await run_bounded(timeout, _frames_of, word)

            return json.dumps(
                {
                    "status": "success",
                    "word": word.strip(),
                    **result,
                    "count": len(result["guide_frames"]),
                }
            )
        except (TernaryError, AnalysisTimeoutError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to list guide frames")
            return json.dumps({"status": "error", "message": str(e)})

    tools["ternary_guide_frames"] = ternary_guide_frames

    return tools
