"""
Enumeration tools - MCP tools for scales of a given step signature.

Tools for filtered signature analysis, raw necklace listing, and MOS
substitution scale listing.
"""

from __future__ import annotations

import json
import logging
from itertools import islice
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from chuk_mcp_ternary.analysis import analyze_signature, format_word
from chuk_mcp_ternary.constants import (
    MAX_SCALE_LENGTH,
    ConstraintName,
    EnumerationModeName,
    ErrorMessages,
)
from chuk_mcp_ternary.core.necklaces import iter_necklaces_fixed_content, necklace_count
from chuk_mcp_ternary.core.words import mos_substitution_scales
from chuk_mcp_ternary.errors import InvalidInputError, NumericRangeError, TernaryError
from chuk_mcp_ternary.models.profile import SignatureFilters
from chuk_mcp_ternary.tools.runner import AnalysisTimeoutError, run_bounded

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _list_necklaces(content: list[int], limit: int) -> dict[str, Any]:
    words = list(islice(iter_necklaces_fixed_content(content), limit))
    return {
        "words": [format_word(w) for w in words],
        "total": necklace_count(content),
    }


def _list_mos_substitution(n_l: int, n_m: int, n_s: int) -> list[str]:
    signature = [n_l, n_m, n_s]
    if any(c < 0 for c in signature):
        raise InvalidInputError(ErrorMessages.NEGATIVE_MULTIPLICITY.format(content=signature))
    if sum(signature) > MAX_SCALE_LENGTH:
        raise NumericRangeError(
            ErrorMessages.SCALE_TOO_LONG.format(length=sum(signature), maximum=MAX_SCALE_LENGTH)
        )
    return [format_word(w) for w in mos_substitution_scales(signature)]


def register_enumeration_tools(mcp: ChukMCPServer, timeout: float) -> dict[str, Any]:
    """
    Register step signature enumeration tools with the MCP server.

    Args:
        mcp: The MCP server instance
        timeout: Time budget for each enumeration, in seconds

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def ternary_analyze_signature(
        n_l: int,
        n_m: int,
        n_s: int,
        mode: EnumerationModeName = "all_necklaces",
        lm: bool = False,
        ms: bool = False,
        s0: bool = False,
        ggs_len: int = 0,
        ggs_len_constraint: ConstraintName = "exactly",
        complexity: int = 0,
        complexity_constraint: ConstraintName = "exactly",
        mv: int = 0,
        mv_constraint: ConstraintName = "exactly",
        limit: int = 50,
    ) -> str:
        """
        Analyze every scale with a step signature.

        Generates all necklaces (or only MOS substitution scales) with
        n_l L steps, n_m m steps and n_s s steps, keeps those passing the
        filters, and returns their profiles ordered by guide frame
        complexity.

        Args:
            n_l: Number of L steps
            n_m: Number of m steps
            n_s: Number of s steps
            mode: 'all_necklaces' or 'mos_substitution'
            lm: Require the scale to be a MOS when L = m
            ms: Require the scale to be a MOS when m = s
            s0: Require the scale to be a MOS when s is deleted
            ggs_len: Guided generator sequence length bound (0 = off)
            ggs_len_constraint: 'exactly' or 'at_most'
            complexity: Guide frame complexity bound (0 = off)
            complexity_constraint: 'exactly' or 'at_most'
            mv: Maximum variety bound (0 = off)
            mv_constraint: 'exactly' or 'at_most'
            limit: Maximum number of profiles to return

        Returns:
            JSON string with matching scale profiles

        Example:
            ternary_analyze_signature(n_l=5, n_m=2, n_s=2, mv=3, mv_constraint="at_most")
        """
        try:
            filters = SignatureFilters(
                lm=lm,
                ms=ms,
                s0=s0,
                ggs_len=ggs_len,
                ggs_len_constraint=ggs_len_constraint,
                complexity=complexity,
                complexity_constraint=complexity_constraint,
                mv=mv,
                mv_constraint=mv_constraint,
            )
            result = await run_bounded(timeout, analyze_signature, n_l, n_m, n_s, filters, mode)

            return json.dumps(
                {
                    "status": "success",
                    "step_signature": result.step_signature,
                    "mode": result.mode.value,
                    "scanned": result.scanned,
                    "count": result.count,
                    "truncated": result.count > limit,
                    "profiles": [p.model_dump(mode="json") for p in result.profiles[:limit]],
                }
            )
        except (TernaryError, ValidationError, AnalysisTimeoutError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to analyze signature")
            return json.dumps({"status": "error", "message": str(e)})

    tools["ternary_analyze_signature"] = ternary_analyze_signature

    @mcp.tool  # type: ignore[arg-type]
    async def ternary_necklaces(content: list[int], limit: int = 200) -> str:
        """
        List necklaces with fixed letter counts.

        Each necklace is given by its least rotation. Works for any
        number of letters, not just three.

        Args:
            content: Count of each letter, largest step first (e.g. [5, 2, 2])
            limit: Maximum number of words to return

        Returns:
            JSON string with necklace words and the total number of necklaces

        Example:
            ternary_necklaces(content=[2, 1, 3])
        """
        try:
            result = await run_bounded(timeout, _list_necklaces, list(content), limit)

            return json.dumps(
                {
                    "status": "success",
                    "content": list(content),
                    "words": result["words"],
                    "count": len(result["words"]),
                    "total": result["total"],
                    "truncated": result["total"] > len(result["words"]),
                }
            )
        except (TernaryError, AnalysisTimeoutError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to list necklaces")
            return json.dumps({"status": "error", "message": str(e)})

    tools["ternary_necklaces"] = ternary_necklaces

    @mcp.tool  # type: ignore[arg-type]
    async def ternary_mos_substitution(n_l: int, n_m: int, n_s: int) -> str:
        """
        List MOS substitution scales with a step signature.

        A MOS substitution scale arises from a two-step MOS by filling the
        slots of one step with the modes of another MOS.

        Args:
            n_l: Number of L steps
            n_m: Number of m steps
            n_s: Number of s steps

        Returns:
            JSON string with scale words in brightest mode

        Example:
            ternary_mos_substitution(n_l=5, n_m=2, n_s=3)
        """
        try:
            words = await run_bounded(timeout, _list_mos_substitution, n_l, n_m, n_s)

            return json.dumps(
                {
                    "status": "success",
                    "step_signature": [n_l, n_m, n_s],
                    "words": words,
                    "count": len(words),
                }
            )
        except (TernaryError, AnalysisTimeoutError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to list MOS substitution scales")
            return json.dumps({"status": "error", "message": str(e)})

    tools["ternary_mos_substitution"] = ternary_mos_substitution

    return tools
