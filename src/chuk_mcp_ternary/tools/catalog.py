"""
Catalog tools - MCP tools for named scale discovery.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_ternary.analysis import profile_word
from chuk_mcp_ternary.catalog import ScaleCatalog
from chuk_mcp_ternary.constants import ErrorMessages
from chuk_mcp_ternary.errors import TernaryError
from chuk_mcp_ternary.tools.runner import AnalysisTimeoutError, run_bounded

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_catalog_tools(
    mcp: ChukMCPServer,
    catalog: ScaleCatalog,
    timeout: float,
) -> dict[str, Any]:
    """
    Register named scale tools with the MCP server.

    Args:
        mcp: The MCP server instance
        catalog: The scale catalog
        timeout: Time budget for profiling a scale, in seconds

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def ternary_list_scales() -> str:
        """
        List named scales.

        Returns all scales from the library and project with basic
        metadata.

        Returns:
            JSON string with list of scale summaries

        Example:
            ternary_list_scales()
        """
        try:
            scales = catalog.list_scales()

            return json.dumps(
                {
                    "status": "success",
                    "scales": [
                        {
                            "name": s.name,
                            "word": s.word,
                            "size": s.size,
                            "description": s.description,
                            "tags": s.tags,
                        }
                        for s in scales
                    ],
                    "count": len(scales),
                }
            )
        except Exception as e:
            logger.exception("Failed to list scales")
            return json.dumps({"status": "error", "message": str(e)})

    tools["ternary_list_scales"] = ternary_list_scales

    @mcp.tool  # type: ignore[arg-type]
    async def ternary_describe_scale(name: str) -> str:
        """
        Get a named scale together with its analysis.

        Args:
            name: Scale name or alias

        Returns:
            JSON string with the scale entry and its profile

        Example:
            ternary_describe_scale(name="diasem")
        """
        try:
            scale = catalog.get_scale(name)
            if scale is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.SCALE_NOT_FOUND.format(name=name)}
                )

            profile = await run_bounded(timeout, profile_word, scale.letters)

            return json.dumps(
                {
                    "status": "success",
                    "scale": {
                        "name": scale.name,
                        "word": scale.word,
                        "description": scale.description,
                        "aliases": scale.aliases,
                        "tags": scale.tags,
                    },
                    "profile": profile.model_dump(mode="json"),
                }
            )
        except (TernaryError, AnalysisTimeoutError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to describe scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["ternary_describe_scale"] = ternary_describe_scale

    return tools
