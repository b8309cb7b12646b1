"""
MCP tool implementations.

Tools are organized by domain:
- analysis - Profiles of a single scale word
- enumeration - Scales of a step signature
- catalog - Named scale discovery
"""

from chuk_mcp_ternary.tools.analysis import register_analysis_tools
from chuk_mcp_ternary.tools.catalog import register_catalog_tools
from chuk_mcp_ternary.tools.enumeration import register_enumeration_tools

__all__ = [
    "register_analysis_tools",
    "register_catalog_tools",
    "register_enumeration_tools",
]
