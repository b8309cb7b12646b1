#!/usr/bin/env python3
"""
Async Ternary Scale MCP Server using chuk-mcp-server

This server provides MCP tools for analyzing ternary scales: cyclic words
over three step sizes L > m > s.

The server provides tools for:
- Profiling a scale word (brightest mode, chirality, MOS properties)
- Guide frames and the lattice shape of a scale
- Enumerating and filtering the scales of a step signature
- Discovering named scales from the library and project
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_ternary.catalog import ScaleCatalog
from chuk_mcp_ternary.constants import DEFAULT_TIMEOUT_SECONDS
from chuk_mcp_ternary.tools import (
    register_analysis_tools,
    register_catalog_tools,
    register_enumeration_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-ternary")

# Configuration from the environment
TIMEOUT = float(os.environ.get("CHUK_TERNARY_TIMEOUT", DEFAULT_TIMEOUT_SECONDS))

# Paths - use standard project structure
BASE_PATH = Path.cwd()
SCALES_DIR = Path(os.environ.get("CHUK_TERNARY_SCALES_DIR", BASE_PATH / "scales"))
SCALES_LIBRARY_PATH = Path(__file__).parent / "catalog" / "library"

# Create the catalog
scale_catalog = ScaleCatalog(
    library_path=SCALES_LIBRARY_PATH,
    project_path=SCALES_DIR,
)

# Register all tools
analysis_tools = register_analysis_tools(mcp, scale_catalog, TIMEOUT)
enumeration_tools = register_enumeration_tools(mcp, TIMEOUT)
catalog_tools = register_catalog_tools(mcp, scale_catalog, TIMEOUT)

# Export tool functions for direct access
ternary_analyze_word = analysis_tools["ternary_analyze_word"]
ternary_quasi_parallelogram = analysis_tools["ternary_quasi_parallelogram"]
ternary_guide_frames = analysis_tools["ternary_guide_frames"]

ternary_analyze_signature = enumeration_tools["ternary_analyze_signature"]
ternary_necklaces = enumeration_tools["ternary_necklaces"]
ternary_mos_substitution = enumeration_tools["ternary_mos_substitution"]

ternary_list_scales = catalog_tools["ternary_list_scales"]
ternary_describe_scale = catalog_tools["ternary_describe_scale"]

logger.info("CHUK Ternary MCP Server initialized")
logger.info(f"  Scales library: {SCALES_LIBRARY_PATH}")
logger.info(f"  Project scales dir: {SCALES_DIR}")
logger.info(f"  Time budget: {TIMEOUT}s")
