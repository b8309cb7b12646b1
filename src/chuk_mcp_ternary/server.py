#!/usr/bin/env python3
"""
Entry point for the CHUK Ternary MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http).
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Ternary MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Time budget per analysis in seconds (default: 6)",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.timeout is not None:
        if args.timeout <= 0:
            parser.error("--timeout must be positive")
        os.environ["CHUK_TERNARY_TIMEOUT"] = str(args.timeout)

    # Import after argument parsing so the environment is in place
    from chuk_mcp_ternary.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Ternary MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Ternary MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
