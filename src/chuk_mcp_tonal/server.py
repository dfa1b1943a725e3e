#!/usr/bin/env python3
"""
Command line entry point for chuk-mcp-tonal.

    chuk-mcp-tonal                      # serve over stdio
    chuk-mcp-tonal --transport http     # serve over http on --port
    chuk-mcp-tonal --list-tools         # print the tonal tools and exit
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Any, TextIO

logger = logging.getLogger("chuk_mcp_tonal")

DEFAULT_PORT = 8000


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chuk-mcp-tonal",
        description="Spelled pitch and interval arithmetic over MCP",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="How MCP clients connect (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_PORT,
        help=f"Port for the http transport (default: {DEFAULT_PORT})",
    )
    parser.add_argument(
        "--list-tools",
        action="store_true",
        help="Print the registered tonal tools and exit",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log rejected pitches and intervals",
    )
    return parser


def list_tools(tools: dict[str, Any], stream: TextIO | None = None) -> None:
    """Write one line per tool: its name and the first line of its docstring."""
    out = stream or sys.stdout
    for name in sorted(tools):
        doc = (getattr(tools[name], "__doc__", None) or "").strip()
        summary = doc.splitlines()[0] if doc else ""
        out.write(f"{name:28} {summary}".rstrip() + "\n")


def serve(mcp: Any, transport: str, port: int = DEFAULT_PORT) -> None:
    """Run the server on the chosen transport until the client disconnects."""
    if transport == "http":
        logger.info("Serving tonal tools over http on port %d", port)
        asyncio.run(mcp.run_http(port=port))
    else:
        logger.info("Serving tonal tools over stdio")
        asyncio.run(mcp.run_stdio())


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Tools register on import
    from chuk_mcp_tonal import async_server

    if args.list_tools:
        list_tools({**async_server.pitch_tools, **async_server.interval_tools})
        return

    serve(async_server.mcp, args.transport, args.port)


if __name__ == "__main__":
    main()
