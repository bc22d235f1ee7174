#!/usr/bin/env python3
"""
Command line entry point for the Tonality MCP Server.

Serves the theory tools over stdio (for MCP clients) or http. Project
instruments are read from ./instruments unless --instruments points
somewhere else; they override the built-in guitar and ukulele.
"""

import argparse
import asyncio
import logging
import os
from pathlib import Path

from tonality.constants import INSTRUMENTS_DIR_ENV

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tonality",
        description="Tonality music theory MCP Server",
    )
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
        help="HTTP port (http transport only)",
    )
    parser.add_argument(
        "--instruments",
        type=Path,
        default=None,
        metavar="DIR",
        help="Directory of instrument YAML files (default: ./instruments)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def configure(args: argparse.Namespace) -> None:
    """Apply logging and instrument settings before the server module loads."""
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.instruments is not None:
        instruments_dir = args.instruments.expanduser().resolve()
        if not instruments_dir.is_dir():
            logger.warning(f"Instruments directory does not exist: {instruments_dir}")
        os.environ[INSTRUMENTS_DIR_ENV] = str(instruments_dir)


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure(args)

    # The server reads its settings when imported
    from tonality.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting Tonality MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting Tonality MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
