#!/usr/bin/env python3
"""
OpenClaw MCP CLI Entry Point

Starts the stdio MCP server. Register it with an MCP host, e.g.:

  {
    "mcpServers": {
      "openclaw": {
        "command": "openclaw-mcp"
      }
    }
  }
"""

import argparse
import asyncio
import sys

from openclaw_mcp import __version__, __package_name__
from openclaw_mcp.config import ConfigManager


def print_version():
    """Print version information."""
    print(f"{__package_name__}-mcp {__version__}")


async def main_async():
    """Load configuration and serve."""
    from openclaw_mcp.server import run_stdio

    config = ConfigManager.get_instance().load()
    await run_stdio(config)


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="openclaw-mcp",
        description="OpenClaw MCP Server - agent instruction registry tools over stdio",
    )
    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="Show version and exit"
    )

    args = parser.parse_args(argv)

    if args.version:
        print_version()
        sys.exit(0)

    try:
        asyncio.run(main_async())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
