"""
OpenClaw MCP Server
Exposes the OpenClaw agent instruction registry as MCP tools.
"""

__version__ = "1.0.0"
__package_name__ = "openclaw"
