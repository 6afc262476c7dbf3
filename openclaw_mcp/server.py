"""
OpenClaw MCP Server
Exposes the OpenClaw registry as four MCP tools over stdio.
"""

import time
import uuid
from typing import Any, Dict, Optional

from mcp import types
from mcp.server import Server
from mcp.server.lowlevel import NotificationOptions
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server

from openclaw_mcp import __version__, __package_name__
from openclaw_mcp.config import Config, ConfigManager
from openclaw_mcp.mcp_types import (
    TextContent, ToolContext, ToolInput, ToolName, ToolResult
)
from openclaw_mcp.registry import RegistryClient
from openclaw_mcp.tools import (
    FeaturedTool, GetTool, ListCategoriesTool, SearchTool, ToolRegistry
)
from openclaw_mcp.utils import Logger


def error_result(message: str) -> ToolResult:
    return ToolResult(content=[TextContent(type="text", text=message)], isError=True)


class OpenClawMCPServer:
    """Main MCP Server for OpenClaw."""

    def __init__(self, config: Optional[Config] = None, registry: Optional[RegistryClient] = None):
        self.config = config or ConfigManager.get_instance().get()

        # Initialize MCP Server
        self.server = Server(__package_name__, version=__version__)

        # Initialize logger
        self.logger = Logger(name=__package_name__, level=self.config.log_level)

        self.registry = registry or RegistryClient(self.config.registry_url, self.logger)

        # Initialize tool registry
        self.tool_registry = ToolRegistry(self.logger)
        self._register_tools()

        # Set up MCP protocol handlers
        self._setup_handlers()

    def _register_tools(self):
        """Register the 4 registry tools."""
        for tool_cls in (SearchTool, GetTool, ListCategoriesTool, FeaturedTool):
            self.tool_registry.register(tool_cls(self.logger, self.registry))

        self.logger.info(
            f"Registered {len(self.tool_registry.listTools())} tools against {self.registry.base_url}"
        )

    def _setup_handlers(self):
        """Set up MCP protocol request handlers using decorators."""

        @self.server.list_tools()
        async def handle_list_tools() -> list[types.Tool]:
            """List available tools."""
            return self.tool_registry.getToolSchemas()

        # Arguments are validated by the tools so failures share one envelope
        @self.server.call_tool(validate_input=False)
        async def handle_call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> types.CallToolResult:
            """Execute a tool - MCP tools/call handler."""
            result = await self.dispatch(name, arguments)
            return types.CallToolResult(
                content=[types.TextContent(type="text", text=c.text) for c in result.content],
                isError=result.isError,
            )

    async def dispatch(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        """
        Route one tool call to its tool and wrap the outcome.

        Unknown names and tool failures come back as results with
        ``isError`` set; this method does not raise.
        """
        tool_name = ToolName.parse(name)
        if tool_name is None or not self.tool_registry.hasTool(tool_name):
            self.logger.warning(f"Unknown tool requested: {name}")
            return error_result(f"Unknown tool: {name}")

        context = ToolContext(
            requestId=f"req_{uuid.uuid4().hex[:12]}",
            timestamp=time.time(),
            toolName=name
        )
        self.logger.debug(f"Dispatching {name}", extra={'requestId': context.requestId})

        try:
            handled = await self.tool_registry.execute(tool_name, ToolInput(**(arguments or {})), context)
        except Exception as e:
            self.logger.error(f"Tool execution error: {e}", exc_info=True)
            return error_result(f"Error: {e}")

        if handled.success and handled.result:
            return handled.result

        message = handled.error.message if handled.error else "Unknown error"
        return error_result(f"Error: {message}")

    def initialization_options(self) -> InitializationOptions:
        return InitializationOptions(
            server_name=__package_name__,
            server_version=__version__,
            capabilities=self.server.get_capabilities(
                notification_options=NotificationOptions(),
                experimental_capabilities={}
            ),
        )

    async def start(self):
        """Serve MCP over stdin/stdout until the host disconnects."""
        try:
            async with stdio_server() as (read_stream, write_stream):
                await self.server.run(
                    read_stream,
                    write_stream,
                    self.initialization_options(),
                )
        except Exception as e:
            self.logger.error(f"Server stopped with error: {e}")
            raise


async def run_stdio(config: Optional[Config] = None):
    """Run in stdio mode."""
    server = OpenClawMCPServer(config)
    await server.start()
