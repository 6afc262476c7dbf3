"""
Tool Registry
Manages tool registration, discovery, and execution.
"""

from typing import Dict, Any, List, Optional

from mcp.types import Tool as MCPTool

from openclaw_mcp.mcp_types import (
    ToolName, ToolContext, ToolError, ToolHandlerResult, MCPErrorCode
)
from openclaw_mcp.tools.base import BaseTool


class ToolRegistry:
    """Tool Registry Implementation."""

    def __init__(self, logger):
        self.logger = logger
        self.tools: Dict[ToolName, BaseTool] = {}

    def register(self, tool: BaseTool) -> None:
        """Register a tool with the registry."""
        if tool.toolName in self.tools:
            raise ValueError(f"Tool {tool.name} is already registered")

        self.tools[tool.toolName] = tool
        self.logger.info(f"Tool registered: {tool.name}")

    def get(self, toolName: ToolName) -> Optional[BaseTool]:
        """Get a tool by identifier."""
        return self.tools.get(toolName)

    def listTools(self) -> List[BaseTool]:
        """List all registered tools, in registration order."""
        return list(self.tools.values())

    def hasTool(self, toolName: ToolName) -> bool:
        """Check if a tool is registered."""
        return toolName in self.tools

    async def execute(self, toolName: ToolName, input: Dict[str, Any], context: ToolContext) -> ToolHandlerResult:
        """
        Execute a tool with input and context.

        Never raises for tool failures: exceptions from the tool come back
        as an unsuccessful result carrying the exception message.
        """
        tool = self.get(toolName)
        if not tool:
            return ToolHandlerResult(
                success=False,
                error=ToolError(
                    code=MCPErrorCode.TOOL_NOT_FOUND,
                    message=f"Unknown tool: {toolName.value}"
                )
            )

        try:
            return await tool.execute(input, context)
        except Exception as error:
            self.logger.error(f"Tool {tool.name} failed: {error}")
            return ToolHandlerResult(
                success=False,
                error=ToolError(
                    code=MCPErrorCode.TOOL_EXECUTION_ERROR,
                    message=str(error) or type(error).__name__,
                    details=type(error).__name__
                )
            )

    def getToolSchemas(self) -> List[MCPTool]:
        """Get tool schemas for MCP protocol - returns proper MCP Tool objects."""
        return [
            MCPTool(
                name=tool.name,
                description=tool.description,
                inputSchema=tool.inputSchema
            )
            for tool in self.listTools()
        ]
