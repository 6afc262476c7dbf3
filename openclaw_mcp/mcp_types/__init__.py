"""
MCP Types Module
Types and dataclasses for the MCP server implementation.
"""

from .tools import (
    # Enums
    ToolName,
    MCPErrorCode,
    
    # Core types
    TextContent,
    ToolInput,
    ToolContext,
    ToolResult,
    ToolError,
    ToolHandlerResult,
    
    # Validation
    ToolValidationError,
    ToolValidationResult,
    
    # Arguments
    SearchRegistryArgs,
    GetInstructionArgs,
)

__all__ = [
    # Enums
    "ToolName",
    "MCPErrorCode",
    
    # Core types
    "TextContent",
    "ToolInput",
    "ToolContext",
    "ToolResult",
    "ToolError",
    "ToolHandlerResult",
    
    # Validation
    "ToolValidationError",
    "ToolValidationResult",
    
    # Arguments
    "SearchRegistryArgs",
    "GetInstructionArgs",
]
