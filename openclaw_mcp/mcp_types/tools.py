"""
Tool-related types
Types specific to tool implementations - follows MCP specification.
"""

from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field
from enum import Enum


class ToolName(Enum):
    """The four tools this server exposes, keyed by wire name."""
    SEARCH_REGISTRY = "search_registry"
    GET_INSTRUCTION = "get_instruction"
    LIST_CATEGORIES = "list_categories"
    GET_FEATURED = "get_featured"
    
    @classmethod
    def parse(cls, name: str) -> Optional["ToolName"]:
        """Look up a wire name; None when it is not one of ours."""
        try:
            return cls(name)
        except ValueError:
            return None


class MCPErrorCode(Enum):
    """MCP Error codes - follows MCP specification."""
    TOOL_NOT_FOUND = "TOOL_NOT_FOUND"
    INVALID_INPUT = "INVALID_INPUT"
    TOOL_EXECUTION_ERROR = "TOOL_EXECUTION_ERROR"


@dataclass
class TextContent:
    """Text content for tool results - follows MCP specification."""
    type: str
    text: str


class ToolInput(dict):
    """Raw tool call arguments, keyed by schema property name."""


@dataclass
class ToolContext:
    """Tool execution context."""
    requestId: str
    timestamp: float
    toolName: Optional[str] = None


@dataclass
class ToolResult:
    """Tool execution result - follows MCP specification."""
    content: List[TextContent]
    isError: bool = False
    
    @property
    def text(self) -> str:
        return "\n".join(c.text for c in self.content)


@dataclass
class ToolError:
    """Tool error information."""
    code: MCPErrorCode
    message: str
    details: Optional[str] = None


@dataclass
class ToolHandlerResult:
    """Tool handler result."""
    success: bool
    result: Optional[ToolResult] = None
    error: Optional[ToolError] = None


@dataclass
class ToolValidationError:
    """Tool validation error."""
    field: str
    message: str
    code: str


@dataclass
class ToolValidationResult:
    """Tool validation result."""
    valid: bool
    errors: List[ToolValidationError] = field(default_factory=list)
    
    @property
    def message(self) -> str:
        return "; ".join(e.message for e in self.errors)


# Typed arguments, one record per tool that takes input

@dataclass(frozen=True)
class SearchRegistryArgs:
    q: Optional[str] = None
    category: Optional[str] = None
    min_quality: Optional[float] = None
    featured_only: bool = False
    
    @classmethod
    def from_input(cls, input: Dict[str, Any]) -> "SearchRegistryArgs":
        return cls(
            q=input.get("q"),
            category=input.get("category"),
            min_quality=input.get("min_quality"),
            featured_only=input.get("featured_only") is True,
        )


@dataclass(frozen=True)
class GetInstructionArgs:
    slug: str
    instruction_only: bool = False
    
    @classmethod
    def from_input(cls, input: Dict[str, Any]) -> "GetInstructionArgs":
        return cls(
            slug=input["slug"],
            instruction_only=input.get("instruction_only") is True,
        )
