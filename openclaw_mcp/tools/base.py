"""
Base Tool Classes
Abstract base classes for tool implementations.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any

from openclaw_mcp.mcp_types import (
    ToolName, ToolInput, ToolResult, ToolError, ToolContext,
    ToolHandlerResult, ToolValidationResult, ToolValidationError,
    MCPErrorCode, TextContent
)
from openclaw_mcp.registry import RegistryClient
from openclaw_mcp.utils import Logger

_JSON_TYPES = {
    'string': (str,),
    'number': (int, float),
    'boolean': (bool,),
    'object': (dict,),
}


class BaseTool(ABC):
    """
    Abstract base class for all tool implementations.

    Subclasses describe themselves (name, description, input schema) and
    implement ``run``, which returns the result text. Registry failures
    raised from ``run`` are not caught here; the tool registry turns them
    into error results.
    """

    def __init__(self, logger: Logger, registry: RegistryClient):
        self.logger = logger
        self.registry = registry

    @property
    @abstractmethod
    def toolName(self) -> ToolName:
        """Tool identifier."""
        pass

    @property
    def name(self) -> str:
        """Wire name of the tool."""
        return self.toolName.value

    @property
    @abstractmethod
    def description(self) -> str:
        """Tool description."""
        pass

    @property
    @abstractmethod
    def inputSchema(self) -> Dict[str, Any]:
        """Tool input schema (JSON Schema)."""
        pass

    @abstractmethod
    async def run(self, input: ToolInput) -> str:
        """Produce the result text for validated input."""
        pass

    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        """Validate input, then run the tool."""
        validation = self.validateInput(input)
        if not validation.valid:
            error = ToolError(
                code=MCPErrorCode.INVALID_INPUT,
                message=validation.message
            )
            self.logExecution(context, success=False)
            return ToolHandlerResult(
                success=False,
                error=error,
                result=self.createErrorResult(error)
            )

        text = await self.run(input)
        self.logExecution(context, success=True)
        return ToolHandlerResult(
            success=True,
            result=self.createSuccessResult(text)
        )

    def validateInput(self, input: ToolInput) -> ToolValidationResult:
        """Validate tool input against schema."""
        errors = []

        # Check required fields
        required_fields = self.inputSchema.get('required', [])
        for field in required_fields:
            if input.get(field) is None or input.get(field) == "":
                errors.append(ToolValidationError(
                    field=field,
                    message=f"Required field '{field}' is missing",
                    code="MISSING_REQUIRED_FIELD"
                ))

        # Check field types and constraints; None means "not supplied"
        properties = self.inputSchema.get('properties', {})
        for field, value in input.items():
            if field not in properties or value is None:
                continue
            field_schema = properties[field]
            expected_type = field_schema.get('type')

            python_types = _JSON_TYPES.get(expected_type)
            # bool is an int subclass; keep it out of numbers
            wrong_type = python_types is not None and (
                not isinstance(value, python_types)
                or (expected_type == 'number' and isinstance(value, bool))
            )
            if wrong_type:
                errors.append(ToolValidationError(
                    field=field,
                    message=f"Field '{field}' must be a {expected_type}",
                    code="INVALID_TYPE"
                ))
                continue

            if 'enum' in field_schema and value not in field_schema['enum']:
                errors.append(ToolValidationError(
                    field=field,
                    message=f"Field '{field}' must be one of: {', '.join(field_schema['enum'])}",
                    code="INVALID_VALUE"
                ))
            if 'minimum' in field_schema and value < field_schema['minimum']:
                errors.append(ToolValidationError(
                    field=field,
                    message=f"Field '{field}' must be >= {field_schema['minimum']}",
                    code="OUT_OF_RANGE"
                ))
            if 'maximum' in field_schema and value > field_schema['maximum']:
                errors.append(ToolValidationError(
                    field=field,
                    message=f"Field '{field}' must be <= {field_schema['maximum']}",
                    code="OUT_OF_RANGE"
                ))

        return ToolValidationResult(
            valid=len(errors) == 0,
            errors=errors
        )

    def createSuccessResult(self, text: str) -> ToolResult:
        """Create a successful tool result - follows MCP specification."""
        return ToolResult(
            content=[TextContent(type="text", text=text)],
            isError=False
        )

    def createErrorResult(self, error: ToolError) -> ToolResult:
        """Create an error tool result - follows MCP specification."""
        return ToolResult(
            content=[TextContent(type="text", text=f"Error: {error.message}")],
            isError=True
        )

    def logExecution(self, context: ToolContext, success: bool):
        """Log tool execution."""
        self.logger.debug(f"Tool executed: {self.name}", extra={
            'tool': self.name,
            'success': success,
            'requestId': context.requestId
        })
