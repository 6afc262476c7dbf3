"""
Categories Tool

List registry categories with file counts and descriptions.
"""

from typing import Any

from openclaw_mcp.config import describe_category
from openclaw_mcp.mcp_types import ToolInput, ToolName
from openclaw_mcp.registry import IndexDocument
from openclaw_mcp.tools.base import BaseTool


def format_categories(index: IndexDocument) -> str:
    blocks = []
    for category, count in index.category_counts().items():
        plural = "" if count == 1 else "s"
        blocks.append(f"**{category}** ({count} file{plural})\n  {describe_category(category)}")

    return (
        f"OpenClaw Registry - {index.count} total files\n\n"
        + "\n\n".join(blocks)
        + "\n\nUse search_registry with category filter to browse files in any category."
    )


class ListCategoriesTool(BaseTool):
    """List every declared category in index order."""

    @property
    def toolName(self) -> ToolName:
        return ToolName.LIST_CATEGORIES

    @property
    def description(self) -> str:
        return (
            "List all categories in the OpenClaw registry with file counts and descriptions. "
            "Use this to understand what types of instruction files are available."
        )

    @property
    def inputSchema(self) -> dict[str, Any]:
        return {"type": "object", "properties": {}}

    async def run(self, input: ToolInput) -> str:
        index = await self.registry.fetch_index()
        return format_categories(index)
