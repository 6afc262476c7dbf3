"""
Featured Tool

Return the curated, featured instruction files.
"""

from typing import Any, List

from openclaw_mcp.mcp_types import ToolInput, ToolName
from openclaw_mcp.registry import Entry
from openclaw_mcp.tools.base import BaseTool
from openclaw_mcp.tools.search import format_quality


def format_featured(featured: List[Entry]) -> str:
    summaries = "\n\n".join(
        f"**{e.title}** [{e.category}]\n"
        f"slug: {e.slug} | quality: {format_quality(e)}\n"
        f"tags: {', '.join(e.tags)}"
        for e in featured
    )
    return (
        f"Featured files ({len(featured)} total, quality score 90+):\n\n{summaries}\n\n"
        "Use get_instruction with any slug to fetch the full file."
    )


class FeaturedTool(BaseTool):
    """Featured entries only; no input."""

    @property
    def toolName(self) -> ToolName:
        return ToolName.GET_FEATURED

    @property
    def description(self) -> str:
        return (
            "Return all featured instruction files (quality score 90+). These are verified, "
            "complete, and production-tested. Good starting point for finding high-quality "
            "instructions."
        )

    @property
    def inputSchema(self) -> dict[str, Any]:
        return {"type": "object", "properties": {}}

    async def run(self, input: ToolInput) -> str:
        index = await self.registry.fetch_index()
        return format_featured(index.featured)
