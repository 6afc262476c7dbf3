"""
Tools Module

The 4 MCP tools for OpenClaw:
- search_registry: Search by keyword, category, quality score, featured flag
- get_instruction: Fetch an instruction file by slug
- list_categories: List all categories with counts
- get_featured: Return all featured files
"""

from .base import BaseTool
from .registry import ToolRegistry

# The 4 tools
from .search import SearchTool
from .get import GetTool
from .categories import ListCategoriesTool
from .featured import FeaturedTool

__all__ = [
    "BaseTool",
    "ToolRegistry",
    # The 4 tools
    "SearchTool",
    "GetTool",
    "ListCategoriesTool",
    "FeaturedTool",
]
