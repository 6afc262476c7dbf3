"""
Search Tool

Find instruction files in the OpenClaw registry.
"""

from typing import Any, List, Sequence

from openclaw_mcp.config import CATEGORIES
from openclaw_mcp.mcp_types import SearchRegistryArgs, ToolInput, ToolName
from openclaw_mcp.registry import Entry, IndexDocument
from openclaw_mcp.tools.base import BaseTool


def filter_entries(entries: Sequence[Entry], args: SearchRegistryArgs) -> List[Entry]:
    """
    Apply the search filters in order: query, category, quality, featured.

    Every filter narrows the previous result, so a surviving entry satisfies
    all of the filters that were supplied.
    """
    results = list(entries)

    if args.q:
        results = [e for e in results if e.matches(args.q)]
    if args.category:
        results = [e for e in results if e.category == args.category]
    if args.min_quality is not None:
        results = [e for e in results if e.quality >= args.min_quality]
    if args.featured_only:
        results = [e for e in results if e.featured]

    return results


def format_quality(entry: Entry) -> str:
    score = entry.quality_score
    if isinstance(score, float) and score.is_integer():
        score = int(score)
    return f"{score if score is not None else '?'}/100"


def format_entry(entry: Entry) -> str:
    featured = " ★ featured" if entry.featured else ""
    return "\n".join([
        f"**{entry.title}**",
        f"slug: {entry.slug}",
        f"category: {entry.category}",
        f"quality: {format_quality(entry)}{featured}",
        f"tags: {', '.join(entry.tags)}",
        f"url: {entry.url}",
    ])


def format_results(index: IndexDocument, results: List[Entry]) -> str:
    if not results:
        return (
            "No results found for your query. Try broader terms or use list_categories "
            "to see what's available.\n\n"
            f"Registry has {index.count} total files across {len(index.categories)} categories."
        )

    plural = "" if len(results) == 1 else "s"
    listing = "\n\n---\n\n".join(format_entry(e) for e in results)
    return (
        f"Found {len(results)} result{plural}:\n\n{listing}\n\n"
        "Use get_instruction with the slug to fetch the full file."
    )


class SearchTool(BaseTool):
    """
    Search the registry index.

    Filters: keyword (title, slug, category, tags), category, minimum
    quality score and featured flag. The full match list is returned.
    """

    @property
    def toolName(self) -> ToolName:
        return ToolName.SEARCH_REGISTRY

    @property
    def description(self) -> str:
        return (
            "Search the OpenClaw agent instruction registry. Returns matching instruction files "
            "with metadata. Use this to find system prompts, skills, workflows, domain packs, "
            "safety filters, and orchestration patterns."
        )

    @property
    def inputSchema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "q": {
                    "type": "string",
                    "description": "Keyword search across title, tags, and slug. Optional."
                },
                "category": {
                    "type": "string",
                    "description": f"Filter by category. One of: {', '.join(CATEGORIES)}",
                    "enum": list(CATEGORIES)
                },
                "min_quality": {
                    "type": "number",
                    "description": "Minimum quality score (0-100). Recommended: 80 for production use.",
                    "minimum": 0,
                    "maximum": 100
                },
                "featured_only": {
                    "type": "boolean",
                    "description": "If true, return only featured (quality >= 90) files."
                }
            }
        }

    async def run(self, input: ToolInput) -> str:
        args = SearchRegistryArgs.from_input(input)
        index = await self.registry.fetch_index()
        results = filter_entries(index.entries, args)
        self.logger.debug(f"Search matched {len(results)} of {len(index.entries)} entries")
        return format_results(index, results)
