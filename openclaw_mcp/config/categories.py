"""
Registry categories.

Static descriptions shown by list_categories. The live index decides which
categories exist; a category missing here just gets an empty description.
"""

from types import MappingProxyType

CATEGORY_DESCRIPTIONS = MappingProxyType({
    "system-prompts": "Full agent identity and behavior definitions - the complete personality and rules for an agent",
    "skills": "Scoped capability modules for specific tasks - drop into any agent to add a capability",
    "workflows": "Multi-step sequential or conditional process instructions",
    "tool-definitions": "Function schemas, API patterns, and tool usage instructions",
    "domain-packs": "Deep field context - industry knowledge, terminology, and domain standards",
    "safety-filters": "Output validation, content filtering, and harm detection patterns",
    "orchestration": "Multi-agent coordination and handoff protocols",
})

# Allowed values for the search_registry category filter
CATEGORIES = tuple(CATEGORY_DESCRIPTIONS)


def describe_category(category: str) -> str:
    return CATEGORY_DESCRIPTIONS.get(category, "")
