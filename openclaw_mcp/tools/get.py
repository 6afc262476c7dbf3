"""
Get Tool

Fetch one instruction file from the registry, whole or just its
deployable instruction.
"""

from typing import Any

from openclaw_mcp.mcp_types import GetInstructionArgs, ToolInput, ToolName
from openclaw_mcp.registry import extract_instruction
from openclaw_mcp.tools.base import BaseTool


class GetTool(BaseTool):
    """
    Fetch a registry document by slug.

    With instruction_only, the fenced block under "## The Instruction" is
    returned instead of the whole file. When nothing can be extracted the
    full file comes back with a notice in front, not an error.
    """

    @property
    def toolName(self) -> ToolName:
        return ToolName.GET_INSTRUCTION

    @property
    def description(self) -> str:
        return (
            "Fetch a complete instruction file from the OpenClaw registry by slug. Returns the "
            "full Markdown file including YAML frontmatter, purpose, usage notes, and the "
            "deployable instruction text. The instruction is in the \"## The Instruction\" section."
        )

    @property
    def inputSchema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "slug": {
                    "type": "string",
                    "description": "The slug of the instruction file (e.g. \"tier1-customer-support\", "
                                   "\"structured-web-research\"). Get slugs from search_registry."
                },
                "instruction_only": {
                    "type": "boolean",
                    "description": "If true, return only the deployable instruction text (extracted from "
                                   "the fenced code block). If false, return the full Markdown file. "
                                   "Default: false."
                }
            },
            "required": ["slug"]
        }

    async def run(self, input: ToolInput) -> str:
        args = GetInstructionArgs.from_input(input)
        markdown = await self.registry.fetch_document(args.slug)

        if not args.instruction_only:
            return markdown

        instruction = extract_instruction(markdown)
        if instruction is None:
            self.logger.warning(f"No instruction section found in {args.slug}")
            return f"Could not extract instruction from {args.slug}. Returning full file instead:\n\n{markdown}"

        return (
            f"# Instruction: {args.slug}\n\n"
            f"```\n{instruction}\n```\n\n"
            f"Fetched from: {self.registry.document_url(args.slug)}"
        )
