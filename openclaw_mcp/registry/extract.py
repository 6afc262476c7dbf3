"""
Instruction Extraction

Pulls the deployable instruction text out of a registry document.
"""

import re
from typing import Optional

INSTRUCTION_HEADING = "## The Instruction"

# First fenced block anywhere after the heading; blocks before it are ignored.
_FENCED_AFTER_HEADING = re.compile(
    re.escape(INSTRUCTION_HEADING) + r"\s*\n.*?```\w*\n(.*?)```",
    re.DOTALL,
)


def extract_instruction(markdown: str) -> Optional[str]:
    """
    Return the instruction text of a document, or None.
    
    Tries the fenced block under "## The Instruction" first, then falls
    back to everything after the heading.
    """
    match = _FENCED_AFTER_HEADING.search(markdown)
    if match:
        return match.group(1).strip() or None
    
    # Text between the first heading and any repeat of it
    parts = markdown.split(INSTRUCTION_HEADING)
    if len(parts) > 1:
        return parts[1].strip() or None
    
    return None
