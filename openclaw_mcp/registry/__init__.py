"""
Registry Module
HTTP client, models and extraction for the OpenClaw registry.
"""

from .client import RegistryClient
from .errors import RegistryError, RegistryUnavailable, DocumentNotFound
from .extract import extract_instruction, INSTRUCTION_HEADING
from .models import Entry, IndexDocument

__all__ = [
    "RegistryClient",
    # Errors
    "RegistryError",
    "RegistryUnavailable",
    "DocumentNotFound",
    # Extraction
    "extract_instruction",
    "INSTRUCTION_HEADING",
    # Models
    "Entry",
    "IndexDocument",
]
