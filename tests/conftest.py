"""
Shared pytest fixtures for OpenClaw MCP tests

Centralized fixtures for the registry index, a fake HTTP transport and a
mocked registry client, so tool and server tests never touch the network.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional
from unittest.mock import AsyncMock, Mock

import httpx
import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


BASE_URL = "https://registry.test"


# ============================================================================
# Sample registry data
# ============================================================================

def make_index_payload() -> Dict[str, Any]:
    """Index JSON as served by /registry/index.json."""
    return {
        "count": 5,
        "categories": ["system-prompts", "skills", "safety-filters", "orchestration"],
        "entries": [
            {
                "slug": "tier1-customer-support",
                "title": "Tier 1 Customer Support Agent",
                "category": "system-prompts",
                "tags": ["support", "customer-service"],
                "quality_score": 95,
                "featured": True,
                "url": f"{BASE_URL}/registry/tier1-customer-support.md",
            },
            {
                "slug": "structured-web-research",
                "title": "Structured Web Research",
                "category": "skills",
                "tags": ["research", "web"],
                "quality_score": 80,
                "url": f"{BASE_URL}/registry/structured-web-research.md",
            },
            {
                "slug": "pii-redaction",
                "title": "PII Redaction Filter",
                "category": "safety-filters",
                "tags": ["safety-filters", "privacy"],
                "quality_score": 79,
                "featured": False,
                "url": f"{BASE_URL}/registry/pii-redaction.md",
            },
            {
                "slug": "draft-handoff",
                "title": "Draft Handoff Protocol",
                "category": "orchestration",
                "url": f"{BASE_URL}/registry/draft-handoff.md",
            },
            {
                "slug": "legacy-entry",
                "title": "Legacy Entry",
                "category": "archived",
                "tags": ["old"],
                "quality_score": 92,
                "featured": True,
                "url": f"{BASE_URL}/registry/legacy-entry.md",
            },
        ],
    }


DOCUMENT = """---
title: Tier 1 Customer Support Agent
category: system-prompts
---

# Tier 1 Customer Support Agent

## Purpose

Handles first-line support.

```yaml
not: this one
```

## The Instruction

Paste the block below into your system prompt.

```text
You are a friendly support agent.
Always confirm the customer's issue first.
```

## Usage Notes

Works best with a knowledge base.
"""


# ============================================================================
# Base Fixtures
# ============================================================================

@pytest.fixture
def index_payload():
    return make_index_payload()


@pytest.fixture
def document():
    return DOCUMENT


@pytest.fixture
def index(index_payload):
    from openclaw_mcp.registry import IndexDocument
    return IndexDocument.from_dict(index_payload)


@pytest.fixture
def logger():
    """
    Standard mock logger for all tests.
    """
    from openclaw_mcp.utils.logger import Logger
    return Mock(spec=Logger)


@pytest.fixture
def mock_context():
    """
    Standard mock ToolContext for all tests.
    """
    from openclaw_mcp.mcp_types.tools import ToolContext

    return ToolContext(
        requestId='test_req_123',
        timestamp=1234567890.0,
        toolName=None
    )


@pytest.fixture
def mock_registry(index):
    """
    RegistryClient mock serving the sample index and DOCUMENT.

    Override per test, e.g. ``mock_registry.fetch_index.side_effect = ...``.
    """
    from openclaw_mcp.registry import RegistryClient

    registry = Mock(spec=RegistryClient)
    registry.base_url = BASE_URL
    registry.fetch_index = AsyncMock(return_value=index)
    registry.fetch_document = AsyncMock(return_value=DOCUMENT)
    registry.document_url = Mock(side_effect=lambda slug: f"{BASE_URL}/registry/{slug}.md")
    return registry


@pytest.fixture
def fake_http():
    """
    Build an httpx.AsyncClient answering from a route table.

    Usage:
        client = fake_http({"/registry/index.json": (200, {...})})
    Unlisted paths answer 404. Requested URLs are recorded on
    ``client.requested``.
    """
    def _build(routes: Dict[str, tuple], requested: Optional[list] = None):
        requested = requested if requested is not None else []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(str(request.url))
            status, body = routes.get(request.url.path, (404, "Not Found"))
            if isinstance(body, (dict, list)):
                return httpx.Response(status, json=body)
            return httpx.Response(status, text=body)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        client.requested = requested
        return client

    return _build
