"""
Registry Client
Read-only HTTP access to the OpenClaw registry.
"""

from typing import Optional

import httpx

from openclaw_mcp.registry.errors import DocumentNotFound, RegistryUnavailable
from openclaw_mcp.registry.models import IndexDocument
from openclaw_mcp.utils import Logger


class RegistryClient:
    """
    Fetches the registry index and individual documents.
    
    Nothing is cached: every call goes to the network. Pass ``http_client``
    to reuse a connection pool; otherwise each request opens its own client.
    """
    
    def __init__(
        self,
        base_url: str,
        logger: Logger,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.logger = logger
        self._http_client = http_client
    
    @property
    def index_url(self) -> str:
        return f"{self.base_url}/registry/index.json"
    
    def document_url(self, slug: str) -> str:
        # Slug goes into the path as given
        return f"{self.base_url}/registry/{slug}.md"
    
    async def _get(self, url: str) -> httpx.Response:
        self.logger.debug(f"GET {url}")
        if self._http_client is not None:
            return await self._http_client.get(url, follow_redirects=True)
        async with httpx.AsyncClient(follow_redirects=True) as client:
            return await client.get(url)
    
    async def fetch_index(self) -> IndexDocument:
        """Fetch and parse the full registry index."""
        response = await self._get(self.index_url)
        if not response.is_success:
            self.logger.error(f"Index fetch failed with status {response.status_code}")
            raise RegistryUnavailable(response.status_code)
        return IndexDocument.from_dict(response.json())
    
    async def fetch_document(self, slug: str) -> str:
        """Fetch one document's raw Markdown by slug."""
        response = await self._get(self.document_url(slug))
        if not response.is_success:
            self.logger.error(f"Document fetch for {slug} failed with status {response.status_code}")
            raise DocumentNotFound(slug, response.status_code)
        return response.text
