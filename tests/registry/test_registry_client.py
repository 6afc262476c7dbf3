"""Tests for RegistryClient."""

import httpx
import pytest
from unittest.mock import AsyncMock, patch

from openclaw_mcp.registry import (
    DocumentNotFound, IndexDocument, RegistryClient, RegistryError, RegistryUnavailable
)

BASE_URL = "https://registry.test"


@pytest.mark.asyncio
class TestRegistryClient:
    """Test RegistryClient against a mock transport."""
    
    async def test_fetch_index(self, logger, fake_http, index_payload):
        """Should fetch and parse the index."""
        http = fake_http({"/registry/index.json": (200, index_payload)})
        client = RegistryClient(BASE_URL, logger, http_client=http)
        
        index = await client.fetch_index()
        
        assert isinstance(index, IndexDocument)
        assert index.count == 5
        assert http.requested == [f"{BASE_URL}/registry/index.json"]
    
    async def test_fetch_index_failure_status(self, logger, fake_http):
        """Non-success status should raise RegistryUnavailable with the status."""
        http = fake_http({"/registry/index.json": (503, "down")})
        client = RegistryClient(BASE_URL, logger, http_client=http)
        
        with pytest.raises(RegistryUnavailable) as exc_info:
            await client.fetch_index()
        
        assert exc_info.value.status == 503
        assert "503" in str(exc_info.value)
        assert isinstance(exc_info.value, RegistryError)
    
    async def test_fetch_document(self, logger, fake_http, document):
        """Should return raw text unparsed."""
        http = fake_http({"/registry/tier1-customer-support.md": (200, document)})
        client = RegistryClient(BASE_URL, logger, http_client=http)
        
        text = await client.fetch_document("tier1-customer-support")
        
        assert text == document
    
    async def test_fetch_document_not_found(self, logger, fake_http):
        """Should raise DocumentNotFound naming slug and status."""
        http = fake_http({})
        client = RegistryClient(BASE_URL, logger, http_client=http)
        
        with pytest.raises(DocumentNotFound) as exc_info:
            await client.fetch_document("missing")
        
        assert exc_info.value.slug == "missing"
        assert exc_info.value.status == 404
        assert str(exc_info.value) == "File not found: missing (404)"
    
    async def test_transport_error_propagates(self, logger):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)
        
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        client = RegistryClient(BASE_URL, logger, http_client=http)
        
        with pytest.raises(httpx.ConnectError):
            await client.fetch_index()
    
    async def test_injected_client_follows_redirects(self, logger, document):
        """A moved document should be fetched from its new location."""
        def handler(request):
            if request.url.path == "/registry/old-name.md":
                return httpx.Response(302, headers={"Location": "/registry/new-name.md"})
            if request.url.path == "/registry/new-name.md":
                return httpx.Response(200, text=document)
            return httpx.Response(404)
        
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        client = RegistryClient(BASE_URL, logger, http_client=http)
        
        text = await client.fetch_document("old-name")
        
        assert text == document
    
    async def test_short_lived_client_when_none_injected(self, logger, index_payload):
        """Without an injected client, a fresh AsyncClient is used per request."""
        response = httpx.Response(
            200, json=index_payload,
            request=httpx.Request("GET", f"{BASE_URL}/registry/index.json")
        )
        mock_client = AsyncMock()
        mock_client.get = AsyncMock(return_value=response)
        mock_client.__aenter__ = AsyncMock(return_value=mock_client)
        mock_client.__aexit__ = AsyncMock(return_value=None)
        
        with patch('openclaw_mcp.registry.client.httpx.AsyncClient', return_value=mock_client) as factory:
            client = RegistryClient(BASE_URL + "/", logger)
            index = await client.fetch_index()
        
        assert index.count == 5
        factory.assert_called_once_with(follow_redirects=True)
        mock_client.get.assert_called_once_with(f"{BASE_URL}/registry/index.json")


class TestDocumentUrl:
    """Test URL construction."""
    
    def test_document_url(self, logger):
        client = RegistryClient(BASE_URL, logger)
        assert client.document_url("abc") == f"{BASE_URL}/registry/abc.md"
    
    def test_trailing_slash_stripped(self, logger):
        client = RegistryClient(BASE_URL + "/", logger)
        assert client.index_url == f"{BASE_URL}/registry/index.json"
