"""Tests for the topics HTTP connector."""

import httpx
import pytest

from connectors.topics import TopicsConnector, TopicsError

URL = "http://topics.test/api/topics"


def _connector(handler):
    return TopicsConnector(URL, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
class TestTopicsConnector:
    """Test TopicsConnector.list_topics."""

    async def test_returns_docs(self):
        """Test the docs list is returned."""
        seen = {}

        def handler(request):
            seen["cache"] = request.headers.get("cache-control")
            return httpx.Response(200, json={"docs": [{"id": 1, "title": "Onboarding"}]})

        async with _connector(handler) as connector:
            topics = await connector.list_topics()

        assert topics == [{"id": 1, "title": "Onboarding"}]
        assert seen["cache"] == "no-cache"

    async def test_server_error(self):
        """Test non-2xx responses raise TopicsError."""
        async with _connector(lambda request: httpx.Response(500)) as connector:
            with pytest.raises(TopicsError, match="Failed to fetch topics"):
                await connector.list_topics()

    async def test_error_key(self):
        """Test an error payload raises TopicsError with its message."""
        def handler(request):
            return httpx.Response(200, json={"error": "quota exceeded"})

        async with _connector(handler) as connector:
            with pytest.raises(TopicsError, match="quota exceeded"):
                await connector.list_topics()

    @pytest.mark.parametrize("payload", [{}, {"docs": {"id": 1}}, [1, 2]])
    async def test_bad_shape(self, payload):
        """Test missing or non-list docs raise TopicsError."""
        async with _connector(lambda request: httpx.Response(200, json=payload)) as connector:
            with pytest.raises(TopicsError):
                await connector.list_topics()

    async def test_invalid_json(self):
        """Test a non-JSON body raises TopicsError."""
        def handler(request):
            return httpx.Response(200, text="<html>")

        async with _connector(handler) as connector:
            with pytest.raises(TopicsError, match="invalid JSON"):
                await connector.list_topics()

    async def test_transport_error(self):
        """Test connection failures raise TopicsError."""

        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with _connector(handler) as connector:
            with pytest.raises(TopicsError, match="Topics request failed"):
                await connector.list_topics()

    async def test_close(self):
        """Test leaving the context closes the HTTP client."""
        connector = _connector(lambda request: httpx.Response(200, json={"docs": []}))

        async with connector:
            pass

        assert connector.client.is_closed
