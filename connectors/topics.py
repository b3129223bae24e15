"""HTTP connector for the course topics endpoint.

The topics endpoint belongs to a sibling subsystem of the same UI shell. It
returns ``{"docs": [...]}``; this connector only fetches and shape-checks it.
Release-schedule filtering happens in ``api.services.topics``.
"""

from typing import Any

import httpx
from opentelemetry import trace

tracer = trace.get_tracer(__name__)


class TopicsError(Exception):
    """The topics endpoint failed or returned an unexpected payload."""


class TopicsConnector:
    """Async client for the topics endpoint.

    Example:
        >>> async with TopicsConnector("http://localhost:3000/api/topics") as connector:
        ...     topics = await connector.list_topics()
    """

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize topics connector.

        Args:
            url: Full URL of the topics endpoint
            timeout: Request timeout in seconds
            transport: Optional custom transport (tests, proxies)
        """
        self.url = url
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self):
        """Close the underlying HTTP client."""
        await self.client.aclose()

    @tracer.start_as_current_span("topics.list_topics")
    async def list_topics(self) -> list[dict[str, Any]]:
        """Fetch the topic documents.

        Returns:
            The ``docs`` list from the endpoint

        Raises:
            TopicsError: On transport errors, non-2xx status, an ``error`` key,
                or a missing/non-list ``docs``
        """
        span = trace.get_current_span()
        span.set_attribute("http.url", self.url)

        try:
            response = await self.client.get(self.url, headers={"Cache-Control": "no-cache"})
        except httpx.HTTPError as e:
            span.record_exception(e)
            raise TopicsError(f"Topics request failed: {e}") from e

        span.set_attribute("http.status_code", response.status_code)
        if not response.is_success:
            raise TopicsError(f"Failed to fetch topics: {response.reason_phrase}")

        try:
            data = response.json()
        except ValueError as e:
            raise TopicsError("Topics endpoint returned invalid JSON") from e

        if not isinstance(data, dict) or data.get("error"):
            error = data.get("error") if isinstance(data, dict) else None
            raise TopicsError(f"Topics endpoint returned error: {error or 'Unknown error'}")

        docs = data.get("docs")
        if not isinstance(docs, list):
            raise TopicsError("Invalid data structure from topics endpoint")

        span.set_attribute("topics.count", len(docs))
        return docs
