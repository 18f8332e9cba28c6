"""
Tavily web search client.
"""
from typing import Any, Dict, Optional

import httpx
import logging

from medvoice.core.config import get_settings
from medvoice.core.exceptions import SearchProviderError, UnexpectedError

logger = logging.getLogger(__name__)

NO_ANSWER = "No answer from Tavily Search."


class TavilySearch:
    """Asks Tavily for a short extractive answer to a query."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.api_key = api_key if api_key is not None else settings.TAVILY_API_KEY
        self.url = url or settings.TAVILY_SEARCH_URL
        self.timeout = timeout if timeout is not None else settings.SEARCH_TIMEOUT
        self._transport = transport

    @staticmethod
    def build_payload(query: str) -> Dict[str, Any]:
        return {
            "query": query,
            "topic": "general",
            "search_depth": "basic",
            "max_results": 1,
            "days": 3,
            "include_answer": True,
            "include_raw_content": False,
            "include_images": False,
            "include_image_descriptions": False,
            "include_domains": [],
            "exclude_domains": [],
        }

    async def search(self, query: str) -> Dict[str, Any]:
        """Run a search and return the decoded JSON body."""
        if not self.api_key:
            logger.error("TAVILY_API_KEY not found in environment")
            raise SearchProviderError("Tavily Search request failed: missing API key")

        headers = {"Authorization": f"Bearer {self.api_key}"}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.url, json=self.build_payload(query), headers=headers)
        except httpx.HTTPError as exc:
            logger.error("Tavily Search error", extra={"error": str(exc)})
            raise SearchProviderError(f"Tavily Search request failed: {exc}") from exc

        if not response.is_success:
            logger.error("Tavily Search error", extra={
                "status_code": response.status_code,
                "reason": response.reason_phrase
            })
            raise SearchProviderError("Tavily Search request failed")

        try:
            return response.json()
        except ValueError as exc:
            raise UnexpectedError(f"Invalid JSON from Tavily Search: {exc}") from exc

    async def answer(self, query: str) -> str:
        """Return Tavily's answer for the query, or a fixed placeholder."""
        data = await self.search(query)
        answer = data.get("answer") if isinstance(data, dict) else None
        return answer or NO_ANSWER


# Global instance
search_client = TavilySearch()
