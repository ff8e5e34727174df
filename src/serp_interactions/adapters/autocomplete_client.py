"""HTTP client for query suggestions."""

from __future__ import annotations

import logging

import httpx

from serp_interactions.config import Settings


logger = logging.getLogger(__name__)


class AutocompleteClient:
    """Fetches ``{"suggestions": [...]}`` for a partial query.

    Suggestions are a convenience; failures are logged and yield no suggestions.
    """

    def __init__(self, settings: Settings, client: httpx.AsyncClient | None = None) -> None:
        self.settings = settings
        self.autocomplete_url = settings.autocomplete_url()
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> AutocompleteClient:
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(float(self.settings.http_timeout)))
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def suggest(self, term: str) -> list[str]:
        # "q" rather than "term" keeps partial queries out of proxy access logs
        client = self._ensure_client()
        try:
            response = await client.get(self.autocomplete_url, params={"q": term})
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.info("Autocomplete lookup failed for %r: %s", term, exc)
            return []

        suggestions = payload.get("suggestions") if isinstance(payload, dict) else None
        if not isinstance(suggestions, list):
            return []
        return [str(item) for item in suggestions]
