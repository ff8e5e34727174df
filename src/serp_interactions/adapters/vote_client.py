"""HTTP client for the vote endpoint.

Every way a vote can fail (connection errors, timeouts, non-2xx status,
a body that is not JSON) surfaces as a single ``VoteFailedError``.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from serp_interactions.config import Settings
from serp_interactions.domain.vote import VoteRequest
from serp_interactions.observability.metrics import VOTE_LATENCY, track_latency


logger = logging.getLogger(__name__)


class VoteFailedError(Exception):
    """The remote vote call did not succeed."""

    def __init__(self, request: VoteRequest, reason: str) -> None:
        super().__init__(f"vote for {request.target_url} failed: {reason}")
        self.request = request
        self.reason = reason


class VoteClient:
    """Posts ``VoteRequest``s as form data and expects a JSON answer."""

    def __init__(self, settings: Settings, client: httpx.AsyncClient | None = None) -> None:
        self.settings = settings
        self.vote_url = settings.vote_url()
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> VoteClient:
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(float(self.settings.http_timeout)),
                headers={"Accept": "application/json"},
            )
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def send(self, request: VoteRequest) -> Any:
        """POST one vote and return the decoded JSON body.

        Raises:
            VoteFailedError: on any transport, status or decoding failure.
        """
        client = self._ensure_client()
        try:
            with track_latency(VOTE_LATENCY):
                response = await client.post(self.vote_url, data=request.to_form())
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            logger.warning("Vote rejected with HTTP %d for %s", exc.response.status_code, request.target_url)
            raise VoteFailedError(request, f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            logger.warning("Vote transport error for %s: %s", request.target_url, exc)
            raise VoteFailedError(request, type(exc).__name__) from exc
        except ValueError as exc:
            logger.warning("Vote response for %s was not JSON", request.target_url)
            raise VoteFailedError(request, "invalid JSON response") from exc

        logger.debug("Vote accepted for %s (value=%d)", request.target_url, request.value)
        return payload
