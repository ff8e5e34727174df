"""Vote backend ASGI application.

Routes:
    POST /vote     record a ballot from form fields q, u, v
    GET  /health   liveness
    GET  /metrics  Prometheus metrics

Usage:
    python -m serp_interactions.app
"""

from __future__ import annotations

import logging

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from serp_interactions.adapters.vote_repository import (
    AbstractVoteRepository,
    InMemoryVoteRepository,
    VoteRepositoryError,
)
from serp_interactions.config import Settings
from serp_interactions.domain.ballot import Ballot, BallotError, InvalidVoteError
from serp_interactions.observability.logging import configure_logging
from serp_interactions.observability.metrics import BALLOTS_RECORDED, get_metrics, get_metrics_content_type


logger = logging.getLogger(__name__)


def _form_value(form, name: str) -> str:
    value = form.get(name)
    return value.strip() if isinstance(value, str) else ""


def build_vote_endpoint(repository: AbstractVoteRepository):
    """Return the POST /vote handler bound to ``repository``."""

    async def vote_endpoint(request: Request) -> JSONResponse:
        form = await request.form()
        query = _form_value(form, "q")
        url = _form_value(form, "u")
        raw_value = _form_value(form, "v")

        try:
            value = int(raw_value)
        except ValueError:
            BALLOTS_RECORDED.labels(status="invalid").inc()
            return JSONResponse({"error": str(InvalidVoteError())}, status_code=400)

        try:
            ballot = Ballot.create(query, url, value)
        except BallotError as exc:
            BALLOTS_RECORDED.labels(status="invalid").inc()
            return JSONResponse({"error": str(exc)}, status_code=400)

        try:
            await repository.insert(ballot)
        except VoteRepositoryError:
            logger.exception("Failed to store ballot for %s", ballot.url)
            BALLOTS_RECORDED.labels(status="error").inc()
            return JSONResponse({"error": "internal error"}, status_code=500)

        BALLOTS_RECORDED.labels(status="stored").inc()
        return JSONResponse("success")

    return vote_endpoint


async def health_endpoint(_: Request) -> JSONResponse:
    return JSONResponse({"status": "healthy"})


async def metrics_endpoint(_: Request) -> Response:
    return Response(get_metrics(), media_type=get_metrics_content_type())


def create_app(repository: AbstractVoteRepository | None = None) -> Starlette:
    """Create the vote backend app.

    Args:
        repository: Ballot storage; an in-memory store when omitted
    """
    repository = repository or InMemoryVoteRepository()
    routes = [
        Route("/vote", endpoint=build_vote_endpoint(repository), methods=["POST"]),
        Route("/health", endpoint=health_endpoint, methods=["GET"]),
        Route("/metrics", endpoint=metrics_endpoint, methods=["GET"]),
    ]
    app = Starlette(routes=routes)
    app.state.vote_repository = repository
    return app


def main() -> None:
    """Run the development vote backend."""
    import uvicorn

    settings = Settings()
    configure_logging(settings.log_level, settings.log_json)

    app = create_app()
    logger.info("Starting vote backend on %s:%d", settings.server_host, settings.server_port)
    uvicorn.run(
        app,
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
        log_config=None,  # Don't let uvicorn override our logging config
    )


if __name__ == "__main__":
    main()
