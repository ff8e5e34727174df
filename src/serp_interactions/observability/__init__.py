"""Observability module for logging correlation and Prometheus metrics."""

from serp_interactions.observability.context import (
    clear_request_context,
    generate_request_id,
    get_request_context,
    request_context,
    set_request_context,
)
from serp_interactions.observability.logging import JsonFormatter, configure_logging
from serp_interactions.observability.metrics import (
    BALLOTS_RECORDED,
    VOTE_CLICKS,
    VOTE_COMPLETIONS,
    VOTE_LATENCY,
    get_metrics,
    get_metrics_content_type,
    track_latency,
)


__all__ = [
    "BALLOTS_RECORDED",
    "VOTE_CLICKS",
    "VOTE_COMPLETIONS",
    "VOTE_LATENCY",
    "JsonFormatter",
    "clear_request_context",
    "configure_logging",
    "generate_request_id",
    "get_metrics",
    "get_metrics_content_type",
    "get_request_context",
    "request_context",
    "set_request_context",
    "track_latency",
]
