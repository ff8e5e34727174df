"""Prometheus metrics for vote traffic."""

from __future__ import annotations

from contextlib import contextmanager
import time
from typing import TYPE_CHECKING

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest


if TYPE_CHECKING:
    from collections.abc import Generator


VOTE_CLICKS = Counter(
    "serp_vote_clicks_total",
    "Vote arrow clicks handled by the controller",
    ["kind"],
)

VOTE_COMPLETIONS = Counter(
    "serp_vote_completions_total",
    "Vote request completions, split by outcome and whether they changed the group",
    ["outcome", "applied"],
)

VOTE_LATENCY = Histogram(
    "serp_vote_latency_seconds",
    "Round-trip latency of vote requests",
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)

BALLOTS_RECORDED = Counter(
    "serp_ballots_total",
    "Ballots received by the vote endpoint",
    ["status"],
)


@contextmanager
def track_latency(histogram: Histogram) -> Generator[None, None, None]:
    """Observe the wall time of the wrapped block."""
    start = time.perf_counter()
    try:
        yield
    finally:
        histogram.observe(time.perf_counter() - start)


def get_metrics() -> bytes:
    """Render all registered metrics in Prometheus text format."""
    return generate_latest()


def get_metrics_content_type() -> str:
    return CONTENT_TYPE_LATEST
