"""Unit tests for the in-memory vote repository."""

from datetime import date

import pytest

from serp_interactions.adapters.vote_repository import InMemoryVoteRepository
from serp_interactions.domain.ballot import Ballot, VoteTally


def _ballot(query: str, url: str, value: int) -> Ballot:
    return Ballot.create(query, url, value, today=date(2024, 1, 1))


@pytest.mark.asyncio
async def test_tallies_sum_votes_per_url_highest_first() -> None:
    repo = InMemoryVoteRepository()
    for ballot in [
        _ballot("golang", "https://a.example.com/", 1),
        _ballot("golang", "https://b.example.com/", 1),
        _ballot("Golang", "https://b.example.com/", 1),
        _ballot("golang", "https://a.example.com/", -1),
        _ballot("golang", "https://c.example.com/", -1),
        _ballot("rust", "https://a.example.com/", 1),
    ]:
        await repo.insert(ballot)

    tallies = await repo.tallies("GOLANG", limit=10)

    assert tallies == [
        VoteTally(url="https://b.example.com/", votes=2),
        VoteTally(url="https://a.example.com/", votes=0),
        VoteTally(url="https://c.example.com/", votes=-1),
    ]


@pytest.mark.asyncio
async def test_tallies_respect_limit() -> None:
    repo = InMemoryVoteRepository()
    await repo.insert(_ballot("q", "https://a.example.com/", 1))
    await repo.insert(_ballot("q", "https://b.example.com/", -1))

    assert await repo.tallies("q", limit=1) == [VoteTally(url="https://a.example.com/", votes=1)]
    assert await repo.tallies("q", limit=0) == []


@pytest.mark.asyncio
async def test_unknown_query_has_no_tallies() -> None:
    assert await InMemoryVoteRepository().tallies("nothing", limit=5) == []
