"""Vote storage abstractions and implementations.

Repository Pattern over ballots: the vote endpoint inserts, the results page
reads per-URL tallies for a query.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import defaultdict
import logging

from serp_interactions.domain.ballot import Ballot, VoteTally


logger = logging.getLogger(__name__)


class VoteRepositoryError(Exception):
    """Ballot storage failed."""


class AbstractVoteRepository(ABC):
    """Abstract repository for ballots."""

    @abstractmethod
    async def insert(self, ballot: Ballot) -> None:
        """Persist one ballot.

        Raises:
            VoteRepositoryError: if the ballot could not be stored.
        """
        raise NotImplementedError

    @abstractmethod
    async def tallies(self, query: str, limit: int) -> list[VoteTally]:
        """Summed votes per URL for ``query`` (case-insensitive), highest first.

        Args:
            query: Query the ballots were cast for
            limit: Maximum number of tallies to return
        """
        raise NotImplementedError


class InMemoryVoteRepository(AbstractVoteRepository):
    """Process-local ballot store for development and tests."""

    def __init__(self) -> None:
        self.ballots: list[Ballot] = []

    async def insert(self, ballot: Ballot) -> None:
        self.ballots.append(ballot)
        logger.debug("Stored ballot for %s (value=%d)", ballot.url, ballot.value)

    async def tallies(self, query: str, limit: int) -> list[VoteTally]:
        if limit <= 0:
            return []

        wanted = query.lower()
        totals: dict[str, int] = defaultdict(int)
        for ballot in self.ballots:
            if ballot.query.lower() == wanted:
                totals[ballot.url] += ballot.value

        # Ties keep first-voted order (sorted is stable)
        ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
        return [VoteTally(url=url, votes=votes) for url, votes in ranked[:limit]]
