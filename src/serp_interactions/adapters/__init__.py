"""Adapters layer - HTTP clients and vote storage."""

from .autocomplete_client import AutocompleteClient
from .vote_client import VoteClient, VoteFailedError
from .vote_repository import AbstractVoteRepository, InMemoryVoteRepository, VoteRepositoryError


__all__ = [
    "AbstractVoteRepository",
    "AutocompleteClient",
    "InMemoryVoteRepository",
    "VoteClient",
    "VoteFailedError",
    "VoteRepositoryError",
]
