"""Service layer - orchestrates vote groups and their remote calls."""

from serp_interactions.service_layer.vote_service import VoteSender, VoteService


__all__ = ["VoteSender", "VoteService"]
