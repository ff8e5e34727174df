"""Domain layer - pure vote logic with no infrastructure dependencies.

This layer contains:
- The vote group state machine driven by arrow clicks and request completions
- Ballot validation used by the vote endpoint

No HTTP clients, no storage drivers.
"""

from serp_interactions.domain.ballot import (
    Ballot,
    BallotError,
    InvalidQueryError,
    InvalidURLError,
    InvalidVoteError,
    VoteTally,
)
from serp_interactions.domain.vote import (
    Direction,
    PendingVote,
    VoteBoard,
    VoteGroup,
    VoteOutcome,
    VoteRequest,
    VoteState,
    VoteWidget,
)


__all__ = [
    "Ballot",
    "BallotError",
    "Direction",
    "InvalidQueryError",
    "InvalidURLError",
    "InvalidVoteError",
    "PendingVote",
    "VoteBoard",
    "VoteGroup",
    "VoteOutcome",
    "VoteRequest",
    "VoteState",
    "VoteTally",
    "VoteWidget",
]
