"""Vote group state machine.

Each search result carries a vote group: an up arrow and a down arrow that
share one target URL. The group is the single owner of both arrows' state:

- Clicks update the arrows immediately (optimistic update) and hand back a
  ``PendingVote`` describing the request to send
- Completions are applied with the ``request_id`` of the click that caused
  them; a completion for anything but the latest click is ignored
- At most one arrow of a group is voted at any time

No infrastructure here; the service layer sends requests and feeds the
outcomes back in.
"""

from __future__ import annotations

from enum import Enum, IntEnum
import logging
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.dataclasses import dataclass

from serp_interactions.observability.context import generate_request_id


logger = logging.getLogger(__name__)


class Direction(IntEnum):
    UP = 1
    DOWN = -1

    @property
    def opposite(self) -> Direction:
        return Direction(-self.value)


class VoteState(str, Enum):
    NEUTRAL = "neutral"
    VOTED_UP = "voted_up"
    VOTED_DOWN = "voted_down"


class VoteOutcome(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


class VoteRequest(BaseModel):
    """Value object for one outbound vote.

    ``value`` is the signed delta being asserted (+1/-1) or retracted.
    """

    model_config = ConfigDict(frozen=True)

    query: str
    target_url: str
    value: Literal[1, -1]

    def to_form(self) -> dict[str, str]:
        """Form fields expected by the vote endpoint."""
        return {"q": self.query, "u": self.target_url, "v": str(self.value)}


class PendingVote(BaseModel):
    """Identity token for an in-flight vote request."""

    model_config = ConfigDict(frozen=True)

    request_id: str = Field(default_factory=generate_request_id)
    request: VoteRequest
    direction: Direction
    retraction: bool


@dataclass
class VoteWidget:
    """One arrow of a vote group."""

    direction: Direction
    voted: bool = False


class VoteGroup:
    """Aggregate owning the up/down arrows for one target URL."""

    def __init__(self, target_url: str) -> None:
        self.target_url = target_url
        self.up = VoteWidget(direction=Direction.UP)
        self.down = VoteWidget(direction=Direction.DOWN)
        self._latest: PendingVote | None = None

    @property
    def state(self) -> VoteState:
        if self.up.voted:
            return VoteState.VOTED_UP
        if self.down.voted:
            return VoteState.VOTED_DOWN
        return VoteState.NEUTRAL

    @property
    def latest_request_id(self) -> str | None:
        return self._latest.request_id if self._latest else None

    def widget(self, direction: Direction | int) -> VoteWidget:
        return self.up if Direction(direction) is Direction.UP else self.down

    def sibling(self, direction: Direction | int) -> VoteWidget:
        return self.widget(Direction(direction).opposite)

    def apply_click(self, direction: Direction | int, query: str) -> PendingVote:
        """Apply a click optimistically and return the request it produces.

        Clicking the voted arrow retracts the vote (``value`` is the negated
        direction). Clicking the other arrow, or either arrow while neutral,
        casts a vote in that arrow's direction after clearing the sibling.

        Raises:
            ValueError: if ``direction`` is not +1 or -1.
        """
        direction = Direction(direction)
        clicked = self.widget(direction)

        if clicked.voted:
            clicked.voted = False
            retraction = True
            value = -direction.value
        else:
            self.sibling(direction).voted = False
            clicked.voted = True
            retraction = False
            value = direction.value

        pending = PendingVote(
            request=VoteRequest(query=query, target_url=self.target_url, value=value),
            direction=direction,
            retraction=retraction,
        )
        self._latest = pending
        logger.debug(
            "Vote click on %s: direction=%d retraction=%s state=%s",
            self.target_url,
            direction.value,
            retraction,
            self.state.value,
        )
        return pending

    def apply_response(self, request_id: str, outcome: VoteOutcome) -> bool:
        """Reconcile the group with the completion of ``request_id``.

        Returns:
            True if the completion belonged to the latest click and was applied,
            False if it was stale and ignored.
        """
        pending = self._latest
        if pending is None or pending.request_id != request_id:
            logger.debug("Ignoring stale vote completion %s for %s", request_id, self.target_url)
            return False

        self.up.voted = False
        self.down.voted = False
        # A failure always ends neutral, even when the click was a retraction
        if outcome is VoteOutcome.SUCCESS and not pending.retraction:
            self.widget(pending.direction).voted = True

        self._latest = None
        return True

    def snapshot(self) -> dict[str, object]:
        return {
            "target_url": self.target_url,
            "state": self.state.value,
            "up": self.up.voted,
            "down": self.down.voted,
            "pending": self.latest_request_id,
        }


class VoteBoard:
    """All vote groups on a page, keyed by target URL."""

    def __init__(self) -> None:
        self._groups: dict[str, VoteGroup] = {}

    def group(self, target_url: str) -> VoteGroup:
        """Return the group for ``target_url``, creating it on first use."""
        group = self._groups.get(target_url)
        if group is None:
            group = VoteGroup(target_url)
            self._groups[target_url] = group
        return group

    def __contains__(self, target_url: object) -> bool:
        return target_url in self._groups

    def __iter__(self):
        return iter(self._groups.values())

    def __len__(self) -> int:
        return len(self._groups)
