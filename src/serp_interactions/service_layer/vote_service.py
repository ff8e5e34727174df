"""Vote dispatch for a results page.

Turns arrow clicks into optimistic group updates plus fire-and-forget vote
requests, then feeds each completion back into the group that produced it.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
import logging
from typing import Protocol

from serp_interactions.adapters.vote_client import VoteFailedError
from serp_interactions.domain.vote import Direction, PendingVote, VoteBoard, VoteGroup, VoteOutcome, VoteRequest
from serp_interactions.observability.context import set_request_context
from serp_interactions.observability.metrics import VOTE_CLICKS, VOTE_COMPLETIONS


logger = logging.getLogger(__name__)

GroupListener = Callable[[VoteGroup], None]


class VoteSender(Protocol):
    async def send(self, request: VoteRequest) -> object: ...


class VoteService:
    """Owns the vote groups of one page and the requests in flight for them."""

    def __init__(self, client: VoteSender, query: str, *, board: VoteBoard | None = None) -> None:
        """Initialize the service.

        Args:
            client: Sends vote requests; raises ``VoteFailedError`` on failure
            query: The page's query, sent along with every vote
            board: Existing vote groups (a fresh board when omitted)
        """
        self.client = client
        self.query = query
        self.board = board if board is not None else VoteBoard()
        self._listeners: list[GroupListener] = []
        self._tasks: set[asyncio.Task[bool]] = set()

    def add_listener(self, listener: GroupListener) -> None:
        """Call ``listener`` with the group after every visible change."""
        self._listeners.append(listener)

    def _notify(self, group: VoteGroup) -> None:
        for listener in self._listeners:
            try:
                listener(group)
            except Exception:
                logger.exception("Vote listener failed for %s", group.target_url)

    @property
    def in_flight(self) -> int:
        return len(self._tasks)

    def click(self, target_url: str, direction: Direction | int) -> PendingVote:
        """Handle an arrow click.

        The group changes and listeners run before this returns; the vote
        request is scheduled on the running loop and not awaited.

        Raises:
            ValueError: if ``direction`` is not +1 or -1.
            RuntimeError: if no event loop is running.
        """
        loop = asyncio.get_running_loop()
        group = self.board.group(target_url)
        pending = group.apply_click(direction, self.query)
        VOTE_CLICKS.labels(kind="retract" if pending.retraction else "cast").inc()

        task = loop.create_task(self._complete(group, pending), name=f"vote-{pending.request_id}")
        self._tasks.add(task)
        task.add_done_callback(self._handle_vote_done)

        self._notify(group)
        return pending

    async def _complete(self, group: VoteGroup, pending: PendingVote) -> bool:
        set_request_context(pending.request_id, target_url=group.target_url)
        try:
            await self.client.send(pending.request)
        except VoteFailedError as exc:
            logger.info("Vote failed, rolling back group: %s", exc.reason)
            outcome = VoteOutcome.FAILURE
        except Exception:
            logger.exception("Vote request raised unexpectedly, rolling back group")
            outcome = VoteOutcome.FAILURE
        else:
            outcome = VoteOutcome.SUCCESS

        applied = group.apply_response(pending.request_id, outcome)
        VOTE_COMPLETIONS.labels(outcome=outcome.value, applied=str(applied).lower()).inc()
        if applied:
            logger.debug("Vote %s resolved as %s, group now %s", pending.request_id, outcome.value, group.state.value)
            self._notify(group)
        else:
            logger.debug("Vote %s resolved as %s after a newer click; ignored", pending.request_id, outcome.value)
        return applied

    def _handle_vote_done(self, task: asyncio.Task[bool]) -> None:
        self._tasks.discard(task)
        try:
            task.result()
        except asyncio.CancelledError:
            logger.debug("Vote task %s cancelled", task.get_name())
        except Exception as exc:
            logger.error("Vote task %s failed: %s", task.get_name(), exc)

    async def drain(self) -> None:
        """Wait until every in-flight vote has completed."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
