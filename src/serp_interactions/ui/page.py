"""Results page adapter.

Reads and rewrites the results page markup with BeautifulSoup. The page
contract:

- ``#query[data-query]`` carries the raw query
- every ``.description`` holds one result snippet (server-escaped HTML)
- every ``.vote[data-url]`` holds two ``.arrow[data-vote]`` children,
  data-vote being 1 or -1; the active arrow has the ``voted`` class
- ``#moreinfo`` / ``#contributors`` toggle the contributor list

The highlighting and vote logic live elsewhere; this module only moves
values between them and the markup.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bs4 import BeautifulSoup, Tag

from serp_interactions.domain.vote import Direction, VoteBoard, VoteGroup
from serp_interactions.search.highlight import DEFAULT_TAG, highlight, split_query


if TYPE_CHECKING:
    from serp_interactions.config import Settings
    from serp_interactions.service_layer.vote_service import VoteService


logger = logging.getLogger(__name__)

VOTED_CLASS = "voted"


def _attr(tag: Tag, name: str) -> str:
    value = tag.get(name, "")
    # BeautifulSoup can return list for attribute values, ensure it's a string
    if isinstance(value, list):
        return " ".join(value)
    return value or ""


class ResultsPage:
    """A parsed results page whose snippets and vote arrows can be updated in place."""

    def __init__(self, soup: BeautifulSoup, *, emphasis_tag: str = DEFAULT_TAG) -> None:
        self.soup = soup
        self.emphasis_tag = emphasis_tag

    @classmethod
    def from_html(cls, html: str, *, emphasis_tag: str = DEFAULT_TAG) -> ResultsPage:
        return cls(BeautifulSoup(html, "html.parser"), emphasis_tag=emphasis_tag)

    @classmethod
    def from_settings(cls, html: str, settings: Settings) -> ResultsPage:
        return cls.from_html(html, emphasis_tag=settings.emphasis_tag)

    @property
    def query(self) -> str:
        element = self.soup.find(id="query")
        if not isinstance(element, Tag):
            return ""
        return _attr(element, "data-query")

    def descriptions(self) -> list[Tag]:
        return self.soup.select(".description")

    def highlight_descriptions(self) -> int:
        """Highlight query terms in every snippet.

        Returns:
            Number of snippets rewritten.
        """
        terms = split_query(self.query)
        rewritten = 0
        for element in self.descriptions():
            original = element.decode_contents()
            updated = highlight(original, terms, tag=self.emphasis_tag)
            if updated == original:
                continue
            fragment = BeautifulSoup(updated, "html.parser")
            element.clear()
            for child in list(fragment.contents):
                element.append(child)
            rewritten += 1

        logger.debug("Highlighted %d of %d snippets", rewritten, len(self.descriptions()))
        return rewritten

    def _vote_containers(self) -> list[Tag]:
        return self.soup.select(".vote[data-url]")

    def vote_targets(self) -> list[str]:
        return [_attr(container, "data-url") for container in self._vote_containers()]

    def _arrows(self, target_url: str) -> list[tuple[Direction, Tag]]:
        arrows: list[tuple[Direction, Tag]] = []
        for container in self._vote_containers():
            if _attr(container, "data-url") != target_url:
                continue
            for arrow in container.select(".arrow[data-vote]"):
                try:
                    direction = Direction(int(_attr(arrow, "data-vote")))
                except ValueError:
                    logger.warning("Skipping arrow with bad data-vote for %s", target_url)
                    continue
                arrows.append((direction, arrow))
        return arrows

    def vote_board(self) -> VoteBoard:
        """Build vote groups from the arrows currently on the page."""
        board = VoteBoard()
        for target_url in self.vote_targets():
            group = board.group(target_url)
            for direction, arrow in self._arrows(target_url):
                group.widget(direction).voted = VOTED_CLASS in (arrow.get("class") or [])
            # A page rendered with both arrows active keeps only the up vote
            if group.up.voted and group.down.voted:
                group.down.voted = False
        return board

    def sync_vote_group(self, group: VoteGroup) -> None:
        """Mirror the group's arrow state onto the ``voted`` classes."""
        for direction, arrow in self._arrows(group.target_url):
            classes = [name for name in (arrow.get("class") or []) if name != VOTED_CLASS]
            if group.widget(direction).voted:
                classes.append(VOTED_CLASS)
            arrow["class"] = classes

    def bind(self, service: VoteService) -> None:
        """Keep this page in step with ``service``'s vote groups."""
        service.add_listener(self.sync_vote_group)

    def show_contributors(self) -> None:
        more_info = self.soup.find(id="moreinfo")
        if isinstance(more_info, Tag):
            more_info["style"] = "display: none;"
        contributors = self.soup.find(id="contributors")
        if isinstance(contributors, Tag) and "style" in contributors.attrs:
            del contributors["style"]

    def render(self) -> str:
        return str(self.soup)
