"""Query autocomplete collaborator.

Supplies suggestions to the host's autocomplete widget: debounced lookups,
suggestion markup and submission of a chosen suggestion.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
import html
import logging
from typing import Protocol

from serp_interactions.config import Settings


logger = logging.getLogger(__name__)

UNMATCHED_STYLE = "font-weight:normal;"


class SuggestionProvider(Protocol):
    async def suggest(self, term: str) -> list[str]: ...


class AutocompleteSource:
    """Debounced suggestion source for one query input.

    Only the most recent lookup produces suggestions; a lookup overtaken by a
    newer keystroke resolves to an empty list.
    """

    def __init__(self, provider: SuggestionProvider, *, min_length: int = 1, delay_ms: int = 75) -> None:
        self.provider = provider
        self.min_length = min_length
        self.delay = delay_ms / 1000.0
        self._generation = 0

    @classmethod
    def from_settings(cls, provider: SuggestionProvider, settings: Settings) -> AutocompleteSource:
        return cls(
            provider,
            min_length=settings.autocomplete_min_length,
            delay_ms=settings.autocomplete_delay_ms,
        )

    async def lookup(self, term: str) -> list[str]:
        self._generation += 1
        generation = self._generation

        if len(term) < self.min_length:
            return []

        if self.delay:
            await asyncio.sleep(self.delay)
        if generation != self._generation:
            return []

        suggestions = await self.provider.suggest(term)
        if generation != self._generation:
            logger.debug("Dropping suggestions for superseded term %r", term)
            return []
        return suggestions

    @staticmethod
    def render_item(label: str, term: str) -> str:
        """Markup for one suggestion; the typed prefix is shown at normal weight."""
        if term and label.startswith(term):
            prefix, rest = label[: len(term)], label[len(term) :]
            body = f"<span style='{UNMATCHED_STYLE}'>{html.escape(prefix)}</span>{html.escape(rest)}"
        else:
            body = html.escape(label)
        return f"<li><a>{body}</a></li>"

    @staticmethod
    def select(label: str, submit: Callable[[str], None]) -> str:
        """Submit the chosen suggestion as the new query."""
        submit(label)
        return label
