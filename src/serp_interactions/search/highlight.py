"""Query term highlighting for result snippets.

Snippets arrive as server-escaped HTML. Highlighting works on whole
space-delimited tokens so that inline markup inside a token is never split:

- The snippet is split on the literal space character only
- A token matches when any query term occurs anywhere inside it, ignoring case
- A matching token is wrapped once in an emphasis tag, however many terms hit it
- Tokens are rejoined with single spaces

Query terms are only compared against tokens; they are never copied into
the output, so no markup can leak from the query into the snippet.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence


TOKEN_DELIMITER = " "
DEFAULT_TAG = "em"


def split_query(raw_query: str) -> list[str]:
    """Split a raw query the same way the results page does.

    Empty terms produced by repeated spaces are kept; ``highlight`` ignores them.
    """
    if not raw_query:
        return []
    return raw_query.split(TOKEN_DELIMITER)


def normalize_terms(terms: Iterable[str]) -> list[str]:
    """Lowercase terms, drop empty ones and duplicates, keep first-seen order."""
    seen: set[str] = set()
    normalized: list[str] = []
    for term in terms:
        if not term:
            continue
        lowered = term.lower()
        if lowered in seen:
            continue
        seen.add(lowered)
        normalized.append(lowered)
    return normalized


def token_matches(token: str, terms: Sequence[str]) -> bool:
    """Return True if any (already normalized) term is a substring of the token."""
    lowered = token.lower()
    return any(term in lowered for term in terms)


def highlight(snippet_html: str, query_terms: Iterable[str], tag: str = DEFAULT_TAG) -> str:
    """Wrap every snippet token that contains a query term in ``<tag>``.

    Args:
        snippet_html: Server-escaped snippet markup.
        query_terms: Query terms; empty strings are ignored.
        tag: Emphasis tag name.

    Returns:
        The snippet with matching tokens wrapped and spaces normalized.
    """
    if not snippet_html:
        return ""

    terms = normalize_terms(query_terms)
    open_tag, close_tag = f"<{tag}>", f"</{tag}>"

    tokens = [token for token in snippet_html.split(TOKEN_DELIMITER) if token]
    if terms:
        tokens = [f"{open_tag}{token}{close_tag}" if token_matches(token, terms) else token for token in tokens]

    return TOKEN_DELIMITER.join(tokens)
