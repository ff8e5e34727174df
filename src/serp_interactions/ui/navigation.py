"""Link construction for pagination and "did you mean" suggestions."""

from __future__ import annotations

import re
from urllib.parse import quote_plus


def replace_query_param(query_string: str, param: str, new_value: object) -> str:
    """Replace (or append) ``param`` in a ``?a=1&b=2`` style query string.

    The first existing ``param=...`` segment is removed, then ``param=new_value``
    is appended. A falsy ``new_value`` only removes the parameter.

    >>> replace_query_param("?q=go&p=2", "p", 3)
    '?q=go&p=3'
    """
    pattern = re.compile(r"([?;&])" + re.escape(param) + r"[^&;]*[;&]?")
    query = pattern.sub(r"\1", query_string, count=1)
    query = re.sub(r"&$", "", query)

    prefix = query + "&" if len(query) > 2 else "?"
    if not new_value:
        return prefix
    return f"{prefix}{param}={quote_plus(str(new_value))}"


def pagination_href(path: str, query_string: str, page: int) -> str:
    """Link to results page ``page`` for the current query."""
    return path + replace_query_param(query_string, "p", page)


def alternative_href(path: str, query_string: str, alternative: str) -> str:
    """Link that re-runs the search with a "did you mean" alternative query."""
    return path + replace_query_param(query_string, "q", alternative)
