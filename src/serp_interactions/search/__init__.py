"""
Result snippet text processing.

- highlight: query term emphasis for server-escaped snippets
"""

from serp_interactions.search.highlight import highlight, normalize_terms, split_query


__all__ = ["highlight", "normalize_terms", "split_query"]
