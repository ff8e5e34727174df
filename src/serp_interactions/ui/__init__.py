"""Results page host adapters: markup, links and autocomplete."""

from serp_interactions.ui.autocomplete import AutocompleteSource
from serp_interactions.ui.navigation import alternative_href, pagination_href, replace_query_param
from serp_interactions.ui.page import ResultsPage


__all__ = [
    "AutocompleteSource",
    "ResultsPage",
    "alternative_href",
    "pagination_href",
    "replace_query_param",
]
