"""Unit tests for pagination and "did you mean" links."""

import pytest

from serp_interactions.ui.navigation import alternative_href, pagination_href, replace_query_param


@pytest.mark.parametrize(
    ("query_string", "param", "value", "expected"),
    [
        ("?q=go&p=2", "p", 3, "?q=go&p=3"),
        ("?q=go", "p", 2, "?q=go&p=2"),
        ("?p=2", "p", 5, "?p=5"),
        ("", "p", 2, "?p=2"),
        ("?q=go&p=2&l=en", "p", 4, "?q=go&l=en&p=4"),
        ("?q=go&p=2;x=1", "p", 4, "?q=go&x=1&p=4"),
        ("?q=go&p=2", "p", None, "?q=go&"),
        ("?q=old", "q", "new query", "?q=new+query"),
    ],
)
def test_replace_query_param(query_string, param, value, expected):
    assert replace_query_param(query_string, param, value) == expected


def test_pagination_href():
    assert pagination_href("/search", "?q=golang&p=1", 2) == "/search?q=golang&p=2"


def test_alternative_href_replaces_query():
    assert alternative_href("/", "?q=pyhton&p=3", "python") == "/?p=3&q=python"
