"""Shared test fixtures and configuration."""

import os

import httpx
import pytest


# Complete test environment that overrides every config value
TEST_ENV = {
    "BACKEND_URL": "http://backend.test",
    "VOTE_PATH": "/vote",
    "AUTOCOMPLETE_PATH": "/autocomplete",
    "HTTP_TIMEOUT": "5",
    "AUTOCOMPLETE_DELAY_MS": "0",
    "AUTOCOMPLETE_MIN_LENGTH": "1",
    "EMPHASIS_TAG": "em",
    "SERVER_HOST": "127.0.0.1",
    "SERVER_PORT": "8000",
    "LOG_LEVEL": "info",
    "LOG_JSON": "true",
    # Proxy settings - ensure they're cleared for tests
    "http_proxy": "",
    "https_proxy": "",
    "all_proxy": "",
    "no_proxy": "",
}


for key, value in TEST_ENV.items():
    os.environ[key] = value

from serp_interactions.config import Settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset environment variables to test defaults before each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def results_html() -> str:
    return """<html><body>
<form id="form"><input id="query" data-query="python Async" value="python Async"></form>
<div class="result">
  <p class="description">Writing <b>Python</b> code with asyncio &amp; friends</p>
  <div class="vote" data-url="https://www.example.com/a">
    <span class="arrow up" data-vote="1"></span>
    <span class="arrow down" data-vote="-1"></span>
  </div>
</div>
<div class="result">
  <p class="description">Nothing to see here</p>
  <div class="vote" data-url="https://example.org/b">
    <span class="arrow up" data-vote="1"></span>
    <span class="arrow down voted" data-vote="-1"></span>
  </div>
</div>
<a id="moreinfo">More info</a>
<div id="contributors" style="display: none;">Contributors</div>
</body></html>"""


@pytest.fixture
def json_transport():
    """Factory for transports that answer with a fixed JSON payload and record requests."""

    def _build(status_code: int = 200, payload: object = "success") -> tuple[httpx.MockTransport, list[httpx.Request]]:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(status_code, json=payload)

        return httpx.MockTransport(handler), seen

    return _build
