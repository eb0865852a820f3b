"""Test configuration and fixtures."""

import logging
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from gh_issues.config import IssuesConfig
from gh_issues.github_client.client import IssueFetcher


@pytest.fixture(autouse=True)
def restore_gh_issues_logger():
    """Undo logging changes made by the CLI or by tests."""
    logger = logging.getLogger("gh_issues")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture
def sample_issues() -> list[dict[str, Any]]:
    """Issues in the order the API might return them."""
    return [
        {"number": 12, "created_at": "2021-03-02T08:00:00Z", "title": "Middle"},
        {"number": 3, "created_at": "2020-12-24T17:30:00Z", "title": "Oldest"},
        {"number": 140, "created_at": "2021-07-15T12:00:00Z", "title": "Newest"},
    ]


@pytest.fixture
def test_config() -> IssuesConfig:
    """Configuration pointing at a fake endpoint."""
    return IssuesConfig(github_url="https://github.test/api", user_agent="test-agent")


@pytest.fixture
def make_fetcher(
    test_config: IssuesConfig,
) -> Callable[[int, Any], tuple[IssueFetcher, list[httpx.Request]]]:
    """Build a fetcher whose client answers every request with a canned response.

    Returns the fetcher and the list the sent requests are recorded in.
    """

    def factory(
        status_code: int, payload: Any
    ) -> tuple[IssueFetcher, list[httpx.Request]]:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(status_code, json=payload)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        return IssueFetcher(test_config, client=client), requests

    return factory
