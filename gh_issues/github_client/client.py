"""GitHub issues fetcher using httpx."""

import logging
from typing import Any

import httpx

from ..config import IssuesConfig
from .models import FetchFailure, FetchResult, FetchSuccess

logger = logging.getLogger(__name__)


def issues_url(base_url: str, account: str, project: str) -> str:
    """Build the issues endpoint URL for a repository.

    Args:
        base_url: Root URL of the GitHub REST API
        account: Repository owner (user or organization)
        project: Repository name

    Returns:
        URL of the form ``{base_url}/repos/{account}/{project}/issues``
    """
    return f"{base_url.rstrip('/')}/repos/{account}/{project}/issues"


class IssueFetcher:
    """Fetches the open issues of a repository with a single GET request."""

    def __init__(
        self, config: IssuesConfig | None = None, client: httpx.Client | None = None
    ):
        """Initialize the fetcher.

        Args:
            config: Endpoint settings. If None, defaults are used.
            client: HTTP client to send requests with. If None, a new client
                is created for each fetch.
        """
        self.config = config or IssuesConfig()
        self.client = client
        self.headers = {"User-Agent": self.config.user_agent}

    def fetch(self, account: str, project: str) -> FetchResult:
        """Fetch the issues of ``account/project``.

        The body is decoded as JSON whatever the status code. Decode and
        transport errors are not caught.

        Returns:
            FetchSuccess for a 200 response, FetchFailure otherwise
        """
        logger.info("Fetching %s's project %s", account, project)
        url = issues_url(self.config.github_url, account, project)

        if self.client is not None:
            response = self.client.get(url, headers=self.headers)
        else:
            with httpx.Client(timeout=self.config.timeout) as client:
                response = client.get(url, headers=self.headers)

        return self.handle_response(response)

    def handle_response(self, response: httpx.Response) -> FetchResult:
        """Decode a response and classify it by status code."""
        logger.info("Got response: status code=%s", response.status_code)
        body: Any = response.json()
        logger.debug("Response body: %r", body)

        if response.status_code == 200:
            return FetchSuccess(body=body)

        message = body.get("message") if isinstance(body, dict) else None
        return FetchFailure(message=message, status_code=response.status_code)


def fetch(
    account: str, project: str, config: IssuesConfig | None = None
) -> FetchResult:
    """Fetch issues with a one-off fetcher."""
    return IssueFetcher(config).fetch(account, project)
