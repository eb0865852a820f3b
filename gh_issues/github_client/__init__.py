"""GitHub client package for API interaction."""

from .client import IssueFetcher, fetch, issues_url
from .models import FetchFailure, FetchResult, FetchSuccess

__all__ = [
    "IssueFetcher",
    "FetchFailure",
    "FetchResult",
    "FetchSuccess",
    "fetch",
    "issues_url",
]
