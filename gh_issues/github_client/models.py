"""Pydantic models for the outcome of an issues request.

Issues themselves stay plain dicts decoded from the GitHub REST API response.
API Reference: https://docs.github.com/en/rest/issues/issues#list-repository-issues
"""

from typing import Any

from pydantic import BaseModel, Field


class FetchSuccess(BaseModel):
    """A 200 response carrying the decoded list of issues."""

    body: list[dict[str, Any]] = Field(
        ..., description="Issue objects exactly as returned by the API"
    )


class FetchFailure(BaseModel):
    """Any non-200 response."""

    message: str | None = Field(
        None, description="The 'message' field of the error body, if present"
    )
    status_code: int = Field(..., description="HTTP status code of the response")


FetchResult = FetchSuccess | FetchFailure
