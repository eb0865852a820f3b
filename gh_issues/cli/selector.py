"""Selection of the most recently created issues."""

from collections.abc import Sequence
from typing import Any


def sort_by_created_at(issues: Sequence[dict[str, Any]]) -> list[dict[str, Any]]:
    """Sort issues oldest first.

    ``created_at`` is compared as a string; ISO 8601 timestamps sort
    chronologically that way. Equal timestamps keep their input order.
    """
    return sorted(issues, key=lambda issue: issue["created_at"])


def select_issues(
    issues: Sequence[dict[str, Any]], count: int
) -> list[dict[str, Any]]:
    """Return the ``count`` newest issues, oldest of them first.

    A negative count selects the ``abs(count)`` oldest issues instead, also
    oldest first.
    """
    ordered = sort_by_created_at(issues)
    if count < 0:
        return ordered[:-count]
    if count == 0:
        return []
    return ordered[-count:]
