"""Interpretation of the raw command line tokens."""

import re
from collections.abc import Sequence

from pydantic import BaseModel

DEFAULT_COUNT = 4
USAGE = f"usage: issues <user> <project> [ count | {DEFAULT_COUNT} ]"

# Optional sign followed by digits only, no whitespace or underscores
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class HelpRequest(BaseModel):
    """The user asked for help or gave input we cannot use."""


class IssuesRequest(BaseModel):
    """Show the last ``count`` issues of ``account/project``."""

    account: str
    project: str
    count: int = DEFAULT_COUNT


ParsedArgs = HelpRequest | IssuesRequest


def is_switch(token: str) -> bool:
    """Whether a token is an option rather than a positional value.

    Negative numbers such as ``-3`` count as positional values.
    """
    return token.startswith("-") and not INTEGER_PATTERN.fullmatch(token)


def parse_count(token: str) -> int:
    """Parse the count token strictly.

    Raises:
        ValueError: If the token is not an optionally signed run of digits
    """
    if not INTEGER_PATTERN.fullmatch(token):
        raise ValueError(f"Invalid count '{token}': expected an integer")
    return int(token)


def parse_args(argv: Sequence[str]) -> ParsedArgs:
    """Turn command line tokens into a request.

    ``-h``/``--help`` anywhere, any other switch, or a positional count other
    than two or three all give a HelpRequest.

    Args:
        argv: Tokens after the program name

    Returns:
        HelpRequest or IssuesRequest

    Raises:
        ValueError: If the count token is not an integer
    """
    # -h, --help and unknown switches all end up showing usage
    if any(is_switch(token) for token in argv):
        return HelpRequest()

    if len(argv) == 2:
        account, project = argv
        return IssuesRequest(account=account, project=project)
    if len(argv) == 3:
        account, project, count = argv
        return IssuesRequest(
            account=account, project=project, count=parse_count(count)
        )

    return HelpRequest()
