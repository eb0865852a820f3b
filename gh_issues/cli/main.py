"""Main CLI entry point."""

import logging

import typer
from dotenv import load_dotenv
from rich.console import Console

from ..config import IssuesConfig, configure_logging
from ..github_client.client import IssueFetcher
from ..github_client.models import FetchFailure
from .args import USAGE, HelpRequest, ParsedArgs, parse_args
from .selector import select_issues
from .table import print_table_for_columns

# Load environment variables from .env file
load_dotenv()

COLUMNS = ["number", "created_at", "title"]
FETCH_FAILED_EXIT_CODE = 2

app = typer.Typer(
    name="issues",
    help="Show the most recent open issues of a GitHub repository",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)


def process(request: ParsedArgs, fetcher: IssueFetcher | None = None) -> None:
    """Carry out a parsed request.

    Raises:
        typer.Exit: With code 0 after showing usage, or code 2 when the
            fetch fails
    """
    if isinstance(request, HelpRequest):
        console.print(USAGE, markup=False, emoji=False, highlight=False)
        raise typer.Exit(0)

    fetcher = fetcher or IssueFetcher(IssuesConfig.from_env())
    result = fetcher.fetch(request.account, request.project)

    if isinstance(result, FetchFailure):
        console.print(
            f"Error fetching from GitHub: {result.message or ''}",
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
        raise typer.Exit(FETCH_FAILED_EXIT_CODE)

    issues = select_issues(result.body, request.count)
    logger.debug("Showing %d of %d issues", len(issues), len(result.body))
    print_table_for_columns(issues, COLUMNS)


@app.command(
    add_help_option=False,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def issues(ctx: typer.Context) -> None:
    """Show the most recent open issues of a repository as a table."""
    configure_logging()
    process(parse_args(ctx.args))


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
