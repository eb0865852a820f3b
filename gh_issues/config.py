"""Runtime configuration and logging setup."""

import logging
import os

from pydantic import BaseModel, Field

from . import __version__

DEFAULT_GITHUB_URL = "https://api.github.com"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
HANDLER_NAME = "gh_issues.stderr"


class IssuesConfig(BaseModel):
    """Settings for talking to the issue tracker.

    Resolved once at startup and handed to the fetcher, so tests can point
    the tool at a different endpoint without touching process-wide state.
    """

    github_url: str = Field(
        DEFAULT_GITHUB_URL, description="Root URL of the GitHub REST API"
    )
    user_agent: str = Field(
        f"gh-issues/{__version__}", description="User-Agent header sent with requests"
    )
    timeout: float = Field(10.0, description="Transport timeout in seconds")

    @classmethod
    def from_env(cls) -> "IssuesConfig":
        """Build configuration from environment variables.

        Reads GITHUB_API_URL, GH_ISSUES_USER_AGENT and GH_ISSUES_TIMEOUT.
        Unset variables fall back to the defaults.
        """
        values: dict[str, str] = {}
        env_map = {
            "github_url": "GITHUB_API_URL",
            "user_agent": "GH_ISSUES_USER_AGENT",
            "timeout": "GH_ISSUES_TIMEOUT",
        }
        for field_name, env_name in env_map.items():
            value = os.getenv(env_name)
            if value:
                values[field_name] = value
        return cls(**values)


def configure_logging(level: str | None = None) -> None:
    """Send gh_issues logs to stderr.

    Args:
        level: Log level name. If None, reads GH_ISSUES_LOG_LEVEL
            (default WARNING).
    """
    level_name = (level or os.getenv("GH_ISSUES_LOG_LEVEL", "WARNING")).upper()
    logger = logging.getLogger("gh_issues")
    logger.setLevel(level_name)

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
