"""Tests for configuration and logging setup."""

import logging
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from gh_issues import __version__
from gh_issues.config import HANDLER_NAME, IssuesConfig, configure_logging


class TestIssuesConfig:
    """Test IssuesConfig class."""

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self) -> None:
        config = IssuesConfig.from_env()

        assert config.github_url == "https://api.github.com"
        assert config.user_agent == f"gh-issues/{__version__}"
        assert config.timeout == 10.0

    @patch.dict(
        os.environ,
        {
            "GITHUB_API_URL": "http://localhost:9000",
            "GH_ISSUES_USER_AGENT": "tester",
            "GH_ISSUES_TIMEOUT": "2.5",
        },
        clear=True,
    )
    def test_from_env(self) -> None:
        config = IssuesConfig.from_env()

        assert config.github_url == "http://localhost:9000"
        assert config.user_agent == "tester"
        assert config.timeout == 2.5

    @patch.dict(os.environ, {"GH_ISSUES_TIMEOUT": "soon"}, clear=True)
    def test_invalid_timeout(self) -> None:
        with pytest.raises(ValidationError):
            IssuesConfig.from_env()


class TestConfigureLogging:
    """Test configure_logging function."""

    def test_adds_single_handler(self) -> None:
        configure_logging("debug")
        configure_logging("debug")

        logger = logging.getLogger("gh_issues")
        ours = [h for h in logger.handlers if h.get_name() == HANDLER_NAME]
        assert len(ours) == 1
        assert logger.level == logging.DEBUG

    @patch.dict(os.environ, {"GH_ISSUES_LOG_LEVEL": "info"})
    def test_level_from_environment(self) -> None:
        configure_logging()

        assert logging.getLogger("gh_issues").level == logging.INFO

    @patch.dict(os.environ, {}, clear=True)
    def test_default_level_is_warning(self) -> None:
        configure_logging()

        assert logging.getLogger("gh_issues").level == logging.WARNING
