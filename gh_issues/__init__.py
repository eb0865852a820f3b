"""Show the most recent open issues of a GitHub repository as a text table."""

__version__ = "0.1.0"
