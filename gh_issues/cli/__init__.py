"""Command line interface for gh-issues."""
