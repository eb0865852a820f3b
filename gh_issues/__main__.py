"""Allow running as ``python -m gh_issues``."""

from .cli.main import run

if __name__ == "__main__":
    run()
