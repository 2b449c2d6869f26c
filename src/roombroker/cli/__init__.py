"""roombroker command line."""

from roombroker.cli.main import cli

__all__ = ["cli"]
