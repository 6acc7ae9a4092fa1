"""Command line interface for pyseed."""

from pyseed.cli.app import app

__all__ = ["app"]
