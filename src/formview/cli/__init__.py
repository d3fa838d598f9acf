"""Command-line interface for formview."""

from formview.cli.main import main

__all__ = ["main"]
