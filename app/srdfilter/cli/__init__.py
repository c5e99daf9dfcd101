"""CLI package for srdfilter.

This package contains the Typer application.
"""

from srdfilter.cli.main import app

__all__ = ["app"]
