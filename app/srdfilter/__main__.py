"""Allow running srdfilter as ``python -m srdfilter``."""

from srdfilter.cli.main import app

app(prog_name="srdfilter")
