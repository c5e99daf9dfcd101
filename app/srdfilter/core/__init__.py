"""Core infrastructure shared by the CLI."""
