"""srdfilter - strip Unearthed Arcana, playtest and homebrew content from JSON data trees."""

__version__ = "0.1.0"
