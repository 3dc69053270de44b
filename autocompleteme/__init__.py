"""Interactive prefix autocomplete over weighted terms, ranked by descending weight."""

__version__ = "0.1.0"