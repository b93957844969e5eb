"""Signal Scout: cross-platform community signal research."""

__version__ = "1.0.0"
