"""Noosphere — registry validation tooling."""

__version__ = "0.1.0"
