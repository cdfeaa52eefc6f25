"""Metadev package root."""

from metadev.exceptions import MetadevError

__all__ = ["__version__", "MetadevError"]

__version__ = "0.1.0"
