"""Immutable string-like types that are safe to use in HTML, CSS, JavaScript and JSON contexts."""

__version__ = "0.1.0"