"""Unchecked conversions from plain strings, for refactoring legacy code only.

New code must build safe values with the checked constructors instead.
"""

from __future__ import annotations

from .html import HTML
from .identifier import Identifier
from .script import Script
from .style import Style
from .stylesheet import StyleSheet


def riskily_assume_html(text: str) -> HTML:
    """Convert a plain string into HTML without any checks."""
    return HTML(text)


def riskily_assume_script(text: str) -> Script:
    """Convert a plain string into a Script without any checks."""
    return Script(text)


def riskily_assume_style(text: str) -> Style:
    """Convert a plain string into a Style without any checks."""
    return Style(text)


def riskily_assume_style_sheet(text: str) -> StyleSheet:
    """Convert a plain string into a StyleSheet without any checks."""
    return StyleSheet(text)


def riskily_assume_identifier(text: str) -> Identifier:
    """Convert a plain string into an Identifier without any checks."""
    return Identifier(text)