"""The StyleSheet safe type for CSS style sheets."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass

from .style import Style

# A single- or double-quoted CSS string.
_CSS_STRING = re.compile(
    r'"(?:[^"\r\n\f\\]|\\[\s\S])*"' r"|'(?:[^'\r\n\f\\]|\\[\s\S])*'"
)
# A character not allowed in a CSS3 selector once strings are removed.
_INVALID_SELECTOR_CHAR = re.compile(r"[^\-_a-zA-Z0-9#.:* ,>+~\[\]()=^$|]")

# Opening bracket for each closing bracket.
_MATCHING_BRACKETS = {")": "(", "]": "["}
_OPENING_BRACKETS = frozenset(_MATCHING_BRACKETS.values())


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


@dataclass(frozen=True)
class StyleSheet:
    """A CSS style sheet that will not cause untrusted script execution."""

    value: str = ""

    def __str__(self) -> str:
        return self.value


def style_sheet_from_constant(style_sheet: str) -> StyleSheet:
    """Wrap a programmer-controlled style sheet."""
    return StyleSheet(style_sheet)


def has_balanced_brackets(text: str) -> bool:
    """Report whether the () and [] brackets in text are balanced."""
    stack: list[str] = []
    for ch in text:
        expected = _MATCHING_BRACKETS.get(ch)
        if expected is not None:
            if not stack or stack.pop() != expected:
                return False
        elif ch in _OPENING_BRACKETS:
            stack.append(ch)
    return not stack


def css_rule(selector: str, style: Style) -> StyleSheet:
    """Build the rule ``selector{style}``.

    Raises ValueError if selector contains '<', a character not allowed
    outside CSS strings, or unbalanced brackets.
    """
    if "<" in selector:
        raise ValueError(f"selector {_quote(selector)} contains '<'")
    without_strings = _CSS_STRING.sub("", selector)
    match = _INVALID_SELECTOR_CHAR.search(without_strings)
    if match is not None:
        raise ValueError(
            f"selector {_quote(selector)} contains {_quote(match.group(0))}, "
            "which is disallowed outside of CSS strings"
        )
    if not has_balanced_brackets(without_strings):
        raise ValueError(
            f"selector {_quote(selector)} contains unbalanced () or [] brackets"
        )
    return StyleSheet(f"{selector}{{{style}}}")