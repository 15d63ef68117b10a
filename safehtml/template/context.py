"""Parser contexts used when sanitizing template output."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import TemplateError

_WORD_START = re.compile(r"(?<![0-9A-Za-z_])([^\W_])")


def _title(text: str) -> str:
    """Upper-case the first letter of each word, leaving the rest alone."""
    return _WORD_START.sub(lambda match: match.group(1).upper(), text)


class State(IntEnum):
    """A high-level HTML parser state."""

    # Parsed character data outside any tag, comment or special element body.
    TEXT = 0
    # Inside a special HTML element body.
    SPECIAL_ELEMENT_BODY = 1
    # Before an HTML attribute or the end of a tag.
    TAG = 2
    # Inside an attribute name.
    ATTR_NAME = 3
    # After an attribute name but before any equals sign.
    AFTER_NAME = 4
    # After the equals sign but before the value.
    BEFORE_VALUE = 5
    # Inside an HTML comment.
    HTML_CMT = 6
    # Inside an HTML attribute whose content is text.
    ATTR = 7
    # An infectious error state outside any valid construct.
    ERROR = 8


class Delim(IntEnum):
    """The delimiter that will end the current HTML attribute."""

    NONE = 0
    DOUBLE_QUOTE = 1
    SINGLE_QUOTE = 2
    SPACE_OR_TAG_END = 3


_COMMENT_STATES = frozenset({State.HTML_CMT})
_IN_TAG_STATES = frozenset(
    {State.TAG, State.ATTR_NAME, State.AFTER_NAME, State.BEFORE_VALUE, State.ATTR}
)


def is_comment(state: State) -> bool:
    """Report whether state holds content meant only for template authors."""
    return state in _COMMENT_STATES


def is_in_tag(state: State) -> bool:
    """Report whether state occurs solely inside an HTML tag."""
    return state in _IN_TAG_STATES


@dataclass(frozen=True)
class Element:
    """The element the parser is in.

    ``name`` is the lowercase element name; ``names`` holds every name the
    element could have after contexts were joined.
    """

    name: str = ""
    names: tuple[str, ...] = ()

    def eq(self, other: Element) -> bool:
        """Report whether both elements have the same name."""
        return self.name == other.name

    def __str__(self) -> str:
        return "element" + _title(self.name)


@dataclass(frozen=True)
class Attr:
    """The attribute the parser is in.

    ``value`` holds the attribute value seen so far, ``ambiguous_value``
    whether joining contexts made it ambiguous, and ``names`` every name the
    attribute could have after contexts were joined.
    """

    name: str = ""
    value: str = ""
    ambiguous_value: bool = False
    names: tuple[str, ...] = ()

    def eq(self, other: Attr) -> bool:
        """Report whether both attributes have the same name."""
        return self.name == other.name

    def __str__(self) -> str:
        return "attr" + _title(self.name)


@dataclass(frozen=True)
class Context:
    """The state an HTML parser is in at some point of a template.

    The default value is the start context of an HTML fragment.
    ``script_type`` is the lowercase type of the current script element and
    ``link_rel`` the normalized rel of the current link element, each empty
    when unknown.
    """

    state: State = State.TEXT
    delim: Delim = Delim.NONE
    element: Element = field(default_factory=Element)
    attr: Attr = field(default_factory=Attr)
    err: TemplateError | None = None
    script_type: str = ""
    link_rel: str = ""

    def eq(self, other: Context) -> bool:
        """Report whether two contexts are equal.

        Elements and attributes are compared by name; errors by identity.
        """
        return (
            self.state == other.state
            and self.delim == other.delim
            and self.element.eq(other.element)
            and self.attr.eq(other.attr)
            and self.err is other.err
            and self.script_type == other.script_type
            and self.link_rel == other.link_rel
        )