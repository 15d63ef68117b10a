"""Errors raised while sanitizing templates."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """The kind of a template sanitization error."""

    OK = 0
    AMBIG_CONTEXT = 1
    BAD_HTML = 2
    BRANCH_END = 3
    END_CONTEXT = 4
    NO_SUCH_TEMPLATE = 5
    OUTPUT_CONTEXT = 6
    PARTIAL_CHARSET = 7
    PARTIAL_ESCAPE = 8
    RANGE_LOOP_REENTRY = 9
    SLASH_AMBIG = 10
    PREDEFINED_ESCAPER = 11
    ESCAPE_ACTION = 12
    CSP_COMPATIBILITY = 13
    UNBALANCED_JS_TEMPLATE = 14


class TemplateError(Exception):
    """A problem found while sanitizing a template.

    When ``node`` is given, its string form is used as the location and
    overrides ``name`` and ``line``.
    """

    def __init__(
        self,
        code: ErrorCode,
        node: object = None,
        name: str = "",
        line: int = 0,
        description: str = "",
    ) -> None:
        super().__init__(description)
        self.code = code
        self.node = node
        self.name = name
        self.line = line
        self.description = description

    def __str__(self) -> str:
        if self.node is not None:
            return f"html/template:{self.node}: {self.description}"
        if self.line != 0:
            return f"html/template:{self.name}:{self.line}: {self.description}"
        if self.name:
            return f"html/template:{self.name}: {self.description}"
        return "html/template: " + self.description


def errorf(
    code: ErrorCode, node: object, line: int, fmt: str, *args: object
) -> TemplateError:
    """Build a TemplateError whose description is fmt %-formatted with args.

    The template name is left empty for the caller to fill in.
    """
    description = fmt % args if args else fmt
    return TemplateError(code, node, "", line, description)