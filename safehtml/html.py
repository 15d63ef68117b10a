"""The HTML safe type and UTF-8 interchange-validity coercion."""

from __future__ import annotations

import re
from dataclasses import dataclass

_REPLACEMENT = "\ufffd"

_HTML_ESCAPES = str.maketrans(
    {"&": "&amp;", "<": "&lt;", ">": "&gt;", "'": "&#39;", '"': "&#34;"}
)


def _build_invalid_pattern() -> re.Pattern[str]:
    ranges = [
        r"\x00-\x08",
        r"\x0b",
        r"\x0e-\x1f",
        r"\x7f-\x9f",
        r"\ud800-\udfff",
        r"\ufdd0-\ufdef",
        r"\ufffe\uffff",
    ]
    for plane in range(1, 17):
        base = plane << 16
        ranges.append(f"\\U{base | 0xFFFE:08x}\\U{base | 0xFFFF:08x}")
    return re.compile("[" + "".join(ranges) + "]")


# Control characters other than HT, LF, FF and CR, non-characters and
# lone surrogates are not interchange valid.
_NOT_INTERCHANGE_VALID = _build_invalid_pattern()


@dataclass(frozen=True)
class HTML:
    """HTML that is safe to use in HTML contexts and DOM APIs."""

    value: str = ""

    def __str__(self) -> str:
        return self.value


def html_from_constant(text: str) -> HTML:
    """Wrap a programmer-controlled string as HTML."""
    return HTML(text)


def html_escaped(text: str | bytes) -> HTML:
    """Return HTML holding text with the characters &<>"' escaped."""
    return HTML(escape_and_coerce_to_interchange_valid(text))


def html_concat(*args: HTML) -> HTML:
    """Return HTML joining the given HTML values in order."""
    return HTML("".join(str(item) for item in args))


def _decode_replacing_each_bad_byte(data: bytes) -> str:
    parts = []
    position = 0
    while True:
        try:
            parts.append(data[position:].decode("utf-8"))
            return "".join(parts)
        except UnicodeDecodeError as exc:
            parts.append(data[position : position + exc.start].decode("utf-8"))
            parts.append(_REPLACEMENT)
            position += exc.start + 1


def coerce_to_utf8_interchange_valid(text: str | bytes) -> str:
    """Replace characters that are not interchange-valid UTF-8 with U+FFFD.

    Bytes input is decoded with one replacement per undecodable byte.
    """
    if isinstance(text, bytes):
        text = _decode_replacing_each_bad_byte(text)
    return _NOT_INTERCHANGE_VALID.sub(_REPLACEMENT, text)


def escape_and_coerce_to_interchange_valid(text: str | bytes) -> str:
    """Coerce text to interchange-valid UTF-8, then HTML-escape it."""
    return coerce_to_utf8_interchange_valid(text).translate(_HTML_ESCAPES)