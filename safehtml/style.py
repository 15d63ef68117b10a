"""The Style safe type for sequences of CSS declarations."""

from __future__ import annotations

import json
import re
from collections.abc import Sequence
from dataclasses import dataclass

INNOCUOUS_PROPERTY_VALUE = "zGoSafezInvalidPropertyValue"
"""Replaces a property value that fails validation."""

_INNOCUOUS_URL = "about:invalid#zGoSafez"

# Every '*' or '/' must be followed by end of text or a safe character, which
# rules out comment markers, "//", function calls and error-recovery runes.
_SAFE_REGULAR_PROPERTY_VALUE = re.compile(
    r"(?:[*/]?(?:[0-9a-zA-Z+-.!#%_ \t]|\Z))*"
)
_SAFE_ENUM_PROPERTY_VALUE = re.compile(r"[a-zA-Z-]*")
# A subset of CSS <ident-token> values, covering generic font family names.
_CSS_IDENTIFIER = re.compile(r"[a-zA-Z][-a-zA-Z]+")

_URL_SCHEME = re.compile(r"([^:/?#]*):")
_SAFE_URL_SCHEMES = frozenset({"http", "https", "mailto", "ftp"})
_SAFE_DATA_URL = re.compile(
    r"data:(?:"
    r"image/(?:bmp|gif|jpeg|jpg|png|tiff|webp|x-icon)|"
    r"video/(?:mpeg|mp4|ogg|webm|x-matroska|quicktime|x-ms-wmv)|"
    r"audio/(?:3gpp2|3gpp|aac|l16|midi|mp3|mp4|mpeg|oga|ogg|opus|"
    r"x-m4a|x-matroska|x-wav|wav|webm)"
    r");base64,[a-z0-9+/]+=*",
    re.IGNORECASE,
)

_REGULAR_PROPERTIES = (
    ("background_color", "background-color"),
    ("background_position", "background-position"),
    ("background_repeat", "background-repeat"),
    ("background_size", "background-size"),
    ("color", "color"),
    ("height", "height"),
    ("width", "width"),
    ("left", "left"),
    ("right", "right"),
    ("top", "top"),
    ("bottom", "bottom"),
    ("font_weight", "font-weight"),
    ("padding", "padding"),
    ("z_index", "z-index"),
)


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


@dataclass(frozen=True)
class Style:
    """CSS declarations that will not cause untrusted script execution."""

    value: str = ""

    def __str__(self) -> str:
        return self.value


@dataclass
class StyleProperties:
    """Values for CSS properties, validated by style_from_properties.

    Each attribute holds the value of the CSS property whose name is the
    hyphenated form of the attribute name; empty values are left out.
    """

    background_image_urls: Sequence[str] = ()
    font_family: Sequence[str] = ()
    display: str = ""
    background_color: str = ""
    background_position: str = ""
    background_repeat: str = ""
    background_size: str = ""
    color: str = ""
    height: str = ""
    width: str = ""
    left: str = ""
    right: str = ""
    top: str = ""
    bottom: str = ""
    font_weight: str = ""
    padding: str = ""
    z_index: str = ""


def style_from_constant(style: str) -> Style:
    """Wrap a programmer-controlled style string after basic syntax checks.

    Raises ValueError if style contains angle brackets, does not end with
    ';' or has no ':'.
    """
    if "<" in style or ">" in style:
        raise ValueError(f"style string {_quote(style)} contains angle brackets")
    if not style.endswith(";"):
        raise ValueError(f"style string {_quote(style)} must end with ';'")
    if ":" not in style:
        raise ValueError(
            f"style string {_quote(style)} must contain at least one ':' "
            "to specify a property-value pair"
        )
    return Style(style)


def _sanitize_url(url: str) -> str:
    match = _URL_SCHEME.match(url)
    if match is None:
        return url
    if match.group(1).lower() in _SAFE_URL_SCHEMES:
        return url
    if _SAFE_DATA_URL.fullmatch(url):
        return url
    return _INNOCUOUS_URL


def _filter(value: str, pattern: re.Pattern[str]) -> str:
    if pattern.fullmatch(value) is None:
        return INNOCUOUS_PROPERTY_VALUE
    return value


def _font_family_name(name: str) -> str:
    if _CSS_IDENTIFIER.fullmatch(name):
        return name
    unescaped = name
    if len(name) >= 3 and name.startswith('"') and name.endswith('"'):
        unescaped = name[1:-1]
    return f'"{css_escape_string(unescaped)}"'


def style_from_properties(properties: StyleProperties) -> Style:
    """Build a Style of ``name:value;`` declarations from validated properties."""
    parts = []
    if properties.background_image_urls:
        urls = ", ".join(
            f'url("{css_escape_string(_sanitize_url(url))}")'
            for url in properties.background_image_urls
        )
        parts.append(f"background-image:{urls};")
    if properties.font_family:
        names = ", ".join(_font_family_name(name) for name in properties.font_family)
        parts.append(f"font-family:{names};")
    if properties.display:
        parts.append(
            f"display:{_filter(properties.display, _SAFE_ENUM_PROPERTY_VALUE)};"
        )
    for attribute, css_name in _REGULAR_PROPERTIES:
        value = getattr(properties, attribute)
        if value:
            parts.append(f"{css_name}:{_filter(value, _SAFE_REGULAR_PROPERTY_VALUE)};")
    return Style("".join(parts))


def _css_escape_char(ch: str) -> str:
    code = ord(ch)
    if code == 0:
        return "\ufffd"
    if (
        ch in '<"\\'
        or code <= 0x1F
        or 0x7F <= code <= 0x9F
        or code in (0x2028, 0x2029)
    ):
        return f"\\{code:06X}"
    return ch


def css_escape_string(text: str) -> str:
    """Escape text so that it can sit between "" as a CSS string token.

    Control characters, '<' and Unicode newlines are escaped as well, and
    NUL is replaced with U+FFFD.
    """
    return "".join(_css_escape_char(ch) for ch in text)