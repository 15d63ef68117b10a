"""URL checks, URL escaping and stringification shared by the safe types."""

from __future__ import annotations

import re
import weakref

_SAFE_TRUSTED_RESOURCE_URL_PREFIX = re.compile(
    r"(?:(?:https:)?//[0-9a-z.:\[\]-]+/|/[^/\\]|about:blank#)",
    re.IGNORECASE,
)

_DOUBLE_DOT_SEGMENT = re.compile(r"(?:\.|%2e)(?:\.|%2e)", re.IGNORECASE)

_ALNUM = frozenset(
    b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
)
# Unreserved according to RFC 3986 section 2.3.
_UNRESERVED = _ALNUM | frozenset(b"-._~")
# Reserved characters that are kept as they are when normalizing.
_KEPT_WHEN_NORMALIZING = frozenset(b"!#$&*+,/:;=?@[]")
_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")
_PERCENT = ord("%")


def is_safe_trusted_resource_url_prefix(prefix: str) -> bool:
    """Report whether prefix is safe to start a TrustedResourceURL.

    Safe prefixes start with ``https://<origin>/``, ``//<origin>/``,
    ``/<pathStart>`` or ``about:blank#``.
    """
    return _SAFE_TRUSTED_RESOURCE_URL_PREFIX.match(prefix) is not None


def url_contains_double_dot_segment(url: str) -> bool:
    """Report whether url contains "..", plain or percent-encoded."""
    return _DOUBLE_DOT_SEGMENT.search(url) is not None


def query_escape_url(*args: object) -> str:
    """Escape the stringified arguments for embedding in a URL query."""
    return _process_url(False, stringify(*args))


def normalize_url(*args: object) -> str:
    """Normalize the stringified arguments as URL content.

    Reserved characters and valid percent escapes are kept; '&' is not
    encoded, so HTML attribute embedding still needs HTML escaping.
    """
    return _process_url(True, stringify(*args))


def _process_url(normalize: bool, text: str) -> str:
    data = text.encode("utf-8", "surrogatepass")
    out = []
    for i, byte in enumerate(data):
        if byte in _UNRESERVED or (normalize and byte in _KEPT_WHEN_NORMALIZING):
            out.append(chr(byte))
        elif (
            normalize
            and byte == _PERCENT
            and i + 2 < len(data)
            and data[i + 1] in _HEX_DIGITS
            and data[i + 2] in _HEX_DIGITS
        ):
            out.append("%")
        else:
            out.append(f"%{byte:02x}")
    return "".join(out)


def _format_operand(value: object) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def stringify(*args: object) -> str:
    """Join the string forms of args.

    A space separates two neighbouring operands when neither is a string;
    None is written as ``<nil>`` and booleans as ``true``/``false``.
    """
    if len(args) == 1 and isinstance(args[0], str):
        return args[0]
    parts = []
    previous_is_str = True
    for position, arg in enumerate(args):
        is_str = isinstance(arg, str)
        if position and not is_str and not previous_is_str:
            parts.append(" ")
        parts.append(_format_operand(arg))
        previous_is_str = is_str
    return "".join(parts)


def indirect(value: object) -> object:
    """Follow weak references until a plain value is reached.

    A reference whose target is gone yields None; any other value is
    returned unchanged.
    """
    while isinstance(value, weakref.ReferenceType):
        value = value()
    return value