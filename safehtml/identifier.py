"""The Identifier safe type for HTML element identifiers."""

from __future__ import annotations

import json
import re
import unicodedata
import uuid
from dataclasses import dataclass

_STARTS_WITH_ALPHABET = re.compile(r"[a-zA-Z]")
_ONLY_ALPHANUMERICS_OR_HYPHEN = re.compile(r"[-_a-zA-Z0-9]*")
_INNOCUOUS_ID = "invalid:"
_SAFE_IDENTIFIER_PUNCTUATION = frozenset("_-.:")


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


@dataclass(frozen=True)
class Identifier:
    """An identifier for HTML elements that is under application control."""

    value: str = ""

    def __str__(self) -> str:
        return self.value


def _is_valid_constant(value: str) -> bool:
    return (
        _STARTS_WITH_ALPHABET.match(value) is not None
        and _ONLY_ALPHANUMERICS_OR_HYPHEN.fullmatch(value) is not None
    )


def identifier_from_constant(value: str) -> Identifier:
    """Build an Identifier from a programmer-controlled string.

    Raises ValueError unless value starts with an ASCII letter and holds
    only ASCII alphanumerics, '-' and '_'.
    """
    if not _is_valid_constant(value):
        raise ValueError(f"invalid identifier {_quote(value)}")
    return Identifier(value)


def identifier_from_constant_prefix(prefix: str, value: str) -> Identifier:
    """Build the Identifier ``prefix-value``.

    Raises ValueError if prefix is not a valid constant identifier or value
    holds anything other than ASCII alphanumerics, '-' and '_'.
    """
    if not _is_valid_constant(prefix):
        raise ValueError(f"invalid prefix {_quote(prefix)}")
    if _ONLY_ALPHANUMERICS_OR_HYPHEN.fullmatch(value) is None:
        raise ValueError(f"value {_quote(value)} contains non-alphanumeric runes")
    return Identifier(f"{prefix}-{value}")


def identifier_sanitized(id_: str) -> Identifier:
    """Return id_ as an Identifier, or ``invalid:<uuid>`` if it is unsafe."""
    if not is_safe_identifier(id_):
        return Identifier(_INNOCUOUS_ID + str(uuid.uuid4()))
    return Identifier(id_)


def is_safe_identifier(id_: str) -> bool:
    """Report whether id_ is non-empty and holds only letters, numbers, '_-.:'."""
    return bool(id_) and all(
        ch in _SAFE_IDENTIFIER_PUNCTUATION or unicodedata.category(ch)[0] in "LN"
        for ch in id_
    )