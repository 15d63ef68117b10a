"""The JSON safe type and the JSON encoding used by the safe types."""

from __future__ import annotations

import base64
import dataclasses
import json
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal

from .html import coerce_to_utf8_interchange_valid


def _build_string_escapes() -> dict[int, str]:
    table = {code: f"\\u{code:04x}" for code in range(0x20)}
    table.update(
        {
            ord('"'): '\\"',
            ord("\\"): "\\\\",
            ord("\b"): "\\b",
            ord("\f"): "\\f",
            ord("\n"): "\\n",
            ord("\r"): "\\r",
            ord("\t"): "\\t",
            ord("<"): "\\u003c",
            ord(">"): "\\u003e",
            ord("&"): "\\u0026",
            0x2028: "\\u2028",
            0x2029: "\\u2029",
        }
    )
    table.update({code: "\\ufffd" for code in range(0xD800, 0xE000)})
    return table


_STRING_ESCAPES = _build_string_escapes()
_RAW_STRING_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}
_EXPONENT_PADDING = re.compile(r"e([+-])0(\d)$")


@dataclass(frozen=True)
class JSON:
    """JSON text that is safe to use in JSON contexts."""

    value: str = ""

    def __str__(self) -> str:
        return self.value


def _reject_constant(name: str) -> float:
    raise ValueError(f"invalid JSON value {name}")


def _sorted_object(pairs: list[tuple[str, object]]) -> dict[str, object]:
    return dict(sorted(dict(pairs).items()))


def _format_float(number: float) -> str:
    if not math.isfinite(number):
        label = "NaN" if math.isnan(number) else ("+Inf" if number > 0 else "-Inf")
        raise ValueError(f"json: unsupported value: {label}")
    magnitude = abs(number)
    if magnitude and (magnitude < 1e-6 or magnitude >= 1e21):
        return _EXPONENT_PADDING.sub(r"e\1\2", repr(number))
    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _compact(raw: str) -> str:
    out = []
    in_string = False
    escaped = False
    for ch in raw:
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            out.append(_RAW_STRING_ESCAPES.get(ch, ch))
        elif ch not in " \t\r\n":
            in_string = ch == '"'
            out.append(ch)
    return "".join(out)


def _marshal_custom(value: object) -> str:
    raw = value.__json__()
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8")
    try:
        json.loads(raw, parse_constant=_reject_constant)
    except ValueError as exc:
        raise ValueError(
            f"json: error calling __json__ for type {type(value).__qualname__}: {exc}"
        ) from exc
    return _compact(raw)


def _map_key(key: object) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, int) and not isinstance(key, bool):
        return str(key)
    raise TypeError(f"json: unsupported type: dict with {type(key).__name__} keys")


def _encode(value: object, out: list[str]) -> None:
    if value is None:
        out.append("null")
    elif isinstance(value, bool):
        out.append("true" if value else "false")
    elif callable(getattr(type(value), "__json__", None)):
        out.append(_marshal_custom(value))
    elif isinstance(value, int):
        out.append(str(int(value)))
    elif isinstance(value, float):
        out.append(_format_float(value))
    elif isinstance(value, str):
        out.append('"' + value.translate(_STRING_ESCAPES) + '"')
    elif isinstance(value, (bytes, bytearray)):
        out.append('"' + base64.b64encode(value).decode("ascii") + '"')
    elif dataclasses.is_dataclass(value) and not isinstance(value, type):
        _encode_members(
            ((f.name, getattr(value, f.name)) for f in dataclasses.fields(value)),
            out,
        )
    elif isinstance(value, Mapping):
        members = sorted((_map_key(k), v) for k, v in value.items())
        _encode_members(members, out)
    elif isinstance(value, (list, tuple)):
        out.append("[")
        for position, item in enumerate(value):
            if position:
                out.append(",")
            _encode(item, out)
        out.append("]")
    else:
        raise TypeError(f"json: unsupported type: {type(value).__name__}")


def _encode_members(members, out: list[str]) -> None:
    out.append("{")
    for position, (name, item) in enumerate(members):
        if position:
            out.append(",")
        _encode(name, out)
        out.append(":")
        _encode(item, out)
    out.append("}")


def _marshal(value: object) -> str:
    """Encode value as compact JSON with HTML-sensitive characters escaped.

    Mappings are written with sorted keys, dataclasses in field order.
    Objects with a ``__json__`` method supply their own JSON text, which is
    validated and compacted. Raises TypeError for unsupported types and
    ValueError for unsupported values.
    """
    out: list[str] = []
    _encode(value, out)
    return "".join(out)


def json_from_constant(text: str) -> JSON:
    """Wrap programmer-controlled JSON text."""
    return JSON(text)


def json_from_value(text: str) -> JSON:
    """Parse JSON text and return it re-encoded in safe, compact form.

    Raises ValueError if text is not valid JSON.
    """
    value = json.loads(
        text,
        object_pairs_hook=_sorted_object,
        parse_int=float,
        parse_float=float,
        parse_constant=_reject_constant,
    )
    return JSON(_marshal(value))


def json_escaped(text: str | bytes) -> JSON:
    """Return JSON holding text coerced to interchange-valid UTF-8."""
    return JSON(coerce_to_utf8_interchange_valid(text))


def empty_object_json() -> JSON:
    """Return the empty JSON object."""
    return JSON("{}")


def empty_array_json() -> JSON:
    """Return the empty JSON array."""
    return JSON("[]")


def json_concat(*args: JSON) -> JSON:
    """Return JSON joining the given JSON values in order."""
    return JSON("".join(str(item) for item in args))