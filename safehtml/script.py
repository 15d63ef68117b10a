"""The Script safe type for JavaScript code."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass

from .safe_json import _marshal

# A subset of valid JavaScript identifiers: ASCII only, no escapes.
_JS_IDENTIFIER = re.compile(r"[$_a-zA-Z][$_a-zA-Z0-9]+")


@dataclass(frozen=True)
class Script:
    """JavaScript code that will not run attacker-controlled code."""

    value: str = ""

    def __str__(self) -> str:
        return self.value


def script_from_constant(script: str) -> Script:
    """Wrap programmer-controlled JavaScript code."""
    return Script(script)


def is_js_identifier(name: str) -> bool:
    """Report whether name is an accepted JavaScript identifier."""
    return _JS_IDENTIFIER.fullmatch(name) is not None


def script_from_data_and_constant(name: str, data: object, script: str) -> Script:
    """Build ``var name = <data as JSON>;`` followed by script on a new line.

    Raises ValueError if name is not a valid JavaScript identifier, and
    TypeError or ValueError if data cannot be encoded as JSON.
    """
    if not is_js_identifier(name):
        quoted = json.dumps(name, ensure_ascii=False)
        raise ValueError(f"variable name {quoted} is an invalid Javascript identifier")
    return Script(f"var {name} = {_marshal(data)};\n{script}")