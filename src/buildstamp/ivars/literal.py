"""Render Python values as Ruby literal source text."""

from __future__ import annotations

import math
from datetime import date, datetime, timezone

_SIMPLE_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\f": "\\f",
    "\v": "\\v",
    "\b": "\\b",
    "\a": "\\a",
    "\x1b": "\\e",
}


class UnrepresentableValueError(TypeError):
    """Raised when a value has no Ruby literal form."""


class LiteralRenderer:
    """Convert metadata values into the Ruby source that reconstructs them.

    Supports nil, booleans, integers, finite floats, strings, dates and
    datetimes (as ``"YYYY-MM-DD"`` strings in UTC), and lists/dicts of
    those. Dict pairs are emitted sorted by key.
    """

    def render(self, value) -> str:
        if value is None:
            return "nil"
        # bool is a subclass of int, so it has to be checked first
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            return self._render_float(value)
        if isinstance(value, str):
            return self._render_string(value)
        if isinstance(value, date):
            return self._render_date(value)
        if isinstance(value, (list, tuple)):
            return "[" + ", ".join(self.render(v) for v in value) + "]"
        if isinstance(value, dict):
            if not value:
                return "{}"
            pairs = ", ".join(
                f"{self.render(k)} => {self.render(v)}"
                for k, v in sorted(value.items(), key=lambda kv: str(kv[0]))
            )
            return "{ " + pairs + " }"
        raise UnrepresentableValueError(
            f"Cannot render {type(value).__name__} value {value!r} as a Ruby literal"
        )

    def _render_float(self, value: float) -> str:
        if math.isnan(value) or math.isinf(value):
            raise UnrepresentableValueError(f"Float {value!r} has no Ruby literal")
        return repr(value)

    def _render_string(self, value: str) -> str:
        out = []
        for i, ch in enumerate(value):
            if ch in _SIMPLE_ESCAPES:
                out.append(_SIMPLE_ESCAPES[ch])
            elif ch == "#" and value[i + 1:i + 2] in ("{", "$", "@"):
                # Block string interpolation
                out.append("\\#")
            elif ord(ch) < 0x20 or ord(ch) == 0x7F:
                out.append(f"\\x{ord(ch):02X}")
            elif ord(ch) > 0x7E:
                code = ord(ch)
                out.append(f"\\u{code:04X}" if code <= 0xFFFF else f"\\u{{{code:X}}}")
            else:
                out.append(ch)
        return '"' + "".join(out) + '"'

    def _render_date(self, value: date) -> str:
        if isinstance(value, datetime) and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return self._render_string(value.strftime("%Y-%m-%d"))
