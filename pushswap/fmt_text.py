"""The %c, %s and %% conversions."""

from __future__ import annotations

from typing import Optional, Union

from .fmtspec import Flag, FormatSpec, padding

_NULL_TEXT = "(null)"


def convert_char(spec: FormatSpec, value: Union[int, str]) -> str:
    """One character, taken as an unsigned byte, padded with spaces to the width."""
    code = ord(value) if isinstance(value, str) else value
    char = chr(code & 0xFF)
    fill = padding(spec.width - 1, " ") if spec.width > 1 else ""
    if spec.has(Flag.MINUS):
        return char + fill
    return fill + char


def convert_str(spec: FormatSpec, value: Optional[str]) -> str:
    """A string cut to the precision and padded to the width; None reads "(null)"."""
    text = _NULL_TEXT if value is None else value
    length = len(text)
    if spec.has(Flag.DOT):
        if value is None and 0 <= spec.precision < length:
            length = 0
        elif spec.precision < length:
            length = spec.precision
    pad = "0" if spec.has(Flag.ZERO) and not spec.has(Flag.DOT) else " "
    fill = padding(spec.width - length, pad) if spec.width > length else ""
    body = text[:length] if length > 0 else ""
    if spec.has(Flag.MINUS):
        return body + fill
    return fill + body


def convert_percent() -> str:
    """A literal percent sign."""
    return "%"