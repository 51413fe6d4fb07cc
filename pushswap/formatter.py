"""Formatting of text with printf-style conversion specifications."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

from .fmt_hex import convert_hex, convert_ptr
from .fmt_numbers import convert_int, convert_uint
from .fmt_text import convert_char, convert_percent, convert_str
from .fmtspec import Flag, FormatSpec

_FLAG_CHARS = {
    "-": Flag.MINUS,
    "0": Flag.ZERO,
    "#": Flag.HASH,
    " ": Flag.SPACE,
    "+": Flag.PLUS,
}
_CONVERSIONS = frozenset("cspdiuxX%")


def _read_number(text: str, pos: int) -> tuple[int, int]:
    value = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        value = value * 10 + ord(text[pos]) - ord("0")
        pos += 1
    return value, pos


def parse_spec(text: str, pos: int = 0) -> tuple[FormatSpec, int]:
    """Read flags, width and precision starting at pos; return them and the next position."""
    flags = Flag.NONE
    while pos < len(text) and text[pos] in _FLAG_CHARS:
        flags |= _FLAG_CHARS[text[pos]]
        pos += 1
    width, pos = _read_number(text, pos)
    precision = 0
    if pos < len(text) and text[pos] == ".":
        flags |= Flag.DOT
        precision, pos = _read_number(text, pos + 1)
    return FormatSpec(flags, width, precision), pos


def _next_arg(pending: Iterator[Any]) -> Any:
    try:
        return next(pending)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(conversion: str, spec: FormatSpec, pending: Iterator[Any]) -> str:
    if conversion == "%":
        return convert_percent()
    value = _next_arg(pending)
    if conversion == "c":
        return convert_char(spec, value)
    if conversion == "s":
        return convert_str(spec, value)
    if conversion == "p":
        return convert_ptr(spec, value)
    if conversion in "di":
        return convert_int(spec, value)
    if conversion == "u":
        return convert_uint(spec, value)
    return convert_hex(spec, value, conversion == "X")


def format_string(fmt: str, *args: Any) -> str:
    """The text that results from applying the arguments to the format."""
    if fmt is None:
        raise TypeError("format must be a string, not None")
    pending = iter(args)
    parts: list[str] = []
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent < 0:
            parts.append(fmt[pos:])
            break
        parts.append(fmt[pos:percent])
        pos = percent + 1
        if pos == len(fmt):
            parts.append("%")
            break
        spec, pos = parse_spec(fmt, pos)
        conversion = fmt[pos:pos + 1]
        if conversion and conversion in _CONVERSIONS:
            parts.append(_convert(conversion, spec, pending))
            pos += 1
        else:
            # Unknown conversion: a lone percent sign, the character itself follows.
            parts.append("%")
    return "".join(parts)


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to file (standard output by default); return its length."""
    text = format_string(fmt, *args)
    out = sys.stdout if file is None else file
    out.write(text)
    return len(text)