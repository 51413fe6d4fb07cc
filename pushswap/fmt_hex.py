"""The %x, %X and %p conversions."""

from __future__ import annotations

from typing import Optional

from .fmtspec import Flag, FormatSpec, padding

_NIL_TEXT = "(nil)"


def _suppressed(n: int, spec: FormatSpec) -> bool:
    return n == 0 and spec.has(Flag.DOT) and spec.precision == 0


def _zero_pad(spec: FormatSpec) -> bool:
    return (
        spec.has(Flag.ZERO)
        and not spec.has(Flag.DOT)
        and not spec.has(Flag.MINUS)
    )


def _hex_digits(n: int, uppercase: bool) -> str:
    return format(n, "X" if uppercase else "x")


def _precision_zeros(digit_len: int, spec: FormatSpec) -> str:
    if spec.has(Flag.DOT) and spec.precision > digit_len:
        return padding(spec.precision - digit_len, "0")
    return ""


def hex_length(n: int, spec: FormatSpec, has_prefix: bool) -> int:
    """Printed length of n in hexadecimal with prefix and precision, before width padding."""
    if _suppressed(n, spec):
        return 0
    digit_len = len(_hex_digits(n, False))
    prefix_len = 2 if has_prefix else 0
    if spec.has(Flag.DOT) and spec.precision > digit_len:
        return spec.precision + prefix_len
    return digit_len + prefix_len


def _hex_number(n: int, spec: FormatSpec, uppercase: bool) -> str:
    has_prefix = spec.has(Flag.HASH) and n != 0
    length = hex_length(n, spec, has_prefix)
    if length == 0:
        return ""
    widened = spec.width > length
    if widened and not spec.has(Flag.MINUS):
        has_prefix = False
    out = ""
    if has_prefix and not widened:
        out += "0X" if uppercase else "0x"
    digits = _hex_digits(n, uppercase)
    out += _precision_zeros(len(digits), spec)
    if not _suppressed(n, spec):
        out += digits
    return out


def convert_hex(spec: FormatSpec, value: int, uppercase: bool = False) -> str:
    """Text of an unsigned 32-bit integer in hexadecimal under the given specification."""
    n = value & 0xFFFFFFFF
    prefix = "0X" if uppercase else "0x"
    has_prefix = spec.has(Flag.HASH) and n != 0
    length = hex_length(n, spec, has_prefix)
    pad = "0" if _zero_pad(spec) else " "
    left_aligned = spec.has(Flag.MINUS)
    widened = spec.width > length

    out = ""
    if (pad == "0" and has_prefix) or (widened and has_prefix and left_aligned):
        out += prefix
        has_prefix = False
    if not left_aligned and widened:
        out += padding(spec.width - length, pad)
    if widened and not left_aligned and has_prefix:
        out += prefix
    out += _hex_number(n, spec, uppercase)
    if left_aligned and widened:
        out += padding(spec.width - length, " ")
    return out


def pointer_length(n: int, spec: FormatSpec) -> int:
    """Printed length of an address with its 0x prefix, before width padding."""
    if _suppressed(n, spec):
        return 0
    digit_len = len(_hex_digits(n, False))
    if spec.has(Flag.DOT) and spec.precision > digit_len:
        return spec.precision + 2
    return digit_len + 2


def _pointer_number(n: int, spec: FormatSpec) -> str:
    out = ""
    if not spec.has(Flag.ZERO) or spec.has(Flag.DOT) or spec.has(Flag.MINUS):
        out += "0x"
    digits = _hex_digits(n, False)
    out += _precision_zeros(len(digits), spec)
    if not _suppressed(n, spec):
        out += digits
    return out


def _nil(spec: FormatSpec) -> str:
    length = len(_NIL_TEXT)
    fill = padding(spec.width - length, " ") if spec.width > length else ""
    if spec.has(Flag.MINUS):
        return _NIL_TEXT + fill
    return fill + _NIL_TEXT


def convert_ptr(spec: FormatSpec, value: Optional[int]) -> str:
    """An address as 0x followed by hexadecimal digits; a null address reads "(nil)"."""
    if not value:
        return _nil(spec)
    n = value & 0xFFFFFFFFFFFFFFFF
    length = pointer_length(n, spec)
    widened = spec.width > length
    left_aligned = spec.has(Flag.MINUS)
    if _zero_pad(spec):
        out = "0x"
        if widened:
            out += padding(spec.width - length, "0")
        return out + _pointer_number(n, spec)
    out = ""
    if not left_aligned and widened:
        out += padding(spec.width - length, " ")
    out += _pointer_number(n, spec)
    if left_aligned and widened:
        out += padding(spec.width - length, " ")
    return out