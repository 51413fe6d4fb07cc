"""The %d, %i and %u conversions."""

from __future__ import annotations

from dataclasses import replace

from .fmtspec import Flag, FormatSpec, count_digits, padding

_INT_MIN = -2147483648


def _wrap_int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - 0x100000000 if n >= 0x80000000 else n


def _putnbr(n: int) -> str:
    # The digits go through a 32-bit int, so 2147483648 comes out negative.
    return str(_wrap_int32(n))


def _has_sign(n: int, spec: FormatSpec) -> bool:
    return n < 0 or spec.has(Flag.PLUS) or spec.has(Flag.SPACE)


def _sign(n: int, spec: FormatSpec) -> str:
    if n < 0:
        return "-"
    if spec.has(Flag.PLUS):
        return "+"
    if spec.has(Flag.SPACE):
        return " "
    return ""


def _suppressed(n: int, spec: FormatSpec) -> bool:
    return n == 0 and spec.has(Flag.DOT) and spec.precision == 0


def _precision_zeros(digit_len: int, spec: FormatSpec) -> str:
    if spec.has(Flag.DOT) and spec.precision > digit_len:
        return padding(spec.precision - digit_len, "0")
    return ""


def number_length(n: int, spec: FormatSpec) -> int:
    """Printed length of n with its sign and precision, before width padding."""
    if _suppressed(n, spec):
        return 0
    has_sign = int(_has_sign(n, spec))
    digit_len = count_digits(n)
    if spec.has(Flag.DOT) and spec.precision > digit_len:
        return spec.precision + has_sign
    return digit_len + has_sign


def _number(n: int, spec: FormatSpec) -> str:
    if number_length(n, spec) == 0:
        return ""
    if n == _INT_MIN:
        return "-2147483648"
    magnitude = abs(n)
    out = _sign(n, spec) + _precision_zeros(count_digits(magnitude), spec)
    if not _suppressed(magnitude, spec):
        out += _putnbr(magnitude)
    return out


def _digits_only(n: int, spec: FormatSpec) -> str:
    out = _precision_zeros(count_digits(n), spec)
    if not _suppressed(n, spec):
        out += _putnbr(abs(n))
    return out


def _zero_pad(spec: FormatSpec) -> bool:
    return (
        spec.has(Flag.ZERO)
        and not spec.has(Flag.DOT)
        and not spec.has(Flag.MINUS)
    )


def convert_int(spec: FormatSpec, value: int) -> str:
    """Text of a signed 32-bit integer under the given specification."""
    n = _wrap_int32(value)
    length = number_length(n, spec)
    pad = "0" if _zero_pad(spec) else " "
    left_aligned = spec.has(Flag.MINUS)
    widened = spec.width > length
    sign_first = pad == "0" and _has_sign(n, spec)

    out = ""
    if not left_aligned and widened:
        if sign_first:
            out += _sign(n, spec)
        out += padding(spec.width - length, pad)
    if sign_first and not left_aligned and widened:
        out += _digits_only(n, spec)
    else:
        out += _number(n, spec)
    if left_aligned and widened:
        out += padding(spec.width - length, " ")
    return out


def convert_uint(spec: FormatSpec, value: int) -> str:
    """Text of an unsigned 32-bit integer; the plus and space flags are ignored."""
    n = value & 0xFFFFFFFF
    spec = replace(spec, flags=spec.flags & ~(Flag.PLUS | Flag.SPACE))
    length = number_length(n, spec)
    pad = "0" if _zero_pad(spec) else " "
    left_aligned = spec.has(Flag.MINUS)

    out = ""
    if not left_aligned and spec.width > length:
        out += padding(spec.width - length, pad)
    if length:
        out += _precision_zeros(count_digits(n), spec)
        if not _suppressed(n, spec):
            out += str(n)
    if left_aligned and spec.width > length:
        out += padding(spec.width - length, " ")
    return out