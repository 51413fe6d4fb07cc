"""Reading and checking the numbers given on the command line."""

from __future__ import annotations

from typing import Iterable, Sequence

_WHITESPACE = " \t\n\v\f\r"


class InputError(ValueError):
    """Raised when the arguments are not a valid list of distinct integers."""


def _wrap_int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - 0x100000000 if n >= 0x80000000 else n


def atoi(text: str) -> int:
    """Leading whitespace, an optional sign, then digits; wraps to 32 bits."""
    text = text.lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = ""
    for ch in text:
        if not "0" <= ch <= "9":
            break
        digits += ch
    return _wrap_int32(sign * int(digits or "0"))


def is_valid_number(text: str) -> bool:
    """An optional sign followed by one or more decimal digits, nothing else."""
    body = text[1:] if text[:1] in ("-", "+") else text
    return bool(body) and all("0" <= ch <= "9" for ch in body)


def is_valid_input(args: Sequence[str]) -> bool:
    """True when there is at least one argument and every one is a number."""
    return bool(args) and all(is_valid_number(arg) for arg in args)


def has_duplicates(values: Iterable[int]) -> bool:
    """True when some value appears more than once."""
    seen = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def parse_values(args: Sequence[str]) -> list[int]:
    """Turn the arguments into integers, first argument first (top of stack)."""
    for arg in args:
        if not is_valid_number(arg):
            raise InputError(f"not a number: {arg!r}")
    values = [atoi(arg) for arg in args]
    if has_duplicates(values):
        raise InputError("duplicate values")
    return values