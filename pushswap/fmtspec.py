"""Conversion specifications and the helpers shared by every conversion."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag


class Flag(IntFlag):
    """Flags that may precede the width of a conversion."""

    NONE = 0
    MINUS = 1 << 0
    ZERO = 1 << 1
    HASH = 1 << 2
    SPACE = 1 << 3
    PLUS = 1 << 4
    DOT = 1 << 5


@dataclass(frozen=True)
class FormatSpec:
    """Flags, minimum field width and precision of one conversion."""

    flags: Flag = Flag.NONE
    width: int = 0
    precision: int = 0

    def has(self, flag: Flag) -> bool:
        """True when every bit of the given flag is set."""
        return (self.flags & flag) == flag and flag != Flag.NONE


def count_digits(n: int) -> int:
    """Number of decimal digits in n, ignoring its sign; zero has one."""
    return len(str(abs(n)))


def padding(width: int, char: str) -> str:
    """The padding character repeated width times; nothing for width <= 0."""
    return char * max(width, 0)