"""File sizes and their human-readable rendering."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from enum import Enum


class SizeFlag(Enum):
    """How sizes are shown: with long units, short units or raw bytes."""

    DEFAULT = "default"
    SHORT = "short"
    BYTES = "bytes"


class Unit(Enum):
    """The unit a size is expressed in."""

    NONE = 0
    BYTE = 1
    KILO = 2
    MEGA = 3
    GIGA = 4
    TERA = 5


_LONG_NAMES = {
    Unit.NONE: "-",
    Unit.BYTE: "B",
    Unit.KILO: "KB",
    Unit.MEGA: "MB",
    Unit.GIGA: "GB",
    Unit.TERA: "TB",
}

_SHORT_NAMES = {
    Unit.NONE: "-",
    Unit.BYTE: "B",
    Unit.KILO: "K",
    Unit.MEGA: "M",
    Unit.GIGA: "G",
    Unit.TERA: "T",
}

_DIVISORS = {
    Unit.KILO: 1024,
    Unit.MEGA: 1024**2,
    Unit.GIGA: 1024**3,
    Unit.TERA: 1024**4,
}


def _round_tenth(number: float) -> float:
    """Round to one decimal place, halves away from zero."""
    return math.floor(number * 10 + 0.5) / 10


def _format_number(number: float) -> str:
    return f"{number:.{1 if number < 10 else 0}f}"


@dataclass(frozen=True, order=True)
class Size:
    """A size in bytes."""

    bytes: int = 0

    @classmethod
    def from_stat(cls, st: os.stat_result) -> Size:
        """Take the size reported by a stat result."""
        return cls(st.st_size)

    def unit(self, flag: SizeFlag = SizeFlag.DEFAULT) -> Unit:
        """Pick the largest unit that keeps the value at or above one."""
        if self.bytes < 1024 or flag is SizeFlag.BYTES:
            return Unit.BYTE
        if self.bytes < 1024**2:
            return Unit.KILO
        if self.bytes < 1024**3:
            return Unit.MEGA
        if self.bytes < 1024**4:
            return Unit.GIGA
        return Unit.TERA

    def value_string(self, flag: SizeFlag = SizeFlag.DEFAULT) -> str:
        """The numeric part: one decimal below ten, whole numbers above."""
        unit = self.unit(flag)
        if unit is Unit.NONE:
            return ""
        if unit is Unit.BYTE:
            return str(self.bytes)
        return _format_number(_round_tenth(self.bytes / _DIVISORS[unit]))

    def unit_string(self, flag: SizeFlag = SizeFlag.DEFAULT) -> str:
        """The unit part, long or short, or empty when showing raw bytes."""
        if flag is SizeFlag.BYTES:
            return ""
        names = _SHORT_NAMES if flag is SizeFlag.SHORT else _LONG_NAMES
        return names[self.unit(flag)]

    def render(
        self, flag: SizeFlag = SizeFlag.DEFAULT, alignment: int | None = None
    ) -> str:
        """Value and unit, the value right-aligned to ``alignment`` characters."""
        value = self.value_string(flag)
        padding = ""
        if alignment is not None:
            if alignment < len(value):
                raise ValueError(
                    f"alignment {alignment} is narrower than the value {value!r}"
                )
            padding = " " * (alignment - len(value))
        separator = "" if flag is SizeFlag.SHORT else " "
        return f"{padding}{value}{separator}{self.unit_string(flag)}"