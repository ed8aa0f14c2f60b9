"""Numeric per-entry columns: inode number, hard-link count and listing index."""

from __future__ import annotations

import itertools
import os
from dataclasses import dataclass

_HAS_INODES = os.name != "nt"
_listing_index = itertools.count()


@dataclass(frozen=True)
class INode:
    """The inode number of an entry, or ``None`` where the platform has none."""

    index: int | None = None

    @classmethod
    def from_stat(cls, st: os.stat_result) -> INode:
        return cls(st.st_ino if _HAS_INODES else None)

    def render(self) -> str:
        return "-" if self.index is None else str(self.index)


@dataclass(frozen=True)
class Links:
    """The hard-link count of an entry, or ``None`` where the platform has none."""

    nlink: int | None = None

    @classmethod
    def from_stat(cls, st: os.stat_result) -> Links:
        return cls(st.st_nlink if _HAS_INODES else None)

    def render(self) -> str:
        return "-" if self.nlink is None else str(self.nlink)


@dataclass(frozen=True)
class Count:
    """A running index: each entry built gets the next number, starting at 0."""

    index: int | None = None
    indice: int = 0

    @classmethod
    def from_stat(cls, st: os.stat_result) -> Count:
        index = st.st_ino if _HAS_INODES else None
        return cls(index, next(_listing_index))

    def render(self) -> str:
        return "-" if self.index is None else str(self.indice)