"""Ordering of listed entries by name, size, time, version or extension."""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable

from lsmeta.meta import Meta

SortFn = Callable[[Meta, Meta], int]

_CHUNK = re.compile(r"[0-9]+|[^0-9]")


class SortColumn(Enum):
    """The property entries are ordered by."""

    NAME = "name"
    SIZE = "size"
    TIME = "time"
    VERSION = "version"
    EXTENSION = "extension"


class SortOrder(Enum):
    """Natural or reversed order."""

    DEFAULT = "default"
    REVERSE = "reverse"


class DirGrouping(Enum):
    """Whether directories are grouped before or after other entries."""

    NONE = "none"
    FIRST = "first"
    LAST = "last"


@dataclass(frozen=True)
class SortOptions:
    """The sorting settings of a listing."""

    column: SortColumn = SortColumn.NAME
    order: SortOrder = SortOrder.DEFAULT
    dir_grouping: DirGrouping = DirGrouping.NONE


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def version_compare(a: str, b: str) -> int:
    """Compare strings with runs of digits ordered by their numeric value."""
    left = _CHUNK.findall(a)
    right = _CHUNK.findall(b)
    for x, y in zip(left, right):
        if x.isdigit() and y.isdigit():
            result = _cmp(int(x), int(y))
        else:
            result = _cmp(x[0], y[0])
            if result == 0 and len(x) != len(y):
                # Equal first characters of unequal chunks cannot occur, but
                # keep the comparison total.
                result = _cmp(x, y)
        if result:
            return result
    return _cmp(len(left), len(right))


def _with_dirs_first(a: Meta, b: Meta) -> int:
    return _cmp(b.file_type.is_dirlike(), a.file_type.is_dirlike())


def _by_size(a: Meta, b: Meta) -> int:
    return _cmp(b.size.bytes, a.size.bytes)


def _by_name(a: Meta, b: Meta) -> int:
    return _cmp(a.name, b.name)


def _by_date(a: Meta, b: Meta) -> int:
    return _cmp(b.date, a.date) or _by_name(a, b)


def _by_version(a: Meta, b: Meta) -> int:
    return version_compare(a.name.name, b.name.name)


def _extension_key(meta: Meta) -> tuple[bool, str]:
    extension = meta.name.extension
    return (extension is not None, extension or "")


def _by_extension(a: Meta, b: Meta) -> int:
    return _cmp(_extension_key(a), _extension_key(b))


_COLUMN_SORTERS: dict[SortColumn, SortFn] = {
    SortColumn.NAME: _by_name,
    SortColumn.SIZE: _by_size,
    SortColumn.TIME: _by_date,
    SortColumn.VERSION: _by_version,
    SortColumn.EXTENSION: _by_extension,
}


def assemble_sorters(options: SortOptions) -> list[tuple[SortOrder, SortFn]]:
    """The comparisons to apply in turn, each with its direction."""
    sorters: list[tuple[SortOrder, SortFn]] = []
    if options.dir_grouping is DirGrouping.FIRST:
        sorters.append((SortOrder.DEFAULT, _with_dirs_first))
    elif options.dir_grouping is DirGrouping.LAST:
        sorters.append((SortOrder.REVERSE, _with_dirs_first))
    sorters.append((options.order, _COLUMN_SORTERS[options.column]))
    return sorters


def by_meta(sorters: Iterable[tuple[SortOrder, SortFn]], a: Meta, b: Meta) -> int:
    """Compare two entries: negative, zero or positive like a ``cmp`` function."""
    for direction, sorter in sorters:
        result = sorter(a, b)
        if result:
            return -result if direction is SortOrder.REVERSE else result
    return 0


def sort_metas(metas: Iterable[Meta], options: SortOptions) -> list[Meta]:
    """Return the entries in listing order; equal entries keep their order."""
    sorters = assemble_sorters(options)
    return sorted(metas, key=functools.cmp_to_key(functools.partial(by_meta, sorters)))