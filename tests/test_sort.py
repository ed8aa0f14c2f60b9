import os
from datetime import datetime

import pytest

from lsmeta.meta import Meta
from lsmeta.size import Size
from lsmeta.sort import (
    DirGrouping,
    SortColumn,
    SortOptions,
    SortOrder,
    assemble_sorters,
    by_meta,
    sort_metas,
    version_compare,
)

LESS, EQUAL, GREATER = -1, 0, 1


def _file(tmp_path, name):
    path = tmp_path / name
    path.touch()
    return Meta.from_path(path, False)


def _dir(tmp_path, name):
    path = tmp_path / name
    path.mkdir()
    return Meta.from_path(path, False)


def test_sort_assemble_sorters_by_name_with_dirs_first(tmp_path):
    meta_a = _file(tmp_path, "zzz")
    meta_z = _dir(tmp_path, "aaa")

    options = SortOptions(dir_grouping=DirGrouping.FIRST)
    assert by_meta(assemble_sorters(options), meta_a, meta_z) == GREATER

    options = SortOptions(dir_grouping=DirGrouping.FIRST, order=SortOrder.REVERSE)
    assert by_meta(assemble_sorters(options), meta_a, meta_z) == GREATER


def test_sort_assemble_sorters_by_name_with_files_first(tmp_path):
    meta_a = _file(tmp_path, "zzz")
    meta_z = _dir(tmp_path, "aaa")

    options = SortOptions(dir_grouping=DirGrouping.LAST)
    assert by_meta(assemble_sorters(options), meta_a, meta_z) == LESS
    assert by_meta(assemble_sorters(options), meta_a, meta_z) == LESS


def test_sort_assemble_sorters_by_name_unordered(tmp_path):
    meta_a = _file(tmp_path, "aaa")
    meta_z = _dir(tmp_path, "zzz")

    options = SortOptions(dir_grouping=DirGrouping.NONE)
    assert by_meta(assemble_sorters(options), meta_a, meta_z) == LESS

    options = SortOptions(dir_grouping=DirGrouping.NONE, order=SortOrder.REVERSE)
    assert by_meta(assemble_sorters(options), meta_a, meta_z) == GREATER


def test_sort_assemble_sorters_by_name_unordered_2(tmp_path):
    meta_a = _file(tmp_path, "zzz")
    meta_z = _dir(tmp_path, "aaa")

    options = SortOptions(dir_grouping=DirGrouping.NONE)
    assert by_meta(assemble_sorters(options), meta_a, meta_z) == GREATER

    options = SortOptions(dir_grouping=DirGrouping.NONE, order=SortOrder.REVERSE)
    assert by_meta(assemble_sorters(options), meta_a, meta_z) == LESS


def test_sort_assemble_sorters_by_time(tmp_path):
    meta_a = _file(tmp_path, "aaa")

    path_z = tmp_path / "zzz"
    path_z.touch()
    old = datetime(1985, 11, 16).timestamp()
    os.utime(path_z, (old, old))
    meta_z = Meta.from_path(path_z, False)

    options = SortOptions(column=SortColumn.TIME)
    assert by_meta(assemble_sorters(options), meta_a, meta_z) == LESS

    options = SortOptions(column=SortColumn.TIME, order=SortOrder.REVERSE)
    assert by_meta(assemble_sorters(options), meta_a, meta_z) == GREATER


def test_sort_by_time_ties_broken_by_name(tmp_path):
    meta_a = _file(tmp_path, "aaa")
    meta_z = _file(tmp_path, "zzz")
    stamp = datetime(2001, 1, 1).timestamp()
    os.utime(meta_a.path, (stamp, stamp))
    os.utime(meta_z.path, (stamp, stamp))
    meta_a = Meta.from_path(meta_a.path)
    meta_z = Meta.from_path(meta_z.path)
    options = SortOptions(column=SortColumn.TIME)
    assert by_meta(assemble_sorters(options), meta_a, meta_z) == LESS


def test_sort_assemble_sorters_by_extension(tmp_path):
    meta_a = _file(tmp_path, "aaa.rs")
    meta_z = _file(tmp_path, "zzz.rs")
    meta_j = _file(tmp_path, "zzz.js")
    meta_t = _file(tmp_path, "zzz.txt")

    sorters = assemble_sorters(SortOptions(column=SortColumn.EXTENSION))
    assert by_meta(sorters, meta_a, meta_z) == EQUAL
    assert by_meta(sorters, meta_a, meta_j) == GREATER
    assert by_meta(sorters, meta_a, meta_t) == LESS


def test_sort_by_extension_without_extension_first(tmp_path):
    meta_plain = _file(tmp_path, "plain")
    meta_rs = _file(tmp_path, "aaa.rs")
    sorters = assemble_sorters(SortOptions(column=SortColumn.EXTENSION))
    assert by_meta(sorters, meta_plain, meta_rs) == LESS


def test_sort_assemble_sorters_by_version(tmp_path):
    meta_a = _file(tmp_path, "2")
    meta_b = _file(tmp_path, "11")
    meta_c = _file(tmp_path, "12")

    sorters = assemble_sorters(SortOptions(column=SortColumn.VERSION))
    assert by_meta(sorters, meta_b, meta_a) == GREATER
    assert by_meta(sorters, meta_b, meta_c) == LESS


def test_sort_by_size_largest_first(tmp_path):
    small = _file(tmp_path, "small")
    big = _file(tmp_path, "big")
    big.size = Size(100)
    sorters = assemble_sorters(SortOptions(column=SortColumn.SIZE))
    assert by_meta(sorters, big, small) == LESS
    assert by_meta(sorters, small, big) == GREATER


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("file2", "file10", LESS),
        ("file10", "file2", GREATER),
        ("v1.2.3", "v1.2.3", EQUAL),
        ("a", "ab", LESS),
        ("b", "a1", GREATER),
        ("", "", EQUAL),
    ],
)
def test_version_compare(a, b, expected):
    assert version_compare(a, b) == expected


def test_sort_metas_dirs_first(tmp_path):
    metas = [
        _file(tmp_path, "b.txt"),
        _dir(tmp_path, "zdir"),
        _file(tmp_path, "A.txt"),
        _dir(tmp_path, "adir"),
    ]
    ordered = sort_metas(metas, SortOptions(dir_grouping=DirGrouping.FIRST))
    assert [m.name.name for m in ordered] == ["adir", "zdir", "A.txt", "b.txt"]


def test_sort_metas_reverse_dirs_last(tmp_path):
    metas = [
        _file(tmp_path, "b.txt"),
        _dir(tmp_path, "zdir"),
        _file(tmp_path, "a.txt"),
        _dir(tmp_path, "adir"),
    ]
    options = SortOptions(dir_grouping=DirGrouping.LAST, order=SortOrder.REVERSE)
    ordered = sort_metas(metas, options)
    assert [m.name.name for m in ordered] == ["b.txt", "a.txt", "zdir", "adir"]