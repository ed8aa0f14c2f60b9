# lsmeta

`lsmeta` gathers the metadata a directory listing needs about each entry:
its name, type, permissions, owner, size, modification date, inode number,
hard-link count and symlink target. It turns each of these into the short
plain text a listing shows, walks directories recursively, and sorts
entries the way a listing orders them.

It is a library only and has no third-party dependencies. Python 3.10 or
later is required.

## Installation

```
pip install .
```

## Reading one entry

```python
from lsmeta.meta import Meta
from lsmeta.size import SizeFlag

meta = Meta.from_path("setup.cfg", False)
print(meta.file_type.render())          # "." for a file, "d" for a directory, ...
print(meta.permissions.render())        # e.g. "rw-r--r--"
print(meta.owner.render_user(), meta.owner.render_group())
print(meta.size.render(SizeFlag.DEFAULT))  # e.g. "4.0 KB"
print(meta.name.render())               # the escaped file name
print(meta.symlink.render())            # " ⇒ target" for links, "" otherwise
```

`Meta.from_path(path, dereference)` reads a single entry and raises
`OSError` if it cannot be read. With `dereference` true a symlink is
described by its target, and a broken link raises `OSError`.

The fields of `Meta` are:

- `name` — `lsmeta.name.Name`: the file name, its `extension` (dot files
  have none), `file_name()`, `relative_path(base_path)` and
  `render(display, base_path, icon)`, where `display` is a `DisplayOption`
  (`FILE_NAME`, `RELATIVE` or `NONE`). Names compare and order
  case-insensitively. `escape(string)` writes control characters as
  escapes such as `\t` and `\n`, leaving other characters as they are.
- `file_type` — `lsmeta.filetype.FileType`, whose `kind` is a `FileKind`;
  `is_dirlike()` is true for directories and links to directories.
- `permissions` — `lsmeta.permissions.Permissions`, built with
  `Permissions.from_mode(mode)`; `render()` shows setuid, setgid and
  sticky bits as `s`/`S` and `t`/`T`.
- `owner` — `lsmeta.owner.Owner`; ids without a name are shown as numbers.
- `size` — `lsmeta.size.Size`: `value_string(flag)`, `unit_string(flag)`
  and `render(flag, alignment)` with a `SizeFlag` of `DEFAULT` (`42 KB`),
  `SHORT` (`42K`) or `BYTES` (plain byte count). Values below ten keep
  one decimal.
- `date` — `lsmeta.date.Date`: `date_string(date_format)` with a
  `DateFormat` whose `DateStyle` is `DATE` (locale `%c`), `RELATIVE`
  (`2 days ago`, via `humanize_delta`), `ISO` (`MM-DD HH:MM` for the last
  six months, `YYYY-MM-DD` before that) or `FORMATTED` with a `strftime`
  pattern. `age()` gives an `Age` of `HOUR_OLD`, `DAY_OLD` or `OLDER`, and
  `render(date_format)` returns the text together with that age. A time
  out of range renders as `-`.
- `symlink` — `lsmeta.symlink.SymLink`: the link target and whether it
  exists; `render(arrow)` uses `⇒` by default.
- `indicator` — `lsmeta.indicator.Indicator`: `/`, `*`, `|`, `=` or `@`;
  `render(enabled)` returns it only when `enabled` is true.
- `inode`, `links`, `count` — `lsmeta.counters.INode`, `Links` and
  `Count`: the inode number, the hard-link count, and a running index
  that each newly read entry takes in turn. Each renders as `-` where the
  platform has no inodes.

## Walking a directory

```python
from lsmeta.meta import Meta, ListingOptions, Display, Layout

root = Meta.from_path(".", False)
root.content = root.recurse_into(2, ListingOptions(display=Display.ALMOST_ALL))
root.calculate_total_size()
```

`recurse_into(depth, options)` returns the entries below a directory, or
`None` when depth is exhausted, the entry is not a directory, or the
directory cannot be read. `ListingOptions` sets:

- `display` — `Display.VISIBLE_ONLY` (default, hides dot files),
  `ALMOST_ALL`, `ALL` (also adds `.` and `..`, except in tree layout) or
  `DIRECTORY_ONLY` (lists nothing below, except in tree layout where only
  directories are kept);
- `layout` — `Layout.GRID`, `TREE` or `ONE_LINE` (links to directories
  are not followed in one-line layout);
- `dereference` — describe symlinks by their targets;
- `ignore_globs` — shell patterns of names to skip.

Entries that cannot be read are reported on standard error and skipped.
`calculate_total_size()` replaces a directory's size by the size of all
it contains, and `total_file_size(path)` adds up everything under a path.

## Sorting

```python
from lsmeta.sort import SortOptions, SortColumn, SortOrder, DirGrouping, sort_metas

options = SortOptions(
    column=SortColumn.VERSION,
    order=SortOrder.DEFAULT,
    dir_grouping=DirGrouping.FIRST,
)
ordered = sort_metas(root.content, options)
```

Entries sort by `NAME`, `SIZE` (largest first), `TIME` (newest first, then
by name), `VERSION` or `EXTENSION`, in either order, with directories
grouped first, last or mixed in; grouping is not affected by the order.
`assemble_sorters(options)` and `by_meta(sorters, a, b)` give the same
comparison as a `cmp`-style function. `version_compare(a, b)` compares
strings with runs of digits taken by value, so `2` comes before `11`.

## What it does not do

There is no command-line program. Everything renders as plain text:
the package adds no colours, icons, column layout or tree drawing; a
caller that wants those builds them from the values above.