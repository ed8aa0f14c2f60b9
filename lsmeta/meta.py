"""Complete metadata of a directory entry and recursive directory listing."""

from __future__ import annotations

import copy
import dataclasses
import fnmatch
import os
import stat
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from lsmeta.counters import Count, INode, Links
from lsmeta.date import Date
from lsmeta.filetype import FileKind, FileType
from lsmeta.indicator import Indicator
from lsmeta.name import Name
from lsmeta.owner import Owner
from lsmeta.permissions import Permissions
from lsmeta.size import Size
from lsmeta.symlink import SymLink


class Display(Enum):
    """Which entries of a directory are listed."""

    ALL = "all"
    ALMOST_ALL = "almost_all"
    DIRECTORY_ONLY = "directory_only"
    VISIBLE_ONLY = "visible_only"


class Layout(Enum):
    """How the listing is laid out."""

    GRID = "grid"
    TREE = "tree"
    ONE_LINE = "one_line"


@dataclass(frozen=True)
class ListingOptions:
    """Settings that decide which entries a recursive listing visits."""

    display: Display = Display.VISIBLE_ONLY
    layout: Layout = Layout.GRID
    dereference: bool = False
    ignore_globs: tuple[str, ...] = ()


def _report(path: str | os.PathLike[str], err: OSError) -> None:
    reason = err.strerror or str(err)
    print(f"{os.fspath(path)}: {reason}.", file=sys.stderr)


def _is_ignored(name: str, globs: tuple[str, ...]) -> bool:
    return any(fnmatch.fnmatchcase(name, pattern) for pattern in globs)


def total_file_size(path: str | os.PathLike[str]) -> int:
    """Size of a file, or of a directory and everything below it, in bytes.

    Symlinks and special files count as zero; unreadable entries are reported
    on standard error and skipped.
    """
    try:
        st = os.lstat(path)
    except OSError as err:
        _report(path, err)
        return 0
    if stat.S_ISREG(st.st_mode):
        return st.st_size
    if not stat.S_ISDIR(st.st_mode):
        return 0
    size = st.st_size
    try:
        with os.scandir(path) as entries:
            children = [entry.path for entry in entries]
    except OSError as err:
        _report(path, err)
        return size
    return size + sum(total_file_size(child) for child in children)


@dataclass
class Meta:
    """Everything shown about one entry, with its children once listed."""

    name: Name
    path: Path
    permissions: Permissions
    date: Date
    owner: Owner
    file_type: FileType
    size: Size
    symlink: SymLink
    indicator: Indicator
    inode: INode
    links: Links
    count: Count
    content: list[Meta] | None = None

    @classmethod
    def from_path(
        cls, path: str | os.PathLike[str], dereference: bool = False
    ) -> Meta:
        """Gather the metadata of ``path``; symlinks are followed when ``dereference``.

        Raises ``OSError`` when the entry cannot be read, or when a followed
        link is broken.
        """
        path = Path(path)
        metadata = os.lstat(path)
        target_meta = None
        if stat.S_ISLNK(metadata.st_mode):
            try:
                followed = os.stat(path)
            except OSError:
                if dereference:
                    raise
            else:
                if dereference:
                    metadata = followed
                else:
                    target_meta = followed

        permissions = Permissions.from_mode(metadata.st_mode)
        file_type = FileType.from_stat(metadata, target_meta, permissions)
        return cls(
            name=Name(path, file_type),
            path=path,
            permissions=permissions,
            date=Date.from_stat(metadata),
            owner=Owner.from_stat(metadata),
            file_type=file_type,
            size=Size.from_stat(metadata),
            symlink=SymLink.from_path(path),
            indicator=Indicator.from_file_type(file_type),
            inode=INode.from_stat(metadata),
            links=Links.from_stat(metadata),
            count=Count.from_stat(metadata),
        )

    def _as_named(self, label: str) -> Meta:
        name = copy.copy(self.name)
        name.name = label
        return dataclasses.replace(self, name=name, content=None)

    def recurse_into(
        self, depth: int, options: ListingOptions = ListingOptions()
    ) -> list[Meta] | None:
        """List the entries below this one down to ``depth`` levels.

        Returns ``None`` when this entry is not listed into: depth exhausted,
        not a directory, or a directory that cannot be read.
        """
        if depth == 0:
            return None
        if (
            options.display is Display.DIRECTORY_ONLY
            and options.layout is not Layout.TREE
        ):
            return None

        kind = self.file_type.kind
        if kind is FileKind.SYMLINK and self.file_type.is_dir:
            if options.layout is Layout.ONE_LINE:
                return None
        elif kind is not FileKind.DIRECTORY:
            return None

        try:
            with os.scandir(self.path) as scanned:
                entries = list(scanned)
        except OSError as err:
            _report(self.path, err)
            return None

        content: list[Meta] = []
        if options.display is Display.ALL and options.layout is not Layout.TREE:
            parent = Meta.from_path(self.path / "..", options.dereference)
            content.append(self._as_named("."))
            content.append(parent._as_named(".."))

        for entry in entries:
            path = Path(entry.path)
            name = entry.name
            if _is_ignored(name, options.ignore_globs):
                continue
            if options.display is Display.VISIBLE_ONLY and name.startswith("."):
                continue

            try:
                entry_meta = Meta.from_path(path, options.dereference)
            except OSError as err:
                _report(path, err)
                continue

            if (
                options.layout is Layout.TREE
                and options.display is Display.DIRECTORY_ONLY
                and not entry.is_dir(follow_symlinks=False)
            ):
                continue

            try:
                entry_meta.content = entry_meta.recurse_into(depth - 1, options)
            except OSError as err:
                _report(path, err)
                continue

            content.append(entry_meta)

        return content

    def calculate_total_size(self) -> None:
        """Replace the size of a directory by the size of all it contains."""
        if self.file_type.kind is not FileKind.DIRECTORY:
            return
        if self.content is not None:
            accumulated = self.size.bytes
            for child in self.content:
                child.calculate_total_size()
                accumulated += child.size.bytes
            self.size = Size(accumulated)
        else:
            # The listing depth may have stopped short of this directory.
            self.size = Size(total_file_size(self.path))