"""Classification of directory entries by their stat mode."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from enum import Enum

from lsmeta.permissions import Permissions


class FileKind(Enum):
    """Kinds of directory entries; each value is the symbol shown for it."""

    BLOCK_DEVICE = "b"
    CHAR_DEVICE = "c"
    DIRECTORY = "d"
    FILE = "."
    SYMLINK = "l"
    PIPE = "|"
    SOCKET = "s"
    SPECIAL = "?"


@dataclass(frozen=True)
class FileType:
    """The kind of an entry with the flags that matter for that kind.

    ``uid`` applies to files and directories, ``exec`` to files and
    ``is_dir`` to symlinks (whether the target is a directory).
    """

    kind: FileKind
    uid: bool = False
    exec: bool = False
    is_dir: bool = False

    @classmethod
    def from_stat(
        cls,
        st: os.stat_result,
        target_st: os.stat_result | None,
        permissions: Permissions,
    ) -> FileType:
        """Classify ``st``; ``target_st`` is the followed stat of a symlink, if any."""
        mode = st.st_mode
        if stat.S_ISREG(mode):
            return cls(
                FileKind.FILE,
                uid=permissions.setuid,
                exec=permissions.is_executable(),
            )
        if stat.S_ISDIR(mode):
            return cls(FileKind.DIRECTORY, uid=permissions.setuid)
        if stat.S_ISFIFO(mode):
            return cls(FileKind.PIPE)
        if stat.S_ISLNK(mode):
            # A broken link has no target stat and counts as not a directory.
            is_dir = target_st is not None and stat.S_ISDIR(target_st.st_mode)
            return cls(FileKind.SYMLINK, is_dir=is_dir)
        if stat.S_ISCHR(mode):
            return cls(FileKind.CHAR_DEVICE)
        if stat.S_ISBLK(mode):
            return cls(FileKind.BLOCK_DEVICE)
        if stat.S_ISSOCK(mode):
            return cls(FileKind.SOCKET)
        return cls(FileKind.SPECIAL)

    def is_dirlike(self) -> bool:
        """True for directories and for symlinks pointing to directories."""
        return self.kind is FileKind.DIRECTORY or (
            self.kind is FileKind.SYMLINK and self.is_dir
        )

    def render(self) -> str:
        """Return the one-character symbol of this kind."""
        return self.kind.value