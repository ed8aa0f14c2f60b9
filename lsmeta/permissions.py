"""Unix permission bits of a file and their ``ls``-style rendering."""

from __future__ import annotations

import stat
from dataclasses import dataclass, fields

_MODE_BITS = {
    "user_read": stat.S_IRUSR,
    "user_write": stat.S_IWUSR,
    "user_execute": stat.S_IXUSR,
    "group_read": stat.S_IRGRP,
    "group_write": stat.S_IWGRP,
    "group_execute": stat.S_IXGRP,
    "other_read": stat.S_IROTH,
    "other_write": stat.S_IWOTH,
    "other_execute": stat.S_IXOTH,
    "sticky": stat.S_ISVTX,
    "setgid": stat.S_ISGID,
    "setuid": stat.S_ISUID,
}


def _flag(enabled: bool, char: str) -> str:
    return char if enabled else "-"


def _execute_char(execute: bool, special: bool, letter: str) -> str:
    """Execute column, folding in setuid/setgid/sticky as ``ls`` does."""
    if special:
        return letter if execute else letter.upper()
    return "x" if execute else "-"


@dataclass(frozen=True)
class Permissions:
    """Read/write/execute bits for user, group and others plus special bits."""

    user_read: bool = False
    user_write: bool = False
    user_execute: bool = False

    group_read: bool = False
    group_write: bool = False
    group_execute: bool = False

    other_read: bool = False
    other_write: bool = False
    other_execute: bool = False

    sticky: bool = False
    setgid: bool = False
    setuid: bool = False

    @classmethod
    def from_mode(cls, mode: int) -> Permissions:
        """Build permissions from a numeric ``st_mode`` value."""
        return cls(**{name: mode & bit == bit for name, bit in _MODE_BITS.items()})

    def render(self) -> str:
        """Return the nine-character ``rwxr-xr-x`` style string."""
        return "".join(
            (
                _flag(self.user_read, "r"),
                _flag(self.user_write, "w"),
                _execute_char(self.user_execute, self.setuid, "s"),
                _flag(self.group_read, "r"),
                _flag(self.group_write, "w"),
                _execute_char(self.group_execute, self.setgid, "s"),
                _flag(self.other_read, "r"),
                _flag(self.other_write, "w"),
                _execute_char(self.other_execute, self.sticky, "t"),
            )
        )

    def is_executable(self) -> bool:
        """True if any of user, group or others may execute."""
        return self.user_execute or self.group_execute or self.other_execute

    def __iter__(self):
        return ((f.name, getattr(self, f.name)) for f in fields(self))