"""The user and group owning an entry."""

from __future__ import annotations

import os
from dataclasses import dataclass

try:
    import grp
    import pwd
except ImportError:  # platforms without a Unix user database
    grp = None
    pwd = None


def _user_name(uid: int) -> str:
    if pwd is not None:
        try:
            return pwd.getpwuid(uid).pw_name
        except KeyError:
            pass
    return str(uid)


def _group_name(gid: int) -> str:
    if grp is not None:
        try:
            return grp.getgrgid(gid).gr_name
        except KeyError:
            pass
    return str(gid)


@dataclass(frozen=True)
class Owner:
    """User and group names; unknown ids are shown as numbers."""

    user: str
    group: str

    @classmethod
    def from_stat(cls, st: os.stat_result) -> Owner:
        """Look up the owner and group of a stat result."""
        return cls(_user_name(st.st_uid), _group_name(st.st_gid))

    def render_user(self) -> str:
        return self.user

    def render_group(self) -> str:
        return self.group