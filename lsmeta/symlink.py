"""Symbolic link targets and whether they resolve."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_ARROW = "\u21d2"


@dataclass(frozen=True)
class SymLink:
    """The target of a link, ``None`` for entries that are not links."""

    target: str | None = None
    valid: bool = False

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> SymLink:
        """Read the link at ``path``; relative targets resolve from its directory."""
        path = Path(path)
        try:
            target = os.readlink(path)
        except OSError:
            return cls(None, False)
        target_path = Path(target)
        if not target_path.is_absolute():
            target_path = path.parent / target_path
        return cls(target, target_path.exists())

    def render(self, arrow: str = DEFAULT_ARROW) -> str:
        """`` <arrow> <target>`` for links, an empty string otherwise."""
        if self.target is None:
            return ""
        return f" {arrow} {self.target}"