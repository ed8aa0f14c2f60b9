"""Trailing type indicators (``/``, ``*``, ``@`` ...) shown after names."""

from __future__ import annotations

from dataclasses import dataclass

from lsmeta.filetype import FileKind, FileType

_SYMBOLS = {
    FileKind.DIRECTORY: "/",
    FileKind.PIPE: "|",
    FileKind.SOCKET: "=",
    FileKind.SYMLINK: "@",
}


@dataclass(frozen=True)
class Indicator:
    """The indicator symbol of one entry, possibly empty."""

    symbol: str = ""

    @classmethod
    def from_file_type(cls, file_type: FileType) -> Indicator:
        """Pick the indicator that belongs to ``file_type``."""
        if file_type.kind is FileKind.FILE:
            return cls("*" if file_type.exec else "")
        return cls(_SYMBOLS.get(file_type.kind, ""))

    def render(self, enabled: bool) -> str:
        """Return the symbol when indicators are enabled, else an empty string."""
        return self.symbol if enabled else ""