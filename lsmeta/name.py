"""Entry names: extensions, case-insensitive ordering, escaping and display."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePath

from lsmeta.filetype import FileType

_NAMED_ESCAPES = {"\t": "\\t", "\r": "\\r", "\n": "\\n"}


class DisplayOption(Enum):
    """Which form of an entry's path is shown."""

    FILE_NAME = "file_name"
    RELATIVE = "relative"
    NONE = "none"


def _is_printable(char: str) -> bool:
    return char >= "\x20" and char != "\x7f"


def _escape_char(char: str) -> str:
    return _NAMED_ESCAPES.get(char, f"\\u{{{ord(char):x}}}")


def escape(string: str) -> str:
    """Escape control characters; printable characters, non-ASCII included, stay as they are."""
    return "".join(c if _is_printable(c) else _escape_char(c) for c in string)


def _path_file_name(path: PurePath) -> str | None:
    """The last normal component of ``path``, or ``None`` for roots and ``..``."""
    name = path.name
    if not name or name == "..":
        return None
    return name


def _extension(path: PurePath) -> str | None:
    """The text after the last dot of the file name; dot files have none."""
    name = _path_file_name(path)
    if name is None:
        return None
    dot = name.rfind(".")
    if dot <= 0:
        return None
    return name[dot + 1 :]


def _ascii_lower(text: str) -> str:
    return "".join(c.lower() if c.isascii() else c for c in text)


@dataclass(eq=False)
class Name:
    """The name of an entry together with its path, extension and file type."""

    path: Path
    file_type: FileType
    name: str = field(init=False)
    extension: str | None = field(init=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        file_name = _path_file_name(self.path)
        self.name = file_name if file_name is not None else str(self.path)
        self.extension = _extension(self.path)

    def file_name(self) -> str:
        """The last component of the path, falling back to the stored name."""
        file_name = _path_file_name(self.path)
        return file_name if file_name is not None else self.name

    def relative_path(self, base_path: str | os.PathLike[str]) -> Path:
        """The path of this entry as seen from ``base_path``."""
        base = Path(base_path)
        if self.path == base:
            return Path(".")
        target_parts = self.path.parts
        base_parts = base.parts
        shared = 0
        for target_part, base_part in zip(target_parts, base_parts):
            if target_part != base_part:
                break
            shared += 1
        parts = [".."] * (len(base_parts) - shared) + list(target_parts[shared:])
        return Path(*parts) if parts else Path(".")

    def render(
        self,
        display: DisplayOption = DisplayOption.FILE_NAME,
        base_path: str | os.PathLike[str] | None = None,
        icon: str = "",
    ) -> str:
        """The icon followed by the escaped name in the requested form."""
        if display is DisplayOption.FILE_NAME:
            text = self.file_name()
        elif display is DisplayOption.RELATIVE:
            if base_path is None:
                raise ValueError("a relative display needs a base path")
            text = str(self.relative_path(base_path))
        else:
            text = str(self.path)
        return f"{icon}{escape(text)}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return _ascii_lower(self.name) == _ascii_lower(other.name.lower())

    def __hash__(self) -> int:
        return hash(self.name.lower())

    def __lt__(self, other: Name) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self.name.lower() < other.name.lower()

    def __le__(self, other: Name) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self.name.lower() <= other.name.lower()

    def __gt__(self, other: Name) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self.name.lower() > other.name.lower()

    def __ge__(self, other: Name) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self.name.lower() >= other.name.lower()